from datetime import datetime, timedelta
import pytest
from glickit.configs import PERIOD_DAY, PERIOD_WEEK, PERIOD_YEAR, Config
from glickit.core.exceptions import InvalidParameterError
from glickit.utils.date_utils import get_duration, to_period, truncate


def test_initial_volatility():
    # one year to return to the initial deviation with weekly periods
    assert Config().initial_volatility() == pytest.approx(0.276152, abs=1e-9)


def test_daily_periods_need_less_volatility():
    assert Config(rating_period=PERIOD_DAY).initial_volatility() < Config().initial_volatility()


def test_duration_strings():
    config = Config(rating_period='3D', period_to_reset_deviation='52W')
    assert config.rating_period == 3 * PERIOD_DAY
    assert config.period_to_reset_deviation == 52 * PERIOD_WEEK


def test_reset_shorter_than_period():
    config = Config(rating_period=PERIOD_YEAR, period_to_reset_deviation=PERIOD_DAY)
    assert config.initial_volatility() > 0.0


@pytest.mark.parametrize(
    'kwargs',
    [{'tau': 0.0}, {'tau': -1.0}, {'rating_period': timedelta(0)}, {'rating_period': '1X'}, {'rating_period': 7}],
)
def test_invalid_config(kwargs):
    with pytest.raises(InvalidParameterError):
        Config(**kwargs)


def test_now_uses_clock():
    moment = datetime(2020, 2, 2)
    assert Config(clock=lambda: moment).now() == moment


@pytest.mark.parametrize(
    'duration_str,expected',
    [('1W', timedelta(weeks=1)), ('7d', timedelta(days=7)), ('24H', timedelta(hours=24)), ('90m', timedelta(minutes=90)), ('5S', timedelta(seconds=5))],
)
def test_get_duration(duration_str, expected):
    assert get_duration(duration_str) == expected


def test_to_period_rejects_garbage():
    with pytest.raises(InvalidParameterError):
        to_period('W1')
    with pytest.raises(InvalidParameterError):
        to_period(timedelta(days=-1))


def test_truncate():
    assert truncate(datetime(2024, 1, 3, 15, 30), PERIOD_DAY) == datetime(2024, 1, 3)
    # the epoch was a thursday
    assert truncate(datetime(2024, 1, 3, 15, 30), PERIOD_WEEK) == datetime(2023, 12, 28)
