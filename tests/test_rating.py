"""
example from: http://www.glicko.net/glicko/glicko2.pdf
"""
import math
import pytest
from glickit.core.exceptions import InvalidParameterError, InvalidScoreError, LengthMismatchError
from glickit.core.rating import Rating, average, new_volatility

OPPONENTS = [Rating(1400.0, 30.0, 0.06), Rating(1550.0, 100.0, 0.06), Rating(1700.0, 300.0, 0.06)]
SCORES = [1.0, 0.0, 0.0]


def test_reference_update():
    rating = Rating(1500.0, 200.0, 0.06)
    updated = rating.update(OPPONENTS, SCORES, tau=0.5)
    assert updated.strength == pytest.approx(1464.05, abs=0.01)
    assert updated.deviation == pytest.approx(151.51, abs=0.01)
    assert updated.volatility == pytest.approx(0.059996, abs=1e-6)
    strength, deviation, volatility = updated.display()
    assert strength == pytest.approx(1464.05)
    assert deviation == pytest.approx(151.51)
    assert volatility == pytest.approx(0.059996)
    # ratings are values, the input stays put
    assert rating == Rating(1500.0, 200.0, 0.06)


def test_update_length_mismatch():
    rating = Rating(1500.0, 200.0, 0.06)
    with pytest.raises(LengthMismatchError):
        rating.update(OPPONENTS, [1.0, 0.0], tau=0.5)
    assert rating == Rating(1500.0, 200.0, 0.06)


def test_update_rejects_bad_score_and_tau():
    rating = Rating(1500.0, 200.0, 0.06)
    with pytest.raises(InvalidScoreError):
        rating.update(OPPONENTS, [1.0, 1.5, 0.0], tau=0.5)
    with pytest.raises(InvalidParameterError):
        rating.update(OPPONENTS, SCORES, tau=0.0)


def test_update_without_opponents_only_grows_deviation():
    rating = Rating(1500.0, 200.0, 0.06)
    updated = rating.update([], [], tau=0.5)
    assert updated.strength == rating.strength
    assert updated.volatility == rating.volatility
    assert updated.phi == pytest.approx(math.hypot(rating.phi, rating.sigma))


@pytest.mark.parametrize(
    'strength,deviation,volatility',
    [(1500.0, 350.0, 0.06), (1234.5678, 0.01, 0.02), (2875.3, 42.0, 1.2), (-300.0, 600.0, 0.5)],
)
def test_scale_round_trip(strength, deviation, volatility):
    rating = Rating(strength, deviation, volatility)
    mu, phi, sigma = rating.to_scale()
    assert mu == pytest.approx((strength - 1500.0) / 173.7178)
    assert phi == pytest.approx(deviation / 173.7178)
    assert sigma == volatility
    back = Rating.from_scale(mu, phi, sigma)
    assert back.strength == pytest.approx(strength, rel=1e-12, abs=1e-9)
    assert back.deviation == pytest.approx(deviation, rel=1e-12)
    assert back.volatility == volatility


def test_display_truncates():
    rating = Rating(1464.0599, 151.5199, 0.0599969)
    assert rating.display() == (1464.05, 151.51, 0.059996)
    assert rating.interval() == pytest.approx((1464.05 - 2 * 151.51, 1464.05 + 2 * 151.51))


def test_default():
    assert Rating.default(0.2) == Rating(1500.0, 350.0, 0.2)


@pytest.mark.parametrize(
    'left,right,is_different,is_weaker,is_stronger,win_prob',
    [
        ((1500.0, 350.0), (1600.0, 350.0), False, False, False, 0.423),
        ((1500.0, 50.0), (1600.0, 50.0), False, False, False, 0.363),
        ((1500.0, 50.0), (1700.0, 50.0), True, True, False, 0.245),
        ((1580.0, 42.0), (1420.0, 42.0), True, False, True, 0.711),
    ],
)
def test_compare(left, right, is_different, is_weaker, is_stronger, win_prob):
    left = Rating(*left, 0.06)
    right = Rating(*right, 0.06)
    assert left.is_different(right) == is_different
    assert left.is_weaker(right) == is_weaker
    assert left.is_stronger(right) == is_stronger
    assert left.win_prob(right) == pytest.approx(win_prob, abs=2e-3)
    assert left.win_prob(right) + right.win_prob(left) == pytest.approx(1.0)


def test_average_of_two_equal_members():
    member = Rating(1500.0, 100.0, 0.06)
    team = average([member, member])
    assert team.strength == pytest.approx(1500.0)
    assert team.deviation == pytest.approx(100.0 / math.sqrt(2.0))
    assert team.volatility == pytest.approx(0.06)


def test_average_mixed_members():
    team = average([Rating(1700.0, 50.0, 0.2), Rating(1500.0, 350.0, 0.4)])
    assert team.strength == pytest.approx(1600.0)
    assert team.deviation == pytest.approx(math.hypot(50.0, 350.0) / 2.0)
    assert team.volatility == pytest.approx(0.3)


def test_average_empty():
    with pytest.raises(ValueError):
        average([])


def test_new_volatility():
    # one year to reset with weekly rating periods
    assert new_volatility(50.0, 365.0 / 7.0) == pytest.approx(0.276152, abs=1e-9)
    # from zero deviation back to 350 in a single period
    assert new_volatility(0.0, 1.0) == pytest.approx(350.0 / 173.7178, abs=1e-6)
    assert new_volatility(50.0, 0.0) == new_volatility(0.0, 1.0)


@pytest.mark.parametrize(
    'deviation,volatility',
    [(0.0, 0.06), (-50.0, 0.06), (200.0, 0.0), (200.0, -0.06), (float('nan'), 0.06)],
)
def test_non_positive_deviation_or_volatility_is_rejected(deviation, volatility):
    with pytest.raises(InvalidParameterError):
        Rating(1500.0, deviation, volatility)
