"""helpers for rating period durations and timestamps"""
import re
from datetime import datetime, timedelta
from glickit.core.exceptions import InvalidParameterError

PROG = re.compile(r'^(\d+)([WwDdHhMmSs])$')
SECONDS_PER_UNIT = {
    'W': 7 * 24 * 60 * 60,    # weeks to seconds
    'D': 24 * 60 * 60,        # days to seconds
    'H': 60 * 60,             # hours to seconds
    'M': 60,                  # minutes to seconds
    'S': 1                    # seconds
}


def get_duration(duration_str):
    """
    Parse duration strings like '7D', '1W', '24H' etc. into a timedelta

    Parameters:
    -----------
    duration_str : str
        String in format numberLetter where Letter is one of:
        W/w - weeks
        D/d - days
        H/h - hours
        M/m - minutes
        S/s - seconds

    Returns:
    --------
    duration : timedelta
    """
    match = PROG.match(duration_str)
    if not match:
        raise InvalidParameterError(f'Invalid duration format: {duration_str}')
    number = int(match.group(1))
    unit = match.group(2).upper()
    return timedelta(seconds=number * SECONDS_PER_UNIT[unit])


def to_period(period):
    """accept either a timedelta or a duration string, reject empty periods"""
    if isinstance(period, str):
        period = get_duration(period)
    if not isinstance(period, timedelta):
        raise InvalidParameterError(f'rating period must be a timedelta or duration string, got {period!r}')
    if period <= timedelta(0):
        raise InvalidParameterError(f'rating period must be positive, got {period}')
    return period


def truncate(moment: datetime, period: timedelta) -> datetime:
    """round a timestamp down to a multiple of period counted from the unix epoch"""
    epoch = datetime(1970, 1, 1, tzinfo=moment.tzinfo)
    return epoch + ((moment - epoch) // period) * period
