"""system wide settings for rating players over time"""
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Callable, Union
from glickit.core.exceptions import InvalidParameterError
from glickit.core.rating import new_volatility
from glickit.utils.date_utils import to_period

# multiply for longer periods, PERIOD_DAY * 3 is three days
PERIOD_DAY = timedelta(days=1)
PERIOD_WEEK = 7 * PERIOD_DAY
PERIOD_MONTH = 30 * PERIOD_DAY
PERIOD_YEAR = 365 * PERIOD_DAY

# deviation of a regular player, the starting point when deriving the initial volatility
SETTLED_DEVIATION = 50.0


@dataclass
class Config:
    """
    Attributes:
        tau: system constant, reasonable choices are between 0.3 and 1.2
        rating_period: all matches within one period are rated as if simultaneous,
            a period in which players play about 15 times works well
        period_to_reset_deviation: roughly how long an idle player takes to climb back to the initial deviation,
            the initial volatility is derived from it
        clock: source of the current time
    """

    tau: float = 0.5
    rating_period: Union[timedelta, str] = PERIOD_WEEK
    period_to_reset_deviation: Union[timedelta, str] = PERIOD_YEAR
    clock: Callable[[], datetime] = field(default=datetime.now, repr=False)

    def __post_init__(self):
        if not self.tau > 0.0:
            raise InvalidParameterError(f'tau must be a nonzero positive number, got {self.tau}')
        self.rating_period = to_period(self.rating_period)
        self.period_to_reset_deviation = to_period(self.period_to_reset_deviation)

    def now(self) -> datetime:
        return self.clock()

    def initial_volatility(self) -> float:
        count = self.period_to_reset_deviation / self.rating_period
        return new_volatility(SETTLED_DEVIATION, count)
