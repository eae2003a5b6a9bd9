"""glicko-2 ratings for players and teams"""
from glickit.core.exceptions import (
    InvalidParameterError,
    InvalidScoreError,
    LengthMismatchError,
    ParticipantError,
    RatingError,
    SolverNonConvergenceError,
    StaleMatchError,
)
from glickit.core.rating import Rating, average, new_volatility
from glickit.core.estimation import EstimationState
from glickit.configs import Config, PERIOD_DAY, PERIOD_WEEK, PERIOD_MONTH, PERIOD_YEAR
from glickit.participants import Participant, Player, Team
from glickit.match import Duel, Match, round_robin
from glickit.service import Service
