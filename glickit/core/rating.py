"""
The Glicko 2 rating value
example: http://www.glicko.net/glicko/glicko2.pdf

A Rating is kept in public units (strength centered on 1500, deviation, volatility).
All of the formulas work on the internal glicko-2 scale (mu, phi, sigma), see to_scale/from_scale.
"""
import math
from dataclasses import dataclass
from typing import List, Sequence, Tuple
import numpy as np
from glickit.core.exceptions import InvalidParameterError, LengthMismatchError
from glickit.utils.constants import CENTER, INITIAL_DEVIATION, INITIAL_PHI, SCALE, Z_SCORE_95
from glickit.utils.math_utils import expected_score, nth_floor


@dataclass(frozen=True)
class Rating:
    """
    Strength of a player or team.

    Attributes:
        strength: skill estimate, mu = (strength - 1500) / 173.7178 on the glicko-2 scale
        deviation: uncertainty of the strength (RD), phi = deviation / 173.7178
        volatility: sigma, the expected fluctuation of the strength
    """

    strength: float = CENTER
    deviation: float = INITIAL_DEVIATION
    volatility: float = 0.06

    def __post_init__(self):
        if not self.deviation > 0.0:
            raise InvalidParameterError(f'deviation must be a nonzero positive number, got {self.deviation}')
        if not self.volatility > 0.0:
            raise InvalidParameterError(f'volatility must be a nonzero positive number, got {self.volatility}')

    @classmethod
    def default(cls, volatility: float) -> 'Rating':
        """starting rating for a new player"""
        return cls(CENTER, INITIAL_DEVIATION, volatility)

    def to_scale(self) -> Tuple[float, float, float]:
        """convert to the glicko-2 internal scale (mu, phi, sigma)"""
        return (self.strength - CENTER) / SCALE, self.deviation / SCALE, self.volatility

    @classmethod
    def from_scale(cls, mu: float, phi: float, sigma: float) -> 'Rating':
        """create from glicko-2 internal scale values"""
        return cls(mu * SCALE + CENTER, phi * SCALE, sigma)

    @property
    def mu(self) -> float:
        return (self.strength - CENTER) / SCALE

    @property
    def phi(self) -> float:
        return self.deviation / SCALE

    @property
    def sigma(self) -> float:
        return self.volatility

    def display(self) -> Tuple[float, float, float]:
        """truncated values for showing to people, strength and deviation to 2 places and volatility to 6"""
        return nth_floor(self.strength, 2), nth_floor(self.deviation, 2), nth_floor(self.volatility, 6)

    def interval(self) -> Tuple[float, float]:
        """95% confidence interval of the strength"""
        strength, deviation, _ = self.display()
        return strength - 2.0 * deviation, strength + 2.0 * deviation

    def is_different(self, other: 'Rating') -> bool:
        """whether the two strengths differ significantly"""
        z = (self.mu - other.mu) / math.hypot(self.phi, other.phi)
        return math.fabs(z) > Z_SCORE_95

    def is_stronger(self, other: 'Rating') -> bool:
        if self.mu <= other.mu:
            return False
        return self.is_different(other)

    def is_weaker(self, other: 'Rating') -> bool:
        if self.mu >= other.mu:
            return False
        return self.is_different(other)

    def win_prob(self, other: 'Rating') -> float:
        """estimated probability of beating other, 1500 vs 1700 with no deviation is about 0.24"""
        return expected_score(self.mu, other.mu, math.hypot(self.phi, other.phi))

    def update(self, opponents: Sequence['Rating'], scores: Sequence[float], tau: float) -> 'Rating':
        """
        Rate a whole rating period at once.

        Parameters:
            opponents: ratings of the opponents as they were at match time
            scores: score against each opponent, 1 for a win, 0.5 for a draw and 0 for a loss
            tau: system constant constraining the change in volatility

        Returns:
            the rating at the end of the period, self is left unchanged
        """
        from glickit.core.estimation import EstimationState

        if len(opponents) != len(scores):
            raise LengthMismatchError(len(opponents), len(scores))
        state = EstimationState(self)
        for opponent, score in zip(opponents, scores):
            state.apply_match(opponent, score)
        state.fix(tau)
        return state.fixed

    def __str__(self) -> str:
        strength, deviation, volatility = self.display()
        return f'{strength:.2f}±{deviation:.2f} (σ={volatility:.6f})'


def average(ratings: List[Rating]) -> Rating:
    """
    Composite rating of a team.
    paper: http://rhetoricstudios.com/downloads/AbstractingGlicko2ForTeamGames.pdf

    mu and sigma are plain means, phi is the standard deviation of the mean of the
    members' strengths so two equally uncertain members give phi / sqrt(2).
    """
    if not ratings:
        raise ValueError('cannot average an empty list of ratings')
    scaled = np.array([rating.to_scale() for rating in ratings], dtype=np.float64)
    mu = scaled[:, 0].mean()
    phi = math.sqrt(np.square(scaled[:, 1]).sum()) / scaled.shape[0]
    sigma = scaled[:, 2].mean()
    return Rating.from_scale(float(mu), phi, float(sigma))


def new_volatility(start_deviation: float, count: float) -> float:
    """
    Volatility under which an idle player climbs from start_deviation back to the
    initial deviation of 350 after count empty rating periods.

    A non positive count means "go back to the initial deviation immediately".
    """
    if count <= 0:
        return new_volatility(0.0, 1.0)
    return nth_floor(math.sqrt((INITIAL_PHI**2.0 - (start_deviation / SCALE) ** 2.0) / count), 6)
