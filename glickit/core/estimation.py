"""
Online accumulation of a rating period (steps 3, 4 and 6-8 of the worked example)
example: http://www.glicko.net/glicko/glicko2.pdf

Matches are folded into two running sufficient statistics so that a rating period
can be fed one result at a time without keeping the history around.
The state carries no lock, callers sharing one across threads have to serialize
apply_match and fix themselves.
"""
import math
import logging
from typing import Optional
from glickit.core.exceptions import InvalidParameterError, InvalidScoreError
from glickit.core.rating import Rating
from glickit.core.solver import solve_volatility
from glickit.utils.constants import INITIAL_PHI
from glickit.utils.math_utils import expected_score, g_scalar

logger = logging.getLogger(__name__)


class EstimationState:
    """
    The learning progress of one competitor during the open rating period.

    Attributes:
        accuracy (float): v^-1 in the paper, zero exactly when no match was applied since the last fix
        improvement (float): delta in the paper
        fixed (Rating): the rating as of the last closed period
        tau (float): system constant used by the last fix
    """

    def __init__(self, rating: Rating, tau: float = 0.5):
        self.accuracy = 0.0
        self.improvement = 0.0
        self.fixed = rating
        self.tau = tau

    def apply_match(self, opponent: Rating, score: float):
        """reflect one result against an opponent's rating at match time"""
        if not 0.0 <= score <= 1.0:
            raise InvalidScoreError(score)
        g = g_scalar(opponent.phi)
        E = expected_score(self.fixed.mu, opponent.mu, opponent.phi)
        accuracy = self.accuracy + (g**2.0) * E * (1.0 - E)
        if accuracy == 0.0:
            # E saturated at 0 or 1, the result carries no information
            return
        self.improvement = ((self.improvement * self.accuracy) + (g * (score - E))) / accuracy
        self.accuracy = accuracy

    def _compute(self, sigma_prime):
        """(mu', phi', sigma') for the evidence so far and a given new volatility"""
        mu, phi, _ = self.fixed.to_scale()
        phi_star = math.hypot(phi, sigma_prime)
        phi_prime = min(1.0 / math.sqrt((1.0 / (phi_star**2.0)) + self.accuracy), INITIAL_PHI)
        mu_prime = mu + (phi_prime**2.0) * self.improvement * self.accuracy
        return mu_prime, phi_prime, sigma_prime

    def rating(self) -> Rating:
        """
        Current estimate. While matches are pending this is the fixed rating moved by the
        evidence so far with the volatility held, otherwise it is the fixed rating.
        """
        if self.accuracy == 0.0:
            return self.fixed
        return Rating.from_scale(*self._compute(self.fixed.sigma))

    def fix(self, tau: Optional[float] = None):
        """close the rating period and determine the new rating"""
        tau = self.tau if tau is None else tau
        if not tau > 0.0:
            raise InvalidParameterError(f'tau must be a nonzero positive number, got {tau}')
        mu, phi, sigma = self.fixed.to_scale()
        if self.accuracy == 0.0:
            # no matches, only the deviation grows
            new_phi = min(math.hypot(phi, sigma), INITIAL_PHI)
            logger.debug('no matches in period, phi %f -> %f', phi, new_phi)
            self.fixed = Rating.from_scale(mu, new_phi, sigma)
        else:
            sigma_prime = solve_volatility(phi, sigma, self.accuracy, self.improvement, tau)
            self.fixed = Rating.from_scale(*self._compute(sigma_prime))
            logger.debug('fixed period with accuracy %f: %s', self.accuracy, self.fixed)
        self.tau = tau
        self.accuracy = 0.0
        self.improvement = 0.0

    def __repr__(self):
        return f'EstimationState(accuracy={self.accuracy}, improvement={self.improvement}, fixed={self.fixed!r})'
