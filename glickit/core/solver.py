"""
Volatility update for Glicko 2 (step 5 of the worked example)
paper: http://www.glicko.net/research/dpcmsv.pdf
example: http://www.glicko.net/glicko/glicko2.pdf

The new volatility is the root of a transcendental equation which is located
with the Illinois variant of regula falsi.
"""
import math
import logging
from glickit.core.exceptions import SolverNonConvergenceError
from glickit.utils.constants import EPSILON, ITERATION_LIMIT

logger = logging.getLogger(__name__)


class IllinoisSolver:
    """
    Solves for sigma' given the evidence accumulated over a rating period.

    Parameters:
        phi (float): deviation of the fixed rating on the glicko-2 scale
        sigma (float): volatility of the fixed rating
        v (float): estimated variance, the inverse of the accumulated accuracy
        delta (float): estimated improvement
        tau (float): system constant constraining the change in volatility
    """

    def __init__(
        self,
        phi: float,
        sigma: float,
        v: float,
        delta: float,
        tau: float,
        epsilon: float = EPSILON,
        iteration_limit: int = ITERATION_LIMIT,
    ):
        self.a = math.log(sigma**2.0)
        self.phi2 = phi**2.0
        self.v = v
        self.delta2 = delta**2.0
        self.tau = tau
        self.tau2 = tau**2.0
        self.epsilon = epsilon
        self.iteration_limit = iteration_limit

    def f(self, x):
        ex = math.exp(x)
        phi2_v_ex = self.phi2 + self.v + ex
        num_1 = ex * (self.delta2 - phi2_v_ex)
        denom_1 = 2.0 * ((self.delta2 + self.phi2 + self.v) ** 2.0)
        term_2 = (x - self.a) / self.tau2
        return (num_1 / denom_1) - term_2

    def bracket(self):
        """returns B such that the root lies between a and B"""
        if self.delta2 > (self.phi2 + self.v):
            return math.log(self.delta2 - self.phi2 - self.v)
        for k in range(1, self.iteration_limit + 1):
            B = self.a - (k * self.tau)
            if self.f(B) >= 0.0:
                return B
        logger.warning('no bracket found for a=%f tau=%f', self.a, self.tau)
        raise SolverNonConvergenceError('bracketing', self.iteration_limit)

    def solve(self):
        """returns sigma prime"""
        A = self.a
        B = self.bracket()
        f_A = self.f(A)
        f_B = self.f(B)
        for iteration in range(self.iteration_limit):
            if math.fabs(B - A) <= self.epsilon:
                logger.debug('volatility converged after %d iterations', iteration)
                return math.exp(A / 2.0)
            C = A + ((A - B) * f_A) / (f_B - f_A)
            f_C = self.f(C)
            if (f_C * f_B) <= 0:
                A = B
                f_A = f_B
            else:
                f_A = f_A / 2.0
            B = C
            f_B = f_C
        if math.fabs(B - A) <= self.epsilon:
            return math.exp(A / 2.0)
        logger.warning('volatility solver gave up with |B - A| = %g', math.fabs(B - A))
        raise SolverNonConvergenceError('root finding', self.iteration_limit)


def solve_volatility(phi, sigma, accuracy, improvement, tau):
    """convenience wrapper, accuracy must be positive"""
    return IllinoisSolver(phi=phi, sigma=sigma, v=1.0 / accuracy, delta=improvement, tau=tau).solve()
