"""math utility functions for rating systems"""
import math
import numpy as np
from scipy.special import expit
from glickit.utils.constants import THREE_OVER_PI_SQUARED


def sigmoid(x):
    """a little faster than implementing it in numpy for d < 100000"""
    return expit(x)


def sigmoid_scalar(x):
    """no need to use numpy on scalars"""
    return 1.0 / (1.0 + math.exp(-x))


def g_scalar(phi):
    """g(phi) from glicko-2, this is DIFFERENT from g in regular Glicko"""
    return 1.0 / math.sqrt(1.0 + (THREE_OVER_PI_SQUARED * (phi**2.0)))


def g_vector(phi):
    """vector version"""
    return 1.0 / np.sqrt(1.0 + (THREE_OVER_PI_SQUARED * np.square(phi)))


def expected_score(mu, opponent_mu, opponent_phi):
    """E(mu, mu_j, phi_j), the expected score against an opponent"""
    return sigmoid_scalar(g_scalar(opponent_phi) * (mu - opponent_mu))


def nth_floor(x, n):
    """truncate (not round) x at n decimal places"""
    shift = 10.0**n
    return math.trunc(x * shift) / shift
