"""mathematical constants computed once here to avoid recomputation"""
import math

# general math constants
PI2 = math.pi**2.0
THREE_OVER_PI_SQUARED = 3.0 / PI2

# glicko-2 scale constants
SCALE = 173.7178
CENTER = 1500.0
INITIAL_DEVIATION = 350.0
INITIAL_PHI = INITIAL_DEVIATION / SCALE

# x ~ N(0,1), the z where P(-z <= x <= z) = 0.95
Z_SCORE_95 = 1.96

# volatility solver
ITERATION_LIMIT = 100000
EPSILON = 1e-6

# conventional scores
SCORE_WIN = 1.0
SCORE_DRAW = 0.5
SCORE_LOSE = 0.0
