import math
import pytest
from glickit.core.exceptions import SolverNonConvergenceError
from glickit.core.solver import IllinoisSolver, solve_volatility

# step 3 and 4 of the worked example
PHI = 200.0 / 173.7178
V = 1.7785
DELTA = -0.4834


def test_reference_volatility():
    sigma_prime = solve_volatility(PHI, 0.06, 1.0 / V, DELTA, tau=0.5)
    assert sigma_prime == pytest.approx(0.059996, abs=2e-6)


def test_root_is_a_zero_of_f():
    solver = IllinoisSolver(phi=PHI, sigma=0.06, v=V, delta=DELTA, tau=0.5)
    sigma_prime = solver.solve()
    assert solver.f(math.log(sigma_prime**2.0)) == pytest.approx(0.0, abs=1e-5)


def test_large_improvement_brackets_with_log():
    # delta^2 > phi^2 + v, the bracket comes straight from the formula
    solver = IllinoisSolver(phi=0.2, sigma=0.06, v=0.5, delta=3.0, tau=0.5)
    assert solver.bracket() == pytest.approx(math.log(9.0 - 0.04 - 0.5))
    sigma_prime = solver.solve()
    # a big surprise raises volatility
    assert sigma_prime > 0.06


def test_small_improvement_searches_for_bracket():
    solver = IllinoisSolver(phi=PHI, sigma=0.06, v=V, delta=DELTA, tau=0.5)
    B = solver.bracket()
    assert B < solver.a
    assert solver.f(B) >= 0.0
    # the step before B did not bracket yet
    if B + 0.5 < solver.a:
        assert solver.f(B + 0.5) < 0.0


@pytest.mark.parametrize('tau', [0.3, 0.5, 0.8, 1.2])
def test_volatility_is_finite_for_typical_tau(tau):
    sigma_prime = solve_volatility(0.3, 0.06, 5.0, 2.0, tau=tau)
    assert sigma_prime > 0.0
    assert math.isfinite(sigma_prime)


def test_tau_constrains_volatility_change():
    small = solve_volatility(0.3, 0.06, 5.0, 2.0, tau=0.2)
    large = solve_volatility(0.3, 0.06, 5.0, 2.0, tau=1.2)
    assert abs(small - 0.06) < abs(large - 0.06)


def test_bracket_failure_raises():
    solver = IllinoisSolver(phi=PHI, sigma=0.06, v=V, delta=DELTA, tau=0.5, iteration_limit=0)
    with pytest.raises(SolverNonConvergenceError) as excinfo:
        solver.bracket()
    assert excinfo.value.stage == 'bracketing'


def test_root_finding_failure_raises():
    solver = IllinoisSolver(phi=PHI, sigma=0.06, v=V, delta=DELTA, tau=0.5, iteration_limit=1)
    with pytest.raises(SolverNonConvergenceError) as excinfo:
        solver.solve()
    assert excinfo.value.stage == 'root finding'
