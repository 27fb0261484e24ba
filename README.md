# numanalysis

A small collection of textbook numerical analysis routines in plain Python,
with no third-party dependencies.

## What is included

| Module | What it does |
| --- | --- |
| `numanalysis.integrator` | Definite integrals with fixed-step and adaptive fourth-order Runge–Kutta (`rk4_fixed`, `rk4_adaptive`, `AdaptiveConfig`, `AdaptiveResult`, `IntegratorStatus`) |
| `numanalysis.lagrange` | Lagrange polynomial interpolation (`lagrange_interpolate`, `read_points`, `Point`) |
| `numanalysis.newton` | Newton divided-difference interpolation (`NewtonInterpolator`, `newton_interpolate`) |
| `numanalysis.hermite` | Hermite interpolation from values and first derivatives (`HermiteInterpolator`, `HermitePoint`) |
| `numanalysis.bisection` | Root finding by interval bisection (`BisectionRange`) |
| `numanalysis.newton_raphson` | Newton–Raphson root finding with a finite-difference derivative (`NewtonRaphsonSolver`) |
| `numanalysis.secant` | Secant-method root finding (`SecantSolver`) |
| `numanalysis.successive_approximation` | Fixed-point iteration with a contraction check (`FixedPointSolver`, `is_contraction`) |

Integrands and equations are plain callables taking one float.

## Behaviour worth knowing

- `rk4_fixed(f, a, b, steps)` returns `0.0` when `steps` is not positive.
- `rk4_adaptive(f, a, b, config)` starts from 8 steps and doubles them until
  the Richardson estimate `|I(h/2) - I(h)| / 15` is within
  `max(abs_tol, |I| * rel_tol)`. It returns an `AdaptiveResult` with `value`,
  `status` and `converged`; when the refinement limit is reached the status is
  `IntegratorStatus.MAX_STEPS_REACHED` rather than an exception. Non-positive
  settings in `AdaptiveConfig` fall back to `1e-9` tolerances and 20 rounds.
- `HermiteInterpolator.evaluate(x)` returns a `(value, derivative)` pair.
- `NewtonInterpolator.describe()` returns a text summary of the nodes and
  divided differences (it needs at least two nodes).
- `BisectionRange.solve()` narrows the interval in place, prints a one-line
  summary of the final interval and returns its midpoint; `midpoint()` gives
  the centre of the current interval.
- The Newton–Raphson, secant and fixed-point solvers return `0.0` for a root
  very close to zero.
- `read_points(count, stream)` prompts for `count` points written as `x,y`,
  one per line, reading from standard input by default.

## Errors

Failures are raised as exceptions, all subclasses of `ValueError`:

| Module | Exceptions |
| --- | --- |
| `lagrange` | `LagrangeError`, `DuplicateNodeError` |
| `newton` | `NewtonError` |
| `hermite` | `HermiteError` |
| `bisection` | `BisectionError` |
| `newton_raphson` | `NewtonRaphsonError`, `DerivativeZeroError`, `DerivativeUnstableError`, `MaxIterationsError` |
| `secant` | `SecantError`, `SecantDivisionByZeroError`, `SecantMaxIterationsError` |
| `successive_approximation` | `FixedPointError`, `NotContractiveError`, `FixedPointMaxIterationsError` |

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Examples

Integration:

```python
from numanalysis.integrator import AdaptiveConfig, rk4_adaptive, rk4_fixed

area = rk4_fixed(lambda x: x * x, 0.0, 2.0, 4000)
result = rk4_adaptive(lambda x: x * x, 0.0, 2.0, AdaptiveConfig(1e-12, 1e-12, 28))
print(area, result.value, result.converged)
```

Interpolation:

```python
from numanalysis.lagrange import Point, lagrange_interpolate
from numanalysis.newton import NewtonInterpolator
from numanalysis.hermite import HermiteInterpolator

points = [Point(1, 1), Point(2, 4), Point(3, 9)]
print(lagrange_interpolate(points, 2.5))          # 6.25
print(NewtonInterpolator(points).evaluate(7.0))   # 49.0

hermite = HermiteInterpolator.from_arrays([1, 2, 3], [1, 4, 9], [2, 4, 6])
value, slope = hermite.evaluate(2.5)              # 6.25, 5.0
```

Root finding:

```python
import math

from numanalysis.bisection import BisectionRange
from numanalysis.newton_raphson import NewtonRaphsonSolver
from numanalysis.secant import SecantSolver
from numanalysis.successive_approximation import FixedPointSolver

r = BisectionRange(lambda x: x * x - 4, 0, 3, 1e-9, "x^2 - 4")
print(r.solve())

print(NewtonRaphsonSolver(lambda x: math.cos(x) - x, 0.1, 1e-3, 8, "cos(x) - x").solve())
print(SecantSolver(lambda x: x**3 - x - 1, 1, 1.1, 1e-8, 8, "x^3 - x - 1").solve())
print(FixedPointSolver(math.cos, 0.5, 1e-8, 256, "cos(x)").solve())
```

## Command line

A short demonstration compares fixed-step and adaptive RK4 on the integral of
x² over [0, 2] against the exact value 8/3:

```
numanalysis-demo
```

## What it does not do

The only command is the integration demonstration above; the interpolation
and root-finding routines are used from Python, not from the command line.