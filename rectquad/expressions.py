"""Turn expression text into callables.

Expressions use sympy syntax in a single variable, e.g. ``"sin(x) + x**2"``
or ``"exp(-x**2/2)"``. Derivatives are never derived here; the caller
supplies a separate expression for f'.
"""

from __future__ import annotations

import logging

import sympy
from sympy import SympifyError

from rectquad.core.problem import RealFunction
from rectquad.errors import InvalidArgumentError

logger = logging.getLogger(__name__)


def parse_function(text: str, variable: str = "x") -> RealFunction:
    """Compile ``text`` into a function of ``variable`` returning floats.

    The returned function raises InvalidArgumentError when the expression
    is undefined or overflows at the requested point.

    Raises:
        InvalidArgumentError: If the text does not parse, or references
            symbols other than ``variable``.
    """
    symbol = sympy.Symbol(variable, real=True)
    try:
        expr = sympy.sympify(text, locals={variable: symbol})
    except (SympifyError, SyntaxError, TypeError) as e:
        raise InvalidArgumentError(f"Cannot parse expression {text!r}: {e}") from e

    if not isinstance(expr, sympy.Expr):
        raise InvalidArgumentError(f"Expression {text!r} is not a real-valued expression")

    unknown = sorted(str(s) for s in expr.free_symbols if s != symbol)
    if unknown:
        raise InvalidArgumentError(
            f"Expression {text!r} uses unknown symbol(s) {', '.join(unknown)}; "
            f"only {variable!r} is allowed"
        )

    compiled = sympy.lambdify(symbol, expr, modules="math")
    logger.debug("Compiled %r as %s", text, expr)

    def function(x: float) -> float:
        try:
            return float(compiled(x))
        except (ValueError, ZeroDivisionError, OverflowError) as e:
            raise InvalidArgumentError(
                f"Cannot evaluate {text!r} at {variable}={x!r}: {e}"
            ) from e

    return function
