"""Runtime values for Hybrid.

Hybrid has exactly three kinds of runtime value: null, numbers (IEEE-754
doubles) and booleans. Values are frozen dataclasses, so handing one out
from an environment never aliases mutable state.
"""

from __future__ import annotations

from dataclasses import dataclass
import math
from typing import Union


@dataclass(frozen=True)
class NullVal:
    """The Hybrid ``null`` value."""

    def __repr__(self) -> str:
        return 'null'


@dataclass(frozen=True)
class NumberVal:
    value: float = 0.0


@dataclass(frozen=True)
class BooleanVal:
    value: bool = False


RuntimeValue = Union[NullVal, NumberVal, BooleanVal]

NULL = NullVal()
TRUE = BooleanVal(True)
FALSE = BooleanVal(False)

# Beyond this magnitude integral doubles are rendered in exponent form.
_INTEGRAL_LIMIT = 1e21


def type_name(value: RuntimeValue) -> str:
    if isinstance(value, NumberVal):
        return 'number'
    if isinstance(value, BooleanVal):
        return 'boolean'
    if isinstance(value, NullVal):
        return 'null'
    return type(value).__name__


def format_number(x: float) -> str:
    """Render a double as text.

    Exponent forms drop the zero padding Python adds (``1e-07`` becomes
    ``1e-7``). Python still switches to exponent form below 1e-4, where a
    JavaScript host would print ``0.00001``.
    """
    if math.isnan(x):
        return 'NaN'
    if math.isinf(x):
        return 'Infinity' if x > 0 else '-Infinity'
    if x.is_integer() and abs(x) < _INTEGRAL_LIMIT:
        return str(int(x))
    text = repr(x)
    mantissa, sep, exponent = text.partition('e')
    if sep:
        sign = '-' if exponent.startswith('-') else '+'
        text = f"{mantissa}e{sign}{abs(int(exponent))}"
    return text


def to_string(value: RuntimeValue) -> str:
    """Render a runtime value the way the REPL and CLI print it."""
    if isinstance(value, NumberVal):
        return format_number(value.value)
    if isinstance(value, BooleanVal):
        return 'true' if value.value else 'false'
    if isinstance(value, NullVal):
        return 'null'
    raise TypeError(f"not a Hybrid runtime value: {value!r}")
