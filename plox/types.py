"""Runtime values for the Lox interpreter.

Every value the interpreter produces is an `Atom`: one of `String`,
`Number`, `Bool` or `Nil`. Atoms are immutable, so copying a value is the
same as sharing it. This module also holds the helpers that render values
for printing and concatenation and that decide equality and truthiness.
"""

from __future__ import annotations

import json
import math
from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class Atom:
    """Base class for all runtime values."""
    pass


@dataclass(frozen=True)
class String(Atom):
    value: str

    def __repr__(self) -> str:
        return f"String({json.dumps(self.value, ensure_ascii=False)})"


@dataclass(frozen=True)
class Number(Atom):
    value: float

    def __repr__(self) -> str:
        return f"Number({format_debug_number(self.value)})"


@dataclass(frozen=True)
class Bool(Atom):
    value: bool

    def __repr__(self) -> str:
        return 'Bool(true)' if self.value else 'Bool(false)'


@dataclass(frozen=True)
class Nil(Atom):
    def __repr__(self) -> str:
        return 'Nil'


NIL = Nil()
TRUE = Bool(True)
FALSE = Bool(False)


def format_number(x: float) -> str:
    """Render a number the way it appears when concatenated to a string.

    Integral values drop the fractional part (`1`, not `1.0`) and
    fractions are written out in positional notation.
    """
    if math.isnan(x):
        return 'NaN'
    if math.isinf(x):
        return 'inf' if x > 0 else '-inf'
    if x == 0 and math.copysign(1.0, x) < 0:
        return '-0'
    text = format(Decimal(repr(x)), 'f')
    return text[:-2] if text.endswith('.0') else text


def format_debug_number(x: float) -> str:
    if math.isnan(x):
        return 'NaN'
    if math.isinf(x):
        return 'inf' if x > 0 else '-inf'
    mantissa, _, exponent = repr(float(x)).partition('e')
    if not exponent:
        return mantissa
    # 1e+23 -> 1e23, 1e-07 -> 1e-7
    sign = '-' if exponent.startswith('-') else ''
    return f"{mantissa}e{sign}{exponent.lstrip('+-').lstrip('0')}"


def type_name(value: Atom) -> str:
    """Return the Lox type name of a runtime value."""
    if isinstance(value, String):
        return 'String'
    if isinstance(value, Number):
        return 'Number'
    if isinstance(value, Bool):
        return 'Bool'
    if isinstance(value, Nil):
        return 'Nil'
    return type(value).__name__


def to_string(value: Atom) -> str:
    """Convert a value to its display form (used by `+` concatenation)."""
    if isinstance(value, String):
        return value.value
    if isinstance(value, Number):
        return format_number(value.value)
    if isinstance(value, Bool):
        return 'true' if value.value else 'false'
    if isinstance(value, Nil):
        return 'nil'
    return repr(value)


def values_equal(a: Atom, b: Atom) -> bool:
    """Structural equality: equal only within the same variant.

    Cross-variant comparisons are always False and never raise, so
    `Number(1) == Bool(true)` is simply false.
    """
    if type(a) is not type(b):
        return False
    if isinstance(a, Nil):
        return True
    return a.value == b.value


def is_truthy(value: Atom) -> bool:
    # nil and false are falsy; everything else, including 0 and "", is truthy
    if isinstance(value, Nil):
        return False
    if isinstance(value, Bool):
        return value.value
    return True
