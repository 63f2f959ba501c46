# vecmath/numeric.py
"""
Element-type capability tiers.

A Vector3 can hold any numeric element type, but not every operation makes
sense for every element. Each tier below is a predicate over one element:

    ring        +, -, *            (construction, sums, products)
    divisible   additionally /     (scalar division)
    negatable   additionally -x    (vector negation)
    signed      additionally abs() (abs, abs_dot)
    f64         float() conversion (length_squared, length)
"""
import math
import numbers
from decimal import Decimal

import numpy as np


class ElementConversionError(ArithmeticError):
    """
    Raised when an element cannot be represented as a 64-bit float.
    """


def element_type_name(value) -> str:
    return type(value).__name__


def is_ring(value) -> bool:
    # bool is an Integral subclass but not a useful vector element
    if isinstance(value, (bool, np.bool_)):
        return False
    return isinstance(value, numbers.Number)


def is_divisible(value) -> bool:
    return is_ring(value)


def element_kind(value) -> str:
    """
    Returns the numeric kind of an element: integral, rational, real,
    decimal or complex. Python ints and numpy integers share a kind, as do
    Python floats and numpy floats.
    """
    if isinstance(value, numbers.Integral):
        return "integral"
    if isinstance(value, numbers.Rational):
        return "rational"
    if isinstance(value, numbers.Real):
        return "real"
    if isinstance(value, Decimal):
        return "decimal"
    if isinstance(value, numbers.Complex):
        return "complex"
    return element_type_name(value)


def is_scalar_for(kind: str, value) -> bool:
    """
    True if value can scale elements of the given kind without changing
    it. Integral scalars scale every kind.
    """
    if not is_ring(value):
        return False
    return element_kind(value) in (kind, "integral")


def is_unsigned(value) -> bool:
    return isinstance(value, np.unsignedinteger)


def is_negatable(value) -> bool:
    return is_ring(value) and not is_unsigned(value)


def is_signed(value) -> bool:
    """
    True for real-valued elements with a sign. Complex numbers have a
    magnitude, not a componentwise absolute value, so they are excluded.
    """
    if not is_negatable(value):
        return False
    return isinstance(value, (numbers.Real, Decimal))


def is_complex(value) -> bool:
    return isinstance(value, numbers.Complex) and not isinstance(value, numbers.Real)


def is_f64_convertible(value) -> bool:
    return is_ring(value) and not is_complex(value)


def divide(a, b):
    """
    Divides a by b using the element type's own division. Integral elements
    use floor division so the result stays integral.
    """
    if isinstance(a, numbers.Integral) and isinstance(b, numbers.Integral):
        return a // b
    return a / b


def to_f64(value) -> float:
    """
    Converts an element to a 64-bit float, raising ElementConversionError
    instead of returning a wrong value.
    """
    if not is_f64_convertible(value):
        raise ElementConversionError(
            f"cannot convert {element_type_name(value)} element {value!r} to float"
        )
    try:
        result = float(value)
    except (OverflowError, TypeError, ValueError) as e:
        raise ElementConversionError(
            f"cannot convert {element_type_name(value)} element {value!r} to float: {e}"
        ) from e
    # Decimal and numpy.longdouble saturate to inf instead of raising
    if math.isinf(result) and value != result:
        raise ElementConversionError(
            f"{element_type_name(value)} element {value!r} is out of range for float"
        )
    return result
