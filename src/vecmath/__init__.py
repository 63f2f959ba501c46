from vecmath.numeric import (
    ElementConversionError,
    is_divisible,
    is_f64_convertible,
    is_negatable,
    is_ring,
    is_signed,
)
from vecmath.vector import Vector3

__all__ = [
    "ElementConversionError",
    "Vector3",
    "is_divisible",
    "is_f64_convertible",
    "is_negatable",
    "is_ring",
    "is_signed",
]
