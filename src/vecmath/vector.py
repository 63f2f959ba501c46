# vecmath/vector.py
import math
from typing import Callable, Iterator

from vecmath.numeric import (
    divide,
    element_kind,
    element_type_name,
    is_divisible,
    is_f64_convertible,
    is_negatable,
    is_ring,
    is_scalar_for,
    is_signed,
    to_f64,
)


def _require(predicate: Callable, capability: str, operation: str, *values) -> None:
    """
    Raises TypeError if any value lacks the capability an operation needs.
    """
    for value in values:
        if not predicate(value):
            raise TypeError(
                f"{operation} requires {capability} elements, "
                f"got {element_type_name(value)} ({value!r})"
            )


def _require_vector(other, operation: str) -> None:
    if not isinstance(other, Vector3):
        raise TypeError(f"{operation} expects a Vector3, got {type(other).__name__}")


def _require_same_kind(operation: str, *values) -> None:
    kinds = sorted({element_kind(value) for value in values})
    if len(kinds) > 1:
        raise TypeError(f"{operation} requires one element kind, got {', '.join(kinds)}")


def _require_scalar(vector: "Vector3", s, operation: str) -> None:
    kind = element_kind(vector.x)
    if not is_scalar_for(kind, s):
        raise TypeError(
            f"{operation} cannot scale {kind} elements by "
            f"{element_type_name(s)} ({s!r})"
        )


class Vector3:
    """
    A 3D vector over any numeric element type, supporting componentwise
    arithmetic, scalar multiplication and division, dot and cross products,
    and Euclidean length.

    Operators return new vectors. The in-place operators (+=, -=, *=, /=)
    mutate the left-hand vector.
    """
    # keep numpy scalars from broadcasting over a Vector3 operand
    __array_ufunc__ = None

    def __init__(self, x, y, z):
        _require(is_ring, "numeric", "Vector3()", x, y, z)
        _require_same_kind("Vector3()", x, y, z)
        self.x = x
        self.y = y
        self.z = z

    @classmethod
    def new(cls, x, y, z) -> "Vector3":
        return cls(x, y, z)

    @classmethod
    def zero(cls, like=0) -> "Vector3":
        """
        Returns the zero vector in the element type of `like`.
        """
        _require(is_ring, "numeric", "Vector3.zero()", like)
        z = like - like
        return cls(z, z, z)

    def __iter__(self) -> Iterator:
        yield self.x
        yield self.y
        yield self.z

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        return bool(self.x == other.x and self.y == other.y and self.z == other.z)

    def __add__(self, other: "Vector3") -> "Vector3":
        if not isinstance(other, Vector3):
            return NotImplemented
        _require_same_kind("Vector3 + Vector3", self.x, other.x)
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vector3") -> "Vector3":
        if not isinstance(other, Vector3):
            return NotImplemented
        _require_same_kind("Vector3 - Vector3", self.x, other.x)
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __iadd__(self, other: "Vector3") -> "Vector3":
        if not isinstance(other, Vector3):
            return NotImplemented
        _require_same_kind("Vector3 += Vector3", self.x, other.x)
        self.x, self.y, self.z = self.x + other.x, self.y + other.y, self.z + other.z
        return self

    def __isub__(self, other: "Vector3") -> "Vector3":
        if not isinstance(other, Vector3):
            return NotImplemented
        _require_same_kind("Vector3 -= Vector3", self.x, other.x)
        self.x, self.y, self.z = self.x - other.x, self.y - other.y, self.z - other.z
        return self

    def __mul__(self, s) -> "Vector3":
        # Scalars only; there is no componentwise vector * vector.
        if not is_ring(s):
            return NotImplemented
        _require_scalar(self, s, "Vector3 * scalar")
        return Vector3(self.x * s, self.y * s, self.z * s)

    def __rmul__(self, s) -> "Vector3":
        return self.__mul__(s)

    def __imul__(self, s) -> "Vector3":
        if not is_ring(s):
            return NotImplemented
        _require_scalar(self, s, "Vector3 *= scalar")
        self.x, self.y, self.z = self.x * s, self.y * s, self.z * s
        return self

    def __truediv__(self, s) -> "Vector3":
        if not is_divisible(s):
            return NotImplemented
        _require_scalar(self, s, "Vector3 / scalar")
        return Vector3(divide(self.x, s), divide(self.y, s), divide(self.z, s))

    def __itruediv__(self, s) -> "Vector3":
        if not is_divisible(s):
            return NotImplemented
        _require_scalar(self, s, "Vector3 /= scalar")
        self.x, self.y, self.z = divide(self.x, s), divide(self.y, s), divide(self.z, s)
        return self

    def __neg__(self) -> "Vector3":
        _require(is_negatable, "negatable", "-Vector3", self.x, self.y, self.z)
        return Vector3(-self.x, -self.y, -self.z)

    def __abs__(self) -> "Vector3":
        return self.abs()

    def abs(self) -> "Vector3":
        """
        Returns the componentwise absolute value.
        """
        _require(is_signed, "signed", "Vector3.abs()", self.x, self.y, self.z)
        return Vector3(abs(self.x), abs(self.y), abs(self.z))

    def dot(self, other: "Vector3"):
        """
        Returns x*x' + y*y' + z*z', summed left to right.
        """
        _require_vector(other, "Vector3.dot()")
        _require_same_kind("Vector3.dot()", self.x, other.x)
        return self.x * other.x + self.y * other.y + self.z * other.z

    def abs_dot(self, other: "Vector3"):
        """
        Returns the absolute value of the dot product with another vector.
        """
        _require_vector(other, "Vector3.abs_dot()")
        _require_same_kind("Vector3.abs_dot()", self.x, other.x)
        _require(is_signed, "signed", "Vector3.abs_dot()",
                 self.x, self.y, self.z, other.x, other.y, other.z)
        return abs(self.dot(other))

    def cross(self, other: "Vector3") -> "Vector3":
        _require_vector(other, "Vector3.cross()")
        _require_same_kind("Vector3.cross()", self.x, other.x)
        # Right-handed
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    def length_squared(self) -> float:
        """
        Sums the squared components in the element type, then converts the
        sum to float. Raises ElementConversionError if the sum has no float
        representation.
        """
        _require(is_f64_convertible, "float-convertible", "Vector3.length_squared()",
                 self.x, self.y, self.z)
        return to_f64(self.x * self.x + self.y * self.y + self.z * self.z)

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def __repr__(self) -> str:
        return f"Vector3(x={self.x!r}, y={self.y!r}, z={self.z!r})"

    def __str__(self) -> str:
        return f"Vector3({self.x}, {self.y}, {self.z})"
