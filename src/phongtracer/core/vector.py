# core/vector.py
import math
import numbers

class Vector3:
    """
    A 3D vector used interchangeably as a point, a direction or an RGB color.

    Free operators never modify their operands. Only normalize(), mix_color()
    and multiply_color() mutate the vector in place.
    """
    __slots__ = ("x", "y", "z")

    def __init__(self, x: float, y: float, z: float):
        self.x = x
        self.y = y
        self.z = z

    def __add__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other):
        if isinstance(other, numbers.Real):
            return Vector3(self.x * other, self.y * other, self.z * other)
        # Component-wise product, used to tint colors.
        return Vector3(self.x * other.x, self.y * other.y, self.z * other.z)

    def __rmul__(self, other: float) -> "Vector3":
        return self.__mul__(other)

    def __truediv__(self, t: float) -> "Vector3":
        return Vector3(self.x / t, self.y / t, self.z / t)

    def __neg__(self) -> "Vector3":
        return Vector3(-self.x, -self.y, -self.z)

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def dot(self, other: "Vector3") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vector3") -> "Vector3":
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    def length_squared(self) -> float:
        return self.dot(self)

    def length(self) -> float:
        return math.sqrt(self.dot(self))

    def normalize(self) -> "Vector3":
        """
        Divides the vector by its length in place and returns it.

        The caller must guarantee a non-zero length: a zero vector raises
        ZeroDivisionError, nothing is clamped or substituted here.
        """
        l = self.length()
        self.x /= l
        self.y /= l
        self.z /= l
        return self

    def mix_color(self, other: "Vector3") -> "Vector3":
        """Replaces each channel with the mean of itself and other's channel."""
        self.x = (self.x + other.x) / 2
        self.y = (self.y + other.y) / 2
        self.z = (self.z + other.z) / 2
        return self

    def multiply_color(self, other: "Vector3") -> "Vector3":
        self.x *= other.x
        self.y *= other.y
        self.z *= other.z
        return self

    def copy(self) -> "Vector3":
        return Vector3(self.x, self.y, self.z)

    def __repr__(self) -> str:
        return f"Vector3({self.x}, {self.y}, {self.z})"
