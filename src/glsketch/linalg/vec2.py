import math


class Vec2:
    """2D point/vector in world units.

    Compares and hashes by value so it can stand in for a path anchor.
    """

    __slots__ = ("x", "y")

    def __init__(self, x=0.0, y=0.0):
        self.x, self.y = float(x), float(y)

    @classmethod
    def of(cls, p):
        if isinstance(p, Vec2):
            return p
        return cls(p[0], p[1])

    def mag(self):
        return math.sqrt(self.x**2 + self.y**2)

    def dist(self, other):
        return (self - other).mag()

    def angle(self):
        return math.atan2(self.y, self.x)

    def __add__(self, other):
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other):
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, other):
        return Vec2(self.x * other, self.y * other)

    def __rmul__(self, other):
        return self.__mul__(other)

    def __eq__(self, other):
        if not isinstance(other, Vec2):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def __hash__(self):
        return hash((self.x, self.y))

    def __iter__(self):
        yield self.x
        yield self.y

    def __repr__(self):
        return f"Vec2({self.x:g}, {self.y:g})"

    def lerp(self, other, t):
        return Vec2(
            self.x + (other.x - self.x) * t,
            self.y + (other.y - self.y) * t,
        )
