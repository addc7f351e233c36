from .vec2 import Vec2
from .mat3 import Mat3

__all__ = ["Vec2", "Mat3"]
