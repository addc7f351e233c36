import math

import numpy as np


class Mat3:
    """3x3 homogeneous 2D affine matrix (row-major).

    Points are treated as column vectors (x, y, 1):
        p' = M @ p
    Composition follows the GL convention: `current @ Mat3.scale(...)` applies
    the scale first, the same way glScalef post-multiplies the modelview.
    """

    def __init__(self, m=None):
        # Default to identity.
        if m is None:
            self.m = [
                1.0,
                0.0,
                0.0,
                0.0,
                1.0,
                0.0,
                0.0,
                0.0,
                1.0,
            ]
        else:
            if len(m) != 9:
                raise ValueError("Mat3 expects 9 elements")
            self.m = [float(x) for x in m]

    @classmethod
    def identity(cls):
        return cls()

    @classmethod
    def translate(cls, tx, ty):
        return cls(
            [
                1.0,
                0.0,
                float(tx),
                0.0,
                1.0,
                float(ty),
                0.0,
                0.0,
                1.0,
            ]
        )

    @classmethod
    def scale(cls, sx, sy=None):
        if sy is None:
            sy = sx
        return cls(
            [
                float(sx),
                0.0,
                0.0,
                0.0,
                float(sy),
                0.0,
                0.0,
                0.0,
                1.0,
            ]
        )

    @classmethod
    def rotate(cls, degrees):
        """Counter-clockwise rotation about the origin, like glRotatef(deg, 0, 0, 1)."""
        a = math.radians(degrees)
        c = math.cos(a)
        s = math.sin(a)
        return cls(
            [
                c,
                -s,
                0.0,
                s,
                c,
                0.0,
                0.0,
                0.0,
                1.0,
            ]
        )

    def clone(self):
        return Mat3(self.m)

    def __repr__(self):
        r0 = self.m[0:3]
        r1 = self.m[3:6]
        r2 = self.m[6:9]
        return f"Mat3({r0}, {r1}, {r2})"

    def _mul_mat3(self, other):
        a = self.m
        b = other.m
        out = [0.0] * 9
        for r in range(3):
            for c in range(3):
                out[r * 3 + c] = (
                    a[r * 3 + 0] * b[0 * 3 + c]
                    + a[r * 3 + 1] * b[1 * 3 + c]
                    + a[r * 3 + 2] * b[2 * 3 + c]
                )
        return Mat3(out)

    def transform_point(self, x, y):
        m = self.m
        return (
            m[0] * x + m[1] * y + m[2],
            m[3] * x + m[4] * y + m[5],
        )

    def transform_points(self, xs, ys):
        xs = np.asarray(xs, dtype=np.float64)
        ys = np.asarray(ys, dtype=np.float64)
        m = self.m
        return (
            m[0] * xs + m[1] * ys + m[2],
            m[3] * xs + m[4] * ys + m[5],
        )

    def __matmul__(self, other):
        if isinstance(other, Mat3):
            return self._mul_mat3(other)
        raise TypeError(f"unsupported operand type(s) for @: 'Mat3' and '{type(other)}'")
