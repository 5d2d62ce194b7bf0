import math
import numpy as np

from ghostdt.Algebra.vector import vec, sub, dot
from ghostdt.Algebra.matrix import det2, det3, det4
from ghostdt.config import WEIGHT


def orient2d(a, b, c) -> float:
    """
    Orientation of a, b, c from the determinant of rows (a - c), (b - c):

        | a.x-c.x  a.y-c.y |
        | b.x-c.x  b.y-c.y |

    > 0 counter-clockwise, < 0 clockwise, = 0 collinear.
    """
    c = vec(c)
    m = np.empty((2, 2))
    sub(vec(a), c, out=m[0])
    sub(vec(b), c, out=m[1])
    return det2(m)


def orient3d(a, b, c, d) -> float:
    """
    Determinant of rows (a - d), (b - d), (c - d).
    Sign gives the orientation of the tetrahedron, 0 means coplanar.
    """
    d = vec(d, 3)
    m = np.empty((3, 3))
    sub(vec(a, 3), d, out=m[0])
    sub(vec(b, 3), d, out=m[1])
    sub(vec(c, 3), d, out=m[2])
    return det3(m)


def in_circle(a, b, c, d) -> float:
    """
    InCircle test for a, b, c counter-clockwise:
      > 0  d strictly inside the circle through a, b, c
      < 0  outside
      = 0  concyclic
    Each row is (p - d, |p - d|^2).
    """
    d = vec(d)
    m = np.empty((3, 3))
    for row, p in zip(m, (a, b, c)):
        sub(vec(p), d, out=row[:2])
        row[2] = dot(row[:2], row[:2])
    return det3(m)


def in_sphere(a, b, c, d, e) -> float:
    """3D analogue of in_circle: rows (p - e, |p - e|^2) for p in a, b, c, d."""
    e = vec(e, 3)
    m = np.empty((4, 4))
    for row, p in zip(m, (a, b, c, d)):
        sub(vec(p, 3), e, out=row[:3])
        row[3] = dot(row[:3], row[:3])
    return det4(m)


def lift(p, weight=WEIGHT):
    """Paraboloid lift (x, y) -> (x, y, x^2 + y^2 - weight)."""
    x, y = vec(p)
    return np.array([x, y, x * x + y * y - weight])


def lifted_in_circle(a, b, c, d, weight=WEIGHT) -> float:
    """
    InCircle through the lifting map: orient3d of the four lifted points.
    Same sign as in_circle(a, b, c, d).

    The points are lifted relative to d, so the paraboloid is centred on the
    query point and clusters far from the origin keep their precision.
    """
    d = vec(d)
    return orient3d(lift(sub(vec(a), d), weight), lift(sub(vec(b), d), weight),
                    lift(sub(vec(c), d), weight), lift(np.zeros(2), weight))


def in_segment(a, b, p) -> float:
    """
    dot(p - a, p - b) for p collinear with a and b:
      < 0  p strictly between a and b
      = 0  p is an endpoint
      > 0  p beyond the segment
    """
    p = vec(p)
    return dot(sub(p, vec(a)), sub(p, vec(b)))


def circumcenter(a, b, c):
    """
    计算三角形 ABC 的外接圆圆心。

    The two determinant ratios over coordinates and squared norms:
        d  = 2 * (ax(by - cy) + bx(cy - ay) + cx(ay - by))
        ux = (|a|^2 (by - cy) + |b|^2 (cy - ay) + |c|^2 (ay - by)) / d
        uy = (|a|^2 (cx - bx) + |b|^2 (ax - cx) + |c|^2 (bx - ax)) / d

    Raises ValueError when a, b, c are collinear.
    """
    ax, ay = vec(a)
    bx, by = vec(b)
    cx, cy = vec(c)

    d = 2 * (ax * (by - cy) + bx * (cy - ay) + cx * (ay - by))
    if d == 0:
        raise ValueError("Points are colinear; circumcenter is undefined.")

    a2 = ax ** 2 + ay ** 2
    b2 = bx ** 2 + by ** 2
    c2 = cx ** 2 + cy ** 2

    ux = (a2 * (by - cy) + b2 * (cy - ay) + c2 * (ay - by)) / d
    uy = (a2 * (cx - bx) + b2 * (ax - cx) + c2 * (bx - ax)) / d
    return float(ux), float(uy)


def angles(a, b, c):
    """Interior angles (degrees) at a, b and c."""
    pts = [vec(a), vec(b), vec(c)]
    out = []
    for i in range(3):
        p, q, r = pts[i], pts[(i + 1) % 3], pts[(i + 2) % 3]
        u, v = q - p, r - p
        nu, nv = np.linalg.norm(u), np.linalg.norm(v)
        if nu == 0 or nv == 0:
            out.append(0.0)
            continue
        cos = np.clip(dot(u, v) / (nu * nv), -1.0, 1.0)
        out.append(math.degrees(math.acos(cos)))
    return out


def min_angle(a, b, c) -> float:
    return min(angles(a, b, c))


class LiftedPredicates:
    """
    The predicate kernel used by the mesh. Every in-circle decision of one
    mesh goes through here with one fixed weight; an exact-arithmetic kernel
    can replace it by offering the same methods.
    """

    def __init__(self, weight: float = WEIGHT):
        self._weight = float(weight)

    @property
    def weight(self) -> float:
        return self._weight

    def orient2d(self, a, b, c) -> float:
        return orient2d(a, b, c)

    def in_circle(self, a, b, c, d) -> float:
        return lifted_in_circle(a, b, c, d, self._weight)

    def in_segment(self, a, b, p) -> float:
        return in_segment(a, b, p)

    def __repr__(self):
        return f"LiftedPredicates(weight={self._weight})"
