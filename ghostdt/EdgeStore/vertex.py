import numpy as np


class Vertex:
    """
    Mesh vertex. Identity is the exact coordinate pair: two vertices with the
    same (x, y) are the same vertex. No tolerance is applied.
    """
    __slots__ = ("x", "y")
    is_ghost = False

    def __init__(self, x: float, y: float):
        self.x = float(x)
        self.y = float(y)

    @classmethod
    def of(cls, p) -> "Vertex":
        if isinstance(p, Vertex):
            return p
        x, y = p
        return cls(x, y)

    def key(self):
        return (0, self.x, self.y)

    def __array__(self, dtype=None, copy=None):
        return np.array([self.x, self.y], dtype=dtype or np.float64)

    def __iter__(self):
        yield self.x
        yield self.y

    def __eq__(self, other):
        if not isinstance(other, Vertex):
            return NotImplemented
        return self.key() == other.key()

    def __hash__(self):
        return hash(self.key())

    def __lt__(self, other):
        return self.key() < other.key()

    def __repr__(self):
        return f"Vertex({self.x:g}, {self.y:g})"


class _GhostVertex(Vertex):
    """The point at infinity closing every hull edge. Has no coordinates."""
    __slots__ = ()
    is_ghost = True

    def __init__(self):
        super().__init__(float("inf"), float("inf"))

    def key(self):
        # sorts after every real vertex and never equals one
        return (1, 0.0, 0.0)

    def __array__(self, dtype=None, copy=None):
        raise TypeError("the ghost vertex has no coordinates")

    def __iter__(self):
        raise TypeError("the ghost vertex has no coordinates")

    def __repr__(self):
        return "GHOST"


GHOST = _GhostVertex()
