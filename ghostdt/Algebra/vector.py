import numpy as np


def vec(p, dim=2):
    """Return p as a float64 vector of length dim (Vertex, tuple, list or array)."""
    return np.asarray(p, dtype=np.float64).reshape(dim)


def sub(a, b, out=None):
    """a - b, written into out when given."""
    return np.subtract(a, b, out=out)


def add(a, b, out=None):
    """a + b, written into out when given."""
    return np.add(a, b, out=out)


def dot(a, b) -> float:
    return float(np.dot(a, b))


def div_scalar(a, s, out=None):
    """
    a / s. Division by zero gives inf / nan, it is the caller's problem.
    """
    with np.errstate(divide="ignore", invalid="ignore"):
        return np.divide(a, s, out=out)
