class TriangulationError(RuntimeError):
    pass


class DuplicateEdgeError(TriangulationError):
    """A directed edge is already claimed by another triangle."""

    def __init__(self, edge):
        self.edge = edge
        super().__init__(f"already contains edge {edge}")


class MissingEdgeError(TriangulationError):
    """A directed edge (or its apex) is not where the caller expected it."""

    def __init__(self, edge):
        self.edge = edge
        super().__init__(f"does not contain edge {edge}")


class NotFoundError(TriangulationError):
    """No triangle's open circumdisk contains the point."""

    def __init__(self, point):
        self.point = point
        super().__init__(f"no triangle's open circumdisk contains {point}")


class DegenerateInputError(TriangulationError, ValueError):
    """The points span no triangle (all collinear, or fewer than three distinct)."""

    def __init__(self, points):
        self.points = tuple(points)
        super().__init__(f"no three points that are not collinear among {len(self.points)}")


class InvariantError(TriangulationError):
    """A stored mesh breaks one of its invariants at edge."""

    def __init__(self, edge, reason):
        self.edge = edge
        super().__init__(f"edge {edge}: {reason}")
