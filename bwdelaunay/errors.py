class DelaunayError(Exception):
    """Base class of every error raised by bwdelaunay."""


class GeometryError(DelaunayError):
    """A point or triangle cannot be handled by the insertion step."""


class DegenerateTriangle(GeometryError):
    """Zero (or near-zero) signed area met where a proper triangle is needed."""


class DuplicateVertex(GeometryError):
    """The new point coincides with an existing vertex."""

    def __init__(self, x, y, index):
        super().__init__(f"point ({x}, {y}) duplicates vertex {index}")
        self.index = index


class PointOutsideHull(GeometryError):
    """The new point is not covered by any live triangle."""


class InputError(DelaunayError, ValueError):
    pass


class InvalidTriangle(InputError):
    pass


class InvalidPoint(InputError):
    pass


class MalformedBoundary(InputError):
    pass


class SuperTriangleTooSmall(InputError):
    pass


class UnknownSection(InputError):
    pass


class MalformedReport(InputError):
    pass
