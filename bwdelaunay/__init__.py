from bwdelaunay.errors import (DegenerateTriangle, DelaunayError, DuplicateVertex,
                               InputError, PointOutsideHull, UnknownSection)
from bwdelaunay.triangulation import BowyerWatson, compute_delaunay, enclosing_triangle
from bwdelaunay.report import format_report, read_report, write_report

__version__ = "0.1.0"
