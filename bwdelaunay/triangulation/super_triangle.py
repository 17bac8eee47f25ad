import math
import numpy as np

from bwdelaunay import config
from bwdelaunay.errors import DegenerateTriangle, SuperTriangleTooSmall
from bwdelaunay.mesh.geometry import area_scale, orientation


def corners(big_triangle):
    """Split a flat (x0, y0, x1, y1, x2, y2) sequence into three points."""
    return [(float(big_triangle[2 * i]), float(big_triangle[2 * i + 1])) for i in range(3)]


def enclosing_triangle(points, scale=None):
    """
    Equilateral triangle around the bounding box of points, as a flat
    6-element list.

    The circumradius is `scale` times the bounding-box half diagonal, so the
    inscribed circle (half the circumradius) always covers the box for scale > 2.
    """
    if scale is None:
        scale = config.SUPER_TRIANGLE_SCALE
    pts = np.asarray(points, dtype=np.float64).reshape(-1, 2)
    lo = pts.min(axis=0)
    hi = pts.max(axis=0)
    cx, cy = (lo + hi) / 2.0
    half_diagonal = float(np.hypot(*(hi - lo))) / 2.0
    if half_diagonal == 0.0:
        # a single point
        half_diagonal = 1.0
    r = half_diagonal * scale
    out = []
    for k in range(3):
        theta = math.pi / 2 + 2 * math.pi * k / 3
        out.extend([cx + r * math.cos(theta), cy + r * math.sin(theta)])
    return out


def check_encloses(big_triangle, points, tol=None):
    """
    Raise unless every point lies strictly inside the super-triangle.

    Only containment is checked: a super-triangle that contains the points
    but sits too close to them can still leave hull triangles missing after
    the purge.
    """
    if tol is None:
        tol = config.AREA_TOLERANCE
    a, b, c = corners(big_triangle)
    area = orientation(a, b, c)
    margin = tol * area_scale(a, b, c)
    if abs(area) <= margin:
        raise DegenerateTriangle(f"super-triangle {a}, {b}, {c} has signed area {area}")
    sign = 1.0 if area > 0 else -1.0
    for p in points:
        if (sign * orientation(a, b, p) <= margin or
                sign * orientation(b, c, p) <= margin or
                sign * orientation(c, a, p) <= margin):
            raise SuperTriangleTooSmall(f"point {tuple(p)} is not strictly inside super-triangle {a}, {b}, {c}")
