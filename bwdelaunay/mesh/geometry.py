import math

from bwdelaunay import config
from bwdelaunay.errors import DegenerateTriangle


def orientation(p, q, r):
    """
    Cross product of (q - p) and (r - p), i.e. twice the signed area of pqr.

          | p.x p.y 1 |
          | q.x q.y 1 | = (q.x - p.x)*(r.y - p.y) - (q.y - p.y)*(r.x - p.x)
          | r.x r.y 1 |

    > 0 : r is left of p->q (pqr counter-clockwise)
    = 0 : collinear
    < 0 : r is right of p->q (clockwise)
    """
    return (q[0] - p[0]) * (r[1] - p[1]) - (q[1] - p[1]) * (r[0] - p[0])


def squared_length(p, q):
    dx = q[0] - p[0]
    dy = q[1] - p[1]
    return dx * dx + dy * dy


def area_scale(a, b, c):
    """Longest squared edge of abc; |orientation| is compared against tol times this."""
    return max(squared_length(a, b), squared_length(a, c), squared_length(b, c))


def is_degenerate(a, b, c, tol=None):
    """
    abc is collinear (or has coincident corners) up to a tolerance relative to
    its size: |orientation| <= tol * longest squared edge.
    """
    if tol is None:
        tol = config.AREA_TOLERANCE
    return abs(orientation(a, b, c)) <= tol * area_scale(a, b, c)


def _checked_area(a, b, c, tol):
    area = orientation(a, b, c)
    if abs(area) <= tol * area_scale(a, b, c):
        raise DegenerateTriangle(f"triangle {tuple(a)}, {tuple(b)}, {tuple(c)} has signed area {area}")
    return area


def in_circle_det(point, a, b, c):
    """
    3x3 incircle determinant with every vertex translated by -point:

        | a.x-P.x  a.y-P.y  (a.x-P.x)^2 + (a.y-P.y)^2 |
        | b.x-P.x  b.y-P.y  (b.x-P.x)^2 + (b.y-P.y)^2 |
        | c.x-P.x  c.y-P.y  (c.x-P.x)^2 + (c.y-P.y)^2 |

    Positive when abc is counter-clockwise and point is inside its circumcircle.
    """
    px, py = point[0], point[1]
    a0, a1 = a[0] - px, a[1] - py
    b0, b1 = b[0] - px, b[1] - py
    c0, c1 = c[0] - px, c[1] - py
    a2 = a0 * a0 + a1 * a1
    b2 = b0 * b0 + b1 * b1
    c2 = c0 * c0 + c1 * c1
    det_p = a0 * b1 * c2 + b0 * c1 * a2 + a1 * b2 * c0
    det_m = c0 * b1 * a2 + b0 * a1 * c2 + c1 * b2 * a0
    return det_p - det_m


def in_circumcircle(point, a, b, c, tol=None):
    """
    True iff point lies strictly inside the circumcircle of abc, whatever the
    winding of abc. Points on the circle count as outside.

    Raises DegenerateTriangle when abc has (near) zero area.
    """
    if tol is None:
        tol = config.AREA_TOLERANCE
    area = _checked_area(a, b, c, tol)
    det = in_circle_det(point, a, b, c)
    if area > 0:
        return det > 0
    return det < 0


def point_in_triangle(point, a, b, c, tol=None):
    """Closed containment test: points on an edge or a corner are inside."""
    if tol is None:
        tol = config.AREA_TOLERANCE
    area = _checked_area(a, b, c, tol)
    sign = 1.0 if area > 0 else -1.0
    slack = -tol * area_scale(a, b, c)
    return (sign * orientation(a, b, point) >= slack and
            sign * orientation(b, c, point) >= slack and
            sign * orientation(c, a, point) >= slack)


def on_segment(p, a, b, tol=None):
    """p is collinear with ab and lies between a and b."""
    if tol is None:
        tol = config.AREA_TOLERANCE
    if not is_degenerate(a, b, p, tol):
        return False
    slack = tol * math.sqrt(squared_length(a, b))
    return (min(a[0], b[0]) - slack <= p[0] <= max(a[0], b[0]) + slack and
            min(a[1], b[1]) - slack <= p[1] <= max(a[1], b[1]) + slack)
