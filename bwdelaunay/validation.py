"""Global checks of a finished (or in-progress) triangulation."""
import logging

import numpy as np
from scipy.spatial import Delaunay

logger = logging.getLogger(__name__)


def delaunay_violations(mesh, tol=0.0):
    """
    Brute-force empty-circle test: every (triangle, vertex) pair where a
    vertex used by the mesh lies strictly inside the triangle's circumcircle.

    Same determinant as the insertion predicate, evaluated for all used
    vertices of one triangle at a time.
    """
    used = np.asarray(mesh.used_vertices(), dtype=np.int64)
    if used.size == 0:
        return []
    coords = mesh.vertices
    pts = coords[used]
    bad = []
    for tri in mesh.triangles:
        a, b, c = coords[list(tri)]
        area = (b[0] - a[0]) * (c[1] - a[1]) - (b[1] - a[1]) * (c[0] - a[0])
        a0, a1 = a[0] - pts[:, 0], a[1] - pts[:, 1]
        b0, b1 = b[0] - pts[:, 0], b[1] - pts[:, 1]
        c0, c1 = c[0] - pts[:, 0], c[1] - pts[:, 1]
        a2 = a0 * a0 + a1 * a1
        b2 = b0 * b0 + b1 * b1
        c2 = c0 * c0 + c1 * c1
        det = (a0 * b1 * c2 + b0 * c1 * a2 + a1 * b2 * c0) - (c0 * b1 * a2 + b0 * a1 * c2 + c1 * b2 * a0)
        inside = det * np.sign(area) > tol
        for v in used[inside]:
            if v not in tri:
                bad.append((tuple(tri), int(v)))
    return bad


def is_delaunay(mesh, tol=0.0):
    bad = delaunay_violations(mesh, tol)
    if bad:
        tri, v = bad[0]
        logger.warning("Triangle %s INCLUDES vertex %d (%d violations)", tri, v, len(bad))
        return False
    return True


def euler_counts(mesh):
    """(V, E, T, H): used vertices, edges, triangles, hull edges."""
    return (len(mesh.used_vertices()), len(mesh.edges()),
            mesh.num_triangles, len(mesh.hull_edges()))


def check_euler(mesh):
    """
    A triangulated disk satisfies V - E + T = 1, and counting edge sides
    gives 2E = 3T + H.
    """
    v, e, t, h = euler_counts(mesh)
    return v - e + t == 1 and 2 * e == 3 * t + h


def coordinate_triangles(mesh):
    """Triangles keyed by their corner coordinates, independent of vertex numbering."""
    coords = mesh.vertices
    return {frozenset(tuple(map(float, coords[i])) for i in tri) for tri in mesh.triangles}


def reference_triangles(points):
    """Delaunay triangles of points computed by scipy (Qhull), keyed by coordinates."""
    pts = np.asarray(points, dtype=np.float64).reshape(-1, 2)
    tri = Delaunay(pts)
    return {frozenset(tuple(map(float, pts[i])) for i in simplex) for simplex in tri.simplices}


def matches_reference(mesh):
    """Compare the mesh with scipy.spatial.Delaunay over the vertices the mesh uses."""
    coords = mesh.vertices
    ours = coordinate_triangles(mesh)
    ref = reference_triangles(coords[mesh.used_vertices()])
    if ours != ref:
        logger.warning("%d triangles differ from the scipy reference", len(ours ^ ref))
        return False
    return True
