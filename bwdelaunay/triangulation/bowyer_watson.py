import logging
import math
from collections import namedtuple

import numpy as np

from bwdelaunay import config
from bwdelaunay.errors import (DegenerateTriangle, DuplicateVertex, InvalidPoint,
                               MalformedBoundary, PointOutsideHull)
from bwdelaunay.mesh.geometry import in_circumcircle, is_degenerate, on_segment, point_in_triangle
from bwdelaunay.mesh.store import MeshStore
from bwdelaunay.mesh.triangle import Triangle, edge_key
from bwdelaunay.triangulation.super_triangle import check_encloses, enclosing_triangle

logger = logging.getLogger(__name__)

# index: new vertex, removed: cavity triangles, boundary: cavity boundary
# edges, created: triangles fanned from the new vertex
Insertion = namedtuple("Insertion", ["index", "removed", "boundary", "created"])


def as_points(values, name="boundary"):
    """Flat interleaved [x0, y0, x1, y1, ...] -> list of (x, y) tuples."""
    try:
        arr = np.asarray(values, dtype=np.float64).ravel()
    except (TypeError, ValueError) as err:
        raise MalformedBoundary(f"{name} must be a flat sequence of numbers") from err
    if arr.size % 2:
        raise MalformedBoundary(f"{name} has odd length {arr.size}; coordinates come in x, y pairs")
    if not np.all(np.isfinite(arr)):
        raise MalformedBoundary(f"{name} contains non-finite coordinates")
    return [(float(x), float(y)) for x, y in arr.reshape(-1, 2)]


def cavity_boundary(bad_triangles, n):
    """
    Edges of the cavity formed by bad_triangles.

    An edge shared by two bad triangles lies inside the cavity and is dropped;
    one that appears once is on the cavity boundary. Edges are sorted on
    larger + n * smaller so that equal edges end up next to each other, then
    every edge that differs from both neighbours is kept.
    """
    edges = []
    for tri in bad_triangles:
        edges.extend(tri.edges())
    edges.sort(key=lambda e: edge_key(e, n))

    independent = []
    last = len(edges) - 1
    for i, e in enumerate(edges):
        if i > 0 and edges[i - 1] == e:
            continue
        if i < last and edges[i + 1] == e:
            continue
        independent.append(e)
    return independent


class BowyerWatson:
    """
    Incremental Delaunay triangulation seeded with a super-triangle.

    out_boundary : flat [x0, y0, x1, y1, ...], inserted in the given order
    big_triangle : flat [x0, y0, x1, y1, x2, y2], must enclose every point
    in_boundary  : flat inner boundary; stored only, no constraint is enforced

    After the boundary is inserted, every triangle touching one of the three
    super-triangle vertices is deleted. The super vertices themselves stay in
    the vertex array (indices 0, 1, 2).
    """

    def __init__(self, out_boundary, big_triangle, in_boundary=None):
        self.mesh = MeshStore()
        self.last_insertion = None

        boundary = as_points(out_boundary, "out_boundary")
        big = as_points(big_triangle, "big_triangle")
        if len(big) != 3:
            raise MalformedBoundary(f"big_triangle needs 6 coordinates, got {2 * len(big)}")
        if len(boundary) < 3:
            raise MalformedBoundary(f"out_boundary needs at least 3 points, got {len(boundary)}")
        check_encloses([c for p in big for c in p], boundary)
        _, counts = np.unique(np.asarray(boundary), axis=0, return_counts=True)
        if np.any(counts > 1):
            raise MalformedBoundary("out_boundary contains repeated points")

        self.inner_boundary = None
        if in_boundary is not None:
            self.inner_boundary = as_points(in_boundary, "in_boundary")
            logger.warning("inner boundary with %d points is stored but not enforced",
                           len(self.inner_boundary))

        i0 = self.mesh.append_vertex(*big[0])
        i1 = self.mesh.append_vertex(*big[1])
        i2 = self.mesh.append_vertex(*big[2])
        self.mesh.append_triangle(Triangle(i0, i1, i2))
        self.super_indices = (i0, i1, i2)

        for x, y in boundary:
            self.add_point(x, y)

        removed = self.delete_super_triangles()
        logger.info("inserted %d boundary points, purged %d super-triangle triangles, %d left",
                    len(boundary), len(removed), self.num_triangles)

    def delete_super_triangles(self):
        supers = self.super_indices

        def touches_super(tri):
            return tri.has_vertex(supers[0]) or tri.has_vertex(supers[1]) or tri.has_vertex(supers[2])

        return self.mesh.delete_where(touches_super)

    def locate_triangle(self, x: float, y: float):
        """First live triangle containing (x, y), edges included; None if there is none."""
        p = (x, y)
        return next((tri for tri in self.mesh.triangles
                     if point_in_triangle(p, *self.mesh.coords(tri))), None)

    def add_point(self, x: float, y: float) -> int:
        """
        Insert (x, y) and restore the Delaunay property. Returns the new
        vertex index.

        Raises InvalidPoint, DuplicateVertex, PointOutsideHull or
        DegenerateTriangle; the mesh is unchanged when anything is raised.
        """
        x, y = float(x), float(y)
        if not (math.isfinite(x) and math.isfinite(y)):
            raise InvalidPoint(f"point ({x}, {y}) is not finite")
        nearest, dist = self.mesh.vertices.nearest(x, y)
        if dist <= config.DUPLICATE_TOLERANCE:
            raise DuplicateVertex(x, y, nearest)
        if self.locate_triangle(x, y) is None:
            raise PointOutsideHull(f"point ({x}, {y}) is not inside any triangle")

        p = (x, y)
        kept, bad = self.mesh.partition(lambda tri: in_circumcircle(p, *self.mesh.coords(tri)))
        if not bad:
            raise PointOutsideHull(f"point ({x}, {y}) is inside no circumcircle")

        index = len(self.mesh.vertices)
        boundary = cavity_boundary(bad, index + 1)

        vertices = self.mesh.vertices
        created = []
        for a, b in boundary:
            pa, pb = vertices[a], vertices[b]
            if is_degenerate(pa, pb, p):
                if on_segment(p, pa, pb):
                    # hull edge split by the new point
                    logger.debug("point %d splits hull edge (%d, %d)", index, a, b)
                    continue
                raise DegenerateTriangle(f"point ({x}, {y}) is collinear with cavity edge ({a}, {b})")
            created.append(Triangle(a, b, index))

        self.mesh.append_vertex(x, y)
        self.mesh.replace_triangles(kept + created)
        self.last_insertion = Insertion(index, bad, boundary, created)
        logger.debug("vertex %d: removed %d triangles, created %d", index, len(bad), len(created))
        return index

    def add_points(self, points):
        return [self.add_point(x, y) for x, y in points]

    # ---- export surface ----

    @property
    def num_vertices(self) -> int:
        return len(self.mesh.vertices)

    @property
    def vertices(self) -> np.ndarray:
        return self.mesh.vertices.as_array()

    def vertex(self, index: int):
        return self.mesh.vertices[index]

    @property
    def num_triangles(self) -> int:
        return len(self.mesh.triangles)

    @property
    def triangles(self):
        return [tri.indices for tri in self.mesh.triangles]

    def edges(self):
        """Every edge of the mesh once, sorted on (smaller, larger)."""
        n = self.num_vertices
        unique = {e for tri in self.mesh.triangles for e in tri.edges()}
        return sorted(unique, key=lambda e: edge_key(e, n))

    def hull_edges(self):
        """Edges used by exactly one triangle."""
        count = {}
        for tri in self.mesh.triangles:
            for e in tri.edges():
                count[e] = count.get(e, 0) + 1
        n = self.num_vertices
        return sorted((e for e, c in count.items() if c == 1), key=lambda e: edge_key(e, n))

    def used_vertices(self):
        return sorted({i for tri in self.mesh.triangles for i in tri})

    def __repr__(self):
        return (f"BowyerWatson(vertices={self.num_vertices}, "
                f"triangles={self.num_triangles})")


def compute_delaunay(points, scale=None):
    """
    Triangulate points with a super-triangle derived from their bounding box.

    points : (N, 2) array-like, or flat [x0, y0, x1, y1, ...]
    """
    pts = as_points(points, "points")
    if not pts:
        raise MalformedBoundary("points is empty")
    big = enclosing_triangle(pts, scale)
    return BowyerWatson([c for p in pts for c in p], big)
