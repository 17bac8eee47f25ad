from bwdelaunay.mesh.triangle import Triangle
from bwdelaunay.mesh.vertex_array import VertexArray


class MeshStore:
    """
    Vertex arena plus the unordered bag of live triangles.

    Pure storage and filtering, no geometric reasoning.
    """

    def __init__(self):
        self.vertices = VertexArray()
        self.triangles = []

    def append_vertex(self, x: float, y: float) -> int:
        return self.vertices.append(x, y)

    def append_triangle(self, tri: Triangle):
        self.triangles.append(tri)

    def search(self, predicate):
        return [tri for tri in self.triangles if predicate(tri)]

    def partition(self, predicate):
        """
        One pass over the bag, returning (kept, matched). The bag itself is
        left untouched.
        """
        kept, matched = [], []
        for tri in self.triangles:
            if predicate(tri):
                matched.append(tri)
            else:
                kept.append(tri)
        return kept, matched

    def delete_where(self, predicate):
        """Remove every triangle matching predicate and return the removed ones."""
        kept, matched = self.partition(predicate)
        self.triangles = kept
        return matched

    def replace_triangles(self, triangles):
        self.triangles = list(triangles)

    def coords(self, tri: Triangle):
        """The three corner coordinates of tri, in its index order."""
        v = self.vertices
        return v[tri[0]], v[tri[1]], v[tri[2]]
