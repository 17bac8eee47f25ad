from bwdelaunay.errors import InvalidTriangle


def edge_key(edge, n):
    """Sort key of an edge for a mesh of n vertices: larger + n * smaller."""
    return edge[1] + n * edge[0]


class Triangle:
    """
    Three distinct vertex indices, kept in ascending order so that two
    triangles over the same vertices compare equal.
    """
    __slots__ = ("indices",)

    def __init__(self, a: int, b: int, c: int):
        indices = tuple(sorted((int(a), int(b), int(c))))
        if indices[0] == indices[1] or indices[1] == indices[2]:
            raise InvalidTriangle(f"triangle needs three distinct vertex indices, got {(a, b, c)}")
        self.indices = indices

    def __getitem__(self, i):
        return self.indices[i]

    def __iter__(self):
        return iter(self.indices)

    def __len__(self):
        return 3

    def __eq__(self, other):
        if not isinstance(other, Triangle):
            return NotImplemented
        return self.indices == other.indices

    def __hash__(self):
        return hash(self.indices)

    def __lt__(self, other):
        return self.indices < other.indices

    def __repr__(self):
        return f"Triangle{self.indices}"

    def edges(self):
        i, j, k = self.indices
        return [(i, j), (i, k), (j, k)]

    def has_vertex(self, index: int) -> bool:
        return index in self.indices
