import numpy as np


class VertexArray:
    """
    Append-only arena of 2D coordinates. A vertex is addressed by the index
    returned from append(); indices are never reused or renumbered.
    """

    def __init__(self, capacity: int = 64):
        self._data = np.empty((max(capacity, 1), 2), dtype=np.float64)
        self._size = 0

    def __len__(self):
        return self._size

    def __getitem__(self, index: int):
        if not 0 <= index < self._size:
            raise IndexError(f"vertex index {index} out of range [0, {self._size})")
        x, y = self._data[index]
        return float(x), float(y)

    def __iter__(self):
        for i in range(self._size):
            yield self[i]

    def append(self, x: float, y: float) -> int:
        if self._size == len(self._data):
            grown = np.empty((2 * len(self._data), 2), dtype=np.float64)
            grown[:self._size] = self._data[:self._size]
            self._data = grown
        self._data[self._size] = (x, y)
        self._size += 1
        return self._size - 1

    def as_array(self) -> np.ndarray:
        """Copy of the live coordinates as an (N, 2) array."""
        return self._data[:self._size].copy()

    def nearest(self, x: float, y: float):
        """(index, distance) of the vertex closest to (x, y); (None, inf) when empty."""
        if self._size == 0:
            return None, float("inf")
        live = self._data[:self._size]
        dist = np.hypot(live[:, 0] - x, live[:, 1] - y)
        i = int(np.argmin(dist))
        return i, float(dist[i])
