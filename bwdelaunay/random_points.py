import numpy as np


def random_points_in_triangle(n, A, B, C, seed=None):
    """
    n points uniformly distributed in triangle ABC, as an (n, 2) array.
    """
    rng = np.random.default_rng(seed)
    A, B, C = (np.asarray(p, dtype=np.float64) for p in (A, B, C))
    u = rng.random(n)
    v = rng.random(n)
    # reflect (u, v) back into u + v <= 1
    mask = u + v > 1
    u[mask] = 1 - u[mask]
    v[mask] = 1 - v[mask]
    return A + u[:, None] * (B - A) + v[:, None] * (C - A)


def random_points_in_box(n, x_range=(-1.0, 1.0), y_range=(-1.0, 1.0), seed=None):
    """n points uniformly distributed in [x0, x1) x [y0, y1)."""
    rng = np.random.default_rng(seed)
    xs = rng.uniform(x_range[0], x_range[1], n)
    ys = rng.uniform(y_range[0], y_range[1], n)
    return np.column_stack([xs, ys])
