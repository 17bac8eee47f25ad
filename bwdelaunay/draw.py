import matplotlib.pyplot as plt


def draw(mesh, show=True, ax=None, draw_vertices=True, label_vertices=False, hide_unused=True):
    """
    Plot the triangles of mesh with matplotlib.

    hide_unused drops vertices no triangle refers to (the super-triangle
    corners after the purge). Returns the axes.
    """
    if ax is None:
        plt.figure(figsize=(8, 8))
        ax = plt.gca()

    coords = mesh.vertices
    triangles = mesh.triangles
    if triangles:
        ax.triplot(coords[:, 0], coords[:, 1], triangles, color='black', linewidth=0.8, zorder=1)

    if draw_vertices:
        indices = mesh.used_vertices() if hide_unused else list(range(mesh.num_vertices))
        ax.scatter(coords[indices, 0], coords[indices, 1], color='red', s=8, zorder=2)
        if label_vertices:
            for i in indices:
                ax.text(coords[i, 0], coords[i, 1], f"{i}", color="blue", fontsize=8)

    ax.set_aspect('equal')
    ax.set_title(f"Delaunay triangulation: {len(triangles)} triangles")
    if show:
        plt.show()
    return ax
