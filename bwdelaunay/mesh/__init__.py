from bwdelaunay.mesh.geometry import in_circumcircle, orientation, point_in_triangle
from bwdelaunay.mesh.store import MeshStore
from bwdelaunay.mesh.triangle import Triangle
from bwdelaunay.mesh.vertex_array import VertexArray
