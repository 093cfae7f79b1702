# voronoi_mesh/__init__.py
from .geometry_algorithms import Circumcircle, compute_circumcircle_2d
from .mesh_entities import Edge, MeshArena, Triangle, TrianglePoint
from .delaunay_2d import DelaunayTriangulation, delaunay_triangulation_2d
from .voronoi_from_delaunay import construct_voronoi_polygons_2d, order_locus
