import torch

from .constants import COORDINATE_DTYPE
from .geometry_algorithms import polar_angle


# --- Voronoi Diagram Construction from Delaunay ---

def order_locus(point, centers) -> list[tuple[float, float]]:
    """
    Orders Voronoi vertices around their site.
    Args:
        point: Anything with `x` and `y` attributes (the Voronoi site).
        centers: Iterable of (x, y) circumcenters of the triangles incident to the site.
    Returns:
        List[Tuple[float, float]]: The centers sorted by atan2(dy, dx) around the site, ascending.
    """
    return sorted(
        (tuple(c) for c in centers),
        key=lambda c: polar_angle(point.x, point.y, c[0], c[1]),
    )


def construct_voronoi_polygons_2d(triangulation):
    """
    Constructs the Voronoi cell boundary (locus) of every input point of a triangulation.
    Args:
        triangulation (DelaunayTriangulation): The engine; triangulated on demand if it has not run yet.
    Returns:
        Tuple[List[List[torch.Tensor]], torch.Tensor]:
            - voronoi_cells_vertices_list: One list per input point, in input order. Each inner list
                                           holds (2,) float64 tensors, the ordered locus of that point.
                                           Points at the mesh boundary include circumcenters of
                                           super-polygon-adjacent triangles.
            - voronoi_vertices (torch.Tensor): Shape (V, 2), one circumcenter per locus triangle,
                                               ordered by triangle index.
    """
    if triangulation.triangulation is None:
        triangulation.triangulate()

    locus_triangles = sorted(triangulation.locus_triangles, key=lambda tri: tri.index)
    if not locus_triangles:
        return ([[] for _ in triangulation.points],
                torch.empty((0, 2), dtype=COORDINATE_DTYPE))

    voronoi_vertices = torch.tensor([tri.circumcircle.center for tri in locus_triangles],
                                    dtype=COORDINATE_DTYPE)

    voronoi_cells_vertices_list = []
    for point in triangulation.points:
        ordered = point.locus()
        voronoi_cells_vertices_list.append(
            [torch.tensor(center, dtype=COORDINATE_DTYPE) for center in ordered])

    return voronoi_cells_vertices_list, voronoi_vertices
