import logging
import math
import time
from collections import Counter

import torch

from .constants import COORDINATE_DTYPE, SUPER_POLYGON_MARGIN
from .geometry_algorithms import signed_area_2d
from .mesh_entities import MeshArena

logger = logging.getLogger(__name__)


def _coerce_points(points) -> list[tuple[float, float]]:
    """
    Normalises the accepted inputs, a (N, 2) tensor or any sequence of (x, y) pairs,
    into a list of float pairs.
    """
    if isinstance(points, torch.Tensor):
        if points.ndim != 2 or points.shape[1] != 2:
            raise ValueError(f"Input points tensor must be 2-dimensional with shape (N, 2), got {tuple(points.shape)}.")
        pairs = [(x, y) for x, y in points.detach().to(device='cpu', dtype=COORDINATE_DTYPE).tolist()]
    else:
        pairs = []
        for i, p in enumerate(points):
            try:
                x, y = p
                pairs.append((float(x), float(y)))
            except (TypeError, ValueError) as e:
                raise ValueError(f"Point {i} must be a pair of numbers, got {p!r}.") from e

    for i, (x, y) in enumerate(pairs):
        if not (math.isfinite(x) and math.isfinite(y)):
            raise ValueError(f"Point {i} has non-finite coordinates ({x}, {y}).")
    return pairs


class DelaunayTriangulation:
    """
    Delaunay triangulation of a 2D point set by the Bowyer-Watson algorithm, O(n^2) overall.

    Usage:
        dt = DelaunayTriangulation(points)
        triangles = dt.triangulate()
        cell = dt.points[0].locus()

    One triangulation pass per instance; calling `triangulate()` again returns the cached result.

    Attributes:
        points (tuple[TrianglePoint, ...]): The input points, in input order.
        coordinates (torch.Tensor): Shape (N, 2) float64 copy of the input coordinates.
        triangulation (frozenset[Triangle] | None): Final triangles, None until `triangulate()` has run.
        super_points (tuple[TrianglePoint, ...]): The four synthetic corners of the bounding square.
        stats (dict): Counters gathered during the run.
    """

    def __init__(self, points, shuffle: bool = False, seed: int | None = None):
        pairs = _coerce_points(points)
        self.mesh = MeshArena()
        self.points = tuple(self.mesh.add_point(x, y) for x, y in pairs)
        self.coordinates = torch.tensor(pairs, dtype=COORDINATE_DTYPE).reshape(-1, 2)
        self.shuffle = shuffle
        self.seed = seed
        self.super_points = ()
        self.triangulation = None
        self.stats = {}

    # --- Bounding super-polygon ---

    def _super_polygon_extent(self) -> float:
        """
        Half-width of the bounding square: max(x^2 + y^2) over the input, kept at least
        max(|x|, |y|) + SUPER_POLYGON_MARGIN * span, where span is the larger side of the
        input bounding box (1 when all points coincide).
        """
        if not self.points:
            return SUPER_POLYGON_MARGIN
        xs = [p.x for p in self.points]
        ys = [p.y for p in self.points]
        distance = max(x**2 + y**2 for x, y in zip(xs, ys))
        max_abs = max(max(abs(x) for x in xs), max(abs(y) for y in ys))
        span = max(max(xs) - min(xs), max(ys) - min(ys)) or 1.0
        return max(distance, max_abs + SUPER_POLYGON_MARGIN * span)

    def _seed_super_polygon(self):
        distance = self._super_polygon_extent()
        self.super_points = (
            self.mesh.add_point(distance, distance, is_synthetic=True),
            self.mesh.add_point(-distance, -distance, is_synthetic=True),
            self.mesh.add_point(distance, -distance, is_synthetic=True),
            self.mesh.add_point(-distance, distance, is_synthetic=True),
        )
        p0, p1, p2, p3 = self.super_points
        # Both halves wound counter-clockwise; every later triangle inherits the winding
        # of the bad triangle whose boundary edge it is built on.
        self.mesh.create_triangle(p0, p1, p2)
        self.mesh.create_triangle(p1, p0, p3)
        self.stats['triangles_created'] += 2
        logger.debug("Super-polygon half-width: %.6g", distance)

    def _insertion_order(self) -> list:
        if not self.shuffle:
            return list(self.points)
        generator = torch.Generator()
        if self.seed is not None:
            generator.manual_seed(self.seed)
        else:
            generator.seed()
        permutation = torch.randperm(len(self.points), generator=generator)
        return [self.points[i] for i in permutation.tolist()]

    # --- Incremental insertion ---

    def _find_bad_triangles(self, point) -> list:
        """Every working triangle whose circumcircle strictly contains the point."""
        return [tri for tri in self.mesh.triangles.values()
                if tri.circumcircle.contains(point.x, point.y)]

    @staticmethod
    def _polygon_boundary(bad_triangles) -> list:
        """
        Boundary of the polygonal hole left by the bad triangles: the edges that belong to
        exactly one bad triangle. An interior edge is walked in opposite directions by its two
        triangles, so sharing is decided on the undirected key; the kept edges retain the
        orientation of the triangle they came from.
        """
        edges = [edge for tri in bad_triangles for edge in tri.edges()]
        counts = Counter(edge.undirected_key() for edge in edges)
        return [edge for edge in edges if counts[edge.undirected_key()] == 1]

    def _insert_point(self, point):
        bad_triangles = self._find_bad_triangles(point)
        if not bad_triangles:
            # Only happens with degenerate (NaN) circles or coincident input
            self.stats['points_skipped'] += 1
            logger.debug("No circumcircle contains %r; point left out of the mesh.", point)
            return

        polygon = self._polygon_boundary(bad_triangles)
        for tri in bad_triangles:
            self.mesh.retire_triangle(tri)

        # re-triangulate the polygonal hole
        for edge in polygon:
            tri = self.mesh.create_triangle(point, edge.start, edge.end)
            if signed_area_2d(tri.a.coords, tri.b.coords, tri.c.coords) <= 0:
                self.stats['degenerate_triangles'] += 1

        self.stats['points_inserted'] += 1
        self.stats['triangles_retired'] += len(bad_triangles)
        self.stats['triangles_created'] += len(polygon)
        self.stats['peak_working_set'] = max(self.stats['peak_working_set'], self.mesh.triangle_count)

    # --- Cleanup ---

    def _remove_super_polygon(self):
        """
        Drops every triangle attached to a synthetic corner from the result. Triangles that
        still touch an input point stay in that point's parents (their circumcenters close
        the loci at the mesh boundary); triangles made only of synthetic corners are retired.
        """
        attached = {t_idx for sp in self.super_points for t_idx in sp.parents}
        for t_idx in sorted(attached):
            tri = self.mesh.triangle(t_idx)
            if all(corner.is_synthetic for corner in tri.corners):
                self.mesh.retire_triangle(tri)
            else:
                self.mesh.detach_triangle(tri)
        self.stats['super_triangles_removed'] = len(attached)

    def triangulate(self) -> frozenset:
        """
        Triangulation by the Bowyer-Watson algorithm.
        Returns:
            frozenset[Triangle]: The final Delaunay triangles; none of them has a synthetic corner.
                                 The result is cached on `self.triangulation`.
        """
        if self.triangulation is not None:
            logger.debug("triangulate() called again; returning the cached triangulation.")
            return self.triangulation

        start_time = time.perf_counter()
        self.stats = {
            'points_inserted': 0,
            'points_skipped': 0,
            'degenerate_triangles': 0,
            'triangles_created': 0,
            'triangles_retired': 0,
            'peak_working_set': 0,
            'super_triangles_removed': 0,
        }

        self._seed_super_polygon()

        # add all the points one at a time to the triangulation
        for point in self._insertion_order():
            self._insert_point(point)

        self._remove_super_polygon()
        self.triangulation = frozenset(self.mesh.triangles.values())

        elapsed = time.perf_counter() - start_time
        self.stats['elapsed_seconds'] = elapsed
        logger.info("Triangulated %d points into %d triangles in %.3f s",
                    len(self.points), len(self.triangulation), elapsed)
        if self.stats['points_skipped']:
            logger.warning("%d point(s) were not inserted (degenerate or duplicate input).",
                           self.stats['points_skipped'])
        if self.stats['degenerate_triangles']:
            logger.warning("%d triangle(s) were built with zero or clockwise area.",
                           self.stats['degenerate_triangles'])
        return self.triangulation

    # --- Results ---

    @property
    def locus_triangles(self) -> frozenset:
        """
        Triangles usable for locus derivation: the final triangulation plus the removed
        super-polygon-adjacent triangles that input points still reference.
        """
        if self.triangulation is None:
            return frozenset()
        return self.triangulation | frozenset(self.mesh.detached_triangles)

    def to_tensor(self, device=None) -> torch.Tensor:
        """
        Returns:
            torch.Tensor: Shape (M, 3), dtype long. Each row holds the input indices of one
                          triangle's corners (a, b, c). Rows are sorted. Empty (0, 3) if there
                          are no triangles.
        """
        if self.triangulation is None:
            self.triangulate()
        rows = sorted(tri.vertex_indices for tri in self.triangulation)
        if not rows:
            return torch.empty((0, 3), dtype=torch.long, device=device)
        return torch.tensor(rows, dtype=torch.long, device=device)


def delaunay_triangulation_2d(points: torch.Tensor, shuffle: bool = False, seed: int | None = None) -> torch.Tensor:
    """
    Computes the 2D Delaunay triangulation of a set of points using the Bowyer-Watson algorithm.
    Args:
        points (torch.Tensor): Tensor of shape (N, 2) representing N points in 2D.
        shuffle (bool): Insert points in a random order instead of input order.
        seed (int | None): Seed for the insertion order when shuffling.
    Returns:
        torch.Tensor: Tensor of shape (M, 3) representing M Delaunay triangles.
                      Each row contains the original indices of the three points forming a triangle.
                      Returns empty tensor (0,3) if N < 3.
    """
    dt = DelaunayTriangulation(points, shuffle=shuffle, seed=seed)
    dt.triangulate()
    return dt.to_tensor(device=points.device)
