from .geometry_algorithms import Circumcircle, compute_circumcircle_2d
from .voronoi_from_delaunay import order_locus


class TrianglePoint:
    """
    A mesh vertex. Identity-based: two points with equal coordinates are still distinct
    unless they are the same object.

    `parents` holds the indices of the triangles that currently use this point as a corner.
    The point holds its arena, so triangles handed to a caller keep resolvable loci after
    the engine that built them is gone.
    """

    def __init__(self, index: int, x: float, y: float, arena=None, is_synthetic: bool = False):
        self.index = index
        self.x = float(x)
        self.y = float(y)
        self.is_synthetic = is_synthetic
        self.parents = set()
        self._arena = arena

    @property
    def coords(self) -> tuple[float, float]:
        return (self.x, self.y)

    def parent_triangles(self) -> list:
        if self._arena is None:
            raise RuntimeError(f"Point {self.index} is not attached to a mesh.")
        return [self._arena.triangle(t_idx) for t_idx in self.parents]

    def locus(self) -> list[tuple[float, float]]:
        """
        Voronoi cell boundary of this point: the circumcenters of every parent triangle,
        ordered by polar angle around the point.
        """
        return order_locus(self, [tri.circumcircle.center for tri in self.parent_triangles()])

    def __repr__(self):
        kind = "synthetic" if self.is_synthetic else "input"
        return f"TrianglePoint({self.index}, x={self.x:.6g}, y={self.y:.6g}, {kind})"


class Edge:
    """
    Ordered edge start -> end. Equality and hashing are orientation-sensitive;
    use `undirected_key()` when the orientation should not matter.
    """

    def __init__(self, start: TrianglePoint, end: TrianglePoint):
        self.start = start
        self.end = end

    def undirected_key(self) -> tuple[int, int]:
        """Canonical unordered pair of endpoint indices."""
        i, j = self.start.index, self.end.index
        return (i, j) if i <= j else (j, i)

    def __eq__(self, other):
        if not isinstance(other, Edge):
            return NotImplemented
        return self.start is other.start and self.end is other.end

    def __hash__(self):
        return hash((id(self.start), id(self.end)))

    def __repr__(self):
        return f"Edge({self.start.index} -> {self.end.index})"


class Triangle:
    """
    Three corner points plus the circumcircle computed from them at construction.
    Corners never change, so the circumcircle stays consistent for the triangle's lifetime.
    """

    def __init__(self, index: int, a: TrianglePoint, b: TrianglePoint, c: TrianglePoint,
                 circumcircle: Circumcircle | None = None):
        self.index = index
        self.a = a
        self.b = b
        self.c = c
        if circumcircle is None:
            circumcircle = compute_circumcircle_2d(a.coords, b.coords, c.coords)
        self.circumcircle = circumcircle

    @property
    def corners(self) -> tuple[TrianglePoint, TrianglePoint, TrianglePoint]:
        return (self.a, self.b, self.c)

    @property
    def vertex_indices(self) -> tuple[int, int, int]:
        return (self.a.index, self.b.index, self.c.index)

    def edges(self) -> list[Edge]:
        """Raw ordered edges following the corner cycle a -> b -> c -> a."""
        return [Edge(self.a, self.b), Edge(self.b, self.c), Edge(self.c, self.a)]

    def has_vertex(self, point: TrianglePoint) -> bool:
        return point is self.a or point is self.b or point is self.c

    def __repr__(self):
        return f"Triangle({self.index}: {self.a.index}, {self.b.index}, {self.c.index})"


class MeshArena:
    """
    Owns every live point and triangle of a mesh and hands out their stable indices.

    Triangles are addressed by index; a point's `parents` set is an index over the
    arena's triangles and is kept in step by `create_triangle` / `retire_triangle`.
    `detach_triangle` drops a triangle from the arena's working set but leaves it
    resolvable through the points that still reference it.
    """

    def __init__(self):
        self.points = []
        self.triangles = {}
        self._detached = {}
        self._next_triangle_index = 0

    def add_point(self, x: float, y: float, is_synthetic: bool = False) -> TrianglePoint:
        point = TrianglePoint(len(self.points), x, y, arena=self, is_synthetic=is_synthetic)
        self.points.append(point)
        return point

    def create_triangle(self, a: TrianglePoint, b: TrianglePoint, c: TrianglePoint) -> Triangle:
        tri = Triangle(self._next_triangle_index, a, b, c)
        self._next_triangle_index += 1
        self.triangles[tri.index] = tri
        for corner in tri.corners:
            corner.parents.add(tri.index)
        return tri

    def retire_triangle(self, tri: Triangle):
        """Deregisters the triangle from all three corners, then drops it."""
        for corner in tri.corners:
            corner.parents.discard(tri.index)
        self.triangles.pop(tri.index, None)
        self._detached.pop(tri.index, None)

    def detach_triangle(self, tri: Triangle):
        """Removes the triangle from the working set without touching corner parent sets."""
        if self.triangles.pop(tri.index, None) is not None:
            self._detached[tri.index] = tri

    def triangle(self, index: int) -> Triangle:
        tri = self.triangles.get(index)
        if tri is None:
            tri = self._detached.get(index)
        if tri is None:
            raise KeyError(f"Triangle {index} is not in this mesh.")
        return tri

    @property
    def detached_triangles(self) -> list[Triangle]:
        return list(self._detached.values())

    @property
    def triangle_count(self) -> int:
        return len(self.triangles)
