import math

import torch

from .constants import COORDINATE_DTYPE


class Circumcircle:
    """
    Circle through the three corners of a triangle.

    Stored as plain floats: the containment test runs once per (triangle, inserted point)
    pair, so it stays off the tensor path.
    """

    def __init__(self, center: tuple[float, float], radius: float):
        self.center = (float(center[0]), float(center[1]))
        self.radius = float(radius)

    def contains(self, x: float, y: float) -> bool:
        """
        Checks if (x, y) lies strictly inside the circle.
        Points exactly on the circle are not inside. A NaN radius (degenerate triangle)
        never contains anything.
        """
        return math.dist(self.center, (x, y)) < self.radius

    def center_tensor(self, dtype: torch.dtype = COORDINATE_DTYPE) -> torch.Tensor:
        return torch.tensor(self.center, dtype=dtype)

    def __eq__(self, other):
        if not isinstance(other, Circumcircle):
            return NotImplemented
        return self.center == other.center and self.radius == other.radius

    def __hash__(self):
        return hash((self.center, self.radius))

    def __repr__(self):
        return f"Circumcircle(center=({self.center[0]:.6g}, {self.center[1]:.6g}), radius={self.radius:.6g})"


def compute_circumcircle_2d(a, b, c) -> Circumcircle:
    """
    Computes the circumscribed circle of a 2D triangle from the determinant formulas
    (Wikipedia: Circumscribed circle, Cartesian coordinates).

    Args:
        a, b, c: (x, y) pairs or torch.Tensor of shape (2,) representing the triangle vertices.
    Returns:
        Circumcircle: center S / A and radius sqrt(B / A + |S|^2 / A^2), where
            L(p) = px^2 + py^2,
            S = (det[[La, ay, 1], ...], det[[ax, La, 1], ...]) / 2,
            A = det[[ax, ay, 1], ...] (twice the signed area),
            B = det[[ax, ay, La], ...].
        Collinear or coincident corners give A == 0 and an infinite / NaN circle;
        no guard is applied.
    """
    corners = torch.stack([torch.as_tensor(p, dtype=COORDINATE_DTYPE) for p in (a, b, c)])
    xs = corners[:, 0]
    ys = corners[:, 1]
    lengths = xs**2 + ys**2
    ones = torch.ones_like(xs)

    # Batch the four 3x3 determinants into one call: D1, D2, A, B
    matrices = torch.stack([
        torch.stack([lengths, ys, ones], dim=1),
        torch.stack([xs, lengths, ones], dim=1),
        torch.stack([xs, ys, ones], dim=1),
        torch.stack([xs, ys, lengths], dim=1),
    ])
    d1, d2, av, bv = torch.linalg.det(matrices)

    s = torch.stack([d1, d2]) / 2
    center = s / av
    radius = torch.sqrt(bv / av + torch.sum(s**2) / av**2)
    return Circumcircle(tuple(center.tolist()), radius.item())


def polar_angle(origin_x: float, origin_y: float, x: float, y: float) -> float:
    """Angle of (x, y) as seen from the origin point, in (-pi, pi]."""
    return math.atan2(y - origin_y, x - origin_x)


def signed_area_2d(a, b, c) -> float:
    """
    Twice the signed area of triangle abc. Positive for counter-clockwise winding.
    """
    return (b[0] - a[0]) * (c[1] - a[1]) - (b[1] - a[1]) * (c[0] - a[0])
