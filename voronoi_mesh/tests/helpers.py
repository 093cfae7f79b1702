import torch


def random_points(count: int, width: float = 1280.0, height: float = 720.0, seed: int = 0) -> torch.Tensor:
    generator = torch.Generator().manual_seed(seed)
    return torch.rand((count, 2), generator=generator, dtype=torch.float64) * torch.tensor([width, height], dtype=torch.float64)


def circumcircle_violations(triangles, coordinates: torch.Tensor, rel_tol: float = 1e-9) -> int:
    """Number of (triangle, point) pairs with the point strictly inside the triangle's circumcircle."""
    triangles = list(triangles)
    if not triangles:
        return 0
    centers = torch.tensor([tri.circumcircle.center for tri in triangles], dtype=torch.float64)
    radii = torch.tensor([tri.circumcircle.radius for tri in triangles], dtype=torch.float64)
    distances = torch.cdist(centers, coordinates.to(torch.float64))
    return int(torch.sum(distances < (radii * (1 - rel_tol)).unsqueeze(1)).item())


def side_lengths_squared(tri) -> list:
    corners = tri.corners
    return sorted(
        (corners[i].x - corners[(i + 1) % 3].x) ** 2 + (corners[i].y - corners[(i + 1) % 3].y) ** 2
        for i in range(3)
    )


def convex_hull_size(coordinates) -> int:
    """Number of strict convex-hull vertices (monotone chain, collinear points dropped)."""
    pts = sorted(set(map(tuple, coordinates.tolist())))
    if len(pts) < 3:
        return len(pts)

    def cross(o, a, b):
        return (a[0] - o[0]) * (b[1] - o[1]) - (a[1] - o[1]) * (b[0] - o[0])

    lower, upper = [], []
    for p in pts:
        while len(lower) >= 2 and cross(lower[-2], lower[-1], p) <= 0:
            lower.pop()
        lower.append(p)
    for p in reversed(pts):
        while len(upper) >= 2 and cross(upper[-2], upper[-1], p) <= 0:
            upper.pop()
        upper.append(p)
    return len(lower) + len(upper) - 2
