import argparse
import logging
import time

import torch

from .constants import DEFAULT_HEIGHT, DEFAULT_POINT_COUNT, DEFAULT_WIDTH
from .delaunay_2d import DelaunayTriangulation
from .logging_config import setup_logging


def sample_points(count: int, width: float, height: float, seed: int | None = None) -> torch.Tensor:
    """Uniform random points in the [0, width] x [0, height] box, shape (count, 2)."""
    generator = torch.Generator()
    if seed is not None:
        generator.manual_seed(seed)
    else:
        generator.seed()
    unit = torch.rand((count, 2), generator=generator, dtype=torch.float64)
    return unit * torch.tensor([width, height], dtype=torch.float64)


def main(argv=None):
    parser = argparse.ArgumentParser(description='Bowyer-Watson Delaunay triangulation and Voronoi loci of random points')
    parser.add_argument('--points', type=int, default=DEFAULT_POINT_COUNT, help='Number of random points')
    parser.add_argument('--width', type=float, default=DEFAULT_WIDTH)
    parser.add_argument('--height', type=float, default=DEFAULT_HEIGHT)
    parser.add_argument('--seed', type=int, default=None, help='Seed for point sampling and insertion order')
    parser.add_argument('--shuffle', action='store_true', help='Insert points in random order')
    parser.add_argument('--verbose', action='store_true', help='Debug logging')
    args = parser.parse_args(argv)

    if args.points < 0:
        parser.error('--points must be non-negative')

    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)

    points = sample_points(args.points, args.width, args.height, seed=args.seed)
    delaunay = DelaunayTriangulation(points, shuffle=args.shuffle, seed=args.seed)
    start = time.perf_counter()
    triangles = delaunay.triangulate()
    elapsed = time.perf_counter() - start

    locus_lengths = [len(p.locus()) for p in delaunay.points]
    mean_locus = sum(locus_lengths) / len(locus_lengths) if locus_lengths else 0.0

    print('Triangles count:', len(triangles), 'calculated by', f'{elapsed:.3f}', 'seconds')
    print(f'Mean locus length: {mean_locus:.2f}')
    return 0


if __name__ == '__main__':
    main()
