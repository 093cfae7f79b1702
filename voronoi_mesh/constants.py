# voronoi_mesh/constants.py
import torch

# Lower bound on the super-polygon half-width beyond the largest absolute input
# coordinate, as a multiple of the input bounding-box span. Synthetic corners closer
# than this end up inside circumcircles of convex-hull triangles and cut them away.
SUPER_POLYGON_MARGIN = 1000.0

# dtype used for determinant evaluation and tensor export
COORDINATE_DTYPE = torch.float64

# Demo defaults (1000 points in a 1280x720 box)
DEFAULT_POINT_COUNT = 1000
DEFAULT_WIDTH = 1280.0
DEFAULT_HEIGHT = 720.0

# Print constants for verification
if __name__ == '__main__':
    print(f"Super-polygon margin: {SUPER_POLYGON_MARGIN}")
    print(f"Coordinate dtype: {COORDINATE_DTYPE}")
    print(f"Demo box: {DEFAULT_POINT_COUNT} points in {DEFAULT_WIDTH} x {DEFAULT_HEIGHT}")
