"""
Nearest-neighbor search over 2D points.

The ideal way to implement this is with a vantage-point tree
(van der Maaten, JMLR 2014), but for now we do the naive all-against-all
search. That is fine because it runs once per optimization, not per step.
"""

from collections import namedtuple

NeighborEntry = namedtuple('NeighborEntry', ['index', 'distance'])


class NearestNeighbors:
    """
    Builds the list of the u nearest neighbors of every point.

    Args:
        points (list): Point objects
        u (int): number of neighbors to keep per point
    """

    def __init__(self, points, u):
        self.points = points
        self.u = u
        self.n = len(points)
        self.neighbors = None
        self.find_neighbors()

    def find_neighbors(self):
        # first compute all-by-all distances, then prune
        self.neighbors = []
        for i in range(self.n):
            p = self.points[i]
            row = [NeighborEntry(j, p.distance_to_point(q))
                   for j, q in enumerate(self.points) if j != i]
            # sorted() is stable, so ties keep index order
            row = sorted(row, key=lambda entry: entry.distance)
            self.neighbors.append(row[:self.u])

    def get_neighbors(self):
        """Nested list holding the sorted NeighborEntry rows, one per point."""
        return self.neighbors
