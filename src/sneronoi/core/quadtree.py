"""
A 2D quadtree used by the Barnes-Hut repulsive force approximation.

See: https://en.wikipedia.org/wiki/Quadtree

Each node keeps the number of points in its subtree and their coordinate sum,
so the center of mass is available in O(1). Regions are half-open: a point on
the left/top edge belongs to the node, a point on the right/bottom edge does
not.
"""

from .point import Point
from .. import config

EMPTY = 'empty'
LEAF = 'leaf'
BRANCH = 'branch'


class Quadtree:
    """
    Quadtree node centered at (x, y) with the given half-dimension
    (used along both x and y).

    Node state is one of:
        EMPTY   no point, no children
        LEAF    exactly one held point, no children
        BRANCH  four children, plus optionally a residual held point that
                duplicates a point inserted below it

    Further copies of a residual point are counted in `multiplicity` on the
    same node instead of opening a new level per copy.
    """

    def __init__(self, x, y, half_dimension):
        self.center = Point(x, y)
        self.half_dimension = half_dimension
        self.count = 0  # number of points in this subtree
        self.point_sum = Point(0.0, 0.0)
        self.point = None
        self.multiplicity = 0  # copies of `point` held on this node

        self.top_left = None
        self.top_right = None
        self.bottom_left = None
        self.bottom_right = None

    @property
    def kind(self):
        if self.top_left is not None:
            return BRANCH
        if self.point is not None:
            return LEAF
        return EMPTY

    def children(self):
        """The four children in insertion order, or an empty tuple."""
        if self.top_left is None:
            return ()
        return (self.top_left, self.top_right, self.bottom_left, self.bottom_right)

    def centroid(self):
        return self.point_sum.div(self.count)

    def encloses_point(self, p):
        half = self.half_dimension
        return (self.center.x - half <= p.x < self.center.x + half and
                self.center.y - half <= p.y < self.center.y + half)

    def insert(self, p):
        """
        Insert a point into the tree.

        Returns:
            bool: False if the point lies outside this node's region
        """
        if not self.encloses_point(p):
            return False

        kind = self.kind
        if kind == EMPTY:
            self.point = p
            self.multiplicity = 1
            self._record(p)
            return True

        duplicate = p.equals(self.point)
        if kind == BRANCH and duplicate:
            self.multiplicity += 1
            self._record(p)
            return True

        # a held point identical to p must stay here, or subdivision would
        # never separate the two
        self.subdivide(no_move=duplicate)

        for child in self.children():
            if child.insert(p):
                self._record(p)
                return True

        # unreachable for a point inside our own region
        return False

    def subdivide(self, no_move=False):
        """
        Split into four children. Ignored if already subdivided.

        Args:
            no_move (bool): keep the held point on this node instead of
                pushing it down into a child
        """
        if self.top_left is not None:
            return

        half = self.half_dimension / 2
        x = self.center.x
        y = self.center.y
        self.top_left = Quadtree(x - half, y - half, half)
        self.top_right = Quadtree(x + half, y - half, half)
        self.bottom_left = Quadtree(x - half, y + half, half)
        self.bottom_right = Quadtree(x + half, y + half, half)

        if self.point is None or no_move:
            return

        # a leaf holds a single copy, so one insert moves it
        p = self.point
        self.point = None
        self.multiplicity = 0
        for child in self.children():
            if child.insert(p):
                return
        self.point = p
        self.multiplicity = 1

    def _record(self, p):
        self.count += 1
        self.point_sum.add_in_place(p)

    def __len__(self):
        return self.count

    def __repr__(self):
        return (f"Quadtree(center={self.center!r}, half_dimension={self.half_dimension!r}, "
                f"count={self.count}, kind={self.kind!r})")


def enclosing_extent(points):
    """
    Half-width of a square centered at (0, 0) that encloses all points,
    inflated a little for safety.
    """
    d = 0.0
    for p in points:
        d = max(d, abs(p.x), abs(p.y))
    if d == 0.0:
        # every point sits at the origin; a zero-width root would reject them
        d = 1.0
    return d * config.ENCLOSING_MARGIN


def build_quadtree(points):
    """Build a quadtree around the origin that holds every point."""
    qt = Quadtree(0.0, 0.0, enclosing_extent(points))
    for p in points:
        qt.insert(p)
    return qt
