class Point:
    """
    Simple mutable 2D point.

    Value-returning arithmetic (add, subtract, mult, div) creates new points,
    the *_in_place variants modify the receiver.
    """

    __slots__ = ('x', 'y')

    def __init__(self, x, y):
        self.x = x
        self.y = y

    def set(self, x, y):
        """Update the x and y coordinate of the point."""
        self.x = x
        self.y = y

    def distance_to_point(self, p):
        """Squared Euclidean distance to another point p."""
        dx = p.x - self.x
        dy = p.y - self.y
        return dx * dx + dy * dy

    def distance_to_position(self, x, y):
        """Squared Euclidean distance to the position (x, y)."""
        dx = x - self.x
        dy = y - self.y
        return dx * dx + dy * dy

    def add_in_place(self, p):
        self.x += p.x
        self.y += p.y

    def add(self, p):
        return Point(self.x + p.x, self.y + p.y)

    def subtract_in_place(self, p):
        self.x -= p.x
        self.y -= p.y

    def subtract(self, p):
        return Point(self.x - p.x, self.y - p.y)

    def div_in_place(self, s):
        self.x /= s
        self.y /= s

    def div(self, s):
        return Point(self.x / s, self.y / s)

    def mult_in_place(self, s):
        self.x *= s
        self.y *= s

    def mult(self, s):
        return Point(self.x * s, self.y * s)

    def clone(self):
        return Point(self.x, self.y)

    def equals(self, p):
        """
        Exact coordinate equality, no tolerance.

        Only meant for detecting literal duplicates (e.g. in the quadtree).
        """
        if p is None:
            return False
        return p.x == self.x and p.y == self.y

    def __eq__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return self.equals(other)

    # mutable, so not hashable
    __hash__ = None

    def __iter__(self):
        yield self.x
        yield self.y

    def __repr__(self):
        return f"Point({self.x!r}, {self.y!r})"


def as_points(data):
    """
    Convert input data to a list of Point objects.

    Args:
        data: sequence of Point objects or an array-like of shape (N, 2)

    Returns:
        list: Point objects (Point inputs are returned as-is, not copied)
    """
    points = []
    for item in data:
        if isinstance(item, Point):
            points.append(item)
        else:
            x, y = item
            points.append(Point(float(x), float(y)))
    return points
