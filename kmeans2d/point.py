import math


class Point:
    """A 2D sample with a stable id and the group it currently belongs to.

    ``position`` is the zero-based load order slot; groups refer to points
    by position, not by object.
    """

    __slots__ = ('_position', '_id', '_x', '_y', 'group_id')

    def __init__(self, position, id, x, y):
        self._position = int(position)
        self._id = int(id)
        self._x = float(x)
        self._y = float(y)
        self.group_id = None

    @property
    def position(self):
        return self._position

    @property
    def id(self):
        return self._id

    @property
    def x(self):
        return self._x

    @property
    def y(self):
        return self._y

    def set_group(self, group_id):
        self.group_id = group_id

    def distance_to(self, x, y):
        return math.hypot(self._x - x, self._y - y)

    def __repr__(self):
        return 'Point(id=%d, x=%g, y=%g, group_id=%s)' % (
            self._id, self._x, self._y, self.group_id)
