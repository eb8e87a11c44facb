class Group:
    """A cluster: an id in 1..K, a center and the positions of its members.

    Membership is a view into the engine's point list; a group never owns
    the points it refers to.
    """

    def __init__(self, id, center_x, center_y):
        self.id = id
        self.center_x = float(center_x)
        self.center_y = float(center_y)
        self._members = []

    @property
    def center(self):
        return self.center_x, self.center_y

    @property
    def members(self):
        return tuple(self._members)

    def __len__(self):
        return len(self._members)

    def clear_members(self):
        self._members.clear()

    def add_member(self, point):
        self._members.append(point.position)

    def recompute_center(self, points):
        """Move the center to the mean of the members.

        Returns True if either coordinate changed. An empty group keeps its
        last center and reports no change, so it can stay empty for the rest
        of the run.
        """
        if not self._members:
            return False

        sum_x = 0.0
        sum_y = 0.0
        for position in self._members:
            point = points[position]
            sum_x += point.x
            sum_y += point.y

        n = len(self._members)
        new_x = sum_x / n
        new_y = sum_y / n
        changed = new_x != self.center_x or new_y != self.center_y

        self.center_x = new_x
        self.center_y = new_y
        return changed

    def describe(self):
        return '\n'.join([
            'Cluster Information:',
            '--------------------',
            'Cluster ID       : %d' % self.id,
            'Center Coordinates: (%g, %g)' % (self.center_x, self.center_y),
            'Members          : %d' % len(self._members),
            '--------------------',
        ])

    def __repr__(self):
        return 'Group(id=%d, center=(%g, %g), members=%d)' % (
            self.id, self.center_x, self.center_y, len(self._members))
