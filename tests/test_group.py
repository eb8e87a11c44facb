from kmeans2d.group import Group
from kmeans2d.point import Point


def make_points(*coords):
    return [Point(i, i + 1, x, y) for i, (x, y) in enumerate(coords)]


def test_add_and_clear_members():
    points = make_points((0, 0), (1, 1))
    g = Group(1, 0, 0)
    g.add_member(points[1])
    g.add_member(points[0])
    assert g.members == (1, 0)
    assert len(g) == 2
    assert points[0].group_id is None

    g.clear_members()
    assert g.members == ()
    assert g.center == (0.0, 0.0)


def test_recompute_center_is_member_mean():
    points = make_points((0, 0), (2, 0), (4, 6))
    g = Group(1, 0, 0)
    for p in points:
        g.add_member(p)
    assert g.recompute_center(points) is True
    assert g.center == (2.0, 2.0)


def test_recompute_center_unchanged():
    points = make_points((1, 1), (3, 3))
    g = Group(1, 2, 2)
    for p in points:
        g.add_member(p)
    assert g.recompute_center(points) is False
    assert g.center == (2.0, 2.0)


def test_only_one_coordinate_changed():
    points = make_points((1, 5))
    g = Group(1, 1, 0)
    g.add_member(points[0])
    assert g.recompute_center(points) is True


def test_empty_group_keeps_center():
    g = Group(2, 3.5, -1.0)
    assert g.recompute_center([]) is False
    assert g.center == (3.5, -1.0)


def test_members_view_is_a_copy():
    points = make_points((0, 0))
    g = Group(1, 0, 0)
    g.add_member(points[0])
    members = g.members
    g.clear_members()
    assert members == (0,)


def test_describe():
    g = Group(2, 0.5, 10)
    text = g.describe()
    assert 'Cluster ID       : 2' in text
    assert 'Center Coordinates: (0.5, 10)' in text
