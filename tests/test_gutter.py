from wmstate.gutter import Gutter, Side


def test_default_gutter():
    g = Gutter()
    assert g.side is Side.TOP
    assert g.value == 0
    assert g.wsid is None


def test_side_order_follows_declaration():
    gutters = [
        Gutter(Side.RIGHT, 0, None),
        Gutter(Side.TOP, 0, None),
        Gutter(Side.LEFT, 0, None),
        Gutter(Side.BOTTOM, 0, None),
    ]
    assert [g.side for g in sorted(gutters)] == [
        Side.TOP,
        Side.BOTTOM,
        Side.LEFT,
        Side.RIGHT,
    ]


def test_gutters_sort_by_side_then_value():
    a = Gutter(Side.LEFT, 5, None)
    b = Gutter(Side.TOP, 9, None)
    c = Gutter(Side.TOP, 1, None)
    assert sorted([a, b, c]) == [c, b, a]


def test_gutter_without_workspace_sorts_first():
    general = Gutter(Side.TOP, 1, None)
    specific = Gutter(Side.TOP, 1, 0)
    assert sorted([specific, general]) == [general, specific]


def test_gutter_equality():
    assert Gutter(Side.BOTTOM, 3, 2) == Gutter(Side.BOTTOM, 3, 2)
    assert not Gutter(Side.BOTTOM, 3, 2) == Gutter(Side.BOTTOM, 3, None)