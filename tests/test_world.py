from playkit.world import World, default_world


def test_default_world_dims():
    assert default_world().dims() == (10, 10)


def test_default_world_cells():
    w = default_world()
    assert not w.empty_at(0, 0)
    assert w.empty_at(1, 1)
    assert not w.empty_at(1, 2)


def test_outside_is_wall():
    w = default_world()
    assert not w.empty_at(-1, 1)
    assert not w.empty_at(1, -1)
    assert not w.empty_at(10, 1)
    assert not w.empty_at(1, 10)


def test_parse_skips_blank_lines_and_tracks_widest_row():
    w = World.parse("\n   ..\n\n  +...+  \n\n")
    assert w.rows == ["..", "+...+"]
    assert w.dims() == (2, len("+...+"))
    assert not w.empty_at(0, 3)
    assert w.empty_at(1, 3)


def test_parse_empty_text():
    assert World.parse("   \n\n").dims() == (0, 0)