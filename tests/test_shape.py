import pytest

from tetrogrid.ansi import Color
from tetrogrid.catalog import SHAPES, ShapeKind
from tetrogrid.framebuffer import Framebuffer
from tetrogrid.pixel import BACKGROUND, Pixel
from tetrogrid.rotation import Rotation
from tetrogrid.shape import Shape, round_half_down
from tetrogrid.vectors import Vector2


def _cells(shape):
    return [tuple(b) for b in shape.blocks]


# Canonical regression fixture for the I shape in every orientation.
I_ROTATIONS = {
    Rotation.NORTH: [(0, 2), (1, 2), (2, 2), (3, 2)],
    Rotation.EAST: [(1, 0), (1, 1), (1, 2), (1, 3)],
    Rotation.SOUTH: [(3, 2), (2, 2), (1, 2), (0, 2)],
    Rotation.WEST: [(2, 3), (2, 2), (2, 1), (2, 0)],
}


@pytest.mark.parametrize(
    "value, expected",
    [(0.5, 0), (0.6, 1), (1.0, 1), (1.5, 1), (2.5, 2), (0.0, 0), (-0.5, 0), (-0.6, -1)],
)
def test_round_half_down(value, expected):
    assert round_half_down(value) == expected


def test_o_shape_geometry_and_rotation_invariance():
    o = SHAPES[ShapeKind.O]
    box = o.bounding_box()
    assert box.start == Vector2(0, 0)
    assert box.end == Vector2(2, 2)
    assert o.rotation_center() == Vector2(0.5, 0.5)
    assert o.rounded_center() == Vector2(0, 0)
    for rotation in Rotation:
        assert set(_cells(o.rotated(rotation))) == set(_cells(o))


def test_i_shape_center_uses_longest_side():
    i = SHAPES[ShapeKind.I]
    assert i.bounding_box().width() == 4
    assert i.bounding_box().height() == 1
    assert i.rotation_center() == Vector2(1.5, 1.5)
    assert i.rounded_center() == Vector2(1, 1)


@pytest.mark.parametrize("rotation", list(Rotation))
def test_i_shape_rotation_fixture(rotation):
    assert _cells(SHAPES[ShapeKind.I].rotated(rotation)) == I_ROTATIONS[rotation]


def test_t_shape_half_turn_is_lowered():
    t = SHAPES[ShapeKind.T]
    assert _cells(t.rotated(Rotation.EAST)) == [(1, 0), (1, 1), (1, 2), (0, 1)]
    assert _cells(t.rotated(Rotation.SOUTH)) == [(2, 2), (1, 2), (0, 2), (1, 1)]


def test_half_turn_correction_only_for_flagged_shapes():
    blocks = SHAPES[ShapeKind.T].blocks
    plain = Shape(blocks, Pixel(Color.PURPLE), lower_on_180=False)
    lowered = Shape(blocks, Pixel(Color.PURPLE), lower_on_180=True)
    assert _cells(plain.rotated(Rotation.SOUTH)) == [(2, 1), (1, 1), (0, 1), (1, 0)]
    for rotation in (Rotation.NORTH, Rotation.EAST, Rotation.WEST):
        assert plain.rotated(rotation).blocks == lowered.rotated(rotation).blocks


def test_composed_quarter_turns_differ_from_direct_half_turn():
    i = SHAPES[ShapeKind.I]
    composed = i.rotated(Rotation.EAST).rotated(Rotation.EAST)
    assert _cells(composed) == [(3, 1), (2, 1), (1, 1), (0, 1)]
    assert _cells(i.rotated(Rotation.SOUTH)) == [(3, 2), (2, 2), (1, 2), (0, 2)]


def test_north_rotation_is_identical_copy():
    j = SHAPES[ShapeKind.J]
    assert j.rotated(Rotation.NORTH) == j


def test_absolute_blocks_center_on_anchor():
    i = SHAPES[ShapeKind.I]
    assert _cells_list(i.absolute_blocks(10, 5)) == [(9, 6), (10, 6), (11, 6), (12, 6)]
    o = SHAPES[ShapeKind.O]
    assert _cells_list(o.absolute_blocks(4, 4)) == [(4, 4), (5, 4), (4, 5), (5, 5)]


def _cells_list(blocks):
    return [tuple(b) for b in blocks]


def test_draw_to_writes_shape_pixels():
    fb = Framebuffer(20, 10)
    i = SHAPES[ShapeKind.I]
    i.draw_to(fb, 5, 5)
    for x in range(4, 8):
        assert fb.get_pixel(x, 6) == Pixel(Color.CYAN)
    assert fb.get_pixel(3, 6) == BACKGROUND
    assert fb.get_pixel(5, 5) == BACKGROUND


def test_draw_to_out_of_bounds_raises():
    fb = Framebuffer(20, 10)
    with pytest.raises(IndexError):
        SHAPES[ShapeKind.I].draw_to(fb, 0, 0)


def test_shape_validates_blocks():
    with pytest.raises(ValueError):
        Shape(((0, 0), (1, 0), (2, 0)), Pixel(Color.RED))
    with pytest.raises(ValueError):
        Shape(((0, 0), (1, 0), (2, 0), (-1, 0)), Pixel(Color.RED))
    shape = Shape(((0, 0), (1, 0), (2, 0), (3, 0)), Pixel(Color.RED))
    assert shape.blocks[3] == Vector2(3, 0)
