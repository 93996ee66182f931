import math

import pytest

from tetrino.components.bitmap import Bitmap
from tetrino.components.piece import Piece
from tetrino.systems.rotation import (
    quarter_turns,
    rotate,
    rotate_degrees,
    rotate_matrix,
    rotate_radians,
    round_half_away,
)

L_SHAPE = ["10", "10", "11"]


def test_round_half_away_from_zero():
    assert round_half_away(0.5) == 1
    assert round_half_away(2.5) == 3
    assert round_half_away(-0.5) == -1
    assert round_half_away(1.4) == 1


def test_quarter_turn_detection():
    assert quarter_turns(0.0) == 0
    assert quarter_turns(math.pi / 2) == 1
    assert quarter_turns(math.pi) == 2
    assert quarter_turns(-math.pi / 2) == 3
    assert quarter_turns(2 * math.pi) == 0
    assert quarter_turns(math.radians(45)) is None


def test_rotate_90_matches_matrix_formula():
    bitmap = Bitmap.from_rows(L_SHAPE)
    rotated = rotate_degrees(bitmap, 90)
    assert rotated == Bitmap.from_rows(["001", "111"])
    # the float path lands on the same cells for a right angle
    assert rotate_matrix(bitmap, math.pi / 2) == rotated


def test_rotate_180_and_270():
    bitmap = Bitmap.from_rows(L_SHAPE)
    assert rotate_degrees(bitmap, 180) == Bitmap.from_rows(["11", "01", "01"])
    assert rotate_degrees(bitmap, 270) == Bitmap.from_rows(["111", "100"])
    assert rotate_degrees(bitmap, -90) == rotate_degrees(bitmap, 270)


def test_four_quarter_turns_restore_original():
    original = Bitmap.from_rows(["110", "011", "010"])
    current = original
    for _ in range(4):
        current = rotate_degrees(current, 90)
    assert current == original
    assert current.stride == original.stride


@pytest.mark.parametrize("angle", [0, 360, 720])
def test_full_turns_are_noop(angle):
    bitmap = Bitmap.from_rows(L_SHAPE)
    rotated = rotate_degrees(bitmap, angle)
    assert rotated == bitmap
    assert rotated is not bitmap


def test_degrees_and_radians_agree():
    bitmap = Bitmap.from_rows(L_SHAPE)
    assert rotate_degrees(bitmap) == rotate_radians(bitmap)
    assert rotate_degrees(bitmap, 180) == rotate_radians(bitmap, math.pi)


def test_arbitrary_angle_never_gains_cells():
    bitmap = Bitmap.from_rows(["111", "101", "111"])
    for degrees in (30, 45, 60, 135):
        rotated = rotate(bitmap, math.radians(degrees))
        assert len(rotated.cells) == rotated.width * rotated.height
        assert rotated.count() <= bitmap.count()


def test_empty_bitmap_rotates_to_itself():
    bitmap = Bitmap(stride=0)
    assert rotate_degrees(bitmap, 45) == bitmap


def test_piece_rotation_replaces_bitmap():
    piece = Piece(level=4, shape=Bitmap.from_rows(L_SHAPE))
    piece.rotate_degrees()
    assert (piece.width(), piece.height()) == (3, 2)
    piece.rotate_radians(math.pi / 2)
    assert piece.shape == Bitmap.from_rows(["11", "01", "01"])
    assert piece.level == 4


def test_45_degree_rotation_follows_matrix_rounding():
    # (0,0) lands on new_y = -1 and folds back through the absolute index,
    # colliding with (0,1) on index 2.
    rotated = rotate(Bitmap.from_rows(L_SHAPE), math.radians(45))
    assert rotated == Bitmap.from_rows(["0010", "1001", "0000", "0000"])


def test_matrix_path_drops_cells_outside_new_bitmap():
    rotated = rotate(Bitmap.from_rows(["1"]), math.radians(45))
    assert rotated == Bitmap.from_rows(["0"])


@pytest.mark.parametrize("angle", [math.nan, math.inf, -math.inf])
def test_non_finite_angles_rejected(angle):
    with pytest.raises(ValueError, match="finite"):
        rotate_degrees(Bitmap.from_rows(["1"]), angle)
    with pytest.raises(ValueError, match="finite"):
        rotate_radians(Bitmap.from_rows(["1"]), angle)
