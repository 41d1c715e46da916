import pytest

from tetris_piece import KINDS, SHAPES, Piece, rotate, spawn, spawn_random, respawn
from tetris_rng import SequenceRandom


@pytest.mark.parametrize("kind", KINDS)
def test_four_rotations_return_to_the_base_shape(kind):
    p = spawn(kind)
    for _ in range(4):
        p = rotate(p)
    assert p.shape == SHAPES[kind]
    assert p.rotation == 0


def test_o_rotation_is_a_no_op():
    p = spawn("O")
    assert rotate(p) is p


def test_t_rotates_clockwise():
    p = rotate(spawn("T"))
    assert p.shape == ((0,1,0),
                       (0,1,1),
                       (0,1,0))
    assert p.rotation == 1


def test_i_is_recentered_between_states():
    p = rotate(spawn("I"))
    assert p.shape == ((0,1,0,0),) * 4
    p = rotate(p)
    assert p.shape == ((0,0,0,0), (1,1,1,1), (0,0,0,0), (0,0,0,0))
    p = rotate(p)
    assert p.shape == ((0,0,1,0),) * 4
    assert p.rotation == 3


def test_rotation_returns_a_new_piece():
    p = spawn("L")
    r = rotate(p)
    assert r is not p
    assert p.rotation == 0 and p.shape == SHAPES["L"]
    assert (r.x, r.y) == (p.x, p.y)


@pytest.mark.parametrize("kind,x", [("I", 3), ("O", 4), ("T", 3), ("S", 3)])
def test_spawn_is_centered_on_the_top_row(kind, x):
    p = spawn(kind)
    assert (p.x, p.y, p.rotation) == (x, 0, 0)


def test_spawn_random_uses_the_injected_source():
    rng = SequenceRandom("ZS")
    assert [spawn_random(rng).kind for _ in range(3)] == ["Z", "S", "Z"]


def test_respawn_resets_rotation_and_position():
    p = rotate(spawn("J")).moved(-2, 5)
    assert respawn(p) == spawn("J")


def test_cells_and_height():
    p = Piece("O", SHAPES["O"], 4, 7)
    assert sorted(p.cells()) == [(4,7), (4,8), (5,7), (5,8)]
    assert spawn("I").height == 1
    assert rotate(spawn("I")).height == 4
    assert spawn("T").height == 2


def test_unknown_kind_fails_fast():
    with pytest.raises(KeyError):
        spawn("X")
