import pytest

from loa.core import Move, NotationError, Piece, Square, sq


def test_square_lookup_by_notation_and_coordinates() -> None:
    c4 = sq("c4")
    assert c4 is sq(2, 3)
    assert c4 == Square.parse("c4")
    assert (c4.col, c4.row, c4.index) == (2, 3, 26)
    assert str(c4) == "c4"


@pytest.mark.parametrize(
    "target, direction",
    [("c6", 0), ("e6", 1), ("e4", 2), ("e2", 3), ("c2", 4), ("a2", 5), ("a4", 6), ("a6", 7)],
)
def test_direction_follows_compass_order(target: str, direction: int) -> None:
    assert sq("c4").direction(sq(target)) == direction


def test_direction_undefined_off_lines() -> None:
    assert sq("c4").direction(sq("d6")) is None
    assert sq("c4").direction(sq("c4")) is None
    assert not sq("b1").is_valid_move(sq("c3"))


def test_distance_and_move_dest() -> None:
    assert sq("c4").distance(sq("e6")) == 2
    assert sq("c4").distance(sq("c8")) == 4
    assert sq("a1").move_dest(0, 7) == sq("a8")
    assert sq("a1").move_dest(4, 1) is None
    assert sq("h8").move_dest(1, 1) is None
    assert sq("d4").move_dest(3, 3) == sq("g1")


def test_adjacent_squares() -> None:
    assert set(sq("a1").adjacent()) == {sq("a2"), sq("b2"), sq("b1")}
    assert len(sq("d4").adjacent()) == 8
    assert len(sq("h5").adjacent()) == 5


@pytest.mark.parametrize("bad", ["i1", "a9", "a0", "a", "c44", "C4", ""])
def test_malformed_square_notation_rejected(bad: str) -> None:
    with pytest.raises(NotationError):
        Square.parse(bad)
    with pytest.raises(NotationError):
        sq(bad)


def test_move_notation_round_trip() -> None:
    move = Move(sq("c4"), sq("d5"))
    assert str(move) == "c4d5"
    assert Move.parse(str(move)) == move
    with pytest.raises(NotationError):
        Move.parse("c4d")
    with pytest.raises(NotationError):
        Move.parse("c4z5")


def test_move_equality_ignores_capture_flag() -> None:
    plain = Move.parse("c1a3")
    capture = plain.capture_move()
    assert capture.capture and not plain.capture
    assert plain == capture
    assert hash(plain) == hash(capture)


def test_piece_opposite() -> None:
    assert Piece.WHITE.opposite() == Piece.BLACK
    assert Piece.BLACK.opposite() == Piece.WHITE
    with pytest.raises(ValueError):
        Piece.EMPTY.opposite()
    assert Piece.BLACK.full_name == "Black"
    assert Piece.EMPTY.abbrev == "-"
