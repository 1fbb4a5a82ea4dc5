"""Tests for models.Track and the camel colours."""

import pytest

from config import FINISH_SLOT, TRACK_LENGTH
from models import RACING_COLORS, WILD_COLORS, CamelColor, InvariantViolation, Track


# ── colours ──────────────────────────────────────────────────────────

def test_five_racing_and_two_wild_colors():
    assert len(RACING_COLORS) == 5
    assert set(WILD_COLORS) == {CamelColor.BLACK, CamelColor.WHITE}
    assert all(c.is_racing for c in RACING_COLORS)
    assert not any(c.is_racing for c in WILD_COLORS)


# ── placement & lookup ───────────────────────────────────────────────

def test_new_track_is_empty():
    track = Track()
    assert len(track.spaces) == TRACK_LENGTH
    assert track.camels() == []
    assert track.losing() is None


def test_place_stacks_in_order():
    track = Track()
    track.place(CamelColor.RED, 1)
    track.place(CamelColor.BLUE, 1)
    assert track.spaces[1] == [CamelColor.RED, CamelColor.BLUE]
    assert track.locate(CamelColor.BLUE) == (1, 1)


def test_place_rejects_duplicate_and_out_of_range():
    track = Track()
    track.place(CamelColor.RED, 0)
    with pytest.raises(InvariantViolation):
        track.place(CamelColor.RED, 2)
    with pytest.raises(InvariantViolation):
        track.place(CamelColor.BLUE, TRACK_LENGTH)


def test_locate_missing_camel_raises():
    with pytest.raises(InvariantViolation):
        Track().locate(CamelColor.GREEN)


# ── advance ──────────────────────────────────────────────────────────

def test_advance_moves_camel_and_everything_above(example_track):
    example_track.advance(CamelColor.YELLOW, 2)
    assert example_track.spaces[2] == [CamelColor.BLUE]
    assert example_track.spaces[4] == [CamelColor.YELLOW, CamelColor.PURPLE]


def test_advance_lands_on_top_of_destination_stack(example_track):
    example_track.advance(CamelColor.RED, 2)
    assert example_track.spaces[0] == []
    assert example_track.spaces[2] == [
        CamelColor.BLUE,
        CamelColor.YELLOW,
        CamelColor.PURPLE,
        CamelColor.RED,
    ]


def test_advance_preserves_stack_adjacency(example_track):
    example_track.advance(CamelColor.BLUE, 1)
    example_track.advance(CamelColor.GREEN, 2)
    slot, height = example_track.locate(CamelColor.PURPLE)
    assert example_track.spaces[slot][height - 1] == CamelColor.YELLOW


def test_advance_conserves_camels(example_track):
    example_track.place(CamelColor.BLACK, 2)
    before = sorted(example_track.camels())
    for color, number in [
        (CamelColor.BLUE, 3),
        (CamelColor.RED, 1),
        (CamelColor.PURPLE, 2),
        (CamelColor.GREEN, 3),
        (CamelColor.YELLOW, 1),
    ]:
        example_track.advance(color, number)
        assert sorted(example_track.camels()) == before


def test_advance_rejects_missing_camel_and_bad_distance(example_track):
    with pytest.raises(InvariantViolation):
        example_track.advance(CamelColor.WHITE, 1)
    with pytest.raises(InvariantViolation):
        example_track.advance(CamelColor.RED, 0)


def test_advance_exactly_to_last_slot():
    track = Track()
    track.place(CamelColor.RED, FINISH_SLOT - 3)
    assert track.advance(CamelColor.RED, 3) == FINISH_SLOT
    assert track.spaces[FINISH_SLOT] == [CamelColor.RED]


def test_advance_one_past_last_slot_is_clamped():
    track = Track()
    track.place(CamelColor.RED, FINISH_SLOT - 3)
    track.place(CamelColor.GREEN, FINISH_SLOT - 2)
    track.advance(CamelColor.RED, 3)
    assert track.advance(CamelColor.GREEN, 3) == FINISH_SLOT
    assert track.spaces[FINISH_SLOT] == [CamelColor.RED, CamelColor.GREEN]


# ── losing / leading ─────────────────────────────────────────────────

def test_losing_is_rearmost_camel(example_track):
    assert example_track.losing() == CamelColor.RED


def test_losing_on_single_shared_slot_is_bottom_camel():
    track = Track()
    for color in [CamelColor.PURPLE, CamelColor.RED, CamelColor.BLUE]:
        track.place(color, 0)
    assert track.losing() == CamelColor.PURPLE


def test_losing_skips_wild_camels():
    track = Track()
    track.place(CamelColor.BLACK, 0)
    track.place(CamelColor.GREEN, 0)
    track.place(CamelColor.RED, 1)
    assert track.losing() == CamelColor.GREEN


def test_leading_is_top_of_foremost_stack(example_track):
    assert example_track.leading() == CamelColor.PURPLE


# ── clone & describe ─────────────────────────────────────────────────

def test_clone_shares_no_state(example_track):
    copy = example_track.clone()
    copy.advance(CamelColor.BLUE, 3)
    assert example_track.spaces[2] == [CamelColor.BLUE, CamelColor.YELLOW, CamelColor.PURPLE]
    assert copy.spaces[2] == []


def test_describe_one_line_per_slot(example_track):
    lines = example_track.describe()
    assert len(lines) == TRACK_LENGTH
    assert lines[2] == "2 : [Blue, Yellow, Purple]"
    assert lines[15] == "f : []"
