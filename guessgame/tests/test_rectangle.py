"""Tests for the rectangle-area calculator and the Rectangle model."""

import pytest

from guessgame.errors import InputReadError
from guessgame.models import Rectangle
from guessgame.rectangle import run_rectangle


# --- Rectangle ---

def test_area():
    assert Rectangle(width=3, height=4).area() == 12


def test_area_zero_side():
    assert Rectangle(width=0, height=50).area() == 0


def test_is_bigger_than():
    big = Rectangle(width=10, height=10)
    small = Rectangle(width=2, height=3)
    assert big.is_bigger_than(small)
    assert not small.is_bigger_than(big)


def test_is_bigger_than_is_strict():
    """Equal areas are not bigger, even with different shapes."""
    a = Rectangle(width=2, height=6)
    b = Rectangle(width=3, height=4)
    assert not a.is_bigger_than(b)
    assert not b.is_bigger_than(a)


# --- run_rectangle ---

def test_prints_area(scripted):
    io = scripted("30", "50")
    rect = run_rectangle(io)
    assert rect == Rectangle(width=30, height=50)
    assert io.output == [
        "Enter the width in pixels: ",
        "Enter the height in pixels: ",
        "The area of the rectangle is 1500 square pixels.",
    ]


def test_bad_width_stops_before_height(scripted):
    io = scripted("wide", "50")
    assert run_rectangle(io) is None
    assert io.output[-1] == "Invalid width. Width must be an integer!"
    assert io.reads == 1


def test_bad_height(scripted):
    io = scripted("30", "-2")
    assert run_rectangle(io) is None
    assert io.output[-1] == "Invalid height. Height must be an integer!"
    assert io.reads == 2


def test_large_sides_do_not_overflow(scripted):
    io = scripted("4294967295", "2")
    rect = run_rectangle(io)
    assert rect.area() == 8589934590


def test_read_failure_propagates(scripted):
    with pytest.raises(InputReadError):
        run_rectangle(scripted("30"))
