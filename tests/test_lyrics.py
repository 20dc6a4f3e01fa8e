# -*- coding: utf-8 -*-
#
# This file is part of `karaoke`, a library for ABC notation songs with lyrics
#
# Copyright © 2019-2020 by Wilbert Berendsen <info@wilbertberendsen.nl>
#
# This module is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This module is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.



"""
Test aligning and displaying lyrics.
"""

from fractions import Fraction
import logging

### find karaoke
import sys
sys.path.insert(0, '.')

from karaoke.dom import abc, read
from karaoke.lyrics import align, display, BLANK, EXTEND, NEWLINE


Q = Fraction(1, 4)


def tokens(text):
    """Return the lyric tokens of a ``w:`` line."""
    doc = read.abc_document("X:1\nT:Lyrics\nK:C\nw:" + text + "\n")
    return list(doc.body[0])


def notes(count):
    return [abc.Note('C') for _ in range(count)]


def test_main():
    elements = notes(3) + [abc.Barline()]
    slots = align(tokens("a b c"), elements, [Q, Q, Q, 0])
    assert slots == ['a', 'b', 'c', BLANK]
    assert len(slots) == len(elements)

    # hyphens separate syllables
    assert align(tokens("hel-lo"), notes(2), [Q, Q]) == ['hel', 'lo']
    # a trailing hyphen leaves a blank
    assert align(tokens("a-"), notes(3), [Q, Q, Q]) == ['a', BLANK, NEWLINE]


def test_markers():
    assert align(tokens("a _ b"), notes(3), [Q, Q, Q]) == ['a', EXTEND, 'b']
    assert align(tokens("a * b"), notes(3), [Q, Q, Q]) == ['a', BLANK, 'b']
    # a bar skips the remaining notes of the measure
    elements = notes(2) + [abc.Barline()] + notes(1)
    assert align(tokens("a | b"), elements, [Q, Q, 0, Q]) == ['a', BLANK, BLANK, 'b']
    # elements without duration get a blank
    elements = [abc.StartRepeat()] + notes(1)
    assert align(tokens("a"), elements, [0, Q]) == [BLANK, 'a']


def test_joining():
    assert align(tokens("a~b c"), notes(2), [Q, Q]) == ['a b', 'c']
    assert align(tokens("sing\\-a"), notes(1), [Q]) == ['sing-a']
    # joining needs no slot of its own, also when all slots are filled
    assert align(tokens("a~b"), notes(1), [Q]) == ['a b']
    assert align(tokens("a b ~ c"), notes(2), [Q, Q]) == ['a', 'b c']


def test_padding(caplog):
    # too few syllables
    assert align(tokens("a"), notes(3), [Q, Q, Q]) == ['a', NEWLINE, BLANK]
    # too many syllables
    with caplog.at_level(logging.WARNING, logger="karaoke.lyrics"):
        assert align(tokens("a b c"), notes(1), [Q]) == ['a']
    assert "2 lyric syllables" in caplog.text


def test_line_without_barline(caplog):
    # the end of the first line takes a blank before the newline marker, so
    # the newline marker falls on the first note of the next line
    elements = notes(2) + [abc.EndOfLine()] + notes(2) + [abc.EndOfLine()]
    with caplog.at_level(logging.WARNING, logger="karaoke.lyrics"):
        slots = align(tokens("a b") + tokens("c d"), elements, [Q, Q, 0, Q, Q, 0])
    assert slots == ['a', 'b', BLANK, NEWLINE, 'c', BLANK]
    assert "1 lyric syllables" in caplog.text


def test_display():
    lyrics = display(['a', EXTEND, 'b'], [Q, Q, Q])
    assert [l.length for l in lyrics] == [Fraction(1, 2), 0, Q]
    assert lyrics[0].text == " <mark>a</mark>    b"
    assert lyrics[1].text == BLANK
    assert "<mark>b</mark>" in lyrics[2].text

    # a new line of lyrics
    lyrics = display(['a', NEWLINE, 'b'], [Q, 0, Q])
    assert [l.text for l in lyrics] == [" <mark>a</mark> ", BLANK, " <mark>b</mark> "]

    # the last slot is left out when it takes no time
    assert len(display(['a', BLANK], [Q, 0])) == 1
    assert len(display(['a', BLANK], [Q, Q])) == 2
    assert len(display(['a', NEWLINE], [Q, 0])) == 1


if __name__ == "__main__" and 'test_main' in globals():
    test_main()
