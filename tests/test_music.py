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
Test the music expressions of karaoke.music.
"""

from fractions import Fraction
import io
import threading

### find karaoke
import sys
sys.path.insert(0, '.')

import pytest

from karaoke.header import Header
from karaoke.music import *
from karaoke.pitch import Pitch


class Recorder:
    """A player that only records what is scheduled."""
    def __init__(self):
        self.notes = []
        self.events = []

    def add_note(self, instrument, pitch, start_beat, num_beats):
        self.notes.append((str(pitch), start_beat, num_beats))

    def add_event(self, beat, callback):
        self.events.append((beat, callback))


def note(name, length=Fraction(1, 4), offset=0):
    return Note(length, Pitch(name, offset))


def test_main():
    c, d, e = note('C'), note('D'), note('E')
    m = Concat(Concat(Rest(0), c), Concat(Rest(Fraction(1, 8)), d))
    assert m.duration() == Fraction(5, 8)
    assert str(m) == "z0.0C0.25z0.125D0.25"

    r = Recorder()
    m.play(r, 1, io.StringIO(), '')
    assert r.notes == [('C', 1, Fraction(1, 4)), ('D', Fraction(11, 8), Fraction(1, 4))]

    # structural equality
    assert Concat(c, d) == Concat(note('C'), note('D'))
    assert Concat(c, d) != Concat(d, c)
    assert len({Concat(c, d), Concat(note('C'), note('D'))}) == 1
    assert Rest(0) != Lyric(' ', 0)


def test_durations():
    for m in (
        Rest(0),
        note('C', 0),
        Chord([note('C'), note('E')]),
        Tuplet([note('C'), note('D'), note('E')]),
        Lyric(' ', 0),
        Component([Rest(Fraction(1, 2))]),
    ):
        assert m.duration() >= 0
    with pytest.raises(ValueError):
        Rest(-1)
    with pytest.raises(ValueError):
        note('C', -1)
    with pytest.raises(ValueError):
        Lyric('', 1)


def test_transpose():
    m = Concat(Chord([note('C'), note('E')]), Tuplet([note('C'), note('D')]))
    assert m.transpose(0) == m
    assert m.transpose(2).transpose(3) == m.transpose(5)
    assert str(m.transpose(12)) == "[C'0.25E'0.25](2C'0.25D'0.250.75"
    assert isinstance(Chord([note('C')]).transpose(1), Chord)
    assert Lyric('la', 1).transpose(4) == Lyric('la', 1)
    assert Rest(1).transpose(4) == Rest(1)


def test_chord():
    chord = Chord([note('D'), note('F', offset=1), note('A')])
    assert str(chord) == "[D0.25^F0.25A0.25]"
    assert chord.duration() == Fraction(1, 4)
    r = Recorder()
    chord.play(r, 0, io.StringIO(), '')
    assert [n[1] for n in r.notes] == [0, 0, 0]

    with pytest.raises(ValueError):
        Chord([])
    with pytest.raises(TypeError):
        Chord([note('C'), Rest(Fraction(1, 4))])
    with pytest.raises(TypeError):
        Chord([Tuplet([note('C'), note('D')])])


def test_tuplet():
    t = Tuplet([note('F'), note('F', offset=1), note('G')])
    assert t.duration() == Fraction(1, 2)
    assert str(t) == "(3F0.25^F0.25G0.250.5"
    r = Recorder()
    t.play(r, 0, io.StringIO(), '')
    assert r.notes == [
        ('F', 0, Fraction(1, 6)),
        ('^F', Fraction(1, 6), Fraction(1, 6)),
        ('G', Fraction(1, 3), Fraction(1, 6)),
    ]
    assert Tuplet([note('A')] * 4).duration() == Fraction(3, 4)
    assert Tuplet([note('A')] * 2).duration() == Fraction(3, 4)

    with pytest.raises(ValueError):
        Tuplet([note('C')])
    with pytest.raises(ValueError):
        Tuplet([note('C')] * 5)
    with pytest.raises(TypeError):
        Tuplet([note('C'), Rest(Fraction(1, 4))])


def test_lyric():
    sink = io.StringIO()
    r = Recorder()
    Concat(Lyric('la', Fraction(1, 4)), Lyric(' ', Fraction(1, 4))).play(r, 0, sink, 'default')
    assert [beat for beat, callback in r.events] == [0, Fraction(1, 4)]
    for beat, callback in r.events:
        callback(beat)
    assert sink.getvalue() == "la<br>"

    # no events when no voice is played
    r = Recorder()
    Lyric('la', 1).play(r, 0, sink, '')
    assert r.events == []


def test_component_and_piece():
    text = Concat(Lyric('hi', Fraction(1, 4)), Lyric('ho', Fraction(1, 4)))
    notes = Concat(note('C'), note('D', Fraction(1, 2)))
    voice = Component([text, notes])
    assert voice.has_lyrics
    assert voice.duration() == Fraction(1, 2)       # the first part
    assert voice.lyrics('1') == 'hiho'

    header = Header.from_fields({'X': '1', 'T': 'Two', 'K': 'C', 'L': '1/4', 'V': '1\n2'})
    piece = Piece({'1': voice, '2': Component([Concat(notes, notes)])}, header)
    assert piece.duration() == Fraction(3, 2)       # the longest voice
    assert piece['2'].duration() == Fraction(3, 2)
    assert piece.voices() == ('1', '2')
    assert piece.lyrics('1') == 'hiho'
    assert piece.lyrics('2') == ''
    with pytest.raises(KeyError):
        piece['3']
    assert str(piece).startswith("X:1T:TwoC:UnknownM:1.0L:0.25V:[1, 2]K:C\n1: {")

    r = Recorder()
    piece.play(r, 0, io.StringIO(), '1')
    assert len(r.notes) == 2 and len(r.events) == 2
    r = Recorder()
    piece.play(r, 0, io.StringIO())
    assert len(r.notes) == 6 and len(r.events) == 0

    assert piece.transpose(2)['1'].parts[1].first.pitch == Pitch('D')


def test_cancel():
    cancel = threading.Event()
    cancel.set()
    with pytest.raises(PlaybackCancelled):
        Concat(note('C'), note('D')).play(Recorder(), 0, io.StringIO(), '', cancel)


if __name__ == "__main__" and 'test_main' in globals():
    test_main()
