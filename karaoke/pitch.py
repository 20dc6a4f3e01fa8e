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
A pitch, as used by the notes of a compiled piece.

A pitch consists of a natural note letter (``A`` - ``G``) and an integer
offset in semitones from that natural pitch. The letter ``C`` with offset 0
is middle C, which has MIDI key number 60.

    >>> from karaoke.pitch import Pitch
    >>> p = Pitch('C').transpose(13)
    >>> p
    <Pitch ^C'>
    >>> p.midi_note()
    73
    >>> Pitch('B', 1) == Pitch('C', 12)
    True

"""


#: Semitones in an octave.
OCTAVE = 12

#: Semitone value of the natural notes, relative to C.
SCALE = {'C': 0, 'D': 2, 'E': 4, 'F': 5, 'G': 7, 'A': 9, 'B': 11}

#: Names of the semitones in the octave starting at C.
NAMES = ('C', '^C', 'D', '^D', 'E', 'F', '^F', 'G', '^G', 'A', '^A', 'B')

#: MIDI key number of middle C.
MIDDLE_C = 60


class Pitch:
    """A pitch with ``letter`` and ``offset`` attributes.

    The ``letter`` is one of ``A`` - ``G`` (lowercase letters are accepted
    and stored uppercase; their octave shift is the business of the caller).
    The ``offset`` is the number of semitones above (or below, if negative)
    the natural pitch.

    Pitches compare on their semitone :attr:`value`, so ``Pitch('B', 1)``
    equals ``Pitch('C', 12)``. Pitches are immutable and hashable.

    """
    __slots__ = ('letter', 'offset')

    def __init__(self, letter, offset=0):
        letter = letter.upper()
        if letter not in SCALE:
            raise ValueError("invalid note letter: {}".format(repr(letter)))
        object.__setattr__(self, 'letter', letter)
        object.__setattr__(self, 'offset', offset)

    def __setattr__(self, name, value):
        raise AttributeError("Pitch is immutable")

    @property
    def value(self):
        """The number of semitones above middle C (negative if below)."""
        return SCALE[self.letter] + self.offset

    def transpose(self, semitones):
        """Return a new Pitch, ``semitones`` higher (or lower if negative)."""
        return type(self)(self.letter, self.offset + semitones)

    def midi_note(self):
        """Return the MIDI key number of this pitch."""
        return self.value + MIDDLE_C

    def __str__(self):
        """Return the pitch in ABC notation, e.g. ``^C'`` or ``B,``."""
        octave, note = divmod(self.value, OCTAVE)
        marks = "'" * octave if octave > 0 else "," * -octave
        return NAMES[note] + marks

    def __repr__(self):
        return "<{} {}>".format(type(self).__name__, self)

    def __hash__(self):
        return hash(self.value)

    def __eq__(self, other):
        if isinstance(other, Pitch):
            return self.value == other.value
        return NotImplemented

    def __ne__(self, other):
        if isinstance(other, Pitch):
            return self.value != other.value
        return NotImplemented

    def __lt__(self, other):
        if isinstance(other, Pitch):
            return self.value < other.value
        return NotImplemented

    def __le__(self, other):
        if isinstance(other, Pitch):
            return self.value <= other.value
        return NotImplemented

    def __gt__(self, other):
        if isinstance(other, Pitch):
            return self.value > other.value
        return NotImplemented

    def __ge__(self, other):
        if isinstance(other, Pitch):
            return self.value >= other.value
        return NotImplemented
