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
Classes and functions to deal with key signatures.

A key signature determines the accidentals of the notes, per note letter. The
30 supported keys are the major and minor keys with up to seven sharps or
flats::

    >>> from karaoke.key import KeySignature
    >>> KeySignature('G').accidentals
    {'F': 1}
    >>> KeySignature('Bbm').accidentals
    {'B': -1, 'E': -1, 'A': -1, 'D': -1, 'G': -1}

While compiling a measure, an :class:`AccidentalTable` keeps track of the
accidentals that are in effect. It starts with the accidentals of the key
signature, is modified by accidentals in front of notes, and is reset at every
barline::

    >>> table = KeySignature('G').table()
    >>> table['f']
    1
    >>> table.apply('F', '=')
    >>> table['F']
    0
    >>> table.reset()
    >>> table['F']
    1

"""


#: The order in which sharps are added to a key signature.
SHARPS = "FCGDAEB"

#: The order in which flats are added to a key signature.
FLATS = "BEADGCF"

#: The supported keys, with the number of sharps (positive) or flats (negative).
KEYS = {
    'C': 0, 'Am': 0,
    'G': 1, 'Em': 1,
    'D': 2, 'Bm': 2,
    'A': 3, 'F#m': 3,
    'E': 4, 'C#m': 4,
    'B': 5, 'G#m': 5,
    'F#': 6, 'D#m': 6,
    'C#': 7, 'A#m': 7,
    'F': -1, 'Dm': -1,
    'Bb': -2, 'Gm': -2,
    'Eb': -3, 'Cm': -3,
    'Ab': -4, 'Fm': -4,
    'Db': -5, 'Bbm': -5,
    'Gb': -6, 'Ebm': -6,
    'Cb': -7, 'Abm': -7,
}

#: The semitone alteration of every accidental marker. A natural is absolute,
#: the others are added to the alteration that is in effect.
ACCIDENTALS = {
    '^^': 2,
    '^': 1,
    '=': None,
    '_': -1,
    '__': -2,
}


class UnsupportedKeySignatureError(ValueError):
    """Raised when a key is not one of the 30 supported keys."""


class KeySignature:
    """A key signature, the base table of accidentals.

    ``name`` is one of the names in :py:data:`KEYS`, like ``'Eb'`` or
    ``'F#m'``. Raises :class:`UnsupportedKeySignatureError` for other names.

    """
    __slots__ = ('name', 'count', 'accidentals')

    def __init__(self, name):
        name = name.strip()
        try:
            count = KEYS[name]
        except KeyError:
            raise UnsupportedKeySignatureError("unsupported key: {}".format(repr(name))) from None
        self.name = name
        self.count = count      #: sharps (positive) or flats (negative)
        if count < 0:
            accs = dict.fromkeys(FLATS[:-count], -1)
        else:
            accs = dict.fromkeys(SHARPS[:count], 1)
        self.accidentals = accs #: dict mapping letter to alteration, only the altered letters

    def __repr__(self):
        return "<{} {}>".format(type(self).__name__, self.name)

    def __eq__(self, other):
        if isinstance(other, KeySignature):
            return self.name == other.name
        return NotImplemented

    def __hash__(self):
        return hash(self.name)

    def table(self):
        """Return a new :class:`AccidentalTable` for this key signature."""
        return AccidentalTable(self)


class AccidentalTable:
    """The accidentals in effect while compiling a measure.

    Letters are case-insensitive. The table is private to one compile pass,
    and is passed along by the compiler.

    """
    def __init__(self, key_signature):
        self.key_signature = key_signature
        self.reset()

    def reset(self):
        """Go back to the accidentals of the key signature."""
        self._alter = dict(self.key_signature.accidentals)

    def __getitem__(self, letter):
        """Return the alteration in semitones for the letter."""
        return self._alter.get(letter.upper(), 0)

    def apply(self, letter, accidental):
        """Apply an accidental marker (``^^``, ``^``, ``=``, ``_`` or ``__``)
        to the letter, for the remainder of the measure.

        Sharps and flats add to the alteration in effect, a natural resets it
        to 0.

        """
        letter = letter.upper()
        delta = ACCIDENTALS[accidental]
        if delta is None:
            self._alter[letter] = 0
        else:
            self._alter[letter] = self._alter.get(letter, 0) + delta

    def as_dict(self):
        """Return the altered letters as a dictionary."""
        return {letter: alter for letter, alter in self._alter.items() if alter}
