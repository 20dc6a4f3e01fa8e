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
The header of an ABC piece.

The header fields are read from the document as a mapping from field letter
to the stripped field value, and then resolved to a :class:`Header`::

    >>> from karaoke.header import Header
    >>> h = Header.from_fields({'X': '1', 'T': 'Scale', 'K': 'C', 'M': '2/4'})
    >>> h.composer, h.meter, h.length, h.voices
    ('Unknown', Fraction(1, 2), Fraction(1, 16), ('default',))
    >>> print(h)
    X:1T:ScaleC:UnknownV:[default]M:0.5L:0.0625Q:100.0K:C

"""

import collections
from fractions import Fraction
import re

from . import duration, key


#: The composer when there is no ``C:`` field.
DEFAULT_COMPOSER = "Unknown"

#: The voice name when there is no ``V:`` field.
DEFAULT_VOICE = "default"

#: The tempo in beats per minute when there is no ``Q:`` field.
DEFAULT_TEMPO = 100

#: Common time symbols in the ``M:`` field.
COMMON_TIME = ('C', 'C|')


class MissingHeaderFieldError(ValueError):
    """Raised when the index, title or key field is missing."""


class MalformedHeaderFieldError(ValueError):
    """Raised when a header field value can't be read."""


class Header(collections.namedtuple('Header', 'index title composer key meter length tempo voices')):
    """The resolved header of an ABC piece.

    ``index`` is an integer, ``title``, ``composer`` and ``key`` are strings,
    ``meter`` and ``length`` (the default note length) are Fractions,
    ``tempo`` is the number of beats per minute and ``voices`` is a tuple of
    voice names.

    """
    __slots__ = ()

    @classmethod
    def from_fields(cls, fields):
        """Resolve a Header from a mapping of field letter to value.

        Multiple ``V:`` fields are expected newline-joined in the ``V`` value.
        Raises :class:`MissingHeaderFieldError` if ``X``, ``T`` or ``K`` is
        missing, :class:`~.duration.MalformedLengthFractionError` for a bad
        meter, length or tempo fraction, and
        :class:`~.key.UnsupportedKeySignatureError` for an unknown key.

        """
        for code in 'XTK':
            if code not in fields:
                raise MissingHeaderFieldError("missing header field {}:".format(code))
        try:
            index = int(fields['X'])
        except ValueError:
            raise MalformedHeaderFieldError("invalid index: {}".format(repr(fields['X']))) from None
        title = fields['T']
        if not title:
            raise MissingHeaderFieldError("empty title")
        key_name = key.KeySignature(fields['K']).name

        meter = fields.get('M')
        if meter is None or meter in COMMON_TIME:
            meter = Fraction(1)
        else:
            meter = duration.fraction(meter)

        length = fields.get('L')
        if length is None:
            length = Fraction(1, 16) if meter < Fraction(3, 4) else Fraction(1, 8)
        else:
            length = duration.fraction(length)

        tempo = fields.get('Q')
        if tempo is None:
            tempo = DEFAULT_TEMPO
        else:
            m = re.match(r'(.*)=\s*(\d+)\s*$', tempo)
            if not m:
                raise duration.MalformedLengthFractionError("invalid tempo: {}".format(repr(tempo)))
            tempo = duration.fraction(m.group(1)) / length * int(m.group(2))

        voices = tuple(v.strip() for v in fields.get('V', DEFAULT_VOICE).split('\n'))

        return cls(index, title, fields.get('C') or DEFAULT_COMPOSER,
                   key_name, meter, length, tempo, voices)

    @property
    def beats_per_minute(self):
        """The tempo as a float."""
        return float(self.tempo)

    def key_signature(self):
        """Return the :class:`~.key.KeySignature` of this piece."""
        return key.KeySignature(self.key)

    def voices_string(self):
        """Return the voice names as a bracketed list, like ``[1, 2]``."""
        return "[{}]".format(", ".join(self.voices))

    def __str__(self):
        return "X:{}T:{}C:{}V:{}M:{}L:{}Q:{}K:{}".format(
            self.index, self.title, self.composer, self.voices_string(),
            duration.to_string(self.meter), duration.to_string(self.length),
            repr(self.beats_per_minute), self.key)
