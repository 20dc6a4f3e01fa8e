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
Functions to deal with ABC note lengths.

A length is a :class:`~fractions.Fraction`, where a whole note is 1. In the
body of an ABC document a note or rest can have a length suffix, that
multiplies the default note length (the ``L:`` header field)::

    >>> from karaoke.duration import from_string, fraction
    >>> from_string('3/4')
    Fraction(3, 4)
    >>> from_string('/')
    Fraction(1, 2)
    >>> fraction('1/8')
    Fraction(1, 8)

Durations are written like floating point values, the way they appear in
the diagnostic output of a compiled piece::

    >>> to_string(Fraction(3, 16))
    '0.1875'

"""

from fractions import Fraction
import re


class MalformedLengthFractionError(ValueError):
    """Raised when a length, tempo or meter fraction can't be read."""


_fraction_re = re.compile(r'\s*(\d*)\s*(/?)\s*(\d*)\s*$')


def from_string(text):
    """Return the relative length factor of a note or rest length suffix.

    An empty suffix is 1, ``/`` halves, ``/N`` is 1/N, a bare ``N``
    multiplies by N, ``N/`` is N/2 and ``N/M`` is N/M::

        >>> from_string('')
        Fraction(1, 1)
        >>> from_string('2')
        Fraction(2, 1)
        >>> from_string('3/')
        Fraction(3, 2)
        >>> from_string('/4')
        Fraction(1, 4)

    Raises :class:`MalformedLengthFractionError` if the text can't be read.

    """
    m = _fraction_re.match(text)
    if not m:
        raise MalformedLengthFractionError("invalid length: {}".format(repr(text)))
    num, slash, den = m.groups()
    num = int(num) if num else 1
    if not slash:
        return Fraction(num)
    den = int(den) if den else 2
    if den == 0:
        raise MalformedLengthFractionError("zero denominator: {}".format(repr(text)))
    return Fraction(num, den)


def fraction(text):
    """Return a Fraction from an ``N/M`` text, as used in the header fields.

    Raises :class:`MalformedLengthFractionError` if the text is not a
    fraction.

    """
    m = re.match(r'\s*(\d+)\s*/\s*(\d+)\s*$', text)
    if not m or int(m.group(2)) == 0:
        raise MalformedLengthFractionError("invalid fraction: {}".format(repr(text)))
    return Fraction(int(m.group(1)), int(m.group(2)))


def to_string(value):
    """Return the length value written as a floating point number."""
    return repr(float(value))
