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
Test karaoke.pitch.
"""

### find karaoke
import sys
sys.path.insert(0, '.')

import pytest

from karaoke.pitch import Pitch


def test_main():
    c = Pitch('C')
    assert c.value == 0
    assert c.midi_note() == 60
    assert str(c) == 'C'
    assert str(Pitch('c', 12)) == "C'"
    assert str(Pitch('B', -12)) == "B,"
    assert str(Pitch('F', 1)) == "^F"
    assert str(Pitch('A', -1)) == "^G"
    assert repr(Pitch('E', 24)) == "<Pitch E''>"

    # pitches compare on their semitone value
    assert Pitch('B', 1) == Pitch('C', 12)
    assert Pitch('E', 1) == Pitch('F')
    assert Pitch('D') < Pitch('E', -1)
    assert len({Pitch('B', 1), Pitch('C', 12), Pitch('C')}) == 2


def test_transpose():
    p = Pitch('G')
    assert p.transpose(0) == p
    assert p.transpose(3).transpose(4) == p.transpose(7)
    assert p.transpose(-7) == Pitch('C')
    assert p.transpose(5).letter == 'G'     # the letter stays
    assert p.transpose(5).offset == 5
    assert p.offset == 0                    # immutable


def test_errors():
    with pytest.raises(ValueError):
        Pitch('H')
    with pytest.raises(AttributeError):
        Pitch('C').offset = 3


if __name__ == "__main__" and 'test_main' in globals():
    test_main()
