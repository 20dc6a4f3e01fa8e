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
Test karaoke.key.
"""

### find karaoke
import sys
sys.path.insert(0, '.')

import pytest

from karaoke.key import KEYS, KeySignature, UnsupportedKeySignatureError


def test_main():
    assert len(KEYS) == 30
    assert KeySignature('C').accidentals == {}
    assert KeySignature('Am').accidentals == {}
    assert KeySignature('G').accidentals == {'F': 1}
    assert KeySignature('F').accidentals == {'B': -1}
    assert KeySignature('D').accidentals == {'F': 1, 'C': 1}
    assert KeySignature('B').accidentals == KeySignature('G#m').accidentals
    assert len(KeySignature('B').accidentals) == 5
    assert KeySignature('C#').accidentals == dict.fromkeys('FCGDAEB', 1)
    assert KeySignature('Cb').accidentals == dict.fromkeys('BEADGCF', -1)
    assert KeySignature('Ebm').count == -6
    assert KeySignature(' Eb ') == KeySignature('Eb')


def test_table():
    table = KeySignature('D').table()
    assert table['F'] == 1
    assert table['f'] == 1
    assert table['E'] == 0

    table.apply('f', '^')
    assert table['F'] == 2      # accidentals add up
    table.apply('E', '_')
    assert table['e'] == -1
    table.apply('F', '=')
    assert table['F'] == 0
    assert table.as_dict() == {'C': 1, 'E': -1}

    table.reset()
    assert table.as_dict() == {'F': 1, 'C': 1}
    table.apply('B', '__')
    assert table['B'] == -2


def test_errors():
    for name in ('H', 'Gb major', 'Dbm', ''):
        with pytest.raises(UnsupportedKeySignatureError):
            KeySignature(name)
    assert issubclass(UnsupportedKeySignatureError, ValueError)


if __name__ == "__main__" and 'test_main' in globals():
    test_main()
