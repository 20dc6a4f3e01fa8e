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
Test the node module, using the ABC document elements.
"""

### find karaoke
import sys
sys.path.insert(0, '.')

from karaoke.dom import abc


def make_line():
    return abc.Line(
        abc.Note('C', abc.Accidental('^')),
        abc.Comment('% one'),
        abc.Chord(abc.Note('E'), abc.Note('G')),
        abc.Barline(),
        abc.EndOfLine(),
    )


def test_main():
    line = make_line()
    assert [n.head for n in line / abc.Note] == ['C']
    assert [n.head for n in line // abc.Note] == ['C', 'E', 'G']
    assert len(list(line ^ abc.Comment)) == 4
    assert len(list(line / (abc.Bar, abc.Comment))) == 2
    assert next(line // abc.Accidental).parent is line[0]
    assert line[2][1].parent is line[2]
    assert line.parent is None
    assert line                         # true, even though it is a list


def test_equals():
    line, line2 = make_line(), make_line()
    assert line.equals(line2)
    assert line != line2                # nodes compare by identity
    assert line[0] in line and line2[0] not in line
    line2[2].append(abc.Note('B'))
    assert line2[2][-1].parent is line2[2]
    assert not line.equals(line2)
    assert not abc.Note('C').equals(abc.Note('D'))
    assert not abc.Note('C').equals(abc.Rest())


def test_descendants():
    line = make_line()
    assert [type(n) for n in line.descendants()] == [
        abc.Note, abc.Accidental, abc.Comment, abc.Chord, abc.Note, abc.Note,
        abc.Barline, abc.EndOfLine]
    assert list(abc.Rest().descendants()) == []


if __name__ == "__main__" and 'test_main' in globals():
    test_main()
