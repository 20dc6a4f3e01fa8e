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
Test expanding the repeats of a voice.
"""

### find karaoke
import sys
sys.path.insert(0, '.')

from karaoke.dom import abc
from karaoke.repeat import expand


C, D, E = (abc.Note(n) for n in 'CDE')


def test_main():
    # a repeated section
    assert expand([abc.StartRepeat(), C, D, abc.FinishRepeat(), E]) == [0, 1, 2, 3, 1, 2, 4]
    # repeat from the start of the voice
    assert expand([C, D, abc.FinishRepeat(), E]) == [0, 1, 2, 0, 1, 3]
    # no repeats
    assert expand([C, abc.Barline(), D]) == [0, 1, 2]
    assert expand([]) == []


def test_first_ending():
    assert expand([C, abc.FirstEnding(), D, abc.FinishRepeat(), E]) == [0, 1, 2, 3, 0, 4]
    # the second ending marker is just passed
    assert expand([abc.StartRepeat(), C, abc.FirstEnding(), D, abc.FinishRepeat(),
                   abc.SecondEnding(), E]) == [0, 1, 2, 3, 4, 0, 1, 5, 6]


def test_major_barline():
    # a major barline after a completed repeat starts a new section
    assert expand([C, abc.FinishRepeat(), D, abc.MajorBarline('||'), E,
                   abc.FinishRepeat()]) == [0, 1, 0, 2, 3, 4, 5, 4]
    # but not when there was no repeat before it
    assert expand([C, abc.MajorBarline('||'), D, abc.FinishRepeat()]) == [0, 1, 2, 3, 0, 1, 2]


if __name__ == "__main__" and 'test_main' in globals():
    test_main()
