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
Expand the repeats of a voice.

The music elements of a voice are expanded to the order in which they are
performed. The result is a list of indices in the element list, which is used
for the compiled music as well as for the aligned lyrics, so both stay
aligned.

A section between ``|:`` and ``:|`` (or between the start of the voice, or a
major barline after a completed repeat, and ``:|``) is played twice. When a
first ending ``[1`` is present, the second time the section is played only
up to the first ending, and then the music after the ``:|`` follows::

    >>> from karaoke.dom import abc
    >>> from karaoke.repeat import expand
    >>> C, D, E = (abc.Note(n) for n in 'CDE')
    >>> expand([abc.StartRepeat(), C, D, abc.FinishRepeat(), E])
    [0, 1, 2, 3, 1, 2, 4]
    >>> expand([C, abc.FirstEnding(), D, abc.FinishRepeat(), E])
    [0, 1, 2, 3, 0, 4]

"""

from .dom import abc


def expand(elements):
    """Return the list of indices of the elements in performance order."""
    order = []
    start = -1              # voice start
    first_ending = None
    completed = False
    for i, node in enumerate(elements):
        order.append(i)
        if isinstance(node, abc.StartRepeat):
            start = i
            completed = False
        elif isinstance(node, abc.FinishRepeat):
            if first_ending is None:
                order.extend(range(start + 1, i))
            else:
                order.extend(range(max(start, 0), first_ending))
                first_ending = None
            completed = True
        elif isinstance(node, abc.FirstEnding):
            first_ending = i
        elif isinstance(node, abc.MajorBarline):
            if completed:
                start = i
    return order
