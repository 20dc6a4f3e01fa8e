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
Simple helper functions to build DOM elements reading from ABC text.

The generated DOM nodes know their position in the originating text, because
the origin tokens are preserved.

"""


from parce.transform import Transformer

from ..lang import abc


_transformer = Transformer()


def abc_document(text):
    r"""Return a :class:`.abc.Document` from the text.

    Example::

        >>> from karaoke.dom import read
        >>> node = read.abc_document('X:1\nT:Scale\nK:C\nC D E|\n')
        >>> node
        <abc.Document (2 children) [0:23]>
        >>> list(node.header)
        [<abc.Field 'X:1' [0:3]>, <abc.Field 'T:Scale' [4:11]>, <abc.KeyField 'K:C' [12:16]>]
        >>> list(node.body[0])
        [<abc.Note 'C' [16:17]>, <abc.Note 'D' [18:19]>, <abc.Note 'E' [20:21]>, <abc.Barline '|' [21:22]>, <abc.EndOfLine '\n' [22:23]>]
        >>> node.write()
        'X:1\nT:Scale\nK:C\nC D E |\n'

    Raises :class:`~karaoke.lang.abc.AbcSyntaxError` if the text can't be
    read.

    """
    return _transformer.transform_text(abc.Abc.root, text)
