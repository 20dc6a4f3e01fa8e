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
This module defines the DOM (Document Object Model) for ABC source files.

The ABC DOM is a simple tree structure: the :class:`~.abc.Document` has a
:class:`~.abc.Header` with the fields and a :class:`~.abc.Body` with music
lines, voice declarations and lyric lines. Each music line contains notes,
rests, chords, tuplets and barlines.

The DOM is created by transforming a *parce* tree of an ABC source document
(see :mod:`karaoke.lang.abc` and :mod:`karaoke.dom.read`). The origin tokens
are stored in the nodes, so every node knows its position in the source text.

"""
