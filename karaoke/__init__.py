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
The karaoke module.

Reads songs in ABC notation, with lyrics, and compiles them to music that
can be played while the lyrics are shown.

On first import, our own language definition is added to the karaoke
registry (see :mod:`karaoke.registry`).

"""

from .pkginfo import version, version_string
from .registry import find
from .compiler import compile_document
from .duration import MalformedLengthFractionError
from .header import Header, MalformedHeaderFieldError, MissingHeaderFieldError
from .key import UnsupportedKeySignatureError
from .lang.abc import AbcSyntaxError
from .dom import read


__all__ = (
    'find', 'load', 'parse', 'version', 'version_string', 'Header',
    'AbcSyntaxError', 'MalformedHeaderFieldError', 'MalformedLengthFractionError',
    'MissingHeaderFieldError', 'UnsupportedKeySignatureError',
)


def parse(text, instrument=None):
    """Read ABC text and return the compiled :class:`~karaoke.music.Piece`.

    Raises :class:`AbcSyntaxError` if the text can't be read, and one of the
    other exceptions exported by this module if the header is invalid.

    """
    return compile_document(read.abc_document(text), instrument)


def load(filename, encoding='utf-8', errors=None, instrument=None):
    """Convenience function to read ABC text from ``filename`` and return the
    compiled :class:`~karaoke.music.Piece`.

    The ``encoding`` and ``errors`` arguments will be passed to Python's
    :func:`open` function. Raises :class:`OSError` if the file can't be read.

    """
    with open(filename, encoding=encoding, errors=errors) as f:
        text = f.read()
    return parse(text, instrument)
