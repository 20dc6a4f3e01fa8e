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
Elements needed for ABC documents.

An ABC document is read into a :class:`Document` with a :class:`Header` and a
:class:`Body`. The body contains music lines (:class:`Line`), voice
declarations (:class:`VoiceField`), lyric lines (:class:`LyricLine`) and
comments.

The element classes form a closed set: the compiler in :mod:`karaoke.compiler`
knows each of them.

"""

from . import element


class Document(element.Element):
    """A full ABC document, containing a :class:`Header` and a :class:`Body`."""
    space_between = "\n"

    @property
    def header(self):
        """The Header child."""
        for n in self / Header:
            return n

    @property
    def body(self):
        """The Body child, None if the document only has a header."""
        for n in self / Body:
            return n


class Comment(element.TextElement):
    """A comment, starting with ``%``."""


class Field(element.TextElement):
    """A header field line, like ``T:Title``.

    The head is the full text of the field.

    """
    @classmethod
    def read_head(cls, head_origin):
        """Strip the trailing whitespace the ``K:`` field token can have."""
        return super().read_head(head_origin).rstrip()

    @property
    def code(self):
        """The field letter, e.g. ``'T'``."""
        return self.head[0]

    @property
    def value(self):
        """The stripped field value, e.g. ``'Title'``."""
        return self.head[2:].strip()


class KeyField(Field):
    """The ``K:`` field, which ends the header."""


class Header(element.Element):
    """The header, containing the fields and comments up to the ``K:`` field."""
    space_between = "\n"

    def fields(self):
        """Yield (code, value) tuples for all fields."""
        for n in self / Field:
            yield n.code, n.value


class Body(element.Element):
    """The body, containing music lines, voice fields, lyric lines and comments."""

    def concat(self, node, next_node):
        """Only music and lyric lines already end with a newline."""
        return "" if isinstance(node, (Line, LyricLine)) else "\n"


class VoiceField(Field):
    """A ``V:`` line in the body, switching to the named voice."""


class Line(element.Element):
    """A music line, always ending with an :class:`EndOfLine`."""

    def concat(self, node, next_node):
        return "" if isinstance(next_node, EndOfLine) else " "


class EndOfLine(element.TextElement):
    """The end of a music line."""
    def __init__(self, head="\n", *children):
        super().__init__(head, *children)


class Accidental(element.TextElement):
    """The accidental of a note: ``^^``, ``^``, ``=``, ``_`` or ``__``."""
    @classmethod
    def check_head(cls, head):
        return head in ('^^', '^', '=', '_', '__')


class Octave(element.TextElement):
    """The octave marks of a note, a sequence of ``'`` or ``,``."""
    @classmethod
    def check_head(cls, head):
        return isinstance(head, str) and head.strip("',") == ''


class Length(element.TextElement):
    """The length suffix of a note or rest, e.g. ``3/4``, ``/`` or ``2``."""


class Durable(element.TextElement):
    """Base class for a note or rest, which can have a :class:`Length` child."""

    @property
    def length(self):
        """The text of the Length child, ``''`` if there is none."""
        for n in self / Length:
            return n.head
        return ''


class Note(Durable):
    """A note. The head is the note letter, ``A-G`` or ``a-g``.

    Can have :class:`Accidental`, :class:`Octave` and :class:`Length`
    children.

    """
    @classmethod
    def check_head(cls, head):
        return head in "ABCDEFGabcdefg" and len(head) == 1

    @property
    def accidental(self):
        """The text of the Accidental child, None if there is none."""
        for n in self / Accidental:
            return n.head

    @property
    def octave(self):
        """The octave transposition in octaves (``'`` up, ``,`` down)."""
        for n in self / Octave:
            return n.head.count("'") - n.head.count(",")
        return 0

    @property
    def pos(self):
        """The position of the accidental, if any, otherwise of the letter."""
        for n in self / Accidental:
            return n.pos
        return super().pos

    def write(self):
        """Write the accidental before the letter, and the rest after it."""
        return ''.join(n.write() for n in self / Accidental) + self.head + \
            ''.join(n.write() for n in self ^ Accidental)


class Rest(Durable):
    """A rest, ``z``."""
    def __init__(self, head="z", *children):
        super().__init__(head, *children)


class Chord(element.BlockElement):
    """A chord, notes between ``[`` and ``]``."""
    _head = "["
    _tail = "]"


class Tuplet(element.TextElement):
    """A tuplet: the head is the tuplet marker, e.g. ``(3``; the children are
    the notes or chords.

    """
    @classmethod
    def check_head(cls, head):
        return head in ('(2', '(3', '(4')

    @property
    def count(self):
        """The number of notes in the tuplet."""
        return int(self.head[1:])


class Bar(element.TextElement):
    """Base class for barlines and repeat markers."""
    texts = ()

    @classmethod
    def check_head(cls, head):
        return head in cls.texts


class Barline(Bar):
    """A single barline ``|``."""
    texts = ('|',)

    def __init__(self, head="|", *children):
        super().__init__(head, *children)


class MajorBarline(Bar):
    """A double barline: ``||``, ``[|`` or ``|]``."""
    texts = ('||', '[|', '|]')


class StartRepeat(Bar):
    """The start of a repeated section, ``|:``."""
    texts = ('|:',)

    def __init__(self, head="|:", *children):
        super().__init__(head, *children)


class FinishRepeat(Bar):
    """The end of a repeated section, ``:|``."""
    texts = (':|',)

    def __init__(self, head=":|", *children):
        super().__init__(head, *children)


class FirstEnding(Bar):
    """The first alternate ending, ``[1``."""
    texts = ('[1',)

    def __init__(self, head="[1", *children):
        super().__init__(head, *children)


class SecondEnding(Bar):
    """The second alternate ending, ``[2``."""
    texts = ('[2',)

    def __init__(self, head="[2", *children):
        super().__init__(head, *children)


class LyricLine(element.HeadElement):
    """A ``w:`` line, containing lyric tokens."""
    _head = "w:"


class LyricToken(element.TextElement):
    """Base class for the tokens in a lyric line."""


class LyricText(LyricToken):
    """A syllable or word."""


class LyricSpace(LyricToken):
    """Whitespace between syllables."""


class Hyphen(LyricToken):
    """A ``-``, separating syllables of a word."""


class EscapedHyphen(LyricToken):
    r"""A ``\-``, a hyphen that is part of the syllable."""


class Extender(LyricToken):
    """A ``_``, extending the previous syllable over the next note."""


class Skip(LyricToken):
    """A ``*``, skipping a note."""


class Tie(LyricToken):
    """A ``~``, joining words to be sung on one note."""


class LyricBar(LyricToken):
    """A ``|``, advancing the lyrics to the next bar."""


class LyricNewline(LyricToken):
    """The end of a lyric line."""
    def __init__(self, head="\n", *children):
        super().__init__(head, *children)
