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
ABC language and transformation definition.

The :class:`Abc` language reads the header fields up to the ``K:`` field, and
then switches to the body, which contains music lines, voice declarations and
lyric lines. The :class:`AbcTransform` builds a :mod:`karaoke.dom.abc`
document from the parce tree; text that can't be read raises an
:class:`AbcSyntaxError`.

"""

from parce import Language, lexicon, default_action, default_target, skip
from parce.transform import Transform
import parce.action as a

from karaoke.dom import abc, element


class AbcSyntaxError(ValueError):
    """Raised when the ABC text can't be read.

    The ``pos`` attribute is the position in the text, if known.

    """
    def __init__(self, message, pos=None):
        if pos is not None:
            message = "{} (at position {})".format(message, pos)
        super().__init__(message)
        self.pos = pos


class Abc(Language):
    """ABC language definition, restricted to what a karaoke song needs."""

    @lexicon
    def root(cls):
        """The header; the ``K:`` field ends it and starts the body."""
        yield r'K:[^\n%]*\n?', a.Name.Tag.Key, cls.body
        yield r'[A-Za-z]:[^\n%]*', a.Name.Tag
        yield r'%[^\n]*', a.Comment
        yield r'\s+', skip
        yield default_action, a.Invalid

    @lexicon
    def body(cls):
        """Music lines, voice declarations and lyric lines."""
        yield r'w:', a.Keyword.Lyric, cls.lyric
        yield r'V:[^\n%]*', a.Name.Tag.Voice
        yield r'%[^\n]*', a.Comment
        yield r'\n', a.Whitespace.Newline
        yield r'[ \t\r]+', skip
        yield r'\[\||\|\]|\|\|', a.Delimiter.Bar.Major
        yield r'\|:', a.Delimiter.Bar.Repeat.Start
        yield r':\|', a.Delimiter.Bar.Repeat.End
        yield r'\|', a.Delimiter.Bar
        yield r'\[1', a.Delimiter.Bar.Ending.First
        yield r'\[2', a.Delimiter.Bar.Ending.Second
        yield r'\[', a.Delimiter.Chord, cls.chord
        yield r'\([234]', a.Delimiter.Tuplet
        yield from cls.notes()
        yield default_action, a.Invalid

    @classmethod
    def notes(cls):
        """The tokens a note or rest is built of."""
        yield r'\^\^|\^|__|_|=', a.Text.Music.Pitch.Accidental
        yield r'[A-Ga-g]', a.Text.Music.Pitch
        yield r"[',]+", a.Text.Music.Pitch.Octave
        yield r'z', a.Text.Music.Rest
        yield r'\d+/\d*|\d+|/\d*', a.Text.Music.Duration

    @lexicon(consume=True)
    def chord(cls):
        """Notes between ``[`` and ``]``."""
        yield r'\]', a.Delimiter.Chord, -1
        yield r'[ \t]+', skip
        yield from cls.notes()
        yield default_target, -1

    @lexicon(consume=True)
    def lyric(cls):
        """A ``w:`` line, upto and including the newline."""
        yield r'\n', a.Whitespace.Newline, -1
        yield r'%[^\n]*', a.Comment
        yield r'[ \t\r]+', a.Whitespace
        yield r'\\-', a.Text.Lyric.Hyphen.Escaped
        yield r'-', a.Text.Lyric.Hyphen
        yield r'_', a.Text.Lyric.Extender
        yield r'\*', a.Text.Lyric.Skip
        yield r'~', a.Text.Lyric.Tie
        yield r'\|', a.Text.Lyric.Bar
        yield r'[^\s%\\*~|_-]+|\\', a.Text.Lyric


class AbcTransform(Transform):
    """Transform ABC to a :mod:`karaoke.dom.abc` Document."""
    ## helper methods and factory
    def factory(self, element_class, head_origin, tail_origin=(), *children):
        """Create an Element, keeping its origin.

        The ``head_origin`` and optionally ``tail_origin`` is an iterable of
        Token instances.

        """
        return element_class.with_origin(tuple(head_origin), tuple(tail_origin), *children)

    def error(self, message, pos=None):
        """Raise an AbcSyntaxError, with the position in the text if given."""
        raise AbcSyntaxError(message, pos)

    def durables(self, items):
        """Yield Note and Rest elements assembled from their tokens.

        Other items are yielded unchanged.

        """
        accidental = None
        node, expect = None, ()
        for i in items:
            if isinstance(i, element.Element) or not i.is_token or i.action not in a.Text.Music:
                if accidental:
                    self.error("accidental without a note", accidental.pos)
                node, expect = None, ()
                yield i
            elif i.action == a.Text.Music.Pitch.Accidental:
                if accidental:
                    self.error("double accidental", i.pos)
                accidental = i
                node, expect = None, ()
            elif i.action == a.Text.Music.Pitch:
                children = (self.factory(abc.Accidental, (accidental,)),) if accidental else ()
                accidental = None
                node = self.factory(abc.Note, (i,), (), *children)
                expect = (a.Text.Music.Pitch.Octave, a.Text.Music.Duration)
                yield node
            elif i.action == a.Text.Music.Rest:
                if accidental:
                    self.error("accidental before a rest", accidental.pos)
                node = self.factory(abc.Rest, (i,))
                expect = (a.Text.Music.Duration,)
                yield node
            elif i.action in expect:
                cls = abc.Octave if i.action == a.Text.Music.Pitch.Octave else abc.Length
                node.append(self.factory(cls, (i,)))
                expect = expect[expect.index(i.action)+1:]
            else:
                self.error("unexpected {}".format(repr(i.text)), i.pos)
        if accidental:
            self.error("accidental without a note", accidental.pos)

    _bar_mapping = {
        a.Delimiter.Bar: abc.Barline,
        a.Delimiter.Bar.Major: abc.MajorBarline,
        a.Delimiter.Bar.Repeat.Start: abc.StartRepeat,
        a.Delimiter.Bar.Repeat.End: abc.FinishRepeat,
        a.Delimiter.Bar.Ending.First: abc.FirstEnding,
        a.Delimiter.Bar.Ending.Second: abc.SecondEnding,
    }

    _lyric_mapping = {
        a.Text.Lyric: abc.LyricText,
        a.Whitespace: abc.LyricSpace,
        a.Text.Lyric.Hyphen: abc.Hyphen,
        a.Text.Lyric.Hyphen.Escaped: abc.EscapedHyphen,
        a.Text.Lyric.Extender: abc.Extender,
        a.Text.Lyric.Skip: abc.Skip,
        a.Text.Lyric.Tie: abc.Tie,
        a.Text.Lyric.Bar: abc.LyricBar,
        a.Whitespace.Newline: abc.LyricNewline,
    }

    ### transforming methods
    def root(self, items):
        """Build a full ``abc.Document``."""
        fields = []
        body = None
        for i in items:
            if not i.is_token:
                body = i.obj
            elif i.action == a.Invalid:
                self.error("invalid header text {}".format(repr(i.text)), i.pos)
            elif i.action == a.Comment:
                fields.append(self.factory(abc.Comment, (i,)))
            elif i.action == a.Name.Tag.Key:
                fields.append(self.factory(abc.KeyField, (i,)))
            else:
                fields.append(self.factory(abc.Field, (i,)))
        nodes = [abc.Header(*fields)]
        if body is not None:
            nodes.append(body)
        return abc.Document(*nodes)

    def body(self, items):
        """Build the ``abc.Body``, grouping the music in lines."""
        nodes = []
        line = []
        tuplet = None

        def add(node):
            nonlocal tuplet
            if tuplet is None:
                line.append(node)
            elif not isinstance(node, (abc.Note, abc.Chord)):
                self.error("only notes and chords can be in a tuplet", node.pos)
            else:
                tuplet.append(node)
                if len(tuplet) == tuplet.count:
                    line.append(tuplet)
                    tuplet = None

        for i in self.durables(items):
            if isinstance(i, element.Element):
                add(i)
            elif not i.is_token:
                if isinstance(i.obj, abc.LyricLine):
                    nodes.append(i.obj)
                else:
                    add(i.obj)
            elif i.action == a.Whitespace.Newline:
                if tuplet is not None:
                    self.error("incomplete tuplet", tuplet.pos)
                if line:
                    nodes.append(abc.Line(*line, self.factory(abc.EndOfLine, (i,))))
                    line = []
            elif i.action in a.Delimiter.Bar:
                if tuplet is not None:
                    self.error("incomplete tuplet", tuplet.pos)
                line.append(self.factory(self._bar_mapping[i.action], (i,)))
            elif i.action == a.Delimiter.Tuplet:
                if tuplet is not None:
                    self.error("nested tuplet", i.pos)
                tuplet = self.factory(abc.Tuplet, (i,))
            elif i.action == a.Name.Tag.Voice:
                nodes.append(self.factory(abc.VoiceField, (i,)))
            elif i.action == a.Comment:
                (line if line else nodes).append(self.factory(abc.Comment, (i,)))
            else:
                self.error("invalid music text {}".format(repr(i.text)), i.pos)
        if tuplet is not None:
            self.error("incomplete tuplet", tuplet.pos)
        if line:
            nodes.append(abc.Line(*line, abc.EndOfLine()))
        return abc.Body(*nodes)

    def chord(self, items):
        """Build an ``abc.Chord``."""
        head = items[:1]
        tail = (items.pop(),) if len(items) > 1 and items[-1] == ']' else ()
        if not tail:
            self.error("unterminated chord", head[0].pos)
        notes = []
        for n in self.durables(items[1:]):
            if isinstance(n, abc.Rest):
                self.error("rest in chord", n.pos)
            elif not isinstance(n, abc.Note):
                self.error("unexpected text in chord", head[0].pos)
            notes.append(n)
        if not notes:
            self.error("empty chord", head[0].pos)
        return self.factory(abc.Chord, head, tail, *notes)

    def lyric(self, items):
        """Build an ``abc.LyricLine``, always ending with a LyricNewline."""
        head = items[:1]
        tokens = [self.factory(self._lyric_mapping[i.action], (i,))
                  for i in items[1:] if i.is_token and i.action != a.Comment]
        if not tokens or not isinstance(tokens[-1], abc.LyricNewline):
            tokens.append(abc.LyricNewline())
        return self.factory(abc.LyricLine, head, (), *tokens)
