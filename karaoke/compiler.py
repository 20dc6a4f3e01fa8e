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
Compile an ABC document to a :class:`~karaoke.music.Piece`.

The header fields are resolved to a :class:`~karaoke.header.Header`. Then the
body is split in voices: a ``V:`` line switches the voice for the lines that
follow it, lines before any ``V:`` line belong to the voice ``"default"``.

Per voice, every music element is compiled by a :class:`Compiler` into a
music expression. The accidentals in effect are kept in an
:class:`~karaoke.key.AccidentalTable` that the compiler passes along; it
starts with the key signature and is reset at every barline. The repeats are
expanded (see :mod:`karaoke.repeat`), and the lyrics, if any, are aligned
with the music (see :mod:`karaoke.lyrics`).

"""

import functools
import logging

from parce.util import Dispatcher

from . import duration, header, lyrics, music, pitch, repeat
from .dom import abc


logger = logging.getLogger(__name__)


def fold(expressions):
    """Concatenate music expressions, starting with a zero rest.

    An empty iterable yields the zero rest itself.

    """
    return functools.reduce(music.Concat, expressions, music.Rest(0))


def header_fields(node):
    """Return a dictionary with the field values of an ``abc.Header`` node.

    Multiple ``V:`` fields are joined with a newline.

    """
    fields = {}
    for code, value in node.fields():
        if code == 'V' and 'V' in fields:
            fields['V'] += '\n' + value
        else:
            fields[code] = value
    return fields


def voices(body):
    """Return a dictionary mapping the voice name to a tuple of two lists.

    The first list contains the music elements of the voice, the second list
    the lyric tokens. Comments are left out.

    """
    result = {}
    voice = header.DEFAULT_VOICE
    for node in body ^ abc.Comment:
        if isinstance(node, abc.VoiceField):
            voice = node.value
        elif isinstance(node, abc.Line):
            result.setdefault(voice, ([], []))[0].extend(node ^ abc.Comment)
        elif isinstance(node, abc.LyricLine):
            result.setdefault(voice, ([], []))[1].extend(node)
    return result


class Compiler:
    """Compile the music of a document with the specified Header.

    The ``instrument`` that plays the notes can be given, by default the
    class attribute is used.

    """
    instrument = music.Instrument.PIANO

    def __init__(self, header, instrument=None):
        self.header = header
        self.key_signature = header.key_signature()
        if instrument is not None:
            self.instrument = instrument

    def compile(self, node, table):
        """Compile one element to a music expression.

        The :class:`~karaoke.key.AccidentalTable` ``table`` is used and
        updated for the accidentals. Elements that produce no music result in
        a rest of zero length.

        """
        return self._compile(type(node), node, table)

    @Dispatcher
    def _compile(self, cls, node, table):
        """Default: a rest of zero length."""
        return music.Rest(0)

    @_compile(abc.Note)
    def compile_note(self, node, table):
        """Compile a note; its accidental also applies to the rest of the measure."""
        if node.accidental:
            table.apply(node.head, node.accidental)
        offset = table[node.head] + node.octave * pitch.OCTAVE
        if node.head.islower():
            offset += pitch.OCTAVE
        length = duration.from_string(node.length) * self.header.length
        return music.Note(length, pitch.Pitch(node.head, offset), self.instrument)

    @_compile(abc.Rest)
    def compile_rest(self, node, table):
        return music.Rest(duration.from_string(node.length) * self.header.length)

    @_compile(abc.Chord)
    def compile_chord(self, node, table):
        return music.Chord(self.compile(n, table) for n in node)

    @_compile(abc.Tuplet)
    def compile_tuplet(self, node, table):
        return music.Tuplet(self.compile(n, table) for n in node)

    @_compile(abc.Barline)
    @_compile(abc.MajorBarline)
    @_compile(abc.StartRepeat)
    @_compile(abc.FinishRepeat)
    @_compile(abc.FirstEnding)
    @_compile(abc.SecondEnding)
    def compile_bar(self, node, table):
        """A barline resets the accidentals to the key signature."""
        table.reset()
        return music.Rest(0)

    @_compile(abc.Line)
    def compile_line(self, node, table):
        return fold(self.compile(n, table) for n in node ^ abc.Comment)

    def voice(self, elements, tokens=()):
        """Compile the music elements and lyric tokens of one voice.

        Returns a Component with the note timeline, preceded by the lyric
        timeline if there are lyric tokens.

        """
        table = self.key_signature.table()
        expressions = [self.compile(n, table) for n in elements]
        order = repeat.expand(elements)
        notes = fold(e for e in (expressions[i] for i in order) if e.duration() > 0)
        if not tokens:
            return music.Component([notes])
        durations = [e.duration() for e in expressions]
        slots = lyrics.align(tokens, elements, durations)
        text = fold(lyrics.display([slots[i] for i in order], [durations[i] for i in order]))
        return music.Component([text, notes])

    def piece(self, body):
        """Compile the voices of the ``abc.Body`` to a Piece.

        ``body`` may be None, in that case the piece has no voices.

        """
        voice_music = {}
        for name, (elements, tokens) in (voices(body) if body is not None else {}).items():
            logger.debug("voice %r: %d elements, %d lyric tokens", name, len(elements), len(tokens))
            voice_music[name] = self.voice(elements, tokens)
        return music.Piece(voice_music, self.header)


def compile_document(document, instrument=None):
    """Compile an ``abc.Document`` to a :class:`~karaoke.music.Piece`.

    Raises :class:`~karaoke.header.MissingHeaderFieldError`,
    :class:`~karaoke.key.UnsupportedKeySignatureError` or
    :class:`~karaoke.duration.MalformedLengthFractionError` when the header is
    not valid.

    """
    h = header.Header.from_fields(header_fields(document.header))
    logger.debug("compiling %r, key %s, length %s", h.title, h.key, h.length)
    return Compiler(h, instrument).piece(document.body)
