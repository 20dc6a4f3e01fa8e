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


r"""
The karaoke.music module.

This module provides the music object model a compiled ABC piece consists
of. It is a closed set of immutable expression types:

* :class:`Note` and :class:`Rest`, the atomic music,
* :class:`Chord` (notes sounding together) and :class:`Tuplet` (notes
  squeezed in a different time span),
* :class:`Concat`, two expressions after each other,
* :class:`Lyric`, a text that is shown when its time has come,
* :class:`Component`, expressions sounding together (the lyrics of a voice
  together with its notes),
* :class:`Piece`, all voices of an ABC piece with the header.

All expressions have a :meth:`~Music.duration` in whole notes, can be
:meth:`~Music.transpose`\ d (which returns a new expression) and can be
played: :meth:`~Music.play` schedules the notes and lyric events on a player
(see :mod:`karaoke.player`), starting at a certain beat.

The string representation of an expression is a compact diagnostic rendering::

    >>> from fractions import Fraction
    >>> from karaoke.music import Note, Rest, Concat
    >>> from karaoke.pitch import Pitch
    >>> m = Concat(Rest(0), Note(Fraction(1, 4), Pitch('C')))
    >>> m.duration()
    Fraction(1, 4)
    >>> print(m.transpose(2))
    z0.0D0.25

"""

import enum

from ..duration import to_string


class PlaybackCancelled(Exception):
    """Raised by :meth:`Music.play` when the cancel event has been set."""


class Instrument(enum.IntEnum):
    """General MIDI instruments, the value is the program number."""
    PIANO = 0
    BRIGHT_PIANO = 1
    ELECTRIC_GRAND = 2
    HONKY_TONK_PIANO = 3
    HARPSICHORD = 6
    CELESTA = 8
    GLOCKENSPIEL = 9
    MUSIC_BOX = 10
    VIBRAPHONE = 11
    CHURCH_ORGAN = 19
    ACCORDION = 21
    NYLON_STR_GUITAR = 24
    STEEL_STRING_GUITAR = 25
    ACOUSTIC_BASS = 32
    VIOLIN = 40
    CELLO = 42
    STRING_ENSEMBLE_1 = 48
    CHOIR_AAHS = 52
    TRUMPET = 56
    CLARINET = 71
    FLUTE = 73


def check_cancelled(cancel):
    """Raise PlaybackCancelled if ``cancel`` (a threading.Event or None) is set."""
    if cancel is not None and cancel.is_set():
        raise PlaybackCancelled()


class Music:
    """Base class for all music expressions.

    Subclasses list their attributes in ``_fields``, which is used for
    comparison, hashing and :func:`repr`.

    """
    __slots__ = ()
    _fields = ()

    def duration(self):
        """Return the duration in whole notes."""
        raise NotImplementedError

    def play(self, player, at_beat, lyric_sink, voice, cancel=None):
        """Schedule this expression on the ``player``, starting at ``at_beat``.

        ``lyric_sink`` is a text stream the lyrics are written to, ``voice``
        the name of the voice that is played, empty to play all voices. If
        ``cancel`` is given, it is a :class:`threading.Event`; when it is set
        during scheduling, :class:`PlaybackCancelled` is raised. Events that
        are already scheduled stay on the player.

        """
        raise NotImplementedError

    def transpose(self, semitones):
        """Return a copy of this expression, transposed by ``semitones``."""
        raise NotImplementedError

    def children(self):
        """Return the child expressions, if any."""
        return ()

    def voices(self):
        """Return the voice names used in this expression, in order."""
        names = []
        for m in self.children():
            names.extend(v for v in m.voices() if v not in names)
        return tuple(names)

    def lyrics(self, voice):
        """Return the lyric text of this expression for the voice."""
        return ''.join(m.lyrics(voice) for m in self.children())

    def _values(self):
        return tuple(getattr(self, name) for name in self._fields)

    def __eq__(self, other):
        if isinstance(other, Music):
            return type(self) is type(other) and self._values() == other._values()
        return NotImplemented

    def __ne__(self, other):
        if isinstance(other, Music):
            return type(self) is not type(other) or self._values() != other._values()
        return NotImplemented

    def __hash__(self):
        return hash((type(self),) + self._values())

    def __repr__(self):
        return "{}({})".format(type(self).__name__,
            ", ".join("{}={}".format(n, repr(v)) for n, v in zip(self._fields, self._values())))


class Note(Music):
    """A note with a ``length`` (in whole notes), ``pitch`` and ``instrument``."""
    __slots__ = ('length', 'pitch', 'instrument')
    _fields = __slots__

    def __init__(self, length, pitch, instrument=Instrument.PIANO):
        if length < 0:
            raise ValueError("negative length: {}".format(length))
        self.length = length
        self.pitch = pitch
        self.instrument = instrument

    def duration(self):
        return self.length

    def play(self, player, at_beat, lyric_sink, voice, cancel=None):
        check_cancelled(cancel)
        player.add_note(self.instrument, self.pitch, at_beat, self.length)

    def transpose(self, semitones):
        return Note(self.length, self.pitch.transpose(semitones), self.instrument)

    def stretch(self, length):
        """Return a copy of this note with another length."""
        return Note(length, self.pitch, self.instrument)

    def __str__(self):
        return str(self.pitch) + to_string(self.length)


class Rest(Music):
    """A rest, sounding nothing for ``length`` whole notes."""
    __slots__ = ('length',)
    _fields = __slots__

    def __init__(self, length):
        if length < 0:
            raise ValueError("negative length: {}".format(length))
        self.length = length

    def duration(self):
        return self.length

    def play(self, player, at_beat, lyric_sink, voice, cancel=None):
        check_cancelled(cancel)

    def transpose(self, semitones):
        return self

    def __str__(self):
        return "z" + to_string(self.length)


class Chord(Music):
    """Notes (or chords) sounding together.

    A chord can't contain rests or tuplets. The duration is the duration of
    the first note.

    """
    __slots__ = ('notes',)
    _fields = __slots__

    def __init__(self, notes):
        notes = tuple(notes)
        if not notes:
            raise ValueError("a Chord needs at least one note")
        for n in notes:
            if isinstance(n, (Rest, Tuplet)) or not isinstance(n, Music):
                raise TypeError("a Chord can't contain {}".format(repr(n)))
        self.notes = notes

    def children(self):
        return self.notes

    def duration(self):
        return self.notes[0].duration()

    def play(self, player, at_beat, lyric_sink, voice, cancel=None):
        check_cancelled(cancel)
        for n in self.notes:
            n.play(player, at_beat, lyric_sink, voice, cancel)

    def transpose(self, semitones):
        return Chord(n.transpose(semitones) for n in self.notes)

    def stretch(self, length):
        """Return a copy of this chord with all notes having another length."""
        return Chord(n.stretch(length) for n in self.notes)

    def __str__(self):
        return "[" + "".join(map(str, self.notes)) + "]"


class Tuplet(Music):
    """Two, three or four notes or chords played in the time of another count.

    A duplet takes the time of three notes, a triplet the time of two and a
    quadruplet the time of three. The notes are played evenly spread over the
    duration of the tuplet.

    """
    __slots__ = ('notes',)
    _fields = __slots__

    #: The number of notes the time of a tuplet is counted in.
    time = {2: 3, 3: 2, 4: 3}

    def __init__(self, notes):
        notes = tuple(notes)
        if len(notes) not in self.time:
            raise ValueError("a Tuplet needs 2, 3 or 4 notes, not {}".format(len(notes)))
        for n in notes:
            if not isinstance(n, (Note, Chord)):
                raise TypeError("a Tuplet can't contain {}".format(repr(n)))
        self.notes = notes

    def children(self):
        return self.notes

    def duration(self):
        return self.notes[0].duration() * self.time[len(self.notes)]

    def play(self, player, at_beat, lyric_sink, voice, cancel=None):
        check_cancelled(cancel)
        length = self.duration() / len(self.notes)
        for n in self.notes:
            n.stretch(length).play(player, at_beat, lyric_sink, voice, cancel)
            at_beat += length

    def transpose(self, semitones):
        return Tuplet(n.transpose(semitones) for n in self.notes)

    def __str__(self):
        return "({}{}{}".format(len(self.notes), "".join(map(str, self.notes)),
                                to_string(self.duration()))


class Concat(Music):
    """Two expressions, the ``second`` starting when the ``first`` ends."""
    __slots__ = ('first', 'second')
    _fields = __slots__

    def __init__(self, first, second):
        self.first = first
        self.second = second

    def children(self):
        return (self.first, self.second)

    def duration(self):
        return self.first.duration() + self.second.duration()

    def play(self, player, at_beat, lyric_sink, voice, cancel=None):
        check_cancelled(cancel)
        self.first.play(player, at_beat, lyric_sink, voice, cancel)
        self.second.play(player, at_beat + self.first.duration(), lyric_sink, voice, cancel)

    def transpose(self, semitones):
        return Concat(self.first.transpose(semitones), self.second.transpose(semitones))

    def __str__(self):
        return str(self.first) + str(self.second)


class Lyric(Music):
    """A lyric ``text`` that is shown for ``length`` whole notes.

    When played for a voice, an event is scheduled that writes the text
    followed by ``<br>`` to the lyric sink. A blank text reserves its time but
    writes nothing.

    """
    __slots__ = ('text', 'length')
    _fields = __slots__

    def __init__(self, text, length):
        if not text:
            raise ValueError("a Lyric needs text")
        if length < 0:
            raise ValueError("negative length: {}".format(length))
        self.text = text
        self.length = length

    def duration(self):
        return self.length

    def play(self, player, at_beat, lyric_sink, voice, cancel=None):
        check_cancelled(cancel)
        if voice:
            player.add_event(at_beat, self._show(lyric_sink))

    def _show(self, lyric_sink):
        """Return the callback for the player event."""
        def show(beat):
            if self.text != " ":
                lyric_sink.write(self.text + "<br>")
                lyric_sink.flush()
        return show

    def transpose(self, semitones):
        return self

    def lyrics(self, voice):
        return self.text

    def __str__(self):
        return self.text + to_string(self.length)


class Component(Music):
    """Expressions that start together.

    A voice with lyrics is a Component of the lyrics and the notes. The
    duration is the duration of the first part.

    """
    __slots__ = ('parts',)
    _fields = __slots__

    def __init__(self, parts):
        parts = tuple(parts)
        if not parts:
            raise ValueError("a Component needs at least one part")
        self.parts = parts

    @property
    def has_lyrics(self):
        """True if there is more than one part, the first being the lyrics."""
        return len(self.parts) > 1

    def children(self):
        return self.parts

    def duration(self):
        return self.parts[0].duration()

    def play(self, player, at_beat, lyric_sink, voice, cancel=None):
        check_cancelled(cancel)
        for p in self.parts:
            p.play(player, at_beat, lyric_sink, voice, cancel)

    def transpose(self, semitones):
        return Component(p.transpose(semitones) for p in self.parts)

    def __str__(self):
        return "{" + "".join(map(str, self.parts)) + "}"


class Piece(Music):
    """A compiled ABC piece: the music per voice, and the :class:`~.header.Header`.

    ``voice_music`` is a mapping (or iterable of pairs) from voice name to
    Music, in the order of the voices in the body.

    """
    __slots__ = ('voice_music', 'header')
    _fields = __slots__

    def __init__(self, voice_music, header):
        self.voice_music = tuple(dict(voice_music).items())
        self.header = header

    def __getitem__(self, voice):
        """Return the Music of the voice.

        A voice that is declared in the header but has no music in the body
        is a rest of zero length. Raises KeyError for other unknown voices.

        """
        for name, music in self.voice_music:
            if name == voice:
                return music
        if voice in self.header.voices:
            return Rest(0)
        raise KeyError(voice)

    def children(self):
        return tuple(music for name, music in self.voice_music)

    def duration(self):
        return max((m.duration() for m in self.children()), default=0)

    def play(self, player, at_beat, lyric_sink, voice='', cancel=None):
        """Play the specified voice, or all voices if ``voice`` is empty."""
        check_cancelled(cancel)
        if voice:
            self[voice].play(player, at_beat, lyric_sink, voice, cancel)
        else:
            for m in self.children():
                m.play(player, at_beat, lyric_sink, voice, cancel)

    def transpose(self, semitones):
        return Piece(((name, music.transpose(semitones)) for name, music in self.voice_music), self.header)

    def voices(self):
        """Return the voice names declared in the header."""
        return self.header.voices

    def lyrics(self, voice):
        """Return the lyric text of the voice."""
        return self[voice].lyrics(voice)

    def __str__(self):
        h = self.header
        result = ["X:{}T:{}C:{}M:{}L:{}V:{}K:{}\n".format(
            h.index, h.title, h.composer, to_string(h.meter),
            to_string(h.length), h.voices_string(), h.key)]
        for name, music in self.voice_music:
            result.append("{}: {}\n".format(name, music))
        return "".join(result)
