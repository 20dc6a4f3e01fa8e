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
Play a compiled piece.

A player has three methods: ``add_note(instrument, pitch, start_beat,
num_beats)`` and ``add_event(beat, callback)`` schedule notes and events,
and ``play()`` performs them. :class:`SequencePlayer` describes this
interface; :class:`EventSequencer` is a player that runs the events in beat
order (optionally in real time) and records the notes, which is enough to
show the lyrics of a song.

:func:`play_piece` schedules a piece and returns a
:class:`~concurrent.futures.Future` that is resolved when the end of the
piece is reached. :func:`perform` does the whole thing::

    >>> import io, karaoke
    >>> from karaoke.player import EventSequencer, perform
    >>> piece = karaoke.parse("X:1\nT:Hi\nK:C\nC D|\nw:hel-lo\n")
    >>> sink = io.StringIO()
    >>> perform(piece, EventSequencer(), sink, 'default')
    Fraction(1, 4)
    >>> sink.getvalue()
    ' <mark>hel</mark>  lo  <br>hel  <mark>lo</mark>   <br>'

Playing can be cancelled by setting a :class:`threading.Event`, that is
given to :meth:`Music.play() <karaoke.music.Music.play>` and to the
:class:`EventSequencer`.

"""

import collections
import concurrent.futures
import logging
import threading
import time

from .music import PlaybackCancelled, check_cancelled


logger = logging.getLogger(__name__)


ScheduledNote = collections.namedtuple("ScheduledNote", "instrument pitch start_beat num_beats")


class SequencePlayer:
    """The interface of a player a piece can be played on."""

    def add_note(self, instrument, pitch, start_beat, num_beats):
        """Schedule a note with the Instrument and Pitch."""
        raise NotImplementedError

    def add_event(self, beat, callback):
        """Schedule a callback, which is called with the beat as argument."""
        raise NotImplementedError

    def play(self):
        """Perform the scheduled notes and events."""
        raise NotImplementedError


class EventSequencer(SequencePlayer):
    """A player that records notes and runs the events in beat order.

    If ``realtime`` is True, :meth:`play` waits until the time of every
    event has come, using ``beats_per_minute``. If a ``cancel``
    :class:`threading.Event` is given, :meth:`play` raises
    :class:`~karaoke.music.PlaybackCancelled` as soon as it is set.

    Scheduling is thread-safe; events with the same beat run in the order
    they were added.

    """
    def __init__(self, beats_per_minute=100, realtime=False, cancel=None):
        self.beats_per_minute = beats_per_minute
        self.realtime = realtime
        self.cancel = cancel
        self.notes = []     #: the scheduled notes, ScheduledNote tuples
        self._events = []
        self._lock = threading.Lock()

    def add_note(self, instrument, pitch, start_beat, num_beats):
        with self._lock:
            self.notes.append(ScheduledNote(instrument, pitch, start_beat, num_beats))

    def add_event(self, beat, callback):
        with self._lock:
            self._events.append((beat, len(self._events), callback))

    def seconds(self, beat):
        """Return the time in seconds the beat is played at."""
        return float(beat) * 60 / self.beats_per_minute

    def play(self):
        with self._lock:
            events = sorted(self._events, key=lambda e: e[:2])
        logger.debug("playing %d notes and %d events", len(self.notes), len(events))
        start = time.monotonic()
        for beat, _, callback in events:
            check_cancelled(self.cancel)
            if self.realtime:
                delay = start + self.seconds(beat) - time.monotonic()
                if delay > 0:
                    if self.cancel is not None:
                        self.cancel.wait(delay)
                        check_cancelled(self.cancel)
                    else:
                        time.sleep(delay)
            callback(beat)


def play_piece(piece, player, lyric_sink, voice='', cancel=None):
    """Schedule the piece on the player and return a Future.

    The Future gets the end beat as result when the player reaches the end
    of the piece. The lyrics are written to the ``lyric_sink`` text stream,
    when a ``voice`` is given.

    """
    done = concurrent.futures.Future()

    def finish(beat):
        if not done.done():
            done.set_result(beat)

    piece.play(player, 0, lyric_sink, voice, cancel)
    player.add_event(piece.duration(), finish)
    return done


def perform(piece, player, lyric_sink, voice='', cancel=None, timeout=None):
    """Play the piece on the player in a background thread and wait for the end.

    Returns the end beat. Raises the exception of the player if it fails,
    :class:`~karaoke.music.PlaybackCancelled` if it stops before the end of
    the piece, and :class:`concurrent.futures.TimeoutError` if the end is not
    reached within ``timeout`` seconds.

    """
    done = play_piece(piece, player, lyric_sink, voice, cancel)

    def run():
        try:
            player.play()
        except Exception as e:
            if not done.done():
                done.set_exception(e)
        else:
            if not done.done():
                done.set_exception(PlaybackCancelled("the player stopped before the end"))

    threading.Thread(target=run, daemon=True).start()
    return done.result(timeout)
