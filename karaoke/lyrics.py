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
Align the lyrics of a voice with its music.

:func:`align` gives every music element of a voice a lyric slot: a syllable,
or one of the :py:data:`BLANK`, :py:data:`EXTEND` and :py:data:`NEWLINE`
markers. After the repeats are expanded, :func:`display` turns the slots into
:class:`~karaoke.music.Lyric` expressions, each showing the whole lyric line
with the current syllable marked.

"""

import logging

from . import music
from .dom import abc


logger = logging.getLogger(__name__)

#: A slot without a syllable.
BLANK = " "

#: A slot that extends the previous syllable.
EXTEND = "_"

#: A slot at the end of a lyric line.
NEWLINE = "\n"

MARKERS = (BLANK, EXTEND, NEWLINE)


def is_note(node):
    """Return True if the music element can get a syllable of its own."""
    return isinstance(node, (abc.Note, abc.Chord))


def align(tokens, elements, durations):
    """Return the list of lyric slots, exactly one for every music element.

    ``tokens`` are the :class:`~karaoke.dom.abc.LyricToken` elements of a
    voice, ``elements`` the music elements of the voice and ``durations``
    their compiled durations.

    A music element with zero duration (a barline, the end of a line) gets a
    blank slot before the next token is handled. Syllables that do not fit
    are dropped, but a tie or escaped hyphen still joins the next word to the
    last syllable when all slots are filled.

    """
    tokens = list(tokens)
    n = len(elements)
    slots = []

    def last_syllable():
        """Return the index of the most recent syllable slot, or None."""
        for k in range(len(slots) - 1, -1, -1):
            if slots[k] not in MARKERS:
                return k

    def next_word(i):
        """Return (index, text) of the word after spaces from i, or (i - 1, '')."""
        j = i
        while j < len(tokens) and isinstance(tokens[j], abc.LyricSpace):
            j += 1
        if j < len(tokens) and isinstance(tokens[j], abc.LyricText):
            return j, tokens[j].head
        return i - 1, ''

    def joins(i):
        """Return True if the token at i, after spaces, joins to the last syllable."""
        while i < len(tokens) and isinstance(tokens[i], abc.LyricSpace):
            i += 1
        return i < len(tokens) and isinstance(tokens[i], (abc.Tie, abc.EscapedHyphen))

    i = 0
    while i < len(tokens):
        if len(slots) >= n and not joins(i):
            break
        token = tokens[i]
        if len(slots) < n and durations[len(slots)] == 0:
            slots.append(BLANK)
        if isinstance(token, abc.LyricSpace):
            pass
        elif isinstance(token, abc.Hyphen):
            if all(isinstance(t, (abc.LyricSpace, abc.Hyphen, abc.LyricNewline)) for t in tokens[i+1:]):
                slots.append(BLANK)
        elif isinstance(token, abc.Extender):
            slots.append(EXTEND)
        elif isinstance(token, abc.Skip):
            slots.append(BLANK)
        elif isinstance(token, (abc.Tie, abc.EscapedHyphen)):
            i, word = next_word(i + 1)
            k = last_syllable()
            if k is None:
                slots.append(word or token.head)
            elif isinstance(token, abc.Tie):
                slots[k] += " " + word
            else:
                slots[k] += "-" + word
        elif isinstance(token, abc.LyricBar):
            while 0 < len(slots) < n and is_note(elements[len(slots) - 1]):
                slots.append(BLANK)
        elif isinstance(token, abc.LyricNewline):
            slots.append(NEWLINE)
        else:
            slots.append(token.head)
        i += 1

    dropped = sum(1 for s in slots[n:] if s not in MARKERS) + \
        sum(1 for t in tokens[i:] if isinstance(t, abc.LyricText))
    if dropped:
        logger.warning("%d lyric syllables do not fit the music and are dropped", dropped)
    del slots[n:]
    slots.extend([BLANK] * (n - len(slots)))
    return slots


def display(slots, durations):
    """Return a list of Lyric expressions for the slots.

    ``slots`` and ``durations`` are in performance order. A syllable lasts
    for its own element and the elements with an :py:data:`EXTEND` slot that
    follow it. Its text shows the lyric line it is on, with the syllable
    between ``<mark>`` tags. Blank slots reserve their time; the
    :py:data:`EXTEND` and :py:data:`NEWLINE` slots take no time. A final slot
    that takes no time is left out.

    """
    lyrics = []
    for m, slot in enumerate(slots):
        length = durations[m]
        k = m + 1
        while k < len(slots) and slots[k] == EXTEND:
            length += durations[k]
            k += 1
        if m == len(slots) - 1 and (slot in (EXTEND, NEWLINE) or (slot == BLANK and not length)):
            break
        if slot == BLANK:
            lyrics.append(music.Lyric(BLANK, length))
        elif slot in (EXTEND, NEWLINE):
            lyrics.append(music.Lyric(BLANK, 0))
        else:
            left = right = ""
            for s in reversed(slots[:m]):
                if s == NEWLINE:
                    break
                left = (BLANK if s == EXTEND else s) + " " + left
            for s in slots[m+1:]:
                if s == NEWLINE:
                    break
                right = right + " " + (BLANK if s == EXTEND else s)
            lyrics.append(music.Lyric(left + " <mark>" + slot + "</mark> " + right, length))
    return lyrics
