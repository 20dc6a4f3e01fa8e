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
Base classes for the elements of an ABC document tree.

An element can have a ``head``, written before its children, and a
``tail``, written after them (like the brackets around a chord). Elements
are created by the :class:`~karaoke.lang.abc.AbcTransform` using
:meth:`Element.with_origin`, which keeps the parce tokens the element was
read from; this way the element knows its position in the ABC source. They
can also be created by hand, as in the tests.

:meth:`Element.write` regenerates ABC text. Whitespace is not kept: the
:meth:`Element.concat` method decides what goes between two children.

"""

import reprlib

from ..node import Node


class Element(Node):
    """An element without a head or tail text."""
    __slots__ = ()

    _head = None
    _tail = None

    space_between = ""      #: written between two children by default

    @property
    def head(self):
        return self._head

    @property
    def tail(self):
        return self._tail

    @property
    def pos(self):
        """The position in the ABC source, or None if unknown.

        Elements without an origin of their own take the position of their
        first descendant that has one.

        """
        origin = getattr(self, 'head_origin', ())
        if origin:
            return origin[0].pos
        for node in self.descendants():
            origin = getattr(node, 'head_origin', ())
            if origin:
                return origin[0].pos

    @property
    def end(self):
        """The end position in the ABC source, or None if unknown."""
        origin = getattr(self, 'tail_origin', ())
        if origin:
            return origin[-1].end
        for node in reversed(self):
            if node.end is not None:
                return node.end
        origin = getattr(self, 'head_origin', ())
        if origin:
            return origin[-1].end

    def __repr__(self):
        words = ["{}.{}".format(type(self).__module__.rsplit('.', 1)[-1], type(self).__name__)]
        head = self.repr_head()
        if head is not None:
            words.append(head)
        if len(self):
            words.append("({} child{})".format(len(self), '' if len(self) == 1 else 'ren'))
        if self.pos is not None:
            words.append("[{}:{}]".format(self.pos, self.end))
        return "<{}>".format(" ".join(words))

    def repr_head(self):
        """The head as shown by :func:`repr`, None to show nothing."""
        return None

    @classmethod
    def read_head(cls, head_origin):
        """Return the head value read from the origin tokens."""
        return ''.join(t.text for t in head_origin)

    def concat(self, node, next_node):
        """Return the text to write between two children."""
        return self.space_between

    def write(self):
        """Return the ABC text of this element and its children."""
        parts = [self.head or '']
        for i, node in enumerate(self):
            if i:
                parts.append(self.concat(self[i - 1], node))
            parts.append(node.write())
        parts.append(self.tail or '')
        return ''.join(parts)

    @classmethod
    def with_origin(cls, head_origin=(), tail_origin=(), *children):
        """Create an element from parce tokens; a plain Element keeps none."""
        return cls(*children)


class HeadElement(Element):
    """An element with a fixed head, that keeps its head tokens."""
    __slots__ = ('head_origin',)

    @classmethod
    def with_origin(cls, head_origin=(), tail_origin=(), *children):
        node = cls(*children)
        node.head_origin = head_origin
        return node


class BlockElement(HeadElement):
    """An element with a fixed head and tail, that keeps both token groups."""
    __slots__ = ('tail_origin',)

    @classmethod
    def with_origin(cls, head_origin=(), tail_origin=(), *children):
        node = super().with_origin(head_origin, tail_origin, *children)
        node.tail_origin = tail_origin
        return node


class TextElement(HeadElement):
    """An element whose head is given to the constructor.

    :meth:`check_head` validates the head; an invalid head raises TypeError.

    """
    __slots__ = ('_head',)

    def __init__(self, head, *children):
        if not self.check_head(head):
            raise TypeError("invalid head for {}: {}".format(type(self).__name__, repr(head)))
        self._head = head
        super().__init__(*children)

    @classmethod
    def check_head(cls, head):
        return isinstance(head, str)

    def repr_head(self):
        return reprlib.repr(self.head)

    def body_equals(self, other):
        return self.head == other.head

    @classmethod
    def with_origin(cls, head_origin=(), tail_origin=(), *children):
        node = cls(cls.read_head(head_origin), *children)
        node.head_origin = head_origin
        return node
