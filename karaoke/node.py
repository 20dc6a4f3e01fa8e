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
The :class:`Node` class, a list that knows its parent.

The parse tree of an ABC document (see :mod:`karaoke.dom`) is built of
nodes. Three operators select nodes by type; they accept a class or a tuple
of classes, like :func:`isinstance`:

* ``node / Note`` yields the children that are a Note,
* ``node // Note`` yields all descendants that are a Note, in document order,
* ``node ^ Comment`` yields the children that are *not* a Comment.

"""

import weakref


def _orphan():
    return None


class Node(list):
    """A tree node, holding its children as list items.

    The parent is kept as a weak reference, so keep a reference to the root
    of a tree as long as you use it. A node is always true, even without
    children, and nodes compare by identity; use :meth:`equals` to compare
    two trees.

    """
    __slots__ = ('__weakref__', '_parent')

    def __init__(self, *children):
        self._parent = _orphan
        list.__init__(self, children)
        for node in children:
            node._parent = weakref.ref(self)

    def __repr__(self):
        return '<{} ({} child{})>'.format(type(self).__name__, len(self),
                                          '' if len(self) == 1 else 'ren')

    def __bool__(self):
        return True

    __hash__ = object.__hash__

    def __eq__(self, other):
        return self is other

    def __ne__(self, other):
        return self is not other

    @property
    def parent(self):
        """The parent node, or None."""
        return self._parent()

    def append(self, node):
        """Add a child node, and make us its parent."""
        node._parent = weakref.ref(self)
        list.append(self, node)

    def _select(self, cls, nodes, keep=True):
        if not isinstance(cls, (type, tuple)):
            return NotImplemented
        return (n for n in nodes if isinstance(n, cls) == keep)

    def __truediv__(self, cls):
        return self._select(cls, self)

    def __floordiv__(self, cls):
        return self._select(cls, self.descendants())

    def __xor__(self, cls):
        return self._select(cls, self, False)

    def descendants(self):
        """Yield all nodes below this one, in document order."""
        for node in self:
            yield node
            yield from node.descendants()

    def equals(self, other):
        """Return True if the other tree has the same structure and contents.

        Both nodes must have the same type and number of children,
        :meth:`body_equals` must return True, and the children must be equal
        in the same way.

        """
        return type(self) is type(other) and len(self) == len(other) \
            and self.body_equals(other) \
            and all(a.equals(b) for a, b in zip(self, other))

    def body_equals(self, other):
        """Compare the node's own contents; by default there are none."""
        return True
