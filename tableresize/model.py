"""Document model holding tables, and records of the changes made to it.

Tables are ``table`` elements containing ``tableRow`` elements, themselves
containing ``tableCell`` elements. Cells can contain text and nested tables.

Changes made through :class:`Document` are recorded as
:class:`Insertion`, :class:`Removal` and :class:`AttributeChange` records,
read with :meth:`Document.get_changes` once the whole batch is done.

"""

from collections import namedtuple

TABLE_ELEMENTS = ('table', 'tableRow', 'tableCell')


class Insertion(namedtuple('Insertion', 'name, position, length')):
    """Insertion of ``length`` nodes named ``name`` at ``position``."""
    type = 'insert'


class Removal(namedtuple('Removal', 'name, position, length')):
    """Removal of ``length`` nodes named ``name`` from ``position``."""
    type = 'remove'


class AttributeChange(namedtuple(
        'AttributeChange', 'range, attribute_key, old_value, new_value')):
    """Change of the ``attribute_key`` attribute of nodes in ``range``."""
    type = 'attribute'


class Node:
    """Abstract base class for model nodes."""
    name = None

    def __init__(self):
        self.parent = None

    @property
    def index(self):
        """Index of the node in its parent, ``None`` for detached nodes."""
        if self.parent is None:
            return None
        for index, child in enumerate(self.parent.children):
            if child is self:
                return index

    def is_element(self, name=None):
        return False

    def find_ancestor(self, name):
        """Return the closest ancestor element called ``name``, or ``None``."""
        parent = self.parent
        while parent is not None:
            if parent.name == name:
                return parent
            parent = parent.parent

    def descendants(self):
        """A flat generator for a node, its children and descendants."""
        yield self


class Text(Node):
    """Text node."""
    def __init__(self, data):
        super().__init__()
        self.data = data

    def __repr__(self):
        return f'<Text {self.data!r}>'


class Element(Node):
    """Element with a name, attributes and children."""
    def __init__(self, name, attributes=None, children=()):
        super().__init__()
        self.name = name
        self.attributes = dict(attributes or {})
        self.children = []
        for child in children:
            self.append(child)

    def __repr__(self):
        return f'<Element {self.name}>'

    def is_element(self, name=None):
        return name is None or name == self.name

    def get_attribute(self, key, default=None):
        return self.attributes.get(key, default)

    def has_attribute(self, key):
        return key in self.attributes

    def append(self, child):
        self.insert(len(self.children), child)

    def insert(self, offset, child):
        if child.parent is not None:
            child.parent.children.remove(child)
        child.parent = self
        self.children.insert(offset, child)

    def descendants(self):
        yield self
        for child in self.children:
            yield from child.descendants()


class Position:
    """Position between two children of ``parent``."""
    def __init__(self, parent, offset):
        self.parent = parent
        self.offset = offset

    def __repr__(self):
        return f'<Position {self.parent!r} {self.offset}>'

    @property
    def node_after(self):
        if self.offset < len(self.parent.children):
            return self.parent.children[self.offset]

    @property
    def node_before(self):
        if 0 < self.offset <= len(self.parent.children):
            return self.parent.children[self.offset - 1]

    def find_ancestor(self, name):
        """Return the closest element called ``name`` around the position."""
        if self.parent.name == name:
            return self.parent
        return self.parent.find_ancestor(name)


class Range:
    """Range between ``start`` and ``end`` positions in the same parent."""
    def __init__(self, start, end):
        assert start.parent is end.parent
        self.start = start
        self.end = end

    def __repr__(self):
        return f'<Range {self.start!r} {self.end!r}>'

    def get_items(self):
        """Yield all the nodes in the range, depth-first."""
        for child in self.start.parent.children[
                self.start.offset:self.end.offset]:
            yield from child.descendants()


class Document:
    """Document holding a ``root`` element and recording its changes.

    Positions of recorded changes follow the later changes of the batch:
    they are shifted by insertions and removals in the same parent, and
    the changes made inside a removed node are forgotten.

    """
    def __init__(self, root=None):
        self.root = Element('$root') if root is None else root
        self._changes = []

    def create_position_before(self, node):
        return Position(node.parent, node.index)

    def create_range_on(self, node):
        start = self.create_position_before(node)
        return Range(start, Position(start.parent, start.offset + 1))

    def get_changes(self):
        """Return the list of changes made since the last reset."""
        return list(self._changes)

    def reset_changes(self):
        self._changes = []

    def _positions(self, change):
        if change.type == 'attribute':
            return (change.range.start, change.range.end)
        return (change.position,)

    def _shift(self, parent, offset, delta):
        for change in self._changes:
            for position in self._positions(change):
                if position.parent is parent and position.offset >= offset:
                    position.offset += delta

    def _forget(self, node):
        parent, offset = node.parent, node.index
        changes = []
        for change in self._changes:
            position = self._positions(change)[0]
            if is_inside(position.parent, node):
                continue
            if position.parent is parent:
                if change.type == 'attribute' and position.offset == offset:
                    continue
                if (change.type == 'insert' and
                        position.offset <= offset <
                        position.offset + change.length):
                    if change.length == 1:
                        continue
                    change = change._replace(length=change.length - 1)
            changes.append(change)
        self._changes = changes

    def insert(self, node, parent, offset=None):
        """Insert ``node`` in ``parent`` at ``offset``, at the end by default.

        Nodes already attached are moved, and their removal is recorded.

        """
        if node.parent is not None:
            self.remove(node)
        if offset is None:
            offset = len(parent.children)
        parent.insert(offset, node)
        self._shift(parent, offset, 1)
        self._changes.append(Insertion(node.name, Position(parent, offset), 1))

    def remove(self, node):
        """Remove ``node`` from its parent."""
        if node.parent is None:
            raise ValueError(f'{node!r} is not in the document')
        self._forget(node)
        position = self.create_position_before(node)
        node.parent.children.remove(node)
        node.parent = None
        self._shift(position.parent, position.offset + 1, -1)
        self._changes.append(Removal(node.name, position, 1))

    def set_attribute(self, node, key, value):
        """Set ``key`` attribute of ``node``, remove it if ``value`` is None.

        """
        if not node.is_element():
            raise ValueError(f'{node!r} can\'t have attributes')
        old_value = node.attributes.get(key)
        if old_value == value:
            return
        if value is None:
            del node.attributes[key]
        else:
            node.attributes[key] = value
        if node.parent is not None:
            self._changes.append(AttributeChange(
                self.create_range_on(node), key, old_value, value))


def is_inside(node, ancestor):
    """Return whether ``node`` is ``ancestor`` or one of its descendants."""
    while node is not None:
        if node is ancestor:
            return True
        node = node.parent
    return False
