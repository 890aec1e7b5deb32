""" The payload value model. A payload is a tree of JSON-compatible values
    with two additional leaf kinds: raw binary values, and the placeholder
    objects that stand in for them while a packet is in transit.

    :func:`kind` is the single classifier for that closed set of values;
    :func:`walk` is the single traversal over it. Both the validator and the
    binary deconstruction/reconstruction passes are built on these two
    functions, which keeps their notion of a payload identical.
"""

import enum

from . import fields


binary_types = (bytes, bytearray, memoryview)


class Kind(enum.Enum):
    OBJECT = 'object'
    ARRAY = 'array'
    STRING = 'string'
    NUMBER = 'number'
    BOOL = 'bool'
    NULL = 'null'
    BINARY = 'binary'
    PLACEHOLDER = 'placeholder'


def kind(value):
    """ Return the :class:`Kind` of the supplied *value*. A TypeError is
        raised for any value outside the payload model, such as a set, or
        an arbitrary Python object.
    """

    # bool is a subclass of int; it must be checked first.

    if value is None:
        return Kind.NULL
    if isinstance(value, bool):
        return Kind.BOOL
    if isinstance(value, (int, float)):
        return Kind.NUMBER
    if isinstance(value, str):
        return Kind.STRING
    if isinstance(value, binary_types):
        return Kind.BINARY
    if isinstance(value, (list, tuple)):
        return Kind.ARRAY
    if isinstance(value, dict):
        if is_placeholder(value):
            return Kind.PLACEHOLDER
        return Kind.OBJECT

    raise TypeError('unsupported payload value: ' + type(value).__name__)


def is_placeholder(value):
    """ Return True if *value* is an in-band placeholder object. Only the
        marker field is checked; the index is checked when the placeholder
        is resolved.
    """

    try:
        return value.get(fields.PLACEHOLDER) is True
    except AttributeError:
        return False


def placeholder(index):
    """ Return a new placeholder object for the attachment at *index*.
    """

    marker = dict()
    marker[fields.PLACEHOLDER] = True
    marker[fields.INDEX] = index
    return marker


def walk(value, leaf):
    """ Depth-first copy of *value*. Arrays are visited in order, objects in
        the iteration order of the mapping. Every other value is a leaf,
        and is replaced in the copy by the return value of
        ``leaf(kind, value)``. Placeholders are leaves, they are never
        descended into. Tuples are copied as lists.
    """

    value_kind = kind(value)

    if value_kind is Kind.ARRAY:
        return [walk(item, leaf) for item in value]

    if value_kind is Kind.OBJECT:
        copy = dict()
        for key, item in value.items():
            if isinstance(key, str):
                pass
            else:
                raise TypeError('object keys must be strings: ' + repr(key))
            copy[key] = walk(item, leaf)
        return copy

    return leaf(value_kind, value)


def count_binary(value):
    """ Return the number of binary leaves in the *value* tree.
    """

    found = list()

    def _count(value_kind, value):
        if value_kind is Kind.BINARY:
            found.append(value)
        return value

    walk(value, _count)
    return len(found)


def count_attachments(value):
    """ Return the number of attachments the *value* tree stands for: its
        binary leaves plus its placeholders.
    """

    found = list()

    def _count(value_kind, value):
        if value_kind is Kind.BINARY or value_kind is Kind.PLACEHOLDER:
            found.append(value)
        return value

    walk(value, _count)
    return len(found)


def has_binary(value):
    """ Return True if the *value* tree contains at least one binary leaf.
        Unlike :func:`count_binary` this stops at the first one found, and
        does not copy the tree.
    """

    value_kind = kind(value)

    if value_kind is Kind.BINARY:
        return True

    if value_kind is Kind.ARRAY:
        for item in value:
            if has_binary(item):
                return True
        return False

    if value_kind is Kind.OBJECT:
        for item in value.values():
            if has_binary(item):
                return True
        return False

    return False


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
