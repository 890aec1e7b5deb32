""" A class representation of a socket.io packet, the unit that is encoded
    into, and decoded from, the frames handed to and received from the
    transport.
"""

from __future__ import annotations

import dataclasses
import enum
from typing import Any, Optional

from . import fields
from . import value


class PacketType(enum.IntEnum):
    """ The seven packet types. The integer value is also the single digit
        that leads every text frame on the wire.
    """

    CONNECT = 0
    DISCONNECT = 1
    EVENT = 2
    ACK = 3
    CONNECT_ERROR = 4
    BINARY_EVENT = 5
    BINARY_ACK = 6

    def __str__(self):
        return self.name

    @property
    def digit(self) -> str:
        """The wire representation of this type."""
        return str(self.value)

    @property
    def is_binary(self) -> bool:
        return self in _binary_types

    def binary(self) -> PacketType:
        """ Return the binary variant of this type: EVENT and ACK are
            promoted, a type that is already binary is returned as-is.
        """

        try:
            return _binary_variants[self]
        except KeyError:
            pass

        if self.is_binary:
            return self

        raise ValueError(f"{self.name} packets cannot carry binary data")

    @classmethod
    def from_digit(cls, digit: str) -> PacketType:
        """ Look up a type by its wire digit. Raises ValueError for anything
            other than one of the seven ASCII digits.
        """

        if len(digit) == 1 and "0" <= digit <= "6":
            return cls(ord(digit) - ord("0"))

        raise ValueError(f"unknown packet type {digit!r}")


_binary_types = frozenset((PacketType.BINARY_EVENT, PacketType.BINARY_ACK))

_binary_variants = {
    PacketType.EVENT: PacketType.BINARY_EVENT,
    PacketType.ACK: PacketType.BINARY_ACK,
}


@dataclasses.dataclass
class Packet:
    """ The :class:`Packet` is the wire-level data entity: its *type*, the
        *namespace* it is addressed to, the *data* payload, the optional
        acknowledgement *id*, and for the binary types the number of
        *attachments* that travel with it as separate binary frames.

        The *attachments* field is None for every non-binary type, and is
        always an integer for the binary types; if a binary packet is
        created without an explicit count, the count is taken from the
        binary values and placeholders present in *data*.

        :ivar data: The payload, or None if there is no payload.
        :ivar id: Acknowledgement correlation id, or None.
    """

    type: PacketType
    namespace: str = fields.DEFAULT_NAMESPACE
    data: Any = None
    id: Optional[int] = None
    attachments: Optional[int] = None

    def __post_init__(self):

        self.type = PacketType(self.type)

        namespace = self.namespace
        if namespace is None or namespace == "":
            namespace = fields.DEFAULT_NAMESPACE

        if not namespace.startswith(fields.NAMESPACE_PREFIX):
            raise ValueError(f"namespace must begin with '/': {namespace!r}")
        if fields.NAMESPACE_END in namespace:
            raise ValueError(f"namespace cannot contain ',': {namespace!r}")

        self.namespace = namespace

        if self.id is not None:
            if isinstance(self.id, bool) or not isinstance(self.id, int) or self.id < 0:
                raise ValueError(f"id must be a non-negative integer: {self.id!r}")

        if self.type.is_binary:
            if self.attachments is None:
                self.attachments = value.count_attachments(self.data)
            elif isinstance(self.attachments, bool) or not isinstance(self.attachments, int) or self.attachments < 0:
                raise ValueError(f"attachments must be a non-negative integer: {self.attachments!r}")
        elif self.attachments is not None:
            raise ValueError(f"{self.type.name} packets do not carry attachments")


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
