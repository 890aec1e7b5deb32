""" Binary attachment handling. On the sending side, binary values are
    pulled out of a payload and replaced with placeholders (deconstruction);
    on the receiving side the placeholders are swapped back for the binary
    frames that followed the text frame (reconstruction).

    Both directions are per-leaf transforms over :func:`value.walk`, so the
    two passes always agree on what a payload tree looks like.
"""

from __future__ import annotations

import dataclasses
from typing import Any, List, Optional, Tuple

from . import fields
from . import value
from .errors import ProtocolSequenceError, ReconstructionError
from .packet import Packet
from .value import Kind


def deconstruct(data: Any) -> Tuple[Any, List[bytes]]:
    """ Return a copy of *data* with every binary leaf replaced by a
        placeholder, and the list of extracted buffers. The placeholder
        index of each leaf is its position in the returned list.
    """

    buffers: List[bytes] = []

    def _extract(value_kind, leaf):
        if value_kind is Kind.BINARY:
            marker = value.placeholder(len(buffers))
            buffers.append(bytes(leaf))
            return marker
        return leaf

    data = value.walk(data, _extract)
    return data, buffers


def reconstruct(data: Any, buffers: List[bytes]) -> Any:
    """ Return a copy of *data* with every placeholder replaced by the
        buffer it refers to. A placeholder index that does not refer to
        one of the *buffers*, or a payload nested too deeply to traverse,
        raises :class:`ReconstructionError`.
    """

    def _resolve(value_kind, leaf):
        if value_kind is Kind.PLACEHOLDER:
            index = leaf.get(fields.INDEX)
            if isinstance(index, bool) or not isinstance(index, int):
                raise ReconstructionError(f"illegal attachments: index {index!r}")
            if index < 0 or index >= len(buffers):
                raise ReconstructionError(f"illegal attachments: index {index} of {len(buffers)}")
            return buffers[index]
        return leaf

    try:
        return value.walk(data, _resolve)
    except RecursionError:
        raise ReconstructionError("illegal attachments: payload nested too deeply")


def deconstruct_packet(packet: Packet) -> Tuple[Packet, List[bytes]]:
    """ Return the binary variant of *packet*, with its binary values
        replaced by placeholders, along with the extracted buffers. The
        original *packet* is not modified.
    """

    data, buffers = deconstruct(packet.data)
    packet = dataclasses.replace(
        packet,
        type=packet.type.binary(),
        data=data,
        attachments=len(buffers),
    )
    return packet, buffers


def reconstruct_packet(packet: Packet, buffers: List[bytes]) -> Packet:
    """ Return a copy of *packet* with its placeholders resolved against
        the received *buffers*.
    """

    data = reconstruct(packet.data, buffers)
    return dataclasses.replace(packet, data=data)


class Reconstruction:
    """ The in-progress reassembly of one binary packet: the packet as
        decoded from its text frame, still containing placeholders, and the
        buffers received so far. Each binary frame is handed to
        :func:`take`; the completed packet is returned once the last one
        arrives.
    """

    def __init__(self, packet: Packet):
        self.packet: Optional[Packet] = packet
        self.buffers: List[bytes] = []

    @property
    def remaining(self) -> int:
        if self.packet is None:
            return 0
        return self.packet.attachments - len(self.buffers)

    def take(self, buffer: bytes) -> Optional[Packet]:
        """ Accept one binary frame. Returns None while more frames are
            expected, and the reconstructed packet after the final one.
            Raises :class:`ReconstructionError` if the final packet cannot
            be reassembled.
        """

        if self.packet is None:
            raise ProtocolSequenceError("binary data for a finished reconstruction")

        self.buffers.append(buffer)

        if self.remaining > 0:
            return None

        packet = reconstruct_packet(self.packet, self.buffers)
        self.finish()
        return packet

    def finish(self) -> None:
        """ Release the references held for this reconstruction.
        """

        self.packet = None
        self.buffers = []


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
