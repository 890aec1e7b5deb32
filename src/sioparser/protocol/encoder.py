""" Packet encoding. A packet becomes one text frame, followed by one
    binary frame per attachment.

    Text frame layout::

        <type>[<attachments>-][<namespace>,][<id>][<json payload>]

    - type: a single digit, see :class:`packet.PacketType`
    - attachments: present for the binary types only
    - namespace: omitted when it is the default namespace '/'
    - id: omitted when the packet has no acknowledgement id
    - json payload: omitted when the packet has no data
"""

from __future__ import annotations

import logging
from typing import List, Union

from .. import json
from . import binary
from . import fields
from . import value
from .packet import Packet, PacketType


logger = logging.getLogger(__name__)

Frame = Union[str, bytes]


class Encoder:
    """ Encode :class:`Packet` instances into frames for the transport.
        An Encoder holds no state, a single instance can be shared freely.
    """

    def encode(self, packet: Packet) -> List[Frame]:
        """ Return the frames for *packet*: the text frame first, then the
            binary frames in placeholder order. An EVENT or ACK packet whose
            data contains binary values is sent as its binary variant.
        """

        logger.debug("encoding packet %r", packet)

        if value.has_binary(packet.data):
            return self.encode_as_binary(packet)

        return [self.encode_as_string(packet)]

    def encode_as_string(self, packet: Packet) -> str:
        """ Return the text frame for *packet*. The packet data must not
            contain binary values.
        """

        parts = [packet.type.digit]

        if packet.type.is_binary:
            parts.append(str(packet.attachments))
            parts.append(fields.ATTACHMENTS_END)

        if packet.namespace and packet.namespace != fields.DEFAULT_NAMESPACE:
            parts.append(packet.namespace)
            parts.append(fields.NAMESPACE_END)

        if packet.id is not None:
            parts.append(str(packet.id))

        if packet.data is not None:
            if value.has_binary(packet.data):
                raise TypeError("binary data must be deconstructed before encoding")
            parts.append(json.dumps(packet.data).decode("utf-8"))

        encoded = "".join(parts)
        logger.debug("encoded %r as %s", packet, encoded)
        return encoded

    def encode_as_binary(self, packet: Packet) -> List[Frame]:
        """ Deconstruct *packet* and return its text frame followed by the
            extracted binary frames. Only EVENT and ACK packets, and their
            binary variants, may carry binary data.
        """

        if packet.type in (PacketType.CONNECT, PacketType.DISCONNECT, PacketType.CONNECT_ERROR):
            raise TypeError(f"{packet.type.name} packets cannot carry binary data")

        deconstructed, buffers = binary.deconstruct_packet(packet)

        frames: List[Frame] = [self.encode_as_string(deconstructed)]
        frames.extend(buffers)
        return frames


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
