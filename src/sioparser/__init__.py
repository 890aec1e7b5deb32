""" Python implementation of the socket.io packet codec. This includes the
    packet model, the encoder that turns packets into text and binary frames,
    and the decoder that reassembles frames into packets.
"""

# Utility components.

from . import config
from . import json

# Primary public-facing interfaces.

from . import protocol

from .protocol import Packet, PacketType, Encoder, Decoder, Parser
from .protocol import (
    ParserError,
    FramingError,
    ValidationError,
    ProtocolSequenceError,
    ReconstructionError,
)

encode = protocol.factory.encode
decode = protocol.factory.decode

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
