from . import errors
from . import fields
from . import value
from . import packet
from . import validate
from . import binary
from . import encoder
from . import decoder
from . import parser
from . import factory

from .errors import (
    ParserError,
    FramingError,
    ValidationError,
    ProtocolSequenceError,
    ReconstructionError,
)
from .packet import Packet, PacketType
from .encoder import Encoder
from .decoder import Decoder
from .parser import Parser


"""
sioparser Protocol Layer
========================

This package implements the socket.io packet codec. It turns packets into
frames for a transport, and frames from a transport back into packets.

The protocol layer MUST NOT depend on any transport implementation; the
transport hands frames in and takes frames out, nothing more.

---------------------------------------------------------------------

Layer Architecture Overview
---------------------------

Transport (not part of this package)
    Moves text and binary frames

    │               ▲
    ▼               │
Decoder (decoder.py)        Encoder (encoder.py)
    Frame grammar               Frame grammar
    Reconstruction state        Binary promotion
    Subscriber callbacks

    │               ▲
    ▼               │
Binary Attachments (binary.py)
    deconstruct() / reconstruct()
    Reconstruction

    │
    ▼
Payload Model (value.py, validate.py)
    Closed set of payload value kinds
    One shared tree walk
    Per-type payload shape rules

    │
    ▼
Packet Model (packet.py)
    PacketType
    Packet

    │
    ▼
Field Vocabulary (fields.py)
    Placeholder keys, delimiters, reserved event names

---------------------------------------------------------------------

Design Principles
-----------------

1. Transport Agnostic
   Frames are plain str and bytes values.

2. One Traversal
   Deconstruction and reconstruction are leaf transforms over the same
   walk, so the encoding and decoding sides agree on payload structure.

3. Explicit State
   The only mutable state is the Decoder's single pending reconstruction,
   guarded by one lock.

---------------------------------------------------------------------
"""


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
