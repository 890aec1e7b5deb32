from __future__ import annotations

from typing import Optional

from .decoder import Decoder
from .encoder import Encoder


class Parser:
    """Factory for the encoder/decoder pair of one connection."""

    def __init__(self, max_attachments: Optional[int] = None):
        self.max_attachments = max_attachments

    def encoder(self) -> Encoder:
        return Encoder()

    def decoder(self) -> Decoder:
        return Decoder(max_attachments=self.max_attachments)
