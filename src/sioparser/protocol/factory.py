"""Convenience constructors for protocol packets."""

from __future__ import annotations

from typing import Any, Iterable, List, Optional

from .decoder import Decoder
from .encoder import Encoder, Frame
from .fields import DEFAULT_NAMESPACE
from .packet import Packet, PacketType
from .validate import is_event_name


def connect(auth: Optional[dict] = None, *, namespace: str = DEFAULT_NAMESPACE) -> Packet:
    return Packet(PacketType.CONNECT, namespace, auth)


def disconnect(*, namespace: str = DEFAULT_NAMESPACE) -> Packet:
    return Packet(PacketType.DISCONNECT, namespace)


def connect_error(error: Any, *, namespace: str = DEFAULT_NAMESPACE) -> Packet:
    return Packet(PacketType.CONNECT_ERROR, namespace, error)


def event(name: str, *args: Any, namespace: str = DEFAULT_NAMESPACE, id: Optional[int] = None) -> Packet:
    """Build an EVENT packet; arguments may include binary values."""

    if not is_event_name(name):
        raise ValueError(f"invalid event name: {name!r}")
    return Packet(PacketType.EVENT, namespace, [name, *args], id)


def ack(id: int, *args: Any, namespace: str = DEFAULT_NAMESPACE) -> Packet:
    """Build an ACK packet answering the event with the given *id*."""
    return Packet(PacketType.ACK, namespace, list(args), id)


def encode(packet: Packet) -> List[Frame]:
    return Encoder().encode(packet)


def decode(frames: Iterable[Frame]) -> List[Packet]:
    """Feed *frames* to a fresh Decoder and return every packet it emits."""

    decoded: List[Packet] = []
    decoder = Decoder()
    decoder.subscribe(decoded.append)

    try:
        for frame in frames:
            decoder.add(frame)
    finally:
        decoder.destroy()

    return decoded
