""" Payload shape rules. Each packet type allows only certain payloads;
    :func:`is_valid` is applied to every decoded text frame that carries a
    payload.
"""

from .fields import RESERVED_EVENTS
from .packet import PacketType
from .value import Kind, kind


# Stands for a frame with no payload text at all, as opposed to an explicit
# JSON null.

ABSENT = object()


def is_valid(type, payload=ABSENT):
    """ Return True if *payload* is an acceptable shape for a packet of the
        given *type*. Omitting *payload*, or passing :data:`ABSENT`, checks
        a packet with no payload; None is the JSON value null. A payload
        that is not a payload value at all, such as a set, is never valid.

        ========================  ==========================================
        CONNECT                   object, or absent
        DISCONNECT                absent, or null
        EVENT, BINARY_EVENT       non-empty array; the first element is an
                                  event name that is not reserved
        ACK, BINARY_ACK           array
        CONNECT_ERROR             object or string
        ========================  ==========================================
    """

    type = PacketType(type)

    if payload is ABSENT:
        return type is PacketType.CONNECT or type is PacketType.DISCONNECT

    try:
        payload_kind = kind(payload)
    except TypeError:
        return False

    if type is PacketType.CONNECT:
        return payload_kind is Kind.OBJECT

    if type is PacketType.DISCONNECT:
        return payload_kind is Kind.NULL

    if type is PacketType.EVENT or type is PacketType.BINARY_EVENT:
        if payload_kind is Kind.ARRAY and len(payload) > 0:
            return is_event_name(payload[0])
        return False

    if type is PacketType.ACK or type is PacketType.BINARY_ACK:
        return payload_kind is Kind.ARRAY

    if type is PacketType.CONNECT_ERROR:
        return payload_kind is Kind.OBJECT or payload_kind is Kind.STRING

    return False


def is_event_name(name):
    """ Return True if *name* can be used as the name of an event.
    """

    return isinstance(name, str) and name not in RESERVED_EVENTS


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
