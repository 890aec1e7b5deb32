import pytest
import sioparser

from sioparser.protocol.packet import Packet, PacketType


encoder = sioparser.protocol.encoder.Encoder()


def test_plain_packets():

    expected = (
        (Packet(PacketType.CONNECT), '0'),
        (Packet(PacketType.CONNECT, '/admin', {'token': 'abc'}), '0/admin,{"token":"abc"}'),
        (Packet(PacketType.CONNECT, '/', {'token': 'abc'}), '0{"token":"abc"}'),
        (Packet(PacketType.DISCONNECT, '/admin'), '1/admin,'),
        (Packet(PacketType.EVENT, '/', ['chat message', 'hi']), '2["chat message","hi"]'),
        (Packet(PacketType.EVENT, '/', ['chat message', 'hi'], 5), '25["chat message","hi"]'),
        (Packet(PacketType.ACK, '/admin', ['ack-payload'], 12), '3/admin,12["ack-payload"]'),
        (Packet(PacketType.CONNECT_ERROR, '/', 'not authorized'), '4"not authorized"'),
        (Packet(PacketType.BINARY_EVENT, '/', ['empty']), '50-["empty"]'),
    )

    for packet, frame in expected:
        assert encoder.encode(packet) == [frame]


def test_binary_event():
    packet = Packet(PacketType.EVENT, '/', ['upload', {'file': b'abc', 'parts': [b'1', bytearray(b'2')]}])

    frames = encoder.encode(packet)

    text = '53-["upload",{"file":{"isPlaceholder":true,"index":0},' \
           '"parts":[{"isPlaceholder":true,"index":1},{"isPlaceholder":true,"index":2}]}]'

    assert frames[0] == text
    assert frames[1:] == [b'abc', b'1', b'2']

    # Encoding does not modify the packet.
    assert packet.type is PacketType.EVENT
    assert packet.data[1]['file'] == b'abc'


def test_binary_ack():
    packet = Packet(PacketType.ACK, '/files', [b'\x00\x01'], 9)

    frames = encoder.encode(packet)
    assert frames == ['61-/files,9[{"isPlaceholder":true,"index":0}]', b'\x00\x01']


def test_already_binary():
    packet = Packet(PacketType.BINARY_EVENT, '/', ['upload', b'abc'])
    assert packet.attachments == 1

    frames = encoder.encode(packet)
    assert frames == ['51-["upload",{"isPlaceholder":true,"index":0}]', b'abc']

    # A pending packet, still holding its placeholders, can be sent onward.
    pending = Packet(PacketType.BINARY_EVENT, '/', ['upload', {'isPlaceholder': True, 'index': 0}], None, 1)
    assert encoder.encode(pending) == ['51-["upload",{"isPlaceholder":true,"index":0}]']


def test_binary_not_allowed():

    for packet_type, data in ((PacketType.CONNECT, {'key': b'abc'}), (PacketType.CONNECT_ERROR, {'key': b'abc'})):
        with pytest.raises(TypeError):
            encoder.encode(Packet(packet_type, '/', data))

    with pytest.raises(TypeError):
        encoder.encode_as_string(Packet(PacketType.EVENT, '/', ['upload', b'abc']))


def test_outside_model():
    with pytest.raises(TypeError):
        encoder.encode(Packet(PacketType.EVENT, '/', ['chat message', set((1,))]))


def test_parser_factory():
    parser = sioparser.protocol.parser.Parser(max_attachments=4)

    assert isinstance(parser.encoder(), sioparser.protocol.encoder.Encoder)

    decoder = parser.decoder()
    assert isinstance(decoder, sioparser.protocol.decoder.Decoder)
    assert decoder.max_attachments == 4
    assert parser.decoder() is not decoder


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
