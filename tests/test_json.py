import json
import pytest
import sioparser


def test_json_encode_and_decode():
    encode_and_decode(json.dumps, json.loads, dump_is_bytes=False)


def test_sioparser_encode_and_decode():
    encode_and_decode(sioparser.json.dumps, sioparser.json.loads)


def test_loads_accepts_str():
    decoded = sioparser.json.loads('["chat message","hi"]')
    assert decoded == ['chat message', 'hi']


def test_decode_error():
    with pytest.raises(sioparser.json.DecodeError):
        sioparser.json.loads('["unterminated"')

    with pytest.raises(sioparser.json.DecodeError):
        sioparser.json.loads('{"token":"abc"} trailing')


def test_backend():
    assert sioparser.json.backend in sioparser.config.json_backends

    # Exactly one library is imported, and it is the configured one.

    if sioparser.json.backend == 'msgspec':
        assert sioparser.json.msgspec is not None
        assert sioparser.json.orjson is None
        assert sioparser.json.DecodeError is sioparser.json.msgspec.DecodeError
    else:
        assert sioparser.json.orjson is not None
        assert sioparser.json.msgspec is None
        assert sioparser.json.DecodeError is sioparser.json.orjson.JSONDecodeError


def encode_and_decode(dumps, loads, dump_is_bytes=True):

    input_dictionary = dict()
    input_dictionary['list'] = [1, 2, 3, 'a', 'b', None, 'c', 'z']
    input_dictionary['dict'] = {'one': 1, 'two': 2}
    input_dictionary['none'] = None
    input_dictionary['true'] = True
    input_dictionary['false'] = False
    input_dictionary['placeholder'] = {'isPlaceholder': True, 'index': 0}

    encoded = dumps(input_dictionary)

    if dump_is_bytes:
        assert isinstance(encoded, bytes)
    else:
        assert isinstance(encoded, str)

    # It won't do to compare the encoded JSON against a pre-set notion of
    # what the encoded output should look like, as there is variance in
    # the handling of whitespace between the different modules.

    decoded = loads(encoded)
    assert isinstance(decoded, dict)
    assert decoded == input_dictionary


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
