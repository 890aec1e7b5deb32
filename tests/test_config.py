import pytest
import sioparser


def test_defaults():
    assert sioparser.config.get('max_attachments') == 0
    assert sioparser.config.get('json') in sioparser.config.json_backends


def test_environment(monkeypatch):
    monkeypatch.setenv('SIOPARSER_MAX_ATTACHMENTS', '5')
    assert sioparser.config.get('max_attachments') == 5

    monkeypatch.setenv('SIOPARSER_MAX_ATTACHMENTS', '')
    assert sioparser.config.get('max_attachments') == 0

    monkeypatch.setenv('SIOPARSER_MAX_ATTACHMENTS', 'many')
    with pytest.raises(ValueError):
        sioparser.config.get('max_attachments')


def test_override(monkeypatch):
    monkeypatch.setenv('SIOPARSER_MAX_ATTACHMENTS', '5')

    sioparser.config.set('max_attachments', 2)
    assert sioparser.config.get('max_attachments') == 2

    sioparser.config.set('max_attachments', None)
    assert sioparser.config.get('max_attachments') == 5

    sioparser.config.set('max_attachments', '3')
    assert sioparser.config.get('max_attachments') == 3

    sioparser.config.reset()
    assert sioparser.config.get('max_attachments') == 5


def test_bad_values():
    with pytest.raises(ValueError):
        sioparser.config.set('max_attachments', -1)

    with pytest.raises(ValueError):
        sioparser.config.set('json', 'pickle')

    with pytest.raises(KeyError):
        sioparser.config.get('nonexistent')

    with pytest.raises(KeyError):
        sioparser.config.set('nonexistent', 1)


def test_decoder_uses_setting():
    sioparser.config.set('max_attachments', 1)
    decoder = sioparser.protocol.decoder.Decoder()
    assert decoder.max_attachments == 1

    decoder = sioparser.protocol.decoder.Decoder(max_attachments=10)
    assert decoder.max_attachments == 10


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
