import pytest
import sioparser


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):

    monkeypatch.delenv('SIOPARSER_MAX_ATTACHMENTS', raising=False)

    yield

    sioparser.config.reset()


@pytest.fixture
def decoder():

    decoder = sioparser.protocol.decoder.Decoder()

    yield decoder

    decoder.destroy()


@pytest.fixture
def received(decoder):

    packets = list()
    decoder.subscribe(packets.append)
    return packets


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
