''' Wrapper module to select the configured library to handle the equivalent
    of :func:`json.loads` and :func:`json.dumps`. The choice is made once, at
    import time, according to the 'json' setting in :mod:`sioparser.config`.
'''

from . import config

msgspec = None
orjson = None

backend = config.get('json')

# config.get() only ever returns one of the two known backends.

if backend == 'msgspec':
    import msgspec
else:
    import orjson


# The msgspec 'encode' operation returns bytes, as does orjson.dumps. Both
# 'loads' methods accept either str or bytes.

if msgspec is not None:
    encoder = msgspec.json.Encoder()
    decoder = msgspec.json.Decoder()
    dumps = encoder.encode
    loads = decoder.decode
    DecodeError = msgspec.DecodeError
else:
    dumps = orjson.dumps
    loads = orjson.loads
    DecodeError = orjson.JSONDecodeError


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
