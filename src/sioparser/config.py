""" Process-wide defaults for the packet codec. Each setting has a built-in
    default, which can be replaced by an environment variable, which can in
    turn be replaced at runtime via :func:`set`.
"""

import os
import threading


_defaults = dict()
_defaults['json'] = 'msgspec'
_defaults['max_attachments'] = 0

_environment = dict()
_environment['json'] = 'SIOPARSER_JSON'
_environment['max_attachments'] = 'SIOPARSER_MAX_ATTACHMENTS'

_overrides = dict()
_overrides_lock = threading.Lock()

json_backends = set(('msgspec', 'orjson'))


def get(name):
    """ Return the current value of the setting identified by *name*. A
        runtime override takes precedence over the environment, which takes
        precedence over the built-in default.
    """

    if name in _defaults:
        pass
    else:
        raise KeyError('unknown setting: ' + str(name))

    _overrides_lock.acquire()
    try:
        value = _overrides[name]
    except KeyError:
        value = None
    finally:
        _overrides_lock.release()

    if value is not None:
        return value

    value = os.environ.get(_environment[name])

    if value is None or value == '':
        return _defaults[name]

    return _interpret(name, value)


def set(name, value):
    """ Override the setting identified by *name* for the remainder of the
        process lifetime, or until :func:`reset` is called. Setting a value
        of None removes the override.
    """

    if name in _defaults:
        pass
    else:
        raise KeyError('unknown setting: ' + str(name))

    if value is not None:
        value = _interpret(name, value)

    _overrides_lock.acquire()
    try:
        if value is None:
            _overrides.pop(name, None)
        else:
            _overrides[name] = value
    finally:
        _overrides_lock.release()


def reset():
    """ Remove all runtime overrides.
    """

    _overrides_lock.acquire()
    _overrides.clear()
    _overrides_lock.release()


def _interpret(name, value):

    if name == 'json':
        value = str(value).lower()
        if value in json_backends:
            return value
        raise ValueError('unknown JSON backend: ' + repr(value))

    if name == 'max_attachments':
        try:
            value = int(value)
        except (TypeError, ValueError):
            raise ValueError('max_attachments must be an integer: ' + repr(value))

        if value < 0:
            raise ValueError('max_attachments cannot be negative: ' + repr(value))
        return value

    return value


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
