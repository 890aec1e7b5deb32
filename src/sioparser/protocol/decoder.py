""" Packet decoding. A :class:`Decoder` accepts frames from the transport
    one at a time, in arrival order, and notifies its subscribers of each
    completed :class:`packet.Packet`.

    Binary packets arrive as a text frame followed by one binary frame per
    attachment. Between the two the decoder holds a single
    :class:`binary.Reconstruction`; while one is pending, only binary frames
    are accepted, and while none is pending, only text frames are.
"""

import io
import logging
import threading

from .. import config
from .. import json
from . import binary
from . import fields
from .errors import FramingError, ProtocolSequenceError, ValidationError
from .packet import Packet, PacketType
from .validate import is_valid


logger = logging.getLogger(__name__)


class Decoder:
    """ Decode frames into packets. The *max_attachments* argument caps the
        number of attachments a text frame may declare; None uses the
        'max_attachments' setting from :mod:`sioparser.config`, and zero
        means there is no cap.

        A Decoder may be fed and destroyed from different threads. All
        changes to the pending reconstruction are made while holding
        :attr:`lock`; subscribers are invoked after it is released, on the
        thread that delivered the final frame of the packet.
    """

    def __init__(self, max_attachments=None):

        if max_attachments is None:
            max_attachments = config.get('max_attachments')

        self.max_attachments = max_attachments
        self.callbacks = list()
        self.lock = threading.Lock()

        self._reconstruction = None


    @property
    def pending(self):
        """ True if a binary packet is waiting for further attachments. The
            answer may be stale by the time the caller acts on it.
        """

        with self.lock:
            return self._reconstruction is not None


    def subscribe(self, method):
        """ Register a callback to be invoked with each decoded packet.
            Callbacks are invoked synchronously, in the order they were
            registered.
        """

        if callable(method):
            pass
        else:
            raise TypeError('the registered method must be callable')

        with self.lock:
            self.callbacks.append(method)


    def unsubscribe(self, method):
        """ Remove a callback previously registered via :func:`subscribe`.
            Removing a callback that is not registered is not an error.
        """

        with self.lock:
            try:
                self.callbacks.remove(method)
            except ValueError:
                pass


    def add(self, data):
        """ Decode one frame. A str, or a text stream, is a text frame;
            bytes, bytearray, memoryview, or a binary stream, is a binary
            frame; binary streams are closed once read. Any error is
            raised to the caller; the decoder remains usable afterwards.
        """

        if isinstance(data, str):
            self._add_text(data)
        elif isinstance(data, (bytes, bytearray, memoryview)):
            self._add_binary(bytes(data))
        elif isinstance(data, io.TextIOBase):
            self._add_text(data.read())
        elif isinstance(data, (io.RawIOBase, io.BufferedIOBase)):
            try:
                buffer = data.read()
            finally:
                data.close()

            if buffer is None:
                raise FramingError('no binary data available from stream')

            self._add_binary(bytes(buffer))
        else:
            raise TypeError('unknown frame type: ' + type(data).__name__)


    def destroy(self):
        """ Abandon any pending reconstruction without emitting it. Calling
            this more than once is harmless.
        """

        with self.lock:
            reconstruction = self._reconstruction
            self._reconstruction = None

        if reconstruction is not None:
            logger.debug("discarding reconstruction with %d attachments remaining",
                         reconstruction.remaining)
            reconstruction.finish()


    def _propagate(self, packet):
        """ Invoke all registered callbacks with a newly decoded packet.
            A failing callback does not prevent the remaining callbacks
            from being invoked.
        """

        with self.lock:
            callbacks = tuple(self.callbacks)

        for callback in callbacks:
            try:
                callback(packet)
            except Exception:
                logger.exception("callback %r failed for %r", callback, packet)
                continue


    def _add_text(self, text):

        with self.lock:
            if self._reconstruction is not None:
                raise ProtocolSequenceError('got plaintext data when reconstructing a packet')

            try:
                packet = self.decode_string(text)
            except (FramingError, ValidationError) as e:
                logger.debug("decode error: %s", e)
                raise

            if packet.type.is_binary and packet.attachments > 0:
                logger.debug("awaiting %d attachments for %r", packet.attachments, packet)
                self._reconstruction = binary.Reconstruction(packet)
                return

        self._propagate(packet)


    def _add_binary(self, buffer):

        with self.lock:
            reconstruction = self._reconstruction

            if reconstruction is None:
                raise ProtocolSequenceError('got binary data when not reconstructing a packet')

            # Any failure abandons the reconstruction; the decoder is idle
            # again when the error reaches the caller.

            try:
                packet = reconstruction.take(buffer)
            except Exception as e:
                logger.debug("reconstruction error: %s", e)
                self._reconstruction = None
                reconstruction.finish()
                raise

            if packet is None:
                return

            self._reconstruction = None

        self._propagate(packet)


    def decode_string(self, text):
        """ Parse a single text frame and return the resulting
            :class:`packet.Packet`. No decoder state is consulted or
            changed.
        """

        length = len(text)
        position = 0

        # Packet type.

        if length == 0:
            raise FramingError('invalid payload')

        try:
            type = PacketType.from_digit(text[0])
        except ValueError:
            raise FramingError(f"unknown packet type {text[0]!r}")

        position = 1

        # Attachment count, binary packets only.

        attachments = None

        if type.is_binary:
            start = position
            while position < length and _is_digit(text[position]):
                position += 1

            if position == start or position == length or text[position] != fields.ATTACHMENTS_END:
                raise FramingError('illegal attachments')

            attachments = int(text[start:position])
            position += 1

            if self.max_attachments and attachments > self.max_attachments:
                raise FramingError(f"illegal attachments: {attachments} exceeds {self.max_attachments}")

        # Namespace. A namespace without a terminating comma consumes the
        # remainder of the frame.

        namespace = fields.DEFAULT_NAMESPACE

        if position < length and text[position] == fields.NAMESPACE_PREFIX:
            end = text.find(fields.NAMESPACE_END, position)
            if end == -1:
                namespace = text[position:]
                position = length
            else:
                namespace = text[position:end]
                position = end + 1

        # Acknowledgement id.

        id = None
        start = position

        while position < length and _is_digit(text[position]):
            position += 1

        if position > start:
            id = int(text[start:position])

        # Payload.

        data = None

        if position < length:
            try:
                data = json.loads(text[position:])
            except json.DecodeError:
                raise FramingError('invalid payload')

            if is_valid(type, data):
                pass
            else:
                raise ValidationError('invalid payload')

        try:
            packet = Packet(type, namespace, data, id, attachments)
        except ValueError as e:
            raise FramingError(str(e))

        logger.debug("decoded %s as %r", text, packet)
        return packet


# end of class Decoder


def _is_digit(character):
    return '0' <= character <= '9'


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
