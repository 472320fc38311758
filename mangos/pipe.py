"""Pipes: single connections between a socket and a remote peer."""

import secrets
import threading
from contextlib import suppress

from .errors import ErrorCode, MangosError

_ID_MASK = 0x7FFFFFFF
_WRAP = 1 << 32


class PipeIDAllocator:
    """Hands out unique, non-zero 31-bit pipe IDs.

    The counter starts at a random point unless ``start`` is given, and
    wraps as an unsigned 32-bit value.
    """

    def __init__(self, start=None):
        self._lock = threading.Lock()
        self._used = set()
        self.next_id = secrets.randbits(32) if start is None else start % _WRAP

    def get(self):
        """Reserve and return the next free ID."""
        with self._lock:
            while True:
                pipe_id = self.next_id & _ID_MASK
                self.next_id = (self.next_id + 1) % _WRAP
                if pipe_id and pipe_id not in self._used:
                    self._used.add(pipe_id)
                    return pipe_id

    def free(self, pipe_id):
        """Release an ID; releasing one not in use is an error."""
        with self._lock:
            try:
                self._used.remove(pipe_id)
            except KeyError:
                raise ValueError("free of unused pipe ID") from None


pipe_ids = PipeIDAllocator()


class PipeList:
    """A thread-safe collection of pipes keyed by ID."""

    def __init__(self):
        self._pipes = {}
        self._lock = threading.Lock()

    def add(self, pipe):
        with self._lock:
            self._pipes[pipe.id] = pipe

    def remove(self, pipe):
        with self._lock:
            self._pipes.pop(pipe.id, None)

    def close_all(self):
        """Close every pipe, each in its own background thread."""
        with self._lock:
            pipes = list(self._pipes.values())
        for pipe in pipes:
            threading.Thread(target=pipe.close, daemon=True).start()

    def __len__(self):
        with self._lock:
            return len(self._pipes)

    def __contains__(self, pipe):
        with self._lock:
            return self._pipes.get(pipe.id) is pipe


class Pipe:
    """Wraps a transport pipe with the state the socket keeps for it."""

    def __init__(self, transport_pipe, socket, dialer=None, listener=None):
        self.id = pipe_ids.get()
        self.transport_pipe = transport_pipe
        self.socket = socket
        self.dialer = dialer
        self.listener = listener
        self.private = None
        self.added = False
        self.closing = False
        # Held by the socket across adding and removing the pipe.
        self.lock = threading.Lock()
        self._close_lock = threading.Lock()
        self._closed = False

    @property
    def address(self):
        """The address of the endpoint that created this pipe, or ''."""
        if self.listener is not None:
            return self.listener.address
        if self.dialer is not None:
            return self.dialer.address
        return ""

    def close(self):
        """Close the pipe once; later calls do nothing."""
        with self._close_lock:
            if self._closed:
                return
            self._closed = True

        with suppress(MangosError):
            self.transport_pipe.close()

        with self.lock:
            self.closing = True
            if self.added:
                self.socket._remove_pipe(self)

        if self.dialer is not None:
            threading.Thread(target=self.dialer.pipe_closed, daemon=True).start()

    def send_msg(self, msg):
        """Send a message; on failure the pipe is closed and the error raised."""
        try:
            self.transport_pipe.send(msg)
        except MangosError:
            self.close()
            raise

    def recv_msg(self):
        """Receive a message tagged with this pipe, or None once the pipe fails."""
        try:
            msg = self.transport_pipe.recv()
        except MangosError:
            self.close()
            return None
        msg.pipe = self
        return msg

    def get_option(self, name):
        """Look an option up on the transport, then on the owning endpoint."""
        try:
            return self.transport_pipe.get_option(name)
        except MangosError as err:
            if err.code is not ErrorCode.BAD_OPTION:
                raise
            owner = self.dialer if self.dialer is not None else self.listener
            if owner is None:
                raise
            return owner.get_option(name)