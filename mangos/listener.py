"""Listeners: endpoints that accept inbound connections for a socket."""

import threading
import time

from .errors import ErrorCode, MangosError

_ACCEPT_RETRY_DELAY = 0.01


class _Endpoint:
    """State shared by dialers and listeners: the transport, socket and flags."""

    def __init__(self, transport, socket, address):
        self._transport = transport
        self._socket = socket
        self._address = address
        self._closed = False
        self._active = False
        self._lock = threading.Lock()

    def _claim(self, busy_first=False):
        """Mark the endpoint active; the caller holds the lock."""
        checks = [(self._closed, ErrorCode.CLOSED), (self._active, ErrorCode.ADDR_IN_USE)]
        if busy_first:
            checks.reverse()
        for failed, code in checks:
            if failed:
                raise MangosError(code)
        self._active = True

    def _mark_closed(self):
        """Mark the endpoint closed; the caller holds the lock."""
        if self._closed:
            raise MangosError(ErrorCode.CLOSED)
        self._closed = True


class Listener(_Endpoint):
    """Accepts connections through a transport listener and hands them to a socket."""

    def __init__(self, transport_listener, socket, address):
        super().__init__(transport_listener, socket, address)

    @property
    def address(self):
        """The full address the transport listener is bound to."""
        return self._transport.address

    def get_option(self, name):
        """Listeners keep no options of their own; ask the transport."""
        return self._transport.get_option(name)

    def set_option(self, name, value):
        """Listeners keep no options of their own; pass to the transport."""
        self._transport.set_option(name, value)

    def listen(self):
        """Start listening and accept connections in the background."""
        with self._lock:
            self._claim()
        try:
            self._transport.listen()
        except BaseException:
            with self._lock:
                self._active = False
            raise
        threading.Thread(target=self._serve, daemon=True).start()

    def close(self):
        """Close the listener and its transport listener."""
        with self._lock:
            self._mark_closed()
            self._transport.close()

    def _is_closed(self):
        with self._lock:
            return self._closed

    def _serve(self):
        while not self._is_closed():
            try:
                transport_pipe = self._transport.accept()
            except MangosError as err:
                if err.code is ErrorCode.CLOSED:
                    return
                # Back off briefly so a failing accept does not spin.
                time.sleep(_ACCEPT_RETRY_DELAY)
                continue
            self._socket._add_pipe(transport_pipe, None, self)