"""Dialers: endpoints that connect out to a remote address and redial on loss."""

import random
import threading
from contextlib import suppress
from datetime import timedelta

from .base import OPTION_DIAL_ASYNCH, OPTION_MAX_RECONNECT_TIME, OPTION_RECONNECT_TIME
from .errors import ErrorCode, MangosError
from .listener import _Endpoint

# Each failed attempt grows the reconnect interval by a random factor in
# this range (about 1.3x on average), so a failure is not punished too hard.
_MIN_BACKOFF = 1.1
_MAX_BACKOFF = 1.5

DEFAULT_RECONNECT_TIME = timedelta(milliseconds=100)
DEFAULT_MAX_RECONNECT_TIME = timedelta(0)


def _valid_duration(value):
    if isinstance(value, timedelta) and value >= timedelta(0):
        return value
    raise MangosError(ErrorCode.BAD_VALUE)


def _start_timer(delay, action):
    timer = threading.Timer(delay.total_seconds(), action)
    timer.daemon = True
    timer.start()
    return timer


class Dialer(_Endpoint):
    """Connects a socket to an address through a transport dialer.

    When a connection attempt fails (and redialing applies) or an
    established pipe closes, the dialer tries again after a delay that
    backs off up to the maximum reconnect time.  A maximum of zero means
    the delay never grows.
    """

    def __init__(
        self,
        transport_dialer,
        socket,
        address,
        reconnect_time=DEFAULT_RECONNECT_TIME,
        max_reconnect_time=DEFAULT_MAX_RECONNECT_TIME,
        asynch=False,
    ):
        super().__init__(transport_dialer, socket, address)
        self._reconnect_min = reconnect_time
        self._reconnect_max = max_reconnect_time
        self._reconnect_time = reconnect_time
        self._asynch = asynch
        self._redialer = None

    @property
    def address(self):
        """The full address this dialer connects to."""
        return self._address

    def dial(self):
        """Start connecting.

        In synchronous mode the first attempt's error is raised; in
        asynchronous mode connecting happens in the background.
        """
        with self._lock:
            self._claim(busy_first=True)
            self._reconnect_time = self._reconnect_min
            asynch = self._asynch
        if asynch:
            threading.Thread(target=self._redial, daemon=True).start()
            return
        self._dial(redial=False)

    def close(self):
        """Close the dialer, cancelling any pending redial."""
        with self._lock:
            self._mark_closed()
            if self._redialer is not None:
                self._redialer.cancel()

    def get_option(self, name):
        """Return a dialer option, else the transport's, else the socket's."""
        local = {
            OPTION_RECONNECT_TIME: "_reconnect_min",
            OPTION_MAX_RECONNECT_TIME: "_reconnect_max",
            OPTION_DIAL_ASYNCH: "_asynch",
        }
        if name in local:
            with self._lock:
                return getattr(self, local[name])
        try:
            return self._transport.get_option(name)
        except MangosError as err:
            if err.code is not ErrorCode.BAD_OPTION:
                raise
        return self._socket.get_option(name)

    def set_option(self, name, value):
        """Set a dialer option; anything else goes to the transport."""
        if name == OPTION_RECONNECT_TIME:
            attribute, value = "_reconnect_min", _valid_duration(value)
        elif name == OPTION_MAX_RECONNECT_TIME:
            attribute, value = "_reconnect_max", _valid_duration(value)
        elif name == OPTION_DIAL_ASYNCH:
            if not isinstance(value, bool):
                raise MangosError(ErrorCode.BAD_VALUE)
            attribute = "_asynch"
        else:
            self._transport.set_option(name, value)
            return
        with self._lock:
            setattr(self, attribute, value)

    def pipe_connected(self):
        """Reset the backoff once a pipe is fully accepted by the socket."""
        with self._lock:
            self._reconnect_time = self._reconnect_min

    def pipe_closed(self):
        """Schedule a redial after a pipe from this dialer has closed."""
        with self._lock:
            _start_timer(self._reconnect_time, self._redial)

    def _dial(self, redial):
        with self._lock:
            if self._closed:
                raise MangosError(ErrorCode.CLOSED)
            redial = redial or self._asynch

        try:
            transport_pipe = self._transport.dial()
        except MangosError as err:
            if redial and err.code is not ErrorCode.CLOSED:
                with self._lock:
                    self._schedule_redial()
            raise
        self._socket._add_pipe(transport_pipe, self, None)

    def _schedule_redial(self):
        delay = self._reconnect_time
        if self._reconnect_max:
            factor = random.uniform(_MIN_BACKOFF, _MAX_BACKOFF)
            self._reconnect_time = min(self._reconnect_time * factor, self._reconnect_max)
        self._redialer = _start_timer(delay, self._redial)

    def _redial(self):
        with suppress(MangosError):
            self._dial(redial=True)