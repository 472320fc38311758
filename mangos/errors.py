"""Error codes raised by sockets, dialers, listeners and pipes."""

from enum import Enum


class ErrorCode(Enum):
    """The fixed set of error conditions, each with its message."""

    BAD_ADDR = "invalid address"
    BAD_HEADER = "invalid header received"
    BAD_VERSION = "invalid protocol version"
    TOO_SHORT = "message is too short"
    TOO_LONG = "message is too long"
    CLOSED = "object closed"
    CONN_REFUSED = "connection refused"
    SEND_TIMEOUT = "send time out"
    RECV_TIMEOUT = "receive time out"
    PROTO_STATE = "incorrect protocol state"
    PROTO_OP = "invalid operation for protocol"
    BAD_TRAN = "invalid or unsupported transport"
    BAD_PROTO = "invalid or unsupported protocol"
    BAD_OPTION = "invalid or unsupported option"
    BAD_VALUE = "invalid option value"
    GARBLED = "message garbled"
    ADDR_IN_USE = "address in use"
    BAD_PROPERTY = "invalid property name"
    TLS_NO_CONFIG = "missing TLS configuration"
    TLS_NO_CERT = "missing TLS certificates"
    NOT_RAW = "socket not raw"
    CANCELED = "operation canceled"
    NO_CONTEXT = "protocol does not support contexts"
    NO_PEERS = "no connected peers"


class MangosError(Exception):
    """An error carrying one of the predefined error codes.

    Two errors compare equal when they carry the same code.
    """

    def __init__(self, code):
        self.code = ErrorCode(code)
        super().__init__(self.code.value)

    def __eq__(self, other):
        if isinstance(other, MangosError):
            return self.code is other.code
        return NotImplemented

    def __hash__(self):
        return hash(self.code)

    def __repr__(self):
        return f"MangosError({self.code.name})"