"""Core value types shared by sockets, pipes, dialers and listeners.

The package implements the Scalability Protocols (commonly known as
"nanomsg"): request/reply, publish/subscribe, push/pull,
surveyor/respondent and similar messaging patterns.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

OPTION_RAW = "RAW"
OPTION_RECV_DEADLINE = "RECV-DEADLINE"
OPTION_SEND_DEADLINE = "SEND-DEADLINE"
OPTION_MAX_RECV_SIZE = "MAX-RCV-SIZE"
OPTION_RECONNECT_TIME = "RECONNECT-TIME"
OPTION_MAX_RECONNECT_TIME = "MAX-RECONNECT-TIME"
OPTION_DIAL_ASYNCH = "DIAL-ASYNCH"
OPTION_LOCAL_ADDR = "LOCAL-ADDR"
OPTION_REMOTE_ADDR = "REMOTE-ADDR"


@dataclass
class Message:
    """A message with a protocol header, a body and the pipe it came on."""

    header: bytearray = field(default_factory=bytearray)
    body: bytearray = field(default_factory=bytearray)
    pipe: Any = None

    def __post_init__(self):
        self.header = bytearray(self.header)
        self.body = bytearray(self.body)

    def copy_body(self):
        """Return an independent copy of the body."""
        return bytes(self.body)


@dataclass(frozen=True)
class ProtocolInfo:
    """Identity of a protocol and of the peer protocol it talks to."""

    self_id: int
    peer: int
    self_name: str
    peer_name: str


class PipeEvent(Enum):
    """Stages in a pipe's life reported to a socket's pipe event hook."""

    ATTACHING = "attaching"
    ATTACHED = "attached"
    DETACHED = "detached"