import dataclasses

import pytest

from mangos.base import Message, ProtocolInfo


def test_message_defaults_are_empty():
    msg = Message()
    assert msg.header == bytearray()
    assert msg.body == bytearray()
    assert msg.pipe is None


def test_message_accepts_bytes_and_is_mutable():
    msg = Message(header=b"hd", body=b"ping")
    msg.body.extend(b"!")
    assert msg.body == bytearray(b"ping!")
    assert msg.header == bytearray(b"hd")


def test_copy_body_is_independent():
    msg = Message(body=b"ping")
    copied = msg.copy_body()
    msg.body[0] = ord("x")
    assert copied == b"ping"
    assert msg.copy_body() == b"xing"


def test_defaults_not_shared():
    first = Message()
    second = Message()
    first.body.extend(b"ping")
    assert second.body == bytearray()


def test_protocol_info_equality_and_frozen():
    info = ProtocolInfo(1, 2, "mock1", "mock2")
    assert info == ProtocolInfo(1, 2, "mock1", "mock2")
    assert info.peer == 2
    assert info.self_name == "mock1"
    with pytest.raises(dataclasses.FrozenInstanceError):
        info.peer = 3