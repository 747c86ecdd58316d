import pytest

from oslabs.ring_buffer import (
    MESSAGE_SIZE,
    BufferEmpty,
    BufferFull,
    RingBuffer,
    RingBufferError,
)


def test_basic_operations(tmp_path):
    ring = RingBuffer(tmp_path / "test_ringbuffer.bin", 3)

    assert ring.is_empty()
    assert not ring.is_full()

    ring.write_message("msg1")
    ring.write_message("msg2")

    assert not ring.is_empty()
    assert ring.read_message() == "msg1"

    ring.write_message("msg3")
    ring.write_message("msg4")

    assert ring.is_full()
    assert ring.read_message() == "msg2"
    assert ring.read_message() == "msg3"

    assert not ring.is_full()
    assert not ring.is_empty()

    assert ring.read_message() == "msg4"
    assert ring.is_empty()


def test_full_buffer_rejects_write(tmp_path):
    ring = RingBuffer(tmp_path / "ring.bin", 1)
    ring.write_message("only")
    with pytest.raises(BufferFull):
        ring.write_message("more")
    assert ring.read_message() == "only"


def test_empty_buffer_rejects_read(tmp_path):
    ring = RingBuffer(tmp_path / "ring.bin", 2)
    with pytest.raises(BufferEmpty):
        ring.read_message()


def test_errors_share_base_class(tmp_path):
    ring = RingBuffer(tmp_path / "ring.bin", 1)
    with pytest.raises(RingBufferError) as empty_info:
        ring.read_message()
    assert isinstance(empty_info.value, BufferEmpty)

    ring.write_message("x")
    with pytest.raises(RingBufferError) as full_info:
        ring.write_message("y")
    assert isinstance(full_info.value, BufferFull)


def test_open_existing_shares_state(tmp_path):
    path = tmp_path / "ring.bin"
    writer = RingBuffer(path, 2)
    writer.write_message("hello")
    reader = RingBuffer(path)
    assert not reader.is_empty()
    assert reader.read_message() == "hello"
    assert writer.is_empty()


def test_missing_file_raises(tmp_path):
    with pytest.raises(RingBufferError):
        RingBuffer(tmp_path / "missing.bin")


def test_negative_capacity_raises(tmp_path):
    with pytest.raises(ValueError):
        RingBuffer(tmp_path / "ring.bin", -1)


def test_long_message_truncated(tmp_path):
    ring = RingBuffer(tmp_path / "ring.bin", 1)
    text = "abcdefghijklmnopqrstuvwxyz"
    ring.write_message(text)
    assert ring.read_message() == text[: MESSAGE_SIZE - 1]


def test_recreate_resets_buffer(tmp_path):
    path = tmp_path / "ring.bin"
    ring = RingBuffer(path, 2)
    ring.write_message("old")
    fresh = RingBuffer(path, 2)
    assert fresh.is_empty()