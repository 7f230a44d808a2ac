import signal

import pytest

from minitalk.protocol import (
    ByteReceived,
    Decoder,
    MessageEnd,
    bit_for,
    encode_message,
    encode_value,
    signal_for,
)


def _decode(bits):
    decoder = Decoder()
    events = [decoder.feed(bit) for bit in bits]
    return [event for event in events if event is not None]


def test_encode_value_is_least_significant_first():
    assert encode_value(6, 4) == [0, 1, 1, 0]


def test_encode_value_width():
    assert len(encode_value(0, 32)) == 32
    assert encode_value(0, 8) == [0] * 8


def test_encode_value_reassembles():
    for value in (0, 1, 255, 4242, 2**31 + 7):
        bits = encode_value(value, 32)
        assert sum(bit << i for i, bit in enumerate(bits)) == value


def test_encode_value_rejects_negative_width():
    with pytest.raises(ValueError):
        encode_value(3, -1)


def test_encode_message_length():
    bits = encode_message(4242, "abc")
    assert len(bits) == 32 + 3 * 8 + 8
    assert bits[-8:] == [0] * 8
    assert bits[:32] == encode_value(4242, 32)


def test_encode_message_stops_at_nul():
    assert encode_message(7, "ab\0cd") == encode_message(7, "ab")


def test_round_trip_text():
    events = _decode(encode_message(1234, "hi"))
    assert events == [ByteReceived(ord("h")), ByteReceived(ord("i")), MessageEnd(1234)]


def test_round_trip_utf8_bytes():
    text = "ciao è"
    events = _decode(encode_message(99, text))
    data = bytes(e.value for e in events if isinstance(e, ByteReceived))
    assert data.decode("utf-8") == text
    assert events[-1] == MessageEnd(99)


def test_empty_message_only_ends():
    assert _decode(encode_message(5, "")) == [MessageEnd(5)]


def test_decoder_resets_between_messages():
    bits = encode_message(11, "x") + encode_message(22, "y")
    events = _decode(bits)
    assert events == [
        ByteReceived(ord("x")),
        MessageEnd(11),
        ByteReceived(ord("y")),
        MessageEnd(22),
    ]


def test_decoder_collects_pid_before_bytes():
    decoder = Decoder()
    for bit in encode_value(321, 32):
        assert decoder.feed(bit) is None
    assert decoder.client_pid == 321


def test_decoder_rejects_non_bit():
    with pytest.raises(ValueError):
        Decoder().feed(2)


def test_signal_mapping_round_trip():
    assert signal_for(1) == signal.SIGUSR1
    assert signal_for(0) == signal.SIGUSR2
    for bit in (0, 1):
        assert bit_for(signal_for(bit)) == bit


def test_signal_for_rejects_non_bit():
    with pytest.raises(ValueError):
        signal_for(3)


def test_bit_for_rejects_other_signal():
    with pytest.raises(ValueError):
        bit_for(signal.SIGINT)