"""Bit-level wire protocol carried over SIGUSR1/SIGUSR2.

A message is the client's pid as 32 bits, then every byte of the text as
8 bits, then a zero byte. Bits go least significant first. SIGUSR1 carries
a 1 and SIGUSR2 carries a 0.
"""

from __future__ import annotations

import signal
from dataclasses import dataclass

PID_BITS = 32
BYTE_BITS = 8


@dataclass(frozen=True)
class ByteReceived:
    """A complete, non-zero byte of message text."""

    value: int


@dataclass(frozen=True)
class MessageEnd:
    """The terminating zero byte; the sender is to be acknowledged."""

    client_pid: int


def encode_value(value: int, width: int) -> list[int]:
    """Return the low ``width`` bits of ``value``, least significant first."""
    if width < 0:
        raise ValueError("width must not be negative")
    return [(value >> shift) & 1 for shift in range(width)]


def encode_message(pid: int, text: str | bytes) -> list[int]:
    """Return every bit of a framed message from ``pid`` carrying ``text``.

    Text is sent up to its first NUL byte, as a C string would be.
    """
    data = text.encode("utf-8") if isinstance(text, str) else bytes(text)
    data = data.split(b"\0", 1)[0]
    bits = encode_value(pid, PID_BITS)
    for byte in data:
        bits.extend(encode_value(byte, BYTE_BITS))
    bits.extend(encode_value(0, BYTE_BITS))
    return bits


def signal_for(bit: int) -> signal.Signals:
    """Return the signal that carries ``bit``."""
    if bit not in (0, 1):
        raise ValueError(f"not a bit: {bit!r}")
    return signal.SIGUSR1 if bit else signal.SIGUSR2


def bit_for(signum: int) -> int:
    """Return the bit carried by signal ``signum``."""
    if signum == signal.SIGUSR1:
        return 1
    if signum == signal.SIGUSR2:
        return 0
    raise ValueError(f"signal {signum!r} carries no bit")


class Decoder:
    """Rebuilds messages from a stream of bits."""

    def __init__(self) -> None:
        self.client_pid = 0
        self._pid_bits = 0
        self._byte = 0
        self._byte_bits = 0

    def feed(self, bit: int) -> ByteReceived | MessageEnd | None:
        """Take one bit; return an event when a byte or a message completes."""
        if bit not in (0, 1):
            raise ValueError(f"not a bit: {bit!r}")
        if self._pid_bits < PID_BITS:
            self.client_pid |= bit << self._pid_bits
            self._pid_bits += 1
            return None
        self._byte |= bit << self._byte_bits
        self._byte_bits += 1
        if self._byte_bits < BYTE_BITS:
            return None
        value = self._byte
        self._byte = 0
        self._byte_bits = 0
        if value:
            return ByteReceived(value)
        event = MessageEnd(self.client_pid)
        self.client_pid = 0
        self._pid_bits = 0
        return event