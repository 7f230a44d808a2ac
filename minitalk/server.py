"""Receiving end: turns incoming SIGUSR1/SIGUSR2 bits into text on output."""

from __future__ import annotations

import contextlib
import os
import signal
import sys
from typing import BinaryIO

from .formatting import printf
from .protocol import ByteReceived, Decoder, MessageEnd, bit_for

_SIGNALS = (signal.SIGUSR1, signal.SIGUSR2)


class Server:
    """Decodes bit signals and writes every received byte to ``out``.

    When a message ends, the sending client is acknowledged with SIGUSR1.
    """

    def __init__(self, out: BinaryIO | None = None) -> None:
        self.out = sys.stdout.buffer if out is None else out
        self._decoder = Decoder()

    def handle(self, signum: int) -> ByteReceived | MessageEnd | None:
        """Process one signal; return the event it completed, if any."""
        event = self._decoder.feed(bit_for(signum))
        if isinstance(event, ByteReceived):
            self.out.write(bytes([event.value]))
            self.out.flush()
        elif isinstance(event, MessageEnd) and event.client_pid > 0:
            # A client that has already gone away is not the server's problem.
            with contextlib.suppress(OSError):
                os.kill(event.client_pid, signal.SIGUSR1)
        return event

    def install(self) -> dict[int, object]:
        """Route SIGUSR1 and SIGUSR2 to this server.

        Returns the handlers that were in place before.
        """
        previous = {}
        for signum in _SIGNALS:
            previous[signum] = signal.signal(
                signum, lambda received, _frame: self.handle(received)
            )
        return previous


def main(argv: list[str] | None = None) -> int:
    """Print the server's pid and print incoming messages until interrupted."""
    server = Server()
    printf("Server PID: %u\n", os.getpid())
    previous = server.install()
    try:
        while True:
            signal.pause()
    except KeyboardInterrupt:
        return 0
    finally:
        for signum, handler in previous.items():
            if handler is not None:
                signal.signal(signum, handler)


if __name__ == "__main__":
    sys.exit(main())