"""Sending end: signals a message to a server one bit at a time."""

from __future__ import annotations

import os
import signal
import sys
import threading
import time

from .formatting import printf
from .protocol import encode_message, signal_for
from .textutil import atoi

DEFAULT_DELAY = 60e-6


def send(server_pid: int, message: str | bytes, delay: float = DEFAULT_DELAY) -> None:
    """Signal ``message`` to the process ``server_pid``, pausing ``delay``
    seconds after every bit.

    Raises ValueError for a pid that does not name a single process and
    OSError when the server cannot be signalled.
    """
    if server_pid <= 0:
        raise ValueError(f"invalid server pid: {server_pid}")
    for bit in encode_message(os.getpid(), message):
        os.kill(server_pid, signal_for(bit))
        time.sleep(delay)


def main(argv: list[str] | None = None) -> int:
    """Send the message given on the command line and wait for the reply."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 2:
        printf("Numero argomenti errato\n")
        return 0
    acknowledged = threading.Event()

    def _on_ack(_signum, _frame) -> None:
        printf("Messaggio Arrivato Senza Problemi\n")
        acknowledged.set()

    previous = signal.signal(signal.SIGUSR1, _on_ack)
    try:
        try:
            send(atoi(args[0]), args[1])
        except (ValueError, OSError) as exc:
            print(f"client: {exc}", file=sys.stderr)
            return 1
        while not acknowledged.wait(0.1):
            pass
        return 0
    finally:
        signal.signal(
            signal.SIGUSR1, signal.SIG_DFL if previous is None else previous
        )


if __name__ == "__main__":
    sys.exit(main())