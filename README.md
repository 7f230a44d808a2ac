# minitalk

A tiny messaging pair for POSIX systems. A server process prints its PID and
waits. A client sends it a line of text using only two signals: `SIGUSR1`
for a 1 bit and `SIGUSR2` for a 0 bit.

## Install

```
pip install .
```

## Use

Start the server in one terminal:

```
minitalk-server
```

It prints something like `Server PID: 4242` and then writes every byte it
receives to its standard output. Stop it with Ctrl-C.

In another terminal, send it a message:

```
minitalk-client 4242 "hello there"
```

The server writes `hello there` to its standard output. Once the whole
message has arrived, the server sends `SIGUSR1` back to the client, which
prints `Messaggio Arrivato Senza Problemi` and exits.

Other client behaviour:

- With anything other than exactly two arguments it prints
  `Numero argomenti errato` and exits with status 0.
- The PID argument is read like C's `atoi`: leading whitespace and one sign
  are allowed, and parsing stops at the first non-digit. A PID of zero or
  less is refused; that, or a server that cannot be signalled, prints
  `client: <reason>` on standard error and exits with status 1.
- After sending, the client waits for the acknowledgement with no time limit.
- Text is sent as UTF-8 and stops at the first NUL character. Each bit is
  followed by a 60 microsecond pause.

## How the wire format works

Each value is sent least significant bit first:

1. the client's PID, as 32 bits, so the server knows whom to answer;
2. each byte of the message, as 8 bits;
3. a zero byte that marks the end.

When the server decodes the zero byte, it sends `SIGUSR1` to the client
(ignoring a client that has already gone) and resets itself for the next
sender. The server keeps one decoding state, so two clients sending at the
same time will garble each other.

The encoding and decoding are available without any signals in
`minitalk.protocol`:

```python
from minitalk.protocol import encode_message, Decoder, ByteReceived, MessageEnd

decoder = Decoder()
for bit in encode_message(4242, "hi"):
    event = decoder.feed(bit)
    if isinstance(event, ByteReceived):
        print(event)
    elif isinstance(event, MessageEnd):
        print("done", event)
```

The same module has `encode_value(value, width)`, `signal_for(bit)` and
`bit_for(signum)`. From code, `minitalk.client.send(server_pid, message,
delay)` sends a message, and `minitalk.server.Server` decodes signals passed
to its `handle` method or, after `install()`, the process's own `SIGUSR1` and
`SIGUSR2`.

## Helpers

- `minitalk.formatting`: `render(template, *args)` and
  `printf(template, *args, stream=None)` with the conversions
  `%c %s %p %d %i %u %x %X %%`, plus `format_hex` and `format_pointer`.
  Integers wrap to 32-bit int / unsigned int (64-bit for `%p`); `%s` of
  `None` gives `(null)` and a zero pointer gives `(nil)`.
- `minitalk.textutil`: `atoi`, `itoa`, `split`, `strtrim`, `substr`,
  `strnstr`, `strncmp`, `strchr`, `strrchr`, `strmapi`, following the C
  string routines; positions come back as indices, or `None` when not found.
- `minitalk.charclass`: ASCII `isalpha`, `isdigit`, `isalnum`, `isascii`,
  `isprint`, `tolower`, `toupper`, taking a code or a one-character string.

## What it does not do

There is no encryption, no checksum and no retransmission: a lost signal
corrupts the rest of the message. It works only on systems that have
`SIGUSR1` and `SIGUSR2`.

## Tests

```
pip install ".[test]"
pytest
```