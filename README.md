# mangos

Building blocks for a Scalability Protocols ("nanomsg" style) messaging
stack: the error codes, the message and protocol-identity types, pipes,
and the dialers and listeners that create pipes through a transport.

## Installing

    pip install .

For running the tests:

    pip install ".[test]"
    pytest

## Modules

### `mangos.errors`

- `ErrorCode` — an enum of every error condition; each member's value is
  its message (`ErrorCode.CLOSED.value == "object closed"`).
- `MangosError(code)` — the exception raised for them. The code is kept
  in `.code`; two errors compare equal when their codes are the same.

### `mangos.base`

- `Message` — a dataclass with `header` and `body` (both `bytearray`)
  and the `pipe` it arrived on. `copy_body()` returns the body as
  independent `bytes`.
- `ProtocolInfo` — a frozen dataclass: `self_id`, `peer`, `self_name`,
  `peer_name`.
- `PipeEvent` — `ATTACHING`, `ATTACHED`, `DETACHED`.
- Option names: `OPTION_RAW`, `OPTION_RECV_DEADLINE`,
  `OPTION_SEND_DEADLINE`, `OPTION_MAX_RECV_SIZE`,
  `OPTION_RECONNECT_TIME`, `OPTION_MAX_RECONNECT_TIME`,
  `OPTION_DIAL_ASYNCH`, `OPTION_LOCAL_ADDR`, `OPTION_REMOTE_ADDR`.

### `mangos.pipe`

- `PipeIDAllocator(start=None)` — hands out unique, non-zero 31-bit IDs
  with `get()`; the counter starts at a random point unless `start` is
  given and wraps as an unsigned 32-bit value. `free(pipe_id)` releases
  an ID and raises `ValueError` for one not in use. `pipe_ids` is the
  process-wide allocator that every `Pipe` takes its ID from.
- `PipeList` — a thread-safe set of pipes keyed by ID: `add`, `remove`,
  `close_all` (closes each pipe in a background thread), `len()` and
  `in`.
- `Pipe(transport_pipe, socket, dialer=None, listener=None)` — wraps a
  transport pipe. `address` is the owning dialer's or listener's address,
  or `""`. `close()` runs once; it closes the transport pipe, asks the
  socket to remove the pipe if it had been added, and tells the dialer so
  it can redial. `send_msg(msg)` closes the pipe and re-raises on a send
  failure; `recv_msg()` returns the message tagged with the pipe, or
  `None` (after closing) on failure. `get_option(name)` asks the
  transport pipe, then the owning dialer or listener.

### `mangos.dialer`

`Dialer(transport_dialer, socket, address, reconnect_time=100 ms,
max_reconnect_time=0, asynch=False)`:

- `dial()` — raises `ADDR_IN_USE` if already dialing and `CLOSED` if
  closed. Synchronous dialing raises the first attempt's error;
  asynchronous dialing connects in a background thread.
- After a failed attempt that redials (always when asynchronous) the
  next try is scheduled after the current interval, which then grows by a
  random factor between 1.1 and 1.5, capped at the maximum. A maximum of
  zero keeps the interval fixed. A `CLOSED` error stops redialing.
- `pipe_connected()` resets the interval; `pipe_closed()` schedules a
  redial.
- `get_option` / `set_option` handle `OPTION_RECONNECT_TIME`,
  `OPTION_MAX_RECONNECT_TIME` (non-negative `timedelta`) and
  `OPTION_DIAL_ASYNCH` (`bool`), raising `BAD_VALUE` for anything else.
  Other names go to the transport dialer; unknown reads then fall back to
  the socket.
- `close()` cancels a pending redial; closing twice raises `CLOSED`.

### `mangos.listener`

`Listener(transport_listener, socket, address)`:

- `listen()` — starts the transport listener and accepts connections in
  a background thread, backing off 10 ms after a failed accept and
  stopping on `CLOSED`. Raises `CLOSED` once closed and `ADDR_IN_USE` if
  already listening; a transport failure is raised and leaves the
  listener idle.
- `get_option` / `set_option` pass straight to the transport listener.
- `address` is the transport listener's address.
- `close()` closes the transport listener; closing twice raises `CLOSED`.

## What is expected from outside

Transports are duck-typed. A transport dialer offers `dial()`,
`get_option()` and `set_option()`; a transport listener offers
`listen()`, `accept()`, `close()`, `address`, `get_option()` and
`set_option()`; a transport pipe offers `send()`, `recv()`, `close()` and
`get_option()`. Failures are raised as `MangosError`.

## What this package does not do

It has no socket object, no protocols (pair, bus, req/rep, pub/sub and
so on), no transports and no device for forwarding between sockets.
`Dialer`, `Listener` and `Pipe` must be given a socket object from
elsewhere: one that answers `get_option`, accepts new pipes through
`_add_pipe(transport_pipe, dialer, listener)` and drops them through
`_remove_pipe(pipe)`. Without it, nothing here sends or receives
application messages on its own.