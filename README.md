# wcx

This package provides building blocks for control loops and embedded-style software. It runs on
plain Python and needs nothing outside the standard library.

Time arguments are in milliseconds. They wrap around at 32 bits, as a hardware tick
counter does, and deadline checks stay correct across the wrap. The caller supplies
the current time to every time-based object. Nothing in the package reads a clock.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `wcx.common` | `time_reached`, `mapf`, `apply_deadband`, `clamp` |
| `wcx.crc` | `crc8` (poly 0x07), `crc16_ccitt` (poly 0x1021), `xor_checksum` |
| `wcx.calibration` | `LinearCalibration` (with optional output clamping), `AffineCalibration` |
| `wcx.fixed_point` | Q16.16 arithmetic that saturates to the int32 range: `ONE`, `from_int`, `from_float`, `to_int`, `to_float`, `mul`, `div`, `clamp` |
| `wcx.stats` | `RunningStats`: count, minimum, maximum, `mean()`, population `variance()` |
| `wcx.pid` | `PidController`, which clamps its integrator and takes the derivative on the measurement |
| `wcx.filter` | `MovingAverage`, `EmaFilter` |
| `wcx.ifilter` | `IntMovingAverage`, `IntEma` (integer-only, shift-based) |
| `wcx.ring_buffer` | `RingBuffer`, a fixed-capacity byte FIFO, and `BufferFullError` |
| `wcx.debounce` | `Debounce`, with `state`, `changed`, `rose` and `fell` |
| `wcx.timer` | `Timer`, one-shot or periodic |
| `wcx.watchdog` | `Watchdog`, a heartbeat monitor with an optional expiry callback |
| `wcx.pulse` | `PulseCounter`, which counts rising edges and gives `period_ms` and `frequency_hz()` |
| `wcx.scheduler` | `Task`, `Scheduler` for cooperative time-triggered work |
| `wcx.rate_limiter` | `RateLimiter`, `IntRateLimiter` (slew-rate limiting) |
| `wcx.fsm` | `FsmState`, `FsmTransition`, `StateMachine` |
| `wcx.hysteresis` | `Hysteresis`, `Zone`, `ThresholdDetector` |
| `wcx.lut` | `LookupTable`, `IntLookupTable` (interpolating, and clamped at the ends) |
| `wcx.event` | `Event`, `EventBus` (a bounded queue with publish/subscribe), `EventBusFullError` |
| `wcx.protocol` | Byte-stuffed framing: `frame_encode`, `frame_encoded_capacity`, `FrameDecoder`, `DecoderResult`, `FrameTooLargeError` |
| `wcx.serialize` | Big- and little-endian `pack_*` and `unpack_*` functions, the `Packer` and `Unpacker` cursors, `PackerOverflowError`, `UnpackError` |

## Errors

Operations that cannot succeed raise exceptions. None of them returns a status flag.

- `RingBuffer.push` raises `BufferFullError` when the buffer is full. `pop` and `peek` raise `IndexError` when it is empty. `write` stores bytes until the buffer fills and returns how many it stored.
- `EventBus.publish` and `EventBus.subscribe` raise `EventBusFullError` when the queue or the subscription table is full.
- `frame_encode` raises `FrameTooLargeError` when the encoded frame would exceed `output_capacity`.
- The `pack_*` functions raise `ValueError` for a value that does not fit. The `unpack_*` functions and `Unpacker` reads raise `UnpackError` when there are too few bytes. `Packer` raises `PackerOverflowError` when its capacity is exceeded. After a `Packer` overflows or an `Unpacker` overruns its data, every later write or read fails as well, and `ok` is `False`.
- Constructors that take a capacity raise `ValueError` for a capacity that is not positive. Lookup tables raise `ValueError` when they are given no points.

## Examples

Checksums:

```python
from wcx.crc import crc8, crc16_ccitt

crc8(b"123456789", 0x00)            # 0xF4
crc16_ccitt(b"123456789", 0xFFFF)   # 0x29B1
```

A PID loop:

```python
from wcx.pid import PidController

pid = PidController(kp=2.0, ki=1.0, kd=0.5, output_min=0.0, output_max=100.0)
output = pid.compute(setpoint=10.0, measurement=8.0, dt_seconds=0.5)   # 5.0
```

Debouncing a button:

```python
from wcx.debounce import Debounce

button = Debounce(initial_state=False, interval_ms=10)
button.update(True, 5)    # False: the change is still pending
button.update(True, 15)   # True: the new state has held for the full interval
button.rose               # True
```

A one-shot timer:

```python
from wcx.timer import Timer

timer = Timer(10)
timer.start(100)
timer.remaining(105)   # 5
timer.expired(109)     # False
timer.expired(110)     # True, and the timer stops
```

Framing a payload and reading it back:

```python
from wcx.protocol import DecoderResult, FrameDecoder, frame_encode

encoded = frame_encode(b"\x01\x7e\x7d\x20", delimiter=0x7E, escape=0x7D)
decoder = FrameDecoder(capacity=8, delimiter=0x7E, escape=0x7D)
for byte in encoded:
    result = decoder.push(byte)
assert result is DecoderResult.COMPLETE
assert decoder.data() == b"\x01\x7e\x7d\x20"
```

Building and parsing binary records:

```python
from wcx.serialize import Packer, Unpacker

packer = Packer(16)
packer.u8(0x01)
packer.u16_be(0x0203)
packer.i32_be(-200000)

unpacker = Unpacker(packer.getvalue())
unpacker.u8()       # 1
unpacker.u16_be()   # 0x0203
unpacker.i32_be()   # -200000
```

Interpolating over a table:

```python
from wcx.lut import LookupTable

table = LookupTable([(0.0, 0.0), (10.0, 100.0), (20.0, 200.0), (30.0, 400.0)])
table.lookup(25.0)   # 300.0
table.lookup(50.0)   # 400.0: values past the last point are clamped
```

## What it does not do

`wcx` is a library only. It has no command-line tool. It does not talk to hardware
or I/O devices and it does not read a system clock. You feed it samples, bytes and
timestamps, and you act on what it returns.