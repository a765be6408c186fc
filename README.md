# rfpulse

Decoders for the radio packets sent by cheap 433 MHz devices: weather
sensors, PIR and door contacts, doorbells, garage keyfobs and smoke
detectors. A few of the protocols can also be encoded back into pulse
trains that are ready to transmit.

The package does no radio work itself. You give it a captured pulse train
and it gives back the decoded reading, which can be rendered in the
`20;XX;Name;KEY=value;...;` text form.

## Installation

```
pip install rfpulse
```

The package needs nothing beyond the standard library.

## Pulse trains

`rfpulse.signal.RawSignal` holds a captured train of alternating high/low
pulse lengths. The lengths are stored in units of `multiply` microseconds
(32 by default); `RawSignal.from_microseconds` builds a signal from plain
microsecond durations, and `durations()` gives them back in microseconds.
The optional `marker` field carries the id of a pre-processing step that
has already claimed the train; some decoders only accept trains with a
given marker (garage keyfobs, Oregon PIR, SilverCrest Z31370).

## Decoding a packet

```python
from rfpulse.signal import RawSignal, RepeatGuard
from rfpulse.auriol import decode_auriol

guard = RepeatGuard()
signal = RawSignal.from_microseconds(durations)   # captured pulse durations

reading = decode_auriol(signal, guard)
if reading is not None and not reading.duplicate:
    print(reading.format(0))
```

A decoder returns:

- `None` when the signal is not a packet of its protocol;
- a `Reading` with `duplicate=True` when `RepeatGuard` judges it a
  retransmission of the packet it saw last;
- otherwise a `Reading` with the device `name` and its ordered `fields`
  (`ID`, `TEMP`, `HUM`, `BAT`, `SWITCH`, `CMD`, `CHIME`, ...).

`Reading.format(counter)` renders the line with a two-digit hex counter;
it raises `ValueError` for a duplicate reading, which has no output line.

`RepeatGuard` keeps the current and previous signal hashes, the time the
previous train was seen and the last decoded value. Its clock defaults to
a monotonic millisecond counter and can be replaced for testing.

Temperatures are reported in tenths of a degree as four hex digits; below
zero the magnitude is given with bit `0x8000` set
(`rfpulse.signal.signed_temperature`).

## Protocols

| Module | Function | Devices |
| --- | --- | --- |
| `auriol` | `decode_auriol` | Auriol Z31743 temperature sensor |
| `weather` | `decode_auriol_v3`, `decode_auriol_v2_xiron` | Auriol V3 (Z32171A), Auriol V2 / Xiron |
| `auriol_v4` | `decode_auriol_v4` | Auriol V4 (HG02832) |
| `alarms` | `decode_x10_alarm`, `decode_chuango`, `decode_oregon_pir` | Varel/Chubb/Ajax sensors, Chuango, Oregon PIR/LED/alarm |
| `ev1527` | `decode_ev1527` | EV1527 motion and door sensors |
| `atlantic` | `decode_atlantic` | Atlantic / Visonic contacts |
| `garage` | `decode_garage640` | 640 µs garage keyfobs |
| `selectplus` | `decode_selectplus` | SelectPlus doorbell |
| `plieger` | `decode_plieger` | Plieger York doorbell |
| `deltronic` | `decode_deltronic` | Deltronic doorbell |
| `rl02` | `decode_rl02` | RL-02 (Byron MP) doorbell |
| `silvercrest` | `decode_silvercrest` | Lidl SilverCrest doorbells |
| `smoke` | `decode_fa20rf` | Flamingo FA20RF smoke detector |

Every decoder takes `(signal, guard)`, except `decode_fa20rf`, which takes
only the signal: the smoke alert is reported for as long as the detector
transmits.

## Building packets to send

Some modules work in the other direction. They take a serial-style command
line and produce what to transmit:

```python
from rfpulse.selectplus import selectplus_command

pulses = selectplus_command("10;SELECTPLUS;001c33;1;ON;")
```

- `selectplus_command` / `selectplus_pulses`, `deltronic_command` /
  `deltronic_pulses` and `rl02_command` / `rl02_pulses` return a list of
  alternating high/low durations in microseconds, starting with a high
  pulse, with all retransmissions already included.
- `fa20rf_command` / `fa20rf_signal` return a `RawSignal` in 50 µs units,
  meant to be sent `SEND_REPEATS` times, `SEND_DELAY_MS` apart. A command
  other than `ON` yields an empty signal.

Each `*_command` function returns `None` when the line is not addressed to
its device.

## Debug output

`rfpulse.signal.debug_dump(signal, compact=False)` renders a packet as a
`20;XX;DEBUG;Pulses=...;Pulses(uSec)=...;` line, listing microseconds
separated by commas, or in the compact form the stored units as two hex
digits each. It returns `None` for trains shorter than 24 pulses.

## What the package does not do

- It does not receive or transmit radio signals, nor talk to a serial
  port; capturing pulses and sending them is up to the caller.
- It has no dispatcher that tries every decoder in turn: call the decoder
  for the protocol you expect, or try them in an order of your choosing.
- It has no command-line program.
- Mertik Maxitrol fireplace remotes are not supported.
</br>