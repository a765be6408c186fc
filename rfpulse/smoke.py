"""Flamingo FA20RF / FA21RF smoke detector: 24-bit id, receive and send."""

from __future__ import annotations

import re

from .signal import RawSignal, Reading

PULSE_COUNT = 52
BIT_COUNT = 24

#: Stored-pulse unit, retransmissions and inter-packet delay (ms) for sending.
SEND_MULTIPLY = 50
SEND_REPEATS = 10
SEND_DELAY_MS = 20

_GAP_MAX_US = 1000
_SHORT_MIN_US = 1000
_SHORT_MAX_US = 1500
_LONG_MIN_US = 2000
_LONG_MAX_US = 2800

_START_US = 3000
_SPACE_US = 675
_LOW_US = 1250
_HIGH_US = 2550
_COMMAND_PREFIX = "FA20RF;"


def decode_fa20rf(signal: RawSignal) -> Reading | None:
    """Decode a smoke alert; ``None`` when the signal is not one.

    Every bit pulse follows a short space; a long pulse gives 1.
    The alert is reported for as long as the detector transmits.
    """
    if signal.number != PULSE_COUNT:
        return None
    gap_max = signal.threshold(_GAP_MAX_US)
    short_min = signal.threshold(_SHORT_MIN_US)
    short_max = signal.threshold(_SHORT_MAX_US)
    long_min = signal.threshold(_LONG_MIN_US)
    long_max = signal.threshold(_LONG_MAX_US)
    pulses = signal.pulses
    bitstream = 0
    for gap, pulse in zip(pulses[2 : 2 * BIT_COUNT + 1 : 2], pulses[3 : 2 * BIT_COUNT + 2 : 2]):
        if gap > gap_max:
            return None
        bitstream <<= 1
        if pulse > long_min:
            if pulse > long_max:
                return None
            bitstream |= 1
        elif pulse > short_max or pulse < short_min:
            return None

    if bitstream in (0, 0xFFFFFF) or bitstream & 0xFFFF == 0xFFFF:
        return None
    return Reading("FA20RF", {"ID": f"{bitstream:06x}", "SMOKEALERT": "ON"})


def fa20rf_signal(address: int) -> RawSignal:
    """Pulse train that raises a smoke alert for the 24-bit ``address``.

    It is meant to be sent ``SEND_REPEATS`` times, ``SEND_DELAY_MS`` apart.
    """
    unit = SEND_MULTIPLY
    pulses = [_START_US // unit, (_SPACE_US + 125) // unit]
    for index in range(BIT_COUNT - 1, -1, -1):
        mark = _HIGH_US if (address >> index) & 1 else _LOW_US
        pulses += [_SPACE_US // unit, mark // unit]
    pulses += [_SPACE_US // unit, 0]
    return RawSignal(pulses, multiply=unit)


def fa20rf_command(line: str) -> RawSignal | None:
    """Build the transmission for a ``10;FA20RF;<hex>;<n>;<cmd>;`` command line.

    Returns ``None`` when the line is not a well-formed command for this
    device.  Only ``ON`` raises an alert; other commands are accepted and
    yield an empty signal, as there is nothing to send.
    """
    if line[3:10].upper() != _COMMAND_PREFIX:
        return None
    if line[18:19] != ";":
        return None
    digits = re.match(r"[0-9A-Fa-f]*", line[10:16]).group()
    address = int(digits, 16) if digits else 0
    command = line[19:].split(";", 1)[0].strip().upper()
    if command != "ON":
        return RawSignal([], multiply=SEND_MULTIPLY)
    return fa20rf_signal(address)