"""Deltronic (UM3750) doorbell: 12 bits, receive and send."""

from __future__ import annotations

import re

from .signal import SAMPLE_RATE, RawSignal, Reading, RepeatGuard

PULSE_COUNT = 26
BIT_COUNT = 12
REPEAT_WINDOW_MS = 1000
#: Bits that are always set in a Deltronic code word.
FIXED_BITS = 0xFF0

_START_MAX_US = 675
_LONG_MIN_US = 800
_LONG_MAX_US = 1275
_SHORT_MIN_US = 250
_GAP_SHORT_MAX_US = 675
_GAP_LONG_MIN_US = 700

_SEND_PERIOD_US = 640
_SEND_FRAMES = 16
_COMMAND_PREFIX = "DELTRONIC;"


def decode_deltronic(signal: RawSignal, guard: RepeatGuard) -> Reading | None:
    """Decode a doorbell press; ``None`` when the signal is not one.

    The first pulse is a short start bit; then a long-short pair gives 1
    and a short-long pair gives 0.
    """
    if signal.number != PULSE_COUNT:
        return None
    micros = [pulse * SAMPLE_RATE for pulse in signal.pulses]
    if micros[0] > _START_MAX_US:
        return None
    bitstream = 0
    for pulse, gap in zip(micros[1 : 2 * BIT_COUNT : 2], micros[2 : 2 * BIT_COUNT + 1 : 2]):
        bitstream <<= 1
        if pulse > _LONG_MIN_US:
            if pulse > _LONG_MAX_US or gap > _GAP_SHORT_MAX_US:
                return None
            bitstream |= 1
        elif pulse < _SHORT_MIN_US or gap < _GAP_LONG_MIN_US:
            return None

    if not bitstream:
        return None
    if bitstream & FIXED_BITS != FIXED_BITS:
        return None
    if guard.is_repeat(REPEAT_WINDOW_MS, bitstream):
        return Reading("Deltronic", duplicate=True)

    return Reading(
        "Deltronic",
        {
            "ID": f"{bitstream & 0xF:04x}",
            "SWITCH": "1",
            "CMD": "ON",
            "CHIME": "01",
        },
    )


def deltronic_pulses(address: int) -> list[int]:
    """Transmission for a 12-bit code word, as alternating high/low microseconds.

    A separator and a sync come first; each of the sixteen frames sends the
    bits most significant first and ends with a sync.
    """
    period = _SEND_PERIOD_US
    long_period = 2 * period
    sync = 36 * period
    pulses = [period, sync, period]
    for _ in range(_SEND_FRAMES):
        for index in range(BIT_COUNT - 1, -1, -1):
            if (address >> index) & 1:
                pulses += [long_period, period]
            else:
                pulses += [period, long_period]
        pulses += [sync, period]
    return pulses


def deltronic_command(line: str) -> list[int] | None:
    """Build the transmission for a ``10;DELTRONIC;<hex>;...`` command line.

    Returns ``None`` when the line is not addressed to this device.
    """
    if line[3:13].upper() != _COMMAND_PREFIX:
        return None
    digits = re.match(r"[0-9A-Fa-f]*", line[13:19]).group()
    value = int(digits, 16) if digits else 0
    return deltronic_pulses(value | FIXED_BITS)