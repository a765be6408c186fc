"""Plieger York wireless doorbell: 16-bit code, fixed zero byte, chime byte."""

from __future__ import annotations

from .signal import RawSignal, Reading, RepeatGuard

PULSE_COUNT = 66
BIT_COUNT = 32
REPEAT_WINDOW_MS = 1000

#: Chime byte sent by the transmitter, mapped to the reported chime number.
CHIMES = {0x03: 0, 0xE0: 1, 0x1C: 2}

_MID_US = 700
_MAX_US = 1900


def decode_plieger(signal: RawSignal, guard: RepeatGuard) -> Reading | None:
    """Decode a doorbell press; ``None`` when the signal is not one.

    Each bit is a pulse pair: long-short gives 1, short-long gives 0.
    """
    if signal.number != PULSE_COUNT:
        return None
    mid = signal.threshold(_MID_US)
    longest = signal.threshold(_MAX_US)
    pulses = signal.pulses
    bitstream = 0
    for pulse, gap in zip(pulses[0 : 2 * BIT_COUNT : 2], pulses[1 : 2 * BIT_COUNT : 2]):
        bitstream <<= 1
        if pulse > mid:
            if pulse > longest or gap > mid:
                return None
            bitstream |= 1
        elif gap < mid:
            return None

    if not bitstream:
        return None
    if (bitstream >> 8) & 0xFF:
        return None
    if guard.is_repeat(REPEAT_WINDOW_MS, bitstream):
        return Reading("Plieger", duplicate=True)

    chime = CHIMES.get(bitstream & 0xFF)
    if chime is None:
        return None
    address = (bitstream >> 16) & 0xFFFF
    return Reading(
        "Plieger",
        {
            "ID": f"{address:04x}",
            "SWITCH": "1",
            "CMD": "ON",
            "CHIME": f"{chime:02X}",
        },
    )