"""EV1527-based alarm gadgets (PIR sensors, door and window contacts)."""

from __future__ import annotations

from .signal import RawSignal, Reading, RepeatGuard

PULSE_COUNT = 50
BIT_COUNT = 24
REPEAT_WINDOW_MS = 200
OREGON_MARKER = 63

_MID_US = 600
_MAX_US = 1300
_MIN_US = 150


def decode_ev1527(signal: RawSignal, guard: RepeatGuard) -> Reading | None:
    """Decode an EV1527 packet; ``None`` when the signal is not one.

    Each bit is a pulse pair: long-short gives 0, short-long gives 1.
    Trains already claimed for the Oregon PIR decoder are left alone.
    """
    if signal.number != PULSE_COUNT or signal.marker == OREGON_MARKER:
        return None
    mid = signal.threshold(_MID_US)
    longest = signal.threshold(_MAX_US)
    shortest = signal.threshold(_MIN_US)
    pulses = signal.pulses
    bitstream = 0
    for lead, pulse in zip(pulses[0 : 2 * BIT_COUNT - 1 : 2], pulses[1 : 2 * BIT_COUNT : 2]):
        bitstream <<= 1
        if pulse > mid:
            if pulse > longest or lead > mid:
                return None
        else:
            if pulse < shortest or lead < mid:
                return None
            bitstream |= 1

    if not bitstream:
        return None
    if guard.is_repeat(REPEAT_WINDOW_MS, bitstream):
        return Reading("EV1527", duplicate=True)
    if bitstream >> 16 == 0xFF and bitstream & 0xFFFF == 0xFF:
        return None

    return Reading(
        "EV1527",
        {
            "ID": f"{(bitstream >> 4) & 0x0FFFFF:06x}",
            "SWITCH": f"{bitstream & 0x0F:x}",
            "CMD": "ON",
        },
    )