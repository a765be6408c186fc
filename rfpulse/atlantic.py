"""Atlantic and Visonic PIR / door contacts: 24-bit id and an alarm flag."""

from __future__ import annotations

from .signal import RawSignal, Reading, RepeatGuard

PULSE_COUNT = 74
BIT_COUNT = 32
REPEAT_WINDOW_MS = 700

_MID_US = 600
_MIN_US = 300
_MAX_US = 900


def decode_atlantic(signal: RawSignal, guard: RepeatGuard) -> Reading | None:
    """Decode a sensor packet; ``None`` when the signal is not one.

    Only the first 32 bits are read: a long pulse gives 1, a short pulse 0.
    """
    if signal.number != PULSE_COUNT:
        return None
    mid = signal.threshold(_MID_US)
    shortest = signal.threshold(_MIN_US)
    longest = signal.threshold(_MAX_US)
    pulses = signal.pulses
    bitstream = 0
    for pulse, gap in zip(pulses[1 : 2 * BIT_COUNT : 2], pulses[2 : 2 * BIT_COUNT + 1 : 2]):
        bitstream <<= 1
        if pulse > mid:
            if pulse > longest or gap > longest:
                return None
            bitstream |= 1
        elif pulse < shortest or gap < mid:
            return None

    if guard.is_repeat(REPEAT_WINDOW_MS, bitstream):
        return Reading("Atlantic", duplicate=True)

    alarm = (bitstream >> 6) & 0x01
    address = (bitstream >> 8) & 0xFFFFFF
    return Reading(
        "Atlantic",
        {"ID": f"{address:06x}", "SWITCH": "1", "CMD": "ON" if alarm else "OFF"},
    )