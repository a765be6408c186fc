"""Basic 640 us keyfobs used with garage door openers: 24 bits."""

from __future__ import annotations

from .signal import RawSignal, Reading, RepeatGuard

PULSE_COUNT = 48
MARKER = 65
REPEAT_WINDOW_MS = 200

_MID_US = 320
_MAX_US = 540
_MIN_US = 60


def decode_garage640(signal: RawSignal, guard: RepeatGuard) -> Reading | None:
    """Decode a keyfob press; ``None`` when the signal is not one.

    Only trains marked for this decoder are considered.  A long-short pair
    gives 1, a short-long pair gives 0.
    """
    if signal.number != PULSE_COUNT or signal.marker != MARKER:
        return None
    mid = signal.threshold(_MID_US)
    longest = signal.threshold(_MAX_US)
    shortest = signal.threshold(_MIN_US)
    pulses = signal.pulses
    bitstream = 0
    for pulse, gap in zip(pulses[0::2], pulses[1::2]):
        bitstream <<= 1
        if pulse > mid:
            if pulse > longest or gap > mid:
                return None
            bitstream |= 1
        elif pulse < shortest or gap < mid:
            return None

    if not bitstream:
        return None
    if guard.is_repeat(REPEAT_WINDOW_MS, bitstream):
        return Reading("GARAGE640", duplicate=True)
    return Reading("GARAGE640", {"ID": f"{bitstream & 0xFFFFFF:06x}"})