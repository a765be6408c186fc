"""Alarm sensors reported as switches: Varel/Chubb/Ajax, Chuango and Oregon PIR."""

from __future__ import annotations

from .signal import RawSignal, Reading, RepeatGuard

X10_PULSE_COUNT = 26
X10_BIT_COUNT = 12
X10_REPEAT_WINDOW_MS = 2000

CHUANGO_PULSE_COUNT = 50
CHUANGO_BIT_COUNT = 24
CHUANGO_REPEAT_WINDOW_MS = 200
CHUANGO_SWITCH = 2

OREGON_PULSE_COUNT = 52
OREGON_MIN_PULSES = OREGON_PULSE_COUNT - 2
OREGON_REPEAT_WINDOW_MS = 2000
#: Marker a pre-processor stores on trains meant for the Oregon PIR decoder.
OREGON_MARKER = 63
#: Added to the channel bits so the switch shows where the packet came from.
OREGON_SWITCH_BASE = 0x30

_X10_MID_US = 700
_X10_MAX_US = 1000
_X10_START_MAX_US = 550
_X10_MIN_US = 250

_CHUANGO_MID_US = 700
_CHUANGO_MAX_US = 2000
_CHUANGO_MIN_US = 150

_OREGON_PREAMBLE = 28
_OREGON_SHORT_US = 600
_OREGON_END_US = 1600


def decode_x10_alarm(signal: RawSignal, guard: RepeatGuard) -> Reading | None:
    """Decode a Varel/Chubb/Ajax sensor packet; ``None`` when the signal is not one.

    After a short start pulse each bit is a Manchester pair: short-long
    gives 1, long-short gives 0.
    """
    if signal.number != X10_PULSE_COUNT:
        return None
    pulses = signal.pulses
    if pulses[0] > signal.threshold(_X10_START_MAX_US):
        return None
    mid = signal.threshold(_X10_MID_US)
    longest = signal.threshold(_X10_MAX_US)
    shortest = signal.threshold(_X10_MIN_US)
    bitstream = 0
    for pulse, gap in zip(
        pulses[1 : 2 * X10_BIT_COUNT : 2], pulses[2 : 2 * X10_BIT_COUNT + 1 : 2]
    ):
        bitstream <<= 1
        if pulse > mid:
            if pulse > longest or gap > mid:
                return None
        else:
            if pulse < shortest or gap < mid:
                return None
            bitstream |= 1

    if guard.is_repeat(X10_REPEAT_WINDOW_MS):
        return Reading("X10", duplicate=True)
    if not bitstream:
        return None
    return Reading(
        "X10",
        {"ID": f"{bitstream & 0xFFFF:04x}", "SWITCH": "1", "CMD": "ON"},
    )


def decode_chuango(signal: RawSignal, guard: RepeatGuard) -> Reading | None:
    """Decode a Chuango sensor packet; ``None`` when the signal is not one.

    Each bit is a pulse pair: short-long gives 1, long-short gives 0.
    Trains already claimed for the Oregon PIR decoder are left alone.
    """
    if signal.number != CHUANGO_PULSE_COUNT or signal.marker == OREGON_MARKER:
        return None
    mid = signal.threshold(_CHUANGO_MID_US)
    longest = signal.threshold(_CHUANGO_MAX_US)
    shortest = signal.threshold(_CHUANGO_MIN_US)
    pulses = signal.pulses
    bitstream = 0
    for lead, pulse in zip(
        pulses[0 : 2 * CHUANGO_BIT_COUNT - 1 : 2], pulses[1 : 2 * CHUANGO_BIT_COUNT : 2]
    ):
        bitstream <<= 1
        if pulse > mid:
            if pulse > longest or lead > mid:
                return None
            bitstream |= 1
        elif pulse < shortest or lead < mid:
            return None

    if guard.is_repeat(CHUANGO_REPEAT_WINDOW_MS, bitstream):
        return Reading("Chuango", duplicate=True)
    if not bitstream:
        return None
    return Reading(
        "Chuango",
        {
            "ID": f"{bitstream & 0xFFFFFF:06x}",
            "SWITCH": f"{CHUANGO_SWITCH:x}",
            "CMD": "ON",
        },
    )


def _oregon_bits(durations: list[int]) -> int:
    """Read the differential bits that follow the preamble."""
    bitstream = 0
    rfbit = 1
    index = _OREGON_PREAMBLE
    count = len(durations)
    while index < count:
        duration = durations[index]
        if duration > _OREGON_SHORT_US:
            if duration > _OREGON_END_US:
                break
            rfbit ^= 1
        bitstream = ((bitstream << 1) | rfbit) & 0xFFFFFFFF
        if index + 1 < count and durations[index + 1] < _OREGON_SHORT_US:
            index += 1
        index += 1
    return bitstream


def decode_oregon_pir(signal: RawSignal, guard: RepeatGuard) -> Reading | None:
    """Decode an Oregon PIR/LED/alarm packet; ``None`` when the signal is not one.

    Only trains marked for this decoder are considered; the marker is
    cleared once the train has been claimed.
    """
    if not OREGON_MIN_PULSES <= signal.number <= OREGON_PULSE_COUNT:
        return None
    if signal.marker != OREGON_MARKER:
        return None
    signal.marker = 0

    durations = signal.durations()
    if any(d > _OREGON_SHORT_US for d in durations[:_OREGON_PREAMBLE]):
        return None
    bitstream = _oregon_bits(durations)

    if guard.is_repeat(OREGON_REPEAT_WINDOW_MS):
        return Reading("X10", duplicate=True)
    if not bitstream:
        return None

    bitstream >>= 4
    switch = (bitstream & 0x3) + OREGON_SWITCH_BASE
    return Reading(
        "X10",
        {"ID": f"{bitstream & 0xFFFFFF:06x}", "SWITCH": f"{switch:x}", "CMD": "ON"},
    )