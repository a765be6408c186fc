"""Lidl / SilverCrest doorbells: the 40-bit model and the Z31370-TX (48 bits)."""

from __future__ import annotations

from typing import Iterable

from .signal import RawSignal, Reading, RepeatGuard

PULSE_COUNT = 90
PULSE_COUNT_Z31370 = 114
REPEAT_WINDOW_MS = 1000
#: Plugin id that a pre-processor stores as marker for Z31370 trains.
MARKER = 0o75
#: Leading 24 bits sent by every Z31370 transmitter.
Z31370_HEADER = 0x5CA588

_PREAMBLE_PULSES = 9
_PREAMBLE_MIN_US = 1000
_BIT_SPLIT_US = 550
_HEAD_BITS = 28
_TAIL_BITS = 13
_Z31370_SPLIT_US = 200
_Z31370_HEAD_BITS = 24
_Z31370_TAIL_BITS = 32


def _to_int(bits: Iterable[int]) -> int:
    value = 0
    for bit in bits:
        value = (value << 1) | bit
    return value


def _bits_classic(signal: RawSignal) -> tuple[int, int] | None:
    """Read the preamble and 41 bits: a short pulse gives 1."""
    durations = signal.durations()
    if any(d <= _PREAMBLE_MIN_US for d in durations[:_PREAMBLE_PULSES]):
        return None
    bits = [0 if d > _BIT_SPLIT_US else 1 for d in durations[_PREAMBLE_PULSES:PULSE_COUNT:2]]
    value = _to_int(bits)
    return value >> _TAIL_BITS, value & ((1 << _TAIL_BITS) - 1)


def _bits_z31370(signal: RawSignal) -> tuple[int, int] | None:
    """Read 56 bits from pulse pairs: long-short gives 0, short-long gives 1."""
    durations = signal.durations()
    count = _Z31370_HEAD_BITS + _Z31370_TAIL_BITS
    value = 0
    for pulse, gap in zip(durations[0 : 2 * count : 2], durations[1 : 2 * count + 1 : 2]):
        value <<= 1
        if pulse > _Z31370_SPLIT_US:
            if gap > _Z31370_SPLIT_US:
                return None
        else:
            if gap < _Z31370_SPLIT_US:
                return None
            value |= 1
    return value >> _Z31370_TAIL_BITS, value & ((1 << _Z31370_TAIL_BITS) - 1)


def decode_silvercrest(signal: RawSignal, guard: RepeatGuard) -> Reading | None:
    """Decode a doorbell press; ``None`` when the signal is not one."""
    if signal.number == PULSE_COUNT:
        decoded = _bits_classic(signal)
        if decoded is None:
            return None
        head, tail = decoded
        if tail & 0xFFF:
            return None
        address = head
    elif signal.number == PULSE_COUNT_Z31370:
        if signal.marker != MARKER:
            return None
        decoded = _bits_z31370(signal)
        if decoded is None:
            return None
        head, tail = decoded
        if head != Z31370_HEADER:
            return None
        address = tail
    else:
        return None

    if guard.is_repeat(REPEAT_WINDOW_MS, head):
        return Reading("SilverCrest", duplicate=True)
    return Reading(
        "SilverCrest",
        {"ID": f"{address:08x}", "SWITCH": "1", "CMD": "ON", "CHIME": "01"},
    )