"""Auriol Z31743 (and compatible) outdoor temperature sensor, 32 bits."""

from __future__ import annotations

from .signal import RawSignal, Reading, RepeatGuard, signed_temperature

PULSE_COUNT = 66
REPEAT_WINDOW_MS = 500

_GAP_MAX_US = 550
_SHORT_MIN_US = 1600
_SHORT_MAX_US = 2200
_LONG_MIN_US = 3000


def _bits(signal: RawSignal) -> int | None:
    gap_max = signal.threshold(_GAP_MAX_US)
    short_min = signal.threshold(_SHORT_MIN_US)
    short_max = signal.threshold(_SHORT_MAX_US)
    long_min = signal.threshold(_LONG_MIN_US)
    pulses = signal.pulses
    bitstream = 0
    for pulse, gap in zip(pulses[1:64:2], pulses[2:65:2]):
        if gap > gap_max:
            return None
        bitstream <<= 1
        if pulse > long_min:
            bitstream |= 1
        elif pulse < short_min or pulse > short_max:
            return None
    return bitstream


def decode_auriol(signal: RawSignal, guard: RepeatGuard) -> Reading | None:
    """Decode an Auriol packet; ``None`` when the signal is not one."""
    if signal.number != PULSE_COUNT:
        return None
    bitstream = _bits(signal)
    if not bitstream:
        return None
    if guard.is_repeat(REPEAT_WINDOW_MS, bitstream):
        return Reading("Auriol", duplicate=True)

    parity = bin(bitstream >> 1).count("1") & 1
    if parity != bitstream & 1:
        return None
    if (bitstream >> 20) & 0x07:
        return None

    battery_ok = (bitstream >> 23) & 0x01
    rolling_code = (bitstream >> 24) & 0xFF
    try:
        temperature = signed_temperature((bitstream >> 8) & 0xFFF)
    except ValueError:
        return None
    return Reading(
        "Auriol",
        {
            "ID": f"{rolling_code:02X}",
            "TEMP": f"{temperature:04x}",
            "BAT": "OK" if battery_ok else "LOW",
        },
    )