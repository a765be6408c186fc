"""Auriol HG02832 outdoor temperature/humidity sensor: 4 sync + 40 bits."""

from __future__ import annotations

from .signal import RawSignal, Reading, RepeatGuard, crc8, signed_temperature

PULSE_COUNT = 88
MIN_PULSES = PULSE_COUNT - 4
MAX_PULSES = PULSE_COUNT + 2
BIT_COUNT = 40
DATA_BITS = 32
REPEAT_WINDOW_MS = 500
CRC_POLY = 0x31
CRC_INIT = 0x53
MAX_HUMIDITY = 100

_GAP_MIN_US = 128
_GAP_MAX_US = 672
_SHORT_MIN_US = 224
_SHORT_MAX_US = 352
_LONG_MIN_US = 576
_LONG_MAX_US = 768


def _bits(signal: RawSignal) -> int | None:
    """Read the 40 data bits, skipping leading sync pairs."""
    gap_min = signal.threshold(_GAP_MIN_US)
    gap_max = signal.threshold(_GAP_MAX_US)
    short_min = signal.threshold(_SHORT_MIN_US)
    short_max = signal.threshold(_SHORT_MAX_US)
    long_min = signal.threshold(_LONG_MIN_US)
    long_max = signal.threshold(_LONG_MAX_US)
    pulses = signal.pulses
    value = 0
    count = 0
    for pulse, gap in zip(pulses[0::2], pulses[1::2]):
        if gap < gap_min or gap > gap_max:
            if count == 0:
                continue
            # Only the gap after the last bit may be out of range.
            if count != BIT_COUNT - 1:
                return None
        value <<= 1
        if pulse > long_min:
            if pulse > long_max:
                return None
            value |= 1
        elif pulse < short_min or pulse > short_max:
            return None
        count += 1
        if count == BIT_COUNT:
            break
    if count != BIT_COUNT:
        return None
    return value


def decode_auriol_v4(signal: RawSignal, guard: RepeatGuard) -> Reading | None:
    """Decode an Auriol V4 packet; ``None`` when the signal is not one."""
    if not MIN_PULSES <= signal.number <= MAX_PULSES:
        return None
    value = _bits(signal)
    if value is None:
        return None
    bitstream = value >> (BIT_COUNT - DATA_BITS)
    checksum = value & 0xFF
    if not bitstream:
        return None
    if guard.is_repeat(REPEAT_WINDOW_MS, bitstream):
        return Reading("Auriol V4", duplicate=True)

    folded = 0
    for byte in bitstream.to_bytes(4, "big"):
        folded ^= byte
    if checksum != crc8([folded], CRC_POLY, CRC_INIT):
        return None

    rolling_code = (bitstream >> 24) & 0xFF
    battery_ok = not (bitstream >> 15) & 0x1
    if (bitstream >> 14) & 0x1:
        return None
    channel = ((bitstream >> 12) & 0x3) + 1
    try:
        temperature = signed_temperature(bitstream & 0xFFF)
    except ValueError:
        return None
    humidity = (bitstream >> 16) & 0xFF
    if humidity > MAX_HUMIDITY:
        return None

    return Reading(
        "Auriol V4",
        {
            "ID": f"{rolling_code:02X}{channel:02X}",
            "TEMP": f"{temperature:04x}",
            "HUM": f"{humidity:02d}",
            "BAT": "OK" if battery_ok else "LOW",
        },
    )