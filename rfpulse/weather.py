"""Auriol V3 (Z32171A) and Auriol V2 / Xiron outdoor temperature sensors."""

from __future__ import annotations

from .signal import RawSignal, Reading, RepeatGuard, signed_temperature

V3_PULSE_COUNT = 82
V3_BITS = 40
V3_TAIL_BITS = 24
V3_TEMPERATURE_OFFSET = 0x4C4

V2_PULSE_COUNT = 74
V2_BITS = 36
V2_TAIL_BITS = 12
V2_REPEAT_WINDOW_MS = 500
V2_MAX_CHANNEL = 3
MAX_HUMIDITY = 100


def _read_bits(
    signal: RawSignal,
    count: int,
    gap_max_us: int,
    short_min_us: int,
    short_max_us: int,
    long_min_us: int,
    long_max_us: int | None = None,
) -> int | None:
    """Read ``count`` pulse-length coded bits, most significant bit first."""
    gap_max = signal.threshold(gap_max_us)
    short_min = signal.threshold(short_min_us)
    short_max = signal.threshold(short_max_us)
    long_min = signal.threshold(long_min_us)
    long_max = None if long_max_us is None else signal.threshold(long_max_us)
    pulses = signal.pulses
    bitstream = 0
    for pulse, gap in zip(pulses[1 : 2 * count : 2], pulses[2 : 2 * count + 1 : 2]):
        if gap > gap_max:
            return None
        bitstream <<= 1
        if pulse > long_min:
            if long_max is not None and pulse > long_max:
                return None
            bitstream |= 1
        elif pulse > short_max or pulse < short_min:
            return None
    return bitstream


def decode_auriol_v3(signal: RawSignal, guard: RepeatGuard) -> Reading | None:
    """Decode an Auriol V3 packet; ``None`` when the signal is not one."""
    if signal.number != V3_PULSE_COUNT:
        return None
    bits = _read_bits(signal, V3_BITS, 650, 1500, 2000, 3500)
    if bits is None:
        return None
    head = bits >> V3_TAIL_BITS
    tail = bits & ((1 << V3_TAIL_BITS) - 1)

    if guard.is_repeat(0):
        return Reading("Auriol V3", duplicate=True)
    if not head or not tail:
        return None

    rolling_code = (head >> 8) & 0xFF
    raw = (tail >> 12) & 0xFFF
    scaled = ((((raw - V3_TEMPERATURE_OFFSET) & 0xFFFF) * 5) // 9) & 0xFFFF
    if scaled > 4096:
        return None
    try:
        temperature = signed_temperature(scaled)
    except ValueError:
        return None
    humidity = (tail >> 4) & 0xFF
    channel = tail & 0x03
    return Reading(
        "Auriol V3",
        {
            "ID": f"{rolling_code:02X}{channel:02X}",
            "TEMP": f"{temperature:04x}",
            "HUM": f"{humidity:02d}",
        },
    )


def decode_auriol_v2_xiron(signal: RawSignal, guard: RepeatGuard) -> Reading | None:
    """Decode an Auriol V2 or Xiron packet; ``None`` when the signal is not one.

    Packets carrying a non-zero humidity byte come from a Xiron sensor.
    """
    if signal.number != V2_PULSE_COUNT:
        return None
    bits = _read_bits(signal, V2_BITS, 700, 500, 1100, 1400, 2100)
    if bits is None:
        return None
    head = bits >> V2_TAIL_BITS
    tail = bits & ((1 << V2_TAIL_BITS) - 1)

    if not head:
        return None
    if (tail >> 8) & 0xF != 0xF:
        return None

    fingerprint = ((head << 8) | (tail & 0xFF)) & 0xFFFFFFFF
    humidity = tail & 0xFF
    xiron = humidity != 0
    name = "Xiron" if xiron else "Auriol V2"
    if guard.is_repeat(V2_REPEAT_WINDOW_MS, fingerprint):
        return Reading(name, duplicate=True)

    rolling_code = (head >> 16) & (0x7F if xiron else 0xFF)
    battery_ok = (head >> 15) & 0x1
    if (head >> 14) & 0x1:
        return None
    channel = ((head >> 12) & 0x3) + 1
    if channel > V2_MAX_CHANNEL:
        return None
    try:
        temperature = signed_temperature(head & 0xFFF)
    except ValueError:
        return None
    if xiron and humidity > MAX_HUMIDITY:
        return None

    fields = {
        "ID": f"{rolling_code:02X}{channel:02X}",
        "TEMP": f"{temperature:04x}",
    }
    if xiron:
        fields["HUM"] = f"{humidity:02d}"
    fields["BAT"] = "OK" if battery_ok else "LOW"
    fields["CHN"] = f"{channel:04x}"
    return Reading(name, fields)