"""Captured RF pulse trains, repeat suppression and RFLink-style output lines."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Callable, Iterable

#: Microseconds represented by one unit of a stored pulse length.
SAMPLE_RATE = 32

BUILD_NUMBER = 0x05
REVISION = 0x01

# Debug defaults: raw dumps with or without scaling, before or after decoding.
RF_DEBUG = False
QRF_DEBUG = False
RFU_DEBUG = False
QRFU_DEBUG = False

#: Largest temperature magnitude accepted by the sensors (60.0 degrees).
TEMPERATURE_LIMIT = 0x258
#: Flag set on an encoded temperature when it is below zero.
NEGATIVE_FLAG = 0x8000
#: Shortest packet that the debug dump reports.
DEBUG_MIN_PULSES = 24


def _millis() -> int:
    return time.monotonic_ns() // 1_000_000


@dataclass
class RawSignal:
    """A received pulse train.

    ``pulses`` holds the pulse lengths in units of ``multiply`` microseconds,
    first pulse first.  ``marker`` carries the id of the plugin that
    pre-processed the train, or 0.
    """

    pulses: list[int]
    marker: int = 0
    multiply: int = SAMPLE_RATE

    @classmethod
    def from_microseconds(
        cls, durations: Iterable[int], marker: int = 0, multiply: int = SAMPLE_RATE
    ) -> "RawSignal":
        """Build a signal from pulse lengths given in microseconds."""
        return cls([duration // multiply for duration in durations], marker, multiply)

    @property
    def number(self) -> int:
        """Number of pulses in the train."""
        return len(self.pulses)

    def threshold(self, microseconds: int) -> int:
        """Convert a duration in microseconds to stored pulse units."""
        return microseconds // self.multiply

    def durations(self) -> list[int]:
        """Pulse lengths in microseconds."""
        return [pulse * self.multiply for pulse in self.pulses]


@dataclass
class RepeatGuard:
    """Remembers the last packet so that retransmissions are reported once.

    ``signal_hash`` and ``previous_hash`` identify the current and the
    previous pulse train, ``repeating_timer`` is the time (in milliseconds)
    the previous train was seen, and ``crc`` the last decoded value.
    """

    signal_hash: int | None = None
    previous_hash: int | None = None
    repeating_timer: int = 0
    crc: int | None = None
    clock: Callable[[], int] = field(default=_millis, repr=False)

    def is_repeat(self, window_ms: int, value: int | None = None) -> bool:
        """Tell whether the packet was already seen within ``window_ms``.

        When ``value`` is given it must also match the last decoded value;
        a packet judged new then becomes the remembered value.
        """
        fresh = (
            self.signal_hash != self.previous_hash
            or self.repeating_timer + window_ms < self.clock()
            or (value is not None and self.crc != value)
        )
        if fresh:
            if value is not None:
                self.crc = value
            return False
        return True


@dataclass
class Reading:
    """One decoded packet: a device name and its ordered key/value fields."""

    name: str
    fields: dict[str, str] = field(default_factory=dict)
    duplicate: bool = False

    def format(self, counter: int) -> str:
        """Render the reading as an output line with a two-digit counter."""
        if self.duplicate:
            raise ValueError("a suppressed repeat has no output line")
        parts = ["20", f"{counter & 0xFF:02X}", self.name]
        parts.extend(f"{key}={value}" for key, value in self.fields.items())
        return ";".join(parts) + ";"


def crc8(data: bytes | Iterable[int], poly: int, init: int) -> int:
    """CRC-8, most significant bit first, without final xor."""
    remainder = init & 0xFF
    for byte in data:
        remainder ^= byte & 0xFF
        for _ in range(8):
            if remainder & 0x80:
                remainder = ((remainder << 1) ^ poly) & 0xFF
            else:
                remainder = (remainder << 1) & 0xFF
    return remainder


def signed_temperature(raw: int) -> int:
    """Turn a 12-bit tenths-of-a-degree reading into the output encoding.

    Values above 3000 are negative (two's complement on 12 bits) and come
    back as their magnitude with ``NEGATIVE_FLAG`` set.  Magnitudes above
    60.0 degrees raise ``ValueError``.
    """
    if raw > 3000:
        magnitude = 4096 - raw
        if magnitude > TEMPERATURE_LIMIT:
            raise ValueError(f"temperature -{magnitude / 10:.1f} out of range")
        return magnitude | NEGATIVE_FLAG
    if raw > TEMPERATURE_LIMIT:
        raise ValueError(f"temperature {raw / 10:.1f} out of range")
    return raw


def debug_dump(signal: RawSignal, compact: bool = False) -> str | None:
    """Describe an undecoded packet; ``None`` when it is too short to matter.

    The compact form lists stored pulse units as two hex digits each, the
    full form lists microseconds separated by commas.
    """
    if signal.number < DEBUG_MIN_PULSES:
        return None
    if compact:
        body = "".join(f"{pulse:02x}" for pulse in signal.pulses)
    else:
        body = ",".join(str(pulse * SAMPLE_RATE) for pulse in signal.pulses)
    return f"20;XX;DEBUG;Pulses={signal.number};Pulses(uSec)={body};"