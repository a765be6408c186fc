"""Select Plus (Quhwa QH-C-CE-3V) wireless doorbell: 17 bits, receive and send."""

from __future__ import annotations

import re

from .signal import RawSignal, Reading, RepeatGuard

PULSE_COUNT = 36
BIT_COUNT = 17
REPEAT_WINDOW_MS = 1000

_MID_US = 650
_MAX_US = 2125
_SEND_PULSE_US = 364
_SEND_FRAMES = 17
_COMMAND_PREFIX = "SELECTPLUS;"


def decode_selectplus(signal: RawSignal, guard: RepeatGuard) -> Reading | None:
    """Decode a doorbell press; ``None`` when the signal is not one."""
    if signal.number != PULSE_COUNT:
        return None
    mid = signal.threshold(_MID_US)
    longest = signal.threshold(_MAX_US)
    pulses = signal.pulses
    bitstream = 0
    for pulse, gap in zip(pulses[1:PULSE_COUNT - 1:2], pulses[2:PULSE_COUNT:2]):
        bitstream <<= 1
        if pulse < mid:
            if gap < mid:
                return None
        else:
            if pulse > longest or gap > mid:
                return None
            bitstream |= 1

    if not bitstream:
        return None
    if guard.is_repeat(REPEAT_WINDOW_MS, bitstream):
        return Reading("SelectPlus", duplicate=True)
    if bitstream & 0xF:
        return None

    return Reading(
        "SelectPlus",
        {
            "ID": f"{(bitstream >> 4) & 0xFFFF:04x}",
            "SWITCH": "1",
            "CMD": "ON",
            "CHIME": "01",
        },
    )


def selectplus_pulses(address: int) -> list[int]:
    """Transmission for a 17-bit code word, as alternating high/low microseconds.

    Each frame is a long high sync followed by the bits, most significant
    first; the frame is sent seventeen times with a pause in between.
    """
    t = _SEND_PULSE_US
    frame = [3 * t]
    for index in range(BIT_COUNT - 1, -1, -1):
        frame += [3 * t, t] if (address >> index) & 1 else [t, 3 * t]
    pulses: list[int] = []
    for repeat in range(_SEND_FRAMES):
        pulses += frame
        if repeat < _SEND_FRAMES - 1:
            pulses.append(16 * t)
    return pulses


def selectplus_command(line: str) -> list[int] | None:
    """Build the transmission for a ``10;SELECTPLUS;<hex>;...`` command line.

    Returns ``None`` when the line is not addressed to this device.
    """
    if line[3:14].upper() != _COMMAND_PREFIX:
        return None
    digits = re.match(r"[0-9A-Fa-f]*", line[14:20]).group()
    value = int(digits, 16) if digits else 0
    return selectplus_pulses((value << 4) & 0xFFFFFFFF)