"""RL-02 digital doorbell (Byron MP): 12 tri-state bits, receive and send."""

from __future__ import annotations

import re

from .signal import RawSignal, Reading, RepeatGuard

CODE_LENGTH = 12
PULSE_COUNT = CODE_LENGTH * 4 + 2
REPEAT_WINDOW_MS = 1000
FIXED_PART = 0x7AD
FIXED_MASK = 0x7FF
CHIME_BIT = 1 << (CODE_LENGTH - 1)

_UNIT_US = 125
_SEND_PULSE_US = 175
_SEND_FRAMES = 8
_COMMAND_PREFIX = "BYRON MP;"

_SYMBOLS = {"SLSL": 0, "SLLS": 1, "LSLS": 0}
_FIRST_ONLY = {"LLSL": 1}

_T = _SEND_PULSE_US
_ZERO = [_T, 3 * _T, _T, 3 * _T]
_FLOAT = [_T, 3 * _T, 3 * _T, _T]
_ONE = [3 * _T, _T, 3 * _T, _T]
_SYNC = [_T, 31 * _T]


def _shape(pulse: int, split: int) -> str:
    if pulse < split:
        return "S"
    if pulse > split:
        return "L"
    return "="


def decode_rl02(signal: RawSignal, guard: RepeatGuard) -> Reading | None:
    """Decode an RL-02 doorbell press; ``None`` when the signal is not one."""
    if signal.number != PULSE_COUNT:
        return None
    split = signal.threshold(_UNIT_US * 2)
    data = signal.pulses[: CODE_LENGTH * 4]
    bitstream = 0
    for index in range(CODE_LENGTH):
        shape = "".join(_shape(p, split) for p in data[index * 4 : index * 4 + 4])
        bit = _SYMBOLS.get(shape)
        if bit is None and index == 0:
            bit = _FIRST_ONLY.get(shape)
        if bit is None:
            return None
        bitstream |= bit << index

    if bitstream == 0 or bitstream & FIXED_MASK != FIXED_PART:
        return None
    if guard.is_repeat(REPEAT_WINDOW_MS, bitstream):
        return Reading("Byron MP", duplicate=True)

    button = 1 if bitstream & CHIME_BIT else 0
    return Reading(
        "Byron MP",
        {"ID": f"{button:04x}", "SWITCH": "1", "CMD": "ON", "CHIME": "01"},
    )


def rl02_pulses(address: int) -> list[int]:
    """Transmission for a 12-bit code word, as alternating high/low microseconds.

    The least significant bit goes first; the frame is sent eight times.
    """
    frame: list[int] = []
    for index in range(CODE_LENGTH - 1):
        frame += _FLOAT if (address >> index) & 1 else _ZERO
    frame += _FLOAT if (address >> (CODE_LENGTH - 1)) & 1 else _ONE
    frame += _SYNC
    return frame * _SEND_FRAMES


def rl02_command(line: str) -> list[int] | None:
    """Build the transmission for a ``10;Byron MP;<hex>;...`` command line.

    Returns ``None`` when the line is not addressed to this device.
    """
    if line[3:12].upper() != _COMMAND_PREFIX:
        return None
    digits = re.match(r"[0-9A-Fa-f]*", line[12:18]).group()
    value = int(digits, 16) if digits else 0
    return rl02_pulses(((value << 11) | FIXED_PART) & 0xFFFFFFFF)