import pytest

from rfpulse.ev1527 import decode_ev1527
from rfpulse.signal import RawSignal, RepeatGuard

SAMPLE = [
    475, 925, 400, 950, 1150, 175, 400, 950, 375, 950, 1125, 200, 1100, 225,
    1100, 250, 1075, 250, 1075, 275, 1050, 275, 1050, 275, 1050, 275, 1050,
    275, 275, 1050, 1050, 275, 300, 1050, 1050, 275, 300, 1050, 300, 1050,
    1050, 275, 300, 1050, 275, 1050, 1050, 275, 275, 275,
]


def fresh_guard():
    return RepeatGuard(signal_hash=1, previous_hash=2, clock=lambda: 0)


def encode(value, long_us=1050, short_us=300):
    pulses = []
    for shift in range(23, -1, -1):
        if (value >> shift) & 1:
            pulses += [long_us, short_us]
        else:
            pulses += [short_us, long_us]
    return RawSignal.from_microseconds(pulses + [275, 275])


def test_sample_length():
    assert RawSignal.from_microseconds(SAMPLE).number == 50


def test_documented_sample():
    guard = fresh_guard()
    reading = decode_ev1527(RawSignal.from_microseconds(SAMPLE), guard)
    assert reading.name == "EV1527"
    assert reading.fields["ID"] == "027fd4"
    assert reading.fields["SWITCH"] == "9"
    assert reading.fields["CMD"] == "ON"
    assert guard.crc == 0x27FD49


def test_formatted_line_shape():
    reading = decode_ev1527(RawSignal.from_microseconds(SAMPLE), fresh_guard())
    line = reading.format(5)
    assert line.startswith("20;05;EV1527;ID=")
    assert line.endswith(";CMD=ON;")


@pytest.mark.parametrize("value", [0x000001, 0x123456, 0xABCDEF, 0x800000, 0xFFFFFF])
def test_round_trip_value_remembered(value):
    guard = fresh_guard()
    reading = decode_ev1527(encode(value), guard)
    assert reading.duplicate is False
    assert guard.crc == value


def test_oregon_marker_is_skipped():
    signal = RawSignal.from_microseconds(SAMPLE, marker=63)
    assert decode_ev1527(signal, fresh_guard()) is None


def test_wrong_length():
    assert decode_ev1527(RawSignal.from_microseconds(SAMPLE[:-1]), fresh_guard()) is None


def test_invalid_pair_rejected():
    pulses = list(SAMPLE)
    pulses[0] = 1100
    assert decode_ev1527(RawSignal.from_microseconds(pulses), fresh_guard()) is None


def test_pulse_too_long_rejected():
    assert decode_ev1527(encode(0x123456, long_us=1500), fresh_guard()) is None


def test_pulse_too_short_rejected():
    assert decode_ev1527(encode(0x123456, short_us=100), fresh_guard()) is None


def test_all_zero_rejected():
    assert decode_ev1527(encode(0), fresh_guard()) is None


def test_noise_pattern_rejected():
    assert decode_ev1527(encode(0xFF00FF), fresh_guard()) is None


def test_repeat_is_duplicate():
    guard = RepeatGuard(
        signal_hash=4, previous_hash=4, repeating_timer=1000, crc=0x27FD49, clock=lambda: 1100
    )
    reading = decode_ev1527(RawSignal.from_microseconds(SAMPLE), guard)
    assert reading.duplicate is True


def test_repeat_after_window_is_new():
    guard = RepeatGuard(
        signal_hash=4, previous_hash=4, repeating_timer=1000, crc=0x27FD49, clock=lambda: 1300
    )
    reading = decode_ev1527(RawSignal.from_microseconds(SAMPLE), guard)
    assert reading.duplicate is False