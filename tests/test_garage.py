from rfpulse.garage import decode_garage640
from rfpulse.signal import RawSignal, RepeatGuard

SAMPLE_US = [
    192, 448, 160, 480, 480, 160, 480, 160, 448, 192, 128, 512, 128, 544, 96, 544,
    448, 192, 128, 512, 160, 512, 480, 160, 128, 512, 480, 160, 480, 192, 128, 512,
    480, 160, 480, 160, 128, 512, 448, 192, 128, 512, 128, 512, 128, 512, 448, 192,
]


def _fresh() -> RepeatGuard:
    return RepeatGuard(signal_hash=1, previous_hash=0, clock=lambda: 0)


def _train(bits: int) -> RawSignal:
    us = []
    for index in range(23, -1, -1):
        us += [480, 160] if (bits >> index) & 1 else [128, 512]
    return RawSignal.from_microseconds(us, marker=65)


def test_sample_decodes():
    reading = decode_garage640(RawSignal.from_microseconds(SAMPLE_US, marker=65), _fresh())
    assert reading.fields == {"ID": "3896d1"}
    assert reading.format(0) == "20;00;GARAGE640;ID=3896d1;"


def test_unmarked_train_rejected():
    assert decode_garage640(RawSignal.from_microseconds(SAMPLE_US), _fresh()) is None


def test_wrong_length_rejected():
    signal = RawSignal.from_microseconds(SAMPLE_US + [96], marker=65)
    assert decode_garage640(signal, _fresh()) is None


def test_round_trip():
    assert decode_garage640(_train(0xA5C3E1), _fresh()).fields["ID"] == "a5c3e1"


def test_all_zero_rejected():
    assert decode_garage640(_train(0), _fresh()) is None


def test_repeat_is_flagged():
    guard = RepeatGuard(clock=lambda: 0)
    assert decode_garage640(_train(0x123456), guard).duplicate is False
    assert decode_garage640(_train(0x123456), guard).duplicate is True
    assert decode_garage640(_train(0x654321), guard).duplicate is False


def test_pulse_too_long_rejected():
    us = list(SAMPLE_US)
    us[4] = 700
    assert decode_garage640(RawSignal.from_microseconds(us, marker=65), _fresh()) is None


def test_invalid_pair_rejected():
    us = list(SAMPLE_US)
    us[1] = 160
    assert decode_garage640(RawSignal.from_microseconds(us, marker=65), _fresh()) is None