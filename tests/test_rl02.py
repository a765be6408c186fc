from rfpulse.rl02 import decode_rl02, rl02_command, rl02_pulses
from rfpulse.signal import RawSignal, RepeatGuard

RING = [
    175, 400, 450, 50, 100, 400, 100, 400, 100, 400, 450, 50, 100, 400, 450, 50, 100, 425,
    100, 400, 100, 400, 450, 50, 100, 400, 100, 400, 100, 400, 450, 50, 100, 400, 425, 75,
    100, 400, 425, 75, 100, 400, 450, 75, 425, 75, 425, 75, 75, 75,
]
CHANGE_CHIME = [
    175, 400, 450, 50, 100, 400, 100, 400, 100, 400, 450, 50, 100, 400, 450, 50, 100, 400,
    100, 400, 100, 400, 425, 50, 100, 400, 100, 400, 100, 400, 450, 50, 100, 400, 425, 50,
    100, 400, 425, 50, 100, 400, 425, 75, 100, 400, 425, 75, 100, 75,
]


def _frame(train):
    return RawSignal.from_microseconds(train[:50])


def test_ring_sample_decodes_to_line():
    reading = decode_rl02(RawSignal.from_microseconds(RING), RepeatGuard())
    assert reading.format(0x6D) == "20;6D;Byron MP;ID=0000;SWITCH=1;CMD=ON;CHIME=01;"


def test_change_chime_sample_sets_id():
    ring = decode_rl02(RawSignal.from_microseconds(RING), RepeatGuard())
    chime = decode_rl02(RawSignal.from_microseconds(CHANGE_CHIME), RepeatGuard())
    assert int(chime.fields["ID"], 16) == 1
    assert {k: v for k, v in chime.fields.items() if k != "ID"} == {
        k: v for k, v in ring.fields.items() if k != "ID"
    }


def test_transmission_is_eight_identical_frames():
    train = rl02_pulses(0x7AD)
    assert len(train) == 8 * 50
    assert train == train[:50] * 8


def test_round_trip_both_buttons():
    for address in (0x7AD, 0xFAD):
        reading = decode_rl02(_frame(rl02_pulses(address)), RepeatGuard())
        assert int(reading.fields["ID"], 16) == address >> 11


def test_wrong_fixed_part_rejected():
    assert decode_rl02(_frame(rl02_pulses(0x7AC)), RepeatGuard()) is None


def test_all_zero_rejected():
    assert decode_rl02(_frame(rl02_pulses(0)), RepeatGuard()) is None


def test_wrong_length_rejected():
    assert decode_rl02(RawSignal.from_microseconds(RING[:-1]), RepeatGuard()) is None


def test_bad_symbol_rejected():
    broken = list(RING)
    broken[4:8] = [450, 50, 450, 450]
    assert decode_rl02(RawSignal.from_microseconds(broken), RepeatGuard()) is None


def test_first_symbol_alternative_accepted_only_first():
    variant = list(RING)
    variant[0:4] = [450, 400, 50, 400]
    assert decode_rl02(RawSignal.from_microseconds(variant), RepeatGuard()) is not None
    later = list(RING)
    later[4:8] = [450, 400, 50, 400]
    assert decode_rl02(RawSignal.from_microseconds(later), RepeatGuard()) is None


def test_repeat_suppressed():
    guard = RepeatGuard(signal_hash=1, previous_hash=1, repeating_timer=0, clock=lambda: 500)
    signal = RawSignal.from_microseconds(RING)
    assert decode_rl02(signal, guard).duplicate is False
    assert decode_rl02(signal, guard).duplicate is True


def test_command_round_trip():
    train = rl02_command("10;Byron MP;000001;1;ON;")
    reading = decode_rl02(_frame(train), RepeatGuard())
    assert int(reading.fields["ID"], 16) == 1


def test_command_prefix_is_case_insensitive():
    assert rl02_command("10;byron mp;000000;1;ON;") == rl02_command("10;BYRON MP;000000;1;ON;")


def test_command_for_other_device_ignored():
    assert rl02_command("10;DELTRONIC;000001;1;ON;") is None


def test_command_without_digits_sends_fixed_part():
    assert rl02_command("10;Byron MP;;") == rl02_pulses(0x7AD)