import pytest

from rfpulse.signal import RawSignal, RepeatGuard
from rfpulse.silvercrest import MARKER, Z31370_HEADER, decode_silvercrest


def _guard():
    return RepeatGuard(clock=lambda: 0)


def _classic(head, tail, preamble=1216):
    value = (head << 13) | tail
    bits = [(value >> shift) & 1 for shift in range(40, -1, -1)]
    micros = [preamble] * 9
    for index, bit in enumerate(bits):
        micros.append(192 if bit else 704)
        if index < len(bits) - 1:
            micros.append(416)
    assert len(micros) == 90
    return RawSignal.from_microseconds(micros)


def _z31370(head, tail, marker=MARKER):
    value = (head << 32) | tail
    micros = []
    for shift in range(55, -1, -1):
        micros += [64, 384] if (value >> shift) & 1 else [352, 64]
    micros += [384, 1248]
    return RawSignal.from_microseconds(micros, marker=marker)


def test_classic_packet_decodes_id():
    reading = decode_silvercrest(_classic(0xAF821B3, 0), _guard())
    assert reading.name == "SilverCrest"
    assert reading.fields == {"ID": "0af821b3", "SWITCH": "1", "CMD": "ON", "CHIME": "01"}


def test_classic_packet_needs_zero_tail():
    assert decode_silvercrest(_classic(0xAF821B3, 0x001), _guard()) is None


def test_classic_top_tail_bit_is_ignored():
    reading = decode_silvercrest(_classic(0x1234567, 0x1000), _guard())
    assert reading.fields["ID"] == "01234567"


def test_classic_short_preamble_rejected():
    assert decode_silvercrest(_classic(0xAF821B3, 0, preamble=960), _guard()) is None


def test_z31370_packet_decodes_tail_as_id():
    reading = decode_silvercrest(_z31370(Z31370_HEADER, 0x12345678), _guard())
    assert reading.fields["ID"] == "12345678"
    assert reading.fields["CHIME"] == "01"


def test_z31370_needs_marker():
    assert decode_silvercrest(_z31370(Z31370_HEADER, 0x12345678, marker=75), _guard()) is None
    assert decode_silvercrest(_z31370(Z31370_HEADER, 0x12345678, marker=0), _guard()) is None


def test_z31370_wrong_header_rejected():
    assert decode_silvercrest(_z31370(0x5CA589, 0x12345678), _guard()) is None


def test_z31370_invalid_pair_rejected():
    signal = _z31370(Z31370_HEADER, 0x12345678)
    signal.pulses[0] = signal.threshold(352)
    signal.pulses[1] = signal.threshold(384)
    assert decode_silvercrest(signal, _guard()) is None


@pytest.mark.parametrize("count", [89, 91, 113, 115])
def test_other_lengths_rejected(count):
    signal = RawSignal.from_microseconds([1216] * count, marker=MARKER)
    assert decode_silvercrest(signal, _guard()) is None


def test_repeat_is_suppressed():
    guard = _guard()
    first = decode_silvercrest(_classic(0xAF821B3, 0), guard)
    second = decode_silvercrest(_classic(0xAF821B3, 0), guard)
    assert first.duplicate is False
    assert second.duplicate is True