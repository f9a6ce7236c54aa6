import pytest
from hypothesis import given, strategies as st

from fxmp3.frame import (
    ErrorCode,
    FrameInfo,
    MainDataBuffer,
    MP3Error,
    find_free_sync,
    find_sync_word,
    frame_info,
    free_bitrate,
)
from fxmp3.tables import MPEGVersion, bitrate_kbps, samples_per_frame, slot_count

HEADER = bytes([0xFF, 0xFB, 0x90, 0x64])
HEADER_PADDED = bytes([0xFF, 0xFB, 0x92, 0x64])


def test_find_sync_word_locates_header():
    assert find_sync_word(b"\x00\x12" + HEADER) == 2


def test_find_sync_word_accepts_mpeg25_sync():
    assert find_sync_word(b"\x01\xff\xe0") == 1


def test_find_sync_word_rejects_short_sync():
    assert find_sync_word(b"\xff\xd0\x00\x00") == -1


def test_find_sync_word_empty_and_trailing_ff():
    assert find_sync_word(b"") == -1
    assert find_sync_word(b"\x00\x00\xff") == -1


@given(st.binary(max_size=64))
def test_find_sync_word_finds_first_match(data):
    r = find_sync_word(data)
    matches = [i for i in range(len(data) - 1) if data[i] == 0xFF and data[i + 1] & 0xE0 == 0xE0]
    if matches:
        assert r == matches[0]
    else:
        assert r == -1


def test_find_free_sync_returns_distance():
    buf = bytes(100) + HEADER + bytes(10)
    assert find_free_sync(buf, HEADER) == 100


def test_find_free_sync_subtracts_pad_byte():
    buf = bytes(100) + HEADER_PADDED + bytes(10)
    assert find_free_sync(buf, HEADER_PADDED) == 99


def test_find_free_sync_skips_mismatched_header():
    other = bytes([0xFF, 0xFB, 0xA0, 0x64])
    buf = bytes(20) + other + bytes(30) + HEADER + bytes(5)
    assert find_free_sync(buf, HEADER) == 20 + len(other) + 30


def test_find_free_sync_ignores_low_bits_of_third_byte():
    next_header = bytes([0xFF, 0xFB, 0x93, 0x00])
    buf = bytes(7) + next_header
    assert find_free_sync(buf, HEADER) == 7


def test_find_free_sync_raises_when_missing():
    with pytest.raises(MP3Error) as excinfo:
        find_free_sync(bytes(50), HEADER)
    assert excinfo.value.code == ErrorCode.FREE_BITRATE_SYNC
    assert int(excinfo.value) == ErrorCode.FREE_BITRATE_SYNC


@pytest.mark.parametrize("index", range(1, 15))
def test_free_bitrate_matches_standard_table(index):
    slots = slot_count(MPEGVersion.MPEG1, 1, index)
    expected = bitrate_kbps(MPEGVersion.MPEG1, 3, index) * 1000
    assert free_bitrate(slots, 48000, 2, 576) == expected


def test_free_bitrate_rejects_empty_frame():
    with pytest.raises(ValueError):
        free_bitrate(100, 44100, 0, 576)


def test_frame_info_layer3():
    info = frame_info(MPEGVersion.MPEG1, 3, 128000, 2, 44100)
    assert info.output_samps == 2 * samples_per_frame(MPEGVersion.MPEG1, 3)
    assert info.bits_per_sample == 16
    assert (info.bitrate, info.n_chans, info.sample_rate, info.layer, info.version) == (
        128000, 2, 44100, 3, 0)


def test_frame_info_mpeg2_mono():
    info = frame_info(MPEGVersion.MPEG2, 3, 64000, 1, 22050)
    assert info.output_samps == samples_per_frame(MPEGVersion.MPEG2, 3)
    assert info.version == int(MPEGVersion.MPEG2)


def test_frame_info_other_layer_is_empty():
    assert frame_info(MPEGVersion.MPEG1, 2, 128000, 2, 44100) == FrameInfo()


def test_main_data_fill_without_reservoir():
    buf = MainDataBuffer()
    out = buf.fill(b"abcdefgh", 0, 5)
    assert out == b"abcde"
    assert len(buf) == 5


def test_main_data_underflow_keeps_bytes():
    buf = MainDataBuffer()
    with pytest.raises(MP3Error) as excinfo:
        buf.fill(b"abcdef", 4, 3)
    assert excinfo.value.code == ErrorCode.MAINDATA_UNDERFLOW
    assert buf.main_data_bytes == 3


def test_main_data_uses_reservoir_tail():
    buf = MainDataBuffer()
    buf.fill(b"abcdef", 0, 6)
    out = buf.fill(b"XYZ", 2, 3)
    assert out == b"efXYZ"
    assert len(buf) == 5


def test_main_data_indata_underflow_consumes_nothing():
    buf = MainDataBuffer()
    buf.fill(b"abc", 0, 3)
    with pytest.raises(MP3Error) as excinfo:
        buf.fill(b"xy", 0, 5)
    assert excinfo.value.code == ErrorCode.INDATA_UNDERFLOW
    assert len(buf) == 3


def test_main_data_reset():
    buf = MainDataBuffer()
    buf.fill(b"abc", 0, 3)
    buf.reset()
    assert len(buf) == 0
    with pytest.raises(MP3Error):
        buf.fill(b"abc", 1, 3)


@given(st.binary(min_size=1, max_size=200), st.binary(max_size=200), st.integers(0, 200))
def test_main_data_round_trip(first, second, begin):
    buf = MainDataBuffer()
    buf.fill(first, 0, len(first))
    begin = min(begin, len(first))
    out = buf.fill(second, begin, len(second))
    assert out == first[len(first) - begin:] + second
    assert len(out) == begin + len(second)
    assert buf.main_data_bytes == len(out)


def test_mp3error_code_conversion():
    err = MP3Error(-12)
    assert err.code is ErrorCode.INVALID_SUBBAND
    assert int(err) == -12