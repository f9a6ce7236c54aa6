import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from fxmp3.dequant import (
    CriticalBandInfo,
    ScaleFactorInfoSub,
    dequant_block,
    dequant_channel,
)
from fxmp3.fixedpoint import clz
from fxmp3.tables import MAX_NSAMP, MPEGVersion, SideInfoSub, sf_band_table


def _sf_band():
    return sf_band_table(MPEGVersion.MPEG1, 0)


def _run(samples, nzb=MAX_NSAMP, mode_ext=0, **sis_fields):
    sis = SideInfoSub(global_gain=140, **sis_fields)
    return dequant_channel(samples, nzb, _sf_band(), MPEGVersion.MPEG1, mode_ext,
                           sis, ScaleFactorInfoSub())


def test_block_zeros_give_zero_and_empty_mask():
    out, mask = dequant_block([0, 0, 0, 0], 17)
    assert out == [0, 0, 0, 0]
    assert mask == 0


def test_block_unit_value_at_scale_zero():
    out, _ = dequant_block([1], 0)
    assert out == [1 << 25]


def test_block_table_value_for_eight():
    out, _ = dequant_block([8], 0)
    assert out == [0x20000000]


@given(st.integers(min_value=1, max_value=8000), st.integers(min_value=0, max_value=120))
def test_block_sign_symmetry(x, scale):
    pos, _ = dequant_block([x], scale)
    neg, _ = dequant_block([-x], scale)
    assert neg == [-pos[0]]


@given(st.integers(min_value=1, max_value=2000), st.integers(min_value=40, max_value=100))
@settings(max_examples=200)
def test_block_matches_power_law(x, scale):
    out, _ = dequant_block([x], scale)
    expected = x ** (4.0 / 3.0) * 2.0 ** (25 - scale / 4.0)
    assert abs(out[0] - expected) <= expected * 1e-4 + 2


def test_block_is_monotonic_in_magnitude():
    out, _ = dequant_block(list(range(300)), 40)
    assert all(a <= b for a, b in zip(out, out[1:]))


def test_block_mask_is_or_of_magnitudes():
    values = [3, -17, 70, 0, -500]
    out, mask = dequant_block(values, 30)
    expected = 0
    for v in out:
        expected |= abs(v)
    assert mask == expected


def test_channel_rejects_wrong_length():
    with pytest.raises(ValueError):
        _run([0] * 10)


def test_channel_all_zero_long_block():
    result = _run([0] * MAX_NSAMP, nzb=24)
    assert result.samples == [0] * MAX_NSAMP
    assert result.non_zero_bound == 24
    assert result.guard_bits == 31
    assert result.cbi == CriticalBandInfo(cb_type=0)


def test_channel_long_block_band_tracking_and_sign():
    samples = [0] * MAX_NSAMP
    start = _sf_band().long[5]
    samples[start] = 1
    samples[start + 1] = -1
    result = _run(samples)
    assert result.cbi.cb_end_l == 5
    assert result.samples[start] > 0
    assert result.samples[start + 1] == -result.samples[start]
    assert sum(1 for v in result.samples if v) == 2


def test_channel_guard_bits_follow_largest_sample():
    samples = [0] * MAX_NSAMP
    samples[3] = 40
    samples[100] = -7
    result = _run(samples)
    largest = max(abs(v) for v in result.samples)
    assert result.guard_bits == clz(largest) - 1


def test_mid_side_lowers_gain():
    samples = [0] * MAX_NSAMP
    samples[10] = 10
    plain = _run(samples, mode_ext=0)
    mid_side = _run(samples, mode_ext=2)
    assert 0 < mid_side.samples[10] < plain.samples[10]


def test_preflag_lowers_gain_in_emphasised_bands():
    samples = [0] * MAX_NSAMP
    pos = _sf_band().long[11]
    samples[pos] = 10
    plain = _run(samples)
    emphasised = _run(samples, pre_flag=1)
    assert 0 < emphasised.samples[pos] < plain.samples[pos]


def test_short_block_reorders_windows():
    band = _sf_band().short
    n = band[3] - band[2]
    start = 3 * band[2]
    samples = [0] * MAX_NSAMP
    samples[start + n] = 5  # window 1, first bin of band 2
    result = _run(samples, block_type=2, win_switch_flag=1)
    assert result.samples[start + 1] > 0
    assert result.samples[start + n] == 0 or n == 1
    assert result.cbi.cb_type == 1
    assert result.cbi.cb_end_s == [0, 2, 0]
    assert result.cbi.cb_end_s_max == 2


def test_short_block_stops_at_non_zero_bound():
    band = _sf_band().short
    result = _run([0] * MAX_NSAMP, nzb=0, block_type=2, win_switch_flag=1)
    assert result.non_zero_bound == 3 * band[1]


def test_mixed_block_reports_mixed_type():
    result = _run([0] * MAX_NSAMP, block_type=2, win_switch_flag=1, mixed_block=1)
    assert result.cbi.cb_type == 2
    assert result.cbi.cb_end_s == [3, 3, 3]
    assert result.non_zero_bound == MAX_NSAMP