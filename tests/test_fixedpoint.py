import pytest
from hypothesis import given
from hypothesis import strategies as st

from fxmp3.fixedpoint import clip_2n, clz, fastabs, mulshift32, to_int32

INT32 = st.integers(min_value=-(2**31), max_value=2**31 - 1)


def test_to_int32_wraps_at_sign_bit():
    assert to_int32(2**31) == -(2**31)
    assert to_int32(0xFFFFFFFF) == -1
    assert to_int32(-1) == -1


@given(INT32)
def test_to_int32_is_identity_in_range(x):
    assert to_int32(x) == x


@given(st.integers())
def test_to_int32_result_in_range(x):
    y = to_int32(x)
    assert -(2**31) <= y <= 2**31 - 1
    assert (y - x) % (1 << 32) == 0


@given(INT32, INT32)
def test_mulshift32_commutes(a, b):
    assert mulshift32(a, b) == mulshift32(b, a)


@given(INT32)
def test_mulshift32_by_quarter_scale_is_shift(a):
    assert mulshift32(a, 1 << 30) == a >> 2


@given(INT32)
def test_mulshift32_by_zero(a):
    assert mulshift32(a, 0) == 0


def test_clz_edges():
    assert clz(0) == 32
    assert clz(1) == 31
    assert clz(-1) == 0


@given(st.integers(min_value=1, max_value=2**31 - 1))
def test_clz_positive_bounds(x):
    n = clz(x)
    assert 1 <= n <= 31
    assert x < (1 << (32 - n))
    assert x >= (1 << (31 - n))


@given(INT32, st.integers(min_value=0, max_value=31))
def test_clip_2n_range(x, n):
    y = clip_2n(x, n)
    assert -(1 << n) <= y <= (1 << n) - 1
    if -(1 << n) <= x <= (1 << n) - 1:
        assert y == x


def test_clip_2n_rejects_bad_width():
    with pytest.raises(ValueError):
        clip_2n(5, 32)


def test_fastabs_values():
    assert fastabs(-5) == 5
    assert fastabs(-(2**31)) == -(2**31)


@given(st.integers(min_value=-(2**31) + 1, max_value=2**31 - 1))
def test_fastabs_nonnegative(x):
    assert fastabs(x) == abs(x)