import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from fxmp3.dct32 import VBUF_LENGTH, fdct32

DEST_LEN = 2 * VBUF_LENGTH


def _run(buf, offset=0, odd_block=0, gb=10):
    dest = [None] * DEST_LEN
    fdct32(list(buf), dest, offset, odd_block, gb)
    return dest


def _written(dest):
    return {i: v for i, v in enumerate(dest) if v is not None}


def test_zero_input_writes_66_zeros():
    written = _written(_run([0] * 32))
    assert len(written) == 66
    assert set(written.values()) == {0}


def test_constant_input_has_only_dc_term():
    x = 1 << 20
    written = _written(_run([x] * 32, offset=2))
    dc = [i for i, v in written.items() if v != 0]
    assert len(dc) == 2
    assert dc[1] - dc[0] == 8
    assert written[dc[0]] == 32 * x


def test_guard_bit_scaling_matches_for_constant():
    x = 1 << 20
    assert _run([x] * 32, gb=0) == _run([x] * 32, gb=10)


def test_scaling_path_clips_large_values():
    written = _written(_run([0x7FFFFFFF] * 32, gb=0))
    assert all(-(2**31) <= v <= 2**31 - 1 for v in written.values())
    assert max(written.values()) > 0


@pytest.mark.parametrize("odd_block", [0, 1])
def test_dc_term_half_depends_on_odd_block(odd_block):
    x = 1 << 18
    written = _written(_run([x] * 32, offset=3, odd_block=odd_block))
    dc = [i for i, v in written.items() if v != 0]
    if odd_block:
        assert all(i < VBUF_LENGTH for i in dc)
    else:
        assert all(i >= VBUF_LENGTH for i in dc)


def test_input_not_mutated():
    buf = list(range(32))
    copy = list(buf)
    fdct32(buf, [0] * DEST_LEN, 0, 0, 0)
    assert buf == copy


def test_wrong_length_raises():
    with pytest.raises(ValueError):
        fdct32([0] * 31, [0] * DEST_LEN, 0, 0, 10)


@settings(max_examples=50, deadline=None)
@given(
    st.lists(st.integers(min_value=-(2**24), max_value=2**24), min_size=32, max_size=32),
    st.integers(min_value=0, max_value=7),
    st.integers(min_value=0, max_value=1),
)
def test_outputs_are_duplicated_eight_apart(buf, offset, odd_block):
    dest = _run(buf, offset=offset, odd_block=odd_block, gb=6)
    written = _written(dest)
    assert len(written) == 66
    starts = [i for i in written if i - 8 not in written]
    assert len(starts) == 33
    for i in starts:
        assert dest[i] == dest[i + 8]
        assert -(2**31) <= dest[i] <= 2**31 - 1