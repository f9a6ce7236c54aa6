import pytest
from hypothesis import given
from hypothesis import strategies as st

from fxmp3.hufftab_high import (
    QUAD_TABLE_MAX_BITS,
    HuffTabType,
    pair_table,
    quad_table,
)
from fxmp3.hufftab_low import low_table


def _subtable_starts(table):
    """Follow every jump from the root and collect subtable header positions."""
    starts = {0}
    pending = [0]
    while pending:
        start = pending.pop()
        header = table[start]
        assert header >> 12 == 0xF
        size = 1 << (header & 0xF)
        for word in table[start + 1:start + 1 + size]:
            if word >> 12 == 0:
                target = start + word
                if target not in starts:
                    starts.add(target)
                    pending.append(target)
    return sorted(starts)


@pytest.mark.parametrize("idx, length", [(15, 580), (16, 651), (24, 705)])
def test_high_table_lengths(idx, length):
    assert len(pair_table(idx).table) == length


@pytest.mark.parametrize("idx", [15, 16, 24])
def test_subtables_tile_the_whole_table(idx):
    table = pair_table(idx).table
    starts = _subtable_starts(table)
    pos = 0
    for start in starts:
        assert start == pos
        pos = start + 1 + (1 << (table[start] & 0xF))
    assert pos == len(table)


@pytest.mark.parametrize("idx", [15, 16, 24])
def test_codeword_lengths_fit_their_subtable(idx):
    table = pair_table(idx).table
    for start in _subtable_starts(table):
        max_bits = table[start] & 0xF
        for word in table[start + 1:start + 1 + (1 << max_bits)]:
            length = word >> 12
            if length:
                assert length <= max_bits
                signs = word & 0xF
                x = (word >> 4) & 0xF
                y = (word >> 8) & 0xF
                assert signs == (x != 0) + (y != 0)


def test_header_widths():
    assert pair_table(15).table[0] == 0xF008
    assert pair_table(16).table[0] == 0xF008
    assert pair_table(24).table[0] == 0xF009


@pytest.mark.parametrize(
    "idx, linbits",
    [(16, 1), (17, 2), (18, 3), (19, 4), (20, 6), (21, 8), (22, 10), (23, 13),
     (24, 4), (25, 5), (26, 6), (27, 7), (28, 8), (29, 9), (30, 11), (31, 13)],
)
def test_linbits(idx, linbits):
    lookup = pair_table(idx)
    assert lookup.linbits == linbits
    assert lookup.tab_type is HuffTabType.LOOP_LINBITS


def test_shared_tables():
    assert all(pair_table(i).table == pair_table(16).table for i in range(16, 24))
    assert all(pair_table(i).table == pair_table(24).table for i in range(24, 32))


def test_table_kinds():
    assert pair_table(0).tab_type is HuffTabType.NO_BITS
    assert pair_table(4).tab_type is HuffTabType.INVALID_TAB
    assert pair_table(14).tab_type is HuffTabType.INVALID_TAB
    for idx in (1, 2, 3, 5, 6):
        assert pair_table(idx).tab_type is HuffTabType.ONE_SHOT
    for idx in (7, 8, 9, 10, 11, 12, 13, 15):
        assert pair_table(idx).tab_type is HuffTabType.LOOP_NO_LINBITS


def test_linbits_only_on_escape_tables():
    for idx in range(32):
        lookup = pair_table(idx)
        assert (lookup.linbits > 0) == (lookup.tab_type is HuffTabType.LOOP_LINBITS)


def test_empty_tables_for_no_data():
    assert pair_table(0).table == ()
    assert pair_table(4).table == ()
    assert pair_table(14).table == ()


@pytest.mark.parametrize("idx", [1, 2, 3, 5, 6, 7, 8, 9, 10, 11, 12, 13])
def test_low_indices_use_low_tables(idx):
    assert pair_table(idx).table == low_table(idx)


def test_quad_table_sizes_match_max_bits():
    assert len(quad_table(0)) == 1 << QUAD_TABLE_MAX_BITS[0]
    assert len(quad_table(1)) == 1 << QUAD_TABLE_MAX_BITS[1]


def test_quad_table_a_first_entry():
    assert quad_table(0)[0] == 0x6B
    assert quad_table(0)[-1] == 0x10


def test_quad_table_b_is_fixed_length_descending():
    table = quad_table(1)
    assert all(entry >> 4 == 4 for entry in table)
    assert [entry & 0xF for entry in table] == list(range(15, -1, -1))


@pytest.mark.parametrize("idx", [0, 1])
def test_quad_codeword_lengths_fit(idx):
    max_bits = QUAD_TABLE_MAX_BITS[idx]
    table = quad_table(idx)
    for i, entry in enumerate(table):
        length = entry >> 4
        assert 1 <= length <= max_bits
        run = 1 << (max_bits - length)
        first = i - i % run
        assert table[first:first + run] == (entry,) * run


@given(st.integers().filter(lambda n: not 0 <= n < 32))
def test_pair_table_rejects_bad_index(idx):
    with pytest.raises(ValueError):
        pair_table(idx)


@given(st.integers().filter(lambda n: n not in (0, 1)))
def test_quad_table_rejects_bad_index(idx):
    with pytest.raises(ValueError):
        quad_table(idx)