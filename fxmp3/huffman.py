"""Huffman decoding of the transform coefficients of one granule and channel.

Decoded values are plain signed integers: the sign bit that follows a
non-zero magnitude in the bitstream makes the value negative.
"""

from dataclasses import dataclass, field

from fxmp3.frame import ErrorCode, MP3Error
from fxmp3.hufftab_high import QUAD_TABLE_MAX_BITS, HuffTabType, pair_table, quad_table
from fxmp3.tables import MAX_NSAMP, MPEGVersion


@dataclass
class HuffmanResult:
    """Decoded coefficients and the bitstream position after the Huffman data."""

    samples: list = field(default_factory=lambda: [0] * MAX_NSAMP)
    non_zero_bound: int = 0
    bytes_used: int = 0
    bit_offset: int = 0


class _BitReader:
    """Reads bits MSB first; bits past the limit (or past the buffer) read as zero."""

    def __init__(self, buf, bit_offset, bits_left):
        if not 0 <= bit_offset <= 7:
            raise ValueError(f"bit offset must be in 0..7, got {bit_offset}")
        self._buf = bytes(buf)
        self._start = bit_offset
        self._pos = bit_offset
        self._end = bit_offset + bits_left

    @property
    def consumed(self):
        return self._pos - self._start

    @property
    def remaining(self):
        return self._end - self._pos

    def peek(self, n):
        if n <= 0:
            return 0
        start = self._pos
        avail = self._end - start
        if avail <= 0:
            return 0
        first = start >> 3
        last = (start + n + 7) >> 3
        chunk = self._buf[first:last]
        span = last - first
        value = int.from_bytes(chunk, "big") << (8 * (span - len(chunk)))
        shift = 8 * span - (start - 8 * first) - n
        bits = (value >> shift) & ((1 << n) - 1)
        if avail < n:
            drop = n - avail
            bits = (bits >> drop) << drop
        return bits

    def skip(self, n):
        self._pos += n

    def read(self, n):
        value = self.peek(n)
        self._pos += n
        return value


def _signed(reader, magnitude):
    if magnitude and reader.read(1):
        return -magnitude
    return magnitude


def _one_shot_pair(reader, table):
    max_bits = table[0] & 0xF
    cw = table[1 + reader.peek(max_bits)]
    reader.skip(cw >> 12)
    x = _signed(reader, (cw >> 4) & 0xF)
    y = _signed(reader, (cw >> 8) & 0xF)
    return x, y


def _loop_pair(reader, table, linbits, escapes):
    cur = 0
    while True:
        max_bits = table[cur] & 0xF
        cw = table[cur + 1 + reader.peek(max_bits)]
        length = cw >> 12
        if length == 0:
            reader.skip(max_bits)
            cur += cw
            continue
        reader.skip(length)
        break
    x = (cw >> 4) & 0xF
    y = (cw >> 8) & 0xF
    if x == 15 and escapes:
        x += reader.read(linbits)
    x = _signed(reader, x)
    if y == 15 and escapes:
        y += reader.read(linbits)
    y = _signed(reader, y)
    return x, y


def decode_pairs(buf, bit_offset, n_vals, tab_idx, bits_left):
    """Decode ``n_vals`` big-values coefficients with pair table ``tab_idx``.

    Returns ``(values, bits_used)``. Raises :class:`MP3Error` with
    ``INVALID_HUFFCODES`` if the codes run past ``bits_left`` bits or the table
    index names an unused table.
    """
    if n_vals <= 0:
        return [], 0
    if bits_left < 0:
        raise MP3Error(ErrorCode.INVALID_HUFFCODES, "negative bit budget")
    if n_vals % 2:
        raise ValueError(f"pair decoding needs an even number of values, got {n_vals}")
    lookup = pair_table(tab_idx)
    if lookup.tab_type is HuffTabType.NO_BITS:
        return [0] * n_vals, 0
    if lookup.tab_type is HuffTabType.INVALID_TAB:
        raise MP3Error(ErrorCode.INVALID_HUFFCODES, f"unused Huffman table {tab_idx}")

    reader = _BitReader(buf, bit_offset, bits_left)
    escapes = lookup.tab_type is HuffTabType.LOOP_LINBITS
    values = []
    for _ in range(n_vals // 2):
        if lookup.tab_type is HuffTabType.ONE_SHOT:
            x, y = _one_shot_pair(reader, lookup.table)
        else:
            x, y = _loop_pair(reader, lookup.table, lookup.linbits, escapes)
        if reader.consumed > bits_left:
            raise MP3Error(ErrorCode.INVALID_HUFFCODES, "Huffman pairs ran out of bits")
        values += (x, y)
    return values, reader.consumed


def decode_quads(buf, bit_offset, n_vals, tab_idx, bits_left):
    """Decode count1 quadruples with quad table ``tab_idx`` (0 is A, 1 is B).

    Decoding stops after at most ``n_vals`` values, or when the bits run out;
    a quadruple that would need bits beyond ``bits_left`` is dropped. Returns
    the decoded values, always a multiple of four of them.
    """
    if bits_left <= 0:
        return []
    table = quad_table(tab_idx)
    max_bits = QUAD_TABLE_MAX_BITS[tab_idx]
    reader = _BitReader(buf, bit_offset, bits_left)
    values = []
    while len(values) < n_vals - 3:
        if reader.remaining <= 0:
            break
        cw = table[reader.peek(max_bits)]
        reader.skip(cw >> 4)
        quad = [_signed(reader, (cw >> bit) & 0x01) for bit in (3, 2, 1, 0)]
        if reader.consumed > bits_left:
            break
        values += quad
    return values


def _band_start(bands, index):
    # Out-of-range region counts fall back to the end of the spectrum.
    return bands[min(index, len(bands) - 1)]


def _region_starts(sis, sf_band, version):
    if sis.win_switch_flag and sis.block_type == 2:
        if sis.mixed_block == 0:
            r1 = _band_start(sf_band.short, (sis.region0_count + 1) // 3) * 3
        elif MPEGVersion(version) is MPEGVersion.MPEG1:
            r1 = _band_start(sf_band.long, sis.region0_count + 1)
        else:
            w = sf_band.short[4] - sf_band.short[3]
            r1 = sf_band.long[6] + 2 * w
        r2 = MAX_NSAMP
    else:
        r1 = _band_start(sf_band.long, sis.region0_count + 1)
        r2 = _band_start(sf_band.long, sis.region0_count + 1 + sis.region1_count + 1)
    return r1, r2


def decode_huffman(buf, bit_offset, huff_block_bits, sis, sf_band, version):
    """Decode one granule of one channel of Huffman data starting at ``bit_offset`` of ``buf``.

    Any bits left over after the count1 region are treated as stuffing, so the
    returned position is always ``huff_block_bits`` past the start. Raises
    :class:`MP3Error` with ``INVALID_HUFFCODES`` on a bad bit budget or bitstream.
    """
    if huff_block_bits < 0:
        raise MP3Error(ErrorCode.INVALID_HUFFCODES, "negative Huffman block size")
    if not 0 <= bit_offset <= 7:
        raise ValueError(f"bit offset must be in 0..7, got {bit_offset}")

    data = memoryview(bytes(buf))
    r1, r2 = _region_starts(sis, sf_band, version)
    end = min(MAX_NSAMP, 2 * sis.n_bigvals)
    bounds = (0, min(r1, end), min(r2, end), end)

    samples = [0] * MAX_NSAMP
    pos = bit_offset
    bits_left = huff_block_bits
    for i in range(3):
        start, stop = bounds[i], bounds[i + 1]
        values, used = decode_pairs(
            data[pos >> 3:], pos & 7, stop - start, sis.table_select[i], bits_left
        )
        if used > bits_left:
            raise MP3Error(ErrorCode.INVALID_HUFFCODES, "Huffman pairs overran the block")
        samples[start:start + len(values)] = values
        pos += used
        bits_left -= used

    quads = decode_quads(
        data[pos >> 3:], pos & 7, MAX_NSAMP - end, sis.count1_table_select, bits_left
    )
    samples[end:end + len(quads)] = quads
    non_zero_bound = end + len(quads)

    pos += bits_left
    return HuffmanResult(
        samples=samples,
        non_zero_bound=non_zero_bound,
        bytes_used=pos >> 3,
        bit_offset=pos & 7,
    )