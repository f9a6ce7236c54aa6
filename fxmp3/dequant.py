"""Dequantization of Huffman-decoded coefficients for one granule of one channel.

Samples come out in fixed point with DQ_FRACBITS_OUT fraction bits. Short
blocks are reordered so that the three windows are interleaved sample by
sample.
"""

from dataclasses import dataclass, field

from fxmp3.fixedpoint import clz, mulshift32, to_int32
from fxmp3.tables import MAX_NSAMP, MPEGVersion

DQ_FRACBITS_OUT = 25
# Every gain is raised by sqrt(2) (0.25 * 2 in the exponent) for the long IMDCT.
IMDCT_SCALE = 2

_PRE_TAB = (0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 1, 1, 1, 2, 2, 3, 3, 3, 2, 0)

# pow(2, -i/4) for i = 0..3, Q31
_POW14 = (0x7FFFFFFF, 0x6BA27E65, 0x5A82799A, 0x4C1BF829)

# pow(2, -i/4) * pow(j, 4/3) for i = 0..3, j = 0..15 (j < 4 in Q28, the rest Q25)
_POW43_14 = (
    (0x00000000, 0x10000000, 0x285145F3, 0x453A5CDB,
     0x0CB2FF53, 0x111989D6, 0x15CE31C8, 0x1AC7F203,
     0x20000000, 0x257106B9, 0x2B16B4A3, 0x30ED74B4,
     0x36F23FA5, 0x3D227BD3, 0x437BE656, 0x49FC823C),
    (0x00000000, 0x0D744FCD, 0x21E71F26, 0x3A36ABD9,
     0x0AADC084, 0x0E610E6E, 0x12560C1D, 0x168523CF,
     0x1AE89F99, 0x1F7C03A4, 0x243BAE49, 0x29249C67,
     0x2E34420F, 0x33686F85, 0x38BF3DFF, 0x3E370182),
    (0x00000000, 0x0B504F33, 0x1C823E07, 0x30F39A55,
     0x08FACD62, 0x0C176319, 0x0F6B3522, 0x12EFE2AD,
     0x16A09E66, 0x1A79A317, 0x1E77E301, 0x2298D5B4,
     0x26DA56FC, 0x2B3A902A, 0x2FB7E7E7, 0x3450F650),
    (0x00000000, 0x09837F05, 0x17F910D7, 0x2929C7A9,
     0x078D0DFA, 0x0A2AE661, 0x0CF73154, 0x0FEC91CB,
     0x1306FE0A, 0x16434A6C, 0x199EE595, 0x1D17AE3D,
     0x20ABD76A, 0x2459D551, 0x28204FBB, 0x2BFE1808),
)

# pow(j, 4/3) for j = 16..63, Q23
_POW43 = (
    0x1428A2FA, 0x15DB1BD6, 0x1796302C, 0x19598D85,
    0x1B24E8BB, 0x1CF7FCFA, 0x1ED28AF2, 0x20B4582A,
    0x229D2E6E, 0x248CDB55, 0x26832FDA, 0x28800000,
    0x2A832287, 0x2C8C70A8, 0x2E9BC5D8, 0x30B0FF99,
    0x32CBFD4A, 0x34ECA001, 0x3712CA62, 0x393E6088,
    0x3B6F47E0, 0x3DA56717, 0x3FE0A5FC, 0x4220ED72,
    0x44662758, 0x46B03E7C, 0x48FF1E87, 0x4B52B3F3,
    0x4DAAEBFD, 0x5007B497, 0x5268FC62, 0x54CEB29C,
    0x5738C721, 0x59A72A59, 0x5C19CD35, 0x5E90A129,
    0x610B9821, 0x638AA47F, 0x660DB90F, 0x6894C90B,
    0x6B1FC80C, 0x6DAEAA0D, 0x70416360, 0x72D7E8B0,
    0x75722EF9, 0x78102B85, 0x7AB1D3EC, 0x7D571E09,
)

_SQRTHALF = 0x5A82799A

# Minimax polynomials for pow(x, 4/3) on [0.5, 0.7071] and [0.7071, 1.0].
_POLY43_LO = tuple(to_int32(c) for c in (0x29A0BDA9, 0xB02E4828, 0x5957AA1B, 0x236C498D, 0xFF581859))
_POLY43_HI = tuple(to_int32(c) for c in (0x10852163, 0xD333F6A4, 0x46E9408B, 0x27C2CEF0, 0xFEF577B4))

# pow(2, i * 4/3) as exponent and fraction
_POW2EXP = (14, 13, 11, 10, 9, 7, 6, 5)
_POW2FRAC = (
    0x6597FA94, 0x50A28BE6, 0x7FFFFFFF, 0x6597FA94,
    0x50A28BE6, 0x7FFFFFFF, 0x6597FA94, 0x50A28BE6,
)


@dataclass
class ScaleFactorInfoSub:
    """Scale factors for one granule of one channel: long bands and short bands by window."""

    l: list = field(default_factory=lambda: [0] * 23)
    s: list = field(default_factory=lambda: [[0, 0, 0] for _ in range(13)])


@dataclass
class CriticalBandInfo:
    """Highest critical bands holding non-zero samples after dequantization.

    ``cb_type`` is 0 for long blocks only, 1 for short blocks only and 2 for mixed.
    """

    cb_type: int = 0
    cb_end_s: list = field(default_factory=lambda: [0, 0, 0])
    cb_end_s_max: int = 0
    cb_end_l: int = 0


@dataclass
class DequantResult:
    """Dequantized samples, updated non-zero bound, guard bits and band information."""

    samples: list
    non_zero_bound: int
    guard_bits: int
    cbi: CriticalBandInfo


def _magnitude(x, tab4, tab16, scalef, scalei):
    if x < 4:
        return tab4[x]
    if x < 16:
        y = tab16[x]
        return to_int32(y << -scalei) if scalei < 0 else y >> scalei

    if x < 64:
        y = mulshift32(_POW43[x - 16], scalef)
        shift = scalei - 3
    else:
        # normalise to [0x40000000, 0x7fffffff]
        x = to_int32(x << 17)
        shift = 0
        if x < 0x08000000:
            x = to_int32(x << 4)
            shift += 4
        if x < 0x20000000:
            x = to_int32(x << 2)
            shift += 2
        if x < 0x40000000:
            x = to_int32(x << 1)
            shift += 1
        coef = _POLY43_LO if x < _SQRTHALF else _POLY43_HI
        y = coef[0]
        for c in coef[1:]:
            y = to_int32(mulshift32(y, x) + c)
        y = to_int32(mulshift32(y, _POW2FRAC[shift]) << 3)
        y = mulshift32(y, scalef)
        shift = scalei - _POW2EXP[shift]

    if shift < 0:
        shift = -shift
        if y > (0x7FFFFFFF >> shift):
            return 0x7FFFFFFF
        return to_int32(y << shift)
    return y >> shift


def dequant_block(values, scale):
    """Compute sign(x) * |x|**(4/3) * 2**(25 - scale/4) for each value, in fixed point.

    Returns ``(outputs, mask)`` where ``mask`` is the bitwise OR of the output
    magnitudes, used to count guard bits.
    """
    tab16 = _POW43_14[scale & 0x3]
    scalef = _POW14[scale & 0x3]
    scalei = min(scale >> 2, 31)

    shift = max(min(scalei + 3, 31), 0)
    tab4 = (0, tab16[1] >> shift, tab16[2] >> shift, tab16[3] >> shift)

    outputs = []
    mask = 0
    for sx in values:
        y = _magnitude(abs(sx), tab4, tab16, scalef, scalei)
        mask |= y
        outputs.append(to_int32(-y) if sx < 0 else y)
    return outputs, mask


def _block_layout(sis, version):
    """(end of long bands, first short band, end of short bands)."""
    if sis.block_type == 2:
        if sis.mixed_block:
            return (8 if version is MPEGVersion.MPEG1 else 6), 3, 13
        return 0, 0, 13
    return 22, 13, 13


def dequant_channel(samples, non_zero_bound, sf_band, version, mode_ext, sis, sfis):
    """Dequantize one granule of one channel and reorder its short blocks.

    ``samples`` holds MAX_NSAMP signed Huffman values and is not modified.
    ``mode_ext`` is the frame's mode extension; mid-side stereo lowers the gain
    by sqrt(2) to compensate for the later mid-side sum.
    """
    if len(samples) != MAX_NSAMP:
        raise ValueError(f"expected {MAX_NSAMP} samples, got {len(samples)}")
    version = MPEGVersion(version)
    buf = list(samples)

    cb_end_l, cb_start_s, cb_end_s = _block_layout(sis, version)
    sfact_multiplier = 2 * (sis.sfact_scale + 1)

    global_gain = sis.global_gain
    if mode_ext >> 1:
        global_gain -= 2
    global_gain += IMDCT_SCALE

    gb_mask = 0
    i = 0
    cb_max_long = 0
    bands = sf_band.long
    for cb in range(cb_end_l):
        n = bands[cb + 1] - bands[cb]
        pre = _PRE_TAB[cb] if sis.pre_flag else 0
        gain = 210 - global_gain + sfact_multiplier * (sfis.l[cb] + pre)
        out, non_zero = dequant_block(buf[i:i + n], gain)
        buf[i:i + n] = out
        i += n
        if non_zero:
            cb_max_long = cb
        gb_mask |= non_zero
        if i >= non_zero_bound:
            break

    if cb_start_s >= 12:
        cbi = CriticalBandInfo(cb_type=0, cb_end_l=cb_max_long)
        return DequantResult(buf, non_zero_bound, clz(gb_mask) - 1, cbi)

    cb_max = [cb_start_s] * 3
    bands = sf_band.short
    for cb in range(cb_start_s, cb_end_s):
        n = bands[cb + 1] - bands[cb]
        if i + 3 * n > MAX_NSAMP:
            raise ValueError("short-block bands run past the end of the granule")
        windows = []
        for w in range(3):
            gain = (210 - global_gain + 8 * sis.sub_block_gain[w]
                    + sfact_multiplier * sfis.s[cb][w])
            out, non_zero = dequant_block(buf[i + n * w:i + n * (w + 1)], gain)
            if non_zero:
                cb_max[w] = cb
            gb_mask |= non_zero
            windows.append(out)
        buf[i:i + 3 * n] = [v for triple in zip(*windows) for v in triple]
        i += 3 * n
        if i >= non_zero_bound:
            break

    cbi = CriticalBandInfo(
        cb_type=2 if sis.mixed_block else 1,
        cb_end_s=list(cb_max),
        cb_end_s_max=max(cb_max),
        cb_end_l=cb_max_long,
    )
    return DequantResult(buf, i, clz(gb_mask) - 1, cbi)