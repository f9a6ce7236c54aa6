"""32-point DCT for the matrixing stage of the polyphase synthesis filter."""

from fxmp3.fixedpoint import clip_2n, mulshift32, to_int32

NBANDS = 32
VBUF_LENGTH = 17 * 2 * NBANDS

_COS0 = (
    0x4013C251, 0x40B345BD, 0x41FA2D6D, 0x43F93421, 0x46CC1BC4, 0x4A9D9CF0,
    0x4FAE3711, 0x56601EA7, 0x5F4CF6EB, 0x6B6FCF26, 0x7C7D1DB3, 0x4AD81A97,
    0x5EFC8D96, 0x41D95790, 0x6D0B20CF, 0x518522FB,
)
_COS1 = (
    0x404F4672, 0x42E13C10, 0x48919F44, 0x52CB0E63,
    0x64E2402E, 0x43E224A9, 0x6E3C92C1, 0x519E4E04,
)
_COS2 = (0x4140FB46, 0x4CF8DE88, 0x73326BBF, 0x52036742)
_COS3 = (0x4545E9EF, 0x539EBA45)
_COS4_0 = 0x5A82799A

# First pass: (cos for a0-a3, cos for a1-a2, cos for outer butterflies) and shifts.
_FIRST_PASS = tuple(
    ((_COS0[i], _COS0[15 - i], _COS1[i]), shifts)
    for i, shifts in enumerate(
        ((1, 5, 1), (1, 3, 1), (1, 3, 1), (1, 2, 1),
         (1, 2, 1), (1, 1, 2), (1, 1, 2), (1, 1, 4))
    )
)

_SECOND_PASS = tuple(
    (sign * _COS2[0], sign * _COS2[3], _COS3[0], sign * _COS2[1], sign * _COS2[2], _COS3[1])
    for sign in (1, -1, 1, -1)
)


def _mul(c, x, shift):
    return to_int32(mulshift32(c, to_int32(x)) << shift)


def _add(a, b):
    return to_int32(a + b)


def _first_pass(v):
    for i, ((c0, c1, c2), (s0, s1, s2)) in enumerate(_FIRST_PASS):
        a0, a3 = v[i], v[31 - i]
        a1, a2 = v[15 - i], v[16 + i]
        b0 = _add(a0, a3)
        b3 = _mul(c0, a0 - a3, s0)
        b1 = _add(a1, a2)
        b2 = _mul(c1, a1 - a2, s1)
        v[i] = _add(b0, b1)
        v[15 - i] = _mul(c2, b0 - b1, s2)
        v[16 + i] = _add(b2, b3)
        v[31 - i] = _mul(c2, b3 - b2, s2)


def _second_pass(v):
    for base, c in zip(range(0, 32, 8), _SECOND_PASS):
        a0, a7, a3, a4 = v[base], v[base + 7], v[base + 3], v[base + 4]
        b0 = _add(a0, a7)
        b7 = _mul(c[0], a0 - a7, 1)
        b3 = _add(a3, a4)
        b4 = _mul(c[1], a3 - a4, 3)
        a0 = _add(b0, b3)
        a3 = _mul(c[2], b0 - b3, 1)
        a4 = _add(b4, b7)
        a7 = _mul(c[2], b7 - b4, 1)

        a1, a6, a2, a5 = v[base + 1], v[base + 6], v[base + 2], v[base + 5]
        b1 = _add(a1, a6)
        b6 = _mul(c[3], a1 - a6, 1)
        b2 = _add(a2, a5)
        b5 = _mul(c[4], a2 - a5, 1)
        a1 = _add(b1, b2)
        a2 = _mul(c[5], b1 - b2, 2)
        a5 = _add(b5, b6)
        a6 = _mul(c[5], b6 - b5, 2)

        b0 = _add(a0, a1)
        b1 = _mul(_COS4_0, a0 - a1, 1)
        b2 = _add(a2, a3)
        b3 = _mul(_COS4_0, a3 - a2, 1)
        v[base] = b0
        v[base + 1] = b1
        v[base + 2] = _add(b2, b3)
        v[base + 3] = b3

        b4 = _add(a4, a5)
        b5 = _mul(_COS4_0, a4 - a5, 1)
        b6 = _add(a6, a7)
        b7 = _mul(_COS4_0, a7 - a6, 1)
        b6 = _add(b6, b7)
        v[base + 4] = _add(b4, b6)
        v[base + 5] = _add(b5, b7)
        v[base + 6] = _add(b5, b6)
        v[base + 7] = b7


def _samples_high(v):
    """Outputs for samples 16..31, in write order."""
    out = [v[1]]
    tmp = v[25] + v[29]
    out += [v[17] + tmp, v[9] + v[13], v[21] + tmp]
    tmp = v[29] + v[27]
    out += [v[5], v[21] + tmp, v[13] + v[11], v[19] + tmp]
    tmp = v[27] + v[31]
    out += [v[3], v[19] + tmp, v[11] + v[15], v[23] + tmp]
    tmp = v[31]
    out += [v[7], v[23] + tmp, v[15], tmp]
    return [to_int32(s) for s in out]


def _samples_low(v):
    """Outputs for samples 16 down to 1, in write order."""
    out = [v[1]]
    tmp = v[30] + v[25]
    out += [v[17] + tmp, v[14] + v[9], v[22] + tmp, v[6]]
    tmp = v[26] + v[30]
    out += [v[22] + tmp, v[10] + v[14], v[18] + tmp, v[2]]
    tmp = v[28] + v[26]
    out += [v[18] + tmp, v[12] + v[10], v[20] + tmp, v[4]]
    tmp = v[24] + v[28]
    out += [v[20] + tmp, v[8] + v[12], v[16] + tmp]
    return [to_int32(s) for s in out]


def fdct32(buf, dest, offset, odd_block, gb):
    """Transform 32 subband samples and scatter them into the polyphase buffer ``dest``.

    ``buf`` is left unchanged. Each output is written twice, eight slots apart.
    """
    if len(buf) != 32:
        raise ValueError(f"fdct32 needs 32 input samples, got {len(buf)}")

    v = [to_int32(x) for x in buf]
    es = 0
    if gb < 6:
        es = 6 - gb
        v = [x >> es for x in v]

    _first_pass(v)
    _second_pass(v)

    delayed = (offset - odd_block) & 7
    pos_zero = 64 * 16 + delayed + (0 if odd_block else VBUF_LENGTH)
    pos_high = offset + (VBUF_LENGTH if odd_block else 0)
    pos_low = 16 + delayed + (0 if odd_block else VBUF_LENGTH)

    placements = [(pos_zero, v[0])]
    placements += [(pos_high + 64 * k, s) for k, s in enumerate(_samples_high(v))]
    placements += [(pos_low + 64 * k, s) for k, s in enumerate(_samples_low(v))]

    for pos, s in placements:
        if es:
            s = to_int32(clip_2n(s, 31 - es) << es)
        dest[pos] = dest[pos + 8] = s