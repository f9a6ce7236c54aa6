"""Polyphase synthesis filter: the final stage of the subband transform."""

from fxmp3.fixedpoint import to_int32

DQ_FRACBITS_OUT = 25
# Input is Q(DQ_FRACBITS_OUT - 2); the convolution gains 2 bits and a 2**15 bias is implicit.
DEF_NFRACBITS = DQ_FRACBITS_OUT - 2 - 2 - 15
# Coefficients carry 12 leading sign bits.
CSHIFT = 12

COEF_LENGTH = 264
MONO_VBUF_LENGTH = 64 * 16 + 8
STEREO_VBUF_LENGTH = 64 * 16 + 32 + 8

_ROUND = 1 << (DEF_NFRACBITS - 1 + (32 - CSHIFT))
_MASK64 = (1 << 64) - 1


def _to_int64(x):
    x &= _MASK64
    return x - (1 << 64) if x >> 63 else x


def clip_to_short(x, frac_bits):
    """Shift out ``frac_bits`` fraction bits and saturate to [-32768, 32767]."""
    if not 0 <= frac_bits <= 31:
        raise ValueError(f"fraction bits must be in 0..31, got {frac_bits}")
    x = to_int32(x) >> frac_bits
    sign = x >> 31
    if sign != (x >> 15):
        x = sign ^ ((1 << 15) - 1)
    return x


def _finish(acc):
    return clip_to_short(to_int32(_to_int64(acc) >> (32 - CSHIFT)), DEF_NFRACBITS)


def _check(vbuf, coef, vbuf_length):
    if len(coef) < COEF_LENGTH:
        raise ValueError(f"need at least {COEF_LENGTH} coefficients, got {len(coef)}")
    if len(vbuf) < vbuf_length:
        raise ValueError(f"need at least {vbuf_length} vbuf samples, got {len(vbuf)}")


def _channel(vbuf, coef, base):
    """32 PCM samples for the channel whose vbuf data starts at ``base``."""
    out = [0] * 32

    acc = _ROUND
    for x in range(8):
        c1, c2 = coef[2 * x], coef[2 * x + 1]
        acc += vbuf[base + x] * c1 + vbuf[base + 23 - x] * to_int32(-c2)
    out[0] = _finish(acc)

    acc = _ROUND
    vb = base + 64 * 16
    for x in range(8):
        acc += vbuf[vb + x] * coef[256 + x]
    out[16] = _finish(acc)

    for k in range(15):
        vb = base + 64 * (k + 1)
        cb = 16 + 16 * k
        sum1 = sum2 = _ROUND
        for x in range(8):
            c1, c2 = coef[cb + 2 * x], coef[cb + 2 * x + 1]
            lo, hi = vbuf[vb + x], vbuf[vb + 23 - x]
            sum1 += lo * c1 + hi * to_int32(-c2)
            sum2 += lo * c2 + hi * c1
        out[1 + k] = _finish(sum1)
        out[31 - k] = _finish(sum2)
    return out


def polyphase_mono(vbuf, coef):
    """Filter one subband block into 32 PCM samples for one channel."""
    _check(vbuf, coef, MONO_VBUF_LENGTH)
    return _channel(vbuf, coef, 0)


def polyphase_stereo(vbuf, coef):
    """Filter one subband block into 64 PCM samples, interleaved left/right."""
    _check(vbuf, coef, STEREO_VBUF_LENGTH)
    left = _channel(vbuf, coef, 0)
    right = _channel(vbuf, coef, 32)
    return [s for pair in zip(left, right) for s in pair]