"""Signed 32-bit fixed-point primitives used throughout the decoder."""

_MASK32 = 0xFFFFFFFF
_SIGN32 = 0x80000000


def to_int32(x):
    """Wrap an integer to the signed 32-bit range, as two's complement does."""
    x &= _MASK32
    return x - (1 << 32) if x & _SIGN32 else x


def mulshift32(a, b):
    """Return the high 32 bits of the 64-bit product of two signed 32-bit values."""
    return (to_int32(a) * to_int32(b)) >> 32


def clz(x):
    """Count leading zero bits in the 32-bit representation of ``x``."""
    return 32 - (x & _MASK32).bit_length()


def clip_2n(x, n):
    """Clip ``x`` to the range [-2**n, 2**n - 1]."""
    if not 0 <= n <= 31:
        raise ValueError(f"clip width must be in 0..31, got {n}")
    x = to_int32(x)
    low = -(1 << n)
    high = (1 << n) - 1
    return min(max(x, low), high)


def fastabs(x):
    """Absolute value with 32-bit wraparound (the most negative value maps to itself)."""
    return to_int32(abs(to_int32(x)))