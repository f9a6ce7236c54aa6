"""Frame-level helpers: sync search, free-format sizing, frame info and the bit reservoir."""

from dataclasses import dataclass
from enum import IntEnum

from fxmp3.tables import MAINBUF_SIZE, samples_per_frame

_SYNC_HIGH = 0xFF
_SYNC_LOW = 0xE0
_BITS_PER_SAMPLE = 16


class ErrorCode(IntEnum):
    """Decoder error codes; zero means success."""

    NONE = 0
    INDATA_UNDERFLOW = -1
    MAINDATA_UNDERFLOW = -2
    FREE_BITRATE_SYNC = -3
    OUT_OF_MEMORY = -4
    NULL_POINTER = -5
    INVALID_FRAMEHEADER = -6
    INVALID_SIDEINFO = -7
    INVALID_SCALEFACT = -8
    INVALID_HUFFCODES = -9
    INVALID_DEQUANTIZE = -10
    INVALID_IMDCT = -11
    INVALID_SUBBAND = -12
    UNKNOWN = -9999


class MP3Error(Exception):
    """A decoding failure, carrying the matching :class:`ErrorCode`."""

    def __init__(self, code, message=None):
        self.code = ErrorCode(code)
        super().__init__(message or self.code.name.lower().replace("_", " "))

    def __int__(self):
        return int(self.code)


@dataclass(frozen=True)
class FrameInfo:
    """Summary of a decoded (or about to be decoded) frame."""

    bitrate: int = 0
    n_chans: int = 0
    sample_rate: int = 0
    bits_per_sample: int = 0
    output_samps: int = 0
    layer: int = 0
    version: int = 0


def find_sync_word(buf):
    """Offset of the first byte-aligned sync word in ``buf``, or -1 if there is none.

    Eleven set bits are required, which covers MPEG 1, 2 and 2.5.
    """
    for i in range(len(buf) - 1):
        if (buf[i] & _SYNC_HIGH) == _SYNC_HIGH and (buf[i + 1] & _SYNC_LOW) == _SYNC_LOW:
            return i
    return -1


def find_free_sync(buf, first_header):
    """Bytes from the start of ``buf`` to the next matching frame header, less any pad byte.

    The next header must agree with ``first_header`` in sync word, version, layer,
    CRC flag, bitrate and sample rate. Raises :class:`MP3Error` when none is found.
    """
    if len(first_header) < 3:
        raise ValueError("frame header needs at least 3 bytes")
    pad = (first_header[2] >> 1) & 0x01
    pos = 0
    while True:
        offset = find_sync_word(buf[pos:])
        if offset < 0:
            break
        pos += offset
        if pos + 2 >= len(buf):
            break
        if (
            buf[pos] == first_header[0]
            and buf[pos + 1] == first_header[1]
            and (buf[pos + 2] & 0xFC) == (first_header[2] & 0xFC)
        ):
            return pos - pad
        pos += 3
    raise MP3Error(ErrorCode.FREE_BITRATE_SYNC, "no following frame header in free-format stream")


def free_bitrate(frame_bytes, sample_rate, n_grans, n_gran_samps):
    """Bitrate in bit/s implied by a free-format frame size."""
    samples = n_grans * n_gran_samps
    if samples <= 0:
        raise ValueError("frame must hold at least one sample")
    return (frame_bytes * sample_rate * 8) // samples


def frame_info(version, layer, bitrate, n_chans, sample_rate):
    """Frame information as reported to callers; anything other than layer 3 reports zeros."""
    if layer != 3:
        return FrameInfo()
    return FrameInfo(
        bitrate=bitrate,
        n_chans=n_chans,
        sample_rate=sample_rate,
        bits_per_sample=_BITS_PER_SAMPLE,
        output_samps=n_chans * samples_per_frame(version, layer),
        layer=layer,
        version=int(version),
    )


class MainDataBuffer:
    """The bit reservoir: main data carried over from earlier frames plus the current frame's."""

    def __init__(self):
        self._data = bytearray()

    def __len__(self):
        return len(self._data)

    @property
    def main_data_bytes(self):
        """Number of bytes currently held."""
        return len(self._data)

    def reset(self):
        """Discard all held main data."""
        self._data.clear()

    def fill(self, data, main_data_begin, n_slots):
        """Append ``n_slots`` bytes of ``data`` behind ``main_data_begin`` reservoir bytes.

        Returns the main data for this frame. Raises :class:`MP3Error` with
        ``INDATA_UNDERFLOW`` if ``data`` is too short (nothing is consumed), or with
        ``MAINDATA_UNDERFLOW`` if the reservoir lacks the requested history (the new
        bytes are still stored for the next frame).
        """
        if n_slots < 0 or main_data_begin < 0:
            raise ValueError("slot count and main data offset must not be negative")
        if n_slots > len(data):
            raise MP3Error(ErrorCode.INDATA_UNDERFLOW)
        chunk = bytes(data[:n_slots])
        if len(self._data) >= main_data_begin:
            kept = self._data[len(self._data) - main_data_begin:] if main_data_begin else bytearray()
            if len(kept) + len(chunk) > MAINBUF_SIZE:
                raise MP3Error(ErrorCode.INVALID_FRAMEHEADER, "main data exceeds buffer size")
            self._data = bytearray(kept) + chunk
            return bytes(self._data)
        if len(self._data) + len(chunk) > MAINBUF_SIZE:
            self._data = self._data[len(self._data) + len(chunk) - MAINBUF_SIZE:]
        self._data += chunk
        raise MP3Error(ErrorCode.MAINDATA_UNDERFLOW)