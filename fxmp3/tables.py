"""Read-only MPEG audio tables and the side-information record for one granule/channel."""

from dataclasses import dataclass, field
from enum import IntEnum

MAINBUF_SIZE = 1940
MAX_NGRAN = 2
MAX_NCHAN = 2
MAX_NSAMP = 576

BITS_PER_SLOT = (32, 8, 8)


class MPEGVersion(IntEnum):
    """MPEG audio version, numbered for table indexing."""

    MPEG1 = 0
    MPEG2 = 1
    MPEG25 = 2


@dataclass(frozen=True)
class SFBandTable:
    """Start bins of the scale-factor bands for long and short blocks."""

    long: tuple
    short: tuple


@dataclass
class SideInfoSub:
    """Side information for one granule of one channel."""

    part23_length: int = 0
    n_bigvals: int = 0
    global_gain: int = 0
    sf_compress: int = 0
    win_switch_flag: int = 0
    block_type: int = 0
    mixed_block: int = 0
    table_select: list = field(default_factory=lambda: [0, 0, 0])
    sub_block_gain: list = field(default_factory=lambda: [0, 0, 0])
    region0_count: int = 0
    region1_count: int = 0
    pre_flag: int = 0
    sfact_scale: int = 0
    count1_table_select: int = 0


_SAMPLE_RATES = (
    (44100, 48000, 32000),
    (22050, 24000, 16000),
    (11025, 12000, 8000),
)

_BITRATES = (
    (
        (0, 32, 64, 96, 128, 160, 192, 224, 256, 288, 320, 352, 384, 416, 448),
        (0, 32, 48, 56, 64, 80, 96, 112, 128, 160, 192, 224, 256, 320, 384),
        (0, 32, 40, 48, 56, 64, 80, 96, 112, 128, 160, 192, 224, 256, 320),
    ),
    (
        (0, 32, 48, 56, 64, 80, 96, 112, 128, 144, 160, 176, 192, 224, 256),
        (0, 8, 16, 24, 32, 40, 48, 56, 64, 80, 96, 112, 128, 144, 160),
        (0, 8, 16, 24, 32, 40, 48, 56, 64, 80, 96, 112, 128, 144, 160),
    ),
    (
        (0, 32, 48, 56, 64, 80, 96, 112, 128, 144, 160, 176, 192, 224, 256),
        (0, 8, 16, 24, 32, 40, 48, 56, 64, 80, 96, 112, 128, 144, 160),
        (0, 8, 16, 24, 32, 40, 48, 56, 64, 80, 96, 112, 128, 144, 160),
    ),
)

_SAMPLES_PER_FRAME = (
    (384, 1152, 1152),
    (384, 1152, 576),
    (384, 1152, 576),
)

_SIDE_BYTES = (
    (17, 32),
    (9, 17),
    (9, 17),
)

_SLOTS = (
    (
        (0, 104, 130, 156, 182, 208, 261, 313, 365, 417, 522, 626, 731, 835, 1044),
        (0, 96, 120, 144, 168, 192, 240, 288, 336, 384, 480, 576, 672, 768, 960),
        (0, 144, 180, 216, 252, 288, 360, 432, 504, 576, 720, 864, 1008, 1152, 1440),
    ),
    (
        (0, 26, 52, 78, 104, 130, 156, 182, 208, 261, 313, 365, 417, 470, 522),
        (0, 24, 48, 72, 96, 120, 144, 168, 192, 240, 288, 336, 384, 432, 480),
        (0, 36, 72, 108, 144, 180, 216, 252, 288, 360, 432, 504, 576, 648, 720),
    ),
    (
        (0, 52, 104, 156, 208, 261, 313, 365, 417, 522, 626, 731, 835, 940, 1044),
        (0, 48, 96, 144, 192, 240, 288, 336, 384, 480, 576, 672, 768, 864, 960),
        (0, 72, 144, 216, 288, 360, 432, 504, 576, 720, 864, 1008, 1152, 1296, 1440),
    ),
)

_MPEG2_LONG_A = (0, 6, 12, 18, 24, 30, 36, 44, 54, 66, 80, 96, 116, 140, 168,
                 200, 238, 284, 336, 396, 464, 522, 576)

_SF_BANDS = (
    (
        SFBandTable(
            (0, 4, 8, 12, 16, 20, 24, 30, 36, 44, 52, 62, 74, 90, 110, 134,
             162, 196, 238, 288, 342, 418, 576),
            (0, 4, 8, 12, 16, 22, 30, 40, 52, 66, 84, 106, 136, 192),
        ),
        SFBandTable(
            (0, 4, 8, 12, 16, 20, 24, 30, 36, 42, 50, 60, 72, 88, 106, 128,
             156, 190, 230, 276, 330, 384, 576),
            (0, 4, 8, 12, 16, 22, 28, 38, 50, 64, 80, 100, 126, 192),
        ),
        SFBandTable(
            (0, 4, 8, 12, 16, 20, 24, 30, 36, 44, 54, 66, 82, 102, 126, 156,
             194, 240, 296, 364, 448, 550, 576),
            (0, 4, 8, 12, 16, 22, 30, 42, 58, 78, 104, 138, 180, 192),
        ),
    ),
    (
        SFBandTable(
            _MPEG2_LONG_A,
            (0, 4, 8, 12, 18, 24, 32, 42, 56, 74, 100, 132, 174, 192),
        ),
        SFBandTable(
            (0, 6, 12, 18, 24, 30, 36, 44, 54, 66, 80, 96, 114, 136, 162, 194,
             232, 278, 332, 394, 464, 540, 576),
            (0, 4, 8, 12, 18, 26, 36, 48, 62, 80, 104, 136, 180, 192),
        ),
        SFBandTable(
            _MPEG2_LONG_A,
            (0, 4, 8, 12, 18, 26, 36, 48, 62, 80, 104, 134, 174, 192),
        ),
    ),
    (
        SFBandTable(
            _MPEG2_LONG_A,
            (0, 4, 8, 12, 18, 26, 36, 48, 62, 80, 104, 134, 174, 192),
        ),
        SFBandTable(
            _MPEG2_LONG_A,
            (0, 4, 8, 12, 18, 26, 36, 48, 62, 80, 104, 134, 174, 192),
        ),
        SFBandTable(
            (0, 12, 24, 36, 48, 60, 72, 88, 108, 132, 160, 192, 232, 280, 336,
             400, 476, 566, 568, 570, 572, 574, 576),
            (0, 8, 16, 24, 36, 52, 72, 96, 124, 160, 162, 164, 166, 192),
        ),
    ),
)


def _version(version):
    return int(MPEGVersion(version))


def _check_index(name, value, count):
    if not 0 <= value < count:
        raise ValueError(f"{name} must be in 0..{count - 1}, got {value}")
    return value


def _layer(layer):
    if not 1 <= layer <= 3:
        raise ValueError(f"layer must be 1, 2 or 3, got {layer}")
    return layer - 1


def sample_rate(version, index):
    """Sample rate in Hz for a version and sample-rate index."""
    return _SAMPLE_RATES[_version(version)][_check_index("sample rate index", index, 3)]


def bitrate_kbps(version, layer, index):
    """Bitrate in kbit/s; index 0 means free format."""
    return _BITRATES[_version(version)][_layer(layer)][_check_index("bitrate index", index, 15)]


def samples_per_frame(version, layer):
    """Samples per channel in one frame."""
    return _SAMPLES_PER_FRAME[_version(version)][_layer(layer)]


def side_info_bytes(version, n_chans):
    """Bytes of side information in a layer 3 frame."""
    if n_chans not in (1, 2):
        raise ValueError(f"channel count must be 1 or 2, got {n_chans}")
    return _SIDE_BYTES[_version(version)][n_chans - 1]


def slot_count(version, sample_rate_index, bitrate_index):
    """Layer 3 frame size in bytes, without the padding byte."""
    v = _version(version)
    s = _check_index("sample rate index", sample_rate_index, 3)
    b = _check_index("bitrate index", bitrate_index, 15)
    return _SLOTS[v][s][b]


def sf_band_table(version, sample_rate_index):
    """Scale-factor band boundaries for a version and sample-rate index."""
    v = _version(version)
    return _SF_BANDS[v][_check_index("sample rate index", sample_rate_index, 3)]