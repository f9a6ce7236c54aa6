# fxmp3

Building blocks for a fixed-point MPEG-1/2/2.5 Layer III (MP3) decoder, in
pure Python with no dependencies beyond the standard library. The arithmetic
follows 32-bit two's-complement integer rules (`to_int32`, `mulshift32`), so
the stages compute the same integers a fixed-point decoder would.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

- `fxmp3.fixedpoint`: 32-bit integer helpers. `to_int32` wraps to the signed
  32-bit range, `mulshift32` returns the high 32 bits of a 64-bit product,
  `clz` counts leading zeros, `clip_2n` clips to `[-2**n, 2**n - 1]` and
  `fastabs` takes an absolute value with 32-bit wraparound.
- `fxmp3.tables`: MPEG audio tables. `sample_rate`, `bitrate_kbps`,
  `samples_per_frame`, `side_info_bytes`, `slot_count` and `sf_band_table`
  look values up and raise `ValueError` for out-of-range indices. It also
  defines `MPEGVersion`, `SFBandTable` (band starts in `long` and `short`) and
  `SideInfoSub`, the side information of one granule and channel, along with
  the constants `MAINBUF_SIZE`, `MAX_NGRAN`, `MAX_NCHAN` and `MAX_NSAMP`.
- `fxmp3.frame`: `find_sync_word` returns the offset of the first sync word or
  -1; `find_free_sync` measures a free-format frame by finding the next
  matching header; `free_bitrate` turns that size into bits per second;
  `frame_info` builds a `FrameInfo` (all zeros for anything but layer 3);
  `MainDataBuffer` is the bit reservoir, with `fill` and `reset`. Failures are
  raised as `MP3Error`, which carries an `ErrorCode`.
- `fxmp3.hufftab_low` and `fxmp3.hufftab_high`: the Huffman code tables.
  `low_table(n)` gives pair tables 1, 2, 3 and 5 to 13; `pair_table(i)` gives a
  `HuffTabLookup` (linbits, `HuffTabType` and entries) for table index 0 to 31;
  `quad_table(i)` gives count1 table A (0) or B (1).
- `fxmp3.huffman`: `decode_pairs` and `decode_quads` decode the big-values and
  count1 regions; `decode_huffman` decodes a whole granule of one channel into
  a `HuffmanResult` (576 signed values, the non-zero bound and the bitstream
  position after the block).
- `fxmp3.dequant`: `dequant_block` computes `sign(x) * |x|**(4/3)` scaled by a
  power of two in fixed point and returns the outputs with an OR mask;
  `dequant_channel` dequantizes one granule of one channel, interleaves the
  three windows of short blocks and returns a `DequantResult` with a
  `CriticalBandInfo`. Scale factors are passed as a `ScaleFactorInfoSub`.
- `fxmp3.dct32`: `fdct32` runs the 32-point DCT on 32 subband samples and
  writes the results, each twice, into a caller-supplied polyphase buffer.
  The input list is left unchanged.
- `fxmp3.polyphase`: `clip_to_short` saturates to 16 bits; `polyphase_mono`
  returns 32 PCM samples and `polyphase_stereo` returns 64 interleaved
  left/right samples from a polyphase buffer and a caller-supplied list of at
  least 264 filter coefficients.

## Example

```python
from fxmp3.frame import ErrorCode, MP3Error, find_free_sync, find_sync_word
from fxmp3.tables import MPEGVersion, bitrate_kbps, sample_rate

data = bytes([0x00, 0x00, 0xFF, 0xFB, 0x90, 0x64])
print(find_sync_word(data))                   # 2
print(sample_rate(MPEGVersion.MPEG1, 0))      # 44100
print(bitrate_kbps(MPEGVersion.MPEG1, 3, 9))  # 128

try:
    find_free_sync(b"\x00" * 16, data[2:6])
except MP3Error as err:
    print(err.code is ErrorCode.FREE_BITRATE_SYNC)  # True
```

## What the package does not do

There is no decoder that turns an MP3 file or byte stream into PCM from start
to end, and no command-line program. The package has no frame-header or
side-information parser, no scale-factor unpacking, no mid-side or intensity
stereo processing, no alias reduction or IMDCT, and it ships no polyphase
filter coefficient table: `polyphase_mono` and `polyphase_stereo` use the
coefficients they are given. The stages above are meant to be called on data
the caller has already prepared.