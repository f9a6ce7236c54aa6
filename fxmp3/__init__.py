"""Fixed-point MPEG audio layer III building blocks: tables, Huffman decoding, dequantization, DCT and polyphase filtering."""

__version__ = "0.1.0"

__all__ = [
    "dct32",
    "dequant",
    "fixedpoint",
    "frame",
    "huffman",
    "hufftab_high",
    "hufftab_low",
    "polyphase",
    "tables",
]