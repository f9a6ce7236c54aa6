"""Huffman pair tables 15, 16 and 24, the per-index table lookup and the quad tables.

Pair-table words use the same 0xABCD layout as the low tables: A is the
codeword length, B the y value, C the x value and D the number of sign bits.
A word with top nibble 0xF heads a (sub)table and gives its lookup width in
D. A word with top nibble 0 jumps to the subtable at that offset from the
current subtable's header.

Quad-table bytes are 0xAB: A is the codeword length, and the four low bits of
B are the v, w, x and y values, from bit 3 down to bit 0.
"""

from dataclasses import dataclass
from enum import Enum

from fxmp3.hufftab_low import low_table

HUFF_PAIRTABS = 32

# Tables are written as runs: a bare int is one entry, (value, count) repeats it.
_SPECS = {
    15: (
        0xF008, 0x0101, 0x0122, 0x0143, 0x0154, 0x0165, 0x0176, 0x017F,
        0x0188, 0x0199, 0x01A2, 0x01AB, 0x01B4, 0x01BD, 0x01C2, 0x01CB,
        0x01D4, 0x01D9, 0x01DE, 0x01E3, 0x01E8, 0x01ED, 0x01F2, 0x01F7,
        0x01FC, 0x0201, 0x0204, 0x0207, 0x020A, 0x020F, 0x0212, 0x0215,
        0x021A, 0x021D, 0x0220, 0x8192, 0x0223, 0x0226, 0x0229, 0x022C,
        0x022F, 0x8822, 0x8282, 0x8812, 0x8182, 0x0232, 0x0235, 0x0238,
        0x023B, 0x8722, 0x8272, 0x8462, 0x8712, 0x8552, 0x8172, 0x023E,
        0x8632, 0x8362, 0x8542, 0x8452, 0x8622, 0x8262, 0x8612, 0x0241,
        0x8532, (0x7162, 2), 0x8352, 0x8442, (0x7522, 2), (0x7252, 2),
        (0x7512, 2), (0x7152, 2), 0x8501, 0x8051, (0x7432, 2), (0x7342, 2),
        (0x7422, 2), (0x7242, 2), (0x7332, 2), (0x6142, 4), (0x7412, 2),
        (0x7401, 2), (0x6322, 4), (0x6232, 4), (0x7041, 2), (0x7301, 2),
        (0x6312, 4), (0x6132, 4), (0x6031, 4), (0x5222, 8), (0x5212, 8),
        (0x5122, 8), (0x5201, 8), (0x5021, 8), (0x3112, 32), (0x4101, 16),
        (0x4011, 16), (0x3000, 32),

        0xF005, 0x5FF2, 0x5FE2, 0x5EF2, 0x5FD2, (0x4EE2, 2), 0x5DF2, 0x5FC2,
        0x5CF2, 0x5ED2, 0x5DE2, 0x5FB2, (0x4BF2, 2), 0x5EC2, 0x5CE2,
        (0x4DD2, 2), (0x4FA2, 2), (0x4AF2, 2), (0x4EB2, 2), (0x4BE2, 2),
        (0x4DC2, 2), (0x4CD2, 2), (0x4F92, 2),
        0xF005, (0x49F2, 2), (0x4AE2, 2), (0x4DB2, 2), (0x4BD2, 2),
        (0x4F82, 2), (0x48F2, 2), (0x4CC2, 2), (0x4E92, 2), (0x49E2, 2),
        (0x4F72, 2), (0x47F2, 2), (0x4DA2, 2), (0x4AD2, 2), (0x4CB2, 2),
        (0x4F62, 2), 0x5EA2, 0x5F01,
        0xF004, (0x3BC2, 2), (0x36F2, 2), 0x4E82, 0x48E2, 0x4F52, 0x4D92,
        (0x35F2, 2), (0x3E72, 2), (0x37E2, 2), (0x3CA2, 2),
        0xF004, (0x3AC2, 2), (0x3BB2, 2), 0x49D2, 0x4D82, (0x3F42, 2),
        (0x34F2, 2), (0x3F32, 2), (0x33F2, 2), (0x38D2, 2),
        0xF004, (0x36E2, 2), (0x3F22, 2), (0x32F2, 2), 0x4E62, 0x40F1,
        (0x3F12, 2), (0x31F2, 2), (0x3C92, 2), (0x39C2, 2),
        0xF003, 0x3E52, 0x3BA2, 0x3AB2, 0x35E2, 0x3D72, 0x37D2, 0x3E42, 0x34E2,
        0xF003, 0x3C82, 0x38C2, 0x3E32, 0x3D62, 0x36D2, 0x33E2, 0x3B92, 0x39B2,
        0xF004, (0x3E22, 2), (0x3AA2, 2), (0x32E2, 2), (0x3E12, 2),
        (0x31E2, 2), 0x4E01, 0x40E1, (0x3D52, 2), (0x35D2, 2),
        0xF003, 0x3C72, 0x37C2, 0x3D42, 0x3B82, (0x24D2, 2), 0x38B2, 0x3A92,
        0xF003, 0x39A2, 0x3C62, 0x36C2, 0x3D32, (0x23D2, 2), (0x22D2, 2),
        0xF003, 0x3D22, 0x3D01, (0x2D12, 2), (0x2B72, 2), (0x27B2, 2),
        0xF003, (0x21D2, 2), 0x3C52, 0x30D1, (0x25C2, 2), (0x2A82, 2),
        0xF002, 0x28A2, 0x2C42, 0x24C2, 0x2B62,
        0xF003, (0x26B2, 2), 0x3992, 0x3C01, (0x2C32, 2), (0x23C2, 2),
        0xF003, (0x2A72, 2), (0x27A2, 2), (0x26A2, 2), 0x30C1, 0x3B01,
        0xF002, (0x12C2, 2), 0x2C22, 0x2B52,
        0xF002, 0x25B2, 0x2C12, 0x2982, 0x2892,
        0xF002, 0x21C2, 0x2B42, 0x24B2, 0x2A62,
        0xF002, 0x2B32, 0x2972, (0x13B2, 2),
        0xF002, 0x2792, 0x2882, 0x2B22, 0x2A52,
        0xF002, (0x12B2, 2), 0x25A2, 0x2B12,
        0xF002, (0x11B2, 2), 0x20B1, 0x2962,
        0xF002, 0x2692, 0x2A42, 0x24A2, 0x2872,
        0xF002, 0x2782, 0x2A32, (0x13A2, 2),
        0xF001, 0x1952, 0x1592,
        0xF001, 0x1A22, 0x12A2,
        0xF001, 0x1A12, 0x11A2,
        0xF002, 0x2A01, 0x20A1, (0x1862, 2),
        0xF001, 0x1682, 0x1942,
        0xF001, 0x1492, 0x1932,
        0xF002, (0x1392, 2), 0x2772, 0x2901,
        0xF001, 0x1852, 0x1582,
        0xF001, 0x1922, 0x1762,
        0xF001, 0x1672, 0x1292,
        0xF001, 0x1912, 0x1091,
        0xF001, 0x1842, 0x1482,
        0xF001, 0x1752, 0x1572,
        0xF001, 0x1832, 0x1382,
        0xF001, 0x1662, 0x1742,
        0xF001, 0x1472, 0x1801,
        0xF001, 0x1081, 0x1652,
        0xF001, 0x1562, 0x1732,
        0xF001, 0x1372, 0x1642,
        0xF001, 0x1701, 0x1071,
        0xF001, 0x1601, 0x1061,
    ),
    16: (
        0xF008, 0x0101, 0x010A, 0x0113, 0x8FF2, 0x0118, 0x011D, 0x0120,
        0x82F2, 0x0131, 0x8F12, 0x81F2, 0x0134, 0x0145, 0x0156, 0x0167,
        0x0178, 0x0189, 0x019A, 0x01A3, 0x01AC, 0x01B5, 0x01BE, 0x01C7,
        0x01D0, 0x01D9, 0x01DE, 0x01E3, 0x01E6, 0x01EB, 0x01F0, 0x8152,
        0x01F3, 0x01F6, 0x01F9, 0x01FC, 0x8412, 0x8142, 0x01FF, 0x8322,
        0x8232, (0x7312, 2), (0x7132, 2), 0x8301, 0x8031, (0x7222, 2),
        (0x6212, 4), (0x6122, 4), (0x6201, 4), (0x6021, 4), (0x4112, 16),
        (0x4101, 16), (0x3011, 32), (0x1000, 128),

        0xF003, 0x3FE2, 0x3EF2, 0x3FD2, 0x3DF2, 0x3FC2, 0x3CF2, 0x3FB2, 0x3BF2,
        0xF003, (0x2FA2, 2), 0x3AF2, 0x3F92, 0x39F2, 0x38F2, (0x2F82, 2),
        0xF002, 0x2F72, 0x27F2, 0x2F62, 0x26F2,
        0xF002, 0x2F52, 0x25F2, (0x1F42, 2),
        0xF001, 0x14F2, 0x13F2,
        0xF004, (0x10F1, 8), (0x2F32, 4), 0x00E2, 0x00F3, 0x00FC, 0x0105,
        0xF001, 0x1F22, 0x1F01,
        0xF004, 0x00FA, 0x00FF, 0x0104, 0x0109, 0x010C, 0x0111, 0x0116,
        0x0119, 0x011E, 0x0123, 0x0128, 0x43E2, 0x012D, 0x0130, 0x0133,
        0x0136,
        0xF004, 0x0128, 0x012B, 0x012E, 0x4D01, 0x0131, 0x0134, 0x0137,
        0x4C32, 0x013A, 0x4C12, 0x40C1, 0x013D, (0x32E2, 2), 0x4E22, 0x4E12,
        0xF004, 0x43D2, 0x4D22, 0x42D2, 0x41D2, 0x4B32, 0x012F, (0x3D12, 2),
        0x44C2, 0x4B62, 0x43C2, 0x47A2, (0x3C22, 2), 0x42C2, 0x45B2,
        0xF004, 0x41C2, 0x4C01, 0x4B42, 0x44B2, 0x4A62, 0x46A2, (0x33B2, 2),
        0x4A52, 0x45A2, (0x3B22, 2), (0x32B2, 2), (0x3B12, 2),
        0xF004, (0x31B2, 2), 0x4B01, 0x40B1, 0x4962, 0x4692, 0x4A42, 0x44A2,
        0x4872, 0x4782, (0x33A2, 2), 0x4A32, 0x4952, (0x3A22, 2),
        0xF004, 0x4592, 0x4862, (0x31A2, 2), 0x4682, 0x4772, (0x3492, 2),
        0x4942, 0x4752, (0x3762, 2), (0x22A2, 4),
        0xF003, (0x2A12, 2), 0x3A01, 0x30A1, 0x3932, 0x3392, 0x3852, 0x3582,
        0xF003, (0x2922, 2), (0x2292, 2), 0x3672, 0x3901, (0x2912, 2),
        0xF003, (0x2192, 2), 0x3091, 0x3842, 0x3482, 0x3572, 0x3832, 0x3382,
        0xF003, 0x3662, 0x3822, (0x2282, 2), 0x3742, 0x3472, (0x2812, 2),
        0xF003, (0x2182, 2), (0x2081, 2), 0x3801, 0x3652, (0x2732, 2),
        0xF003, (0x2372, 2), 0x3562, 0x3642, (0x2722, 2), (0x2272, 2),
        0xF003, 0x3462, 0x3552, (0x2701, 2), (0x1712, 4),
        0xF002, (0x1172, 2), 0x2071, 0x2632,
        0xF002, 0x2362, 0x2542, 0x2452, 0x2622,
        0xF001, 0x1262, 0x1612,
        0xF002, (0x1162, 2), 0x2601, 0x2061,
        0xF002, (0x1352, 2), 0x2532, 0x2442,
        0xF001, 0x1522, 0x1252,
        0xF001, 0x1512, 0x1501,
        0xF001, 0x1432, 0x1342,
        0xF001, 0x1051, 0x1422,
        0xF001, 0x1242, 0x1332,
        0xF001, 0x1401, 0x1041,
        0xF004, 0x4EC2, 0x0086, (0x3ED2, 2), (0x39E2, 2), 0x4AE2, 0x49D2,
        (0x2EE2, 4), (0x3DE2, 2), (0x3BE2, 2),
        0xF003, (0x2EB2, 2), (0x2DC2, 2), 0x3CD2, 0x3BD2, (0x2EA2, 2),
        0xF003, (0x2CC2, 2), 0x3DA2, 0x3AD2, 0x3E72, 0x3CA2, (0x2AC2, 2),
        0xF003, 0x39C2, 0x3D72, (0x2E52, 2), (0x1DB2, 4),
        0xF002, (0x1E92, 2), 0x2CB2, 0x2BC2,
        0xF002, 0x2E82, 0x28E2, 0x2D92, 0x27E2,
        0xF002, 0x2BB2, 0x2D82, 0x28D2, 0x2E62,
        0xF001, 0x16E2, 0x1C92,
        0xF002, 0x2BA2, 0x2AB2, 0x25E2, 0x27D2,
        0xF002, (0x1E42, 2), 0x24E2, 0x2C82,
        0xF001, 0x18C2, 0x1E32,
        0xF002, (0x1D62, 2), 0x26D2, 0x2B92,
        0xF002, 0x29B2, 0x2AA2, (0x11E2, 2),
        0xF002, (0x14D2, 2), 0x28B2, 0x29A2,
        0xF002, (0x1B72, 2), 0x27B2, 0x20D1,
        0xF001, 0x1E01, 0x10E1,
        0xF001, 0x1D52, 0x15D2,
        0xF001, 0x1C72, 0x17C2,
        0xF001, 0x1D42, 0x1B82,
        0xF001, 0x1A92, 0x1C62,
        0xF001, 0x16C2, 0x1D32,
        0xF001, 0x1C52, 0x15C2,
        0xF001, 0x1A82, 0x18A2,
        0xF001, 0x1992, 0x1C42,
        0xF001, 0x16B2, 0x1A72,
        0xF001, 0x1B52, 0x1982,
        0xF001, 0x1892, 0x1972,
        0xF001, 0x1792, 0x1882,
        0xF001, 0x1CE2, 0x1DD2,
    ),
    24: (
        0xF009, (0x8FE2, 2), (0x8EF2, 2), (0x8FD2, 2), (0x8DF2, 2),
        (0x8FC2, 2), (0x8CF2, 2), (0x8FB2, 2), (0x8BF2, 2), (0x7AF2, 4),
        (0x8FA2, 2), (0x8F92, 2), (0x79F2, 4), (0x78F2, 4), (0x8F82, 2),
        (0x8F72, 2), (0x77F2, 4), (0x7F62, 4), (0x76F2, 4), (0x7F52, 4),
        (0x75F2, 4), (0x7F42, 4), (0x74F2, 4), (0x7F32, 4), (0x73F2, 4),
        (0x7F22, 4), (0x72F2, 4), (0x71F2, 4), (0x8F12, 2), (0x80F1, 2),
        0x9F01, 0x0201, 0x0206, 0x020B, 0x0210, 0x0215, 0x021A, 0x021F,
        (0x4FF2, 32),
        0x0224, 0x0229, 0x0232, 0x0237, 0x023A, 0x023F, 0x0242, 0x0245,
        0x024A, 0x024D, 0x0250, 0x0253, 0x0256, 0x0259, 0x025C, 0x025F,
        0x0262, 0x0265, 0x0268, 0x026B, 0x026E, 0x0271, 0x0274, 0x0277,
        0x027A, 0x027D, 0x0280, 0x0283, 0x0288, 0x028B, 0x028E, 0x0291,
        0x0294, 0x0297, 0x029A, 0x029F, 0x94B2, 0x02A4, 0x02A7, 0x02AA,
        0x93B2, 0x9882, 0x02AF, 0x92B2, 0x02B2, 0x02B5, 0x9692, 0x94A2,
        0x02B8, 0x9782, 0x9A32, 0x93A2, 0x9952, 0x9592, 0x9A22, 0x92A2,
        0x91A2, 0x9862, 0x9682, 0x9772, 0x9942, 0x9492, 0x9932, 0x9392,
        0x9852, 0x9582, 0x9922, 0x9762, 0x9672, 0x9292, 0x9912, 0x9192,
        0x9842, 0x9482, 0x9752, 0x9572, 0x9832, 0x9382, 0x9662, 0x9822,
        0x9282, 0x9812, 0x9742, 0x9472, 0x9182, 0x02BB, 0x9652, 0x9562,
        0x9712, 0x02BE, (0x8372, 2), 0x9732, 0x9722, (0x8272, 2),
        (0x8642, 2), (0x8462, 2), (0x8552, 2), (0x8172, 2), (0x8632, 2),
        (0x8362, 2), (0x8542, 2), (0x8452, 2), (0x8622, 2), (0x8262, 2),
        (0x8612, 2), (0x8162, 2), 0x9601, 0x9061, (0x8532, 2), (0x8352, 2),
        (0x8442, 2), (0x8522, 2), (0x8252, 2), (0x8512, 2), 0x9501, 0x9051,
        (0x7152, 4), (0x8432, 2), (0x8342, 2), (0x7422, 4), (0x7242, 4),
        (0x7332, 4), (0x7412, 4), (0x7142, 4), (0x8401, 2), (0x8041, 2),
        (0x7322, 4), (0x7232, 4), (0x6312, 8), (0x6132, 8), (0x7301, 4),
        (0x7031, 4), (0x6222, 8), (0x5212, 16), (0x5122, 16), (0x6201, 8),
        (0x6021, 8), (0x4112, 32), (0x4101, 32), (0x4011, 32), (0x4000, 32),

        0xF002, 0x2EE2, 0x2ED2, 0x2DE2, 0x2EC2,
        0xF002, 0x2CE2, 0x2DD2, 0x2EB2, 0x2BE2,
        0xF002, 0x2DC2, 0x2CD2, 0x2EA2, 0x2AE2,
        0xF002, 0x2DB2, 0x2BD2, 0x2CC2, 0x2E92,
        0xF002, 0x29E2, 0x2DA2, 0x2AD2, 0x2CB2,
        0xF002, 0x2BC2, 0x2E82, 0x28E2, 0x2D92,
        0xF002, 0x29D2, 0x2E72, 0x27E2, 0x2CA2,
        0xF002, 0x2AC2, 0x2BB2, 0x2D82, 0x28D2,
        0xF003, 0x3E01, 0x30E1, (0x2D01, 2), (0x16E2, 4),
        0xF002, 0x2E62, 0x2C92, (0x19C2, 2),
        0xF001, 0x1E52, 0x1AB2,
        0xF002, (0x15E2, 2), 0x2BA2, 0x2D72,
        0xF001, 0x17D2, 0x14E2,
        0xF001, 0x1C82, 0x18C2,
        0xF002, 0x2E42, 0x2E22, (0x1E32, 2),
        0xF001, 0x1D62, 0x16D2,
        0xF001, 0x13E2, 0x1B92,
        0xF001, 0x19B2, 0x1AA2,
        0xF001, 0x12E2, 0x1E12,
        0xF001, 0x11E2, 0x1D52,
        0xF001, 0x15D2, 0x1C72,
        0xF001, 0x17C2, 0x1D42,
        0xF001, 0x1B82, 0x18B2,
        0xF001, 0x14D2, 0x1A92,
        0xF001, 0x19A2, 0x1C62,
        0xF001, 0x16C2, 0x1D32,
        0xF001, 0x13D2, 0x1D22,
        0xF001, 0x12D2, 0x1D12,
        0xF001, 0x1B72, 0x17B2,
        0xF001, 0x11D2, 0x1C52,
        0xF001, 0x15C2, 0x1A82,
        0xF001, 0x18A2, 0x1992,
        0xF001, 0x1C42, 0x14C2,
        0xF001, 0x1B62, 0x16B2,
        0xF002, 0x20D1, 0x2C01, (0x1C32, 2),
        0xF001, 0x13C2, 0x1A72,
        0xF001, 0x17A2, 0x1C22,
        0xF001, 0x12C2, 0x1B52,
        0xF001, 0x15B2, 0x1C12,
        0xF001, 0x1982, 0x1892,
        0xF001, 0x11C2, 0x1B42,
        0xF002, 0x20C1, 0x2B01, (0x1B32, 2),
        0xF002, 0x20B1, 0x2A01, (0x1A12, 2),
        0xF001, 0x1A62, 0x16A2,
        0xF001, 0x1972, 0x1792,
        0xF002, 0x20A1, 0x2901, (0x1091, 2),
        0xF001, 0x1B22, 0x1A52,
        0xF001, 0x15A2, 0x1B12,
        0xF001, 0x11B2, 0x1962,
        0xF001, 0x1A42, 0x1872,
        0xF001, 0x1801, 0x1081,
        0xF001, 0x1701, 0x1071,
    ),
}

_QUAD_SPECS = (
    (
        0x6B, 0x6F, 0x6D, 0x6E, 0x67, 0x65, (0x59, 2), (0x56, 2), (0x53, 2),
        (0x5A, 2), (0x5C, 2), (0x42, 4), (0x41, 4), (0x44, 4), (0x48, 4),
        (0x10, 32),
    ),
    tuple(range(0x4F, 0x3F, -1)),
)

QUAD_TABLE_MAX_BITS = (6, 4)


def _expand(spec):
    words = []
    for item in spec:
        if isinstance(item, tuple):
            value, count = item
            words.extend([value] * count)
        else:
            words.append(item)
    return tuple(words)


_HIGH_TABLES = {number: _expand(spec) for number, spec in _SPECS.items()}
_QUAD_TABLES = tuple(_expand(spec) for spec in _QUAD_SPECS)


class HuffTabType(Enum):
    """How a pair table is decoded."""

    NO_BITS = "no_bits"
    ONE_SHOT = "one_shot"
    LOOP_NO_LINBITS = "loop_no_linbits"
    LOOP_LINBITS = "loop_linbits"
    INVALID_TAB = "invalid_tab"


@dataclass(frozen=True)
class HuffTabLookup:
    """Decoding details for one pair-table index: escape bits, kind and entries."""

    linbits: int
    tab_type: HuffTabType
    table: tuple = ()


def _table_entries(number):
    if number is None:
        return ()
    if number in _HIGH_TABLES:
        return _HIGH_TABLES[number]
    return low_table(number)


_ONE = HuffTabType.ONE_SHOT
_LOOP = HuffTabType.LOOP_NO_LINBITS
_LIN = HuffTabType.LOOP_LINBITS

# (linbits, type, table number) for each of the 32 pair-table indices.
_LOOKUP_SPEC = (
    (0, HuffTabType.NO_BITS, None),
    (0, _ONE, 1), (0, _ONE, 2), (0, _ONE, 3),
    (0, HuffTabType.INVALID_TAB, None),
    (0, _ONE, 5), (0, _ONE, 6),
    (0, _LOOP, 7), (0, _LOOP, 8), (0, _LOOP, 9), (0, _LOOP, 10),
    (0, _LOOP, 11), (0, _LOOP, 12), (0, _LOOP, 13),
    (0, HuffTabType.INVALID_TAB, None),
    (0, _LOOP, 15),
    (1, _LIN, 16), (2, _LIN, 16), (3, _LIN, 16), (4, _LIN, 16),
    (6, _LIN, 16), (8, _LIN, 16), (10, _LIN, 16), (13, _LIN, 16),
    (4, _LIN, 24), (5, _LIN, 24), (6, _LIN, 24), (7, _LIN, 24),
    (8, _LIN, 24), (9, _LIN, 24), (11, _LIN, 24), (13, _LIN, 24),
)

_LOOKUPS = tuple(
    HuffTabLookup(linbits, tab_type, _table_entries(number))
    for linbits, tab_type, number in _LOOKUP_SPEC
)


def pair_table(tab_idx):
    """Lookup record for big-values table index ``tab_idx`` (0 to 31)."""
    if not isinstance(tab_idx, int) or not 0 <= tab_idx < HUFF_PAIRTABS:
        raise ValueError(f"pair table index must be in 0..{HUFF_PAIRTABS - 1}, got {tab_idx!r}")
    return _LOOKUPS[tab_idx]


def quad_table(tab_idx):
    """Entries of count1 quad table ``tab_idx`` (0 is table A, 1 is table B)."""
    if not isinstance(tab_idx, int) or tab_idx not in (0, 1):
        raise ValueError(f"quad table index must be 0 or 1, got {tab_idx!r}")
    return _QUAD_TABLES[tab_idx]