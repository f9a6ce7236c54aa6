"""Huffman code tables 1 to 13 for the big-values region of the spectrum.

Every entry is a 16-bit word laid out as 0xABCD: A is the codeword length,
B the y value, C the x value and D the number of sign bits that follow.
A word whose top nibble is 0xF heads a (sub)table and holds the number of
bits to look up in D. A word whose top nibble is 0 is a jump: its value is
the offset of the next subtable from the start of the current one.
Shorter codewords are repeated so that a fixed-width lookup finds them.
"""

# Tables are written as runs: a bare int is one entry, (value, count) repeats it.
_SPECS = {
    1: (
        0xF003, 0x3112, 0x3101, (0x2011, 2), (0x1000, 4),
    ),
    2: (
        0xF006, 0x6222, 0x6201, (0x5212, 2), (0x5122, 2), (0x5021, 2),
        (0x3112, 8), (0x3101, 8), (0x3011, 8), (0x1000, 32),
    ),
    3: (
        0xF006, 0x6222, 0x6201, (0x5212, 2), (0x5122, 2), (0x5021, 2),
        (0x3011, 8), (0x2112, 16), (0x2101, 16), (0x2000, 16),
    ),
    5: (
        0xF008, 0x8332, 0x8322, (0x7232, 2), (0x6132, 4), (0x7312, 2),
        (0x7301, 2), (0x7031, 2), (0x7222, 2), (0x6212, 4), (0x6122, 4),
        (0x6201, 4), (0x6021, 4), (0x3112, 32), (0x3101, 32), (0x3011, 32),
        (0x1000, 128),
    ),
    6: (
        0xF007, 0x7332, 0x7301, (0x6322, 2), (0x6232, 2), (0x6031, 2),
        (0x5312, 4), (0x5132, 4), (0x5222, 4), (0x5201, 4), (0x4212, 8),
        (0x4122, 8), (0x4021, 8), (0x3101, 16), (0x2112, 32), (0x3011, 16),
        (0x3000, 16),
    ),
    7: (
        0xF006, 0x0041, 0x0052, 0x005B, 0x0060, 0x0063, 0x0068, 0x006B,
        0x6212, (0x5122, 2), 0x6201, 0x6021, (0x4112, 4), (0x3101, 8),
        (0x3011, 8), (0x1000, 32),
        0xF004, 0x4552, 0x4542, 0x4452, 0x4352, (0x3532, 2), (0x3442, 2),
        (0x3522, 2), (0x3252, 2), (0x2512, 4),
        0xF003, (0x2152, 2), 0x3501, 0x3432, (0x2051, 2), 0x3342, 0x3332,
        0xF002, 0x2422, 0x2242, (0x1412, 2),
        0xF001, 0x1142, 0x1041,
        0xF002, 0x2401, 0x2322, 0x2232, 0x2301,
        0xF001, 0x1312, 0x1132,
        0xF001, 0x1031, 0x1222,
    ),
    8: (
        0xF008, 0x0101, 0x010A, 0x010F, 0x8512, 0x8152, 0x0112, 0x0115,
        0x8422, 0x8242, 0x8412, (0x7142, 2), 0x8401, 0x8041, 0x8322,
        0x8232, 0x8312, 0x8132, 0x8301, 0x8031, (0x6222, 4), (0x6201, 4),
        (0x6021, 4), (0x4212, 16), (0x4122, 16), (0x2112, 64), (0x3101, 32),
        (0x3011, 32), (0x2000, 64),
        0xF003, 0x3552, 0x3452, (0x2542, 2), (0x1352, 4),
        0xF002, 0x2532, 0x2442, (0x1522, 2),
        0xF001, 0x1252, 0x1501,
        0xF001, 0x1432, 0x1342,
        0xF001, 0x1051, 0x1332,
    ),
    9: (
        0xF006, 0x0041, 0x004A, 0x004F, 0x0052, 0x0057, 0x005A, 0x6412,
        0x6142, 0x6322, 0x6232, (0x5312, 2), (0x5132, 2), 0x6301,
        0x6031, (0x5222, 2), (0x5201, 2), (0x4212, 4), (0x4122, 4),
        (0x4021, 4), (0x3112, 8), (0x3101, 8), (0x3011, 8), (0x3000, 8),
        0xF003, 0x3552, 0x3542, (0x2532, 2), (0x2352, 2), 0x3452, 0x3501,
        0xF002, 0x2442, 0x2522, 0x2252, 0x2512,
        0xF001, 0x1152, 0x1432,
        0xF002, (0x1342, 2), 0x2051, 0x2401,
        0xF001, 0x1422, 0x1242,
        0xF001, 0x1332, 0x1041,
    ),
    10: (
        0xF008, 0x0101, 0x010A, 0x010F, 0x0118, 0x011B, 0x0120, 0x0125,
        0x8712, 0x8172, 0x012A, 0x012D, 0x0132, 0x8612, 0x8162, 0x8061,
        0x0137, 0x013A, 0x013D, 0x8412, 0x8142, 0x8041, 0x8322, 0x8232,
        0x8301, (0x7312, 2), (0x7132, 2), (0x7031, 2), (0x7222, 2),
        (0x6212, 4), (0x6122, 4), (0x6201, 4), (0x6021, 4), (0x4112, 16),
        (0x3101, 32), (0x3011, 32), (0x1000, 128),
        0xF003, 0x3772, 0x3762, 0x3672, 0x3752, 0x3572, 0x3662, (0x2742, 2),
        0xF002, 0x2472, 0x2652, 0x2562, 0x2732,
        0xF003, (0x2372, 2), (0x2642, 2), 0x3552, 0x3452, (0x2362, 2),
        0xF001, 0x1722, 0x1272,
        0xF002, 0x2462, 0x2701, (0x1071, 2),
        0xF002, (0x1262, 2), 0x2542, 0x2532,
        0xF002, (0x1601, 2), 0x2352, 0x2442,
        0xF001, 0x1632, 0x1622,
        0xF002, 0x2522, 0x2252, (0x1512, 2),
        0xF002, (0x1152, 2), 0x2432, 0x2342,
        0xF001, 0x1501, 0x1051,
        0xF001, 0x1422, 0x1242,
        0xF001, 0x1332, 0x1401,
    ),
    11: (
        0xF008, 0x0101, 0x0106, 0x010F, 0x0114, 0x0117, 0x8722, 0x8272,
        0x011C, (0x7172, 2), 0x8712, 0x8071, 0x8632, 0x8362, 0x8061,
        0x011F, 0x0122, 0x8512, (0x7262, 2), 0x8622, 0x8601, (0x7612, 2),
        (0x7162, 2), 0x8152, 0x8432, 0x8051, 0x0125, 0x8422,
        0x8242, 0x8412, 0x8142, 0x8401, 0x8041, (0x7322, 2), (0x7232, 2),
        (0x6312, 4), (0x6132, 4), (0x7301, 2), (0x7031, 2), (0x6222, 4),
        (0x5122, 8), (0x4212, 16), (0x5201, 8), (0x5021, 8), (0x3112, 32),
        (0x3101, 32), (0x3011, 32), (0x2000, 64),
        0xF002, 0x2772, 0x2762, 0x2672, 0x2572,
        0xF003, (0x2662, 2), (0x2742, 2), (0x2472, 2), 0x3752, 0x3552,
        0xF002, 0x2652, 0x2562, (0x1732, 2),
        0xF001, 0x1372, 0x1642,
        0xF002, 0x2542, 0x2452, 0x2532, 0x2352,
        0xF001, 0x1462, 0x1701,
        0xF001, 0x1442, 0x1522,
        0xF001, 0x1252, 0x1501,
        0xF001, 0x1342, 0x1332,
    ),
    12: (
        0xF007, 0x0081, 0x008A, 0x008F, 0x0092, 0x0097, 0x009A, 0x009D,
        0x00A2, 0x00A5, 0x00A8, 0x7622, 0x7262, 0x7162, 0x00AD, 0x00B0,
        0x00B3, 0x7512, 0x7152, 0x7432, 0x7342, 0x00B6, 0x7422, 0x7242,
        0x7412, (0x6332, 2), (0x6142, 2), (0x6322, 2), (0x6232, 2), 0x7041,
        0x7301, (0x6031, 2), (0x5312, 4), (0x5132, 4), (0x5222, 4),
        (0x4212, 8), (0x4122, 8), (0x5201, 4), (0x5021, 4), (0x4000, 8),
        (0x3112, 16), (0x3101, 16), (0x3011, 16),
        0xF003, 0x3772, 0x3762, (0x2672, 2), (0x2752, 2), (0x2572, 2),
        0xF002, 0x2662, 0x2742, 0x2472, 0x2562,
        0xF001, 0x1652, 0x1732,
        0xF002, 0x2372, 0x2552, (0x1722, 2),
        0xF001, 0x1272, 0x1642,
        0xF001, 0x1462, 0x1712,
        0xF002, (0x1172, 2), 0x2701, 0x2071,
        0xF001, 0x1632, 0x1362,
        0xF001, 0x1542, 0x1452,
        0xF002, (0x1442, 2), 0x2601, 0x2501,
        0xF001, 0x1612, 0x1061,
        0xF001, 0x1532, 0x1352,
        0xF001, 0x1522, 0x1252,
        0xF001, 0x1051, 0x1401,
    ),
    13: (
        0xF006, 0x0041, 0x0082, 0x00C3, 0x00E4, 0x0105, 0x0116, 0x011F,
        0x0130, 0x0139, 0x013E, 0x0143, 0x0146, 0x6212, 0x6122, 0x6201,
        0x6021, (0x4112, 4), (0x4101, 4), (0x3011, 8), (0x1000, 32),

        0xF006, 0x0108, 0x0111, 0x011A, 0x0123, 0x012C, 0x0131,
        0x0136, 0x013F, 0x0144, 0x0147, 0x014C, 0x0151, 0x0156, 0x015B,
        0x6F12, 0x61F2, 0x60F1, 0x0160, 0x0163, 0x0166, 0x62E2, 0x0169,
        0x6E12, 0x61E2, 0x016C, 0x016F, 0x0172, 0x0175, 0x0178, 0x017B,
        0x66C2, 0x6D32, 0x017E, 0x6D22, 0x62D2, 0x6D12, 0x67B2, 0x0181,
        0x0184, 0x63C2, 0x0187, 0x6B42, (0x51D2, 2), 0x6D01, 0x60D1,
        0x6A82, 0x68A2, 0x6C42, 0x64C2, 0x6B62, 0x66B2, (0x5C32, 2),
        (0x5C22, 2), (0x52C2, 2), (0x5B52, 2), 0x65B2, 0x6982,
        (0x5C12, 2),

        0xF006, (0x51C2, 2), 0x6892, 0x6C01, (0x50C1, 2), 0x64B2, 0x6A62,
        0x66A2, 0x6972, (0x5B32, 2), (0x53B2, 2), 0x6882, 0x6A52,
        (0x5B22, 2), 0x65A2, 0x6962, (0x54A2, 2), 0x6872, 0x6782,
        (0x5492, 2), 0x6772, 0x6672, (0x42B2, 4), (0x4B12, 4), (0x41B2, 4),
        (0x5B01, 2), (0x50B1, 2), (0x5692, 2), (0x5A42, 2), (0x5A32, 2),
        (0x53A2, 2), (0x5952, 2), (0x5592, 2), (0x4A22, 4), (0x42A2, 4),

        0xF005, (0x4A12, 2), (0x41A2, 2), 0x5A01, 0x5862, (0x40A1, 2),
        0x5682, 0x5942, (0x4392, 2), 0x5932, 0x5852, 0x5582, 0x5762,
        (0x4922, 2), (0x4292, 2), 0x5752, 0x5572, (0x4832, 2), (0x4382, 2),
        0x5662, 0x5742, 0x5472, 0x5652, 0x5562, 0x5372,

        0xF005, (0x3912, 4), (0x3192, 4), (0x4901, 2), (0x4091, 2),
        (0x4842, 2), (0x4482, 2), (0x4272, 2), 0x5642, 0x5462, (0x3822, 4),
        (0x3282, 4), (0x3812, 4),

        0xF004, 0x4732, 0x4722, (0x3712, 2), (0x3172, 2), 0x4552, 0x4701,
        0x4071, 0x4632, 0x4362, 0x4542, 0x4452, 0x4622, 0x4262, 0x4532,
        0xF003, (0x2182, 2), 0x3801, 0x3081, 0x3612, 0x3162, 0x3601, 0x3061,
        0xF004, 0x4352, 0x4442, (0x3522, 2), (0x3252, 2), (0x3501, 2),
        (0x2512, 4), (0x2152, 4),
        0xF003, 0x3432, 0x3342, 0x3051, 0x3422, 0x3242, 0x3332, (0x2412, 2),
        0xF002, (0x1142, 2), 0x2401, 0x2041,
        0xF002, 0x2322, 0x2232, (0x1312, 2),
        0xF001, 0x1132, 0x1301,
        0xF001, 0x1031, 0x1222,

        0xF003, 0x0082, 0x008B, 0x008E, 0x0091, 0x0094, 0x0097, 0x3CE2,
        0x3DD2,
        0xF003, 0x0093, 0x3EB2, 0x3BE2, 0x3F92, 0x39F2, 0x3AE2, 0x3DB2,
        0x3BD2,
        0xF003, 0x3F82, 0x38F2, 0x3CC2, 0x008D, 0x3E82, 0x0090, (0x27F2, 2),
        0xF003, (0x2AD2, 2), 0x3DA2, 0x3CB2, 0x3BC2, 0x36F2, (0x2F62, 2),
        0xF002, 0x28E2, 0x2F52, 0x2D92, 0x29D2,
        0xF002, 0x25F2, 0x27E2, 0x2CA2, 0x2BB2,
        0xF003, (0x2F42, 2), (0x24F2, 2), 0x3AC2, 0x36E2, (0x23F2, 2),
        0xF002, (0x1F32, 2), 0x2D82, 0x28D2,
        0xF001, 0x1F22, 0x12F2,
        0xF002, 0x2E62, 0x2C92, (0x1F01, 2),
        0xF002, 0x29C2, 0x2E52, (0x1BA2, 2),
        0xF002, 0x2D72, 0x27D2, (0x1E42, 2),
        0xF002, 0x28C2, 0x26D2, (0x1E32, 2),
        0xF002, (0x19B2, 2), 0x2B92, 0x2AA2,
        0xF001, 0x1AB2, 0x15E2,
        0xF001, 0x14E2, 0x1C82,
        0xF001, 0x1D62, 0x13E2,
        0xF001, 0x1E22, 0x1E01,
        0xF001, 0x10E1, 0x1D52,
        0xF001, 0x15D2, 0x1C72,
        0xF001, 0x17C2, 0x1D42,
        0xF001, 0x1B82, 0x18B2,
        0xF001, 0x14D2, 0x1A92,
        0xF001, 0x19A2, 0x1C62,
        0xF001, 0x13D2, 0x1B72,
        0xF001, 0x1C52, 0x15C2,
        0xF001, 0x1992, 0x1A72,
        0xF001, 0x17A2, 0x1792,
        0xF003, 0x0023, 0x3DF2, (0x2DE2, 2), (0x1FF2, 4),
        0xF001, 0x1FE2, 0x1FD2,
        0xF001, 0x1EE2, 0x1FC2,
        0xF001, 0x1ED2, 0x1FB2,
        0xF001, 0x1BF2, 0x1EC2,
        0xF002, (0x1CD2, 2), 0x2FA2, 0x29E2,
        0xF001, 0x1AF2, 0x1DC2,
        0xF001, 0x1EA2, 0x1E92,
        0xF001, 0x1F72, 0x1E72,
        0xF001, 0x1EF2, 0x1CF2,
    ),
}


def _expand(spec):
    words = []
    for item in spec:
        if isinstance(item, tuple):
            value, count = item
            words.extend([value] * count)
        else:
            words.append(item)
    return tuple(words)


_TABLES = {number: _expand(spec) for number, spec in _SPECS.items()}

LOW_TABLE_NUMBERS = tuple(sorted(_TABLES))


def low_table(table_number):
    """Entries of Huffman pair table ``table_number`` (1, 2, 3, 5 to 13) as a tuple.

    Raises ValueError for any other table number.
    """
    try:
        return _TABLES[table_number]
    except (KeyError, TypeError):
        raise ValueError(f"no low Huffman pair table numbered {table_number!r}") from None