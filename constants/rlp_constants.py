# RLP prefix ranges (Ethereum Yellow Paper, Appendix B)
#
# [0x00-0x7f]  single byte, value is the byte itself
# [0x80-0xb7]  short string (0-55 bytes), length = prefix - 0x80
# [0xb8-0xbf]  long string, prefix - 0xb7 = length of length
# [0xc0-0xf7]  short list (0-55 bytes payload), length = prefix - 0xc0
# [0xf8-0xff]  long list, prefix - 0xf7 = length of length

SINGLE_BYTE_MAX = 0x7F
SHORT_STRING_PREFIX = 0x80
SHORT_STRING_MAX_LEN = 55
LONG_STRING_BASE = 0xB7
SHORT_LIST_PREFIX = 0xC0
SHORT_LIST_MAX_LEN = 55
LONG_LIST_BASE = 0xF7

# Receipt export layout
RECEIPT_FIELD_COUNT = 16
HASH_LENGTH = 32

UINT8_BITS = 8
UINT64_BITS = 64
UINT256_BITS = 256
