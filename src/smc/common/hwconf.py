WORD_SIZE = 4           # opcode + 3 data bytes

REGISTER_COUNT = 256
CHANNEL_COUNT = 256

BYTE_MAX = 0xFF
INT16_MIN = -0x8000
INT16_MAX = 0x7FFF

# Every address, past-the-end label included, must fit a signed 16-bit target
MAX_PROGRAM_SIZE = INT16_MAX

COMMENT_MARKER = '//'
LABEL_MARKER = ':'
