# Copyright (c) 2014-2015  Sam Maloney.
# License: GPL v2.

BASE_SIZE = 45

# Order matters: position is the digit value.
ALPHABET = b"0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ $%*+-./:"

CHUNK_SIZE = 2 # bytes.
ENCODED_CHUNK_SIZE = 3 # chars.
SHORT_CHUNK_SIZE = 1 # bytes.
ENCODED_SHORT_CHUNK_SIZE = 2 # chars.

MAX_BLOCK_VALUE = 0xFFFF

INVALID = 0xFF

def _build_decode_map():
    dmap = bytearray([INVALID] * 256)

    for i, char in enumerate(ALPHABET):
        dmap[char] = i

    return bytes(dmap)

DECODE_MAP = _build_decode_map()

# Stream staging buffers.
ENCODER_OUT_SIZE = 1024 # encoded bytes.
DECODER_BUF_SIZE = 1024 # encoded bytes.
