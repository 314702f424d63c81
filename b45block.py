# Copyright (c) 2014-2015  Sam Maloney.
# License: GPL v2.

import llog

import logging

from consts import ALPHABET, BASE_SIZE, CHUNK_SIZE, SHORT_CHUNK_SIZE,\
    ENCODED_CHUNK_SIZE, DECODE_MAP, INVALID, MAX_BLOCK_VALUE
from b45exception import CorruptInputError

log = logging.getLogger(__name__)

BASE_SIZE_SQ = BASE_SIZE * BASE_SIZE

def encode_block(raw):
    "Encodes 2 bytes into 3 chars, or a final single byte into 2 chars."

    rlen = len(raw)

    if not rlen:
        return b""

    assert rlen <= CHUNK_SIZE, rlen

    if rlen == CHUNK_SIZE:
        val = raw[0] << 8 | raw[1]
        return bytes((\
            ALPHABET[val % BASE_SIZE],\
            ALPHABET[(val // BASE_SIZE) % BASE_SIZE],\
            ALPHABET[(val // BASE_SIZE_SQ) % BASE_SIZE]))

    assert rlen == SHORT_CHUNK_SIZE, rlen

    val = raw[0]
    return bytes((ALPHABET[val % BASE_SIZE], ALPHABET[val // BASE_SIZE]))

def decode_block(src, si=0):
    """Decodes the block starting at src[si].

    Returns (raw, consumed, err). err is a CorruptInputError instance or
    None; it is returned rather than raised because a block whose value
    overflows 16 bits still yields its two bytes. An empty raw with no
    error and nothing consumed means src is exhausted.
    """

    dbuf = [0, 0, 0]
    dlen = ENCODED_CHUNK_SIZE
    start = si
    slen = len(src)

    for j in range(ENCODED_CHUNK_SIZE):
        if si == slen:
            if j == 0:
                return b"", 0, None
            if j == 1:
                # A lone trailing char is never valid.
                return b"", 1, CorruptInputError(start)
            dlen = j
            break

        out = DECODE_MAP[src[si]]
        if out == INVALID:
            return b"", si + 1 - start, CorruptInputError(si)

        dbuf[j] = out
        si += 1

    val = dbuf[0] + BASE_SIZE * dbuf[1] + BASE_SIZE_SQ * dbuf[2]

    err = None
    if val > MAX_BLOCK_VALUE:
        if log.isEnabledFor(logging.DEBUG):
            log.debug("Block value [{}] at [{}] overflows 16 bits."\
                .format(val, start))
        err = CorruptInputError(si)

    if dlen == ENCODED_CHUNK_SIZE:
        raw = bytes(((val // 256) & 0xFF, val & 0xFF))
    else:
        raw = bytes((val & 0xFF,))

    return raw, si - start, err
