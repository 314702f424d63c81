# Copyright (c) 2014-2015  Sam Maloney.
# License: GPL v2.

"""Base45 encoding and decoding (draft-faltstrom-base45).

Every 2 bytes become 3 chars of the 45 char alphabet; a final odd byte
becomes 2 chars. Encoded data is handled as ASCII bytes, the *_string
functions take or give str.
"""

import llog

import logging

from consts import CHUNK_SIZE, ENCODED_CHUNK_SIZE, ENCODED_SHORT_CHUNK_SIZE
from b45block import encode_block, decode_block
from b45exception import CorruptInputError

log = logging.getLogger(__name__)

def encoded_len(n):
    "Length of the encoding of n bytes."
    res = n // CHUNK_SIZE * ENCODED_CHUNK_SIZE
    if n % CHUNK_SIZE:
        res += ENCODED_SHORT_CHUNK_SIZE
    return res

def decoded_len(n):
    "Maximum length of the data decoded from n encoded bytes."
    res = n // ENCODED_CHUNK_SIZE * CHUNK_SIZE
    if n % ENCODED_CHUNK_SIZE:
        res += 1
    return res

def encode_into(dst, src):
    """Writes the encoding of src to the front of the writable buffer dst.

    Returns encoded_len(len(src)); the rest of dst is left untouched.
    """

    n = encoded_len(len(src))
    if len(dst) < n:
        raise ValueError("Destination buffer too small ({} < {})."\
            .format(len(dst), n))

    di = 0
    for si in range(0, len(src), CHUNK_SIZE):
        block = encode_block(src[si:si + CHUNK_SIZE])
        end = di + len(block)
        dst[di:end] = block
        di = end

    return di

def encode(src):
    buf = bytearray(encoded_len(len(src)))
    encode_into(buf, src)
    return bytes(buf)

def encode_to_string(src):
    return encode(src).decode("ascii")

def _as_bytes(src):
    if isinstance(src, str):
        # One '?' per non ASCII char keeps offsets; '?' is not in the
        # alphabet so it is reported where it sits.
        return src.encode("ascii", "replace")
    return src

def decode_prefix(dst, src):
    """Decodes src into dst until src runs out or a block is corrupt.

    Returns (n, err): the count of bytes written to dst and None, or a
    CorruptInputError. A block with an overflowing value is counted in n
    and reported in err.
    """

    src = _as_bytes(src)

    n = 0
    si = 0
    slen = len(src)
    dlen = len(dst)

    while si < slen:
        raw, consumed, err = decode_block(src, si)
        si += consumed

        if raw:
            end = n + len(raw)
            if end > dlen:
                raise ValueError("Destination buffer too small ({} < {})."\
                    .format(dlen, end))
            dst[n:end] = raw
            n = end

        if err is not None:
            if log.isEnabledFor(logging.DEBUG):
                log.debug("Corrupt input at [{}] after [{}] bytes."\
                    .format(err.offset, n))
            return n, CorruptInputError(err.offset, n)

    return n, None

def decode_into(dst, src):
    """Decodes src into the writable buffer dst, returning the byte count.

    Raises CorruptInputError at the first bad block; its count attribute
    says how much of dst was written.
    """

    n, err = decode_prefix(dst, src)
    if err is not None:
        raise err
    return n

def decode(src):
    "Returns the bytes represented by the base45 bytes or str src."

    src = _as_bytes(src)

    buf = bytearray(decoded_len(len(src)))
    n, err = decode_prefix(buf, src)
    if err is not None:
        raise CorruptInputError(err.offset, n, bytes(buf[:n]))

    return bytes(buf[:n])

def decode_string(s):
    assert isinstance(s, str), type(s)
    return decode(s)
