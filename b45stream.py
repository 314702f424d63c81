# Copyright (c) 2014-2015  Sam Maloney.
# License: GPL v2.

import llog

import logging

import base45
from b45block import encode_block
from b45exception import SinkWriteError, UnexpectedEndError
from consts import CHUNK_SIZE, ENCODED_CHUNK_SIZE, ENCODER_OUT_SIZE,\
    DECODER_BUF_SIZE
from mutil import hex_dump

log = logging.getLogger(__name__)

class Encoder(object):
    """Base45 stream encoder writing to sink.

    Input is encoded in 2 byte blocks; an odd byte waits for the next
    write(). The caller must close() the encoder to flush it. The sink
    itself is never closed.
    """

    def __init__(self, sink, out_size=ENCODER_OUT_SIZE):
        blocks = out_size // ENCODED_CHUNK_SIZE
        if blocks < 1:
            raise ValueError("out_size [{}] is less than one block."\
                .format(out_size))

        self.sink = sink
        self.err = None
        self.closed = False

        self.buf = bytearray() # Data waiting to be encoded.
        self.out = bytearray(blocks * ENCODED_CHUNK_SIZE)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, tb):
        if exc_type is None:
            self.close()
        else:
            # Half written output is of no use to anyone.
            self.closed = True

    def write(self, data):
        if self.err is not None:
            raise self.err

        if self.closed:
            raise ValueError("write() on closed Encoder.")

        p = memoryview(data).cast("B")
        n = 0

        # Leading fringe.
        if self.buf:
            i = min(CHUNK_SIZE - len(self.buf), len(p))
            self.buf += p[:i]
            n += i
            p = p[i:]

            if len(self.buf) < CHUNK_SIZE:
                return n

            block = encode_block(self.buf)
            self.buf.clear()
            self._write_out(block, n)

        # Large interior chunks.
        while len(p) >= CHUNK_SIZE:
            nn = len(self.out) // ENCODED_CHUNK_SIZE * CHUNK_SIZE
            if nn > len(p):
                nn = len(p)
                nn -= nn % CHUNK_SIZE

            m = base45.encode_into(self.out, p[:nn])
            self._write_out(self.out[:m], n)

            n += nn
            p = p[nn:]

        # Trailing fringe.
        self.buf += p
        n += len(p)

        return n

    def flush(self):
        "Flushes the sink; a pending odd byte stays until close()."

        if self.err is not None:
            raise self.err

        flush = getattr(self.sink, "flush", None)
        if flush is not None:
            flush()

    def close(self):
        if self.err is not None:
            raise self.err

        if self.closed:
            return

        self.closed = True

        if self.buf:
            block = encode_block(self.buf)
            self.buf.clear()
            self._write_out(block, 0)

    def _write_out(self, chunk, consumed):
        chunk = bytes(chunk)

        if log.isEnabledFor(logging.DEBUG):
            log.debug("Writing [{}] encoded bytes to sink.".format(len(chunk)))

        try:
            written = self.sink.write(chunk)
        except OSError as e:
            err = SinkWriteError("Sink write failed: {}".format(e), consumed)
            self._set_err(err)
            raise err from e

        if written is not None and written < len(chunk):
            err = SinkWriteError("Short write to sink ({} < {})."\
                .format(written, len(chunk)), consumed)
            self._set_err(err)
            raise err

    def _set_err(self, err):
        log.warning("Encoder failed, refusing further use: {}".format(err))
        self.err = err

class Decoder(object):
    """Base45 stream decoder reading from source.

    The source is expected to already strip the whitespace ('\\r' and
    '\\n') that may appear in encoded text.
    """

    def __init__(self, source, buf_size=DECODER_BUF_SIZE):
        blocks = buf_size // ENCODED_CHUNK_SIZE
        if blocks < 1:
            raise ValueError("buf_size [{}] is less than one block."\
                .format(buf_size))

        self.source = source
        self.err = None
        self.read_err = None # OSError from source.read().
        self.eof = False

        self.buf_size = blocks * ENCODED_CHUNK_SIZE
        self.buf = bytearray() # Leftover input.
        self.out = memoryview(b"") # Leftover decoded output.
        self.outbuf = bytearray(blocks * CHUNK_SIZE)

    def readinto(self, p):
        """Decodes into the writable buffer p, returning the byte count.

        Returns 0 at the clean end of input. Errors are sticky; output
        decoded in the same call as an error is returned first and the
        error is raised by the following call.
        """

        p = memoryview(p).cast("B")

        # Use leftover decoded output from last read.
        if self.out:
            return self._drain(p)

        if self.err is not None:
            raise self.err

        if not len(p):
            return 0

        # Refill buffer.
        while len(self.buf) < ENCODED_CHUNK_SIZE\
                and not self.eof and self.read_err is None:
            nn = len(p) // CHUNK_SIZE * ENCODED_CHUNK_SIZE
            if nn < ENCODED_CHUNK_SIZE:
                nn = ENCODED_CHUNK_SIZE
            if nn > self.buf_size:
                nn = self.buf_size
            self._fill(nn - len(self.buf))

        if len(self.buf) < ENCODED_CHUNK_SIZE:
            return self._finish(p)

        # Decode whole blocks into p, or self.out and then p if p is too
        # small.
        nr = min(len(self.buf), self.buf_size)
        nr -= nr % ENCODED_CHUNK_SIZE
        nw = base45.decoded_len(nr)

        chunk = self.buf[:nr]
        del self.buf[:nr]

        if nw > len(p):
            nw, err = base45.decode_prefix(self.outbuf, chunk)
            self.out = memoryview(self.outbuf)[:nw]
            n = self._drain(p) if nw else 0
        else:
            n, err = base45.decode_prefix(p, chunk)

        if err is not None:
            self._set_err(err)
            self.buf.clear()
            if not n:
                raise err

        return n

    def read(self, size=-1):
        if size is None or size < 0:
            return self.readall()

        buf = bytearray(size)
        n = self.readinto(buf)
        return bytes(buf[:n])

    def readall(self):
        result = bytearray()
        buf = bytearray(self.buf_size // ENCODED_CHUNK_SIZE * CHUNK_SIZE)

        while True:
            n = self.readinto(buf)
            if not n:
                break
            result += buf[:n]

        return bytes(result)

    def _fill(self, want):
        try:
            data = self.source.read(want)
        except OSError as e:
            log.warning("Source read failed: {}".format(e))
            self.read_err = e
            return

        if not data:
            if log.isEnabledFor(logging.DEBUG):
                log.debug("End of input with [{}] chars buffered."\
                    .format(len(self.buf)))
            self.eof = True
            return

        if log.isEnabledFor(logging.DEBUG):
            log.debug("Read [{}] of [{}] requested bytes:\n{}"\
                .format(len(data), want, hex_dump(data)))

        self.buf += data

    def _finish(self, p):
        # Fewer than a block left and nothing more coming.
        nw = 0

        if self.buf:
            frag = bytes(self.buf)
            self.buf.clear()

            nw, err = base45.decode_prefix(self.outbuf, frag)
            if err is not None and self.read_err is None:
                if len(frag) == 1:
                    err = UnexpectedEndError(err.offset, nw)
                self._set_err(err)

        if self.read_err is not None and self.err is None:
            self._set_err(self.read_err)

        if nw:
            self.out = memoryview(self.outbuf)[:nw]
            return self._drain(p)

        if self.err is not None:
            raise self.err

        return 0

    def _drain(self, p):
        n = min(len(p), len(self.out))
        p[:n] = self.out[:n]
        self.out = self.out[n:]
        return n

    def _set_err(self, err):
        log.warning("Decoder failed, refusing further use: {}".format(err))
        self.err = err

def new_encoder(sink):
    return Encoder(sink)

def new_decoder(source):
    return Decoder(source)
