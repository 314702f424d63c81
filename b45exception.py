# Copyright (c) 2014-2015  Sam Maloney.
# License: GPL v2.

class Base45Error(Exception):
    pass

class CorruptInputError(Base45Error, ValueError):
    """Raised on illegal base45 data, such as a character outside of the
    alphabet, a block value over 0xFFFF or a dangling single character.

    offset is the position of the offending input byte, relative to the
    start of the input handed to the failing call. count is the number of
    decoded bytes that call produced before giving up; partial holds them
    when the caller had no buffer of its own to look at.
    """

    def __init__(self, offset, count=0, partial=None):
        super().__init__(\
            "illegal base45 data at input byte {}".format(offset))

        self.offset = offset
        self.count = count
        self.partial = partial

class UnexpectedEndError(CorruptInputError):
    """The encoded stream ended one character into a block."""

    def __init__(self, offset, count=0, partial=None):
        super().__init__(offset, count, partial)

        self.args = ("unexpected end of base45 data at input byte {}"\
            .format(offset),)

class SinkWriteError(Base45Error, OSError):
    """The sink behind a stream encoder failed.

    consumed is how many bytes of the failing write() call were accepted
    into the encoder; they are not necessarily in the sink.
    """

    def __init__(self, message, consumed=0):
        super().__init__(message)

        self.consumed = consumed
