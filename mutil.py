# Copyright (c) 2014-2015  Sam Maloney.
# License: GPL v2.

# Printable bytes shown as themselves in the text column.
printable = frozenset(range(0x20, 0x7f))

width = 16

def hex_dump(data):
    "Offset, hex pairs and printable text, width bytes per line."

    assert type(data) in (bytes, bytearray, memoryview), type(data)

    lines = []

    for start in range(0, len(data), width):
        row = bytes(data[start:start + width])

        pairs = [row[i:i + 2].hex() for i in range(0, len(row), 2)]
        text = "".join(chr(b) if b in printable else '.' for b in row)

        lines.append("{:#06x}   {:<40} {}\n"\
            .format(start, " ".join(pairs), text))

    return "".join(lines)
