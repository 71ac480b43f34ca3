"""Deliver a finished digit span to the caller's destination.

The span is a memoryview over a printer's scratch buffer, already in
left-to-right order. These functions only copy it out.
"""
from __future__ import annotations

import io
from typing import BinaryIO, TextIO

from .errors import BufferTooSmall

TERMINATOR = 0


def to_buffer(span: memoryview, out) -> int:
    """Copy span into a writable bytes-like buffer and NUL-terminate it.

    Returns the number of digits written (terminator excluded). The buffer
    is left untouched if it cannot hold the digits plus the terminator.
    """
    length = len(span)
    target = memoryview(out)
    if target.readonly:
        raise TypeError("Destination buffer is read-only")
    target = target.cast("B")
    if len(target) < length + 1:
        raise BufferTooSmall(length + 1, len(target))
    target[:length] = span
    target[length] = TERMINATOR
    return length


def to_stream(span: memoryview, stream: TextIO) -> int:
    """Write span as text to a text stream. No terminator."""
    stream.write(span.tobytes().decode("ascii"))
    return len(span)


def to_file(span: memoryview, fh: BinaryIO | TextIO) -> int:
    """Write span to an open file: bytes for binary handles, text otherwise."""
    if isinstance(fh, io.TextIOBase):
        fh.write(span.tobytes().decode("ascii"))
    else:
        fh.write(span.tobytes())
    return len(span)
