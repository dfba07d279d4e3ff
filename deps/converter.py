"""Chunked input to hex table conversion"""

import io

from deps.errors import ReadFailure, SeekFailure
from deps.formatter import SEPARATOR, format_bytes
from deps.logs import logger
from models import ConversionRequest, ConversionResult


def _skip_input(request: ConversionRequest) -> None:
    """Seek past the first request.skip bytes, or ignore skip on unseekable input"""
    source = request.source
    if not (request.seekable and source.seekable()):
        logger.warning(
            "Input is not seekable, ignoring skip of %d bytes", request.skip
        )
        return

    try:
        source.seek(request.skip, io.SEEK_SET)
    except (OSError, ValueError) as ex:
        raise SeekFailure(
            f"Couldn't seek the input to {request.skip} position: {ex}"
        ) from ex


def convert(request: ConversionRequest) -> ConversionResult:
    """
    Read the request source in bounded chunks and build the array body.

    The whole table is accumulated in memory, so a read failure aborts the
    conversion before anything reaches the output.
    """
    if request.skip:
        _skip_input(request)

    chunk = bytearray(request.chunk_capacity)
    view = memoryview(chunk)
    table = io.StringIO()
    total_bytes = 0
    index = 0
    remaining = request.count

    while True:
        size = request.chunk_capacity
        if request.count:
            size = min(size, remaining)
        try:
            bytes_read = request.source.readinto(view[:size])
        except OSError as ex:
            raise ReadFailure(
                f"Couldn't read the input after {total_bytes} bytes: {ex}"
            ) from ex
        if not bytes_read:
            break

        logger.debug("Read %d bytes at offset %d", bytes_read, total_bytes)
        text, index = format_bytes(view[:bytes_read], request.column_size, index)
        table.write(text)
        total_bytes += bytes_read

        if request.count:
            remaining -= bytes_read
            if remaining <= 0:
                break

    body = table.getvalue()
    if total_bytes:
        body = body[: -len(SEPARATOR)]

    return ConversionResult(table=body, total_bytes=total_bytes)
