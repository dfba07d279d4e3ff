"""Byte to hex literal formatting"""

from deps.errors import InvalidColumnSize

SEPARATOR = ", "
LINE_BREAK = "\n\t"


def validate_column_size(column_size: int) -> int:
    """Reject odd column sizes and anything smaller than 2"""
    if column_size < 2 or column_size % 2:
        raise InvalidColumnSize(
            f"Incorrect column size {column_size}, must be an even number. e.g: 2, 4, 6, 8..."
        )
    return column_size


def format_bytes(data: bytes, column_size: int, index: int = 0) -> tuple[str, int]:
    """
    Render bytes as comma separated hex literals, wrapped every column_size bytes.

    Args:
        data: The bytes to render.
        column_size: Number of literals per line.
        index: Global position of data[0] in the whole input, so wrapping
            stays aligned no matter how the input was chunked.

    Returns:
        The rendered text and the index following the last byte.
    """
    validate_column_size(column_size)

    parts: list[str] = []
    for position, byte in enumerate(data, start=index):
        if position % column_size == 0:
            parts.append(LINE_BREAK)
        parts.append(f"0x{byte:02x}{SEPARATOR}")

    return "".join(parts), index + len(data)
