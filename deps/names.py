"""Output filename and symbol name derivation"""

import re

from deps.errors import InvalidName


def derive_name(path: str, strip_chars: str, suffix: str) -> str:
    """
    Derive a name from the last field of a path.

    The path is split on every character of strip_chars, empty fields are
    dropped and the last remaining field is joined with suffix. Directory
    separators are not stripped, so callers pass a basename when needed.

    Args:
        path: The path (or filename) to derive from.
        strip_chars: Characters treated as field separators.
        suffix: Appended to the last field, e.g. ".h" or "".

    Returns:
        The derived name, e.g. derive_name("archive.bin", ".,_", ".h") == "bin.h".

    Raises:
        InvalidName: when no field is left after splitting.
    """
    if strip_chars:
        fields = [
            field for field in re.split(f"[{re.escape(strip_chars)}]", path) if field
        ]
    else:
        fields = [path] if path else []

    if not fields:
        raise InvalidName(f"Couldn't derive a name from {path!r}")

    return fields[-1] + suffix
