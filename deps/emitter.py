"""Header file generation"""

from datetime import datetime
from typing import TextIO

from conf import settings
from models import ConversionResult

HEADER_PROLOGUE = """#pragma once

#if defined (__cplusplus)
extern "C" {
#endif
"""

HEADER_EPILOGUE = """
#if defined (__cplusplus)
}
#endif
"""


def render_header(
    result: ConversionResult, symbol_name: str, now: datetime | None = None
) -> str:
    """Wrap a converted table into a complete C header"""
    timestamp = (now or datetime.now()).strftime("%H:%M:%S - %m/%d/%y")

    header_lines: list[str] = [
        f"/*\tAuto generated header file by '{settings.program_name}' "
        f"(VERSION: {settings.program_version})",
        f" *\tat {timestamp}",
        "*/",
        "",
        HEADER_PROLOGUE,
        f"unsigned long long {symbol_name}_size = {result.total_bytes};",
        "",
        f"unsigned char {symbol_name}[{result.total_bytes}] = {{{result.table}",
        "};",
        HEADER_EPILOGUE,
    ]
    return "\n".join(header_lines)


def emit_header(
    result: ConversionResult,
    symbol_name: str,
    sink: TextIO,
    now: datetime | None = None,
) -> None:
    """Write the rendered header to sink in a single write"""
    sink.write(render_header(result, symbol_name, now))
