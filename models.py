"""Pydantic models"""

import io

from pydantic import BaseModel, ConfigDict, Field, field_validator

from conf import settings
from deps.formatter import validate_column_size


class ConversionRequest(BaseModel):
    """Everything the converter needs to turn an input stream into a table"""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    source: io.IOBase
    skip: int = Field(0, ge=0)
    count: int = Field(0, ge=0)  # 0 means unbounded
    column_size: int = settings.column_size
    chunk_capacity: int = Field(settings.chunk_capacity, ge=1)
    seekable: bool = True  # False for standard input, disables skip

    @field_validator("column_size")
    @classmethod
    def check_column_size(cls, value: int) -> int:
        """Column size must be even and at least 2"""
        return validate_column_size(value)


class ConversionResult(BaseModel):
    """Formatted array body and the number of bytes it holds"""

    model_config = ConfigDict(frozen=True)

    table: str
    total_bytes: int


class HeaderFile(BaseModel):
    """A generated header returned by the web service"""

    filename: str
    symbol_name: str
    size: int
    header: str
