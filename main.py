"""bin2h header generation webservice"""

import asyncio
import io
import os

from fastapi import FastAPI, File, Form, HTTPException, UploadFile
from fastapi.middleware.cors import CORSMiddleware

from conf import settings
from deps.cache import get_header_cache_key, header_cache
from deps.converter import convert
from deps.emitter import render_header
from deps.errors import Bin2hError, InvalidColumnSize, InvalidName
from deps.formatter import validate_column_size
from deps.logs import logger
from deps.names import derive_name
from models import ConversionRequest, HeaderFile

app = FastAPI(title=settings.program_name, version=settings.program_version)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_origin_regex=settings.cors_origin_regex,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Limit conversion concurrency
semaphore = asyncio.Semaphore(settings.max_concurrent_tasks)


def _build_header(
    data: bytes, symbol_name: str, column_size: int, skip: int, count: int
) -> tuple[str, int]:
    request = ConversionRequest(
        source=io.BytesIO(data), skip=skip, count=count, column_size=column_size
    )
    result = convert(request)
    return render_header(result, symbol_name), result.total_bytes


@app.get("/version")
async def version() -> dict[str, str]:
    """Return the program name and version"""
    return {"name": settings.program_name, "version": settings.program_version}


@app.post("/convert")
async def convert_file(
    file: UploadFile = File(...),
    symbol_name: str | None = Form(None),
    column_size: int = Form(settings.column_size),
    skip: int = Form(0, ge=0),
    count: int = Form(0, ge=0),
) -> HeaderFile:
    """Convert an uploaded binary file into a C header"""
    try:
        validate_column_size(column_size)
        basename = os.path.basename(file.filename or "")
        filename = derive_name(basename, settings.strip_chars, settings.header_suffix)
        if symbol_name is None:
            symbol_name = derive_name(basename, settings.strip_chars, "")
    except (InvalidColumnSize, InvalidName) as ex:
        raise HTTPException(422, str(ex)) from ex

    data = await file.read(settings.max_upload_size + 1)
    if len(data) > settings.max_upload_size:
        raise HTTPException(413, "Uploaded file is too large")

    # Check if this file was converted before
    cache_key = get_header_cache_key(
        data, basename, symbol_name, column_size, skip, count
    )
    if header_file := header_cache.get(cache_key):
        # It was -> return cached result
        return header_file

    # Nope -> convert and store in cache
    async with semaphore:
        try:
            header, size = await asyncio.to_thread(
                _build_header, data, symbol_name, column_size, skip, count
            )
        except Bin2hError as ex:
            logger.warning("Conversion of %s failed: %s", file.filename, ex)
            raise HTTPException(400, str(ex)) from ex

    header_file = HeaderFile(
        filename=filename, symbol_name=symbol_name, size=size, header=header
    )
    header_cache[cache_key] = header_file
    return header_file
