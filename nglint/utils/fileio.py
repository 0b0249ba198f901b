"""Basic file IO helpers."""

from __future__ import annotations

from pathlib import Path
from typing import Any, AsyncIterator

import aiofiles
import yaml

DEFAULT_CHUNK_SIZE = 64 * 1024


def read_yaml_file(path: Path) -> Any:
    """Return the parsed YAML if the file exists, otherwise ``None``."""

    if not path.exists():
        return None
    with path.open("r", encoding="utf-8") as handle:
        return yaml.safe_load(handle)


async def iter_text_chunks(
    path: str,
    encoding: str = "utf-8",
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> AsyncIterator[str]:
    """Yield decoded text chunks of ``path`` until end of file.

    Newline translation is disabled so ``\\r\\n`` reaches callers untouched.
    """

    async with aiofiles.open(path, mode="r", encoding=encoding, newline="") as handle:
        while True:
            chunk = await handle.read(chunk_size)
            if not chunk:
                break
            yield chunk
