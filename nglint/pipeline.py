"""Per-file lint pipeline and the order-preserving multi-file aggregator."""

from __future__ import annotations

import asyncio
import itertools
import logging
from typing import Any, List, Mapping, Optional

from .annotator import LocationAnnotator
from .engine import RuleEngine
from .errors import FileReadError
from .parser import parse_document
from .result import Finding
from .settings import LintSettings
from .utils import iter_text_chunks

logger = logging.getLogger(__name__)


async def read_annotated(path: str, encoding: str) -> str:
    """Stream ``path`` through a fresh annotator and return the buffered output."""

    annotator = LocationAnnotator(path)
    parts: List[str] = []
    chunks = 0
    try:
        async for chunk in iter_text_chunks(path, encoding=encoding):
            chunks += 1
            parts.append(annotator.feed(chunk))
    except (OSError, UnicodeDecodeError) as exc:
        raise FileReadError(path, str(exc)) from exc
    except LookupError as exc:
        raise FileReadError(path, f"unknown encoding {encoding!r}") from exc
    parts.append(annotator.flush())
    logger.debug("Read %s in %d chunk(s), %d line(s)", path, chunks, annotator.line_number)
    return "".join(parts)


async def lint_file(path: str, settings: LintSettings) -> List[Finding]:
    """Lint a single file and return its findings in document order."""

    logger.debug("Linting %s", path)
    content = await read_annotated(path, settings.file_encoding)
    engine = RuleEngine(settings)
    parse_document(content, path, engine.evaluate)
    logger.debug("%s: %d finding(s)", path, len(engine.result.findings))
    return engine.result.findings


async def lint_files(settings: LintSettings) -> List[Finding]:
    """Lint every configured file concurrently.

    Findings are concatenated in the order the files were given, not the order
    their reads complete. The first failure propagates; files still in flight
    are left to finish and their results are dropped.
    """

    per_file = await asyncio.gather(*(lint_file(path, settings) for path in settings.files))
    return list(itertools.chain.from_iterable(per_file))


async def lint(options: Optional[Mapping[str, Any]]) -> List[Finding]:
    """Validate raw ``options`` and lint the files they name."""

    settings = LintSettings.from_options(options)
    return await lint_files(settings)


def lint_sync(options: Optional[Mapping[str, Any]]) -> List[Finding]:
    """Blocking variant of :func:`lint` for callers without an event loop."""

    settings = LintSettings.from_options(options)
    return asyncio.run(lint_files(settings))
