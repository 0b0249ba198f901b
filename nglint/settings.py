"""Lint settings normalization and config-file loading."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple

import yaml

from .errors import ConfigurationError
from .utils import read_yaml_file

DEFAULT_CONFIG_FILE = ".nglint.yaml"
DEFAULT_ENCODING = "utf-8"

KNOWN_OPTIONS = frozenset({"files", "ignore_attributes", "file_encoding"})
OPTION_ALIASES = {
    "ignoreAttributes": "ignore_attributes",
    "fileEncoding": "file_encoding",
}


@dataclass(frozen=True)
class LintSettings:
    """Per-invocation configuration shared read-only by every rule."""

    files: Tuple[str, ...] = ()
    ignore_attributes: Tuple[str, ...] = ()
    file_encoding: str = DEFAULT_ENCODING

    @classmethod
    def from_options(cls, options: Optional[Mapping[str, Any]]) -> "LintSettings":
        """Validate a raw options mapping and normalize its fields.

        ``files`` and ``ignore_attributes`` accept either a single value or a
        list/tuple of values. An empty ``files`` list is valid and lints
        nothing.
        """

        if options is None:
            raise ConfigurationError("Empty settings")
        if not isinstance(options, Mapping):
            raise ConfigurationError("Settings must be a mapping")

        options = canonical_options(options)

        files = options.get("files")
        if files is None or files == "":
            raise ConfigurationError("Empty files property")
        if isinstance(files, (str, os.PathLike)):
            files = [files]
        if not isinstance(files, (list, tuple)) or not all(_is_file_name(name) for name in files):
            raise ConfigurationError("files property takes a list of file names")

        ignore = options.get("ignore_attributes")
        if ignore is None:
            ignore = []
        elif isinstance(ignore, str):
            ignore = [ignore]
        elif not isinstance(ignore, (list, tuple)):
            raise ConfigurationError("ignore_attributes property takes a list of attribute names")

        encoding = options.get("file_encoding") or DEFAULT_ENCODING
        if not isinstance(encoding, str):
            raise ConfigurationError("file_encoding property takes an encoding name")

        return cls(
            files=tuple(os.fspath(name) for name in files),
            ignore_attributes=tuple(str(name) for name in ignore),
            file_encoding=encoding,
        )


def _is_file_name(name: Any) -> bool:
    return isinstance(name, (str, os.PathLike)) and isinstance(os.fspath(name), str)


def canonical_options(options: Mapping[str, Any]) -> Dict[str, Any]:
    """Map camelCase spellings onto option names and reject anything unknown."""

    canonical: Dict[str, Any] = {}
    for key, value in options.items():
        name = OPTION_ALIASES.get(key, key)
        if name not in KNOWN_OPTIONS:
            raise ConfigurationError(f"Unknown option {key!r}")
        if name in canonical:
            raise ConfigurationError(f"Option {name!r} given more than once")
        canonical[name] = value
    return canonical


def load_config_file(path: Path) -> dict:
    """Load lint options from a YAML config file; a missing file yields ``{}``.

    Keys are canonicalized so command-line overrides can be merged by name.
    """

    try:
        data = read_yaml_file(path)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Config file at {path} is not valid YAML: {exc}") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"Config file at {path} is not a mapping")
    return canonical_options(data)
