"""Chat data loaded from a JSON or YAML file."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Literal

import structlog
import yaml

from ...models.chat import ChatData
from ...utils.errors import ChatDataError
from ...utils.logging import LogEventNames
from .parsing import parse_chat_data

log = structlog.get_logger()

DataFormat = Literal["auto", "json", "yaml"]

SUFFIX_FORMATS: dict[str, Literal["json", "yaml"]] = {
    ".json": "json",
    ".yaml": "yaml",
    ".yml": "yaml",
}


def detect_format(path: Path) -> Literal["json", "yaml"]:
    """Pick the file format from the path suffix.

    Raises:
        ValueError: If the suffix is not a known chat data format
    """
    try:
        return SUFFIX_FORMATS[path.suffix.lower()]
    except KeyError:
        raise ValueError(
            f"Cannot detect chat data format of {path}; expected one of "
            f"{', '.join(sorted(SUFFIX_FORMATS))}"
        ) from None


class FileDataSource:
    """Reads chat data from a file on disk.

    Example:
        source = FileDataSource(Path("chat.json"))
        data = source.load()
    """

    def __init__(self, path: Path, data_format: DataFormat = "auto") -> None:
        """Initialize the file data source.

        Args:
            path: Chat data file
            data_format: "json", "yaml", or "auto" to detect from the suffix
        """
        self._path = path
        self._format = detect_format(path) if data_format == "auto" else data_format

    @property
    def path(self) -> Path:
        """Path of the backing file."""
        return self._path

    def load(self) -> ChatData:
        """Read, decode and parse the file.

        Raises:
            FileNotFoundError: If the file doesn't exist
            ChatDataError: If the file cannot be decoded or has the wrong shape
        """
        if not self._path.exists():
            raise FileNotFoundError(f"Chat data file not found: {self._path}")

        with self._path.open(encoding="utf-8") as f:
            raw_text = f.read()

        try:
            if self._format == "json":
                raw = json.loads(raw_text)
            else:
                raw = yaml.safe_load(raw_text)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise ChatDataError(f"Could not decode {self._path}: {e}") from e

        data = parse_chat_data(raw)
        log.debug(
            LogEventNames.CHAT_DATA_FILE_READ,
            path=str(self._path),
            message_count=len(data.messages),
        )
        return data
