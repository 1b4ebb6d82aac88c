"""File-backed record source and sink."""

from pathlib import Path
from typing import Iterable, List, Optional, Union

import structlog

from health_assistant.domain.health_profile.core.exceptions.domain_errors import (
    SourceDecodeError,
    SourceEmptyError,
    SourceMissingError,
)
from health_assistant.domain.health_profile.core.ports.record_source import (
    IRecordStorage,
)
from health_assistant.infrastructure.config import get_data_dir

logger = structlog.get_logger(__name__)


def _drop_trailing_blank(lines: List[str]) -> List[str]:
    while lines and not lines[-1].strip():
        lines.pop()
    return lines


class CsvFileRecordStorage(IRecordStorage):
    """Read and append record lines in plain text files.

    Source names are file names, resolved against base_dir when relative.
    Appending never truncates existing content.
    """

    def __init__(self, base_dir: Optional[Union[str, Path]] = None) -> None:
        """Initialize storage.

        Args:
            base_dir: Directory for relative names (default: HEALTH_DATA_DIR,
                then cwd)
        """
        self.base_dir = Path(base_dir) if base_dir is not None else get_data_dir()

    def resolve(self, name: str) -> Path:
        path = Path(name)
        if self.base_dir is not None and not path.is_absolute():
            path = self.base_dir / path
        return path

    def read_lines(self, name: str) -> List[str]:
        path = self.resolve(name)
        if not path.is_file():
            raise SourceMissingError(name)

        try:
            content = path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            raise SourceDecodeError(name, exc.reason) from exc
        except OSError as exc:
            raise SourceMissingError(name) from exc

        if not content:
            raise SourceEmptyError(name)

        lines = _drop_trailing_blank(content.splitlines())
        logger.debug("Record source read", source=str(path), lines=len(lines))
        return lines

    def append_lines(self, name: str, lines: Iterable[str]) -> None:
        path = self.resolve(name)
        written = 0
        with path.open("a", encoding="utf-8") as handle:
            for line in lines:
                handle.write(line + "\n")
                written += 1
        logger.info("Records appended", destination=str(path), lines=written)
