import logging
from collections.abc import Sequence
from pathlib import Path

from imgtoascii.errors import WriteError

logger = logging.getLogger(__name__)


def write_lines(path: str | Path, lines: Sequence[str]) -> None:
    """Write each line followed by a newline, in order."""
    path = Path(path)
    try:
        with path.open("w", encoding="utf-8", newline="\n") as f:
            for line in lines:
                f.write(line)
                f.write("\n")
    except OSError as e:
        raise WriteError(f"Unable to write {path}: {e.strerror or e}", lines=lines) from e
    logger.debug("Wrote %d lines to %s", len(lines), path)
