"""Locating resource files and stripping their comments."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Tuple, Union

from namelang.config import LangConfig
from namelang.errors import ResourceDecodeError, ResourceNotFoundError


def resolve_resource(resource_id: Union[str, Path], config: LangConfig) -> Path:
    """
    Find the file behind a resource identifier.

    An identifier naming an existing file is used as-is; anything else is looked up
    under ``config.resource_dir``.

    Raises:
        ResourceNotFoundError: naming the path that was expected to exist.
    """
    direct = Path(resource_id)
    if direct.is_file():
        logging.debug(f"Resolved resource '{resource_id}' to {direct}")
        return direct

    candidate = config.resource_dir / str(resource_id)
    if candidate.is_file():
        logging.debug(f"Resolved resource '{resource_id}' to {candidate}")
        return candidate

    raise ResourceNotFoundError(candidate)


def read_resource_lines(resource_id: Union[str, Path], config: LangConfig) -> List[str]:
    path = resolve_resource(resource_id, config)
    try:
        text = path.read_text(encoding=config.encoding)
    except FileNotFoundError as e:
        # Removed between resolution and read
        raise ResourceNotFoundError(path) from e
    except UnicodeDecodeError as e:
        raise ResourceDecodeError(str(resource_id), config.encoding, str(e)) from e
    return text.splitlines()


def iter_logical_lines(
    raw_lines: Iterable[str], config: Optional[LangConfig] = None
) -> Iterator[Tuple[int, str, str]]:
    """
    Yield ``(line_number, raw_line, cleaned_line)`` for every line that carries content.

    - ``//`` and everything after it is discarded
    - a line starting with ``/*`` opens a block comment, which swallows every line up
      to and including the next line ending with ``*/``
    - lines that are blank after trimming are skipped

    Line numbers are 1-based.
    """
    config = config or LangConfig.create_default()
    in_block_comment = False

    for line_number, raw_line in enumerate(raw_lines, start=1):
        if in_block_comment:
            if raw_line.rstrip().endswith(config.block_comment_end):
                in_block_comment = False
            continue

        if raw_line.startswith(config.block_comment_start):
            in_block_comment = True
            continue

        line = raw_line
        comment_at = line.find(config.line_comment)
        if comment_at >= 0:
            line = line[:comment_at]

        line = line.strip()
        if not line:
            continue

        yield line_number, raw_line, line
