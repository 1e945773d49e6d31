"""Writing GitHub Actions step outputs."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional


logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


def write_outputs(path: Optional[Path], **values: str) -> None:
    """Append ``key=value`` lines to the step output file at ``path``.

    Keyword names use underscores where GitHub output names use dashes,
    so ``new_version`` is written as ``new-version``. Nothing is written
    when ``path`` is None (e.g. when running outside GitHub Actions).
    """
    if path is None:
        logger.debug("No output file configured; skipping outputs %s", values)
        return
    lines = "".join(f"{key.replace('_', '-')}={value}\n" for key, value in values.items())
    with open(path, "a", encoding="utf-8") as handle:
        handle.write(lines)
