"""Environment utilities for resolving Docker-style secret files."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterator, List, Tuple

logger = logging.getLogger(__name__)

SECRET_FILE_SUFFIX = "_FILE"


def _pending_secret_files(prefix: str) -> Iterator[Tuple[str, str]]:
    """Yield ``(target, path)`` for every ``KEY_FILE`` whose ``KEY`` is unset."""
    for key, file_path in list(os.environ.items()):
        if not file_path or not key.startswith(prefix):
            continue
        if not key.endswith(SECRET_FILE_SUFFIX):
            continue
        target = key[: -len(SECRET_FILE_SUFFIX)]
        if not os.environ.get(target):
            yield target, file_path


def load_secret_file_variables(prefix: str = "") -> List[str]:
    """
    Expose the contents of ``KEY_FILE`` variables as ``KEY``.

    This lets the heartbeat API key be mounted as a secret
    (``HEARTBEAT_API_KEY_FILE=/run/secrets/heartbeat_key``) instead of being
    passed in clear text. Variables that are already set win over their file
    counterpart. Unreadable files are logged and skipped.

    Args:
        prefix: Only consider variables starting with this prefix.

    Returns:
        The names of the variables that were populated.
    """

    resolved: List[str] = []
    for target, file_path in _pending_secret_files(prefix):
        try:
            secret = Path(file_path).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning(
                "env.secret_file.unreadable",
                extra={
                    "target": target,
                    "path": file_path,
                    "reason": type(exc).__name__,
                },
            )
            continue
        os.environ[target] = secret.strip()
        resolved.append(target)

    return resolved
