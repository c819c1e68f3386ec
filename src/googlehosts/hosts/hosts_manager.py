# src/googlehosts/hosts/hosts_manager.py
"""Read the hosts file, apply the requested section edits, write it back once.

Operations always run in the order update-v4, update-v6, remove-v4,
remove-v6, each against the result of the previous one. The target is
written only after every read and every edit has succeeded.
"""

from __future__ import annotations

import logging
import os
import shutil
import tempfile
from enum import Enum
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

from . import section_editor
from .backup_helper import backup_hosts
from .config import HOSTS_PATH, IPV4_MARKERS, IPV6_MARKERS, V4_SOURCE_PATH, V6_SOURCE_PATH

logger = logging.getLogger(__name__)


class Operation(str, Enum):
    # Declaration order is execution order.
    UPDATE_V4 = "update-v4"
    UPDATE_V6 = "update-v6"
    REMOVE_V4 = "remove-v4"
    REMOVE_V6 = "remove-v6"


class InvalidOperationError(ValueError):
    def __init__(self, token: str):
        self.token = token
        super().__init__(f"Invalid option: {token}")


def parse_operations(tokens: Iterable[str]) -> List[Operation]:
    """Validate every token, then return the operations in execution order."""
    requested = set()
    for token in tokens:
        try:
            requested.add(Operation(token))
        except ValueError:
            raise InvalidOperationError(token) from None
    return [op for op in Operation if op in requested]


def read_lines(path: Path) -> List[str]:
    with open(path, "r", encoding="utf-8") as f:
        return [line.rstrip("\n") for line in f]


def write_lines(path: Path, lines: Sequence[str], atomic: bool = True) -> None:
    """Write ``lines`` to ``path``, each terminated by a newline.

    In atomic mode the content goes to a temporary file next to ``path``
    which then replaces it, so readers never see a half-written file.
    A symlinked ``path`` is resolved first; the file it points to is replaced.
    """
    data = "".join(f"{line}\n" for line in lines)
    if not atomic:
        with open(path, "w", encoding="utf-8") as f:
            f.write(data)
        return

    target = Path(os.path.realpath(path))
    tmp_path = None
    try:
        with tempfile.NamedTemporaryFile(
            mode="w",
            encoding="utf-8",
            delete=False,
            dir=str(target.parent),
            prefix=f".{target.name}.",
            suffix=".tmp",
        ) as tmp:
            tmp_path = tmp.name
            tmp.write(data)
            tmp.flush()
            os.fsync(tmp.fileno())
        if target.exists():
            shutil.copymode(target, tmp_path)
        os.replace(tmp_path, target)
    except BaseException:
        if tmp_path is not None and os.path.exists(tmp_path):
            os.unlink(tmp_path)
        raise


def apply_operations(
    lines: Sequence[str],
    operations: Iterable[Operation],
    v4_lines: Sequence[str] = (),
    v6_lines: Sequence[str] = (),
) -> List[str]:
    requested = set(operations)
    result = list(lines)
    for op in Operation:
        if op not in requested:
            continue
        if op is Operation.UPDATE_V4:
            result = section_editor.upsert(result, IPV4_MARKERS, v4_lines)
        elif op is Operation.UPDATE_V6:
            result = section_editor.upsert(result, IPV6_MARKERS, v6_lines)
        elif op is Operation.REMOVE_V4:
            result = section_editor.remove(result, IPV4_MARKERS)
        elif op is Operation.REMOVE_V6:
            result = section_editor.remove(result, IPV6_MARKERS)
        logger.debug("Applied %s (%d lines)", op.value, len(result))
    return result


def manage_hosts(
    operations: Iterable[Operation],
    hosts_path: Path = HOSTS_PATH,
    v4_path: Path = V4_SOURCE_PATH,
    v6_path: Path = V6_SOURCE_PATH,
    backup_dir: Optional[Path] = None,
    dry_run: bool = False,
    atomic: bool = True,
) -> List[str]:
    """Apply ``operations`` to the hosts file and return the resulting lines.

    Only the source files needed by the requested updates are read. A backup
    is taken into ``backup_dir`` before writing when one is given. With
    ``dry_run`` nothing is backed up or written.
    """
    operations = list(operations)
    lines = read_lines(hosts_path)
    v4_lines = read_lines(v4_path) if Operation.UPDATE_V4 in operations else []
    v6_lines = read_lines(v6_path) if Operation.UPDATE_V6 in operations else []
    logger.info(
        "Loaded %s (%d lines), IPv4 source %d lines, IPv6 source %d lines",
        hosts_path,
        len(lines),
        len(v4_lines),
        len(v6_lines),
    )

    result = apply_operations(lines, operations, v4_lines, v6_lines)

    if dry_run:
        logger.info("Dry run; %s left untouched", hosts_path)
        return result

    if backup_dir is not None:
        backup_hosts(hosts_path, backup_dir)
    write_lines(hosts_path, result, atomic=atomic)
    logger.info("Wrote %d lines to %s", len(result), hosts_path)
    return result
