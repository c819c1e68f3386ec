# src/googlehosts/hosts/backup_helper.py
import logging
import shutil
from datetime import datetime
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)


def backup_hosts(hosts_path: Path, backup_dir: Path) -> Path:
    backup_dir.mkdir(parents=True, exist_ok=True)
    backup_path = backup_dir / f"hosts_{datetime.now():%Y%m%d_%H%M%S_%f}.bak"
    shutil.copy(hosts_path, backup_path)
    logger.info("Backed up %s to %s", hosts_path, backup_path)
    return backup_path


def restore_latest_backup(hosts_path: Path, backup_dir: Path) -> Optional[Path]:
    backups = sorted(backup_dir.glob("hosts_*.bak"), reverse=True)
    if backups:
        shutil.copy(backups[0], hosts_path)
        logger.info("Restored %s from %s", hosts_path, backups[0])
        return backups[0]
    logger.warning("No backups found in %s", backup_dir)
    return None
