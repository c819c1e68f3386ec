# src/googlehosts/hosts/config.py

import platform
from pathlib import Path

from .section_editor import MarkerPair

SYSTEM = platform.system()
HOSTS_PATH = Path("/etc/hosts") if SYSTEM != "Windows" else Path(r"C:\Windows\System32\drivers\etc\hosts")
V4_SOURCE_PATH = Path("data/v4/hosts")
V6_SOURCE_PATH = Path("data/v6/hosts")
BACKUP_DIR = Path.home() / ".googlehosts_backups"

IPV4_MARKERS = MarkerPair("# BEGIN GoogleHosts IPV4", "# END GoogleHosts IPV4")
IPV6_MARKERS = MarkerPair("# BEGIN GoogleHosts IPV6", "# END GoogleHosts IPV6")
