#!/usr/bin/env python3

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

RIMWORLD_APP_ID = 294100
MODLIST_FILENAME = "mods.txt"


@dataclass
class Config:
    mods_path: Optional[Path] = None
    steam_path: Optional[Path] = None
    steamcmd: str = "steamcmd"
    app_id: int = RIMWORLD_APP_ID
    install_dir: Optional[Path] = None
    clean: bool = False
    use_names: bool = False

    @property
    def modlist_path(self) -> Optional[Path]:
        if not self.mods_path:
            return None
        return self.mods_path / MODLIST_FILENAME
