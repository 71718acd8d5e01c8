#!/usr/bin/env python3

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import List

from . import util
from .config import Config
from .error import Err, Ok, Result
from .mod import ModEntry


class SteamDownloader:
    """Runs SteamCMD once per mod entry, one entry at a time.

    SteamCMD is expected to leave each item in ``<steam_path>/<workshop_id>``.
    It does not always exit non-zero when a download fails, so its output is
    also scanned for the ``ERROR! Download item`` line.
    """

    def __init__(self, config: Config):
        self.config = config

    def query(self, entry: ModEntry) -> List[str]:
        cmd = util.split_command(self.config.steamcmd)
        if self.config.install_dir:
            cmd += ["+force_install_dir", str(self.config.install_dir)]
        cmd += [
            "+login",
            "anonymous",
            "+workshop_download_item",
            str(self.config.app_id),
            str(entry.workshop_id),
            "+quit",
        ]
        return cmd

    def staged_path(self, entry: ModEntry) -> Path:
        return self.config.steam_path / str(entry.workshop_id)

    def download(self, entry: ModEntry) -> Result:
        staged = self.staged_path(entry)
        if self.config.clean and (staged.exists() or staged.is_symlink()):
            print(f"Removing {staged} from steam folder (clean)")
            try:
                util.remove(staged)
            except OSError as e:
                return Err(f"unable to remove {staged}: {e}")

        print(f"Downloading {entry.title()}...")
        print("-----------------------------")

        failed_marker = f"ERROR! Download item {entry.workshop_id} failed"
        error_line = None
        try:
            for line in util.execute(self.query(entry)):
                line = line.rstrip("\r\n")
                print(f"Steam -> {line}")
                if line.startswith(failed_marker):
                    error_line = line
        except subprocess.CalledProcessError as e:
            return Err(f"steamcmd exited with status {e.returncode}")
        except OSError as e:
            return Err(f"unable to run steamcmd: {e}")
        finally:
            print("-----------------------------")

        if error_line:
            return Err(error_line)
        return Ok(entry)
