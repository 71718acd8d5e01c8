#!/usr/bin/env python3

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from tabulate import tabulate

from . import util
from .config import Config
from .error import Err, Ok, Result
from .exception import InvalidDirectory
from .mod import ModEntry
from .modlist import ParseError
from .steam import SteamDownloader


@dataclass
class SyncReport:
    installed: List[ModEntry] = field(default_factory=list)
    failures: List[Tuple[ModEntry, str]] = field(default_factory=list)
    parse_errors: Sequence[ParseError] = ()

    @property
    def ok(self) -> bool:
        return not self.failures and not self.parse_errors

    def table(self) -> str:
        rows = [[m.workshop_id, m.name, "installed"] for m in self.installed]
        rows += [[m.workshop_id, m.name, f"failed: {r}"] for m, r in self.failures]
        rows += [
            ["", e.line.strip()[:40], f"skipped: {e.reason}"] for e in self.parse_errors
        ]
        return tabulate(rows, headers=["id", "name", "status"])


class Manager:
    def __init__(self, config: Config):
        if not isinstance(config, Config):
            raise Exception("Must pass Config object to Manager")
        if not config.mods_path or not config.mods_path.is_dir():
            raise InvalidDirectory(
                f"Mods directory {config.mods_path} expected to be a directory and exist"
            )
        if not util.is_writable_dir(config.mods_path):
            raise InvalidDirectory(f"Mods directory {config.mods_path} is not writable")
        if not config.steam_path or not config.steam_path.is_dir():
            raise InvalidDirectory(
                f"Steam directory {config.steam_path} expected to be a directory and exist"
            )
        self.config = config
        self.downloader = SteamDownloader(config)

    def install_mod(self, entry: ModEntry, dirname: Optional[str] = None) -> Result:
        source = self.downloader.staged_path(entry)
        if not source.is_dir() or util.is_empty_dir(source):
            return Err(f"nothing downloaded to {source}")

        if dirname is None:
            dirname = entry.dirname(self.config.use_names)
        dest_path = self.config.mods_path / dirname
        try:
            if dest_path.exists() or dest_path.is_symlink():
                print(f"Replacing {dest_path}")
                util.remove(dest_path)
            util.copy(source, dest_path, recursive=True)
        except OSError as e:
            return Err(f"unable to copy {source} to {dest_path}: {e}")
        return Ok(dest_path)

    def claim_dirname(self, entry: ModEntry, taken: Dict[str, ModEntry]) -> str:
        """Destination folder for entry, unique within one run.

        Keys are casefolded since Windows and macOS folders ignore case. A
        display name already claimed by an earlier entry falls back to the
        workshop id, which the parser guarantees is unique.
        """
        dirname = entry.dirname(self.config.use_names)
        owner = taken.get(dirname.casefold())
        if owner is not None and owner != entry:
            print(
                f"Folder {dirname} already used by {owner.title()}, "
                f"installing {entry.title()} as {entry.workshop_id}",
                file=sys.stderr,
            )
            dirname = str(entry.workshop_id)
        taken[dirname.casefold()] = entry
        return dirname

    def sync(
        self, entries: Iterable[ModEntry], parse_errors: Sequence[ParseError] = ()
    ) -> SyncReport:
        report = SyncReport(parse_errors=parse_errors)
        taken: Dict[str, ModEntry] = {}
        for entry in entries:
            dirname = self.claim_dirname(entry, taken)
            result = self.downloader.download(entry).and_then(
                lambda e: self.install_mod(e, dirname)
            )

            if result.is_error():
                reason = result.unwrap_err()
                print(f"Unable to install {entry.title()}: {reason}", file=sys.stderr)
                report.failures.append((entry, reason))
            else:
                print(f"Installed {entry.title()}")
                report.installed.append(entry)
        return report
