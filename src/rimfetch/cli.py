#!/usr/bin/env python3
"""
RimWorld Workshop Fetcher

Downloads every mod listed in <mods>/mods.txt with SteamCMD and copies it
into the RimWorld mods directory.

Usage:
  rimfetch [options]
  rimfetch -h | --help
  rimfetch -v | --version

Options:
  -m --mods DIR        RimWorld mods directory (holds mods.txt).
  -s --steam DIR       Directory SteamCMD downloads workshop items into,
                       e.g. ~/.local/share/Steam/steamapps/workshop/content/294100
  -c --clean           Delete the staged copy of each mod before downloading.
  -n --names           Name installed mod folders after the mod name
                       instead of the workshop id.
  --steamcmd CMD       SteamCMD command [default: steamcmd].
  --app-id ID          Steam app id [default: 294100].
  --install-dir DIR    Passed to SteamCMD as +force_install_dir.
  --export FILE        Write the parsed mod list to FILE and exit.
  -h --help            Show this screen.
  -v --version         Show version.

mods.txt format:
  <workshop url with ?id=N> <mod name>
  https://steamcommunity.com/sharedfiles/filedetails/?id=2009463077 Harmony

Environment Variables:
  RIMFETCH_MODS_PATH   Used when --mods is not given
  RIMFETCH_STEAM_PATH  Used when --steam is not given

Pathing Preference:
  CLI Argument > Environment Variable
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Optional

from docopt import docopt

from . import __version__, util
from .config import Config
from .exception import MissingPathArgument, RimfetchException
from .manager import Manager
from .modlist import ModListFile

PATH_OPTIONS = [
    ("mods_path", "--mods", "RIMFETCH_MODS_PATH"),
    ("steam_path", "--steam", "RIMFETCH_STEAM_PATH"),
]


def _resolve_path(args: dict, option: str, env_var: str) -> Optional[Path]:
    value = args[option]
    if not value:
        value = os.environ.get(env_var)
    if not value:
        return None
    return util.sanitize_path(value)


def _require(config: Config, attr: str):
    if getattr(config, attr):
        return
    for name, option, env_var in PATH_OPTIONS:
        if name == attr:
            raise MissingPathArgument(
                f"No {option} directory given.\n"
                f"Set the {env_var} environment variable or use {option} DIR."
            )


def parse_options(args: dict) -> Config:
    config = Config()
    for attr, option, env_var in PATH_OPTIONS:
        setattr(config, attr, _resolve_path(args, option, env_var))

    try:
        config.app_id = int(args["--app-id"])
    except ValueError:
        raise RimfetchException(
            f"--app-id must be a number, got {args['--app-id']}"
        ) from None

    if args["--install-dir"]:
        config.install_dir = util.sanitize_path(args["--install-dir"])
    config.steamcmd = args["--steamcmd"]
    config.clean = args["--clean"]
    config.use_names = args["--names"]
    return config


def _load_modlist(config: Config):
    print(f"Loading mods from {config.modlist_path}..")
    entries, errors = ModListFile.read(config.modlist_path)
    for error in errors:
        print(f"Skipping {error}", file=sys.stderr)
    print(f"Found {len(entries)} mods")
    return entries, errors


def export(config: Config, path: Path) -> int:
    _require(config, "mods_path")
    entries, _ = _load_modlist(config)
    try:
        ModListFile.write(path, entries)
    except OSError as e:
        raise RimfetchException(f"Unable to write {path}: {e}") from e
    print(f"Mod list written to {path}")
    return 0


def sync(config: Config) -> int:
    _require(config, "mods_path")
    _require(config, "steam_path")
    manager = Manager(config)
    entries, errors = _load_modlist(config)

    report = manager.sync(entries, errors)

    print()
    print(report.table())
    print()
    if report.ok:
        print("All mods checked out. Bye!")
    else:
        print(
            f"{len(report.installed)} installed, {len(report.failures)} failed, "
            f"{len(report.parse_errors)} lines skipped."
        )
    return 0


def main(argv=None) -> int:
    args = docopt(__doc__, argv=argv, version=__version__)
    try:
        config = parse_options(args)
        if args["--export"]:
            return export(config, util.sanitize_path(args["--export"]))
        return sync(config)
    except RimfetchException as e:
        print(f"Error! {e}", file=sys.stderr)
        return 1


def run():
    sys.exit(main())


if __name__ == "__main__":
    run()
