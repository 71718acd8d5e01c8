#!/usr/bin/env python3

from __future__ import annotations

import re
from dataclasses import dataclass

from .config import MODLIST_FILENAME

INVALID_DIRNAME_CHARS = re.compile(r'[\\/:*?"<>|\x00-\x1f]+')


@dataclass(frozen=True)
class ModEntry:
    workshop_id: int
    name: str
    url: str = ""

    def title(self) -> str:
        return f"{self.name} ({self.workshop_id})"

    def dirname(self, use_names: bool = False) -> str:
        if use_names:
            name = sanitize_dirname(self.name)
            if name and not is_reserved_dirname(name):
                return name
        return str(self.workshop_id)

    def __str__(self):
        return f"<ModEntry: {self.workshop_id} '{self.name}'>"


def sanitize_dirname(name: str) -> str:
    # Windows refuses trailing dots and spaces
    return INVALID_DIRNAME_CHARS.sub("_", name).strip(". ")


def is_reserved_dirname(name: str) -> bool:
    # numeric names would shadow another mod's workshop id folder
    return name.isdigit() or name.casefold() == MODLIST_FILENAME.casefold()
