#!/usr/bin/env python3

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import NamedTuple
from urllib.parse import parse_qs, urlsplit

from .error import Err, Ok, Result
from .exception import ModListNotFound
from .mod import ModEntry


class ParseError(NamedTuple):
    lineno: int
    line: str
    reason: str

    def __str__(self):
        return f"line {self.lineno}: {self.reason}: {self.line!r}"


class ModListFormat:
    ID_PARAMETER = "id"

    @classmethod
    def parse_id(cls, url: str) -> Result:
        try:
            query = parse_qs(urlsplit(url).query)
        except ValueError:
            return Err("malformed url")

        values = query.get(cls.ID_PARAMETER)
        if not values:
            return Err(f"no '{cls.ID_PARAMETER}=' parameter in url")

        value = values[0].strip()
        if not value.isdigit() or not value.isascii():
            return Err(f"workshop id '{value}' is not a number")

        workshop_id = int(value)
        if workshop_id <= 0:
            return Err(f"workshop id '{value}' is not positive")
        return Ok(workshop_id)

    @classmethod
    def parse_line(cls, line: str) -> Result:
        parts = line.strip().split(maxsplit=1)
        if not parts:
            return Err("empty line")

        url = parts[0]
        workshop_id = cls.parse_id(url)
        if workshop_id.is_error():
            return workshop_id

        name = parts[1].strip() if len(parts) == 2 else ""
        if not name:
            return Err("missing mod name")

        return Ok(ModEntry(workshop_id.unwrap(), name, url))

    @classmethod
    def parse(cls, text: str) -> tuple[list[ModEntry], list[ParseError]]:
        entries: list[ModEntry] = []
        errors: list[ParseError] = []
        seen: dict[int, int] = {}

        for lineno, line in enumerate(text.splitlines(), start=1):
            if not line.strip():
                continue
            result = cls.parse_line(line)
            if result.is_error():
                errors.append(ParseError(lineno, line, result.unwrap_err()))
                continue

            entry = result.unwrap()
            if entry.workshop_id in seen:
                errors.append(
                    ParseError(
                        lineno,
                        line,
                        f"duplicate of line {seen[entry.workshop_id]}",
                    )
                )
                continue
            seen[entry.workshop_id] = lineno
            entries.append(entry)

        return entries, errors

    @classmethod
    def format(cls, entry: ModEntry) -> str:
        url = entry.url or (
            f"https://steamcommunity.com/sharedfiles/filedetails/?id={entry.workshop_id}"
        )
        return f"{url} {entry.name}"


class ModListFile:
    @staticmethod
    def read(path: Path) -> tuple[list[ModEntry], list[ParseError]]:
        try:
            # utf-8-sig drops the BOM some Windows editors prepend
            text = path.read_text(encoding="utf-8-sig")
        except (OSError, UnicodeDecodeError) as e:
            raise ModListNotFound(f"Unable to read mod list {path}: {e}") from e

        return ModListFormat.parse(text)

    @staticmethod
    def serialize(entries: Sequence[ModEntry]) -> str:
        return "".join(ModListFormat.format(e) + "\n" for e in entries)

    @staticmethod
    def write(path: Path, entries: Sequence[ModEntry]) -> None:
        path.write_text(ModListFile.serialize(entries), encoding="utf-8")
