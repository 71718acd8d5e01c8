import os
import shlex
import shutil
import subprocess
import sys
from pathlib import Path
from typing import Generator, List, Optional, Union


def platform() -> Optional[str]:
    return sys.platform


def execute(cmd: List[str]) -> Generator[str, None, None]:
    # Raises CalledProcessError once output is drained if the return code is non-zero
    with subprocess.Popen(
        cmd,
        stdout=subprocess.PIPE,
        stderr=subprocess.STDOUT,
        stdin=subprocess.DEVNULL,
        universal_newlines=True,
        errors="replace",
        close_fds=True,
    ) as proc:
        for line in iter(proc.stdout.readline, ""):
            yield line
        if (r := proc.wait()) != 0:
            raise subprocess.CalledProcessError(r, cmd)


def split_command(cmd: str) -> List[str]:
    if platform() != "win32":
        return shlex.split(cmd)
    # non-posix mode keeps backslashes in paths but also keeps the quotes
    return [
        token[1:-1] if len(token) > 1 and token[0] == token[-1] == '"' else token
        for token in shlex.split(cmd, posix=False)
    ]


def copy(source: Path, destination: Path, recursive: bool = False):
    if recursive:
        shutil.copytree(source, destination, symlinks=True)
    else:
        shutil.copy2(source, destination, follow_symlinks=True)


def remove(dest: Path):
    if dest.is_symlink() or dest.is_file():
        dest.unlink()
    else:
        shutil.rmtree(dest)


def is_empty_dir(path: Path) -> bool:
    return not any(path.iterdir())


def is_writable_dir(path: Path) -> bool:
    return path.is_dir() and os.access(path, os.W_OK | os.X_OK)


def sanitize_path(path: Union[str, Path]) -> Path:
    if isinstance(path, Path):
        path = str(path)

    if platform() == "win32":
        path = path.replace('"', "")

    return Path(path).expanduser()
