import os
import shutil
import subprocess
from pathlib import Path
from typing import Callable

class CopyError(Exception):
    def __init__(self, message=""):
        self.message = message
        super().__init__(self.message)

Copier = Callable[[Path, Path], int]

def _check_source(source: Path):
    if not source.exists():
        raise CopyError(f"source [{source}] doesn't exist")
    if not source.is_dir():
        raise CopyError(f"source [{source}] isn't a folder")

def _count_files(folder: Path):
    return sum(len(files) for _, _, files in os.walk(folder, followlinks=True))

def CopyTree(source: Path, destination: Path) -> int:
    """copies the contents of source into destination, overwriting existing files"""
    source, destination = Path(source), Path(destination)
    _check_source(source)
    try:
        shutil.copytree(source, destination, dirs_exist_ok=True)
    except (shutil.Error, OSError) as e:
        raise CopyError(str(e))
    return _count_files(source)

def ShellCopy(source: Path, destination: Path) -> int:
    """same as CopyTree, but shells out to cp"""
    source, destination = Path(source), Path(destination)
    _check_source(source)
    proc = subprocess.run(
        ["cp", "-r", f"{source}/.", f"{destination}/"],
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
    )
    if proc.returncode != 0:
        err = proc.stderr.decode("utf-8", errors="replace").strip()
        raise CopyError(f"cp exited with [{proc.returncode}]: {err}")
    return _count_files(source)

COPY_METHODS: dict[str, Copier] = {
    "copytree": CopyTree,
    "shell": ShellCopy,
}

def GetCopier(method: str) -> Copier:
    if method not in COPY_METHODS:
        raise ValueError(f"unknown copy method [{method}], expected one of [{', '.join(COPY_METHODS)}]")
    return COPY_METHODS[method]
