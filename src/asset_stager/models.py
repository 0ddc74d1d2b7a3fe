from __future__ import annotations
import os
from dataclasses import dataclass, field
from pathlib import Path
import yaml

from .copiers import COPY_METHODS
from .utils import AbsPath

DEFAULT_PACKAGES = ["ffmpeg", "util", "core"]
DEFAULT_ROOT = Path("public/assets")
DEFAULT_PACKAGES_DIR = Path("../../packages")
DIST_FOLDER = "dist"
PACKAGE_FOLDER = "package"

def _names(raw):
    if isinstance(raw, str):
        raw = [n.strip() for n in raw.split(",")]
    if not isinstance(raw, list):
        raise ValueError(f"packages must be a list of names, got [{raw}]")
    names = [str(n) for n in raw if str(n) != ""]
    for n in names:
        if "/" in n or n in {".", ".."}:
            raise ValueError(f"invalid package name [{n}]")
    if len(set(names)) != len(names):
        raise ValueError(f"duplicate package name in [{', '.join(names)}]")
    return names

def _method(raw):
    m = str(raw)
    if m not in COPY_METHODS:
        raise ValueError(f"unknown copy method [{m}], expected one of [{', '.join(COPY_METHODS)}]")
    return m

@dataclass
class Config:
    base: Path = field(default_factory=lambda: Path(os.path.abspath("./")))
    root: Path = DEFAULT_ROOT
    packages_dir: Path = DEFAULT_PACKAGES_DIR
    packages: list[str] = field(default_factory=lambda: DEFAULT_PACKAGES.copy())
    copy_method: str = "copytree"
    log_file: Path|None = None
    verbose: bool = False

    def RootDir(self):
        return AbsPath(self.root, self.base)

    def PackagesDir(self):
        return AbsPath(self.packages_dir, self.base)

    def LogFile(self):
        return None if self.log_file is None else AbsPath(self.log_file, self.base)

    def MakeRefs(self, names: list[str]|None=None):
        names = self.packages if names is None else _names(names)
        return [PackageRef.Make(n, self.PackagesDir(), self.RootDir()) for n in names]

    @classmethod
    def FromDict(cls, raw: dict, default: Config|None=None):
        c = Config() if default is None else default
        for k, v in c.__dataclass_fields__.items():
            if k not in raw: continue
            if raw[k] is None and k != "log_file": continue
            constr = {
                "base": lambda p: Path(os.path.abspath(p)),
                "root": Path,
                "packages_dir": Path,
                "packages": _names,
                "copy_method": _method,
                "log_file": lambda p: None if p is None else Path(p),
                "verbose": bool,
            }.get(v.name, str)
            setattr(c, k, constr(raw[k]))
        return c

    @classmethod
    def Load(cls, config_file: Path|str):
        config_file = Path(config_file)
        assert config_file.exists(), f"config [{config_file}] doesn't exist"
        assert config_file.is_file(),f"config [{config_file}] isn't a file"
        here = os.getcwd()
        os.chdir(config_file.parent)
        c = Config()
        try:
            with open(config_file.name) as y:
                d = yaml.safe_load(y)
                if d is None: d = {}
                c = cls.FromDict(d, c)
        finally:
            os.chdir(here)
        return c

@dataclass(frozen=True)
class PackageRef:
    name: str
    source: Path
    destination: Path

    @classmethod
    def Make(cls, name: str, packages_dir: Path|str, root_dir: Path|str):
        return PackageRef(
            name = name,
            source = Path(packages_dir).joinpath(name, DIST_FOLDER),
            destination = Path(root_dir).joinpath(name, PACKAGE_FOLDER),
        )

@dataclass
class StageResult:
    package: str
    source: Path
    destination: Path
    files_copied: int = 0
    error_message: str|None = None

    def Succeeded(self):
        return self.error_message is None

    def ToDict(self):
        d = self.__dict__.copy()
        d["source"] = str(self.source)
        d["destination"] = str(self.destination)
        return d

    @classmethod
    def FromDict(cls, raw: dict):
        kwargs = {}
        for k in cls.__dataclass_fields__:
            assert k in raw, f"missing [{k}]"
            if k in {"source", "destination"}:
                kwargs[k] = Path(raw[k])
            else:
                kwargs[k] = raw[k]
        return StageResult(**kwargs)
