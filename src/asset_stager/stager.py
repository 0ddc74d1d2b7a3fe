from __future__ import annotations
import os
from pathlib import Path
from threading import Condition, Thread
from typing import Iterable

from .copiers import CopyError, GetCopier, Copier
from .log import Log
from .models import Config, PackageRef, StageResult

class Sync:
    def __init__(self, expected: int) -> None:
        self.lock = Condition()
        self.expected = expected
        self.results: dict[int, StageResult] = {}

    def PushNotify(self, index: int, result: StageResult):
        with self.lock:
            self.results[index] = result
            self.lock.notify_all()

    def IsDone(self):
        with self.lock:
            return len(self.results) >= self.expected

    def WaitAll(self, timeout: float|None=None):
        with self.lock:
            self.lock.wait_for(lambda: len(self.results) >= self.expected, timeout)
            return self.results.copy()

class StagingRun:
    """handle to copies that were started without waiting"""

    def __init__(self, refs: list[PackageRef], sync: Sync) -> None:
        self.refs = refs
        self._sync = sync

    def IsDone(self):
        return self._sync.IsDone()

    def Wait(self, timeout: float|None=None) -> list[StageResult]:
        # results in the order the packages were given; unfinished ones are left out
        done = self._sync.WaitAll(timeout)
        return [done[i] for i in range(len(self.refs)) if i in done]

    def Failed(self) -> list[StageResult]:
        return [r for r in self.Wait(timeout=0) if not r.Succeeded()]

def _ensure_dir(folder: Path):
    # failures here are not caught, a missing output folder should end the run
    os.makedirs(folder, exist_ok=True)

class Stager:
    def __init__(self, config: Config|None=None, log: Log|None=None, copier: Copier|None=None) -> None:
        self.config = Config() if config is None else config
        self.log = Log(self.config.LogFile(), self.config.verbose) if log is None else log
        self._copy = GetCopier(self.config.copy_method) if copier is None else copier

    def _copy_async(self, index: int, ref: PackageRef, sync: Sync):
        def _job():
            result = StageResult(ref.name, ref.source, ref.destination, error_message="copy didn't finish")
            try:
                try:
                    n = self._copy(ref.source, ref.destination)
                    result = StageResult(ref.name, ref.source, ref.destination, files_copied=n)
                except CopyError as e:
                    result = StageResult(ref.name, ref.source, ref.destination, error_message=e.message)
                except Exception as e:
                    result = StageResult(ref.name, ref.source, ref.destination, error_message=str(e))

                if result.Succeeded():
                    self.log.Debug(f"{ref.name} completed, [{result.files_copied}] files")
                else:
                    self.log.Error(f"{ref.name} failed: [{result.error_message}]")
            finally:
                # a failing log must not leave Wait() blocked
                sync.PushNotify(index, result)

        th = Thread(target=_job)
        th.start()
        return th

    def Stage(self, package_names: Iterable[str]|None=None, wait: bool=True):
        if isinstance(package_names, str): package_names = [package_names]
        refs = self.config.MakeRefs(None if package_names is None else list(package_names))

        _ensure_dir(self.config.RootDir())
        sync = Sync(len(refs))
        for i, ref in enumerate(refs):
            _ensure_dir(ref.destination)
            self.log.Info(f"cp {ref.source} {ref.destination}/")
            self._copy_async(i, ref, sync)

        run = StagingRun(refs, sync)
        if not wait:
            return run
        return run.Wait()

def StageAssets(package_names: Iterable[str], root_dir: Path|str, base: Path|str|None=None,
    packages_dir: Path|str|None=None, log: Log|None=None, copier: Copier|None=None) -> list[StageResult]:
    c = Config()
    if base is not None: c.base = Path(os.path.abspath(base))
    c.root = Path(root_dir)
    if packages_dir is not None: c.packages_dir = Path(packages_dir)
    return Stager(c, log=log, copier=copier).Stage(package_names)
