import sys
from pathlib import Path

from .utils import StdTime

class Log:
    def __init__(self, log_file: Path|str|None=None, verbose: bool=False) -> None:
        self.log_file = None if log_file is None else Path(log_file)
        self.verbose = verbose

    def _write(self, line: str):
        if self.log_file is None: return
        try:
            with open(self.log_file, 'a') as log:
                log.write(f'{line}\n')
        except FileNotFoundError:
            self.log_file.parent.mkdir(parents=True, exist_ok=True)
            with open(self.log_file, 'w') as log:
                log.write(f'{line}\n')

    def _emit(self, msg: str, stream):
        line = f"{StdTime.Header()} {msg}"
        print(line, file=stream, flush=True)
        self._write(line)
        return line

    def Info(self, msg: str):
        return self._emit(msg, sys.stdout)

    def Debug(self, msg: str):
        if not self.verbose: return None
        return self._emit(msg, sys.stdout)

    def Error(self, msg: str):
        return self._emit(f"ERROR: {msg}", sys.stderr)
