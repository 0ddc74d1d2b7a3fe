import os
from datetime import datetime as dt
from pathlib import Path

def GetModuleRoot():
    return Path("/".join(os.path.realpath(__file__).split('/')[:-1]))

def Version():
    with open(GetModuleRoot().joinpath("version.txt")) as v:
        return v.readline().strip()

def AbsPath(p: Path|str, relative_to: Path|str|None=None):
    p = Path(p)
    if relative_to is not None and not p.is_absolute():
        p = Path(relative_to).joinpath(p)
    return Path(os.path.abspath(p))

class StdTime:
    SHORT_FORMAT = '%H:%M:%S'

    @classmethod
    def Header(cls, timestamp: dt|None = None):
        ts = dt.now() if timestamp is None else timestamp
        return f"{ts.strftime(StdTime.SHORT_FORMAT)}>"
