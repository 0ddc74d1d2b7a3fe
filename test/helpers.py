import os
from pathlib import Path
import pytest

def GetHere(file):
    return Path("/".join(os.path.realpath(file).split('/')[:-1]))

# decorator
def ConditionalSkip(file):
    key = f"SKIP_{Path(file).name[len('test_'):-len('.py')].upper()}"
    def _decorated(obj):
        decorator = pytest.mark.skipif(key in os.environ, reason="disabled via environment variable")
        return decorator(obj)
    return _decorated

# writes {relative path: bytes} under folder
def MakeTree(folder: Path, files: dict[str, bytes]):
    for rel, content in files.items():
        p = folder.joinpath(rel)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_bytes(content)
    return folder

def ReadTree(folder: Path):
    return {
        str(p.relative_to(folder)): p.read_bytes()
        for p in sorted(folder.rglob("*")) if p.is_file()
    }
