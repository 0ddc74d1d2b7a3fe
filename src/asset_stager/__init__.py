from .models import Config, PackageRef, StageResult
from .stager import Stager, StagingRun, StageAssets
from .copiers import CopyError, CopyTree, ShellCopy, GetCopier
from .log import Log
