import os, sys
import argparse
import json
from pathlib import Path

from .utils import Version

DEFAULT_CONFIG = "asset_stager.yml"

class ArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        self.print_help(sys.stderr)
        self.exit(2, '\n%s: error: %s\n' % (self.prog, message))

def _write_report(path: Path, results):
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, 'w') as j:
        json.dump([r.ToDict() for r in results], j, indent=4)

def stage(raw_args):
    from .models import Config
    from .stager import Stager

    parser = ArgumentParser(
        prog = 'asset-stager stage',
    )
    parser.add_argument('names', metavar='NAME', nargs='*', help="packages to stage, defaults to the configured list")
    parser.add_argument('-c', '--config', metavar='PATH', help="config.yml", required=False)
    parser.add_argument('-b', '--base', metavar='PATH', help="working folder the other paths are relative to", required=False)
    parser.add_argument('-r', '--root', metavar='PATH', help="root output folder", required=False)
    parser.add_argument('-p', '--packages-dir', metavar='PATH', help="folder holding <name>/dist", required=False)
    parser.add_argument('-m', '--method', choices=["copytree", "shell"], help="how files are copied", required=False)
    parser.add_argument('--report', metavar='PATH', help="write results as json", required=False)
    parser.add_argument('--detach', action='store_true', default=False, help="don't wait for copies to finish", required=False)
    parser.add_argument('--strict', action='store_true', default=False, help="exit with 1 if any package failed", required=False)
    parser.add_argument('-v', '--verbose', action='store_true', default=False, required=False)

    args = parser.parse_args(raw_args)

    config = Config() if args.config is None else Config.Load(args.config)
    config = Config.FromDict({
        "base": args.base,
        "root": args.root,
        "packages_dir": args.packages_dir,
        "copy_method": args.method,
        "verbose": True if args.verbose else None,
    }, config)

    stager = Stager(config)
    names = args.names if len(args.names) > 0 else None
    if args.detach:
        stager.Stage(names, wait=False)
        return 0

    results = stager.Stage(names)
    if args.report is not None:
        _write_report(Path(args.report), results)
    failed = [r for r in results if not r.Succeeded()]
    stager.log.Info(f"staged [{len(results)-len(failed)}/{len(results)}] packages into [{config.RootDir()}]")
    if args.strict and len(failed) > 0:
        return 1
    return 0

def _copy_assets():
    from .models import Config
    from .stager import Stager

    config = Config.Load(DEFAULT_CONFIG) if os.path.isfile(DEFAULT_CONFIG) else Config()
    return Stager(config).Stage(wait=False)

def copy_assets():
    """zero argument entry point for build steps, copies are not awaited"""
    _copy_assets()

def main_help(args=None):
    print(f"""\
asset-stager v{Version()}

Syntax: asset-stager COMMAND [OPTIONS]

Where COMMAND is one of:
stage

for additional help, use:
asset-stager COMMAND -h/--help
""")
    return 0

def main():
    if len(sys.argv) <= 1:
        main_help()
        return

    code = { # switch
        "stage": stage,
    }.get(
        sys.argv[1],
        main_help # default
    )(sys.argv[2:])
    if code: sys.exit(code)
