import os, sys
import json
import pytest

from asset_stager import cli
from asset_stager.utils import Version
from helpers import ConditionalSkip, MakeTree, ReadTree

@ConditionalSkip(__file__)
class Test_cli:
    @pytest.fixture
    def site(self, tmp_path):
        MakeTree(tmp_path.joinpath("packages/a/dist"), {"x.txt": b"a"})
        MakeTree(tmp_path.joinpath("packages/b/dist"), {"y.bin": b"\x00b"})
        site = tmp_path.joinpath("site")
        site.mkdir()
        return site

    def _args(self, site, *rest):
        return ["-b", str(site), "-p", "../packages", *rest]

    def test_stage(self, site):
        code = cli.stage(self._args(site, "a", "b"))
        assert code == 0
        assert ReadTree(site.joinpath("public/assets/a/package")) == {"x.txt": b"a"}
        assert ReadTree(site.joinpath("public/assets/b/package")) == {"y.bin": b"\x00b"}

    def test_failure_keeps_exit_code(self, site, capsys):
        assert cli.stage(self._args(site, "a", "c")) == 0
        assert "c failed" in capsys.readouterr().err
        assert site.joinpath("public/assets/a/package/x.txt").exists()

    def test_strict(self, site):
        assert cli.stage(self._args(site, "--strict", "a", "c")) == 1
        assert cli.stage(self._args(site, "--strict", "a")) == 0

    def test_report(self, site):
        report = site.joinpath("reports/staged.json")
        cli.stage(self._args(site, "-r", "out", "--report", str(report), "a", "c"))
        with open(report) as j:
            results = json.load(j)
        assert [r["package"] for r in results] == ["a", "c"]
        assert results[0]["error_message"] is None
        assert results[1]["error_message"] is not None
        assert site.joinpath("out/a/package/x.txt").exists()

    def test_config_file(self, site):
        cfg = site.joinpath("stage.yml")
        cfg.write_text("packages_dir: ../packages\npackages: [b]\ncopy_method: shell\n")
        assert cli.stage(["-c", str(cfg)]) == 0
        assert site.joinpath("public/assets/b/package/y.bin").read_bytes() == b"\x00b"
        assert not site.joinpath("public/assets/a").exists()

    def test_bad_method(self, site):
        with pytest.raises(SystemExit) as e:
            cli.stage(self._args(site, "-m", "rsync"))
        assert e.value.code == 2

    def test_copy_assets_uses_local_config(self, site, monkeypatch):
        site.joinpath(cli.DEFAULT_CONFIG).write_text("packages_dir: ../packages\npackages: [a]\n")
        monkeypatch.chdir(site)
        run = cli._copy_assets()
        results = run.Wait(timeout=10)
        assert [r.package for r in results] == ["a"]
        assert site.joinpath("public/assets/a/package/x.txt").read_bytes() == b"a"

    def test_verbose(self, site, capsys):
        assert cli.stage(self._args(site, "-v", "a")) == 0
        assert "a completed, [1] files" in capsys.readouterr().out

    def test_main_help(self, capsys, monkeypatch):
        monkeypatch.setattr(sys, "argv", ["asset-stager"])
        cli.main()
        out = capsys.readouterr().out
        assert f"v{Version()}" in out
        assert "stage" in out

    def test_main_strict_exit(self, site, monkeypatch):
        monkeypatch.setattr(sys, "argv", ["asset-stager", "stage", *self._args(site, "--strict", "missing")])
        with pytest.raises(SystemExit) as e:
            cli.main()
        assert e.value.code == 1
