import json
import subprocess
from pathlib import Path

import pytest

from crabdrill.project import Crate, RustAnalyzerProject


def test_add_path_only_takes_rust_files():
    project = RustAnalyzerProject()
    project.add_path("exercises/00_intro/intro1.rs")
    project.add_path("exercises/00_intro/README.md")
    project.add_path("exercises/00_intro")
    assert [crate.root_module for crate in project.crates] == [
        str(Path("exercises/00_intro/intro1.rs"))
    ]
    crate = project.crates[0]
    assert crate.edition == "2021"
    assert crate.cfg == ["test"]
    assert crate.deps == []


def test_exercises_to_json_walks_tree(tmp_path):
    (tmp_path / "a").mkdir()
    (tmp_path / "b" / "c").mkdir(parents=True)
    files = [tmp_path / "a" / "one.rs", tmp_path / "b" / "c" / "two.rs", tmp_path / "top.rs"]
    for path in files:
        path.write_text("fn main() {}\n")
    (tmp_path / "a" / "notes.txt").write_text("x")
    project = RustAnalyzerProject()
    project.exercises_to_json(tmp_path)
    roots = [crate.root_module for crate in project.crates]
    assert sorted(roots) == sorted(str(path) for path in files)
    assert roots == sorted(roots)


def test_empty_directory_gives_no_crates(tmp_path):
    project = RustAnalyzerProject()
    project.exercises_to_json(tmp_path)
    assert project.crates == []


def test_write_to_disk_round_trip(tmp_path):
    project = RustAnalyzerProject(sysroot_src="/sysroot", crates=[Crate("ex/a.rs")])
    target = tmp_path / "rust-project.json"
    project.write_to_disk(target)
    raw = target.read_bytes()
    assert json.loads(raw) == project.to_dict()
    assert b", " not in raw
    assert list(json.loads(raw)) == ["sysroot_src", "crates"]
    assert list(json.loads(raw)["crates"][0]) == ["root_module", "edition", "deps", "cfg"]


def test_sysroot_from_environment(monkeypatch):
    monkeypatch.setenv("RUST_SRC_PATH", "/custom/src")
    project = RustAnalyzerProject()
    project.get_sysroot_src()
    assert project.sysroot_src == "/custom/src"


def test_sysroot_from_rustc(monkeypatch, capsys):
    monkeypatch.delenv("RUST_SRC_PATH", raising=False)
    calls = []

    def fake_run(args, **kwargs):
        calls.append(list(args))
        return subprocess.CompletedProcess(args, 0, stdout=b"/opt/toolchain\n", stderr=b"")

    monkeypatch.setattr(subprocess, "run", fake_run)
    project = RustAnalyzerProject()
    project.get_sysroot_src()
    result = Path(project.sysroot_src)
    assert calls == [["rustc", "--print", "sysroot"]]
    assert result.parts[-5:] == ("lib", "rustlib", "src", "rust", "library")
    assert result.parents[4] == Path("/opt/toolchain")
    assert "Determined toolchain: /opt/toolchain" in capsys.readouterr().out


def test_sysroot_without_rustc_raises(monkeypatch):
    monkeypatch.delenv("RUST_SRC_PATH", raising=False)

    def fake_run(args, **kwargs):
        raise FileNotFoundError("rustc")

    monkeypatch.setattr(subprocess, "run", fake_run)
    with pytest.raises(OSError):
        RustAnalyzerProject().get_sysroot_src()