"""
Tests for the generate use case and generated file persistence.
"""

import os
import stat
import textwrap
from pathlib import Path
from typing import Callable

import pytest

from src.core.models.template import GeneratedFile
from src.core.persistence.generated_files import GenerationWriteError, write_generated_file
from src.core.use_cases.generate import run_generate


class TestWriteGeneratedFile:
    def test_writes_new_file(self, tmp_path: Path):
        file = GeneratedFile(path="A.g.cs", content="a\n")
        assert write_generated_file(tmp_path, file) == "written"
        assert (tmp_path / "A.g.cs").read_text(encoding="utf-8") == "a\n"

    def test_creates_parent_dirs(self, tmp_path: Path):
        file = GeneratedFile(path="nested/A.g.cs", content="a\n")
        write_generated_file(tmp_path / "out", file)
        assert (tmp_path / "out" / "nested" / "A.g.cs").is_file()

    def test_unchanged_leaves_file_alone(self, tmp_path: Path):
        target = tmp_path / "A.g.cs"
        target.write_text("a\n", encoding="utf-8")
        mtime = target.stat().st_mtime_ns
        file = GeneratedFile(path="A.g.cs", content="a\n")
        assert write_generated_file(tmp_path, file) == "unchanged"
        assert target.stat().st_mtime_ns == mtime

    def test_overwrites_different_content(self, tmp_path: Path):
        (tmp_path / "A.g.cs").write_text("old\n", encoding="utf-8")
        file = GeneratedFile(path="A.g.cs", content="new\n")
        assert write_generated_file(tmp_path, file) == "written"
        assert (tmp_path / "A.g.cs").read_text(encoding="utf-8") == "new\n"

    def test_skips_when_overwrite_disabled(self, tmp_path: Path):
        (tmp_path / "A.g.cs").write_text("old\n", encoding="utf-8")
        file = GeneratedFile(path="A.g.cs", content="new\n", overwrite=False)
        assert write_generated_file(tmp_path, file) == "skipped"
        assert (tmp_path / "A.g.cs").read_text(encoding="utf-8") == "old\n"

    def test_undecodable_file_is_replaced(self, tmp_path: Path):
        target = tmp_path / "A.g.cs"
        target.write_bytes(b"\xff\xfe garbage")
        file = GeneratedFile(path="A.g.cs", content="a\n")
        assert write_generated_file(tmp_path, file) == "written"
        assert target.read_bytes() == b"a\n"

    def test_crlf_file_is_rewritten(self, tmp_path: Path):
        target = tmp_path / "A.g.cs"
        target.write_bytes(b"a\r\nb\r\n")
        file = GeneratedFile(path="A.g.cs", content="a\nb\n")
        assert write_generated_file(tmp_path, file) == "written"
        assert target.read_bytes() == b"a\nb\n"

    def test_new_file_gets_umask_mode(self, tmp_path: Path):
        umask = os.umask(0o022)
        try:
            write_generated_file(tmp_path, GeneratedFile(path="A.g.cs", content="a\n"))
        finally:
            os.umask(umask)
        assert stat.S_IMODE((tmp_path / "A.g.cs").stat().st_mode) == 0o644

    def test_rewrite_keeps_existing_mode(self, tmp_path: Path):
        target = tmp_path / "A.g.cs"
        target.write_text("old\n", encoding="utf-8")
        target.chmod(0o664)
        write_generated_file(tmp_path, GeneratedFile(path="A.g.cs", content="new\n"))
        assert stat.S_IMODE(target.stat().st_mode) == 0o664

    def test_no_temp_files_left(self, tmp_path: Path):
        write_generated_file(tmp_path, GeneratedFile(path="A.g.cs", content="a\n"))
        assert [p.name for p in tmp_path.iterdir()] == ["A.g.cs"]

    def test_unwritable_target_raises(self, tmp_path: Path):
        blocker = tmp_path / "blocker"
        blocker.write_text("not a dir", encoding="utf-8")
        with pytest.raises(GenerationWriteError):
            write_generated_file(blocker, GeneratedFile(path="A.g.cs", content="a\n"))


class TestRunGenerate:
    def test_generates_all(self, write_manifest: Callable[..., Path], tmp_path: Path):
        result = run_generate(write_manifest())
        assert result.ok
        assert result.error is None
        assert [f.status for f in result.files] == ["written"] * 3

        out = tmp_path / "Generated"
        assert sorted(p.name for p in out.iterdir()) == [
            "Quantity.g.cs",
            "SampleValueObject.g.cs",
            "UserId.g.cs",
        ]

        user_id = (out / "UserId.g.cs").read_text(encoding="utf-8")
        assert "namespace TestNamespace;" in user_id
        assert "public static UserId NewId() => From(global::System.Guid.NewGuid());" in user_id
        assert "public bool Equals(global::System.Guid other)" in user_id

        quantity = (out / "Quantity.g.cs").read_text(encoding="utf-8")
        assert "namespace Inventory;" in quantity
        assert "NewId" not in quantity

        sample = (out / "SampleValueObject.g.cs").read_text(encoding="utf-8")
        assert "Value = DefaultValue.Value;" in sample
        assert "public bool Equals(global::System.String? other)" in sample

    def test_second_run_unchanged(self, write_manifest: Callable[..., Path]):
        path = write_manifest()
        run_generate(path)
        result = run_generate(path)
        assert [f.status for f in result.files] == ["unchanged"] * 3
        assert result.to_dict()["summary"]["unchanged"] == 3

    def test_regenerates_over_non_utf8_file(self, write_manifest: Callable[..., Path], tmp_path: Path):
        out = tmp_path / "Generated"
        out.mkdir()
        (out / "SampleValueObject.g.cs").write_bytes(b"\xff\xfe\x00 not utf-8")
        result = run_generate(write_manifest())
        assert result.ok
        assert [f.status for f in result.files] == ["written"] * 3
        sample = (out / "SampleValueObject.g.cs").read_text(encoding="utf-8")
        assert sample.startswith("// <auto-generated/>\n")

    def test_dry_run_writes_nothing(self, write_manifest: Callable[..., Path], tmp_path: Path):
        result = run_generate(write_manifest(), dry_run=True)
        assert result.ok
        assert [f.status for f in result.files] == ["planned"] * 3
        assert len(result.generated) == 3
        assert not (tmp_path / "Generated").exists()

    def test_only_selected(self, write_manifest: Callable[..., Path]):
        result = run_generate(write_manifest(), names=["UserId"])
        assert [f.type_name for f in result.files] == ["UserId"]

    def test_unknown_name(self, write_manifest: Callable[..., Path]):
        result = run_generate(write_manifest(), names=["Nope"])
        assert result.error == "Unknown value objects: Nope"
        assert result.to_dict() == {"error": "Unknown value objects: Nope"}

    def test_invalid_manifest(self, write_manifest: Callable[..., Path]):
        result = run_generate(write_manifest(textwrap.dedent("""\
            value_objects:
              - name: A
                type: int
              - name: A
                type: int
        """)))
        assert result.ok is False
        assert "Duplicate" in (result.error or "")

    def test_missing_manifest(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        result = run_generate()
        assert result.error == "No valueobjects.yml found."

    def test_write_failure_recorded(self, write_manifest: Callable[..., Path], tmp_path: Path):
        (tmp_path / "Generated").write_text("not a dir", encoding="utf-8")
        result = run_generate(write_manifest())
        assert result.ok is False
        assert all(f.status == "failed" for f in result.files)
        assert result.files[0].error
        assert result.to_dict()["summary"]["failed"] == 3
