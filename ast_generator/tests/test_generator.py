"""Tests for PipelineGenerator and the atomic writer."""

from __future__ import annotations

import os
import stat
from pathlib import Path

import pytest

from ast_generator import __version__
from ast_generator.pipeline import (
    AtomicWriter,
    GeneratorConfig,
    OutputError,
    PipelineGenerator,
    SpecMalformed,
)

SHAPE_SPEC = {"Shape": ["Circle : double radius", "Square : double side"]}


@pytest.fixture
def generator():
    return PipelineGenerator(GeneratorConfig(add_generation_comment=False))


class TestGenerate:
    def test_generation_comment(self):
        code = PipelineGenerator().generate("Shape", SHAPE_SPEC["Shape"])

        assert code.startswith(f"// Generated by ast_generator v{__version__} : ast_generator\n")

    def test_no_generation_comment(self, generator):
        code = generator.generate("Shape", SHAPE_SPEC["Shape"])

        assert code.startswith("import java.util.List;\n")
        assert "Generated by" not in code

    def test_deterministic(self):
        first = PipelineGenerator().generate("Shape", SHAPE_SPEC["Shape"])
        second = PipelineGenerator().generate("Shape", SHAPE_SPEC["Shape"])

        assert first == second


class TestWrite:
    def test_output_path(self, generator, tmp_path):
        assert generator.output_path(tmp_path, "Shape") == tmp_path / "Shape.java"

    def test_one_file_per_basename(self, generator, tmp_path):
        spec = {
            "Expr": ["Literal : Object value"],
            "Stmt": ["Print : Expr expression"],
        }

        written = generator.write(spec, tmp_path)

        assert written == [tmp_path / "Expr.java", tmp_path / "Stmt.java"]
        assert "abstract class Expr {" in written[0].read_text()
        assert "abstract class Stmt {" in written[1].read_text()

    def test_creates_directory(self, generator, tmp_path):
        written = generator.write(SHAPE_SPEC, tmp_path / "out" / "java")

        assert written[0].exists()

    def test_overwrites_existing_file(self, generator, tmp_path):
        (tmp_path / "Shape.java").write_text("stale")

        generator.write(SHAPE_SPEC, tmp_path)

        assert (tmp_path / "Shape.java").read_text().startswith("import java.util.List;")

    def test_malformed_spec_writes_nothing(self, generator, tmp_path):
        with pytest.raises(SpecMalformed):
            generator.write({"Expr": ["Literal Object value"]}, tmp_path)

        assert list(tmp_path.iterdir()) == []

    def test_first_error_aborts_remaining_units(self, generator, tmp_path):
        spec = {
            "Expr": ["Literal : Object value"],
            "Stmt": ["Print"],
            "Decl": ["Var : Token name"],
        }

        with pytest.raises(SpecMalformed):
            generator.write(spec, tmp_path)

        assert sorted(p.name for p in tmp_path.iterdir()) == ["Expr.java"]

    def test_unwritable_directory(self, generator, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("")

        with pytest.raises(OutputError):
            generator.write(SHAPE_SPEC, blocker)


class TestAtomicWriter:
    def test_write(self, tmp_path):
        path = tmp_path / "Shape.java"

        AtomicWriter().write(path, "abstract class Shape {\n}\n")

        assert path.read_text() == "abstract class Shape {\n}\n"

    def test_no_temp_files_left(self, tmp_path):
        AtomicWriter().write(tmp_path / "Shape.java", "abstract class Shape {\n}\n")

        assert [p.name for p in tmp_path.iterdir()] == ["Shape.java"]

    def test_unbalanced_braces(self, tmp_path):
        path = tmp_path / "Shape.java"

        with pytest.raises(OutputError, match="unbalanced"):
            AtomicWriter().write(path, "abstract class Shape {\n")

        assert list(tmp_path.iterdir()) == []

    def test_no_class(self, tmp_path):
        with pytest.raises(OutputError, match="no class"):
            AtomicWriter().write(tmp_path / "Shape.java", "import java.util.List;\n")

    def test_failed_validation_keeps_existing_file(self, tmp_path):
        path = tmp_path / "Shape.java"
        path.write_text("previous")

        with pytest.raises(OutputError):
            AtomicWriter().write(path, "class Broken {")

        assert path.read_text() == "previous"

    def test_validation_disabled(self, tmp_path):
        path = tmp_path / "Shape.java"

        AtomicWriter().write(path, "not java", validate=False)

        assert path.read_text() == "not java"

    def test_custom_validator(self, tmp_path):
        seen: list[str] = []

        AtomicWriter(validate_java=seen.append).write(tmp_path / "Shape.java", "content")

        assert seen == ["content"]

    def test_generator_respects_validate_output(self, tmp_path):
        calls: list[str] = []
        config = GeneratorConfig(add_generation_comment=False, validate_output=False)
        generator = PipelineGenerator(config, writer=AtomicWriter(validate_java=calls.append))

        generator.write(SHAPE_SPEC, tmp_path)

        assert calls == []
        assert Path(tmp_path / "Shape.java").exists()

    def test_written_file_uses_umask_mode(self, tmp_path):
        umask = os.umask(0o022)
        try:
            path = tmp_path / "Shape.java"
            AtomicWriter().write(path, "abstract class Shape {\n}\n")
        finally:
            os.umask(umask)

        assert stat.S_IMODE(path.stat().st_mode) == 0o644
