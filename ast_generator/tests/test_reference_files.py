import unittest
from pathlib import Path
from unittest import TestCase

from ast_generator.pipeline import ConstantSpecLoader, GeneratorConfig, PipelineGenerator


def generate_builtin():
    config = GeneratorConfig(add_generation_comment=False)
    spec = ConstantSpecLoader().load()
    codegen = PipelineGenerator(config)
    return codegen.generate("Expr", spec["Expr"])


class TestReferenceFiles(TestCase):
    def test_builtin_expr(self):
        p_ref = Path(__file__).parent / "test_data" / "reference" / "Expr.java"
        s = generate_builtin()

        with open(p_ref) as f:
            ref = f.read()

        self.assertEqual(s, ref)

    def test_builtin_is_reproducible(self):
        self.assertEqual(generate_builtin(), generate_builtin())

    def test_builtin_written_file(self):
        import tempfile

        with tempfile.TemporaryDirectory() as tmp:
            config = GeneratorConfig(add_generation_comment=False)
            written = PipelineGenerator(config).write(ConstantSpecLoader().load(), tmp)

            self.assertEqual(written, [Path(tmp) / "Expr.java"])
            ref = (Path(__file__).parent / "test_data" / "reference" / "Expr.java").read_text()
            self.assertEqual(written[0].read_text(), ref)


if __name__ == "__main__":
    unittest.main()
