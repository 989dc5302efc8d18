#!/usr/bin/env python3

from __future__ import annotations

import io
import json
import logging
import os
import sys
import tempfile
import unittest
from contextlib import redirect_stdout
from pathlib import Path
from unittest import mock

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

import recipe_converter  # noqa: E402

RECIPE = ">> servings: 2\nAdd @salt{1%tsp} to the #pot{}. -- season well\n"


class RecipeConverterCliTests(unittest.TestCase):
    def setUp(self) -> None:
        self.temp_dir = tempfile.TemporaryDirectory()
        self.addCleanup(self.temp_dir.cleanup)
        self.temp_path = Path(self.temp_dir.name)
        self.recipe_file = self.temp_path / "soup.cook"
        self.recipe_file.write_text(RECIPE, encoding="utf-8")

    def run_main(self, *args: str, env: dict[str, str] | None = None) -> tuple[int, str]:
        environ = {key: value for key, value in os.environ.items() if not key.startswith("COOKLANG_")}
        environ.update(env or {})
        stdout = io.StringIO()
        with mock.patch.dict(os.environ, environ, clear=True), \
                mock.patch.object(recipe_converter, "load_dotenv"), \
                redirect_stdout(stdout):
            code = recipe_converter.main(list(args))
        return code, stdout.getvalue()

    def test_json_to_stdout(self) -> None:
        code, output = self.run_main(str(self.recipe_file))
        self.assertEqual(code, 0)
        payload = json.loads(output)
        self.assertEqual(payload["metadata"], {"servings": "2"})
        self.assertEqual(payload["steps"][0][1]["name"], "salt")

    def test_cook_to_output_dir(self) -> None:
        out_dir = self.temp_path / "out"
        code, output = self.run_main(
            str(self.recipe_file), "--format", "cook", "--output-dir", str(out_dir))
        self.assertEqual(code, 0)
        self.assertEqual(output, "")
        self.assertEqual(
            (out_dir / "soup.cook").read_text(encoding="utf-8"),
            ">> servings: 2\n\nAdd @salt{1%tsp} to the #pot{}. \n",
        )

    def test_output_dir_from_environment(self) -> None:
        out_dir = self.temp_path / "env_out"
        code, output = self.run_main(
            str(self.recipe_file), env={"COOKLANG_OUTPUT_DIR": str(out_dir)})
        self.assertEqual(output, "")
        self.assertEqual(code, 0)
        self.assertTrue((out_dir / "soup.json").exists())

    def test_missing_file_fails(self) -> None:
        code, _ = self.run_main(str(self.recipe_file), str(self.temp_path / "missing.cook"))
        self.assertEqual(code, 1)

    def test_unknown_log_level_falls_back(self) -> None:
        with self.assertLogs("recipe_converter", level="WARNING") as logs:
            code, output = self.run_main(str(self.recipe_file), env={"COOKLANG_LOG_LEVEL": "loud"})
        self.assertEqual(code, 0)
        self.assertTrue(json.loads(output)["steps"])
        self.assertIn("Unknown log level 'loud'", logs.output[0])

    def test_resolve_log_level(self) -> None:
        self.assertEqual(recipe_converter.resolve_log_level("debug"), logging.DEBUG)
        self.assertEqual(recipe_converter.resolve_log_level(" Info "), logging.INFO)
        self.assertEqual(recipe_converter.resolve_log_level(None), logging.WARNING)
        self.assertIsNone(recipe_converter.resolve_log_level("loud"))

    def test_convert_recipe_text(self) -> None:
        self.assertEqual(
            recipe_converter.convert_recipe_text("Crack @egg", "cook"),
            "Crack @egg{some}\n",
        )


if __name__ == "__main__":
    unittest.main()
