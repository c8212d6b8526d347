# ==============================================================================
# File: tests/test_run_scatter.py
# Purpose: command line entry point.
# ==============================================================================
import logging
import sys
import tempfile
import unittest
from pathlib import Path

sys.path.append(str(Path(__file__).parent.parent))

from run_scatter import main


class TestRunScatter(unittest.TestCase):
    def tearDown(self):
        # setup_logging() keeps the log file open; close it before tmp is removed
        root = logging.getLogger()
        for handler in list(root.handlers):
            handler.close()
            root.removeHandler(handler)

    def test_generate_into_directory(self):
        with tempfile.TemporaryDirectory() as tmp:
            out = Path(tmp) / "out"
            code = main(["grass/default", "--out", str(out), "--seed", "5", "--log-dir", tmp])
            self.tearDown()
            self.assertEqual(code, 0)
            self.assertTrue((out / "spawn_points.json").is_file())
            self.assertTrue((out / "objects.json").is_file())
            self.assertTrue((Path(tmp) / "scatter.log").is_file())

    def test_unknown_preset_returns_error_code(self):
        with tempfile.TemporaryDirectory() as tmp:
            code = main(["grass/nope", "--out", tmp, "--log-dir", tmp])
            self.tearDown()
            self.assertEqual(code, 1)


if __name__ == "__main__":
    unittest.main()
