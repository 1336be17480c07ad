import contextlib
import io
import math
import os
import tempfile
import unittest

import run_vec2d

MISSING_CONFIG = os.path.join(os.path.dirname(__file__), "does-not-exist.ini")


def run(*argv: str) -> list[str]:
    output = io.StringIO()

    with contextlib.redirect_stdout(output):
        exit_code = run_vec2d.main(["--config", MISSING_CONFIG, "--loglevel", "WARNING", *argv])

    assert exit_code == 0
    return output.getvalue().splitlines()


def parse_vector(line: str) -> tuple[float, float]:
    """Parse the components from an output line of the form ``label: (x,y)``."""
    _, text = line.split(": ", 1)
    x, y = text.split(" ")[0].strip("()").split(",")
    return float(x), float(y)


class TestRunVec2d(unittest.TestCase):
    def test_info(self):
        lines = run("info", "3", "4")

        self.assertIn("vector: (3,4)", lines)
        self.assertIn("magnitude: 5", lines)
        self.assertIn("angle: 0.927295", lines)

    def test_info_degrees(self):
        lines = run("-o", "angles.unit=degrees", "info", "0", "1")

        self.assertIn("angle: 90", lines)

    def test_polar(self):
        lines = run("polar", "0", "5")

        self.assertIn("vector: (5,0)", lines)

    def test_polar_degrees(self):
        lines = run("-o", "angles.unit=degrees", "polar", "90", "2")

        x, y = parse_vector(lines[-1])
        self.assertAlmostEqual(x, 0)
        self.assertAlmostEqual(y, 2)

    def test_rotate(self):
        ccw = parse_vector(run("rotate", "1", "0", str(math.pi / 2))[-1])
        cw = parse_vector(run("rotate", "1", "0", str(math.pi / 2), "--cw")[-1])

        self.assertAlmostEqual(ccw[0], 0)
        self.assertAlmostEqual(ccw[1], 1)
        self.assertAlmostEqual(cw[0], 0)
        self.assertAlmostEqual(cw[1], -1)

    def test_normalize(self):
        self.assertIn("vector: (0.6,0.8)", run("normalize", "3", "4"))

    def test_normalize_zero_vector(self):
        with self.assertRaises(ValueError):
            run("normalize", "0", "0")

    def test_dot(self):
        self.assertIn("dot: 11", run("dot", "1", "2", "3", "4"))

    def test_between(self):
        self.assertIn("angle: 1.5708", run("between", "1", "0", "0", "1"))
        self.assertIn("angle: 90", run("-o", "angles.unit=degrees", "between", "1", "0", "0", "1"))

    def test_between_legacy_grouping(self):
        self.assertIn("angle: nan", run("--loglevel", "ERROR", "between", "1", "0", "1", "1", "--legacy-grouping"))
        self.assertIn("angle: nan", run("--loglevel", "ERROR", "-o", "angles.legacy-grouping=true",
                                        "between", "1", "0", "1", "1"))

    def test_show_repr(self):
        lines = run("-o", "output.show-repr=true", "polar", "0", "5")

        self.assertIn("vector: (5,0) Vector2D(5.0, 0.0)", lines)

    def test_config_file(self):
        with tempfile.TemporaryDirectory() as directory:
            filepath = os.path.join(directory, "config.ini")
            with open(filepath, "w") as f:
                f.write("[angles]\nunit = degrees\n")

            output = io.StringIO()
            with contextlib.redirect_stdout(output):
                run_vec2d.main(["--config", filepath, "info", "-1", "0"])

        self.assertIn("angle: 180", output.getvalue().splitlines())

    def test_invalid_overrides(self):
        with self.assertRaises(ValueError):
            run("-o", "angles.unit", "info", "1", "1")
        with self.assertRaises(ValueError):
            run("-o", "precision=3", "info", "1", "1")
        with self.assertRaises(ValueError):
            run("-o", "angles.precision=3", "info", "1", "1")

    def test_boolean_override_spellings(self):
        lines = run("-o", "output.show-repr=yes", "polar", "0", "5")

        self.assertIn("vector: (5,0) Vector2D(5.0, 0.0)", lines)

    def test_unknown_angle_unit_is_rejected_at_load(self):
        with self.assertRaises(ValueError):
            run("-o", "angles.unit=gradians", "dot", "1", "2", "3", "4")

    def test_parse_config_overrides(self):
        self.assertEqual(run_vec2d.parse_config_overrides(["angles.unit = degrees", "output.show-repr=true"]),
                         {"angles.unit": "degrees", "output.show-repr": "true"})


if __name__ == "__main__":
    unittest.main()
