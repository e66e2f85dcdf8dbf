"""
Test suite for the javaline command line interface.

Each test runs the CLI in a fresh temporary working directory and checks
exit codes, console output and the files left behind.
"""

import contextlib
import io
import os
import sys
import tempfile
import unittest
from unittest import mock


class CliTestCase(unittest.TestCase):
    """Run javaline commands inside a temporary working directory."""

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.tmp = os.path.realpath(self._tmp.name)
        self._old_cwd = os.getcwd()
        os.chdir(self.tmp)

    def tearDown(self):
        os.chdir(self._old_cwd)
        self._tmp.cleanup()

    def run_cli(self, *argv: str) -> tuple[int, str, str]:
        from javaline.cli import _main

        stdout = io.StringIO()
        stderr = io.StringIO()
        with contextlib.redirect_stdout(stdout), contextlib.redirect_stderr(stderr):
            code = _main(list(argv))
        return code, stdout.getvalue(), stderr.getvalue()


class TestInit(CliTestCase):
    def test_init(self):
        code, out, err = self.run_cli("init")

        self.assertEqual(code, 0)
        self.assertIn("Initialized javaline project", out)
        self.assertEqual(err, "")
        self.assertTrue(os.path.isdir(os.path.join(self.tmp, ".java_line")))

    def test_init_twice(self):
        self.run_cli("init")
        code, out, _ = self.run_cli("init")

        self.assertEqual(code, 0)
        self.assertIn("already initialized", out)

    def test_quiet(self):
        code, out, _ = self.run_cli("--quiet", "init")

        self.assertEqual(code, 0)
        self.assertEqual(out, "")


class TestAdd(CliTestCase):
    def test_add_class(self):
        self.run_cli("init")
        code, out, _ = self.run_cli("add", "class", "greeter")

        self.assertEqual(code, 0)
        self.assertIn("Created class Greeter", out)
        self.assertTrue(os.path.isfile(os.path.join(self.tmp, "Greeter.java")))

    def test_add_class_outside_project(self):
        code, out, err = self.run_cli("add", "class", "greeter")

        self.assertEqual(code, 1)
        self.assertEqual(out, "")
        self.assertIn("Not inside a javaline project", err)
        self.assertIn("javaline init", err)
        self.assertFalse(os.path.exists(os.path.join(self.tmp, "Greeter.java")))

    def test_add_class_in_package(self):
        self.run_cli("init")
        self.run_cli("add", "package", "util")
        code, out, _ = self.run_cli("add", "class", "strings", "util")

        self.assertEqual(code, 0)
        self.assertIn("package: util", out)
        with open(os.path.join(self.tmp, "util", "Strings.java"), encoding="utf-8") as f:
            self.assertTrue(f.read().startswith("import util;"))

    def test_add_class_overwrite_warning(self):
        self.run_cli("init")
        self.run_cli("add", "class", "greeter")
        code, out, _ = self.run_cli("add", "class", "greeter")

        self.assertEqual(code, 0)
        self.assertIn("Overwrote existing file", out)

    def test_add_class_malformed_manifest(self):
        self.run_cli("init")
        os.mkdir("broken")
        with open(os.path.join("broken", "pack_def.toml"), "w", encoding="utf-8") as f:
            f.write("name = = oops\n")

        code, _, err = self.run_cli("add", "class", "x", "broken")

        self.assertEqual(code, 1)
        self.assertIn("Error in pack_def.toml", err)

    def test_add_class_invalid_utf8_manifest(self):
        self.run_cli("init")
        os.mkdir("pkg")
        with open(os.path.join("pkg", "pack_def.toml"), "wb") as f:
            f.write(b'name = "\xff\xfe"\n')

        code, _, err = self.run_cli("add", "class", "x", "pkg")

        self.assertEqual(code, 1)
        self.assertIn("Error in pack_def.toml", err)
        self.assertFalse(os.path.exists(os.path.join("pkg", "X.java")))

    def test_add_class_missing_directory(self):
        self.run_cli("init")
        code, _, err = self.run_cli("add", "class", "x", "missing")

        self.assertEqual(code, 1)
        self.assertIn("Error creating class", err)

    def test_add_package(self):
        self.run_cli("init")
        code, out, _ = self.run_cli("add", "package", "mypkg")

        self.assertEqual(code, 0)
        self.assertIn("Created package mypkg", out)
        self.assertTrue(os.path.isfile(os.path.join(self.tmp, "mypkg", "pack_def.toml")))

    def test_add_package_exists(self):
        self.run_cli("init")
        self.run_cli("add", "package", "mypkg")
        code, out, _ = self.run_cli("add", "package", "mypkg")

        self.assertEqual(code, 0)
        self.assertIn("already exists", out)

    def test_add_package_outside_project(self):
        code, _, err = self.run_cli("add", "package", "mypkg")

        self.assertEqual(code, 1)
        self.assertIn("Not inside a javaline project", err)
        self.assertFalse(os.path.exists(os.path.join(self.tmp, "mypkg")))

    @unittest.skipUnless(
        sys.platform.startswith("linux"), "needs byte-oriented filenames"
    )
    def test_add_package_unencodable_name(self):
        self.run_cli("init")
        code, out, err = self.run_cli("add", "package", "pkg\udcff")

        self.assertEqual(code, 1)
        self.assertEqual(out, "")
        self.assertIn("Error creating package", err)

    def test_add_requires_kind(self):
        with contextlib.redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit) as ctx:
                self.run_cli("add")
        self.assertEqual(ctx.exception.code, 2)


class TestRoot(CliTestCase):
    def test_root_at_root(self):
        self.run_cli("init")
        code, out, _ = self.run_cli("root")

        self.assertEqual(code, 0)
        self.assertEqual(out.splitlines()[0], self.tmp)
        self.assertIn("current directory is the project root", out)

    def test_root_from_subdirectory(self):
        self.run_cli("init")
        os.makedirs(os.path.join("src", "app"))
        os.chdir(os.path.join("src", "app"))

        code, out, _ = self.run_cli("root")

        self.assertEqual(code, 0)
        self.assertEqual(out.strip(), self.tmp)

    def test_root_resolves_once(self):
        from javaline.project import config

        self.run_cli("init")
        with mock.patch.object(
            config, "find_project_root", wraps=config.find_project_root
        ) as find_root:
            code, out, _ = self.run_cli("root")

        self.assertEqual(code, 0)
        self.assertIn("current directory is the project root", out)
        self.assertEqual(find_root.call_count, 1)

    def test_root_outside_project(self):
        code, _, err = self.run_cli("root")

        self.assertEqual(code, 1)
        self.assertIn("Not inside a javaline project", err)


class TestMain(CliTestCase):
    def test_no_subcommand_prints_help(self):
        code, out, _ = self.run_cli()

        self.assertEqual(code, 1)
        self.assertIn("usage: javaline", out)

    def test_main_exits_with_code(self):
        from javaline.cli import main

        with contextlib.redirect_stdout(io.StringIO()):
            with self.assertRaises(SystemExit) as ctx:
                main(["init"])
        self.assertEqual(ctx.exception.code, 0)


if __name__ == "__main__":
    unittest.main()
