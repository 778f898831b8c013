import contextlib
import io
import logging
import unittest

from tonnetz.__main__ import main
from tonnetz.logging_config import level_for_verbosity, setup_logging


class TestLoggingSetup(unittest.TestCase):
    def tearDown(self):
        logging.getLogger("tonnetz").handlers.clear()

    def test_repeated_setup_does_not_stack_handlers(self):
        setup_logging(level=logging.DEBUG)
        setup_logging(level=logging.DEBUG)
        logger = logging.getLogger("tonnetz")
        self.assertEqual(len(logger.handlers), 1)
        self.assertEqual(logger.level, logging.DEBUG)

    def test_returns_package_logger(self):
        self.assertIs(setup_logging(level=logging.INFO), logging.getLogger("tonnetz"))

    def test_verbosity_levels(self):
        self.assertEqual(level_for_verbosity(0), logging.WARNING)
        self.assertEqual(level_for_verbosity(1), logging.INFO)
        self.assertEqual(level_for_verbosity(2), logging.DEBUG)
        self.assertEqual(level_for_verbosity(5), logging.DEBUG)
        self.assertEqual(level_for_verbosity(-1), logging.WARNING)


class TestCommandLine(unittest.TestCase):
    def tearDown(self):
        logging.getLogger("tonnetz").handlers.clear()

    def run_cli(self, *argv):
        out = io.StringIO()
        with contextlib.redirect_stdout(out):
            code = main(list(argv))
        return code, out.getvalue()

    def test_major_at_origin(self):
        code, out = self.run_cli("Major")
        self.assertEqual(code, 0)
        lines = out.splitlines()
        self.assertEqual(lines[0], "C Major")
        self.assertEqual([line.split() for line in lines[1:]], [["0,0", "C"], ["0,1", "E"], ["1,0", "G"]])

    def test_root_option(self):
        _, out = self.run_cli("Minor", "--root=2,-1")
        self.assertTrue(out.startswith("A# Minor"))

    def test_verbose_flag_sets_level(self):
        self.run_cli("Major", "-vv")
        self.assertEqual(logging.getLogger("tonnetz").level, logging.DEBUG)

    def test_bad_root(self):
        with contextlib.redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit):
                main(["Major", "--root", "x"])
