import io
import unittest
from contextlib import redirect_stderr, redirect_stdout
from unittest import mock
from signal_controller.domain.models import ControllerConfig
from signal_controller.main import build_parser, config_from_args, main

class TestMain(unittest.TestCase):
    def test_default_config(self):
        args = build_parser().parse_args([])
        self.assertEqual(config_from_args(args), ControllerConfig())

    def test_timing_flags(self):
        args = build_parser().parse_args(["--ns-green", "15", "--ped-walk", "8"])
        cfg = config_from_args(args)
        self.assertEqual(cfg.nsGreenTime, 15)
        self.assertEqual(cfg.pedWalkTime, 8)

    def test_invalid_duration_is_usage_error(self):
        with redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit) as ctx:
                main(["--all-red", "0"])
        self.assertEqual(ctx.exception.code, 2)

    def test_describe(self):
        out = io.StringIO()
        with redirect_stdout(out):
            code = main(["--describe"])
        self.assertEqual(code, 0)
        self.assertIn("Cycle length: 28s", out.getvalue())
        self.assertIn("from ALL_RED_1, ALL_RED_2", out.getvalue())

    def test_quit_exits_cleanly(self):
        out = io.StringIO()
        with mock.patch("sys.stdin", io.StringIO("p\nq\n")), redirect_stdout(out):
            code = main([])
        self.assertEqual(code, 0)
        self.assertIn("Shutting down cleanly.", out.getvalue())

if __name__ == '__main__':
    unittest.main()
