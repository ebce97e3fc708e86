import unittest

from slurm_inspector.configuration import Configuration, normalize_log_level


class TestConfiguration(unittest.TestCase):
    def test_defaults(self):
        c = Configuration.from_args([])
        self.assertEqual(c.port, 4545)
        self.assertEqual(c.interval, 60.0)
        self.assertFalse(c.test_mode)
        self.assertEqual(c.log_level, "info")
        self.assertIsNone(c.log_file)
        self.assertFalse(c.once)

    def test_args(self):
        c = Configuration.from_args(
            ["-p", "8080", "-i", "5", "--test", "--loglevel", "DEBUG", "--once"]
        )
        self.assertEqual(c.port, 8080)
        self.assertEqual(c.interval, 5.0)
        self.assertTrue(c.test_mode)
        self.assertEqual(c.log_level, "debug")
        self.assertTrue(c.once)

    def test_long_args(self):
        c = Configuration.from_args(
            ["--port", "1234", "--interval", "0.5", "--log-file", "x.log"]
        )
        self.assertEqual(c.port, 1234)
        self.assertEqual(c.interval, 0.5)
        self.assertEqual(c.log_file, "x.log")

    def test_invalid_args(self):
        for argv in (["-p", "0"], ["-p", "70000"], ["-p", "x"], ["-i", "0"], ["-i", "-3"]):
            with self.assertRaises(SystemExit) as e:
                Configuration.from_args(argv)
            self.assertEqual(e.exception.code, 2)

    def test_log_level(self):
        self.assertEqual(normalize_log_level("error"), "error")
        self.assertEqual(normalize_log_level("Info"), "info")
        self.assertEqual(normalize_log_level("warning"), "info")
        self.assertEqual(normalize_log_level(None), "info")

    def test_mutable(self):
        c = Configuration()
        c.test_mode = True
        c.interval = 2.0
        self.assertTrue(c.test_mode)
        self.assertEqual(c.interval, 2.0)
        with self.assertRaises(AssertionError):
            c.interval = 0
