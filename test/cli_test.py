import io
import logging
import unittest
from contextlib import redirect_stdout
from unittest import mock

from slurm_inspector import cli, command


class TestCli(unittest.TestCase):
    def tearDown(self):
        logging.getLogger().handlers.clear()
        logging.getLogger().setLevel(logging.WARNING)

    def test_once_prints_csv(self):
        out = io.StringIO()
        with mock.patch.object(command, "run") as run, redirect_stdout(out):
            cli.main(["--test", "--once", "--loglevel", "error"])
        run.assert_not_called()
        lines = out.getvalue().splitlines()
        self.assertTrue(lines[0].startswith("Partition,Availability,Hostname"))
        self.assertIn("esd,Down,node03,node03,Down,,Unknown,,,", lines)
        self.assertIn("", lines)
        header = lines.index("") + 1
        self.assertTrue(lines[header].startswith("Executing host,Min CPU"))
        self.assertEqual(len(lines), 1 + 12 + 1 + 1 + 12)

    def test_serves_and_stops_poller(self):
        with mock.patch("uvicorn.run") as run, mock.patch.object(
            cli, "Poller"
        ) as poller:
            cli.main(["--test", "-p", "9999", "--loglevel", "error"])
        poller.return_value.start.assert_called_once()
        poller.return_value.stop.assert_called_once()
        self.assertEqual(run.call_args[1]["port"], 9999)
        self.assertEqual(run.call_args[1]["host"], "0.0.0.0")

    def test_setup_logging(self):
        cli.setup_logging("debug")
        self.assertEqual(logging.getLogger().level, logging.DEBUG)
        cli.setup_logging("error")
        self.assertEqual(logging.getLogger().level, logging.ERROR)
