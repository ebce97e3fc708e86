from __future__ import annotations

import argparse
from typing import List, Optional

DEFAULT_PORT = 4545
DEFAULT_INTERVAL = 60.0
DEFAULT_LOG_LEVEL = "info"
LOG_LEVELS = ("error", "info", "debug")


class Configuration:
    """
    Runtime settings. The poller reads interval and test_mode on every cycle, so
    changing them on a live object takes effect from the next cycle on.
    """

    def __init__(
        self,
        port: int = DEFAULT_PORT,
        interval: float = DEFAULT_INTERVAL,
        test_mode: bool = False,
        log_level: str = DEFAULT_LOG_LEVEL,
        log_file: Optional[str] = None,
        once: bool = False,
    ) -> None:
        assert 0 < interval
        self._port: int = port
        self._interval: float = interval
        self._test_mode: bool = test_mode
        self._log_level: str = normalize_log_level(log_level)
        self._log_file: Optional[str] = log_file
        self._once: bool = once

    def __repr__(self) -> str:
        return (
            f"Configuration(port={self._port}, interval={self._interval}, "
            f"test_mode={self._test_mode}, log_level={self._log_level!r}, "
            f"log_file={self._log_file!r}, once={self._once})"
        )

    @property
    def port(self) -> int:
        return self._port

    @property
    def interval(self) -> float:
        return self._interval

    @interval.setter
    def interval(self, value: float) -> None:
        assert 0 < value
        self._interval = value

    @property
    def test_mode(self) -> bool:
        return self._test_mode

    @test_mode.setter
    def test_mode(self, value: bool) -> None:
        self._test_mode = value

    @property
    def log_level(self) -> str:
        return self._log_level

    @property
    def log_file(self) -> Optional[str]:
        return self._log_file

    @property
    def once(self) -> bool:
        return self._once

    @classmethod
    def from_args(cls, argv: Optional[List[str]] = None) -> Configuration:
        args = _build_parser().parse_args(argv)
        return cls(
            port=args.port,
            interval=args.interval,
            test_mode=args.test,
            log_level=args.loglevel,
            log_file=args.log_file,
            once=args.once,
        )


def normalize_log_level(_v: Optional[str]) -> str:
    if _v is None:
        return DEFAULT_LOG_LEVEL
    v = _v.casefold()
    if v not in LOG_LEVELS:
        return DEFAULT_LOG_LEVEL
    return v


def _port(_v: str) -> int:
    try:
        v = int(_v)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid port: {_v!r}")
    if not 0 < v < 2**16:
        raise argparse.ArgumentTypeError(f"port out of range: {v}")
    return v


def _interval(_v: str) -> float:
    try:
        v = float(_v)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid interval: {_v!r}")
    if not 0 < v:
        raise argparse.ArgumentTypeError(f"interval must be positive: {v}")
    return v


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="slurm-inspector",
        description="Web page showing partition, node and job status of a SLURM cluster. Polls sinfo and squeue in the background.",
    )
    parser.add_argument(
        "-p",
        "--port",
        type=_port,
        default=DEFAULT_PORT,
        help=f"Sets the port for the web page (default: {DEFAULT_PORT}).",
    )
    parser.add_argument(
        "-i",
        "--interval",
        type=_interval,
        default=DEFAULT_INTERVAL,
        help=f"Sets the update interval in seconds (default: {DEFAULT_INTERVAL:g}).",
    )
    parser.add_argument(
        "--test",
        action="store_true",
        help="Uses fixed test data instead of calling sinfo or squeue.",
    )
    parser.add_argument(
        "--loglevel",
        type=str,
        default=DEFAULT_LOG_LEVEL,
        help="""One of ("error", "info", "debug"). Anything else means "info".""",
    )
    parser.add_argument(
        "--log-file",
        type=str,
        default=None,
        help="Writes the log to this file instead of stderr.",
    )
    parser.add_argument(
        "--once",
        action="store_true",
        help="Takes one snapshot, prints it as csv and exits.",
    )
    return parser
