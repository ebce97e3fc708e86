import logging
import subprocess
from typing import List, Optional, Union

from typing_extensions import Literal

logger = logging.getLogger(__name__)

RAISE = "raise"
IGNORE = "ignore"

FAILED_TO_RUN = -1


class Result:
    def __init__(self, stdout: str, stderr: str, returncode: int) -> None:
        self._stdout: str = stdout
        self._stderr: str = stderr
        self._returncode: int = returncode

    @property
    def stdout(self) -> str:
        return self._stdout

    @property
    def stderr(self) -> str:
        return self._stderr

    @property
    def returncode(self) -> int:
        return self._returncode

    @property
    def ok(self) -> bool:
        return self._returncode == 0


def run(
    args: List[str],
    error_handling: Union[Literal["raise"], Literal["ignore"]] = RAISE,
    timeout: Optional[float] = None,
) -> Result:
    """
    Runs args as an external process and captures its output.

    With error_handling="raise", a missing binary or timeout propagates and a
    non-zero exit raises RuntimeError. With error_handling="ignore", nothing is
    raised: a process that could not run yields empty stdout, the error text
    in stderr and returncode FAILED_TO_RUN.
    """
    assert error_handling in (RAISE, IGNORE)

    try:
        result = subprocess.run(
            args, stdout=subprocess.PIPE, stderr=subprocess.PIPE, timeout=timeout
        )
    except (OSError, subprocess.SubprocessError) as e:
        if error_handling == RAISE:
            raise
        logger.debug("could not run %s: %s", args[0], e)
        return Result("", str(e), FAILED_TO_RUN)

    returncode = result.returncode
    stderr = result.stderr.decode("utf-8", "replace")
    stdout = result.stdout.decode("utf-8", "replace")

    if error_handling == RAISE and returncode != 0:
        raise RuntimeError(stderr)

    return Result(stdout, stderr, returncode)
