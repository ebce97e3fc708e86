import abc
import logging
from typing import Callable, Generic, List, Tuple, TypeVar

import slurm_inspector.command as command
import slurm_inspector.gather.parse as parse
from slurm_inspector.records import JobInfo, PartitionNodeInfo

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT")

DEFAULT_TIMEOUT = 30.0


class _Source(abc.ABC, Generic[RecordT]):
    """
    Runs one status command with a fixed output format. The order of fields in
    FORMAT is what the record parser relies on positionally, so the two must
    change together.
    """

    NAME: str = ""
    FORMAT: str = ""

    def __init__(self, timeout: float = DEFAULT_TIMEOUT) -> None:
        self._timeout: float = timeout

    @property
    def args(self) -> List[str]:
        return [self.NAME, "-h", "-o", self.FORMAT]

    def fetch(self) -> str:
        """
        Returns raw command output, or "" if the command failed for any reason.
        """
        result = command.run(self.args, command.IGNORE, timeout=self._timeout)
        if not result.ok:
            logger.error(
                "Could not execute '%s' (exit code %d): %s",
                self.NAME,
                result.returncode,
                result.stderr.strip(),
            )
            return ""
        return result.stdout

    def get(self) -> List[RecordT]:
        return self._parse(self.fetch())

    @staticmethod
    @abc.abstractmethod
    def _parse(_s: str) -> List[RecordT]:
        ...


class Sinfo(_Source[PartitionNodeInfo]):
    """
    https://slurm.schedmd.com/sinfo.html

    %R partition name
    %a availability of partition (up/down)
    %n host name
    %N node name
    %E reason of error (down, drained, draining, none)
    %O CPU load
    %T node state
    %X sockets per node
    %Y cores per socket
    %Z threads per core
    """

    NAME = "sinfo"
    FORMAT = "%R %a %n %N %E %O %T %X %Y %Z"

    @staticmethod
    def _parse(_s: str) -> List[PartitionNodeInfo]:
        return parse.sinfo_format(_s)


class Squeue(_Source[JobInfo]):
    """
    https://slurm.schedmd.com/squeue.html

    %B executing host
    %c minimum CPUs
    %C CPUs
    %D nodes allocated
    %F job array's job id
    %H sockets
    %i job id
    %I cores
    %j job name
    %J threads
    %K job array index
    %M time used
    %N list of allocated nodes
    %p priority
    %r reason of job state
    %S actual or expected start time
    %T job state
    %u user name
    %U user id
    """

    NAME = "squeue"
    FORMAT = "%B %c %C %D %F %H %i %I %j %J %K %M %N %p %r %S %T %u %U"

    @staticmethod
    def _parse(_s: str) -> List[JobInfo]:
        return parse.squeue_format(_s)


SINFO_FIXTURE = """
    esd up node01 node01 none 0.22 idle 2 2 2
    esd up node02 node02 none 0.0 idle 2 8 2
    esd down node03 node03 down - - - - -
    esd up node04 node04 none 0.71 idle 1 1 1
    esd up node05 node05 none 0.0 alloc 1 1 1
    esd up node06 node06 none 0.0 completing 1 1 1
    esd up node07 node07 none 0.0 drained 1 1 1
    esd up node08 node08 none 0.0 draining 1 1 1
    esd up node09 node09 none 0.0 fail 1 1 1
    esd up node10 node10 none 0.0 failing 1 1 1
    esd up node11 node11 none 0.0 maint 1 1 1
    esd up node12 node12 none 0.0 unknown 1 1 1
"""

SQUEUE_FIXTURE = """
    node01 1 2 1 N/A * 1 * small_test01 * N/A 1:00 node01 0.9 None 2000-01-01T09:00:00 RUNNING user01 1000
    node01 1 2 2 N/A * 2 * small_test02 * N/A 1:15 node01,node02 0.9 None 2000-01-01T09:00:00 cancelled user02 1001
    node01 1 2 4 N/A * 3 * small_test03 * N/A 2:00 node01 0.1 None 2000-01-01T09:00:00 completed user03 1002
    node02 1 2 1 N/A * 4 * small_test04 * N/A 2:00 node01 0.2 None 2000-01-01T09:00:00 configuring user04 1003
    node03 1 2 1 N/A * 5 * small_test05 * N/A 2:46 node01 0.9 None 2000-01-01T09:00:00 Completing user05 1004
    node04 1 2 6 N/A * 6 * small_test06 * N/A 3:12 node03,node04,node05 0.9 None 2000-01-01T09:00:00 FAILED user05 1004
    node05 1 2 1 N/A * 7 * small_test07 * N/A 4:02 node01 0.9 None 2000-01-01T09:00:00 nodefail user01 1000
    node06 1 2 1 N/A * 8 * small_test08 * N/A 5:00 node01 0.9 None 2000-01-01T09:00:00 Pending user02 1001
    node07 1 2 2 N/A * 9 * small_test09 * N/A 1:00 node01 0.5 None 2000-01-01T09:00:00 preempted user02 1001
    node08 1 2 2 N/A * 10 * small_test10 * N/A 2:01 node01 0.6 None 2000-01-01T09:00:00 suspended user03 1002
    node08 1 2 10 N/A * 11 * small_test11 * N/A 2:06 node01 0.9 None 2000-01-01T09:00:00 timeout user04 1003
    node08 1 2 6 N/A * 12 * small_test12 * N/A 4:09 node01 0.2 None 2000-01-01T09:00:00 UNKNOWN user05 1004
"""


class FixtureSinfo(Sinfo):
    def fetch(self) -> str:
        return SINFO_FIXTURE


class FixtureSqueue(Squeue):
    def fetch(self) -> str:
        return SQUEUE_FIXTURE


def sources(test_mode: bool) -> Tuple[Sinfo, Squeue]:
    if test_mode:
        return (FixtureSinfo(), FixtureSqueue())
    else:
        return (Sinfo(), Squeue())


SourceFactory = Callable[[bool], Tuple[Sinfo, Squeue]]
