import logging
from typing import Iterator, List

from slurm_inspector.records import JobInfo, PartitionNodeInfo

logger = logging.getLogger(__name__)


def sinfo_format(_s: str) -> List[PartitionNodeInfo]:
    lines = fixed_arity_lines(_s, PartitionNodeInfo.ARITY)
    out = [PartitionNodeInfo.from_tokens(tokens) for tokens in lines]
    return out


def squeue_format(_s: str) -> List[JobInfo]:
    lines = fixed_arity_lines(_s, JobInfo.ARITY)
    out = [JobInfo.from_tokens(tokens) for tokens in lines]
    return out


def fixed_arity_lines(_s: str, arity: int) -> Iterator[List[str]]:
    """
    Tokenizes each line of whitespace-delimited command output. Only lines with
    exactly `arity` tokens are yielded. Anything else, including truncated or
    extended lines, is skipped. Blank lines are skipped silently.

    `a  b c` -> [a, b, c]
    """

    for line in _s.split("\n"):
        tokens = line.split()
        if len(tokens) != arity:
            if tokens:
                logger.debug(
                    "skipping line with %d items, expected %d", len(tokens), arity
                )
            continue
        yield tokens
