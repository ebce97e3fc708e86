"""
Total classifiers from raw sinfo/squeue tokens to state enums. Matching is
case-insensitive. Each enum owns exactly one token table below.

Unrecognized availability is treated as Down. Every other unrecognized token
is classified as UNKNOWN.
"""

from __future__ import annotations

import enum
from typing import Dict, TypeVar


class StateEnum(enum.Enum):
    def __str__(self) -> str:
        return self.value


@enum.unique
class PartitionAvailability(StateEnum):
    UP = "Up"
    DOWN = "Down"


@enum.unique
class ErrorCause(StateEnum):
    DOWN = "Down"
    DRAINED = "Drained"
    DRAINING = "Draining"
    NONE = "None"
    UNKNOWN = "Unknown"


@enum.unique
class NodeState(StateEnum):
    ALLOCATED = "Allocated"
    COMPLETING = "Completing"
    DOWN = "Down"
    DRAINED = "Drained"
    DRAINING = "Draining"
    FAIL = "Fail"
    FAILING = "Failing"
    IDLE = "Idle"
    MAINT = "Maint"
    UNKNOWN = "Unknown"


@enum.unique
class StateReason(StateEnum):
    DEPENDENCY = "Dependency"
    NONE = "None"
    PARTITION_DOWN = "PartitionDown"
    PARTITION_NODE_LIMIT = "PartitionNodeLimit"
    PARTITION_TIME_LIMIT = "PartitionTimeLimit"
    PRIORITY = "Priority"
    RESOURCES = "Resources"
    NODE_DOWN = "NodeDown"
    BAD_CONSTRAINTS = "BadConstraints"
    SYSTEM_FAILURE = "SystemFailure"
    JOB_LAUNCH_FAILURE = "JobLaunchFailure"
    NON_ZERO_EXIT_CODE = "NonZeroExitCode"
    TIME_LIMIT = "TimeLimit"
    INACTIVE_LIMIT = "InactiveLimit"
    UNKNOWN = "Unknown"


@enum.unique
class JobState(StateEnum):
    CANCELLED = "Cancelled"
    COMPLETED = "Completed"
    CONFIGURING = "Configuring"
    COMPLETING = "Completing"
    FAILED = "Failed"
    NODE_FAIL = "NodeFail"
    PENDING = "Pending"
    PREEMPTED = "Preempted"
    RUNNING = "Running"
    SUSPENDED = "Suspended"
    TIMEOUT = "Timeout"
    UNKNOWN = "Unknown"


EnumT = TypeVar("EnumT", bound=StateEnum)


# https://slurm.schedmd.com/sinfo.html#OPT_%25a
AVAILABILITY_TOKENS: Dict[str, PartitionAvailability] = {
    "up": PartitionAvailability.UP,
}

# https://slurm.schedmd.com/sinfo.html#OPT_%25E
ERROR_CAUSE_TOKENS: Dict[str, ErrorCause] = {
    "down": ErrorCause.DOWN,
    "drained": ErrorCause.DRAINED,
    "draining": ErrorCause.DRAINING,
    "none": ErrorCause.NONE,
}

# https://slurm.schedmd.com/sinfo.html#SECTION_NODE-STATE-CODES
NODE_STATE_TOKENS: Dict[str, NodeState] = {
    "alloc": NodeState.ALLOCATED,
    "allocated": NodeState.ALLOCATED,
    "completing": NodeState.COMPLETING,
    "down": NodeState.DOWN,
    "drained": NodeState.DRAINED,
    "draining": NodeState.DRAINING,
    "fail": NodeState.FAIL,
    "failing": NodeState.FAILING,
    "idle": NodeState.IDLE,
    "maint": NodeState.MAINT,
}

# https://slurm.schedmd.com/squeue.html#SECTION_JOB-REASON-CODES
STATE_REASON_TOKENS: Dict[str, StateReason] = {
    "dependency": StateReason.DEPENDENCY,
    "none": StateReason.NONE,
    "partitiondown": StateReason.PARTITION_DOWN,
    "partitionnodelimit": StateReason.PARTITION_NODE_LIMIT,
    "partitiontimelimit": StateReason.PARTITION_TIME_LIMIT,
    "priority": StateReason.PRIORITY,
    "resources": StateReason.RESOURCES,
    "nodedown": StateReason.NODE_DOWN,
    "badconstraints": StateReason.BAD_CONSTRAINTS,
    "systemfailure": StateReason.SYSTEM_FAILURE,
    "joblaunchfailure": StateReason.JOB_LAUNCH_FAILURE,
    "nonzeroexitcode": StateReason.NON_ZERO_EXIT_CODE,
    "timelimit": StateReason.TIME_LIMIT,
    "inactivelimit": StateReason.INACTIVE_LIMIT,
}

# https://slurm.schedmd.com/squeue.html#SECTION_JOB-STATE-CODES
JOB_STATE_TOKENS: Dict[str, JobState] = {
    "cancelled": JobState.CANCELLED,
    "completed": JobState.COMPLETED,
    "configuring": JobState.CONFIGURING,
    "completing": JobState.COMPLETING,
    "failed": JobState.FAILED,
    "node_fail": JobState.NODE_FAIL,
    "pending": JobState.PENDING,
    "preempted": JobState.PREEMPTED,
    "running": JobState.RUNNING,
    "suspended": JobState.SUSPENDED,
    "timeout": JobState.TIMEOUT,
}


def classify(_tokens: Dict[str, EnumT], _fallback: EnumT, _v: str) -> EnumT:
    return _tokens.get(_v.lower(), _fallback)


def availability(_v: str) -> PartitionAvailability:
    return classify(AVAILABILITY_TOKENS, PartitionAvailability.DOWN, _v)


def error_cause(_v: str) -> ErrorCause:
    return classify(ERROR_CAUSE_TOKENS, ErrorCause.UNKNOWN, _v)


def node_state(_v: str) -> NodeState:
    return classify(NODE_STATE_TOKENS, NodeState.UNKNOWN, _v)


def state_reason(_v: str) -> StateReason:
    return classify(STATE_REASON_TOKENS, StateReason.UNKNOWN, _v)


def job_state(_v: str) -> JobState:
    return classify(JOB_STATE_TOKENS, JobState.UNKNOWN, _v)
