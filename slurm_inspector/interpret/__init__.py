from .decode import f64, node_list, u32
from .states import (
    ErrorCause,
    JobState,
    NodeState,
    PartitionAvailability,
    StateReason,
    availability,
    error_cause,
    job_state,
    node_state,
    state_reason,
)

__all__ = [
    "availability",
    "error_cause",
    "ErrorCause",
    "f64",
    "job_state",
    "JobState",
    "node_list",
    "node_state",
    "NodeState",
    "PartitionAvailability",
    "state_reason",
    "StateReason",
    "u32",
]
