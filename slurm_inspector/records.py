from __future__ import annotations

from typing import List, NamedTuple, Optional, Tuple

from slurm_inspector.interpret import decode, states


class PartitionNodeInfo(NamedTuple):
    """
    One line of `sinfo -h -o "%R %a %n %N %E %O %T %X %Y %Z"`.
    """

    ARITY = 10

    partition: str
    availability: states.PartitionAvailability
    hostname: str
    node: str
    error: states.ErrorCause
    cpu_load: Optional[float]
    node_state: states.NodeState
    node_sockets: Optional[int]
    node_cores: Optional[int]
    node_threads: Optional[int]

    @property
    def is_up(self) -> bool:
        return self.availability is states.PartitionAvailability.UP

    @classmethod
    def from_tokens(cls, _t: List[str]) -> PartitionNodeInfo:
        assert len(_t) == cls.ARITY
        return cls(
            partition=_t[0],
            availability=states.availability(_t[1]),
            hostname=_t[2],
            node=_t[3],
            error=states.error_cause(_t[4]),
            cpu_load=decode.f64(_t[5]),
            node_state=states.node_state(_t[6]),
            node_sockets=decode.u32(_t[7]),
            node_cores=decode.u32(_t[8]),
            node_threads=decode.u32(_t[9]),
        )


class JobInfo(NamedTuple):
    """
    One line of `squeue -h -o "%B %c %C %D %F %H %i %I %j %J %K %M %N %p %r %S %T
    %u %U"`.
    """

    ARITY = 19

    executing_host: str
    minimum_cpu: Optional[int]
    num_cpu: Optional[int]
    num_nodes: Optional[int]
    job_array_id: Optional[int]
    num_sockets: Optional[int]
    job_id: Optional[int]
    num_cores: Optional[int]
    job_name: str
    num_threads: Optional[int]
    job_array_index: Optional[int]
    run_time: str
    list_of_nodes: Tuple[str, ...]
    priority: Optional[float]
    state_reason: states.StateReason
    start_time: str
    job_state: states.JobState
    user_name: str
    user_id: Optional[int]

    @classmethod
    def from_tokens(cls, _t: List[str]) -> JobInfo:
        assert len(_t) == cls.ARITY
        return cls(
            executing_host=_t[0],
            minimum_cpu=decode.u32(_t[1]),
            num_cpu=decode.u32(_t[2]),
            num_nodes=decode.u32(_t[3]),
            job_array_id=decode.u32(_t[4]),
            num_sockets=decode.u32(_t[5]),
            job_id=decode.u32(_t[6]),
            num_cores=decode.u32(_t[7]),
            job_name=_t[8],
            num_threads=decode.u32(_t[9]),
            job_array_index=decode.u32(_t[10]),
            run_time=_t[11],
            list_of_nodes=tuple(decode.node_list(_t[12])),
            priority=decode.f64(_t[13]),
            state_reason=states.state_reason(_t[14]),
            start_time=_t[15],
            job_state=states.job_state(_t[16]),
            user_name=_t[17],
            user_id=decode.u32(_t[18]),
        )
