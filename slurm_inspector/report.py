import html
import logging
from typing import Any, Dict, List, Optional, Tuple

import pandas as pd

from slurm_inspector.records import JobInfo, PartitionNodeInfo
from slurm_inspector.status import Snapshot, StatusStore, StoreUnavailable
from slurm_inspector.table import Alignment, HtmlStyle, Table

logger = logging.getLogger(__name__)

TITLE = "Slurm Inspector"
ABSENT = "-"
PARTITION_DOWN = "partition_down"

_CSS = """table { border: 1px solid black; border-collapse: collapse; }
th, td { border: 1px solid black; padding: 10px; }
th { background: #e0e0e0; }
tr.partition_down td { background: #ffa0a0; }"""

NODE_COLUMNS = (
    "Partition",
    "Availability",
    "Hostname",
    "Node",
    "Error",
    "CPU load",
    "Node state",
    "Node sockets",
    "Node cores",
    "Node threads",
)

JOB_COLUMNS = (
    "Executing host",
    "Min CPU",
    "Num CPU",
    "Num nodes",
    "Job array ID",
    "Number of sockets",
    "Job ID",
    "Number of cores",
    "Job name",
    "Number of threads",
    "Job array index",
    "Run time",
    "List of nodes",
    "Priority",
    "State reason",
    "Start time",
    "Job state",
    "User name",
    "User ID",
)

_NUMERIC_NODE_COLUMNS = ("CPU load", "Node sockets", "Node cores", "Node threads")


def render(snapshot: Snapshot) -> str:
    """
    Renders a Snapshot as a complete HTML page. Absent values are shown as "-".
    Rows of partitions that are not up are marked with the partition_down class.
    """
    style = HtmlStyle()
    node_table = _node_table(snapshot.node_info)
    job_table = _job_table(snapshot.job_info)

    body = [
        f"<h3>Last update: {html.escape(snapshot.last_update)}</h3>",
        "<h3>Partition and node information:</h3>",
        style.render(
            node_table,
            column_alignments={c: Alignment.RIGHT for c in _NUMERIC_NODE_COLUMNS},
        ),
        "<h3>Job information:</h3>",
        style.render(job_table),
    ]
    return _page(body)


def error_page(message: str) -> str:
    return _page([f"<h1>{html.escape(message)}</h1>"])


def current_report(store: StatusStore) -> str:
    """
    The current status page, or an error page if the store could not be read.
    Never raises.
    """
    try:
        snapshot = store.current()
    except StoreUnavailable as e:
        logger.error("Could not read slurm status: %s", e)
        return error_page("Could not read slurm status!")
    return render(snapshot)


def to_dataframes(snapshot: Snapshot) -> Tuple[pd.DataFrame, pd.DataFrame]:
    df_node = pd.DataFrame(
        _node_rows(snapshot.node_info), columns=list(NODE_COLUMNS), dtype=object
    )
    df_job = pd.DataFrame(
        _job_rows(snapshot.job_info), columns=list(JOB_COLUMNS), dtype=object
    )
    return (df_node, df_job)


def _page(body: List[str]) -> str:
    lines = [
        "<!DOCTYPE html>",
        "<html>",
        "<head>",
        '<meta charset="utf-8">',
        f"<title>{TITLE}</title>",
        "<style>",
        _CSS,
        "</style>",
        "</head>",
        "<body>",
        *body,
        "</body>",
        "</html>",
    ]
    out = "\n".join(lines)
    out += "\n"
    return out


def _node_table(nodes: Tuple[PartitionNodeInfo, ...]) -> Table:
    rows = _node_rows(nodes)
    row_classes: List[Optional[str]] = [
        None if node.is_up else PARTITION_DOWN for node in nodes
    ]
    values = [[row[c] for c in NODE_COLUMNS] for row in rows]
    return Table(list(NODE_COLUMNS), values, ABSENT, row_classes)


def _job_table(jobs: Tuple[JobInfo, ...]) -> Table:
    values = [[row[c] for c in JOB_COLUMNS] for row in _job_rows(jobs)]
    return Table(list(JOB_COLUMNS), values, ABSENT)


def _node_rows(nodes: Tuple[PartitionNodeInfo, ...]) -> List[Dict[str, Any]]:
    return [
        dict(
            zip(
                NODE_COLUMNS,
                (
                    n.partition,
                    str(n.availability),
                    n.hostname,
                    n.node,
                    str(n.error),
                    n.cpu_load,
                    str(n.node_state),
                    n.node_sockets,
                    n.node_cores,
                    n.node_threads,
                ),
            )
        )
        for n in nodes
    ]


def _job_rows(jobs: Tuple[JobInfo, ...]) -> List[Dict[str, Any]]:
    return [
        dict(
            zip(
                JOB_COLUMNS,
                (
                    j.executing_host,
                    j.minimum_cpu,
                    j.num_cpu,
                    j.num_nodes,
                    j.job_array_id,
                    j.num_sockets,
                    j.job_id,
                    j.num_cores,
                    j.job_name,
                    j.num_threads,
                    j.job_array_index,
                    j.run_time,
                    ",".join(j.list_of_nodes),
                    j.priority,
                    str(j.state_reason),
                    j.start_time,
                    str(j.job_state),
                    j.user_name,
                    j.user_id,
                ),
            )
        )
        for j in jobs
    ]
