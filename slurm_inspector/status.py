from __future__ import annotations

import contextlib
import datetime as dt
import logging
import threading
from typing import Callable, Iterator, NamedTuple, Optional, Tuple

from slurm_inspector import slurm
from slurm_inspector.configuration import Configuration
from slurm_inspector.records import JobInfo, PartitionNodeInfo

logger = logging.getLogger(__name__)

LAST_UPDATE_FORMAT = "%Y.%m.%d - %H:%M"


class Snapshot(NamedTuple):
    """
    Partition/node and job records from one polling cycle. Always replaced as a
    whole.
    """

    node_info: Tuple[PartitionNodeInfo, ...]
    job_info: Tuple[JobInfo, ...]
    last_update: str

    @classmethod
    def empty(cls) -> Snapshot:
        return cls((), (), "")


class StoreUnavailable(RuntimeError):
    pass


class StatusStore:
    """
    Holds the most recent Snapshot behind one lock. The writer swaps in a new
    Snapshot; readers take the reference out and release before doing anything
    with it.

    If lock_timeout is given, failing to acquire the lock within that many
    seconds raises StoreUnavailable instead of blocking forever.
    """

    def __init__(
        self, initial: Optional[Snapshot] = None, lock_timeout: Optional[float] = None
    ) -> None:
        if initial is None:
            initial = Snapshot.empty()
        self._snapshot: Snapshot = initial
        self._lock_timeout: Optional[float] = lock_timeout
        self._lock = threading.Lock()

    def current(self) -> Snapshot:
        with self.exclusive():
            out = self._snapshot
        return out

    def replace(self, snapshot: Snapshot) -> None:
        with self.exclusive():
            self._snapshot = snapshot

    @contextlib.contextmanager
    def exclusive(self) -> Iterator[None]:
        timeout = -1 if self._lock_timeout is None else self._lock_timeout
        if not self._lock.acquire(timeout=timeout):
            raise StoreUnavailable(
                f"could not lock status store within {self._lock_timeout} s"
            )
        try:
            yield
        finally:
            self._lock.release()


def take_snapshot(
    sinfo: slurm.Sinfo,
    squeue: slurm.Squeue,
    clock: Callable[[], dt.datetime] = dt.datetime.now,
) -> Snapshot:
    """
    Runs both commands, then stamps the result with the time the data was read.
    """
    node_info = tuple(sinfo.get())
    job_info = tuple(squeue.get())
    out = Snapshot(
        node_info=node_info,
        job_info=job_info,
        last_update=clock().strftime(LAST_UPDATE_FORMAT),
    )
    return out


class Poller(threading.Thread):
    """
    Background thread that refreshes a StatusStore every configuration.interval
    seconds until stop() is called. Configuration is re-read every cycle.
    """

    def __init__(
        self,
        store: StatusStore,
        configuration: Configuration,
        source_factory: slurm.SourceFactory = slurm.sources,
    ) -> None:
        super().__init__(name="slurm-status-poller", daemon=True)
        self._store: StatusStore = store
        self._configuration: Configuration = configuration
        self._source_factory: slurm.SourceFactory = source_factory
        self._stop_event = threading.Event()
        self._cycles: int = 0

    @property
    def cycles(self) -> int:
        return self._cycles

    @property
    def stopped(self) -> bool:
        return self._stop_event.is_set()

    def stop(self) -> None:
        self._stop_event.set()

    def poll_once(self) -> None:
        sinfo, squeue = self._source_factory(self._configuration.test_mode)
        snapshot = take_snapshot(sinfo, squeue)
        self._store.replace(snapshot)
        self._cycles += 1
        logger.debug(
            "updated slurm status: %d nodes, %d jobs",
            len(snapshot.node_info),
            len(snapshot.job_info),
        )

    def run(self) -> None:
        while not self._stop_event.is_set():
            try:
                self.poll_once()
            except StoreUnavailable as e:
                logger.error("skipping update: %s", e)
            except Exception:
                logger.exception("unexpected error while updating slurm status")
            self._stop_event.wait(self._configuration.interval)
