import logging
import sys
from typing import List, Optional

import uvicorn

from slurm_inspector import __version__, report, slurm
from slurm_inspector.configuration import Configuration
from slurm_inspector.server import create_app
from slurm_inspector.status import Poller, StatusStore, take_snapshot

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s:%(lineno)d] %(message)s"

_LOG_LEVELS = {
    "error": logging.ERROR,
    "info": logging.INFO,
    "debug": logging.DEBUG,
}


def setup_logging(level: str, log_file: Optional[str] = None) -> None:
    logging.basicConfig(
        level=_LOG_LEVELS.get(level, logging.INFO),
        format=LOG_FORMAT,
        filename=log_file,
        force=True,
    )


def print_once(configuration: Configuration) -> None:
    sinfo, squeue = slurm.sources(configuration.test_mode)
    snapshot = take_snapshot(sinfo, squeue)
    df_node, df_job = report.to_dataframes(snapshot)
    print(df_node.to_csv(index=False))
    print(df_job.to_csv(index=False), end="")


def main(argv: Optional[List[str]] = None) -> None:
    configuration = Configuration.from_args(argv)
    setup_logging(configuration.log_level, configuration.log_file)
    logger.info("slurm_inspector %s, configuration: %r", __version__, configuration)

    if configuration.once:
        print_once(configuration)
        return

    store = StatusStore()
    poller = Poller(store, configuration)
    poller.start()
    try:
        uvicorn.run(
            create_app(store),
            host="0.0.0.0",
            port=configuration.port,
            log_config=None,
        )
    finally:
        poller.stop()


if __name__ == "__main__":
    main(sys.argv[1:])
