import logging

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse

from slurm_inspector import __version__, report
from slurm_inspector.status import StatusStore

logger = logging.getLogger(__name__)


def create_app(store: StatusStore) -> FastAPI:
    """
    The web front end. Every request renders the store's current snapshot.
    """
    app = FastAPI(
        title="Slurm Inspector",
        description="Partition, node and job status of a SLURM cluster",
        version=__version__,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    @app.get("/", response_class=HTMLResponse)
    def index(request: Request) -> HTMLResponse:
        logger.debug("request from %s", request.client)
        return HTMLResponse(report.current_report(store))

    return app
