# SPDX-License-Identifier: MIT

import logging
from typing import Annotated, Optional

import typer
import uvicorn
from rich.console import Console

from weekplan.repository.configuration import CONFIGURATION_REPO
from weekplan.web.app import app as web_app

logger = logging.getLogger(__name__)


def serve(
    port: Annotated[
        Optional[int], typer.Option("--port", "-p", help="Port to listen on")
    ] = None,
    host: Annotated[
        Optional[str], typer.Option("--host", help="Address to bind")
    ] = None,
) -> None:
    """
    Start the read-only web viewer.
    """
    config = CONFIGURATION_REPO.get_config()
    bind_host = host or config["serve_host"]
    bind_port = port or config["serve_port"]

    console = Console(highlight=False)
    console.print(f"🗓️  Week viewer running at http://{bind_host}:{bind_port}")
    console.print("Press Ctrl+C to stop")

    logger.info("serving on %s:%d", bind_host, bind_port)
    uvicorn.run(
        web_app,
        host=bind_host,
        port=bind_port,
        log_level=config["log_level"].lower(),
    )
