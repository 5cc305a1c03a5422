"""Entry point: loads the catalogue, wires the recommender and starts the gRPC server."""

from __future__ import annotations

import logging
import signal
import sys
from concurrent import futures

import grpc

import config
from songrecs.catalogue import SongCatalogue
from songrecs.recommender import SongRecommender
from songrecs.service import SongRecsServicer, add_servicer_to_server

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


def build_server(catalogue: SongCatalogue) -> grpc.Server:
    """Construct and configure the gRPC server with all dependencies wired.

    Args:
        catalogue: The loaded :class:`~songrecs.catalogue.SongCatalogue`.

    Returns:
        A configured but not-yet-started :class:`grpc.Server`.
    """
    recommender = SongRecommender(catalogue, n=config.NUM_RECOMMENDATIONS)
    servicer = SongRecsServicer(recommender)

    server = grpc.server(
        futures.ThreadPoolExecutor(max_workers=config.GRPC_MAX_WORKERS)
    )
    add_servicer_to_server(servicer, server)
    server.add_insecure_port(
        f"{config.GRPC_SERVER_HOST}:{config.GRPC_SERVER_PORT}"
    )
    return server


def main() -> None:
    """Load the catalogue and serve recommendations until signalled."""
    logger.info("Loading song catalogue from %s…", config.CATALOGUE_PATH)
    catalogue = SongCatalogue(config.CATALOGUE_PATH)
    catalogue.refresh()

    server = build_server(catalogue)

    def handle_shutdown(signum: int, frame: object) -> None:
        sig_name = signal.Signals(signum).name
        logger.info("Received %s, shutting down…", sig_name)
        server.stop(grace=5)
        sys.exit(0)

    signal.signal(signal.SIGTERM, handle_shutdown)
    signal.signal(signal.SIGINT, handle_shutdown)

    server.start()
    logger.info(
        "Song recommendation gRPC server listening on %s:%d",
        config.GRPC_SERVER_HOST,
        config.GRPC_SERVER_PORT,
    )
    server.wait_for_termination()


if __name__ == "__main__":
    main()
