"""gRPC servicer: the entry point for inbound recommendation requests."""

from __future__ import annotations

import logging
import time
from typing import Any

import grpc

from songrecs.codec import decode_request, encode_documents
from songrecs.recommender import SongRecommender

logger = logging.getLogger(__name__)

SERVICE_NAME = "songrecs.SongRecService"

_RECOMMENDATION_WARN_THRESHOLD_MS = 250


class SongRecsServicer:
    """Implements the ``SongRecService`` gRPC service.

    Messages are JSON documents carried as raw bytes, so the service is
    registered with a generic handler (see :func:`add_servicer_to_server`)
    rather than generated stubs.

    Args:
        recommender: The :class:`~songrecs.recommender.SongRecommender`.
    """

    def __init__(self, recommender: SongRecommender) -> None:
        self._recommender = recommender

    def GetRecommendations(self, request: bytes, context: Any) -> bytes:
        """Return the best-matching songs for the requested themes.

        Args:
            request: JSON body ``{"themes": {name: bool, ...}}``.
            context: gRPC service context.

        Returns:
            JSON array of redacted songs, best first.  ``[]`` on error, with
            the status code set on *context*.
        """
        try:
            preferences = decode_request(request)
        except ValueError as exc:
            context.set_code(grpc.StatusCode.INVALID_ARGUMENT)
            context.set_details(str(exc))
            return b"[]"

        start_ms = time.monotonic() * 1000
        try:
            documents = self._recommender.get_recommendations(preferences)
        except Exception:
            logger.exception("Unexpected error generating song recommendations.")
            context.set_code(grpc.StatusCode.INTERNAL)
            context.set_details("Internal error generating recommendations.")
            return b"[]"
        finally:
            elapsed_ms = time.monotonic() * 1000 - start_ms
            if elapsed_ms > _RECOMMENDATION_WARN_THRESHOLD_MS:
                logger.warning("GetRecommendations took %.1fms", elapsed_ms)
            else:
                logger.debug("GetRecommendations took %.1fms", elapsed_ms)

        logger.info(
            "Recommended %d songs: %s",
            len(documents),
            [d.rule_id for d in documents],
        )
        return encode_documents(documents)


def add_servicer_to_server(servicer: SongRecsServicer, server: grpc.Server) -> None:
    """Register *servicer*'s methods on *server* under :data:`SERVICE_NAME`."""
    handler = grpc.method_handlers_generic_handler(
        SERVICE_NAME,
        {
            "GetRecommendations": grpc.unary_unary_rpc_method_handler(
                servicer.GetRecommendations,
            ),
        },
    )
    server.add_generic_rpc_handlers((handler,))
