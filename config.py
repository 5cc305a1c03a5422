"""Application configuration driven by environment variables.

All settings have sensible defaults for local development.
"""

import os

# ---------------------------------------------------------------------------
# gRPC server
# ---------------------------------------------------------------------------

GRPC_SERVER_HOST: str = os.getenv("GRPC_SERVER_HOST", "0.0.0.0")
GRPC_SERVER_PORT: int = int(os.getenv("GRPC_SERVER_PORT", "50051"))

# Thread pool size for the gRPC server.  Each concurrent RPC occupies one
# thread, so this caps concurrent request handling.
GRPC_MAX_WORKERS: int = int(os.getenv("GRPC_MAX_WORKERS", "10"))

# ---------------------------------------------------------------------------
# Song catalogue
# ---------------------------------------------------------------------------

# JSON export of the catalogue table (plain items or DynamoDB scan output).
CATALOGUE_PATH: str = os.getenv("CATALOGUE_PATH", "data/catalogue.json")

# ---------------------------------------------------------------------------
# Recommendations
# ---------------------------------------------------------------------------

NUM_RECOMMENDATIONS: int = int(os.getenv("NUM_RECOMMENDATIONS", "3"))

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
