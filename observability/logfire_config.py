"""
Logfire configuration and initialization.

Logfire provides structured logging and tracing for the composer service.

Environment Variables:
    LOGFIRE_TOKEN: Logfire project token (optional; without it logs stay local)
    ENVIRONMENT: deployment environment (development, staging, production)
"""
import os
from typing import Optional

import logfire


class LogfireConfig:
    """
    Logfire configuration singleton.

    Ensures Logfire is initialized only once. Without a token the
    service still runs and logs to the console only.
    """

    _initialized = False

    @classmethod
    def initialize(cls, token: Optional[str] = None) -> None:
        """
        Initialize Logfire.

        Args:
            token: Logfire project token (or set LOGFIRE_TOKEN env var)
        """
        if cls._initialized:
            return

        token = token or os.getenv("LOGFIRE_TOKEN")

        logfire.configure(
            token=token or None,
            service_name="mailmuse-composer",
            environment=os.getenv("ENVIRONMENT", "development"),
            send_to_logfire=bool(token),
        )

        if not token:
            logfire.warning("LOGFIRE_TOKEN not set, logging locally only")

        cls._initialized = True

    @classmethod
    def is_initialized(cls) -> bool:
        """
        Check if Logfire has been initialized.

        Returns:
            True if initialized, False otherwise
        """
        return cls._initialized
