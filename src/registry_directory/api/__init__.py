"""
API layer for the state property registry.

Provides the HTTP client used to download registry objects.
"""

import logging
from typing import Optional

from ..core import constants
from .client import APIClient
from .objects import RegistryObjectsAPI


class RegistryAPI(APIClient, RegistryObjectsAPI):
    """
    Unified API client for the state property registry.

    Combines the base HTTP client with registry object operations.
    """

    def __init__(
        self,
        base_url: str,
        objects_endpoint: str = constants.DEFAULT_OBJECTS_ENDPOINT,
        timeout: int = constants.DEFAULT_API_TIMEOUT,
        max_retries: int = constants.DEFAULT_API_MAX_RETRIES,
        verify_ssl: bool = True,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize unified API client.

        Args:
            base_url: Base URL for the API
            objects_endpoint: Endpoint that lists every registry object
            timeout: Request timeout in seconds
            max_retries: Maximum number of transport-level retry attempts
            verify_ssl: Whether to verify SSL certificates
            logger: Logger instance
        """
        super().__init__(
            base_url=base_url,
            timeout=timeout,
            max_retries=max_retries,
            verify_ssl=verify_ssl,
            logger=logger
        )
        self.objects_endpoint = objects_endpoint


__all__ = [
    "APIClient",
    "RegistryObjectsAPI",
    "RegistryAPI",
]
