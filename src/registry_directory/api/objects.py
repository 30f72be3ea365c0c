"""
Registry object operations.

Handles retrieval of the full list of registry objects (organizations).
"""

import logging
from typing import List, Dict, Any

import requests  # type: ignore

from ..core import constants
from ..errors import UpstreamMalformedResponse


class RegistryObjectsAPI:
    """Mixin for registry object API operations."""
    logger: logging.Logger
    objects_endpoint: str = constants.DEFAULT_OBJECTS_ENDPOINT

    def get_registry_objects(self) -> List[Dict[str, Any]]:
        """
        Get the full list of raw registry objects.

        Returns:
            List of raw organization records

        Raises:
            requests.exceptions.RequestException: On transport failure or error status
            UpstreamMalformedResponse: If the body has no list of objects
        """
        self.logger.info("Fetching registry objects")
        try:
            result = self.get(self.objects_endpoint)  # type: ignore
        except requests.exceptions.JSONDecodeError as e:
            raise UpstreamMalformedResponse(f"Registry returned invalid JSON: {e}") from e

        # API might return a bare list or wrap it under "Objects"
        if isinstance(result, list):
            objects = result
        elif isinstance(result, dict):
            objects = result.get("Objects")
        else:
            objects = None

        if not isinstance(objects, list):
            raise UpstreamMalformedResponse(
                "Registry response does not contain an 'Objects' list"
            )

        self.logger.info(f"Registry returned {len(objects)} objects")
        return objects
