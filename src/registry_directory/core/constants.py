"""
Application-wide constants for the registry directory.

This module defines default values used when the configuration file does not
override them.
"""

# Registry endpoint
DEFAULT_REGISTRY_BASE_URL = "https://gr5.gosreestr.kz"
DEFAULT_OBJECTS_ENDPOINT = "/p/ru/api/v1/gr-objects"
DEFAULT_API_TIMEOUT = 30  # seconds
DEFAULT_API_MAX_RETRIES = 2

# Cache backend
DEFAULT_CACHE_URL = "redis://localhost:6379/0"
DEFAULT_CACHE_KEY = "organizations"
DEFAULT_CACHE_SOCKET_TIMEOUT = 5.0  # seconds

# Pagination
PAGE_SIZE = 10

# Hierarchy delimiter used in registry display names
NAME_DELIMITER = "\\"
