#!/usr/bin/env python3
"""
Connection Check Script

Quick script to check registry and cache connectivity without running the full
application.
"""

import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent / "src"))

from registry_directory.core import Config, setup_logger
from registry_directory.api import RegistryAPI
from registry_directory.cache import CacheStore
from registry_directory.errors import CacheUnavailable
from registry_directory.processing import RecordNormalizer


def check_connection() -> bool:
    """Check registry access, record normalization and cache access."""
    print("=" * 60)
    print("Registry Directory Connection Check")
    print("=" * 60)
    print()

    try:
        config = Config()
        print(f"✓ Configuration loaded from: {config.config_file}")
        print(f"  Registry: {config.registry_base_url}")
        print(f"  Cache:    {config.cache_url}")
        print()
    except (FileNotFoundError, ValueError) as e:
        print(f"✗ Failed to load configuration: {e}")
        print("\nCopy config.json.example to config.json and adjust it.")
        return False

    logger = setup_logger(log_file="", log_level="DEBUG")

    print("Checking registry...")
    print("-" * 60)
    try:
        with RegistryAPI(
            base_url=config.registry_base_url,
            objects_endpoint=config.registry_objects_endpoint,
            timeout=config.registry_timeout,
            max_retries=config.registry_max_retries,
            verify_ssl=config.registry_verify_ssl,
            logger=logger
        ) as api:
            objects = api.get_registry_objects()
        print(f"✓ Registry returned {len(objects)} objects")

        organizations = RecordNormalizer(logger).normalize_all(objects)
        print(f"✓ Normalized {len(organizations)} organizations")
        for org in organizations[:5]:
            print(f"    - {org.bin or 'N/A'}: {' / '.join(org.name_parts)}")
        print()
    except Exception as e:
        print(f"\n✗ Registry check failed: {e}")
        return False

    print("Checking cache...")
    print("-" * 60)
    cache = CacheStore.from_url(
        config.cache_url,
        key=config.cache_key,
        socket_timeout=config.cache_socket_timeout,
        logger=logger
    )
    try:
        cached = cache.get()
    except CacheUnavailable as e:
        print(f"✗ Cache unavailable: {e}")
        return False

    if cached is None:
        print(f"✓ Cache reachable, nothing stored under '{config.cache_key}' yet")
    else:
        print(f"✓ Cache holds {len(cached)} organizations under '{config.cache_key}'")
    print()

    print("=" * 60)
    print("✓ All connection checks passed!")
    print("=" * 60)
    return True


def main():
    """Main entry point."""
    success = check_connection()
    sys.exit(0 if success else 1)


if __name__ == "__main__":
    main()
