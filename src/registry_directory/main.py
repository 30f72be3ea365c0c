"""
Main entry point for the registry directory.

Wires configuration, logging, the registry client and the cache together and
prints one page of the directory.
"""

import json
import sys
from typing import List, Optional

from .core import Config, setup_logger, LoggerContext
from .api import RegistryAPI
from .cache import CacheStore
from .errors import UpstreamUnavailable
from .models import PageResult
from .services import (
    OrganizationDirectory,
    QueryEngine,
    RetrievalOrchestrator,
    UpstreamFetcher,
    parse_page,
)


class DirectoryApp:
    """Main application for browsing the registry directory."""

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize application.

        Args:
            config_file: Path to configuration file
        """
        self.config = Config(config_file)

        self.logger = setup_logger(
            log_file=self.config.log_file,
            log_level=self.config.log_level
        )
        self.logger.info(f"Configuration: {self.config}")

        self.api_client: Optional[RegistryAPI] = None
        self.directory: Optional[OrganizationDirectory] = None

    def initialize_components(self) -> None:
        """Initialize all application components."""
        self.logger.debug("Initializing components...")

        self.api_client = RegistryAPI(
            base_url=self.config.registry_base_url,
            objects_endpoint=self.config.registry_objects_endpoint,
            timeout=self.config.registry_timeout,
            max_retries=self.config.registry_max_retries,
            verify_ssl=self.config.registry_verify_ssl,
            logger=self.logger
        )

        cache = CacheStore.from_url(
            self.config.cache_url,
            key=self.config.cache_key,
            socket_timeout=self.config.cache_socket_timeout,
            logger=self.logger
        )

        fetcher = UpstreamFetcher(
            api_client=self.api_client,
            cache=cache,
            logger=self.logger
        )

        self.directory = OrganizationDirectory(
            retrieval=RetrievalOrchestrator(cache, fetcher, logger=self.logger),
            query=QueryEngine(page_size=self.config.page_size, logger=self.logger),
            logger=self.logger
        )

    def run(self, search_term: str = "", page: int = 1) -> PageResult:
        """
        Look up one page of the directory.

        Args:
            search_term: Case-insensitive search term
            page: 1-based page number

        Returns:
            Page result

        Raises:
            UpstreamUnavailable: If the registry had to be queried and failed
        """
        try:
            self.initialize_components()
            if self.directory is None:
                raise RuntimeError("Components not properly initialized")

            with LoggerContext(self.logger, f"directory lookup for page {page}"):
                return self.directory.get_page(search_term, page)

        finally:
            if self.api_client:
                self.api_client.close()


def format_page(result: PageResult) -> str:
    """Render a page result as a plain-text table."""
    lines: List[str] = []
    if not result.organizations:
        lines.append("No organizations found.")
    for org in result.organizations:
        lines.append(f"{org.bin or '-':<14} {org.status or '-':<12} {' / '.join(org.name_parts)}")

    lines.append("")
    lines.append(
        f"Page {result.current_page} of {result.total_pages} "
        f"({result.total_items} organizations)"
    )
    return "\n".join(lines)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(
        description="Searchable directory of state registry organizations"
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to configuration file"
    )
    parser.add_argument(
        "--search",
        type=str,
        default="",
        help="Case-insensitive search term"
    )
    parser.add_argument(
        "--page",
        type=str,
        default="1",
        help="Page number (default: 1)"
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the page as JSON"
    )

    args = parser.parse_args(argv)

    try:
        app = DirectoryApp(config_file=args.config)
    except (FileNotFoundError, ValueError) as e:
        print(f"Failed to load configuration: {e}", file=sys.stderr)
        return 1

    try:
        result = app.run(search_term=args.search, page=parse_page(args.page))
    except UpstreamUnavailable as e:
        print(f"Registry is unavailable: {e}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
    else:
        print(format_page(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
