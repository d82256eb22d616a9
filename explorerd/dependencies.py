"""Shared dependency factories for FastAPI endpoints.

These factories build engine instances per request from the daemon
settings. Tests replace them through app.dependency_overrides.
"""

import logging
from functools import lru_cache

from fastapi import Depends
from fastapi import Request

from explorer_library.content import ContentResolver
from explorer_library.events import EventReporter
from explorer_library.events import LoggingEventReporter
from explorer_library.models import RootSpec
from explorer_library.tree import TreeBuilder

from .config import ExplorerSettings
from .config import load_config


@lru_cache(maxsize=1)
def load_settings() -> ExplorerSettings:
    """Load daemon settings singleton instance."""
    return load_config()


def get_settings(request: Request) -> ExplorerSettings:
    """Get the settings the application was created with."""
    return request.app.state.settings


def get_reporter() -> EventReporter:
    """Get the reporter engine failures are sent to.

    Returns:
        Reporter logging under the explorerd.events logger
    """
    return LoggingEventReporter(logging.getLogger("explorerd.events"))


def get_root_specs(settings: ExplorerSettings = Depends(get_settings)) -> list[RootSpec]:
    """Get the configured roots as traversal specs."""
    return settings.root_specs()


def get_tree_builder(
    settings: ExplorerSettings = Depends(get_settings),
    reporter: EventReporter = Depends(get_reporter),
) -> TreeBuilder:
    """Get tree builder configured with the listing options.

    Returns:
        TreeBuilder instance
    """
    return TreeBuilder(options=settings.listing.to_options(), reporter=reporter)


def get_content_resolver(reporter: EventReporter = Depends(get_reporter)) -> ContentResolver:
    """Get content resolver.

    Returns:
        ContentResolver instance
    """
    return ContentResolver(reporter=reporter)
