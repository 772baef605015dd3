"""Registry of externally reachable endpoint URLs per resource type.

Endpoint URLs come from deployment configuration and are registered once,
typically at startup, so resource handlers can build absolute URLs (e.g. for
the ``Location`` header) without hardcoding the deployment topology.

A missing URL is a legitimate state: lookups return ``None`` rather than
raising, and callers decide what to do without one.
"""

import threading
from typing import List, Mapping, Optional

from .concurrent_map import ConcurrentMap
from .logging import LogEvent, get_logger, log_info

logger = get_logger(__name__)


class EndpointURLRegistry:
    """Mapping of resource type name to base URL, replaced in bulk."""

    _default_instance: Optional["EndpointURLRegistry"] = None
    _instance_lock = threading.RLock()

    @classmethod
    def get_default(cls) -> "EndpointURLRegistry":
        """Get the process-wide registry instance."""
        with cls._instance_lock:
            if cls._default_instance is None:
                cls._default_instance = cls()
            return cls._default_instance

    @staticmethod
    def cleanup() -> None:
        """Drop the process-wide instance."""
        with EndpointURLRegistry._instance_lock:
            EndpointURLRegistry._default_instance = None

    def __init__(self) -> None:
        self._urls: ConcurrentMap[str, str] = ConcurrentMap()
        self._configured = False

    @property
    def is_configured(self) -> bool:
        """Whether URLs have been registered at least once."""
        return self._configured

    def register_resource_endpoint_urls(self, endpoint_urls: Mapping[str, str]) -> None:
        """Replace all endpoint URLs with ``endpoint_urls``.

        This is a bulk set, not a merge: resource types missing from
        ``endpoint_urls`` no longer resolve afterwards.

        Args:
            endpoint_urls: Mapping of resource type name to base URL
        """
        self._urls.replace_all(endpoint_urls)
        self._configured = True
        log_info(
            LogEvent.ENDPOINT_REGISTRY,
            f"Registered {len(endpoint_urls)} resource endpoint URL(s)",
            resource_types=sorted(endpoint_urls),
        )

    def get_resource_endpoint_url(self, resource_type: str) -> Optional[str]:
        """Return the base URL for ``resource_type``, or None if unknown."""
        return self._urls.get(resource_type)

    def build_location(self, resource_type: str, resource_id: str) -> Optional[str]:
        """Build the absolute URL of a single resource.

        Args:
            resource_type: Resource type name (e.g. ``"User"``)
            resource_id: Identifier of the resource

        Returns:
            ``<base URL>/<resource_id>``, or None when no base URL is registered
        """
        base = self.get_resource_endpoint_url(resource_type)
        if base is None:
            return None
        return f"{base.rstrip('/')}/{resource_id}"

    def resource_types(self) -> List[str]:
        """Sorted resource types that currently have a URL."""
        return sorted(self._urls.snapshot())
