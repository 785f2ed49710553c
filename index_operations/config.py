"""
Search Index Operations Configuration

Centralized configuration for search index operations: how often the
readiness of a new index is checked and how long to wait for it.

Typical usage:
    from index_operations import IndexOperationConfig

    # Poll every 5 seconds, give up after 10 minutes
    config = IndexOperationConfig(poll_interval=5.0, build_timeout=600.0)

    # Poll without any deadline
    config = IndexOperationConfig(build_timeout=None)

    index_manager = SearchIndexManager(collection, config=config)
"""

from dataclasses import dataclass, fields
from typing import Dict, Any, Optional
import logging

from config.settings import SearchIndexSettings

logger = logging.getLogger(__name__)

DEFAULT_POLL_INTERVAL = 5.0


@dataclass
class IndexOperationConfig:
    """
    Configuration for search index operations.

    Attributes:
        poll_interval: Seconds between two readiness checks.
        build_timeout: Seconds to wait for an index to become queryable.
                       None polls without a deadline.
    """

    poll_interval: float = DEFAULT_POLL_INTERVAL
    build_timeout: Optional[float] = 300.0

    def __post_init__(self):
        """Validate configuration parameters after initialization."""
        if self.poll_interval <= 0:
            logger.warning(
                f"poll_interval ({self.poll_interval}) must be positive. "
                f"Setting to {DEFAULT_POLL_INTERVAL}."
            )
            self.poll_interval = DEFAULT_POLL_INTERVAL

        if self.build_timeout is not None and self.build_timeout < 0:
            logger.warning(
                f"build_timeout ({self.build_timeout}) cannot be negative. "
                f"Polling without a deadline."
            )
            self.build_timeout = None

    @classmethod
    def from_settings(cls, settings: SearchIndexSettings) -> 'IndexOperationConfig':
        return cls(poll_interval=settings.poll_interval, build_timeout=settings.build_timeout)

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'IndexOperationConfig':
        """
        Create configuration from a dictionary; unknown keys are ignored.
        """
        valid_fields = {f.name for f in fields(cls)}
        filtered_dict = {k: v for k, v in config_dict.items() if k in valid_fields}

        return cls(**filtered_dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'poll_interval': self.poll_interval,
            'build_timeout': self.build_timeout
        }
