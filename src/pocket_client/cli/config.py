"""CLI configuration with environment variable overrides."""

import os
from dataclasses import dataclass
from enum import StrEnum

DEFAULT_REDIRECT_URL = "https://getpocket.com/connected_applications"


class OutputFormat(StrEnum):
    """Output format options."""

    TABLE = "table"
    JSON = "json"


@dataclass
class CLIConfig:
    """Configuration passed through Typer context.

    Attributes:
        consumer_key: Application consumer key from --consumer-key.
    """

    consumer_key: str | None = None

    def load_consumer_key(self) -> str:
        """Get the consumer key from the command line or environment.

        Loading priority:
        1. --consumer-key option
        2. POCKET_CONSUMER_KEY environment variable

        Raises:
            ValueError: If no consumer key is available
        """
        consumer_key = self.consumer_key or os.environ.get("POCKET_CONSUMER_KEY")
        if not consumer_key:
            msg = (
                "Missing consumer key. Pass --consumer-key or set the "
                "POCKET_CONSUMER_KEY environment variable."
            )
            raise ValueError(msg)
        return consumer_key
