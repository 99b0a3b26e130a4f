"""Configuration management for the occtl application."""
import os
from dotenv import load_dotenv

# Load environment variables from .env file if it exists
load_dotenv()

LOGIN_STRATEGIES = ("auto", "exec", "spawn")


class Config:
    """Application configuration with sensible defaults."""

    # Cluster config file
    CONFIG_PATH: str = os.getenv("OCCTL_CONFIG", "~/.config/occtl/config.yaml")

    # Login tool
    LOGIN_BINARY: str = os.getenv("OCCTL_LOGIN_BINARY", "oc")
    LOGIN_STRATEGY: str = os.getenv("OCCTL_LOGIN_STRATEGY", "auto").lower()

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "WARNING").upper()
    LOG_FORMAT: str = os.getenv(
        "LOG_FORMAT",
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    @classmethod
    def validate(cls) -> None:
        """Validate configuration values."""
        if not cls.LOGIN_BINARY:
            raise ValueError("Missing required configuration: OCCTL_LOGIN_BINARY")
        if cls.LOGIN_STRATEGY not in LOGIN_STRATEGIES:
            raise ValueError(
                f"Invalid OCCTL_LOGIN_STRATEGY '{cls.LOGIN_STRATEGY}', "
                f"expected one of: {', '.join(LOGIN_STRATEGIES)}"
            )

# Don't validate on import to allow for dynamic configuration
# Call Config.validate() explicitly when needed
