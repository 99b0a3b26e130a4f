"""Loading and saving the occtl config file."""
import os
import shutil
import tempfile
from pathlib import Path
from typing import Optional, Union

import yaml
from jsonschema import validate, ValidationError

from .config import Config
from .exceptions import PersistenceError
from .logging import get_logger
from .models import CliConfig

logger = get_logger(__name__)

CONFIG_SCHEMA = {
    "type": "object",
    "properties": {
        "clusters": {
            "type": ["array", "null"],
            "items": {
                "type": "object",
                "properties": {
                    "name": {"type": "string"},
                    "url": {"type": "string"},
                    "username": {"type": "string"}
                },
                "required": ["name", "url", "username"]
            }
        }
    }
}


class ConfigStore:
    """Reads and writes the cluster list as a YAML document."""

    def __init__(self, path: Optional[Union[str, Path]] = None):
        self.path = Path(os.path.expanduser(str(path or Config.CONFIG_PATH)))

    def load(self) -> CliConfig:
        """Read the config file.

        A missing or empty file is an empty registry.

        Raises:
            PersistenceError: If the file cannot be read or is malformed
        """
        if not self.path.exists():
            logger.debug(f"No config file at {self.path}, starting empty")
            return CliConfig()

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
            raise PersistenceError(f"Failed to read config file {self.path}: {e}") from e

        if data is None:
            return CliConfig()

        try:
            validate(instance=data, schema=CONFIG_SCHEMA)
        except ValidationError as ve:
            raise PersistenceError(f"Invalid config file {self.path}: {ve.message}") from ve

        cli_config = CliConfig.from_dict(data)
        logger.debug(f"Loaded {len(cli_config.clusters)} cluster(s) from {self.path}")
        return cli_config

    def persist(self, cli_config: CliConfig) -> CliConfig:
        """Replace the config file with cli_config.

        The document is written to a temporary file next to the target and
        renamed over it, so readers never see a partial file.

        Returns:
            The config as read back from disk

        Raises:
            PersistenceError: If the file cannot be written
        """
        tmp_path = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(
                dir=str(self.path.parent), prefix=f".{self.path.name}.", suffix=".tmp"
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                yaml.safe_dump(cli_config.to_dict(), f, default_flow_style=False, sort_keys=False)
            # Keep the permissions of the file being replaced
            if self.path.exists():
                shutil.copymode(self.path, tmp_path)
            os.replace(tmp_path, self.path)
            tmp_path = None
        except (OSError, yaml.YAMLError) as e:
            raise PersistenceError(f"Failed to write config file {self.path}: {e}") from e
        finally:
            if tmp_path is not None and os.path.exists(tmp_path):
                os.remove(tmp_path)

        logger.debug(f"Wrote {len(cli_config.clusters)} cluster(s) to {self.path}")
        return self.load()
