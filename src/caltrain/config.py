import fcntl
import logging
import os
from contextlib import contextmanager
from pathlib import Path
from typing import IO, Iterator, Optional

from pydantic import ValidationError

from caltrain import constants
from caltrain.models import WatchConfig

logger = logging.getLogger(__name__)


@contextmanager
def locked_file(path: Path, mode: str) -> Iterator[IO[str]]:
    """Open ``path`` under an flock: shared for reading, exclusive otherwise."""
    lock = fcntl.LOCK_SH if mode == "r" else fcntl.LOCK_EX
    with open(path, mode) as f:
        fcntl.flock(f.fileno(), lock)
        try:
            yield f
        finally:
            fcntl.flock(f.fileno(), fcntl.LOCK_UN)


def config_path(path: Optional[Path] = None) -> Path:
    return Path(path or constants.CONFIG_FILE)


def safe_save_config(config: WatchConfig, path: Optional[Path] = None) -> None:
    """Write the watch configuration as JSON."""
    path = config_path(path)
    try:
        os.makedirs(path.parent, exist_ok=True)
        with locked_file(path, "w") as f:
            f.write(config.model_dump_json(indent=2))
    except OSError as e:
        logger.error(f"Error saving config: {str(e)}")
        raise RuntimeError(f"Could not save configuration: {str(e)}")


def safe_load_config(path: Optional[Path] = None) -> WatchConfig:
    """Load the watch configuration.

    A missing file yields the defaults. They are written out so the file can
    be edited later, but a location that cannot be written to is not an
    error for a caller that only reads.
    """
    path = config_path(path)
    if not path.exists():
        default_config = WatchConfig()
        try:
            safe_save_config(default_config, path)
        except RuntimeError:
            logger.warning(f"Using default configuration, {path} is not writable")
        return default_config

    try:
        with locked_file(path, "r") as f:
            return WatchConfig.model_validate_json(f.read())
    except (OSError, ValidationError) as e:
        logger.error(f"Error loading config: {str(e)}")
        raise RuntimeError(f"Could not load configuration: {str(e)}")
