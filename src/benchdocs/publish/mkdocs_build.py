from pathlib import Path
import os

from mkdocs.commands.build import build
from mkdocs.config import load_config

from ..logging import get_logger

logger = get_logger(__name__)


def build_site(config_file: Path, dirty: bool = False) -> Path:
    """
    Build the documentation site with MkDocs.

    The working directory is the configuration file's directory while the
    build runs and is restored afterwards.

    Args:
        config_file: MkDocs configuration file (YAML or JSON)
        dirty: Only rebuild changed files

    Returns:
        The site directory MkDocs wrote to (``site_dir`` of the config)
    """
    logger.info(f"Running mkdocs for '{config_file}'")

    config_file = config_file.resolve()
    current_directory = os.getcwd()
    os.chdir(config_file.parent)
    try:
        config = load_config(config_file=str(config_file))
        config.plugins.on_startup(command="build", dirty=dirty)
        try:
            build(config, dirty=dirty)
        finally:
            config.plugins.on_shutdown()
    finally:
        os.chdir(current_directory)

    return Path(config["site_dir"])
