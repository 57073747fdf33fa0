import toml
import os
from .cli_logger import logger

CONFIG_FILE = "gemsearch.toml"

RUBYGEMS_ROOT = "http://rubygems.org"
RUBYGEMS_SEARCH = "http://rubygems.org/search?utf8=%E2%9C%93&query="

DEFAULT_SETTINGS = {
    "search_url": RUBYGEMS_SEARCH,
    "root_url": RUBYGEMS_ROOT,
    "finalize_trailing": False,
    "user_agent": "gemsearch",
    "timeout": None,
}

def load_config(path="."):
    config_path = os.path.join(path, CONFIG_FILE)
    logger.debug(f"Loading configuration from {config_path}")
    if os.path.exists(config_path):
        try:
            with open(config_path, "r") as f:
                return toml.load(f)
        except toml.TomlDecodeError as e:
            logger.error(f"Error decoding TOML file at {config_path}: {e}")
            logger.info("Please check the file's format for syntax errors.")
        except IOError as e:
            logger.error(f"Error reading configuration file at {config_path}: {e}")
            logger.info("Please check file permissions.")
    return {}

def get_search_settings(conf):
    """Merge the [search] table of a loaded config over the defaults."""
    settings = dict(DEFAULT_SETTINGS)
    section = conf.get("search", {})
    if not isinstance(section, dict):
        logger.warning(f"Ignoring malformed [search] section in {CONFIG_FILE}")
        return settings
    for key, value in section.items():
        if key not in DEFAULT_SETTINGS:
            logger.warning(f"Unknown setting '{key}' in {CONFIG_FILE}")
            continue
        settings[key] = value
    return settings
