"""Default paths, environment variable names, and API constants."""

from __future__ import annotations

import platformdirs

APP_NAME = "stingray-cli"
APP_AUTHOR = "stingray-cli"

CONFIG_DIR = platformdirs.user_config_path(APP_NAME, APP_AUTHOR)
CONFIG_FILE = CONFIG_DIR / "config.toml"

# Environment variable names
ENV_APPLIANCE_URL = "STINGRAY_URL"
ENV_USERNAME = "STINGRAY_USERNAME"
ENV_PASSWORD = "STINGRAY_PASSWORD"
ENV_APPLIANCE_PROFILE = "STINGRAY_PROFILE"

# REST API roots (version 3.5)
BASE_CONFIG_PATH = "/api/tm/3.5/config/active/"
BASE_STATS_PATH = "/api/tm/3.5/status/local_tm/statistics/"
# Statistics root relative to a URL that already points at the config root
STATS_FROM_CONFIG_PATH = "../../status/local_tm/statistics/"

DEFAULT_TIMEOUT = 30.0
