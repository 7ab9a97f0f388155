"""Global configuration management.

Config is loaded at module import time and available globally via:
    from nestodo.config import config
"""

import os
from pathlib import Path

from dotenv import load_dotenv

from nestodo.config.loader import load_nestodo_config
from nestodo.config.schema import NestodoConfig
from nestodo.paths import CONFIG_PATH

# Load .env (allow override for tests)
_env_path = os.getenv("NESTODO_ENV_PATH")
_dotenv_path = Path(_env_path).expanduser() if _env_path else Path.cwd() / ".env"
load_dotenv(_dotenv_path)

_config_env = os.getenv("NESTODO_CONFIG")
CONFIG_FILE = Path(_config_env).expanduser() if _config_env else CONFIG_PATH

config: NestodoConfig = load_nestodo_config(CONFIG_FILE)

__all__ = ["CONFIG_FILE", "NestodoConfig", "config"]
