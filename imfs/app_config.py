import logging
from typing import Any

import config

from imfs import logging_config
from imfs.constants import DEFAULT_CONFIG_PATH, PROJECT_DIR, PROJECT_DIR_TOKEN
from imfs.util.file_util import get_resource_path

logger = logging.getLogger(__name__)


class ConfigRequest:
    def __init__(self, cfg_path: str, default_val: Any = None, is_required: bool = True):
        self.cfg_path: str = cfg_path
        self.default_val: Any = default_val
        self.is_required: bool = is_required


class AppConfig:
    """
    ▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼
    CLASS AppConfig

    Read-only view of a CFG config file. Entries are looked up by dotted path, e.g. "logging.console.level".
    ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼
    """
    def __init__(self, config_file_path: str = None, init_logging: bool = True):
        self._project_dir = get_resource_path(PROJECT_DIR)

        if not config_file_path:
            config_file_path = get_resource_path(DEFAULT_CONFIG_PATH)
        self.config_file_path: str = config_file_path

        try:
            logger.debug(f'Reading config file: "{config_file_path}"')
            self._cfg = config.Config(config_file_path)
        except Exception as err:
            raise RuntimeError(f'Could not read config file ({config_file_path})') from err

        if init_logging:
            logging_config.configure_logging(self)

    def get_config_from_request(self, request: ConfigRequest):
        return self.get_config(cfg_path=request.cfg_path, default_val=request.default_val, is_required=request.is_required)

    def get_config(self, cfg_path: str, default_val=None, is_required: bool = True):
        try:
            val = self._cfg.get(cfg_path, None)
        except (KeyError, config.ConfigError):
            val = None

        if val is None:
            logger.debug(f'Path not found: {cfg_path}')
            if default_val is not None:
                return default_val
            if is_required:
                raise RuntimeError(f'Config entry not found but is required: "{cfg_path}"')
            return None

        if type(val) == str:
            val = val.replace(PROJECT_DIR_TOKEN, self._project_dir)
        logger.debug(f'Read config entry "{cfg_path}" = "{val}"')
        return val
