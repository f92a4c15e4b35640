import logging
import os
from datetime import datetime, timezone
from typing import List

from imfs.util.ensure import ensure_bool

logger = logging.getLogger(__name__)

LAUNCH_TS_FORMAT = '%Y-%m-%d_%H%M%S'

# Config sections under "logging" which each describe one root handler
CONSOLE_SECTION = 'console'
DEBUG_LOG_SECTION = 'debug_log'

# Config keys listing logger names, and the level each list forces its loggers to
LOGGER_LEVEL_LISTS = [('loglevel_info', logging.INFO), ('loglevel_warning', logging.WARNING)]


class DebugLogFileHandler(logging.FileHandler):
    """File handler for the debug log. The file is named for the launch time: e.g. "imfs_2024-01-31_235959.log"."""
    def __init__(self, log_dir: str, filename_base: str, mode: str = 'a'):
        self.logfile_path: str = build_debug_log_path(log_dir, filename_base)
        super().__init__(self.logfile_path, mode=mode)


def build_debug_log_path(log_dir: str, filename_base: str, launch_time: datetime = None) -> str:
    if not launch_time:
        launch_time = datetime.now(tz=timezone.utc)
    return os.path.join(log_dir, f'{filename_base}{launch_time.strftime(LAUNCH_TS_FORMAT)}.log')


def _is_enabled(app_config, section: str) -> bool:
    return ensure_bool(app_config.get_config(f'logging.{section}.enable', default_val=False, is_required=False))


def _finish_handler(app_config, section: str, handler: logging.Handler) -> logging.Handler:
    """Applies the level and format from the given config section, and tags the handler as ours"""
    handler.setLevel(logging.getLevelName(app_config.get_config(f'logging.{section}.level')))
    handler.setFormatter(logging.Formatter(fmt=app_config.get_config(f'logging.{section}.format'),
                                           datefmt=app_config.get_config(f'logging.{section}.datetime_format')))
    handler.imfs_section = section
    return handler


def _build_debug_log_handler(app_config) -> logging.Handler:
    log_dir = app_config.get_config(f'logging.{DEBUG_LOG_SECTION}.log_dir')
    try:
        os.makedirs(name=log_dir, exist_ok=True)
    except OSError:
        logger.error(f'Exception while making log dir: {log_dir}')
        raise

    handler = DebugLogFileHandler(log_dir=log_dir,
                                  filename_base=app_config.get_config(f'logging.{DEBUG_LOG_SECTION}.filename_base'),
                                  mode=app_config.get_config(f'logging.{DEBUG_LOG_SECTION}.filemode', default_val='a', is_required=False))
    return _finish_handler(app_config, DEBUG_LOG_SECTION, handler)


def _build_console_handler(app_config) -> logging.Handler:
    return _finish_handler(app_config, CONSOLE_SECTION, logging.StreamHandler())


def remove_installed_handlers(root_logger: logging.Logger) -> int:
    """Detaches and closes every root handler added by an earlier configure_logging() call. Returns the count removed."""
    installed_list: List[logging.Handler] = [h for h in root_logger.handlers if getattr(h, 'imfs_section', None)]
    for handler in installed_list:
        root_logger.removeHandler(handler)
        handler.close()
    return len(installed_list)


def configure_logging(app_config):
    """Sets up the root logger from the "logging" section of the given AppConfig. Safe to call more than once: handlers from a
    previous call are replaced, not stacked."""
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    remove_installed_handlers(root_logger)

    if _is_enabled(app_config, DEBUG_LOG_SECTION):
        root_logger.addHandler(_build_debug_log_handler(app_config))

    if _is_enabled(app_config, CONSOLE_SECTION):
        root_logger.addHandler(_build_console_handler(app_config))

    for cfg_key, level in LOGGER_LEVEL_LISTS:
        for logger_name in app_config.get_config(f'logging.{cfg_key}', default_val=[], is_required=False):
            logging.getLogger(logger_name).setLevel(level)

    logger.debug(f'Logging configured from "{app_config.config_file_path}"')
