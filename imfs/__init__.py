from imfs.app_config import AppConfig
from imfs.cache import Cache
from imfs.error import CacheError, LocationAlreadyExistsError, LocationDoesNotExistError, LocationNotADirectoryError, NodeAlreadyPresentError, \
    NodeNotPresentError, ScanFailedError
from imfs.model.fs_item import Directory, File, FileSystemItem
from imfs.signal_constants import Signal

__all__ = ['AppConfig', 'Cache', 'CacheError', 'Directory', 'File', 'FileSystemItem', 'LocationAlreadyExistsError', 'LocationDoesNotExistError',
           'LocationNotADirectoryError', 'NodeAlreadyPresentError', 'NodeNotPresentError', 'ScanFailedError', 'Signal']
