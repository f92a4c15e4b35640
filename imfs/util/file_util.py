import logging
import os
import pathlib

logger = logging.getLogger(__name__)

_SEPARATORS = os.sep + (os.altsep or '')


def derive_parent_path(full_path: str) -> str:
    """Returns the directory component of the given path, written the same way os.path.join() would have written it.
    A leading "./" is kept, and trailing separators are ignored."""
    stripped = full_path.rstrip(_SEPARATORS)
    if not stripped:
        # the path was nothing but separators, i.e. the filesystem root
        return os.sep
    return os.path.dirname(stripped) or os.curdir


def derive_name(full_path: str) -> str:
    """Returns the last segment of the given path, ignoring any trailing separators"""
    return os.path.basename(full_path.rstrip(_SEPARATORS))


def is_under(full_path: str, root_path: str) -> bool:
    """Returns True iff full_path is root_path or lies somewhere beneath it. Compares whole path segments, so "/a/bc" is not under "/a/b"."""
    try:
        pathlib.PurePath(full_path).relative_to(root_path)
        return True
    except ValueError:
        return False


def get_resource_path(rel_path: str, resolve_symlinks=False) -> str:
    """Returns the absolute path from the given relative path (relative to the imfs package dir)"""

    if pathlib.PurePath(rel_path).is_absolute():
        logger.debug(f'get_resource_path(): Already an absolute path: {rel_path}')
        return str(rel_path)
    dir_of_py_file = os.path.dirname(__file__)
    # go up 1 dir
    package_dir = os.path.join(dir_of_py_file, os.pardir)
    rel_path_to_resource = os.path.join(package_dir, rel_path)
    if resolve_symlinks:
        abs_path_to_resource = os.path.realpath(rel_path_to_resource)
    else:
        abs_path_to_resource = os.path.abspath(rel_path_to_resource)
    logger.debug('Resource path: ' + abs_path_to_resource)
    return abs_path_to_resource
