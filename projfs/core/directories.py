"""Directory operations relative to a project root."""
import logging
import os
import shutil
from typing import List

from .. import constants
from ..utils.exceptions import InvalidInputError, OperationError
from .inputs import CopyInput, DirectoryInput, ZipInput
from .paths import format_with_trailing_slash, resolve_path, translate_not_found

logger = logging.getLogger(__name__)

def list_directories(params: DirectoryInput) -> List[str]:
    """Get the names of all directories directly inside a path.

    Entries are returned in the order the directory stream yields them.
    Symlinks are not followed.

    Args:
        params: Project root and directory path

    Returns:
        list: Directory names

    Raises:
        NotFoundError: If the path does not exist
    """
    dir_path = resolve_path(params.project_root, params.path)
    directories = []
    with translate_not_found(dir_path):
        with os.scandir(dir_path) as entries:
            for entry in entries:
                if entry.is_dir(follow_symlinks=False):
                    directories.append(entry.name)
    return directories

def make_directory(params: DirectoryInput) -> None:
    """Create a directory and any missing parents.

    An existing directory is not an error.

    Raises:
        OperationError: If the directory cannot be created
    """
    dir_path = resolve_path(params.project_root, params.path)
    try:
        dir_path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise OperationError(str(e) or constants.UNKNOWN_ERROR) from e

def remove_directory(params: DirectoryInput) -> None:
    """Remove a directory and all its contents recursively.

    A path that does not exist counts as already removed.
    """
    dir_path = resolve_path(params.project_root, params.path)
    try:
        if dir_path.is_dir() and not dir_path.is_symlink():
            shutil.rmtree(dir_path)
        else:
            os.remove(dir_path)
    except FileNotFoundError:
        pass

def copy_directory(params: CopyInput) -> None:
    """Copy a directory and all its contents to a new location.

    Raises:
        NotFoundError: If the source does not exist
        FileExistsError: If the target already exists
    """
    source = resolve_path(params.project_root, params.source)
    target = resolve_path(params.project_root, params.target)
    with translate_not_found(source):
        shutil.copytree(source, target, symlinks=True)

def zip_folder(params: ZipInput) -> None:
    """Create a zip archive of a directory at ``target/name.zip``.

    The zip process output is logged on success.

    Raises:
        InvalidInputError: If no archive name is given
        NotFoundError: If the source directory does not exist
        ZipError: If the zip process fails
    """
    from ..services import zip_process

    if not params.name:
        raise InvalidInputError("An archive name is required for zipping a folder")

    source = resolve_path(params.project_root, params.source)
    target = resolve_path(params.project_root, format_with_trailing_slash(params.target))

    target.mkdir(parents=True, exist_ok=True)
    zip_file_path = (target / f"{params.name}.zip").resolve()

    output = zip_process.run_zip(zip_process.build_command(zip_file_path), source)
    logger.info(output)
