"""projfs - Filesystem operations addressed relative to a project root."""
import logging

from .core.config import init_paths
from .core.inputs import CopyInput, DirectoryInput, FileWriteInput, ZipInput
from .core.directories import (
    copy_directory,
    list_directories,
    make_directory,
    remove_directory,
    zip_folder
)
from .core.files import (
    copy_file,
    read_file_binary,
    read_file_text,
    remove_file,
    write_file
)
from .services.modules import import_module
from .utils.exceptions import (
    AlreadyExistsError,
    ConfigValidationError,
    ContentRequiredError,
    InvalidInputError,
    ModuleImportDisabledError,
    ModuleLoadError,
    NotFoundError,
    OperationError,
    ProjfsError,
    ZipError
)

# Initialize global paths
init_paths()

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"
__all__ = [
    'DirectoryInput',
    'CopyInput',
    'ZipInput',
    'FileWriteInput',
    'list_directories',
    'make_directory',
    'remove_directory',
    'copy_directory',
    'zip_folder',
    'read_file_binary',
    'read_file_text',
    'write_file',
    'remove_file',
    'copy_file',
    'import_module',
    'ProjfsError',
    'NotFoundError',
    'AlreadyExistsError',
    'ContentRequiredError',
    'OperationError',
    'ZipError',
    'InvalidInputError',
    'ConfigValidationError',
    'ModuleLoadError',
    'ModuleImportDisabledError'
]
