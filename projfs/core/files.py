"""File operations relative to a project root."""
import shutil

from .. import constants
from ..utils.exceptions import ContentRequiredError
from .inputs import CopyInput, DirectoryInput, FileWriteInput
from .paths import resolve_path, translate_not_found

def read_file_binary(params: DirectoryInput) -> bytes:
    """Read a file and return its contents as bytes.

    Raises:
        NotFoundError: If the file does not exist
    """
    file_path = resolve_path(params.project_root, params.path)
    with translate_not_found(file_path):
        return file_path.read_bytes()

def read_file_text(params: DirectoryInput) -> str:
    """Read a file and return its contents as UTF-8 text.

    Raises:
        NotFoundError: If the file does not exist
    """
    file_path = resolve_path(params.project_root, params.path)
    with translate_not_found(file_path):
        with open(file_path, 'r', encoding=constants.TEXT_ENCODING, newline='') as f:
            return f.read()

def write_file(params: FileWriteInput) -> None:
    """Write text content to a file, creating or truncating it.

    Args:
        params: Project root, file path and the text to write

    Raises:
        ContentRequiredError: If content is missing or empty. Nothing is
            written in that case.
        NotFoundError: If the parent directory does not exist
    """
    if not params.content:
        raise ContentRequiredError(constants.CONTENT_REQUIRED_MESSAGE)
    file_path = resolve_path(params.project_root, params.path)
    with translate_not_found(file_path):
        with open(file_path, 'w', encoding=constants.TEXT_ENCODING, newline='') as f:
            f.write(params.content)

def remove_file(params: DirectoryInput) -> None:
    """Delete a single file.

    Unlike remove_directory, a missing file is an error.

    Raises:
        NotFoundError: If the file does not exist
    """
    file_path = resolve_path(params.project_root, params.path)
    with translate_not_found(file_path):
        file_path.unlink()

def copy_file(params: CopyInput) -> None:
    """Copy a file, overwriting the target if it exists.

    Raises:
        NotFoundError: If the source does not exist
    """
    source = resolve_path(params.project_root, params.source)
    target = resolve_path(params.project_root, params.target)
    with translate_not_found(source):
        shutil.copyfile(source, target)
    shutil.copymode(source, target)
