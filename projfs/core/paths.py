"""Path resolution and OS error translation."""
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from ..utils.exceptions import NotFoundError
from .inputs import RootLike

def join_root(project_root: RootLike, path: str) -> str:
    """Combine the project root and a relative path.

    The two are concatenated as strings, so ``path`` is expected to start
    with a separator when ``project_root`` does not end with one.

    Args:
        project_root: Base directory of the project
        path: Path relative to the project root

    Returns:
        str: The combined path
    """
    return str(project_root) + path

def resolve_path(project_root: RootLike, path: str) -> Path:
    """Same as join_root, as a Path."""
    return Path(join_root(project_root, path))

def format_with_trailing_slash(value: str) -> str:
    """Append a single '/' unless ``value`` already ends with one."""
    return value if value.endswith('/') else value + '/'

@contextmanager
def translate_not_found(path: Path) -> Iterator[None]:
    """Re-raise FileNotFoundError from the wrapped block as NotFoundError."""
    try:
        yield
    except NotFoundError:
        raise
    except FileNotFoundError as e:
        filename = e.filename if e.filename is not None else str(path)
        raise NotFoundError(e.errno, e.strerror, filename) from e
