"""External zip process invocation."""
import errno
import logging
import os
import subprocess
from pathlib import Path
from typing import List

from .. import constants
from ..core import config
from ..utils.exceptions import NotFoundError, ZipError

logger = logging.getLogger(__name__)

def build_command(zip_file_path: Path) -> List[str]:
    """Build the command line that archives the working directory recursively.

    Args:
        zip_file_path: Absolute path of the archive to create

    Returns:
        list: Command line arguments list
    """
    zip_binary = config.get_setting("zip_binary") or constants.DEFAULT_CONFIG["zip_binary"]
    return [zip_binary, "-r", str(zip_file_path), "."]

def _decode(data: bytes) -> str:
    return data.decode(constants.TEXT_ENCODING, errors="replace")

def run_zip(cmd: List[str], cwd: Path) -> str:
    """Run the zip process to completion inside ``cwd``.

    Args:
        cmd: Command list to execute
        cwd: Directory to archive

    Returns:
        str: Decoded standard output of the process

    Raises:
        NotFoundError: If ``cwd`` does not exist
        ZipError: If the zip binary is missing or exits non-zero
    """
    if not cwd.is_dir():
        raise NotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(cwd))

    logger.debug("Running %s in %s", cmd, cwd)
    try:
        result = subprocess.run(cmd, cwd=cwd, capture_output=True)
    except FileNotFoundError as e:
        raise ZipError(f"Failed to create zip: {cmd[0]} executable not found ({e})") from e
    except OSError as e:
        raise ZipError(f"Failed to create zip: {e}") from e

    if result.returncode != 0:
        raise ZipError(f"Failed to create zip: {_decode(result.stderr)}")

    return _decode(result.stdout)
