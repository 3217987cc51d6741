"""Loading Python modules from files under a project root.

Running code from an arbitrary path is a different trust boundary from
reading files, so this lives outside the file operations and can be turned
off with the ``allow_module_import`` setting.
"""
import hashlib
import importlib.util
import logging
import sys
from types import ModuleType
from typing import Any, Dict

from ..core import config
from ..core.inputs import DirectoryInput
from ..core.paths import resolve_path, translate_not_found
from ..utils.exceptions import ModuleImportDisabledError, ModuleLoadError

logger = logging.getLogger(__name__)

MODULE_PREFIX = "projfs_loaded_"

def _module_name(file_path: str) -> str:
    digest = hashlib.sha1(file_path.encode("utf-8")).hexdigest()[:12]
    return MODULE_PREFIX + digest

def exported_bindings(module: ModuleType) -> Dict[str, Any]:
    """Return the public names of a module mapped to their values.

    Uses ``__all__`` when the module defines it, otherwise every name that
    does not start with an underscore.
    """
    names = getattr(module, "__all__", None)
    if names is None:
        names = [name for name in vars(module) if not name.startswith("_")]
    try:
        return {name: getattr(module, name) for name in names}
    except AttributeError as e:
        raise ModuleLoadError(f"{module.__file__} lists an undefined name in __all__: {e}") from e

def import_module(params: DirectoryInput) -> Dict[str, Any]:
    """Import a Python source file and return its exported bindings.

    Modules are cached by resolved path, so importing the same file twice
    does not execute it again.

    Args:
        params: Project root and module path

    Returns:
        dict: Exported names mapped to their values

    Raises:
        ModuleImportDisabledError: If allow_module_import is off
        NotFoundError: If the file does not exist
        ModuleLoadError: If the file cannot be loaded as a module
    """
    if not config.get_setting("allow_module_import"):
        raise ModuleImportDisabledError("Module import is disabled by configuration")

    file_path = resolve_path(params.project_root, params.path)
    with translate_not_found(file_path):
        resolved = str(file_path.resolve(strict=True))

    name = _module_name(resolved)
    module = sys.modules.get(name)
    if module is not None:
        return exported_bindings(module)

    spec = importlib.util.spec_from_file_location(name, resolved)
    if spec is None or spec.loader is None:
        raise ModuleLoadError(f"Cannot load {resolved} as a Python module")

    logger.debug("Loading module %s from %s", name, resolved)
    module = importlib.util.module_from_spec(spec)
    sys.modules[name] = module
    try:
        spec.loader.exec_module(module)
        return exported_bindings(module)
    except BaseException:
        sys.modules.pop(name, None)
        raise
