"""Global constants and default configurations for projfs."""

# Global paths will be initialized by core.config
PROJFS_HOME = None
PROJFS_CONFIG_FILE = None

# Default configuration
DEFAULT_CONFIG = {
    "zip_binary": "zip",
    "allow_module_import": True
}

TEXT_ENCODING = "utf-8"
UNKNOWN_ERROR = "Unknown Error"
CONTENT_REQUIRED_MESSAGE = "Content is required for writing file"
