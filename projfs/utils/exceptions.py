"""
Custom exceptions for the projfs project
"""

class ProjfsError(Exception):
    """Base exception for all projfs-specific errors"""
    pass

class InvalidInputError(ProjfsError, ValueError):
    """Raised when invalid input is provided"""
    pass

class ContentRequiredError(InvalidInputError):
    """Raised when a file write is attempted without content"""
    pass

class ConfigValidationError(ProjfsError):
    """Raised when configuration validation fails"""
    pass

class NotFoundError(ProjfsError, FileNotFoundError):
    """Raised when a path under the project root does not exist"""
    pass

class AlreadyExistsError(ProjfsError, FileExistsError):
    """Raised when a path under the project root already exists"""
    pass

class OperationError(ProjfsError):
    """Raised for any other failure while creating a directory"""
    pass

class ZipError(ProjfsError):
    """Raised when the external zip process fails"""
    pass

class ModuleLoadError(ProjfsError):
    """Raised when a file cannot be loaded as a Python module"""
    pass

class ModuleImportDisabledError(ProjfsError):
    """Raised when module loading is switched off in the configuration"""
    pass
