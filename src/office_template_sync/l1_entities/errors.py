"""Domain error types."""


class TemplateSyncError(Exception):
    """Base class for everything that can go wrong while syncing a template."""


class ConfigurationError(TemplateSyncError):
    """Raised before any template work starts when the run itself is misconfigured."""


class UnsupportedExtensionError(TemplateSyncError):
    """Raised when a template name does not map to a known application kind."""


class InvalidTemplateNameError(TemplateSyncError):
    """Raised when a template name is not a plain file name (separators, `..`, drive or root)."""


class ResolutionError(TemplateSyncError):
    """Raised when the base templates directory for an application kind cannot be determined."""


class DirectoryCreationError(TemplateSyncError):
    """Raised when the target directory cannot be created or is occupied by a non-directory."""


class LocalStateError(TemplateSyncError):
    """Raised when the existence or modification time of the local copy cannot be read."""


class FetchError(TemplateSyncError):
    """Raised when the remote template cannot be fetched."""


class HashComputationError(TemplateSyncError):
    """Raised when the local copy cannot be read for hashing."""


class WriteError(TemplateSyncError):
    """Raised when the downloaded payload cannot be written to disk."""
