"""Exceptions raised by the tag cloud package."""


class TagCloudError(Exception):
    """Base class for every error raised by this package."""


class ConfigurationError(TagCloudError):
    """Raised when a cloud or the settings are configured with invalid values."""


class InvalidArgument(TagCloudError, ValueError):
    """Raised when an operation receives an argument outside its accepted set."""


class CacheUnavailable(TagCloudError):
    """Raised when the cache store cannot be read or written, or holds corrupt data."""


class CloudNotFound(TagCloudError, KeyError):
    """Raised when no cloud is cached under the requested key."""
