"""Error types for the PPA dashboard."""


class PPAError(Exception):
    """Base class for dashboard errors."""


class MalformedInput(PPAError):
    """An import line could not be turned into a record."""


class PersistenceCorruption(PPAError):
    """The stored record payload could not be read."""


class ConfigurationError(PPAError):
    """The assistant has no API key configured."""


class UpstreamError(PPAError):
    """The assistant request failed or returned unusable content."""
