# errors.py
# Fatal errors raised outside the rendering core.


class Dragon3DError(RuntimeError):
    pass


class ConfigurationError(Dragon3DError):
    """A required invocation parameter is missing or invalid."""


class IngestionError(Dragon3DError):
    """Contribution data could not be fetched or parsed."""
