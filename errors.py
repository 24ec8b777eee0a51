class ConfigurationError(Exception):
    """Raised at startup when the template, color scale or settings are malformed."""


class CounterUnavailable(Exception):
    """Raised per request when the shared view counter cannot be used safely."""
