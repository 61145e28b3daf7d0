"""Feature flag types, an environment-variable provider, flagd options and an evaluation cache."""

__version__ = "0.1.0"

__all__ = ["__version__"]