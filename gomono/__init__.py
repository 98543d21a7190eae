"""Training scheduling domain, logged command/query handlers, an in-memory repository and an error-code registry."""

__version__ = "0.1.0"