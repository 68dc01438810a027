"""Payment Gateway - card payment submission and retrieval API."""

__version__ = "1.0.0"
