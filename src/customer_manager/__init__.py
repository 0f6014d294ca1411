"""customer-manager — async data-access service for Customer records."""

__version__ = "0.1.0"
