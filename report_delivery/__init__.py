"""Report decorators and delivery service adapters."""

__version__ = "1.0.0"
