"""HTTP transport used by provider clients."""

from .client import HttpTransport

__all__ = ["HttpTransport"]
