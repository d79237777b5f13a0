"""Service layer: connectivity check and command line interface."""

from .connectivity import ConnectivityCheck, ConnectivityStatus

__all__ = ["ConnectivityCheck", "ConnectivityStatus"]
