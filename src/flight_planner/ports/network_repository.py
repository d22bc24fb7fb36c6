"""
Network Repository port interface.

Defines the errors raised by repositories that build and cache flight
networks.
"""


class NetworkNotInitializedError(Exception):
    """Raised when the flight network cannot be built on first access."""

    pass
