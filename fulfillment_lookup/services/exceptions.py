"""Base service exceptions.

Exceptions raised by the external clients. The fulfillment lookups catch them
and report them as failure results instead of re-raising.
"""


class ServiceError(Exception):
    """Base service exception."""

    pass
