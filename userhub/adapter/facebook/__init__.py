"""Facebook Graph adapter."""

from .client import (
    FacebookGraphClient,
    FacebookGraphError,
    MockFacebookGraphClient,
    RealFacebookGraphClient,
)

__all__ = [
    "FacebookGraphClient",
    "FacebookGraphError",
    "MockFacebookGraphClient",
    "RealFacebookGraphClient",
]
