"""Remote service client."""

from .base import ServiceClient
from .models import OnlineModel
from .rest import RestServiceClient

__all__ = ["OnlineModel", "RestServiceClient", "ServiceClient"]
