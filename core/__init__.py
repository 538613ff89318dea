"""Core domain package for the Aura Gold console."""

from .api_client import AuthenticationError, InvoiceApiClient, MalformedInputError, TransportError
from .models import DashboardData, FilterCriteria, Holdings, HomeData, UserProfile
from .polling import InvoicePoller, RecordFeed
from .session import SessionContext

__all__ = [
    "AuthenticationError",
    "InvoiceApiClient",
    "MalformedInputError",
    "TransportError",
    "DashboardData",
    "FilterCriteria",
    "Holdings",
    "HomeData",
    "UserProfile",
    "InvoicePoller",
    "RecordFeed",
    "SessionContext",
]
