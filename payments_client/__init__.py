"""
payments_client - typed models and a small httpx client for a payments API's
Transfer resource.
"""

from payments_client.client import AsyncClient, Client
from payments_client.errors import (
    APIConnectionError,
    APIError,
    AuthenticationError,
    ConfigurationError,
    DeserializationError,
    InvalidRequestError,
    PaymentsError,
    PermissionDeniedError,
    RateLimitError,
)
from payments_client.params import ListObject, Object, RangeBounds, expandable_id, is_expanded
from payments_client.resources import (
    Account,
    BalanceTransaction,
    Charge,
    SourceType,
    Transfer,
    TransferListParams,
    TransferReversal,
)

__version__ = "0.1.0"

__all__ = [
    "APIConnectionError",
    "APIError",
    "Account",
    "AsyncClient",
    "AuthenticationError",
    "BalanceTransaction",
    "Charge",
    "Client",
    "ConfigurationError",
    "DeserializationError",
    "InvalidRequestError",
    "ListObject",
    "Object",
    "PaymentsError",
    "PermissionDeniedError",
    "RangeBounds",
    "RateLimitError",
    "SourceType",
    "Transfer",
    "TransferListParams",
    "TransferReversal",
    "expandable_id",
    "is_expanded",
]
