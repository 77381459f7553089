from payments_client.resources.related import Account, BalanceTransaction, Charge, TransferReversal
from payments_client.resources.transfer import SourceType, Transfer, TransferListParams

__all__ = [
    "Account",
    "BalanceTransaction",
    "Charge",
    "SourceType",
    "Transfer",
    "TransferListParams",
    "TransferReversal",
]
