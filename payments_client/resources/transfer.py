"""
The Transfer resource: a movement of funds to a connected account.
"""

from datetime import datetime
from enum import Enum
from typing import ClassVar, List, Optional

from pydantic import Field

from payments_client.ids import TransferId
from payments_client.params import (
    ApiObject,
    Currency,
    Expandable,
    ListObject,
    Metadata,
    QueryParams,
    RangeQuery,
    Timestamp,
    timestamp_to_datetime,
)
from payments_client.resources.related import Account, BalanceTransaction, Charge, TransferReversal


class SourceType(str, Enum):
    """Known values of Transfer.source_type. The field itself stays an open string."""

    CARD = "card"
    BANK_ACCOUNT = "bank_account"


class Transfer(ApiObject):
    """
    Snapshot of a transfer as returned by the API.

    Amounts are integers in the currency's smallest unit. When reversed is
    True the server guarantees amount_reversed == amount; a partial reversal
    leaves reversed False.
    """

    OBJECT_NAME: ClassVar[str] = "transfer"

    id: TransferId
    amount: int
    amount_reversed: int
    balance_transaction: Optional[Expandable[BalanceTransaction]] = None
    created: Timestamp
    currency: Currency
    description: Optional[str] = None
    destination: Optional[Expandable[Account]] = None
    destination_payment: Optional[Expandable[Charge]] = None
    livemode: bool
    metadata: Metadata
    reversals: ListObject[TransferReversal]
    reversed: bool
    # None means the transfer was funded from the available balance
    source_transaction: Optional[Expandable[Charge]] = None
    source_type: Optional[str] = None
    transfer_group: Optional[str] = None

    @property
    def created_at(self) -> datetime:
        return timestamp_to_datetime(self.created)

    @property
    def is_partially_reversed(self) -> bool:
        return not self.reversed and 0 < self.amount_reversed < self.amount

    @classmethod
    def list(cls, client, params: Optional["TransferListParams"] = None):
        """
        List transfers sent to connected accounts, most recently created first.

        Returns whatever client.get_query returns: a ListObject[Transfer] for
        a Client, an awaitable of one for an AsyncClient. Errors from the
        client propagate untouched.
        """
        if params is None:
            params = TransferListParams()
        return client.get_query("/transfers", params, ListObject[cls])


class TransferListParams(QueryParams):
    """
    Parameters for Transfer.list.

    ending_before / starting_after are transfer ids marking a position in a
    previously fetched page. limit is checked by the server (1-100, default 10).
    """

    created: Optional[RangeQuery] = None
    ending_before: Optional[TransferId] = None
    expand: List[str] = Field(default_factory=list)
    limit: Optional[int] = None
    starting_after: Optional[TransferId] = None
