"""
Thin records for the objects a Transfer points at.

Only the identifier and type tag are typed; every other field the server
sends is kept as-is, nulls included, so an expanded reference survives a
round trip.
"""

from typing import Any, ClassVar, Dict, Optional

from pydantic import ConfigDict, Field, SerializationInfo, SerializerFunctionWrapHandler, model_serializer

from payments_client.ids import AccountId, BalanceTransactionId, ChargeId, TransferReversalId
from payments_client.params import ApiObject, Currency, Expandable, Metadata, Timestamp


class ReferencedObject(ApiObject):
    model_config = ConfigDict(frozen=True, extra="allow")

    @model_serializer(mode="wrap")
    def _keep_null_extras(self, handler: SerializerFunctionWrapHandler, info: SerializationInfo):
        data = handler(self)
        # exclude_none only applies to typed fields here; server extras go back verbatim
        if info.exclude_none:
            for key, value in (self.__pydantic_extra__ or {}).items():
                if value is None:
                    data.setdefault(key, None)
        return data


class Account(ReferencedObject):
    OBJECT_NAME: ClassVar[str] = "account"

    id: AccountId


class BalanceTransaction(ReferencedObject):
    OBJECT_NAME: ClassVar[str] = "balance_transaction"

    id: BalanceTransactionId


class Charge(ReferencedObject):
    OBJECT_NAME: ClassVar[str] = "charge"

    id: ChargeId


class TransferReversal(ReferencedObject):
    """A full or partial reversal of a transfer."""

    OBJECT_NAME: ClassVar[str] = "transfer_reversal"

    id: TransferReversalId
    amount: int
    currency: Currency
    created: Timestamp
    metadata: Metadata = Field(default_factory=dict)
    # the reversed transfer; expanded, it is kept as the raw mapping
    transfer: Optional[Expandable[Dict[str, Any]]] = None
