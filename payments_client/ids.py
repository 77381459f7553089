"""
Typed object identifiers.

Identifiers are plain strings on the wire; the prefixed ones are checked on
validation so a charge id cannot be passed where a transfer id is expected.
"""

from typing import Annotated

from pydantic import AfterValidator


def prefixed_id(*prefixes: str):
    """
    Build a str type that only accepts values starting with one of prefixes.
    """

    def _check(value: str) -> str:
        if not value.startswith(prefixes):
            raise ValueError(f"expected an id starting with {' or '.join(prefixes)}, got {value!r}")
        return value

    return Annotated[str, AfterValidator(_check)]


TransferId = prefixed_id("tr_")
TransferReversalId = prefixed_id("trr_")
AccountId = prefixed_id("acct_")

# charges and destination payments share the expandable Charge type
ChargeId = prefixed_id("ch_", "py_")

# balance transactions have carried several historical prefixes
BalanceTransactionId = str
