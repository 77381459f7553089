"""
Shared fixtures: transfer payloads as the API returns them and clients wired
to an in-memory httpx transport.
"""

import copy

import httpx
import pytest

from payments_client import AsyncClient, Client

BASE_URL = "https://api.example.test/v1"
API_KEY = "sk_test_123"

MINIMAL_TRANSFER = {
    "id": "tr_1",
    "amount": 1000,
    "amount_reversed": 0,
    "created": 1690000000,
    "currency": "usd",
    "livemode": False,
    "metadata": {},
    "reversals": {
        "object": "list",
        "data": [],
        "has_more": False,
        "url": "/v1/transfers/tr_1/reversals",
    },
    "reversed": False,
}

REVERSED_TRANSFER = {
    "id": "tr_2",
    "amount": 2500,
    "amount_reversed": 2500,
    "balance_transaction": "txn_2",
    "created": 1690000500,
    "currency": "eur",
    "description": "Payout for order 42",
    "destination": "acct_2",
    "destination_payment": "py_2",
    "livemode": True,
    "metadata": {"order_id": "42", "region": "eu"},
    "reversals": {
        "object": "list",
        "data": [
            {
                "id": "trr_1",
                "object": "transfer_reversal",
                "amount": 2500,
                "currency": "eur",
                "created": 1690000600,
                "metadata": {},
                "transfer": "tr_2",
            }
        ],
        "has_more": False,
        "url": "/v1/transfers/tr_2/reversals",
    },
    "reversed": True,
    "source_transaction": "ch_2",
    "source_type": "card",
    "transfer_group": "ORDER_42",
}


@pytest.fixture
def transfer_json():
    return copy.deepcopy(MINIMAL_TRANSFER)


@pytest.fixture
def reversed_transfer_json():
    return copy.deepcopy(REVERSED_TRANSFER)


def list_body(*transfers, has_more=False):
    return {
        "object": "list",
        "data": list(transfers),
        "has_more": has_more,
        "url": "/v1/transfers",
    }


class RecordingHandler:
    """MockTransport handler that remembers every request it served."""

    def __init__(self, status_code=200, json=None, text=None, exc=None):
        self.status_code = status_code
        self.json = json
        self.text = text
        self.exc = exc
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.exc is not None:
            raise self.exc(f"simulated failure for {request.url}", request=request)
        if self.text is not None:
            return httpx.Response(self.status_code, text=self.text)
        return httpx.Response(self.status_code, json=self.json)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def make_client():
    clients = []

    def _make(handler, **kwargs):
        http_client = httpx.Client(transport=httpx.MockTransport(handler))
        clients.append(http_client)
        return Client(api_key=API_KEY, base_url=BASE_URL, http_client=http_client, **kwargs)

    yield _make
    for http_client in clients:
        http_client.close()


@pytest.fixture
def make_async_client():
    def _make(handler, **kwargs):
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        return AsyncClient(api_key=API_KEY, base_url=BASE_URL, http_client=http_client, **kwargs)

    return _make
