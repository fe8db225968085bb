"""Test configuration and fixtures for the OpenSea client tests."""

import json
from typing import Any

import pytest

from opensea_client import OpenseaClient

API_KEY = "test-api-key"
CONTRACT = "0xb47e3cd837ddf8e4c57f05d70ab865de6e193bbb"
OWNER = "0x5B38Da6a701c568545dCfcB03FcB875f56beddC4"


@pytest.fixture
def asset_payload() -> dict[str, Any]:
    """Single asset body as returned by the API."""
    return {
        "id": 12345,
        "token_id": "42",
        "num_sales": 3,
        "name": "Punk #42",
        "image_url": "https://img.example/42.png",
        "permalink": f"https://opensea.io/assets/{CONTRACT}/42",
        "asset_contract": {
            "address": CONTRACT,
            "asset_contract_type": "non-fungible",
            "schema_name": "CRYPTOPUNKS",
            "symbol": "PUNK",
        },
        "collection": {"slug": "cryptopunks", "name": "CryptoPunks"},
        "owner": {"address": OWNER.lower(), "config": ""},
        "traits": [{"trait_type": "type", "value": "Male", "trait_count": 6039}],
        "last_sale": None,
        "rarity_rank": 17,
    }


@pytest.fixture
def assets_page_payload(asset_payload) -> dict[str, Any]:
    """One page of the asset listing."""
    second = dict(asset_payload, id=12346, token_id="43", name="Punk #43")
    return {
        "next": "LXBrPTEyMzQ2",
        "previous": None,
        "assets": [asset_payload, second],
    }


@pytest.fixture
def encode():
    """Serialize a payload the way the API would send it."""

    def _encode(payload: Any) -> bytes:
        return json.dumps(payload).encode("utf-8")

    return _encode


@pytest.fixture
def client() -> OpenseaClient:
    """Mainnet client that is not connected to any session."""
    return OpenseaClient.mainnet(API_KEY)

