"""Shared data models for the OpenSea API client."""

import re
from enum import Enum
from typing import Annotated, Any

from pydantic import AfterValidator, BaseModel, ConfigDict, Field

_ADDRESS_PATTERN = re.compile(r"^0x[0-9a-fA-F]{40}$")


class Network(str, Enum):
    """Fixed OpenSea API deployments."""

    MAINNET = "mainnet"
    RINKEBY = "rinkeby"

    @property
    def base_url(self) -> str:
        """Get the API endpoint for this network."""
        return _NETWORK_URLS[self]


_NETWORK_URLS = {
    Network.MAINNET: "https://api.opensea.io",
    Network.RINKEBY: "https://rinkeby-api.opensea.io",
}


def parse_address(value: str) -> str:
    """Validate an Ethereum address and return its canonical lower-case form.

    Args:
        value: A ``0x``-prefixed, 40 hex digit address in any letter case.

    Returns:
        str: The address in lower case.

    Raises:
        ValueError: If the value is not a well-formed address.

    """
    if not isinstance(value, str) or not _ADDRESS_PATTERN.match(value):
        raise ValueError(f"Invalid address: {value!r}")
    return value.lower()


Address = Annotated[str, AfterValidator(parse_address)]
TokenId = Annotated[int, Field(ge=0)]


class OrderDirection(str, Enum):
    """Sort direction for asset listings."""

    ASC = "asc"
    DESC = "desc"


# Request models
class AssetsQueryParams(BaseModel):
    """Filters and pagination for the asset listing endpoint.

    Every field is optional. Note that ``limit=0`` is treated the same as an
    unset limit and is left out of the query.
    """

    model_config = ConfigDict(frozen=True)

    owner: Address | None = None
    token_ids: list[TokenId] = Field(default_factory=list)
    collection: str | None = None
    collection_slug: str | None = None
    collection_editor: str | None = None
    order_direction: OrderDirection | None = None
    asset_contract_address: Address | None = None
    asset_contract_addresses: list[Address] = Field(default_factory=list)
    limit: int | None = None
    cursor: str | None = None
    include_orders: bool = False


# Response models
class Account(BaseModel):
    """A marketplace account (owner, creator, maker...)."""

    model_config = ConfigDict(extra="allow")

    address: str | None = None
    config: str | None = None
    profile_img_url: str | None = None
    user: dict[str, Any] | None = None


class AssetContract(BaseModel):
    """The contract an asset belongs to."""

    model_config = ConfigDict(extra="allow")

    address: str | None = None
    asset_contract_type: str | None = None
    created_date: str | None = None
    name: str | None = None
    nft_version: str | None = None
    owner: Any = None
    schema_name: str | None = None
    symbol: str | None = None
    total_supply: Any = None
    description: str | None = None
    external_link: str | None = None
    image_url: str | None = None


class Collection(BaseModel):
    """The collection an asset is listed under."""

    model_config = ConfigDict(extra="allow")

    slug: str | None = None
    name: str | None = None
    description: str | None = None
    created_date: str | None = None
    image_url: str | None = None
    banner_image_url: str | None = None
    external_url: str | None = None
    safelist_request_status: str | None = None
    hidden: bool | None = None
    featured: bool | None = None


class Trait(BaseModel):
    """A single metadata trait of an asset."""

    model_config = ConfigDict(extra="allow")

    trait_type: str | None = None
    value: Any = None
    display_type: str | None = None
    max_value: Any = None
    trait_count: int | None = None
    order: Any = None


class Asset(BaseModel):
    """Asset model representing a single NFT as returned by the API.

    Fields are decoded as-is; anything not declared here is preserved as an
    extra attribute.
    """

    model_config = ConfigDict(extra="allow")

    id: int | None = None
    token_id: str | None = None
    num_sales: int | None = None
    background_color: str | None = None
    image_url: str | None = None
    image_preview_url: str | None = None
    image_thumbnail_url: str | None = None
    image_original_url: str | None = None
    animation_url: str | None = None
    animation_original_url: str | None = None
    name: str | None = None
    description: str | None = None
    external_link: str | None = None
    permalink: str | None = None
    decimals: int | None = None
    token_metadata: str | None = None
    is_presale: bool | None = None
    listing_date: str | None = None
    asset_contract: AssetContract | None = None
    collection: Collection | None = None
    owner: Account | None = None
    creator: Account | None = None
    traits: list[Trait] = Field(default_factory=list)
    last_sale: dict[str, Any] | None = None
    sell_orders: list[dict[str, Any]] | None = None
    seaport_sell_orders: list[dict[str, Any]] | None = None
    top_bid: dict[str, Any] | None = None
    transfer_fee: Any = None
    transfer_fee_payment_token: dict[str, Any] | None = None


class AssetsResponse(BaseModel):
    """One page of the asset listing, with cursors for the adjacent pages."""

    model_config = ConfigDict(extra="allow")

    assets: list[Asset]
    next: str | None = None
    previous: str | None = None


class ErrorEnvelope(BaseModel):
    """Minimal body returned by the API alongside a non-200 status."""

    model_config = ConfigDict(strict=True)

    success: bool = False
