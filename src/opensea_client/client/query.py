"""Query string encoding for the asset listing endpoint."""

from urllib.parse import urlencode

from ..shared.models import AssetsQueryParams


def encode_assets_query(params: AssetsQueryParams) -> list[tuple[str, str]]:
    """Convert listing filters into ordered query pairs.

    Unset and empty fields are left out. Multi-valued fields produce one pair
    per entry, in input order.

    Args:
        params: The listing filters.

    Returns:
        list[tuple[str, str]]: Query pairs ready for ``urlencode``.

    """
    pairs: list[tuple[str, str]] = []
    if params.owner:
        pairs.append(("owner", params.owner))
    for token_id in params.token_ids:
        pairs.append(("token_id", str(token_id)))
    if params.collection:
        pairs.append(("collection", params.collection))
    if params.collection_slug:
        pairs.append(("collection_slug", params.collection_slug))
    if params.collection_editor:
        pairs.append(("collection_editor", params.collection_editor))
    if params.order_direction:
        pairs.append(("order_direction", params.order_direction.value))
    if params.asset_contract_address:
        pairs.append(("asset_contract_address", params.asset_contract_address))
    for address in params.asset_contract_addresses:
        pairs.append(("asset_contract_addresses", address))
    # A limit of 0 cannot be told apart from no limit.
    if params.limit:
        pairs.append(("limit", str(params.limit)))
    if params.cursor:
        pairs.append(("cursor", params.cursor))
    if params.include_orders:
        pairs.append(("include_orders", "true"))
    return pairs


def build_assets_query(params: AssetsQueryParams) -> str:
    """Build the URL-encoded query string for the asset listing endpoint."""
    return urlencode(encode_assets_query(params))
