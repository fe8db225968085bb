"""Tests for asset listing query encoding."""

from urllib.parse import parse_qsl

from opensea_client.client.query import build_assets_query, encode_assets_query
from opensea_client.shared.models import AssetsQueryParams, OrderDirection

ADDRESS_A = "0x" + "a" * 40
ADDRESS_B = "0x" + "B" * 40


class TestEncodeAssetsQuery:
    """Test suite for encode_assets_query."""

    def test_empty_params_produce_empty_query(self):
        """Test that default params contribute nothing."""
        assert encode_assets_query(AssetsQueryParams()) == []
        assert build_assets_query(AssetsQueryParams()) == ""

    def test_all_fields_encoded_once(self):
        """Test that every set field appears exactly once per value."""
        params = AssetsQueryParams(
            owner=ADDRESS_A,
            token_ids=[1, 2],
            collection="punks",
            collection_slug="cryptopunks",
            collection_editor="editor",
            order_direction=OrderDirection.DESC,
            asset_contract_address=ADDRESS_A,
            asset_contract_addresses=[ADDRESS_A, ADDRESS_B],
            limit=20,
            cursor="abc",
            include_orders=True,
        )

        assert encode_assets_query(params) == [
            ("owner", ADDRESS_A),
            ("token_id", "1"),
            ("token_id", "2"),
            ("collection", "punks"),
            ("collection_slug", "cryptopunks"),
            ("collection_editor", "editor"),
            ("order_direction", "desc"),
            ("asset_contract_address", ADDRESS_A),
            ("asset_contract_addresses", ADDRESS_A),
            ("asset_contract_addresses", ADDRESS_B.lower()),
            ("limit", "20"),
            ("cursor", "abc"),
            ("include_orders", "true"),
        ]

    def test_repeated_token_ids_keep_order_and_duplicates(self):
        """Test that token IDs are neither reordered nor deduplicated."""
        params = AssetsQueryParams(token_ids=[7, 3, 7, 2**100])

        assert build_assets_query(params) == (
            f"token_id=7&token_id=3&token_id=7&token_id={2**100}"
        )

    def test_empty_strings_are_omitted(self):
        """Test that empty string fields emit no key."""
        params = AssetsQueryParams(
            collection="", collection_slug="", collection_editor="", cursor=""
        )

        assert build_assets_query(params) == ""

    def test_no_blank_values_emitted(self):
        """Test that no key is ever emitted with an empty value."""
        params = AssetsQueryParams(
            owner=ADDRESS_A, collection="", cursor="next", limit=None
        )

        pairs = parse_qsl(build_assets_query(params), keep_blank_values=True)

        assert pairs == [("owner", ADDRESS_A), ("cursor", "next")]
        assert all(value for _, value in pairs)

    def test_zero_limit_is_treated_as_unset(self):
        """Test that limit=0 is omitted like an unset limit."""
        assert build_assets_query(AssetsQueryParams(limit=0)) == ""
        assert build_assets_query(AssetsQueryParams(limit=1)) == "limit=1"

    def test_include_orders_only_when_true(self):
        """Test that include_orders is emitted as true and never as false."""
        assert build_assets_query(AssetsQueryParams(include_orders=True)) == (
            "include_orders=true"
        )
        assert build_assets_query(AssetsQueryParams(include_orders=False)) == ""
        assert "include_orders" not in build_assets_query(
            AssetsQueryParams(collection="x")
        )

    def test_order_direction_values(self):
        """Test both sort directions and the unset case."""
        assert build_assets_query(
            AssetsQueryParams(order_direction=OrderDirection.ASC)
        ) == ("order_direction=asc")
        assert build_assets_query(AssetsQueryParams(order_direction="desc")) == (
            "order_direction=desc"
        )
        assert build_assets_query(AssetsQueryParams(order_direction=None)) == ""

    def test_addresses_rendered_in_canonical_form(self):
        """Test that addresses are emitted lower-cased."""
        params = AssetsQueryParams(owner=ADDRESS_B, asset_contract_address=ADDRESS_B)

        assert build_assets_query(params) == (
            f"owner={ADDRESS_B.lower()}&asset_contract_address={ADDRESS_B.lower()}"
        )

    def test_special_characters_are_url_encoded(self):
        """Test that opaque values are escaped in the query string."""
        params = AssetsQueryParams(cursor="LXBrPTE=", collection="a b&c")

        query = build_assets_query(params)

        assert query == "collection=a+b%26c&cursor=LXBrPTE%3D"
        assert parse_qsl(query) == [("collection", "a b&c"), ("cursor", "LXBrPTE=")]
