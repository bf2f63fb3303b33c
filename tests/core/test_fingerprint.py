"""
Test suite for content fingerprinting.

System role: Verification of cache-key derivation
"""

from lyrics_backend.core.pipeline.fingerprint import canonical_json, fingerprint, hash_string


class TestHashString:
    """Test suite for the multiplicative rolling hash."""

    def test_empty_string_should_return_seed(self) -> None:
        assert hash_string("") == format(5381, "x")

    def test_single_character_should_fold_once(self) -> None:
        # (5381 * 33) ^ ord("a") = 177573 ^ 97
        assert hash_string("a") == "2b5c4"

    def test_hash_should_stay_within_32_bits(self) -> None:
        digest = hash_string("夜空の星" * 500)

        assert 0 <= int(digest, 16) <= 0xFFFFFFFF

    def test_hash_should_be_deterministic(self) -> None:
        assert hash_string("私は走る") == hash_string("私は走る")


class TestFingerprint:
    """Test suite for fingerprint()."""

    def test_field_insertion_order_should_not_matter(self) -> None:
        first = fingerprint([{"w": "夜空の星", "t": "1000"}], {"lang": "en"})
        second = fingerprint([{"t": "1000", "w": "夜空の星"}], {"lang": "en"})

        assert first == second

    def test_item_order_should_matter(self) -> None:
        items = [{"w": "a", "t": "0"}, {"w": "b", "t": "1"}]

        assert fingerprint(items) != fingerprint(list(reversed(items)))

    def test_config_should_change_fingerprint(self) -> None:
        items = [{"w": "hello", "t": "0"}]

        assert fingerprint(items, {"lang": "fr"}) != fingerprint(items, {"lang": "de"})

    def test_empty_config_should_match_missing_config(self) -> None:
        items = [{"w": "hello", "t": "0"}]

        assert fingerprint(items, {}) == fingerprint(items)

    def test_canonical_json_should_keep_unicode(self) -> None:
        assert canonical_json({"w": "星"}) == '{"w":"星"}'
