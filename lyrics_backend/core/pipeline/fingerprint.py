"""
Content fingerprinting for cache addressing.

Builds a short, deterministic hex hash of normalized item content plus
optional config. The hash is a djb2-style multiplicative fold and is only
used for deduplication; collisions cost a recompute, never wrong output.

Dependencies: json (stdlib)
System role: Cache key derivation for both cache tiers
"""

import json
from collections.abc import Iterable, Mapping
from typing import Any

_HASH_SEED = 5381
_HASH_MASK = 0xFFFFFFFF


def hash_string(value: str) -> str:
    """
    Fold a string through h = h*33 XOR code, wrapping at 32 bits.

    Args:
        value: String to hash

    Returns:
        str: Lower-case hex digest without padding
    """
    h = _HASH_SEED
    for ch in value:
        h = ((h * 33) ^ ord(ch)) & _HASH_MASK
    return format(h, "x")


def canonical_json(payload: Any) -> str:
    """Serialize with sorted keys and no whitespace so field order never matters."""
    return json.dumps(payload, sort_keys=True, separators=(",", ":"), ensure_ascii=False)


def fingerprint(
    items: Iterable[Mapping[str, Any]],
    config: Mapping[str, Any] | None = None,
) -> str:
    """
    Compute the fingerprint of already-normalized items.

    Items must be reduced to the fields that influence the output before
    they are passed in. Item order is significant, key order is not.

    Args:
        items: Normalized item mappings in input order
        config: Optional config that changes the output (e.g. target language)

    Returns:
        str: Hex fingerprint
    """
    payload: dict[str, Any] = {"items": list(items)}
    if config:
        payload["config"] = dict(config)
    return hash_string(canonical_json(payload))
