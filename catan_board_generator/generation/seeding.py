from __future__ import annotations

import hashlib
import random
from typing import Any

SEED_BITS = 32

_entropy = random.SystemRandom()


def draw_seed() -> int:
    """Return a fresh seed from the OS entropy pool, as a regenerate request does."""
    return _entropy.getrandbits(SEED_BITS)


def derive_seed(base_seed: int, *parts: Any) -> int:
    payload = "|".join([str(base_seed), *(str(part) for part in parts)]).encode("utf-8")
    return int.from_bytes(hashlib.blake2b(payload, digest_size=8).digest(), "big")
