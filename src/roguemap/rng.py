from __future__ import annotations

import hashlib
import json
import logging
import random
import secrets
from dataclasses import dataclass
from typing import Any, Optional, Union

logger = logging.getLogger(__name__)

Seed = Union[int, str, bytes, None]


def _to_stable_json(value: Any) -> str:
    return json.dumps(value, sort_keys=True, separators=(",", ":"), ensure_ascii=False)


@dataclass(frozen=True)
class RNGManager:
    """Session RNG source.

    Every consumer asks for a ``random.Random`` keyed by a domain name, derived
    from one master seed via BLAKE2b. Results therefore do not depend on the
    order in which domains are requested:

        rngm = RNGManager(1234)
        layout_rng = rngm.context_rng("dungeon_layout")

    With no master seed a random one is drawn and logged, so any session can
    be replayed from the log.
    """

    master_seed: Seed = None

    def __post_init__(self) -> None:
        if self.master_seed is None:
            seed_bytes = secrets.token_bytes(16)
            logger.info("No master seed provided; generated random seed: %s", seed_bytes.hex())
        else:
            seed_bytes = self._canonicalize_seed(self.master_seed)
            logger.debug("Using master seed: %r", self.master_seed)
        object.__setattr__(self, "_master_seed_bytes", seed_bytes)

    @staticmethod
    def _canonicalize_seed(seed: Seed) -> bytes:
        if isinstance(seed, bytes):
            return seed
        if isinstance(seed, bool):
            raise TypeError("Unsupported seed type: %r" % (type(seed),))
        if isinstance(seed, int):
            if seed < 0:
                raise ValueError("Seed must be non-negative")
            length = (seed.bit_length() + 7) // 8 or 1
            return seed.to_bytes(length, "big", signed=False)
        if isinstance(seed, str):
            s = seed.strip()
            if s.startswith("0x"):
                try:
                    val = int(s, 16)
                    length = (val.bit_length() + 7) // 8 or 1
                    return val.to_bytes(length, "big", signed=False)
                except ValueError:
                    return s.encode("utf-8")
            return s.encode("utf-8")
        raise TypeError("Unsupported seed type: %r" % (type(seed),))

    def derive_seed(self, domain: str, *identifiers: Any) -> int:
        """Derive a 64-bit integer seed for ``domain`` (plus optional identifiers)."""
        payload = {
            "domain": domain,
            "ids": identifiers,
            "master": self.seed_hex,
        }
        data = _to_stable_json(payload).encode("utf-8")
        seed_int = int.from_bytes(hashlib.blake2b(data, digest_size=8).digest(), "big", signed=False)
        logger.debug("Derived seed for domain=%s ids=%s -> %d", domain, identifiers, seed_int)
        return seed_int

    def context_rng(self, domain: str, *identifiers: Any) -> random.Random:
        return random.Random(self.derive_seed(domain, *identifiers))

    @property
    def seed_hex(self) -> str:
        return self._master_seed_bytes.hex()  # type: ignore[attr-defined]


def parse_seed(raw: Optional[str]) -> Seed:
    """Interpret a seed from CLI/env text: decimal digits become an int, anything else stays a string."""
    if raw is None:
        return None
    raw = raw.strip()
    if not raw:
        return None
    return int(raw) if raw.isdigit() else raw
