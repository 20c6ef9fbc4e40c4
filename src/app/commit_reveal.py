from __future__ import annotations

import hashlib
import hmac
import secrets
from dataclasses import dataclass, field
from typing import Final, Sequence

KEY_BYTES: Final[int] = 32
DEFAULT_DIGEST: Final[str] = "sha256"

# Only digests with at least 256 bits of output.
SUPPORTED_DIGESTS: Final[tuple[str, ...]] = (
    "sha256",
    "sha384",
    "sha512",
    "sha3_256",
    "sha3_512",
    "blake2b",
)


class EntropyUnavailable(RuntimeError):
    """The operating system could not supply cryptographic randomness."""


@dataclass(frozen=True)
class Commitment:
    key: bytes = field(repr=False)
    move: str = field(repr=False)
    hmac: str
    digest: str = DEFAULT_DIGEST


@dataclass(frozen=True)
class Reveal:
    key: str
    move: str


def generate_key(num_bytes: int = KEY_BYTES) -> bytes:
    if num_bytes < KEY_BYTES:
        raise ValueError(f"key must be at least {KEY_BYTES} bytes, got {num_bytes}")
    try:
        return secrets.token_bytes(num_bytes)
    except (OSError, NotImplementedError) as exc:
        raise EntropyUnavailable(f"cannot generate secret key: {exc}") from exc


def pick_move(moves: Sequence[str]) -> str:
    if not moves:
        raise ValueError("cannot pick from an empty move list")
    try:
        return moves[secrets.randbelow(len(moves))]
    except (OSError, NotImplementedError) as exc:
        raise EntropyUnavailable(f"cannot pick computer move: {exc}") from exc


def compute_hmac(*, key: bytes, move: str, digest: str = DEFAULT_DIGEST) -> str:
    return hmac.new(key, move.encode("utf-8"), _digest_constructor(digest)).hexdigest()


def verify_hmac(
    *,
    expected_hmac: str,
    key: bytes | str,
    move: str,
    digest: str = DEFAULT_DIGEST,
) -> bool:
    if isinstance(key, str):
        try:
            key = bytes.fromhex(key)
        except ValueError:
            return False
    computed = compute_hmac(key=key, move=move, digest=digest)
    # Bytes, so non-ASCII input is a mismatch rather than a TypeError.
    return secrets.compare_digest(expected_hmac.strip().lower().encode("utf-8"), computed.encode("ascii"))


def commit(moves: Sequence[str], *, digest: str = DEFAULT_DIGEST) -> Commitment:
    # Resolve the digest before drawing anything so a bad name never consumes a key.
    _digest_constructor(digest)
    key = generate_key()
    move = pick_move(moves)
    return Commitment(key=key, move=move, hmac=compute_hmac(key=key, move=move, digest=digest), digest=digest)


def reveal(commitment: Commitment) -> Reveal:
    return Reveal(key=commitment.key.hex(), move=commitment.move)


def _digest_constructor(name: str):
    if name not in SUPPORTED_DIGESTS:
        raise ValueError(f"unsupported digest {name!r}; choose one of: {', '.join(SUPPORTED_DIGESTS)}")
    return getattr(hashlib, name)
