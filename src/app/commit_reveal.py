from __future__ import annotations

import hashlib
import hmac
import secrets
from dataclasses import dataclass, field
from typing import Final, Protocol

KEY_BYTES: Final[int] = 32


class EntropyUnavailable(RuntimeError):
    """The platform CSPRNG could not produce random bytes."""


class SecureRandom(Protocol):
    def token_bytes(self, num_bytes: int) -> bytes: ...


class SystemRandom:
    """Platform CSPRNG via :mod:`secrets`. Never falls back to :mod:`random`."""

    def token_bytes(self, num_bytes: int) -> bytes:
        try:
            return secrets.token_bytes(num_bytes)
        except (OSError, NotImplementedError) as exc:
            raise EntropyUnavailable(f"secure random source unavailable: {exc}") from exc


def to_hex(data: bytes) -> str:
    return data.hex().upper()


def from_hex(value: str) -> bytes:
    # bytes.fromhex is case-insensitive; strip so pasted values work.
    return bytes.fromhex(value.strip())


def compute_hmac(key: bytes, selector: int) -> bytes:
    return hmac.new(key, bytes([selector]), hashlib.sha256).digest()


def verify_commitment(*, expected_hmac: bytes | str, key: bytes | str, selector: int | bytes | str) -> bool:
    """Recompute the MAC over the revealed selector and compare it to the committed one.

    Hex strings are accepted for every argument so auditors can paste values
    straight from the console.
    """
    if isinstance(expected_hmac, str):
        expected_hmac = from_hex(expected_hmac)
    if isinstance(key, str):
        key = from_hex(key)
    if isinstance(selector, str):
        selector = from_hex(selector)
    if isinstance(selector, bytes):
        if len(selector) != 1:
            return False
        selector = selector[0]
    computed = compute_hmac(key, selector)
    return hmac.compare_digest(expected_hmac, computed)


def _draw(source: SecureRandom, num_bytes: int) -> bytes:
    raw = source.token_bytes(num_bytes)
    if not isinstance(raw, bytes) or len(raw) != num_bytes:
        raise EntropyUnavailable(f"secure random source did not return {num_bytes} bytes")
    return raw


@dataclass(frozen=True)
class Commitment:
    """Computer move fixed by an HMAC before the human chooses.

    Only ``mac`` is shown up front; ``key`` and ``selector`` are revealed
    once the human's move is locked in.
    """

    key: bytes = field(repr=False)
    selector: int = field(repr=False)
    mac: bytes

    @classmethod
    def generate(cls, source: SecureRandom | None = None) -> "Commitment":
        source = source if source is not None else SystemRandom()
        key = _draw(source, KEY_BYTES)
        selector = _draw(source, 1)[0]
        return cls(key=key, selector=selector, mac=compute_hmac(key, selector))

    def computer_ordinal(self, move_count: int) -> int:
        return self.selector % move_count + 1

    @property
    def mac_hex(self) -> str:
        return to_hex(self.mac)

    @property
    def key_hex(self) -> str:
        return to_hex(self.key)

    @property
    def selector_hex(self) -> str:
        return to_hex(bytes([self.selector]))

    def verify(self) -> bool:
        return verify_commitment(expected_hmac=self.mac, key=self.key, selector=self.selector)
