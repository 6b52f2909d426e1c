"""Ed25519 detached signature verification for base-58 wallet addresses.

A wallet address is the base-58 encoding of a 32-byte Ed25519 public key.
Signatures are 64-byte detached signatures over the raw message bytes, also
base-58 encoded. Verification is pure and never raises on bad input.
"""

from nacl.exceptions import BadSignatureError
from nacl.signing import VerifyKey
from solders.pubkey import Pubkey
from solders.signature import Signature

PUBLIC_KEY_LENGTH = 32
SIGNATURE_LENGTH = 64


class DecodeError(ValueError):
    """Raised when a wallet address or signature is not valid base-58 of the expected length."""


def message_bytes(text: str) -> bytes:
    """UTF-8 encode a signed message, replacing lone surrogates with U+FFFD like a browser TextEncoder."""
    return "".join("\ufffd" if "\ud800" <= char <= "\udfff" else char for char in text).encode("utf-8")


def decode_public_key(wallet: str) -> bytes:
    try:
        key = bytes(Pubkey.from_string(wallet))
    except (ValueError, TypeError) as e:
        raise DecodeError(f"Invalid wallet address: {wallet!r}") from e
    if len(key) != PUBLIC_KEY_LENGTH:
        raise DecodeError(f"Invalid wallet address: {wallet!r}")
    return key


def decode_signature(signature: str) -> bytes:
    try:
        raw = bytes(Signature.from_string(signature))
    except (ValueError, TypeError) as e:
        raise DecodeError("Invalid signature encoding") from e
    if len(raw) != SIGNATURE_LENGTH:
        raise DecodeError("Invalid signature encoding")
    return raw


def verify_signature(message: bytes, signature: str, wallet: str) -> bool:
    """Return True iff `signature` was made by the key behind `wallet` over exactly `message`."""
    try:
        verify_key = VerifyKey(decode_public_key(wallet))
        verify_key.verify(message, decode_signature(signature))
    except (BadSignatureError, ValueError):  # DecodeError included
        return False
    return True
