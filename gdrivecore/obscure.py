"""Light obscuring of strings and checks on token files."""

from __future__ import annotations

import base64
import binascii
import os
import secrets

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from gdrivecore.tokens import Token, TokenError

_BLOCK_SIZE = 16

_CRYPT_KEY = bytes(
    [
        0x9C, 0x93, 0x5B, 0x48, 0x73, 0x0A, 0x55, 0x4D,
        0x6B, 0xFD, 0x7C, 0x63, 0xC8, 0x86, 0xA9, 0x2B,
        0xD3, 0x90, 0x19, 0x8E, 0xB8, 0x12, 0x8A, 0xFB,
        0x7D, 0x59, 0x45, 0x36, 0x69, 0x25, 0x77, 0xC1,
    ]
)

ENCRYPTED_PREFIX = "ENCRYPTED:"


class ObscureError(Exception):
    """A string could not be revealed, or a token file could not be classified."""


def _crypt(data: bytes, iv: bytes) -> bytes:
    cipher = Cipher(algorithms.AES(_CRYPT_KEY), modes.CTR(iv))
    transform = cipher.encryptor()
    return transform.update(data) + transform.finalize()


def _raw_url_encode(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).decode("ascii").rstrip("=")


def _raw_url_decode(text: str) -> bytes:
    if "=" in text:
        raise ObscureError("base64 decode failed: unexpected padding")
    padded = text + "=" * (-len(text) % 4)
    try:
        return base64.b64decode(padded, altchars=b"-_", validate=True)
    except (binascii.Error, ValueError) as exc:
        raise ObscureError(f"base64 decode failed: {exc}") from exc


def obscure(plaintext: str) -> str:
    """Obscure ``plaintext`` with AES-CTR under a random IV."""
    data = plaintext.encode("utf-8", "surrogateescape")
    iv = os.urandom(_BLOCK_SIZE)
    return _raw_url_encode(iv + _crypt(data, iv))


def reveal(obscured: str) -> str:
    """Recover the plaintext from a string made by :func:`obscure`."""
    ciphertext = _raw_url_decode(obscured)
    if len(ciphertext) < _BLOCK_SIZE:
        raise ObscureError("input too short")
    iv, body = ciphertext[:_BLOCK_SIZE], ciphertext[_BLOCK_SIZE:]
    return _crypt(body, iv).decode("utf-8", "surrogateescape")


def is_token_encrypted(path: str | os.PathLike[str]) -> bool:
    """Whether the token file at ``path`` is encrypted rather than plain JSON."""
    try:
        with open(path, "rb") as f:
            data = f.read()
    except OSError as exc:
        raise ObscureError(f"failed to read file: {exc}") from exc

    content = data.decode("utf-8", "replace").strip()
    if content.startswith(ENCRYPTED_PREFIX):
        return True

    try:
        Token.from_json(data)
        return False
    except TokenError:
        pass

    try:
        base64.b64decode(content, validate=True)
    except (binascii.Error, ValueError):
        raise ObscureError("file is neither plain JSON nor encrypted format") from None
    return True


def generate_random_password(length: int) -> str:
    """A random URL-safe password of ``length`` characters, at least 16."""
    length = max(length, 16)
    return _raw_url_encode(secrets.token_bytes(length))[:length]