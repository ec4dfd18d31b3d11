"""
AES-256-GCM
===========
AES-256 in Galois/Counter Mode, sealed and opened with an explicit nonce.

GCM provides authenticated encryption. It encrypts the data and
produces a 128-bit authentication tag over the ciphertext and the
associated data. Any tampering is detected on open, before a single
byte of plaintext is released.

Key size: 256 bits (32 bytes)
Nonce:    96 bits (12 bytes), supplied by the caller on every call
Tag:      128 bits (16 bytes), appended to the ciphertext

Output format: ciphertext || tag(16)

A nonce must never be reused under the same key. Use generate_nonce()
if you have no scheme of your own.

Dependencies: cryptography >= 41.0
"""

import os
import logging
from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from .errors import (
    AuthenticationFailure,
    EncryptionFailure,
    InputTooShort,
    InvalidKeySize,
    InvalidNonceSize,
)

logger = logging.getLogger(__name__)

KEY_SIZE   = 32   # 256-bit key
NONCE_SIZE = 12   # 96-bit nonce (GCM standard)
TAG_SIZE   = 16   # 128-bit tag


class Aes256Gcm:
    """AES-256-GCM authenticated encryption bound to a single key."""

    KEY_SIZE   = KEY_SIZE
    NONCE_SIZE = NONCE_SIZE
    TAG_SIZE   = TAG_SIZE

    def __init__(self, key: bytes):
        """
        Bind the cipher to a 32-byte key.
        The key is copied; later changes to a caller's buffer have no effect.
        """
        if len(key) != KEY_SIZE:
            raise InvalidKeySize(
                f"AES-256 key must be {KEY_SIZE} bytes, got {len(key)}."
            )
        self._aesgcm = AESGCM(bytes(key))
        logger.debug("Aes256Gcm ready")

    def __repr__(self):
        return "Aes256Gcm(key=<redacted>)"

    @staticmethod
    def generate_key() -> bytes:
        return os.urandom(KEY_SIZE)

    @staticmethod
    def _check_nonce(nonce: bytes):
        if len(nonce) != NONCE_SIZE:
            raise InvalidNonceSize(
                f"GCM nonce must be {NONCE_SIZE} bytes, got {len(nonce)}."
            )

    def seal(self, plaintext: bytes, aad: bytes, nonce: bytes) -> bytes:
        """
        Encrypt and authenticate.
        aad = Additional Authenticated Data (covered by the tag, not encrypted).
        Returns: ciphertext || tag, len(plaintext) + 16 bytes.
        """
        self._check_nonce(nonce)
        try:
            sealed = self._aesgcm.encrypt(nonce, plaintext, aad or None)
        except (ValueError, OverflowError) as exc:
            raise EncryptionFailure("AES-256-GCM encryption failed.") from exc
        logger.debug(f"Sealed {len(plaintext)}B plaintext, {len(aad or b'')}B aad")
        return sealed

    def open(self, ciphertext: bytes, aad: bytes, nonce: bytes) -> bytes:
        """
        Verify the tag, then decrypt.
        Raises AuthenticationFailure if the ciphertext, tag, aad, nonce or
        key differ from what was used to seal.
        """
        self._check_nonce(nonce)
        if len(ciphertext) < TAG_SIZE:
            raise InputTooShort(
                f"Sealed input must be at least {TAG_SIZE} bytes, got {len(ciphertext)}."
            )
        try:
            plaintext = self._aesgcm.decrypt(nonce, ciphertext, aad or None)
        except InvalidTag as exc:
            logger.warning(
                f"Authentication failed on {len(ciphertext)}B input, "
                f"{len(aad or b'')}B aad"
            )
            raise AuthenticationFailure(
                "AES-256-GCM authentication tag mismatch. "
                "Data tampered, or wrong key, nonce or aad."
            ) from exc
        logger.debug(f"Opened {len(plaintext)}B plaintext")
        return plaintext
