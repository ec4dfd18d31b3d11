"""
aesgcm: AES-256-GCM authenticated encryption
============================================
A thin, typed wrapper over the cryptography package's AESGCM primitive,
plus a time-seeded nonce generator.

    Aes256Gcm(key)                      32-byte key, reusable, stateless
    Aes256Gcm.seal(plaintext, aad, nonce)  -> ciphertext || tag(16)
    Aes256Gcm.open(ciphertext, aad, nonce) -> plaintext
    generate_nonce()                    -> 12 fresh bytes

Cipher rounds and GHASH are never reimplemented here; they come from
cryptography (OpenSSL).

License: Apache 2.0
"""

__version__  = "1.0.0"
__author__   = "aesgcm contributors"
__project__  = "aesgcm"

from .cipher import Aes256Gcm, KEY_SIZE, NONCE_SIZE, TAG_SIZE
from .nonce  import NonceGenerator, generate_nonce
from .errors import (
    AESGCMError,
    InvalidKeySize,
    InvalidNonceSize,
    InputTooShort,
    AuthenticationFailure,
    EncryptionFailure,
    RandomSourceUnavailable,
)

__all__ = [
    "Aes256Gcm",
    "NonceGenerator",
    "generate_nonce",
    "KEY_SIZE",
    "NONCE_SIZE",
    "TAG_SIZE",
    "AESGCMError",
    "InvalidKeySize",
    "InvalidNonceSize",
    "InputTooShort",
    "AuthenticationFailure",
    "EncryptionFailure",
    "RandomSourceUnavailable",
]
