"""
Errors raised by aesgcm.

Every failure is a subclass of AESGCMError. The size checks also derive
from ValueError, so callers catching ValueError for a bad key or nonce
length keep working.
"""


class AESGCMError(Exception):
    """Base class for every aesgcm failure."""


class InvalidKeySize(AESGCMError, ValueError):
    """Key is not exactly KEY_SIZE bytes."""


class InvalidNonceSize(AESGCMError, ValueError):
    """Nonce is not exactly NONCE_SIZE bytes."""


class InputTooShort(AESGCMError, ValueError):
    """Sealed input is shorter than the authentication tag."""


class AuthenticationFailure(AESGCMError):
    """
    Tag mismatch on open: tampered data, wrong AAD, wrong nonce or wrong key.
    No plaintext is ever returned alongside this error.
    """


class EncryptionFailure(AESGCMError):
    """The underlying AEAD primitive refused to seal."""


class RandomSourceUnavailable(AESGCMError):
    """The secure random source could not supply nonce bytes."""
