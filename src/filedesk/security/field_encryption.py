"""AES-256-CBC encryption for individual stored fields (e.g. credentials).

Tokens are ``hex(iv):hex(ciphertext)`` with a random 16-byte IV and PKCS7
padding. There is no built-in key: without ``FILEDESK_ENCRYPTION_KEY`` (or an
explicit key) every call raises :class:`EncryptionKeyMissingError`.
"""

import os
from typing import Optional, Union

from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from filedesk.core import get_logger
from filedesk.core.config import settings
from filedesk.core.exceptions import DecryptionError, EncryptionKeyMissingError

logger = get_logger(__name__)

KEY_LENGTH = 32
IV_LENGTH = 16


class FieldCipher:
    """Encrypts and decrypts short text fields with a fixed 32-byte key."""

    def __init__(self, key: Union[str, bytes, None]):
        if not key:
            raise EncryptionKeyMissingError(
                "No encryption key configured; set FILEDESK_ENCRYPTION_KEY"
            )
        key_bytes = key.encode("utf-8") if isinstance(key, str) else key
        if len(key_bytes) != KEY_LENGTH:
            raise EncryptionKeyMissingError(
                f"Encryption key must be {KEY_LENGTH} bytes, got {len(key_bytes)}"
            )
        self._key = key_bytes

    @classmethod
    def from_settings(cls) -> "FieldCipher":
        return cls(settings.encryption_key)

    def encrypt(self, text: Optional[str]) -> Optional[str]:
        if not text:
            return text

        iv = os.urandom(IV_LENGTH)
        padder = padding.PKCS7(algorithms.AES.block_size).padder()
        padded = padder.update(text.encode("utf-8")) + padder.finalize()

        encryptor = Cipher(algorithms.AES(self._key), modes.CBC(iv)).encryptor()
        ciphertext = encryptor.update(padded) + encryptor.finalize()
        return f"{iv.hex()}:{ciphertext.hex()}"

    def decrypt(self, token: Optional[str]) -> Optional[str]:
        """Decrypt a token produced by :meth:`encrypt`.

        Raises:
            DecryptionError: If the token is malformed or the key is wrong
        """
        if not token:
            return token

        iv_hex, sep, ciphertext_hex = token.partition(":")
        try:
            if not sep:
                raise ValueError("missing ':' separator")
            iv = bytes.fromhex(iv_hex)
            ciphertext = bytes.fromhex(ciphertext_hex)

            decryptor = Cipher(algorithms.AES(self._key), modes.CBC(iv)).decryptor()
            padded = decryptor.update(ciphertext) + decryptor.finalize()

            unpadder = padding.PKCS7(algorithms.AES.block_size).unpadder()
            plaintext = unpadder.update(padded) + unpadder.finalize()
            return plaintext.decode("utf-8")
        except ValueError as e:
            logger.error("Decryption failed", error=str(e))
            raise DecryptionError(f"Decryption failed: {e}")


def encrypt(text: Optional[str]) -> Optional[str]:
    """Encrypt with the configured key."""
    return FieldCipher.from_settings().encrypt(text)


def decrypt(token: Optional[str]) -> Optional[str]:
    """Decrypt with the configured key."""
    return FieldCipher.from_settings().decrypt(token)
