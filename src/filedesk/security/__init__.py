"""At-rest field encryption."""

from .field_encryption import FieldCipher, decrypt, encrypt

__all__ = ["FieldCipher", "decrypt", "encrypt"]
