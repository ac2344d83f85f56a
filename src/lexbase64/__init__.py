"""
lexbase64 - 알파벳을 바꿔 쓸 수 있는 Base64 코덱 (정렬 가능한 ID / 키 용)
"""

from .codec import BASE, BASE_BITS, DEFAULT_ALPHABET, Codec, create_codec
from .errors import Base64CodecError, DecodeError, EncodingBoundsError, InvalidAlphabetError

__all__ = [
    "BASE",
    "BASE_BITS",
    "DEFAULT_ALPHABET",
    "Codec",
    "create_codec",
    "Base64CodecError",
    "DecodeError",
    "EncodingBoundsError",
    "InvalidAlphabetError",
]
