"""
lexbase64 예외 정의
모든 예외는 ValueError 하위 클래스라서 기존 `except ValueError` 코드에서도 잡힌다.
"""

from typing import Optional


class Base64CodecError(ValueError):
    """코덱 예외의 공통 부모."""


class InvalidAlphabetError(Base64CodecError):
    """알파벳 길이가 64가 아니거나 중복 문자가 있을 때."""


class EncodingBoundsError(Base64CodecError):
    """정수가 요청한 길이에 들어가지 않을 때 (또는 음수일 때)."""

    def __init__(self, message: str, num: int, length: Optional[int] = None, bound: Optional[int] = None):
        super().__init__(message)
        self.num = num
        self.length = length
        self.bound = bound


class DecodeError(Base64CodecError):
    """알파벳에 없는 문자를 디코딩하려 할 때."""

    def __init__(self, message: str, char: Optional[str] = None, position: Optional[int] = None):
        super().__init__(message)
        self.char = char
        self.position = position
