"""
Base64 인코딩/디코딩 (정렬 가능한 짧은 ID / 키 용)
알파벳은 64자 아무거나 쓸 수 있고, 기본값은 URL-safe 문자를 코드포인트 순으로 정렬한 것.
기본 알파벳에서는 같은 길이로 인코딩한 문자열의 정렬 순서가 원래 값의 순서와 같다.
"""

import logging
from typing import Dict, Iterable, Optional, Union

from .errors import DecodeError, EncodingBoundsError, InvalidAlphabetError

logger = logging.getLogger(__name__)

BASE = 64
BASE_BITS = 6

DEFAULT_ALPHABET = "".join(
    sorted("-0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ_abcdefghijklmnopqrstuvwxyz")
)

# 버퍼 인코딩 단계 (position % 4). 바이트 3개 = 문자 4개
_PHASE_LOW_SIX = 1
_PHASE_LOW_FOUR = 2
_PHASE_LOW_TWO = 3
_PHASE_HANG = 0

BufferLike = Union[bytes, bytearray, memoryview, Iterable[int]]


def _check_length(value: int, name: str, minimum: int = 1) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if value < minimum:
        raise ValueError(f"{name} must be an integer >= {minimum}, got {value!r}")


class Codec:
    """알파벳 하나에 묶인 인코더/디코더. 생성 후에는 바뀌지 않는다."""

    __slots__ = ("_alphabet", "_char_to_dec")

    def __init__(self, alphabet: str = DEFAULT_ALPHABET):
        if not isinstance(alphabet, str):
            raise TypeError(f"alphabet must be a str, got {type(alphabet).__name__}")
        if len(alphabet) != BASE:
            raise InvalidAlphabetError(
                f"alphabet must be {BASE} characters long! (got {len(alphabet)})"
            )

        char_to_dec: Dict[str, int] = {}
        for index, char in enumerate(alphabet):
            if char in char_to_dec:
                raise InvalidAlphabetError(f"alphabet has duplicate characters! ({char!r})")
            char_to_dec[char] = index

        self._alphabet = alphabet
        self._char_to_dec = char_to_dec
        logger.debug("Codec created (alphabet=%s)", alphabet)

    @property
    def alphabet(self) -> str:
        return self._alphabet

    def __repr__(self) -> str:
        return f"Codec(alphabet={self._alphabet!r})"

    def _digit(self, encoded: str, position: int) -> int:
        char = encoded[position]
        try:
            return self._char_to_dec[char]
        except KeyError:
            raise DecodeError(
                f"invalid character {char!r} at position {position}", char=char, position=position
            ) from None

    def encode_buffer(self, buffer: BufferLike, length: Optional[int] = None) -> str:
        """
        바이트 -> 문자열. 마지막 바이트부터 6비트씩 잘라 결과의 끝에서부터 채운다.
        length 가 짧으면 앞쪽(상위) 비트가 잘리고, 길면 앞을 alphabet[0] 으로 채운다.
        """
        if isinstance(buffer, int):
            raise TypeError("buffer must be a bytes-like object, not int")
        data = bytes(buffer)
        if length is None:
            length = -(-len(data) * 8 // BASE_BITS)
            if length == 0:
                return ""
        else:
            _check_length(length, "length")

        alphabet = self._alphabet
        chars = [alphabet[0]] * length
        position = 1  # 끝에서부터 1-based
        index = len(data) - 1
        hang = 0
        while index >= 0 and position <= length:
            phase = position % 4
            if phase == _PHASE_HANG:
                digit = hang
            else:
                byte = data[index]
                index -= 1
                if phase == _PHASE_LOW_SIX:
                    digit = byte & 0x3F
                    hang = byte >> 6
                elif phase == _PHASE_LOW_FOUR:
                    digit = ((byte & 0x0F) << 2) | hang
                    hang = byte >> 4
                else:
                    digit = ((byte & 0x03) << 4) | hang
                    hang = byte >> 2
            chars[length - position] = alphabet[digit]
            position += 1

        # 그룹 중간에 버퍼가 끝났으면 남은 상위 비트를 한 글자로 내보낸다
        if position % 4 != _PHASE_LOW_SIX and position <= length:
            chars[length - position] = alphabet[hang]

        return "".join(chars)

    def encode_int(self, num: int, length: Optional[int] = None) -> str:
        """정수 -> 문자열 (일반 64진법, 상위 자리부터)."""
        if isinstance(num, bool) or not isinstance(num, int):
            raise TypeError(f"num must be an int, got {type(num).__name__}")
        if num < 0:
            raise EncodingBoundsError(f"Int ({num}) must be non-negative", num=num)

        if length is None:
            # 2의 거듭제곱 경계(64, 4096, ...)도 bit_length 로 정확히 계산됨
            length = max(1, -(-num.bit_length() // BASE_BITS))
        else:
            _check_length(length, "length")
            bound = 1 << (BASE_BITS * length)
            if num >= bound:
                raise EncodingBoundsError(
                    f"Int ({num}) is greater than or equal to max bound ({bound}) "
                    f"for encoded string length ({length})",
                    num=num,
                    length=length,
                    bound=bound,
                )

        chars = [self._alphabet[0]] * length
        i = length - 1
        while num > 0:
            num, remainder = divmod(num, BASE)
            chars[i] = self._alphabet[remainder]
            i -= 1
        return "".join(chars)

    def decode_to_buffer(self, encoded: str, num_bytes: Optional[int] = None) -> bytes:
        """
        문자열 -> 바이트. encode_buffer 의 역연산.
        num_bytes 를 안 주면 ceil(len * 6 / 8) 바이트. 버퍼보다 긴 상위 비트는 버린다.
        """
        digits = [self._digit(encoded, position) for position in range(len(encoded))]
        if num_bytes is None:
            num_bytes = -(-len(encoded) * BASE_BITS // 8)
        else:
            _check_length(num_bytes, "num_bytes", minimum=0)

        out = bytearray(num_bytes)  # 쓰지 않은 앞쪽 바이트는 0
        index = num_bytes - 1
        position = 1
        while index >= 0 and position <= len(digits):
            digit = digits[-position]
            phase = position % 4
            if phase == _PHASE_LOW_SIX:
                out[index] = digit
            elif phase == _PHASE_LOW_FOUR:
                out[index] |= (digit & 0x03) << 6
                index -= 1
                if index >= 0:
                    out[index] = digit >> 2
            elif phase == _PHASE_LOW_TWO:
                out[index] |= (digit & 0x0F) << 4
                index -= 1
                if index >= 0:
                    out[index] = digit >> 4
            else:
                out[index] |= digit << 2
                index -= 1
            position += 1

        return bytes(out)

    def decode_to_int(self, encoded: str) -> int:
        """문자열 -> 정수"""
        if not encoded:
            raise DecodeError("cannot decode an empty string to int")
        num = 0
        for position in range(len(encoded)):
            num = num * BASE + self._digit(encoded, position)
        return num


def create_codec(alphabet: str = DEFAULT_ALPHABET) -> Codec:
    """알파벳을 검증하고 Codec 을 만든다. 한 번 만들어서 계속 재사용하면 된다."""
    return Codec(alphabet)
