#!/usr/bin/env python3
"""
로컬 인코딩 확인용 스크립트 (설치 없이 Python만 사용)

사용법:
  python3 scripts/local_run.py encode-int 4096 --length 4
  python3 scripts/local_run.py decode-int 0--
  python3 scripts/local_run.py encode-hex 010203
  python3 scripts/local_run.py decode-hex --bytes 3 -- -F72   # "-" 로 시작하는 코드는 -- 뒤에

알파벳은 --alphabet 또는 환경변수 LEXBASE64_ALPHABET 로 바꿀 수 있다.
"-" 로 시작하는 알파벳(기본 알파벳 포함)은 --alphabet=<알파벳> 처럼 = 로 붙여 쓴다.
"""

import argparse
import os
import sys
from typing import List, Optional

# 프로젝트 루트의 src 폴더를 경로에 추가 (lexbase64 임포트용)
_PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
_SRC = os.path.join(_PROJECT_ROOT, "src")
if _SRC not in sys.path:
    sys.path.insert(0, _SRC)

from lexbase64 import DEFAULT_ALPHABET, Codec, create_codec

ALPHABET_ENV = "LEXBASE64_ALPHABET"


def resolve_alphabet(cli_value: Optional[str]) -> str:
    """--alphabet > 환경변수 > 기본 알파벳 순서로 결정"""
    if cli_value:
        return cli_value
    env_value = os.environ.get(ALPHABET_ENV, "").strip()
    return env_value or DEFAULT_ALPHABET


def encode_int(codec: Codec, num: int, length: Optional[int]) -> str:
    code = codec.encode_int(num, length)
    print(f"  [Base64 인코딩] 정수 {num} → \"{code}\"")
    return code


def decode_int(codec: Codec, code: str) -> int:
    num = codec.decode_to_int(code.strip())
    print(f"  [Base64 디코딩] \"{code}\" → 정수 {num}")
    return num


def encode_hex(codec: Codec, hex_string: str, length: Optional[int]) -> str:
    """16진수 문자열을 바이트로 바꿔 인코딩합니다."""
    data = bytes.fromhex(hex_string.strip())
    code = codec.encode_buffer(data, length)
    print(f"  [Base64 인코딩] {len(data)} bytes {data.hex()} → \"{code}\"")
    return code


def decode_hex(codec: Codec, code: str, num_bytes: Optional[int]) -> str:
    data = codec.decode_to_buffer(code.strip(), num_bytes)
    print(f"  [Base64 디코딩] \"{code}\" → {len(data)} bytes {data.hex()}")
    return data.hex()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="로컬 Base64 확인: 정수/바이트 인코딩과 디코딩"
    )
    parser.add_argument(
        "--alphabet", help=f"64자 알파벳 (기본: 환경변수 {ALPHABET_ENV} 또는 정렬된 URL-safe 알파벳)"
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p_enc_int = sub.add_parser("encode-int", help="정수를 인코딩합니다")
    p_enc_int.add_argument("num", type=int, help="0 이상의 정수")
    p_enc_int.add_argument("--length", type=int, help="출력 길이 (생략하면 최소 길이)")

    p_dec_int = sub.add_parser("decode-int", help="문자열을 정수로 디코딩합니다")
    p_dec_int.add_argument("code", help="인코딩된 문자열")

    p_enc_hex = sub.add_parser("encode-hex", help="16진수 바이트를 인코딩합니다")
    p_enc_hex.add_argument("hex", help="예: 010203")
    p_enc_hex.add_argument("--length", type=int, help="출력 길이 (생략하면 ceil(bytes*8/6))")

    p_dec_hex = sub.add_parser("decode-hex", help="문자열을 바이트로 디코딩해 16진수로 출력합니다")
    p_dec_hex.add_argument("code", help="인코딩된 문자열")
    p_dec_hex.add_argument("--bytes", dest="num_bytes", type=int, help="출력 바이트 수")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        codec = create_codec(resolve_alphabet(args.alphabet))
        if args.command == "encode-int":
            print(encode_int(codec, args.num, args.length))
        elif args.command == "decode-int":
            print(decode_int(codec, args.code))
        elif args.command == "encode-hex":
            print(encode_hex(codec, args.hex, args.length))
        elif args.command == "decode-hex":
            print(decode_hex(codec, args.code, args.num_bytes))
    except ValueError as e:
        # 코덱 예외는 전부 ValueError 하위 클래스 (bytes.fromhex 실패 포함)
        print(f"오류: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
