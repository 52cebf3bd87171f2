"""문법 파일 로더 (텍스트 읽기 + Production 리스트 변환)"""

from __future__ import annotations
from pathlib    import Path
from typing     import List

from .ast       import Production
from .parser    import parse_grammar


def load_grammar_text(path: str) -> str:
    """
    문법 파일을 UTF-8로 읽고 개행을 '\\n'으로 통일합니다.
    """
    text = Path(path).read_text(encoding="utf-8")
    return text.replace("\r\n", "\n").replace("\r", "\n")


def load_grammar(path: str) -> List[Production]:
    """파일을 읽어 검증된 Production 리스트로 돌려줍니다. 문법 오류는 SyntaxError."""
    return parse_grammar(load_grammar_text(path))
