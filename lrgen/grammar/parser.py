"""lrgen 문법 파서
- 한 줄에 규칙 하나: lhs ---> A b C | d | *
- 비단말: 소문자 [a-z]+ / 단말: 대문자 [A-Z]+ / ε: *
- '|' 로 대안 구분, 대안마다 Production 1개로 분리
- 첫 글자가 '#'인 줄은 주석, 빈 줄은 무시
- 우변에서 참조한 비단말은 반드시 어떤 줄의 좌변이어야 함
"""

from __future__ import annotations
import regex as re
from dataclasses import dataclass
from typing import List, Tuple

from .ast import Production, Symbol, EPSILON, EPSILON_NAME, nonterminal, terminal

# ---- Lexer 토큰 ----
_TOKEN_SPEC = [
    ("WS",    r"[ \t\f]+"),
    ("OR",    r"\|"),
    ("WORD",  r"[^\s|]+"),
]
MASTER_RE = re.compile("|".join(f"(?P<{n}>{p})" for n, p in _TOKEN_SPEC))

ARROW = "--->"
_NONTERM_RE = re.compile(r"[a-z]+")
_TERM_RE = re.compile(r"[A-Z]+")


@dataclass
class Tok:
    kind: str
    lexeme: str
    line: int
    col: int


def _scan_line(text: str, line: int) -> List[Tok]:
    """한 줄을 토큰으로 자릅니다. 공백은 토큰스트림에 넣지 않는다."""
    toks: List[Tok] = []
    i = 0
    while i < len(text):
        m = MASTER_RE.match(text, i)
        if not m:
            caret = " " * i + "^"
            raise SyntaxError(f"Unexpected char {text[i]!r} at {line}:{i + 1}\n{text}\n{caret}")
        kind = m.lastgroup or ""
        if kind != "WS":
            toks.append(Tok(kind, m.group(0), line, i + 1))
        i = m.end()
    return toks


# ---------- error handling utils ----------
def _snippet_with_caret(line_text: str, tok: Tok) -> str:
    """토큰 시작 위치에 캐럿"""
    caret = " " * (tok.col - 1) + "^"
    return f"{line_text}\n{caret}"

def _error(msg: str, line_text: str, tok: Tok) -> SyntaxError:
    snippet = _snippet_with_caret(line_text, tok)
    return SyntaxError(f"{msg} at {tok.line}:{tok.col}\n{snippet}")


# ---------- 심볼 분류 ----------
def _symbol_of(tok: Tok, line_text: str) -> Symbol:
    """WORD 토큰을 Symbol로 분류. 형식에 맞지 않으면 SyntaxError."""
    word = tok.lexeme
    if word == EPSILON_NAME:
        return EPSILON
    if _NONTERM_RE.fullmatch(word):
        return nonterminal(word)
    if _TERM_RE.fullmatch(word):
        return terminal(word)
    raise _error(f"'{word}' is an invalid (non-)terminal on right hand side", line_text, tok)


def _parse_rule(toks: List[Tok], line_text: str) -> Tuple[Symbol, List[List[Tuple[Symbol, Tok]]]]:
    """
    토큰화된 한 줄을 (좌변, 대안 리스트)로 해석합니다.
    각 대안은 (심볼, 원본 토큰) 쌍의 리스트. 토큰은 미해결 비단말 보고용.
    """
    head = toks[0]
    if len(toks) < 3:
        raise _error("Malformed production rule", line_text, head)
    if head.kind != "WORD" or not _NONTERM_RE.fullmatch(head.lexeme):
        raise _error(f"'{head.lexeme}' is an invalid non-terminal on left hand side", line_text, head)
    arrow = toks[1]
    if arrow.lexeme != ARROW:
        raise _error(f"Expected '{ARROW}', got {arrow.lexeme!r}", line_text, arrow)

    alts: List[List[Tuple[Symbol, Tok]]] = []
    cur: List[Tuple[Symbol, Tok]] = []
    last = arrow
    for t in toks[2:]:
        if t.kind == "OR":
            if not cur:
                raise _error("Empty alternative", line_text, t)
            alts.append(cur)
            cur = []
        else:
            cur.append((_symbol_of(t, line_text), t))
        last = t
    if not cur:
        raise _error("Empty alternative", line_text, last)
    alts.append(cur)

    # ε는 대안 안에서 단독으로만 허용
    for alt in alts:
        if len(alt) > 1:
            for s, t in alt:
                if s.name == EPSILON_NAME:
                    raise _error("Epsilon '*' must be the only symbol of its alternative", line_text, t)

    return nonterminal(head.lexeme), alts


def parse_grammar(src: str) -> List[Production]:
    """
    문법 텍스트를 파싱해 검증된 Production 리스트를 만듭니다.
    - 순서: 줄 순서, 같은 줄에서는 대안 순서
    - 첫 Production의 좌변이 시작기호
    오류는 모두 SyntaxError (줄:칸 + 캐럿 스니펫 포함).
    줄바꿈은 CRLF, CR, LF 모두 받는다.
    """
    lines = src.replace("\r\n", "\n").replace("\r", "\n").split("\n")
    prods: List[Production] = []
    # (비단말 참조 토큰, 해당 줄 원문): 좌변 전체를 본 뒤에 해결 여부를 검사
    refs: List[Tuple[Tok, str]] = []

    for i, line_text in enumerate(lines):
        lineno = i + 1
        if line_text.startswith("#") or line_text.strip() == "":
            continue
        toks = _scan_line(line_text, lineno)
        lhs, alts = _parse_rule(toks, line_text)
        for alt in alts:
            prods.append(Production(lhs, tuple(s for s, _ in alt), line=lineno))
            refs.extend((t, line_text) for s, t in alt if not s.is_terminal)

    if not prods:
        raise SyntaxError("Grammar has no production rules")

    defined = {p.lhs.name for p in prods}
    for tok, line_text in refs:
        if tok.lexeme not in defined:
            raise _error(f"Unresolved non-terminal '{tok.lexeme}'", line_text, tok)

    return prods
