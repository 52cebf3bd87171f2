# lrgen/grammar/ast.py
"""문법 데이터 모델
- Symbol: 단말/비단말 심볼 (이름으로만 비교)
- Production: 좌변 1개 + 우변 심볼 시퀀스 1개 (대안 1개당 레코드 1개)
"""

from __future__     import annotations
from dataclasses    import dataclass, field
from typing         import Optional, Tuple

EOF_NAME = "$"        # 입력 끝 lookahead
EPSILON_NAME = "*"    # 우변의 ε 표기


@dataclass(frozen=True)
class Symbol:
    """
    문법 심볼 1개.
    - name: 심볼 이름
    - is_terminal: 단말 여부 (동등성/해시에는 **참여하지 않음**)
    """
    name: str
    is_terminal: bool = field(default=False, compare=False)


EPSILON = Symbol(EPSILON_NAME, is_terminal=True)


@dataclass(frozen=True)
class Production:
    """
    프로덕션 1개: lhs -> rhs
    - lhs : 좌변 비단말
    - rhs : 우변 심볼 튜플. ε 대안은 (EPSILON,) 한 칸으로 표현
    - line: 문법 파일에서의 줄 번호(없으면 None, 비교 제외)
    """
    lhs: Symbol
    rhs: Tuple[Symbol, ...]
    line: Optional[int] = field(default=None, compare=False)

    @property
    def is_epsilon(self) -> bool:
        return len(self.rhs) == 1 and self.rhs[0].name == EPSILON_NAME

    def rhs_names(self) -> Tuple[str, ...]:
        return tuple(s.name for s in self.rhs)

    def __str__(self) -> str:
        return f"{self.lhs.name} -> {' '.join(self.rhs_names())}"


def nonterminal(name: str) -> Symbol:
    return Symbol(name, is_terminal=False)

def terminal(name: str) -> Symbol:
    return Symbol(name, is_terminal=True)
