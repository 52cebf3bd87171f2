"""문법에 나오는 단말/비단말 이름을 정해진 순서로 모아 출력 단계에서 사용합니다."""
from __future__     import annotations
from dataclasses    import dataclass, field
from typing         import List, Optional, Sequence, Set

from ..grammar.ast  import Production, EOF_NAME


@dataclass
class SymbolTable:
    """
    SymbolTable
    ===========
    단말/비단말 **이름 목록**을 고정된 순서로 관리하는 테이블입니다.
    텍스트 표의 열 순서, CLI 요약 출력에서 같은 순서를 쓰기 위해
    이 테이블을 '고정(freeze)'한 뒤 사용합니다.

    순서 규칙
    --------
    - 단말 먼저, **EOF('$')는 항상 맨 앞**
    - 나머지 단말은 알파벳 정렬, 비단말은 문법에 **처음 등장한 순서**(시작기호가 맨 앞)
    - freeze() 이후에는 목록이 **불변**입니다.
    """

    _terms: List[str] = field(default_factory=list)
    _nonterms: List[str] = field(default_factory=list)
    _frozen: bool = False
    _start: Optional[str] = None

    def freeze(self, terms: Set[str], nonterms: Sequence[str], start: str) -> None:
        """
        단말 집합/비단말 목록으로 테이블을 '고정'합니다.
        '$'(EOF)가 단말 집합에 없으면 자동으로 추가합니다.
        """
        if self._frozen:
            return

        terms = set(terms)
        terms.discard(EOF_NAME)
        self._terms = [EOF_NAME] + sorted(terms)

        self._nonterms = []
        for nm in nonterms:
            if nm not in self._nonterms:
                self._nonterms.append(nm)

        self._start = start
        self._frozen = True

    @classmethod
    def from_productions(cls, prods: Sequence[Production]) -> "SymbolTable":
        """Production 리스트에서 단말/비단말을 모아 고정된 테이블을 만듭니다."""
        terms: Set[str] = set()
        nonterms: List[str] = []
        for p in prods:
            nonterms.append(p.lhs.name)
            for X in p.rhs:
                if X.is_terminal:
                    terms.add(X.name)
                else:
                    nonterms.append(X.name)
        sym = cls()
        sym.freeze(terms, nonterms, prods[0].lhs.name)
        return sym

    # ----- 조회 -----
    def names(self) -> List[str]:
        """열 순서: 단말('$' 먼저) 다음 비단말. 호출자가 고쳐도 되는 복사본."""
        return list(self._terms) + list(self._nonterms)

    def is_term(self, name: str) -> bool:
        return name in self._terms

    @property
    def terms(self) -> List[str]:
        return list(self._terms)

    @property
    def nonterms(self) -> List[str]:
        return list(self._nonterms)

    @property
    def start(self) -> Optional[str]:
        return self._start
