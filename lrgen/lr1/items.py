# lrgen/lr1/items.py
"""LR(1) 아이템 / 상태 / closure.

이 모듈은 Production 리스트(증강 포함)를 입력으로 받아
- LR(1) 아이템(점 위치 + lookahead 1개)
- 상태(closure)와 전이(transition)
- 증강문법 S' -> S 생성
- 시드 아이템 1개에서 출발하는 closure 확장
을 제공한다.

주의:
- lookahead는 **점 바로 뒤 심볼 하나만** 보고 정한다(뒤따르는 전체 접미사의 FIRST가 아님).
  점 뒤 비단말이 ε를 유도하는 문법에서는 표준 canonical LR(1)과 결과가 달라질 수 있으며,
  오토마톤 모양이 이 규칙에 의해 정해지므로 그대로 유지한다.
"""

from __future__ import annotations
from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Dict, List, Optional, Sequence, Set, Tuple

from ..grammar.ast import Production, Symbol, EOF_NAME, nonterminal


# ---------- LR(1) 아이템 ----------
@dataclass(frozen=True)
class Item:
    """LR(1) 아이템: [A -> α · β, a]"""
    lhs: Symbol
    rhs: Tuple[Symbol, ...]
    dot: int
    look: str

    @classmethod
    def from_production(cls, p: Production, look: str, dot: int = 0) -> "Item":
        return cls(p.lhs, p.rhs, dot, look)

    @property
    def at_end(self) -> bool:
        return self.dot >= len(self.rhs)

    @property
    def next_symbol(self) -> Optional[Symbol]:
        """점 바로 뒤 심볼. 점이 끝이면 None."""
        if self.at_end:
            return None
        return self.rhs[self.dot]

    def advance(self) -> "Item":
        """점을 한 칸 전진시킨 **새** 아이템."""
        return Item(self.lhs, self.rhs, self.dot + 1, self.look)

    def rhs_names(self) -> Tuple[str, ...]:
        return tuple(s.name for s in self.rhs)

    def __str__(self) -> str:
        rhs = list(self.rhs_names())
        rhs.insert(self.dot, ".")
        return f"{self.lhs.name} ---> {' '.join(rhs)}    {self.look}"


def same_rule(a: Item, b: Item) -> bool:
    """좌변 이름, 점 위치, 우변 이름들, lookahead가 모두 같으면 True."""
    return (a.lhs.name == b.lhs.name
            and a.dot == b.dot
            and a.rhs_names() == b.rhs_names()
            and a.look == b.look)


# ---------- 상태 / 전이 ----------
@dataclass
class Transition:
    """
    심볼 하나로 라벨된 간선.
    - symbol: 전이 심볼 (단말이면 shift, 비단말이면 goto)
    - target: 오토마톤 상태 **번호**(참조 아님). 병합 시 제자리에서 재작성됨
    """
    symbol: Symbol
    target: int


@dataclass
class State:
    """오토마톤 상태 1개: closure 아이템들 + 나가는 전이들"""
    rules: List[Item] = field(default_factory=list)
    transitions: List[Transition] = field(default_factory=list)


# ---------- 증강문법 ----------
def augment(prods: Sequence[Production]) -> List[Production]:
    """
    증강문법: 맨 앞에 S' -> S 를 붙인 **새 리스트**를 돌려줍니다.
    S는 첫 프로덕션의 좌변, S'는 그 이름 + "'".
    """
    start = prods[0].lhs
    aug = Production(nonterminal(start.name + "'"), (start,))
    return [aug] + list(prods)

def start_item(aug_prods: Sequence[Production]) -> Item:
    """시드 아이템 [S' -> · S, $]"""
    return Item.from_production(aug_prods[0], EOF_NAME)


# ---------- closure ----------
def _lookaheads_after_dot(it: Item, first: Dict[str, List[str]]) -> List[str]:
    """
    점 뒤 비단말을 확장할 때 새 아이템들에 붙일 lookahead 목록.
    - 점 뒤 비단말이 우변 마지막 심볼 → 확장 중인 아이템의 lookahead 그대로
    - 그 다음 심볼이 비단말 → 그 비단말의 FIRST 전체('*' 포함 가능)
    - 그 다음 심볼이 단말 → 그 단말 하나
    """
    if it.dot + 1 == len(it.rhs):
        return [it.look]
    follower = it.rhs[it.dot + 1]
    if not follower.is_terminal:
        return first[follower.name]
    return [follower.name]

def build_closure(seed: Item,
                  prods: Sequence[Production],
                  first: Dict[str, List[str]]) -> State:
    """
    시드 아이템 하나를 closure 상태로 확장합니다. (전이는 비어 있음)

    - 점이 이미 끝이면 시드 하나만 담은 상태
    - 그 외에는 FIFO 큐로 확장: 점 뒤가 비단말 N인 아이템마다
      N의 모든 프로덕션 × lookahead 목록에 대해 [N -> · γ, a]를 추가.
      단, (N, a) 쌍이 이 closure 안에서 이미 N 확장에 쓰였다면 건너뜀.
    - (N, a) 사용 표시는 N의 프로덕션을 모두 처리한 **뒤에** 남긴다.
    """
    state = State(rules=[seed])
    if seed.at_end:
        return state

    by_lhs: Dict[str, List[Production]] = {}
    for p in prods:
        by_lhs.setdefault(p.lhs.name, []).append(p)

    # 비단말 이름 -> 이미 확장에 쓰인 lookahead들
    expanded: Dict[str, Set[str]] = {}
    queue: Deque[Item] = deque([seed])

    while queue:
        it = queue.popleft()
        X = it.next_symbol
        if X is None or X.is_terminal:
            continue

        looks = _lookaheads_after_dot(it, first)
        done = expanded.setdefault(X.name, set())
        for p in by_lhs.get(X.name, []):
            for a in looks:
                if a not in done:
                    new_item = Item.from_production(p, a)
                    state.rules.append(new_item)
                    queue.append(new_item)
        done.update(looks)

    return state
