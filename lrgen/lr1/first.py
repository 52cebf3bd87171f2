# lrgen/lr1/first.py
"""FIRST 집합 계산 (고정점 반복)"""

from __future__ import annotations
from typing import Dict, Iterator, List, Sequence

from ..grammar.ast import Production, EPSILON_NAME


def iter_first_passes(prods: Sequence[Production]) -> Iterator[Dict[str, List[str]]]:
    """
    FIRST 고정점 반복의 **한 바퀴마다** 그 시점의 FIRST 집합 스냅샷을 내보냅니다.
    마지막 스냅샷은 아무것도 추가되지 않은 바퀴의 결과(=고정점)입니다.

    한 바퀴의 규칙
    -------------
    - 우변이 정확히 ε('*') 한 칸이면 FIRST(A)에 '*' 추가
    - 그 외에는 우변을 왼쪽부터 훑으며
        - 단말이면 그 단말을 추가하고 중단
        - 비단말 X면 FIRST(X)에서 '*'를 뺀 나머지를 추가,
          FIRST(X)에 '*'가 있을 때만 다음 심볼로 진행
    """
    first: Dict[str, List[str]] = {}
    for p in prods:
        first.setdefault(p.lhs.name, [])

    def add(target: List[str], name: str) -> bool:
        if name in target:
            return False
        target.append(name)
        return True

    changed = True
    while changed:
        changed = False
        for p in prods:
            fa = first[p.lhs.name]

            if p.is_epsilon:
                changed |= add(fa, EPSILON_NAME)
                continue

            for X in p.rhs:
                if X.is_terminal:
                    changed |= add(fa, X.name)
                    break
                fx = first[X.name]
                for a in list(fx):
                    if a != EPSILON_NAME:
                        changed |= add(fa, a)
                # X가 ε를 유도할 수 없으면 더 진행 불가
                if EPSILON_NAME not in fx:
                    break

        yield {A: list(s) for A, s in first.items()}


def compute_first(prods: Sequence[Production]) -> Dict[str, List[str]]:
    """
    compute_first
    =============
    모든 비단말에 대해 FIRST 집합을 계산합니다.
    반환 값은 **이름 기반**: 비단말 이름 → 단말 이름 리스트(+ ε 표기 '*').

    리스트는 중복 없이 **처음 추가된 순서**를 유지합니다.
    closure 단계가 이 순서대로 lookahead 아이템을 만들기 때문에
    상태 발견 순서(=상태 번호)가 이 순서로 결정됩니다.
    """
    first: Dict[str, List[str]] = {}
    for snapshot in iter_first_passes(prods):
        first = snapshot
    return first
