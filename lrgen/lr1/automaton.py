# lrgen/lr1/automaton.py
"""LR(1) 오토마톤 구성 + 중복 전이 병합.

절차
----
1) FIRST 계산 (증강 전 문법 기준)
2) 증강문법 S' -> S, 시드 [S' -> · S, $]의 closure = 상태 0
3) goto 확장: 상태를 발견 순서대로 돌며 점을 전진시켜 새 상태를 찾거나 만든다
4) 배열 → {번호: 상태} 희소 맵
5) 한 상태에 같은 심볼 전이가 여러 개면 대상 상태를 병합 (변화가 없을 때까지 반복)

상태 번호는 발견 시 부여되며 **절대 재번호하지 않는다**. 병합은 맵에서 항목을 지우고(구멍)
다른 상태들의 전이 대상을 재작성할 뿐이다.
"""

from __future__ import annotations
import sys
from typing import Dict, List, Sequence

from ..grammar.ast import Production
from .first import compute_first
from .items import Item, State, Transition, augment, build_closure, same_rule, start_item

Automaton = Dict[int, State]


def _find_state(states: List[State], item: Item) -> int:
    """첫 번째 아이템만 비교해 같은 상태를 찾는다. 없으면 -1."""
    for i, st in enumerate(states):
        if same_rule(st.rules[0], item):
            return i
    return -1

def expand_automaton(first_state: State,
                     prods: Sequence[Production],
                     first: Dict[str, List[str]]) -> List[State]:
    """
    상태 0에서 출발해 goto로 모든 상태를 발견하고 전이를 기록합니다.

    - 상태는 발견 순서대로 방문(방문 중 뒤에 붙은 상태도 차례가 오면 방문)
    - 점이 끝이 아닌 아이템마다: 전이 심볼 = 점 뒤 심볼, 후속 아이템 = 점 전진
    - 후속 아이템과 **첫 아이템이 같은** 기존 상태가 있으면 그쪽으로 전이,
      없으면 후속 아이템의 closure를 새 상태로 추가
    상태 동일성은 전체 아이템 집합이 아니라 첫 아이템만으로 판단한다.
    그래서 생기는 중복 전이는 merge_automaton이 정리한다.
    """
    states: List[State] = [first_state]
    i = 0
    while i < len(states):
        cur = states[i]
        for it in cur.rules:
            if it.at_end:
                continue
            X = it.next_symbol
            nxt = it.advance()

            j = _find_state(states, nxt)
            if j < 0:
                states.append(build_closure(nxt, prods, first))
                j = len(states) - 1
            cur.transitions.append(Transition(X, j))
        i += 1
    return states


def merge_automaton(automaton: Automaton, *, debug: bool = False) -> bool:
    """
    merge_automaton
    ===============
    한 상태가 같은 심볼로 서로 다른 상태에 전이하는 경우를 한 바퀴 정리합니다. (제자리 수정)

    각 상태의 전이를 순서대로 훑으며 심볼 이름별 첫 전이를 기억하고,
    같은 이름의 전이가 또 나오면
    - 대상이 같으면: 뒤 전이만 삭제 (병합으로 세지 않음)
    - 대상이 다르면: 앞 전이의 대상이 살아남고, 뒤 대상 상태의 아이템/전이를
      살아남는 상태 뒤에 붙인다. 오토마톤 전체에서 뒤 대상 번호를 가리키던 전이를
      살아남는 번호로 재작성하고, 뒤 대상 상태를 맵에서 지우고, 뒤 전이를 삭제한다.

    Returns
    -------
    bool
        이번 바퀴에 병합이 한 번이라도 일어났으면 True.
        한 바퀴의 재작성이 새 중복을 만들 수 있으므로 False가 나올 때까지 반복해야 한다.
    """
    merged = False
    for idx in list(automaton):
        state = automaton.get(idx)
        if state is None:
            # 이번 바퀴에서 이미 다른 상태에 흡수됨
            continue

        seen: Dict[str, Transition] = {}
        # 훑는 범위는 시작 시점의 전이 개수까지. 삭제 뒤에도 k는 전진하므로
        # 삭제된 자리로 당겨진 다음 전이는 이번 바퀴에서 건너뛴다.
        for k in range(len(state.transitions)):
            if k >= len(state.transitions):
                break
            tr = state.transitions[k]
            name = tr.symbol.name
            prev = seen.get(name)
            if prev is None:
                seen[name] = tr
                continue

            if prev.target == tr.target:
                del state.transitions[k]
                continue

            keep, lose = prev.target, tr.target
            survivor, loser = automaton[keep], automaton[lose]
            survivor.rules.extend(loser.rules)
            survivor.transitions.extend(loser.transitions)

            for other in automaton.values():
                for t in other.transitions:
                    if t.target == lose:
                        t.target = keep

            del automaton[lose]
            del state.transitions[k]
            merged = True
            if debug:
                print(f"[merge] state {idx}, on {name}: state {lose} -> state {keep}", file=sys.stderr)
            # 현재 상태 자신이 흡수되어도 남은 전이는 계속 훑는다

    return merged


def build_automaton(prods: Sequence[Production], *, debug: bool = False) -> Automaton:
    """
    build_automaton
    ===============
    검증된 Production 리스트로 LR(1) 오토마톤을 만듭니다.
    입력 리스트는 변경하지 않습니다(증강문법은 새 리스트).

    Returns
    -------
    Automaton
        {상태 번호: State}. 0번은 [S' -> · S, $]의 closure.
        병합으로 지워진 번호는 비어 있을 수 있습니다.
    """
    first = compute_first(prods)
    aug = augment(prods)

    first_state = build_closure(start_item(aug), aug, first)
    states = expand_automaton(first_state, aug, first)
    if debug:
        print(f"[DEBUG] automaton expanded | states={len(states)}", file=sys.stderr)

    automaton: Automaton = {i: st for i, st in enumerate(states)}

    passes = 1
    while merge_automaton(automaton, debug=debug):
        passes += 1
    if debug:
        print(f"[DEBUG] automaton merged | states={len(automaton)} passes={passes}", file=sys.stderr)

    return automaton
