# lrgen/codegen/emit_dot.py
"""DOT Emit (Graphviz 방향 그래프 텍스트 생성).

개요
----
- 병합까지 끝난 오토마톤을 받아 DOT 소스를 **문자열로** 생성한다.
- 살아남은 상태마다 노드 1개: 라벨은 `[번호]` + 빈 줄 + 아이템 목록
  * 아이템 한 줄: `LHS ---> 심볼들(점 '.' 삽입)    lookahead`
- 전이마다 간선 1개: 라벨은 전이 심볼 이름
- 노드는 상태 번호 오름차순, 각 노드 바로 뒤에 그 상태의 간선을 전이 순서대로 적는다.
"""

from __future__ import annotations
from typing import Dict, List

from ..lr1.items import State


# ---------- 유틸 ----------

def _escape_dot(s: str) -> str:
    """DOT 큰따옴표 문자열 안에 넣을 수 있게 이스케이프한다. 개행은 '\\n' 리터럴로."""
    return s.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")


def closure_to_string(state: State) -> str:
    """상태의 아이템들을 한 줄씩 이어 붙인 문자열."""
    return "\n".join(str(it) for it in state.rules).strip()


def _preflight_check(automaton: Dict[int, State]) -> None:
    """오토마톤 기본 전제(상태 0 존재) 확인."""
    if 0 not in automaton:
        raise ValueError("emit_dot: automaton has no start state 0")


def emit_dot_to_string(automaton: Dict[int, State], graph_name: str = "G") -> str:
    """
    emit_dot_to_string(automaton) -> str
    ------------------------------------
    오토마톤을 DOT 소스 문자열로 변환한다.
    """
    _preflight_check(automaton)

    out: List[str] = [
        f"digraph {graph_name} {{",
        '    rankdir="LR"',
        "    node [ shape=box ]",
    ]
    for idx in sorted(automaton):
        state = automaton[idx]
        label = _escape_dot(f"[{idx}]\n\n{closure_to_string(state)}")
        out.append(f'    {idx} [ label="{label}" ]')
        for tr in state.transitions:
            out.append(f'    {idx} -> {tr.target} [ label="{_escape_dot(tr.symbol.name)}" ]')
    out.append("}")
    return "\n".join(out) + "\n"
