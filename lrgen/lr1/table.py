# lrgen/lr1/table.py
"""
오토마톤 → 파싱 테이블(ACTION/GOTO) 변환과 출력용 직렬화.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple, Union

from ..grammar.ast import EOF_NAME
from .items import State
from .symbols import SymbolTable


# ---------- 액션 ----------
@dataclass(frozen=True)
class Shift:
    state: int

@dataclass(frozen=True)
class Goto:
    state: int

@dataclass(frozen=True)
class Reduce:
    lhs: str
    rhs: Tuple[str, ...]

@dataclass(frozen=True)
class Accept:
    pass

Action = Union[Shift, Goto, Reduce, Accept]


def action_to_dict(a: Action) -> dict:
    """액션 1개를 JSON 친화적 dict로 변환."""
    if isinstance(a, Shift):
        return {"action": "shift", "state": a.state}
    if isinstance(a, Goto):
        return {"action": "goto", "state": a.state}
    if isinstance(a, Reduce):
        return {
            "action": "reduce",
            "production": {"leftHandSide": a.lhs, "rightHandSide": list(a.rhs)},
        }
    return {"action": "accept"}

def action_to_cell(a: Action) -> str:
    """텍스트 표의 칸 문자열: s3 / g2 / r(C -> c C) / acc"""
    if isinstance(a, Shift):
        return f"s{a.state}"
    if isinstance(a, Goto):
        return f"g{a.state}"
    if isinstance(a, Reduce):
        return f"r({a.lhs} -> {' '.join(a.rhs)})"
    return "acc"


@dataclass
class ParseTable:
    """
    ParseTable
    ==========
    상태 번호 → (심볼 이름 → 액션) 의 희소 테이블.

    필드
    ----
    - rows: {state: {symbol_name: Shift|Goto|Reduce|Accept}}
        * 상태 번호는 오토마톤 번호 그대로(병합으로 생긴 구멍 포함)
        * 같은 (state, symbol)에 여러 액션이 계산되면 **마지막 것**이 남는다
    """
    rows: Dict[int, Dict[str, Action]] = field(default_factory=dict)

    def action(self, state: int, symbol: str) -> Optional[Action]:
        return self.rows.get(state, {}).get(symbol)

    def accept_count(self) -> int:
        return sum(1 for row in self.rows.values() for a in row.values() if isinstance(a, Accept))

    def to_dict(self) -> Dict[str, Dict[str, dict]]:
        """JSON 직렬화용. 키는 상태 번호 문자열."""
        return {
            str(st): {name: action_to_dict(a) for name, a in row.items()}
            for st, row in self.rows.items()
        }


def build_parse_table(automaton: Dict[int, State]) -> ParseTable:
    """
    build_parse_table
    =================
    병합까지 끝난 오토마톤으로 파싱 테이블을 만듭니다.

    상태마다
    1) 전이: 단말이면 Shift(target), 비단말이면 Goto(target)
    2) 점이 끝인 아이템:
       - 좌변이 증강 시작기호이고 lookahead가 '$' → row['$'] = Accept
       - 그 외 → row[lookahead] = Reduce(좌변, 우변 이름들)
    순서는 전이 → 아이템이며, 같은 칸은 나중 것이 덮어쓴다(충돌 검사 없음).
    """
    start_name = automaton[0].rules[0].lhs.name
    table = ParseTable()

    for idx, state in automaton.items():
        row: Dict[str, Action] = {}
        table.rows[idx] = row

        for tr in state.transitions:
            if tr.symbol.is_terminal:
                row[tr.symbol.name] = Shift(tr.target)
            else:
                row[tr.symbol.name] = Goto(tr.target)

        for it in state.rules:
            if not it.at_end:
                continue
            if it.lhs.name == start_name and it.look == EOF_NAME:
                row[EOF_NAME] = Accept()
            else:
                row[it.look] = Reduce(it.lhs.name, it.rhs_names())

    return table


def format_table(table: ParseTable, sym: SymbolTable) -> str:
    """
    사람이 읽기 좋은 고정폭 표로 변환합니다.
    열 순서는 SymbolTable 순서('$', 단말들, 비단말들), 행은 상태 번호 순서.
    """
    cols = sym.names()
    # 심볼 테이블에 없는 lookahead(예: '*')도 빠뜨리지 않음
    for row in table.rows.values():
        for name in row:
            if name not in cols:
                cols.append(name)

    header = ["state"] + cols
    body: List[List[str]] = []
    for st, row in table.rows.items():
        cells = [str(st)]
        for name in cols:
            a = row.get(name)
            cells.append(action_to_cell(a) if a is not None else "")
        body.append(cells)

    widths = [len(h) for h in header]
    for cells in body:
        for i, c in enumerate(cells):
            widths[i] = max(widths[i], len(c))

    def fmt(cells: List[str]) -> str:
        return " | ".join(c.ljust(widths[i]) for i, c in enumerate(cells)).rstrip()

    lines = [fmt(header), "-+-".join("-" * w for w in widths)]
    lines.extend(fmt(cells) for cells in body)
    return "\n".join(lines)
