# lrgen/lrgenc.py
"""lrgenc – lrgen CLI

사용 예)
    $ python -m lrgen.lrgenc check lrgen/tests/grammar_test/cc.g -D
    $ python -m lrgen.lrgenc table lrgen/tests/grammar_test/cc.g --format text
    $ python -m lrgen.lrgenc table lrgen/tests/grammar_test/cc.g -o tests/tmp/cc.json
    $ python -m lrgen.lrgenc dot   lrgen/tests/grammar_test/cc.g -o tests/tmp/cc.dot

기능
----
- check       : 문법을 읽어 파이프라인(문법→FIRST→오토마톤→병합→테이블) 검증 및 요약 출력
- table       : 파싱 테이블을 JSON 또는 텍스트 표로 출력
- dot         : 오토마톤을 Graphviz DOT으로 출력
- productions : 파싱된 Production 리스트를 JSON으로 출력

디버그 모드(-D/--debug)를 켜면 단계별 요약과 상태 병합 내역을 stderr로 출력합니다.
"""

from __future__ import annotations
import argparse
import json
import pathlib
import sys
from typing import List, Optional

# ------------------------------
# 헬퍼
# ------------------------------

def _eprint(*args, **kw) -> None:
    print(*args, file=sys.stderr, **kw)


def _write_output(text: str, output: Optional[str], label: str) -> None:
    """-o 가 있으면 파일로, 없으면 표준출력으로."""
    if not output:
        sys.stdout.write(text if text.endswith("\n") else text + "\n")
        return
    out_path = pathlib.Path(output)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(text, encoding="utf-8")
    print(f"[EMIT] {label} -> {out_path}")

# ------------------------------
# 파이프라인 로딩
# ------------------------------

def _load_pipeline(grammar_path: str, debug: bool):
    """
    문법 파일을 읽어 Production→오토마톤(병합 포함)→파싱 테이블까지 생성.
    """
    from .grammar.loader import load_grammar
    from .lr1.automaton import build_automaton
    from .lr1.table import build_parse_table

    prods = load_grammar(grammar_path)
    if debug: _eprint("[DEBUG] grammar ready | prods=%d start=%s" %
                      (len(prods), prods[0].lhs.name))

    automaton = build_automaton(prods, debug=debug)

    tbl = build_parse_table(automaton)
    if debug: _eprint("[DEBUG] parse table built | rows=%d accept=%d" %
                      (len(tbl.rows), tbl.accept_count()))

    return prods, automaton, tbl

def _run(fn, args) -> int:
    """커맨드 공통 예외 처리: 문법 오류/기타 오류 모두 종료코드 2."""
    try:
        return fn(args)
    except SyntaxError as e:
        _eprint("[SYNTAX ERROR]")
        _eprint(str(e))
        return 2
    except Exception as e:
        _eprint("[ERROR]", type(e).__name__, str(e))
        return 2

# ------------------------------
# 디버그 출력 헬퍼
# ------------------------------

def _print_grammar_summary(prods, sym) -> None:
    _eprint("\n[Grammar]")
    _eprint(f"Start: {sym.start}")
    _eprint("Terminals:")
    _eprint("  " + ", ".join(sym.terms))
    _eprint("Nonterminals:")
    _eprint("  " + ", ".join(sym.nonterms))
    _eprint(f"Productions: {len(prods)}")
    for p in prods:
        _eprint(f"  {p}")

def _print_state0(automaton) -> None:
    _eprint("\n[State 0 items]")
    for it in automaton[0].rules:
        _eprint("  " + str(it))

# ------------------------------
# 커맨드 구현
# ------------------------------

def _check(args) -> int:
    from .lr1.symbols import SymbolTable

    prods, automaton, tbl = _load_pipeline(args.file, debug=args.debug)
    if args.debug:
        _print_grammar_summary(prods, SymbolTable.from_productions(prods))
        _print_state0(automaton)

    print(f"[CHECK OK] states={len(automaton)} prods={len(prods)} accept={tbl.accept_count()}")
    return 0


def _table(args) -> int:
    from .lr1.symbols import SymbolTable
    from .lr1.table import format_table

    prods, automaton, tbl = _load_pipeline(args.file, debug=args.debug)
    if args.format == "text":
        src = format_table(tbl, SymbolTable.from_productions(prods))
    else:
        src = json.dumps(tbl.to_dict(), indent=4)
    _write_output(src, args.output, f"table format={args.format}")
    return 0


def _dot(args) -> int:
    from .codegen.emit_dot import emit_dot_to_string

    prods, automaton, tbl = _load_pipeline(args.file, debug=args.debug)
    src = emit_dot_to_string(automaton)
    if args.debug:
        _eprint(f"[DEBUG] dot nodes={len(automaton)} bytes={len(src)}")
    _write_output(src, args.output, "dot")
    return 0


def _productions(args) -> int:
    from .grammar.loader import load_grammar

    prods = load_grammar(args.file)
    data: List[dict] = []
    for p in prods:
        data.append({
            "leftHandSide": {"name": p.lhs.name, "isTerminal": p.lhs.is_terminal},
            "rightHandSide": [{"name": s.name, "isTerminal": s.is_terminal} for s in p.rhs],
            "lineNum": p.line,
        })
    _write_output(json.dumps(data, indent=4), args.output, "productions")
    return 0


def cmd_check(args) -> int:
    return _run(_check, args)

def cmd_table(args) -> int:
    return _run(_table, args)

def cmd_dot(args) -> int:
    return _run(_dot, args)

def cmd_productions(args) -> int:
    return _run(_productions, args)


# ------------------------------
# 엔트리포인트
# ------------------------------

def main(argv: Optional[list[str]] = None) -> int:
    ap = argparse.ArgumentParser(prog="lrgenc", description="lrgen LR(1) parse table generator CLI")
    sub = ap.add_subparsers(dest="cmd", required=True)

    p_check = sub.add_parser("check", help="문법으로 오토마톤/테이블을 만들어 요약을 출력합니다")
    p_check.add_argument("file", help="문법 파일")
    p_check.add_argument("-D", "--debug", action="store_true", help="디버그 정보를 상세 출력")
    p_check.set_defaults(func=cmd_check)

    p_table = sub.add_parser("table", help="파싱 테이블을 출력합니다")
    p_table.add_argument("file", help="문법 파일")
    p_table.add_argument("--format", choices=["json", "text"], default="json", help="출력 형식")
    p_table.add_argument("-o", "--output", help="출력 파일 경로(미지정시 표준출력)")
    p_table.add_argument("-D", "--debug", action="store_true", help="디버그 정보를 상세 출력")
    p_table.set_defaults(func=cmd_table)

    p_dot = sub.add_parser("dot", help="오토마톤을 Graphviz DOT으로 출력합니다")
    p_dot.add_argument("file", help="문법 파일")
    p_dot.add_argument("-o", "--output", help="출력 파일 경로(미지정시 표준출력)")
    p_dot.add_argument("-D", "--debug", action="store_true", help="디버그 정보를 상세 출력")
    p_dot.set_defaults(func=cmd_dot)

    p_prods = sub.add_parser("productions", help="파싱된 프로덕션 목록을 JSON으로 출력합니다")
    p_prods.add_argument("file", help="문법 파일")
    p_prods.add_argument("-o", "--output", help="출력 파일 경로(미지정시 표준출력)")
    p_prods.set_defaults(func=cmd_productions)

    args = ap.parse_args(argv)
    return int(args.func(args))

if __name__ == "__main__":
    sys.exit(main())
