"""테스트용 문법 조립 헬퍼.

"S -> C C" 형식의 문자열로 Production을 만든다.
대문자로 시작하는 이름은 비단말, '*'는 ε, 나머지는 단말.
"""
from __future__ import annotations
from typing import List

from ..grammar.ast import EPSILON, EPSILON_NAME, Production, Symbol, nonterminal, terminal


def _sym(name: str) -> Symbol:
    if name == EPSILON_NAME:
        return EPSILON
    if name[0].isupper():
        return nonterminal(name)
    return terminal(name)


def grammar(*rules: str) -> List[Production]:
    prods: List[Production] = []
    for rule in rules:
        lhs, rhs = rule.split("->")
        prods.append(Production(nonterminal(lhs.strip()), tuple(_sym(s) for s in rhs.split())))
    return prods


def cc_grammar() -> List[Production]:
    return grammar("S -> C C", "C -> c C", "C -> d")


def ambiguous_sum_grammar() -> List[Production]:
    return grammar("E -> E + E", "E -> n")


def expr_grammar() -> List[Production]:
    return grammar(
        "E -> E + T", "E -> T",
        "T -> T x F", "T -> F",
        "F -> ( E )", "F -> id",
    )
