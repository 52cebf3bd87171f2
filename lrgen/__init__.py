"""lrgen – LR(1) 오토마톤과 파싱 테이블 생성기"""

from .grammar.ast import Symbol, Production, EPSILON, nonterminal, terminal
from .grammar.loader import load_grammar, load_grammar_text
from .grammar.parser import parse_grammar
from .lr1.first import compute_first
from .lr1.automaton import build_automaton, expand_automaton, merge_automaton
from .lr1.items import Item, State, Transition, augment, build_closure
from .lr1.table import ParseTable, Shift, Goto, Reduce, Accept, build_parse_table

__all__ = [
    "Symbol", "Production", "EPSILON", "nonterminal", "terminal",
    "load_grammar", "load_grammar_text", "parse_grammar",
    "compute_first", "build_automaton", "expand_automaton", "merge_automaton",
    "Item", "State", "Transition", "augment", "build_closure",
    "ParseTable", "Shift", "Goto", "Reduce", "Accept", "build_parse_table",
]
