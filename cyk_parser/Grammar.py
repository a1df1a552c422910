from types import MappingProxyType
from typing import NamedTuple

from cyk_parser.Errors import ParseError

START_SYMBOL = 'S'
SEPARATOR = '->'


# Symbols are single characters. The case of a character alone decides
# its class: lowercase characters are terminals, uppercase characters are
# nonterminals.

def is_terminal(symbol):
    return len(symbol) == 1 and symbol.islower()

def is_nonterminal(symbol):
    return len(symbol) == 1 and symbol.isupper()


class Rule(NamedTuple):
    left: str
    right: str

    def __str__(self):
        return f"{self.left} {SEPARATOR} {self.right}"


# ## Compiling grammar text
# Each non blank line of the text holds one rule of the form `A -> BC`.
# We only split the line into its two sides here; whether the sides are
# actually in Chomsky Normal Form is left to `cyk_parser.CNF`.

def compile_grammar(text):
    """
    Turn raw grammar text into a list of rules.

    Args:
        text (str): newline separated rules, `LHS -> RHS`

    Returns:
        list[Rule]: rules in the order they were written, repeats included
    """
    lines = [l.strip() for l in text.split('\n')]
    rules = []
    for line in lines:
        if not line: continue
        parts = line.split(SEPARATOR)
        if len(parts) != 2:
            raise ParseError(line)
        left, right = parts
        rules.append(Rule(left.strip(), right.strip()))
    return rules


class Grammar:
    """
    A validated CNF grammar together with its reverse index.

    The reverse index maps right hand side content back to the left
    symbols producing it: `terminal_rules` is keyed by a terminal,
    `nonterminal_rules` by an ordered pair of nonterminals. Both are
    read-only views so a grammar can be shared between recognizers.
    Instances are normally built by `cyk_parser.CNF.validate`.
    """
    def __init__(self, rules):
        self.rules = tuple(rules)

        # let us get an inverse cache
        terminal_rules = {}
        nonterminal_rules = {}
        for k, rule in self.rules:
            if len(rule) == 1:
                terminal_rules.setdefault(rule, set()).add(k)
            else:
                nonterminal_rules.setdefault((rule[0], rule[1]), set()).add(k)

        self.terminal_rules = MappingProxyType(
                {t: frozenset(ks) for t, ks in terminal_rules.items()})
        self.nonterminal_rules = MappingProxyType(
                {pair: frozenset(ks) for pair, ks in nonterminal_rules.items()})

    @property
    def nonterminals(self):
        return frozenset(k for k, _ in self.rules)

    @property
    def terminals(self):
        return frozenset(self.terminal_rules)

    def producers_of_terminal(self, terminal):
        return self.terminal_rules.get(terminal, frozenset())

    def producers_of_pair(self, b, c):
        return self.nonterminal_rules.get((b, c), frozenset())

    def alternatives(self):
        """Rules grouped by left symbol, in order of first definition."""
        grouped = {}
        for k, rule in self.rules:
            grouped.setdefault(k, [])
            if rule not in grouped[k]:
                grouped[k].append(rule)
        return grouped

    def __len__(self):
        return len(self.rules)

    def __repr__(self):
        return f"Grammar({list(self.rules)!r})"


def print_grammar(grammar, start=START_SYMBOL, property="Grammar"):
    """
    Prints the grammar rules in a human-readable format.

    Args:
        grammar (Grammar): a validated grammar
        start (str): The start symbol of the grammar.
        property (str): a title printed above the rules
    """
    print(f"\n{property}")
    print(f"Start Symbol: {start}")
    print("Grammar Rules:")
    for non_terminal, productions in grammar.alternatives().items():
        print(f"  {non_terminal} → {' | '.join(productions)}")
