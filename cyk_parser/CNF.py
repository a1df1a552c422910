from cyk_parser.Errors import BadLeftError, BadRightError, UndefinedSymbolError
from cyk_parser.Grammar import Grammar, is_nonterminal, is_terminal

# ## Checking Chomsky Normal Form
# A grammar is in CNF when every rule is either `<A> ::= a` where `a` is a
# single terminal, or `<A> ::= <B><C>` where `<B>` and `<C>` are
# nonterminals. With single character symbols this is a check on the
# length and case of each side.

def check_left(rule):
    if not is_nonterminal(rule.left):
        raise BadLeftError(rule)

def check_right(rule):
    right = rule.right
    if len(right) == 1 and not is_terminal(right):
        raise BadRightError(rule, f"Single terminal must be lowercase: {right}")
    if len(right) == 2 and not all(is_nonterminal(t) for t in right):
        raise BadRightError(rule, f"Two variables must be uppercase: {right}")
    if len(right) not in [1, 2]:
        raise BadRightError(rule, f"Right side must be 1 or 2 symbols: {right}")


def is_cnf_rule(rule):
    return is_nonterminal(rule.left) and (
            (len(rule.right) == 1 and is_terminal(rule.right)) or
            (len(rule.right) == 2 and all(is_nonterminal(t) for t in rule.right)))


# The closure check needs every defined left symbol, so it can only run
# after all the rules have passed the shape check.

def check_closure(rules, defined):
    for rule in rules:
        for t in rule.right:
            if is_nonterminal(t) and t not in defined:
                raise UndefinedSymbolError(t)


def validate(rules):
    """
    Validate compiled rules and build the grammar used by the recognizer.

    Args:
        rules (list[Rule]): output of `compile_grammar`

    Returns:
        Grammar: the rules with their reverse index

    Raises:
        BadLeftError, BadRightError: a rule is not in CNF shape
        UndefinedSymbolError: a nonterminal is used but never defined
    """
    defined = set()
    for rule in rules:
        check_left(rule)
        check_right(rule)
        defined.add(rule.left)
    check_closure(rules, defined)
    return Grammar(rules)
