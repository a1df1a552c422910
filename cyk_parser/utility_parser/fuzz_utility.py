import simplefuzzer as fuzzer

from cyk_parser.Grammar import START_SYMBOL

# We use the [fuzzingbook](https://www.fuzzingbook.org) grammar style for
# generating strings: nonterminals are written `<A>`, terminals are the
# characters themselves.

def to_key(symbol):
    return '<' + symbol + '>'

def to_fuzzer_grammar(grammar):
    return {to_key(k): [[to_key(t) for t in rule] if len(rule) == 2 else [rule]
                        for rule in alts]
            for k, alts in grammar.alternatives().items()}


# A nonterminal is productive if at least one of its rules uses only
# productive symbols. Terminal rules are productive right away; we keep
# going until nothing changes.

def productive_nonterminals(grammar):
    productive = set(k for k, rule in grammar.rules if len(rule) == 1)
    while True:
        modified = False
        for k, rule in grammar.rules:
            if k in productive: continue
            if all(t in productive for t in rule):
                productive.add(k)
                modified = True
        if not modified: break
    return productive


def prune_unproductive(g, productive):
    keys = {to_key(k) for k in productive}
    new_g = {}
    for k in g:
        if k not in keys: continue
        new_g[k] = [r for r in g[k]
                    if all(t in keys for t in r if fuzzer.is_nonterminal(t))]
    return new_g


def sample_strings(grammar, count, start_symbol=START_SYMBOL, max_depth=10):
    """
    Generate strings that the grammar derives from `start_symbol`.

    Args:
        grammar (Grammar): a validated grammar
        count (int): how many strings to generate, duplicates allowed
        start_symbol (str): the symbol to expand
        max_depth (int): depth after which the fuzzer picks the cheapest
            expansions to finish the string

    Returns:
        list[str]: generated strings, empty when the start symbol derives
        no terminal string at all
    """
    productive = productive_nonterminals(grammar)
    if start_symbol not in productive:
        return []
    g = prune_unproductive(to_fuzzer_grammar(grammar), productive)
    f = fuzzer.LimitFuzzer(g)
    return [f.fuzz(key=to_key(start_symbol), max_depth=max_depth)
            for _ in range(count)]
