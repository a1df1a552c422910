import argparse
import sys
from typing import NamedTuple, Optional

from cyk_parser.CNF import validate
from cyk_parser.CYK import CYKRecognizer
from cyk_parser.Errors import CYKError, EmptyInputError
from cyk_parser.Grammar import START_SYMBOL, compile_grammar, print_grammar
from cyk_parser.utility_parser.fuzz_utility import sample_strings


class CYKResult(NamedTuple):
    table: Optional[list]
    accepted: Optional[bool]
    error: Optional[str] = None
    stage: Optional[str] = None


def build(grammar_text, text, start_symbol=START_SYMBOL):
    """
    Run the whole pipeline, raising the first error met.

    The input is checked before the grammar, so an empty input is
    reported as such whatever the grammar looks like.
    """
    text = text.strip()
    if not text:
        raise EmptyInputError()
    grammar = validate(compile_grammar(grammar_text))
    recognizer = CYKRecognizer(grammar)
    table, accepted = recognizer.recognize_on(text, start_symbol)
    return recognizer, table, accepted


def run(grammar_text, text, start_symbol=START_SYMBOL):
    try:
        _, table, accepted = build(grammar_text, text, start_symbol)
    except CYKError as e:
        return CYKResult(None, None, str(e), e.stage)
    return CYKResult(table.rows(), accepted)


def parse_args(argv):
    parser = argparse.ArgumentParser(
        description="Decide membership of a string in the language of a CNF grammar"
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--grammar", help="path of a file holding one `A -> BC` rule per line")
    source.add_argument("--rules", help="the grammar rules given inline, separated by newlines or ';'")
    parser.add_argument("--sentence", required=True, help="the string to recognize")
    parser.add_argument("--start", default=START_SYMBOL, help="start symbol (default: %(default)s)")
    parser.add_argument("--csv", help="write the parse table to this csv file")
    parser.add_argument("--dot", help="write the chart as a graphviz dot file")
    parser.add_argument("--show-grammar", action="store_true", help="print the validated grammar")
    parser.add_argument("--sample", type=int, default=0, help="print N strings generated from the grammar")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    if args.grammar:
        with open(args.grammar) as f:
            grammar_text = f.read()
    else:
        grammar_text = args.rules.replace(';', '\n')

    try:
        recognizer, table, accepted = build(grammar_text, args.sentence, args.start)
    except CYKError as e:
        print(f"Error: {e}")
        return 1

    if args.show_grammar:
        print_grammar(recognizer.grammar, args.start)
        print()
    print("ACCEPTED" if accepted else "REJECTED")
    recognizer.print_table(table)

    if args.csv:
        table.export_to_csv(args.csv)
    if args.dot:
        with open(args.dot, 'w') as f:
            f.write(recognizer.to_dot(table).source)
    if args.sample:
        print(f"\nSamples from {args.start}:")
        for s in sample_strings(recognizer.grammar, args.sample, args.start):
            print(s)
    return 0


if __name__ == "__main__":
    sys.exit(main())
