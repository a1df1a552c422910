import cyk_parser.CYK as cyk
from cyk_parser.CNF import validate
from cyk_parser.Grammar import compile_grammar

def demo():
    grammar = validate(compile_grammar("""
        S -> AB
        A -> a
        B -> b
    """))
    for s in ["ab", "ba"]:
        recognizer = cyk.CYKRecognizer(grammar)
        table, accepted = recognizer.recognize_on(s)
        print(s, "ACCEPTED" if accepted else "REJECTED")
        recognizer.print_table(table)

if __name__ == "__main__":
    demo()
