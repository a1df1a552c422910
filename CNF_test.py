import unittest
from cyk_parser.CNF import is_cnf_rule, validate
from cyk_parser.Errors import BadLeftError, BadRightError, CNFError, UndefinedSymbolError
from cyk_parser.Grammar import Grammar, Rule, compile_grammar

class TestCNFValidator(unittest.TestCase):
    # --------------------------
    # Test Case 1: Valid grammars
    # --------------------------
    def test_valid_grammar(self):
        grammar = validate(compile_grammar("S -> AB\nA -> a\nB -> b"))
        self.assertIsInstance(grammar, Grammar)
        self.assertEqual(grammar.producers_of_pair('A', 'B'), {'S'})
        self.assertEqual(grammar.producers_of_terminal('a'), {'A'})

    def test_recursive_grammar(self):
        grammar = validate(compile_grammar("S -> SS\nS -> a"))
        self.assertEqual(grammar.producers_of_pair('S', 'S'), {'S'})

    # The start symbol itself is not required to be defined.
    def test_grammar_without_start_symbol(self):
        grammar = validate(compile_grammar("A -> a"))
        self.assertEqual(grammar.nonterminals, {'A'})

    def test_use_before_definition(self):
        grammar = validate(compile_grammar("S -> AB\nA -> a\nB -> b"))
        self.assertEqual(len(grammar), 3)

    # --------------------------
    # Test Case 2: Shape violations
    # --------------------------
    def test_bad_left(self):
        for text in ["s -> a", "SA -> a", "-> a", "1 -> a"]:
            self._run_test(text, BadLeftError, f"Left must be single uppercase: {text.split('->')[0].strip()}")

    def test_bad_right(self):
        self._run_test("S -> Ab\nA -> a", BadRightError, "Two variables must be uppercase: Ab")
        self._run_test("S -> ab", BadRightError, "Two variables must be uppercase: ab")
        self._run_test("S -> A\nA -> a", BadRightError, "Single terminal must be lowercase: A")
        self._run_test("S -> 1", BadRightError, "Single terminal must be lowercase: 1")
        self._run_test("S -> ABC", BadRightError, "Right side must be 1 or 2 symbols: ABC")
        self._run_test("S ->", BadRightError, "Right side must be 1 or 2 symbols: ")

    def test_violations_are_cnf_errors(self):
        for text in ["s -> a", "S -> Ab", "S -> AB"]:
            with self.subTest(text=text):
                with self.assertRaises(CNFError):
                    validate(compile_grammar(text))

    # --------------------------
    # Test Case 3: Closure
    # --------------------------
    def test_undefined_symbol(self):
        with self.assertRaises(UndefinedSymbolError) as cm:
            validate(compile_grammar("S -> AB\nB -> b"))
        self.assertEqual(cm.exception.symbol, 'A')
        self.assertEqual(str(cm.exception), "Variable A used but not defined")
        self.assertEqual(cm.exception.stage, "undefined-symbol")

    def test_undefined_only_grammar(self):
        self._run_test("S -> AB", UndefinedSymbolError, "Variable A used but not defined")

    # Every rule is shape checked before the closure check starts.
    def test_shape_checked_before_closure(self):
        self._run_test("S -> XY\nA -> a\nb -> b", BadLeftError, "Left must be single uppercase: b")
        self._run_test("S -> XY\nA -> aa", BadRightError, "Two variables must be uppercase: aa")

    def test_is_cnf_rule(self):
        self.assertTrue(is_cnf_rule(Rule('S', 'AB')))
        self.assertTrue(is_cnf_rule(Rule('A', 'a')))
        for rule in [Rule('S', 'Ab'), Rule('s', 'AB'), Rule('S', 'A'),
                     Rule('S', ''), Rule('S', 'ABC'), Rule('SS', 'a')]:
            self.assertFalse(is_cnf_rule(rule), rule)

    # --------------------------
    # Helper Function
    # --------------------------
    def _run_test(self, text, error, message):
        """Helper function asserting that validation fails with `message`"""
        with self.subTest(text=text):
            with self.assertRaises(error) as cm:
                validate(compile_grammar(text))
            self.assertEqual(str(cm.exception), message)


if __name__ == "__main__":
    unittest.main()
