class CYKError(Exception):
    """
    Base class of every failure in the compile -> validate -> recognize
    pipeline. `stage` names the step that rejected the submission.
    """
    stage = None


class ParseError(CYKError):
    stage = "parse"

    def __init__(self, line):
        self.line = line
        super().__init__(f"Invalid rule: {line}")


class CNFError(CYKError):
    stage = "cnf"


class BadLeftError(CNFError):
    def __init__(self, rule):
        self.rule = rule
        super().__init__(f"Left must be single uppercase: {rule.left}")


class BadRightError(CNFError):
    def __init__(self, rule, message):
        self.rule = rule
        super().__init__(message)


class UndefinedSymbolError(CNFError):
    stage = "undefined-symbol"

    def __init__(self, symbol):
        self.symbol = symbol
        super().__init__(f"Variable {symbol} used but not defined")


class InputError(CYKError):
    stage = "input"


class EmptyInputError(InputError):
    def __init__(self):
        super().__init__("Input string cannot be empty")
