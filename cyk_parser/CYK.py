import csv
import os

from cyk_parser.Errors import EmptyInputError
from cyk_parser.Grammar import START_SYMBOL

# ## The parse table
# For an input of length n, `cell(i, j)` holds the nonterminals that can
# derive the substring `text[i..j]` (both ends inclusive). Only the upper
# triangle `i <= j` exists. Each cell is written exactly once, after all
# the splits of its span have been considered.

class ParseTable:
    def __init__(self, text):
        self.text = text
        n = len(text)
        self._cells = [[None for j in range(n)] for i in range(n)]

    def __len__(self):
        return len(self.text)

    def _check(self, start, end):
        if not (0 <= start <= end < len(self)):
            raise IndexError(f"no cell ({start}, {end}) in a table of size {len(self)}")

    def fill(self, start, end, symbols):
        self._check(start, end)
        assert self._cells[start][end] is None, (start, end)
        self._cells[start][end] = frozenset(symbols)

    def cell(self, start, end):
        self._check(start, end)
        symbols = self._cells[start][end]
        return frozenset() if symbols is None else symbols

    def __getitem__(self, span):
        start, end = span
        return self.cell(start, end)

    def spans(self):
        n = len(self)
        return [(i, j) for i in range(n) for j in range(i, n)]

    def rows(self):
        """
        The table as an n x n grid of strings. A cell renders as its
        symbols in sorted order, cells below the diagonal as ''.
        """
        n = len(self)
        return [[''.join(sorted(self.cell(i, j))) if i <= j else ''
                    for j in range(n)] for i in range(n)]

    def __eq__(self, other):
        if not isinstance(other, ParseTable):
            return NotImplemented
        return self.text == other.text and self._cells == other._cells

    def __repr__(self):
        return f"ParseTable({self.text!r}, {self.rows()!r})"

    def export_to_csv(self, filepath):
        """
        Export the parse table to a csv file

        Args:
            filepath (string): path of the csv file that user want to write to
        """
        # Create directories if they don't exist
        dirname = os.path.dirname(filepath)
        if dirname and not os.path.exists(dirname):
            os.makedirs(dirname)

        with open(filepath, "w", newline='') as file:
            writer = csv.writer(file)
            writer.writerow(["start"] + [str(j) for j in range(len(self))])
            for i, row in enumerate(self.rows()):
                writer.writerow([str(i)] + row)


# ## CYKRecognizer
# We initialize our recognizer with a validated grammar. The grammar
# already carries the inverse cache, mapping a terminal `a` to every `<A>`
# with `<A> ::= a` and a pair `(<B>, <C>)` to every `<A>` with
# `<A> ::= <B><C>`, so no rule is rescanned while filling a cell.

class CYKRecognizer():
    def __init__(self, grammar):
        self.grammar = grammar
        self.cell_width = 5

    def init_table(self, text, length):
        return ParseTable(text[:length])


# ### Span of length one
# Each single character is looked up directly in the inverse cache. A
# character with no producing rule leaves its cell empty.

class CYKRecognizer(CYKRecognizer):
    def parse_1(self, text, length, table):
        for s in range(0, length):
            table.fill(s, s, self.grammar.producers_of_terminal(text[s]))
        return table


# ### Longer spans
# For each substring of length n starting at s, we partition it at every
# point p, and collect the left symbols of all rules `<A> ::= <B><C>` where
# `<B>` derives the left part and `<C>` the right part. Since this is a
# union, the order of the splits does not matter.

class CYKRecognizer(CYKRecognizer):
    def parse_n(self, text, n, length, table):
        # check substrings starting at s, with length n
        for s in range(0, length-n+1):
            e = s + n - 1
            keys = set()
            for p in range(s, e):
                for b in table.cell(s, p):
                    for c in table.cell(p+1, e):
                        keys |= self.grammar.producers_of_pair(b, c)
            table.fill(s, e, keys)
        return table


class CYKRecognizer(CYKRecognizer):
    def recognize_on(self, text, start_symbol=START_SYMBOL):
        """
        Fill the parse table for `text` bottom up.

        Args:
            text (str): a non-empty string of terminals
            start_symbol (str): the symbol that must derive the whole text

        Returns:
            tuple[ParseTable, bool]: the table, and whether `text` is in
            the language of the grammar
        """
        length = len(text)
        if length == 0:
            raise EmptyInputError()
        table = self.init_table(text, length)
        self.parse_1(text, length, table)
        for n in range(2, length+1): # n is the length of the sub-string
            self.parse_n(text, n, length, table)
        return table, start_symbol in table.cell(0, length-1)


# ## Displaying the table
# Cells with more than one symbol spill over to extra lines, one symbol
# per line.

class CYKRecognizer(CYKRecognizer):
    def print_table(self, table):
        print_table(table, self.cell_width)

    def to_dot(self, table):
        """
        Draw the non-empty cells of the table as a graph. A cell points
        to the pair of cells of every split that produced one of its
        symbols.
        """
        from graphviz import Digraph

        dot = Digraph(comment=f"CYK chart for {table.text}")
        dot.attr(rankdir='BT')
        for (i, j) in table.spans():
            symbols = table.cell(i, j)
            if not symbols: continue
            dot.node(f"c{i}_{j}", f"[{i},{j}] {''.join(sorted(symbols))}",
                     shape='box')
            for p in range(i, j):
                produced = {k for b in table.cell(i, p)
                                for c in table.cell(p+1, j)
                                for k in self.grammar.producers_of_pair(b, c)}
                if produced & symbols:
                    dot.edge(f"c{i}_{j}", f"c{i}_{p}")
                    dot.edge(f"c{i}_{j}", f"c{p+1}_{j}")
        return dot


def print_table(table, cell_width=5):
    row_size = len(table)
    for i in range(row_size):
        row = {j: sorted(table.cell(i, j)) for j in range(i, row_size)}
        rows = [row]
        while rows:
            row, *rows = rows
            s = f'{i:<2}'
            remaining = {}
            for j in range(row_size):
                ckeys = row.get(j, [])
                r = ckeys[0] if ckeys else ''
                s += f'|{r:>{cell_width}}'
                if ckeys:
                    remaining[j] = ckeys[1:]
            print(s + '|')
            # construct the next row
            nxt_row = {k: remaining[k] for k in remaining if remaining[k]}
            if nxt_row: rows.append(nxt_row)
        #
        print('  |' + ('_' * cell_width + '|') * row_size)


def recognize(grammar, text, start_symbol=START_SYMBOL):
    return CYKRecognizer(grammar).recognize_on(text, start_symbol)
