import cyk_parser.CYK as cyk
from cyk_parser.CNF import validate
from cyk_parser.Grammar import compile_grammar, print_grammar
from cyk_parser.utility_parser.fuzz_utility import sample_strings

import time
import random
import tracemalloc
import traceback
import csv
import os


def benchmark(grammar, start, test_cases):
    results = {'length': [], 'time': [], 'memory': [], 'accepted': []}
    recognizer = cyk.CYKRecognizer(grammar)

    for test_str in test_cases:
        try:
            start_time = time.perf_counter()
            tracemalloc.start()

            _, accepted = recognizer.recognize_on(test_str, start)

            parse_time = time.perf_counter() - start_time
            memory_peak = tracemalloc.get_traced_memory()[1]
            tracemalloc.stop()

            results['length'].append(len(test_str))
            results['time'].append(parse_time)
            results['memory'].append(memory_peak)
            results['accepted'].append(accepted)

        except Exception:
            tracemalloc.stop()
            traceback.print_exc()
    return results


# We want inputs of growing length, so we keep sampling with deeper and
# deeper expansions, and keep the longest string found at each depth.

def growing_inputs(grammar, start, depths, per_depth=5):
    test_cases = []
    for depth in depths:
        samples = sample_strings(grammar, per_depth, start, max_depth=depth)
        if samples:
            test_cases.append(max(samples, key=len))
    return test_cases


def print_results_table(property, results):
    print("\n{:<25} {:<15} {:<15} {:<15} {:<10}".format(
         "Grammar", "Input Length", "Time(s)", "Memory(MB)", "Accepted"))
    print("-" * 85)

    for length, t, memory, accepted in zip(results['length'], results['time'],
                                          results['memory'], results['accepted']):
        print("{:<25} {:<15.0f} {:<15.4f} {:<15.4f} {:<10}".format(
            property, length, t, memory / (1024 * 1024), str(accepted)))


def export_to_csv(rows, filename="benchmarks/cyk_results.csv"):
    dirname = os.path.dirname(filename)
    if dirname and not os.path.exists(dirname):
        os.makedirs(dirname)

    with open(filename, 'w', newline='') as csvfile:
        fieldnames = ['grammar', 'length', 'time', 'memory', 'accepted']
        writer = csv.DictWriter(csvfile, fieldnames=fieldnames)

        writer.writeheader()

        for property, results in rows:
            for length, t, memory, accepted in zip(results['length'], results['time'],
                                                  results['memory'], results['accepted']):
                writer.writerow({
                    'grammar': property,
                    'length': length,
                    'time': t,
                    'memory': memory,
                    'accepted': accepted,
                })


GRAMMARS = [
    ("Balanced a^n b^n", """
        S -> AT
        S -> AB
        T -> SB
        A -> a
        B -> b
    """),
    ("Highly Ambiguous Grammar", """
        S -> SS
        S -> a
        S -> b
    """),
    ("Normal Grammar", """
        S -> AB
        S -> BC
        S -> AC
        S -> c
        A -> BC
        A -> a
        B -> AC
        B -> b
        C -> c
    """),
]


def run_all(depths=(2, 4, 8, 16, 32), export_path="benchmarks/cyk_results.csv"):
    rows = []
    for property, text in GRAMMARS:
        grammar = validate(compile_grammar(text))
        test_cases = growing_inputs(grammar, 'S', depths)
        # one rejected input of the same size as the largest accepted one
        if test_cases:
            test_cases.append(''.join(random.choice(sorted(grammar.terminals))
                                      for _ in test_cases[-1]))
        results = benchmark(grammar, 'S', test_cases)
        print_grammar(grammar, 'S', property)
        print_results_table(property, results)
        rows.append((property, results))
    export_to_csv(rows, export_path)
    return rows


if __name__ == "__main__":
    run_all()
