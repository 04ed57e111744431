"""Bundled puzzles.

Importing this package registers every puzzle below with the global
registry.
"""

from amida.core.registry import register_puzzle

# Sample input from the Kattis "Japanese Lottery" problem.
KATTIS_SAMPLE = """4 6 7
1 1 2
2 3 4
4 3 4
5 1 2
6 3 4
3 2 3
6 3 4
"""

# Same rung layout with every rung repeated once; stepping to the end cancels
# everything back out.
SELF_CANCELLING = """3 4 6
1 1 2
3 2 3
4 1 2
1 1 2
3 2 3
4 1 2
"""

BUNDLED_PUZZLES = {
    "kattis-sample": KATTIS_SAMPLE,
    "self-cancelling": SELF_CANCELLING,
}

for _name, _text in BUNDLED_PUZZLES.items():
    register_puzzle(_name, _text)

__all__ = ["BUNDLED_PUZZLES", "KATTIS_SAMPLE", "SELF_CANCELLING"]
