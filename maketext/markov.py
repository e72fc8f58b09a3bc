import random
import re
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional, Sequence, Tuple, Union

DEFAULT_WORD_BUDGET = 100

_SPLIT_RE = re.compile(r"[ \r\n]+")


class End(Enum):
    TERMINAL = "<end>"

    def __repr__(self):
        return "End.TERMINAL"


TERMINAL = End.TERMINAL

Successor = Union[str, End]


def tokenize(text: str):
    return [w for w in _SPLIT_RE.split(text) if w]


def build_chains(words: Sequence[str]) -> Mapping[str, Tuple[Successor, ...]]:
    """
    Map every "w1 w2" pair in `words` to the words seen right after it.

    The last pair of the corpus gets TERMINAL as its successor.
    """
    chains = {}
    for i in range(len(words) - 1):
        bigram = f"{words[i]} {words[i + 1]}"
        next_word = words[i + 2] if i + 2 < len(words) else TERMINAL
        chains.setdefault(bigram, []).append(next_word)

    return MappingProxyType({k: tuple(v) for k, v in chains.items()})


def choice(items, rng=None):
    if not items:
        raise ValueError("cannot choose from an empty sequence")
    rng = rng or random
    return items[rng.randrange(len(items))]


class MarkovMachine:
    """
    Bigram Markov text generator.

    `rng` is anything with a `randrange` method; defaults to the `random` module.
    """

    def __init__(self, text: str, rng=None):
        self.words = tuple(tokenize(text))
        self.chains = build_chains(self.words)
        self.rng = rng or random

    def choice(self, items):
        return choice(items, self.rng)

    def make_text(self, num_words: int = DEFAULT_WORD_BUDGET, start: Optional[str] = None) -> str:
        if isinstance(num_words, bool) or not isinstance(num_words, int) or num_words < 1:
            raise ValueError(f"num_words must be a positive integer, got {num_words!r}")

        if not self.chains:
            return ""

        key = start if start in self.chains else self.choice(list(self.chains))
        out = []

        while len(out) < num_words and key is not None:
            w1, w2 = key.split(" ")
            out.append(w1)
            nxt = self.choice(self.chains[key])
            key = None if nxt is TERMINAL else f"{w2} {nxt}"

        return " ".join(out)


def build(text: str, rng=None) -> MarkovMachine:
    return MarkovMachine(text, rng=rng)


def generate(model: MarkovMachine, num_words: int = DEFAULT_WORD_BUDGET, start: Optional[str] = None) -> str:
    return model.make_text(num_words, start=start)
