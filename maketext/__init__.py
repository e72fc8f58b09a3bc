from .markov import TERMINAL, End, MarkovMachine, build, choice, generate, tokenize

__all__ = ["TERMINAL", "End", "MarkovMachine", "build", "choice", "generate", "tokenize"]
