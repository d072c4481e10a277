# Ensure `src/` is on sys.path so tests can import `mailcolors` without requiring editable install
import os
import sys

import pytest

HERE = os.path.dirname(__file__)
SRC = os.path.abspath(os.path.join(HERE, "..", "src"))
if os.path.isdir(SRC) and SRC not in sys.path:
    sys.path.insert(0, SRC)

from mailcolors.color.engine import RegexColorEngine  # noqa: E402
from mailcolors.settings.config import ColorSettings  # noqa: E402


class FakeTree:
    def __init__(self, expression):
        self.expression = expression
        self.freed = False


class FakeCompiler:
    """Expression compiler stand-in: a record matches when it lists the expression."""

    def __init__(self):
        self.compiled = []
        self.freed = []

    def compile(self, expression):
        if "BAD" in expression:
            raise ValueError("bad pattern")
        tree = FakeTree(expression)
        self.compiled.append(expression)
        return tree

    def evaluate(self, tree, record):
        return tree.expression in record

    def free(self, tree):
        tree.freed = True
        self.freed.append(tree.expression)


@pytest.fixture
def compiler():
    return FakeCompiler()


@pytest.fixture
def notified():
    return []


@pytest.fixture
def settings():
    return ColorSettings()


@pytest.fixture
def engine(settings, compiler, notified):
    return RegexColorEngine(settings=settings, compiler=compiler, notifier=notified.append)
