"""Shared fixtures for building methods from plain source lines."""

import json
import re

import pytest

from clone_classifier.analysis.units import Line, Method, Token, TokenCategory

KEYWORDS = {"int", "void", "return", "if", "else", "for", "while", "new", "final", "boolean"}
TOKEN_PATTERN = re.compile(r'"[^"]*"|\w+|[^\s\w]')


def tokenize(text: str, line: int | None = None) -> list[Token]:
    """Very small Java-like tokenizer used to build test fixtures."""
    tokens = []
    for part in TOKEN_PATTERN.findall(text):
        if part.startswith('"') or part.isdigit() or part in ("true", "false"):
            category = TokenCategory.LITERAL
        elif (part[0].isalpha() or part[0] == "_") and part not in KEYWORDS:
            category = TokenCategory.IDENTIFIER
        else:
            category = TokenCategory.OTHER
        tokens.append(Token(part, category, line))
    return tokens


@pytest.fixture
def make_line():
    """Create a Line from its text."""

    def _make(text: str) -> Line:
        return Line(text, tuple(tokenize(text)))

    return _make


@pytest.fixture
def make_method():
    """Create a Method with lines and a line-numbered token stream."""

    def _make(name: str, texts: list[str]) -> Method:
        lines = tuple(Line(text, tuple(tokenize(text, i + 1))) for i, text in enumerate(texts))
        tokens = tuple(token for line in lines for token in line.tokens)
        return Method(name=name, lines=lines, tokens=tokens)

    return _make


def method_json(name: str, texts: list[str]) -> dict:
    """Serialize a method the way the dataset format describes it."""
    lines = []
    for text in texts:
        tokens = [{"text": t.contents, "category": t.category.value} for t in tokenize(text)]
        lines.append({"content": text, "tokens": tokens})
    return {"name": name, "lines": lines}


@pytest.fixture
def dataset_file(tmp_path):
    """Create a dataset file with a Type-2, a mislabelled and an unmatchable pair."""
    data = {
        "pairs": [
            {
                "id": "renamed",
                "type": "T2",
                "method_1": method_json("A.java:1:3", ["int x = 1;", "return x;"]),
                "method_2": method_json("B.java:1:3", ["int y = 1;", "return y;"]),
            },
            {
                "id": "mislabelled",
                "type": "FP",
                "method_1": method_json("A.java:5:6", ["a = 1;"]),
                "method_2": method_json("B.java:5:6", ["a = 1;"]),
            },
            {
                "id": "no-lines",
                "type": "T1",
                "method_1": {"name": "C.java:1:1"},
                "method_2": method_json("D.java:1:1", ["a;"]),
            },
        ]
    }
    path = tmp_path / "dataset.json"
    path.write_text(json.dumps(data))
    return path
