"""Comparison units and the method representation they are extracted from.

A method is compared as an ordered sequence of one kind of unit:

- Line: the text of a normalized source line and its tokens
- Token: one lexical token with its syntactic category
- Tree leaf: a leaf of the method's syntax tree, represented as a Token

The units are produced by an external language parser. This module only
holds them and derives the sequences the matching strategies consume.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator

from clone_classifier.analysis.exceptions import TraversalError, UnitExtractionError


class TokenCategory(Enum):
    """Syntactic category of a token. Only literals and identifiers can be parameterized."""

    LITERAL = "literal"
    IDENTIFIER = "identifier"
    OTHER = "other"

    @classmethod
    def parse(cls, name: str) -> "TokenCategory":
        """Parse a category name case-insensitively.

        Raises:
            ValueError: If the name is not a known category.
        """
        try:
            return cls(name.strip().lower())
        except ValueError as e:
            raise ValueError(f"Invalid token category: '{name}'") from e

    def is_parameterized_match(self, other: "TokenCategory") -> bool:
        """True if both categories are identifiers or both are literals."""
        if self is TokenCategory.OTHER or other is TokenCategory.OTHER:
            return False
        return self is other


@dataclass(frozen=True)
class Token:
    """A single token.

    Attributes:
        contents: Textual contents of the token
        category: Syntactic category of the token
        line: 1-based source line of the token, if known
    """

    contents: str
    category: TokenCategory = TokenCategory.OTHER
    line: int | None = None

    def describe(self) -> str:
        """Display form used when rendering token units ("IDENTIFIER::name")."""
        return f"{self.category.name}::{self.contents}"


@dataclass(frozen=True)
class Line:
    """A normalized source line (no comments, no surrounding whitespace).

    Attributes:
        content: Exact text of the line
        tokens: Tokens the line is made of
    """

    content: str
    tokens: tuple[Token, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "tokens", tuple(self.tokens))

    def is_brace(self) -> bool:
        return self.content in ("{", "}")


@dataclass(frozen=True)
class TreeNode:
    """A syntax-tree node. Nodes without children are leaves."""

    contents: str
    category: TokenCategory = TokenCategory.OTHER
    children: tuple["TreeNode", ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "children", tuple(self.children))

    @property
    def is_leaf(self) -> bool:
        return not self.children

    def to_token(self) -> Token:
        return Token(self.contents, self.category)


def _iter_preorder(root: TreeNode) -> Iterator[TreeNode]:
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))


def _iter_postorder(root: TreeNode) -> Iterator[TreeNode]:
    """Post-order walk driven by a stack of sibling levels and a stack of cursors.

    Raises:
        TraversalError: If the level stack underflows, which happens when the
            root itself has no children.
    """
    levels: list[tuple[TreeNode, ...]] = []
    cursors: list[int] = []

    def descend(node: TreeNode) -> None:
        while node.children:
            levels.append(node.children)
            cursors.append(0)
            node = node.children[0]

    def next_from_level() -> TreeNode:
        cursor = cursors[-1]
        cursors[-1] = cursor + 1
        return levels[-1][cursor]

    descend(root)
    while True:
        if not levels:
            raise TraversalError(f"Traversal stack underflow below node '{root.contents}'")

        if cursors[-1] < len(levels[-1]):
            descend(levels[-1][cursors[-1]])
            yield next_from_level()
            continue

        levels.pop()
        cursors.pop()
        if not levels:
            yield root
            return
        yield next_from_level()


@dataclass(frozen=True)
class Method:
    """A method as supplied by the parsing collaborator.

    Any of the three representations may be missing; requesting a missing one
    raises UnitExtractionError.

    Attributes:
        name: Display label, e.g. "path/to/File.java:10:25"
        lines: Normalized lines of the method body
        tokens: Flat token stream of the method body
        tree: Syntax tree of the method body
    """

    name: str = ""
    lines: tuple[Line, ...] | None = None
    tokens: tuple[Token, ...] | None = None
    tree: TreeNode | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        if self.lines is not None:
            object.__setattr__(self, "lines", tuple(self.lines))
        if self.tokens is not None:
            object.__setattr__(self, "tokens", tuple(self.tokens))

    def get_lines(self) -> list[Line]:
        """Return the method's lines.

        Without explicit lines, a token stream that carries line numbers is
        grouped into lines; the line content is the token texts joined by
        single spaces.

        Raises:
            UnitExtractionError: If no lines can be derived.
        """
        if self.lines is not None:
            return list(self.lines)

        if self.tokens is None:
            raise UnitExtractionError(f"Method '{self.name}' has no lines or tokens")
        if any(token.line is None for token in self.tokens):
            raise UnitExtractionError(
                f"Method '{self.name}' has no lines and its tokens carry no line numbers"
            )

        grouped: dict[int, list[Token]] = {}
        for token in self.tokens:
            grouped.setdefault(token.line, []).append(token)

        return [
            Line(" ".join(t.contents for t in grouped[number]), tuple(grouped[number]))
            for number in sorted(grouped)
        ]

    def get_tokens(self) -> list[Token]:
        """Return the flat token stream.

        Raises:
            UnitExtractionError: If the method has neither tokens nor lines.
        """
        if self.tokens is not None:
            return list(self.tokens)
        if self.lines is not None:
            return [token for line in self.lines for token in line.tokens]
        raise UnitExtractionError(f"Method '{self.name}' has no tokens")

    def get_leaf_traversal(self, preorder: bool = True) -> list[Token]:
        """Return the leaves of the syntax tree in pre-order or post-order.

        Raises:
            UnitExtractionError: If the method has no syntax tree.
            TraversalError: If the post-order walk underflows its stack.
        """
        if self.tree is None:
            raise UnitExtractionError(f"Method '{self.name}' has no syntax tree")

        walk = _iter_preorder if preorder else _iter_postorder
        return [node.to_token() for node in walk(self.tree) if node.is_leaf]

    def __str__(self) -> str:
        return self.name or "<method>"
