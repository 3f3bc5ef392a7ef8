"""Loading of manually classified clone pairs.

Methods in a dataset are already tokenized by an external parser. A dataset
is a JSON file of the form::

    {
      "pairs": [
        {
          "id": "pair-1",
          "type": "T2",
          "method_1": {
            "name": "src/A.java:10:14",
            "lines": [{"content": "int x = 1;", "tokens": [{"text": "int"}, ...]}],
            "tokens": [{"text": "int", "category": "other", "line": 1}, ...],
            "tree": {"text": "BlockStmt", "children": [...]}
          },
          "method_2": {...}
        }
      ]
    }

Each of "lines", "tokens" and "tree" is optional; a matching strategy that
needs a missing representation fails for that pair only.
"""

from dataclasses import dataclass
import json
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from clone_classifier.analysis.clone_type import CloneType
from clone_classifier.analysis.exceptions import DatasetError
from clone_classifier.analysis.units import Line, Method, Token, TokenCategory, TreeNode


@dataclass(frozen=True)
class ClonePair:
    """A pair of methods with its manual classification.

    Attributes:
        method_1: The first method
        method_2: The second method
        truth: Clone type assigned by a human
        pair_id: Identifier of the pair in its dataset
    """

    method_1: Method
    method_2: Method
    truth: CloneType
    pair_id: str = ""


class TokenModel(BaseModel):
    text: str
    category: str = "other"
    line: int | None = None

    def to_token(self) -> Token:
        return Token(self.text, TokenCategory.parse(self.category), self.line)


class LineModel(BaseModel):
    content: str
    tokens: list[TokenModel] = Field(default_factory=list)

    def to_line(self) -> Line:
        return Line(self.content, tuple(t.to_token() for t in self.tokens))


class TreeNodeModel(BaseModel):
    text: str
    category: str = "other"
    children: list["TreeNodeModel"] = Field(default_factory=list)

    def to_node(self) -> TreeNode:
        return TreeNode(
            self.text,
            TokenCategory.parse(self.category),
            tuple(child.to_node() for child in self.children),
        )


TreeNodeModel.model_rebuild()


class MethodModel(BaseModel):
    name: str = ""
    lines: list[LineModel] | None = None
    tokens: list[TokenModel] | None = None
    tree: TreeNodeModel | None = None

    def to_method(self) -> Method:
        return Method(
            name=self.name,
            lines=None if self.lines is None else tuple(line.to_line() for line in self.lines),
            tokens=None if self.tokens is None else tuple(t.to_token() for t in self.tokens),
            tree=None if self.tree is None else self.tree.to_node(),
        )


class ClonePairModel(BaseModel):
    id: str = ""
    type: str
    method_1: MethodModel
    method_2: MethodModel


class DatasetModel(BaseModel):
    pairs: list[ClonePairModel] = Field(default_factory=list)


def parse_dataset(data: dict) -> list[ClonePair]:
    """Convert decoded dataset JSON into clone pairs.

    Raises:
        DatasetError: If the data does not follow the dataset schema, or a
            clone type or token category is invalid.
    """
    try:
        model = DatasetModel.model_validate(data)
    except ValidationError as e:
        raise DatasetError(f"Invalid dataset: {e}") from e

    pairs = []
    for idx, pair in enumerate(model.pairs):
        try:
            pairs.append(
                ClonePair(
                    method_1=pair.method_1.to_method(),
                    method_2=pair.method_2.to_method(),
                    truth=CloneType.from_label(pair.type),
                    pair_id=pair.id or str(idx),
                )
            )
        except ValueError as e:
            raise DatasetError(f"Invalid clone pair at index {idx}: {e}") from e

    return pairs


def load_dataset(path: Path) -> list[ClonePair]:
    """Load clone pairs from a dataset JSON file.

    Raises:
        FileNotFoundError: If the file does not exist
        DatasetError: If the file is not valid dataset JSON
    """
    if not path.exists():
        raise FileNotFoundError(f"Dataset file not found: {path}")

    with open(path, "r") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise DatasetError(f"Dataset is not valid JSON: {path}") from e

    if not isinstance(data, dict):
        raise DatasetError(f"Dataset must be a JSON object with a 'pairs' list: {path}")

    return parse_dataset(data)
