"""AST data model for Lua source."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from types import MappingProxyType
from typing import Final

from moonparse.ast.ids import NodeId
from moonparse.lexer import StringLiteral

# From the 5.3 manual, ranked lowest to highest:
#  1 or
#  2 and
#  3 <     >     <=    >=    ~=    ==
#  4 |
#  5 ~
#  6 &
#  7 <<    >>
#  8 ..
#  9 +     -
# 10 *     /     //    %
# 11 unary operators (not   #     -     ~)
# 12 ^
UNARY_PRECEDENCE: Final[int] = 11


class UnaryOpKind(StrEnum):
    NEGATE = "-"
    BOOLEAN_NOT = "not"
    LENGTH = "#"
    BITWISE_NOT = "~"

    @property
    def precedence(self) -> int:
        return UNARY_PRECEDENCE


class BinaryOpKind(StrEnum):
    OR = "or"
    AND = "and"
    LESS_THAN = "<"
    GREATER_THAN = ">"
    LESS_EQUAL = "<="
    GREATER_EQUAL = ">="
    NOT_EQUAL = "~="
    EQUAL = "=="
    BITWISE_OR = "|"
    BITWISE_XOR = "~"
    BITWISE_AND = "&"
    SHIFT_LEFT = "<<"
    SHIFT_RIGHT = ">>"
    CONCAT = ".."
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"
    FLOOR_DIVIDE = "//"
    MODULO = "%"
    EXPONENT = "^"

    @property
    def precedence(self) -> int:
        return BINARY_PRECEDENCE[self]

    @property
    def is_right_associative(self) -> bool:
        return self in RIGHT_ASSOCIATIVE


BINARY_PRECEDENCE: Final[MappingProxyType[BinaryOpKind, int]] = MappingProxyType(
    {
        BinaryOpKind.OR: 1,
        BinaryOpKind.AND: 2,
        BinaryOpKind.LESS_THAN: 3,
        BinaryOpKind.GREATER_THAN: 3,
        BinaryOpKind.LESS_EQUAL: 3,
        BinaryOpKind.GREATER_EQUAL: 3,
        BinaryOpKind.NOT_EQUAL: 3,
        BinaryOpKind.EQUAL: 3,
        BinaryOpKind.BITWISE_OR: 4,
        BinaryOpKind.BITWISE_XOR: 5,
        BinaryOpKind.BITWISE_AND: 6,
        BinaryOpKind.SHIFT_LEFT: 7,
        BinaryOpKind.SHIFT_RIGHT: 7,
        BinaryOpKind.CONCAT: 8,
        BinaryOpKind.ADD: 9,
        BinaryOpKind.SUBTRACT: 9,
        BinaryOpKind.MULTIPLY: 10,
        BinaryOpKind.DIVIDE: 10,
        BinaryOpKind.FLOOR_DIVIDE: 10,
        BinaryOpKind.MODULO: 10,
        BinaryOpKind.EXPONENT: 12,
    }
)

RIGHT_ASSOCIATIVE: Final[frozenset[BinaryOpKind]] = frozenset({BinaryOpKind.EXPONENT, BinaryOpKind.CONCAT})


@dataclass(frozen=True, slots=True)
class Node:
    """Base of every AST node.

    `id` is identity only: it is excluded from equality so that two parses of
    the same source compare equal.
    """

    id: NodeId = field(compare=False)


# -------------------------
# Expressions
# -------------------------


@dataclass(frozen=True, slots=True)
class Nil(Node):
    pass


@dataclass(frozen=True, slots=True)
class Bool(Node):
    value: bool


@dataclass(frozen=True, slots=True)
class Number(Node):
    """Numeric literal kept as its raw lexeme (`0x1p4`, `1e10`, `3.`)."""

    value: str


@dataclass(frozen=True, slots=True)
class String(Node):
    value: StringLiteral


@dataclass(frozen=True, slots=True)
class VarArg(Node):
    pass


@dataclass(frozen=True, slots=True)
class NameKey:
    """`name = value` table key, sugar for the string key "name"."""

    name: str


@dataclass(frozen=True, slots=True)
class ExpressionKey:
    """`[expression] = value` table key."""

    expression: Expression


@dataclass(frozen=True, slots=True)
class TableField:
    key: TableKey | None
    value: Expression


@dataclass(frozen=True, slots=True)
class TableLiteral(Node):
    """Table constructor. A field without a key is positional."""

    items: tuple[TableField, ...]


@dataclass(frozen=True, slots=True)
class FunctionCall(Node):
    """`f(args)`, or `obj:method(args)` when `method` is set."""

    name_expression: Expression
    arguments: tuple[Expression, ...]
    method: str | None = None


@dataclass(frozen=True, slots=True)
class Name(Node):
    value: str


@dataclass(frozen=True, slots=True)
class ParenExpression(Node):
    """Parenthesised expression; kept because `(f())` truncates to one value."""

    value: Expression


@dataclass(frozen=True, slots=True)
class UnaryOp(Node):
    operator: UnaryOpKind
    argument: Expression


@dataclass(frozen=True, slots=True)
class BinaryOp(Node):
    operator: BinaryOpKind
    left: Expression
    right: Expression


@dataclass(frozen=True, slots=True)
class Field(Node):
    """`target.name`"""

    target: Expression
    name: str


@dataclass(frozen=True, slots=True)
class Index(Node):
    """`target[key]`"""

    target: Expression
    key: Expression


@dataclass(frozen=True, slots=True)
class FunctionExpression(Node):
    """Anonymous `function (params) body end`."""

    parameters: tuple[str, ...]
    body: Chunk
    variadic: bool = False


# -------------------------
# Statements
# -------------------------


@dataclass(frozen=True, slots=True)
class Assignment(Node):
    """`a, b = x, y`. Name and value counts are reconciled at run time, not here."""

    names: tuple[str, ...]
    values: tuple[Expression, ...]


@dataclass(frozen=True, slots=True)
class LocalAssignment(Node):
    """`local a, b <const> = x, y`. The new bindings are visible for the rest of the chunk.

    `attributes` runs parallel to `names`: the 5.4 attribute written after each
    name (`"const"` or `"close"`), or None.
    """

    names: tuple[str, ...]
    values: tuple[Expression, ...]
    attributes: tuple[str | None, ...]


@dataclass(frozen=True, slots=True)
class NumericFor(Node):
    """`for var = start, end[, step] do body end`. `step` is None when not written."""

    var: str
    start: Expression
    end: Expression
    step: Expression | None
    body: Chunk


@dataclass(frozen=True, slots=True)
class GenericFor(Node):
    vars: tuple[str, ...]
    item_source: tuple[Expression, ...]
    body: Chunk


@dataclass(frozen=True, slots=True)
class ElseIf:
    condition: Expression
    body: Chunk


@dataclass(frozen=True, slots=True)
class IfStatement(Node):
    condition: Expression
    body: Chunk
    else_if_branches: tuple[ElseIf, ...]
    else_branch: Chunk | None


@dataclass(frozen=True, slots=True)
class WhileLoop(Node):
    condition: Expression
    body: Chunk


@dataclass(frozen=True, slots=True)
class RepeatLoop(Node):
    """`repeat body until condition`.

    The condition sees the locals declared in `body`; consumers resolving
    scopes must account for that.
    """

    body: Chunk
    condition: Expression


@dataclass(frozen=True, slots=True)
class FunctionDeclaration(Node):
    name: str
    parameters: tuple[str, ...]
    body: Chunk
    local: bool
    variadic: bool = False


@dataclass(frozen=True, slots=True)
class DoBlock(Node):
    body: Chunk


@dataclass(frozen=True, slots=True)
class Return(Node):
    values: tuple[Expression, ...]


@dataclass(frozen=True, slots=True)
class Break(Node):
    pass


@dataclass(frozen=True, slots=True)
class Goto(Node):
    label: str


@dataclass(frozen=True, slots=True)
class Label(Node):
    name: str


@dataclass(frozen=True, slots=True)
class Chunk:
    statements: tuple[Statement, ...]


type Expression = (
    Nil
    | Bool
    | Number
    | String
    | VarArg
    | TableLiteral
    | FunctionCall
    | Name
    | ParenExpression
    | UnaryOp
    | BinaryOp
    | Field
    | Index
    | FunctionExpression
)
type Statement = (
    Assignment
    | LocalAssignment
    | FunctionCall
    | NumericFor
    | GenericFor
    | IfStatement
    | WhileLoop
    | RepeatLoop
    | FunctionDeclaration
    | DoBlock
    | Return
    | Break
    | Goto
    | Label
)
type TableKey = NameKey | ExpressionKey


__all__ = [
    "BINARY_PRECEDENCE",
    "RIGHT_ASSOCIATIVE",
    "UNARY_PRECEDENCE",
    "Assignment",
    "BinaryOp",
    "BinaryOpKind",
    "Bool",
    "Break",
    "Chunk",
    "DoBlock",
    "ElseIf",
    "Expression",
    "ExpressionKey",
    "Field",
    "FunctionCall",
    "FunctionDeclaration",
    "FunctionExpression",
    "GenericFor",
    "Goto",
    "IfStatement",
    "Index",
    "Label",
    "LocalAssignment",
    "Name",
    "NameKey",
    "Nil",
    "Node",
    "Number",
    "NumericFor",
    "ParenExpression",
    "RepeatLoop",
    "Return",
    "Statement",
    "String",
    "TableField",
    "TableKey",
    "TableLiteral",
    "UnaryOp",
    "UnaryOpKind",
    "VarArg",
    "WhileLoop",
]
