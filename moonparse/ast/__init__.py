"""Typed Lua AST."""

from moonparse.ast.export import from_dict, to_dict
from moonparse.ast.ids import DEFAULT_ID_ALLOCATOR, IdAllocator, NodeId
from moonparse.ast.model import (
    BINARY_PRECEDENCE,
    RIGHT_ASSOCIATIVE,
    UNARY_PRECEDENCE,
    Assignment,
    BinaryOp,
    BinaryOpKind,
    Bool,
    Break,
    Chunk,
    DoBlock,
    ElseIf,
    Expression,
    ExpressionKey,
    Field,
    FunctionCall,
    FunctionDeclaration,
    FunctionExpression,
    GenericFor,
    Goto,
    IfStatement,
    Index,
    Label,
    LocalAssignment,
    Name,
    NameKey,
    Nil,
    Node,
    Number,
    NumericFor,
    ParenExpression,
    RepeatLoop,
    Return,
    Statement,
    String,
    TableField,
    TableKey,
    TableLiteral,
    UnaryOp,
    UnaryOpKind,
    VarArg,
    WhileLoop,
)
from moonparse.ast.visit import children, iter_nodes

__all__ = [
    "BINARY_PRECEDENCE",
    "DEFAULT_ID_ALLOCATOR",
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
    "IdAllocator",
    "IfStatement",
    "Index",
    "Label",
    "LocalAssignment",
    "Name",
    "NameKey",
    "Nil",
    "Node",
    "NodeId",
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
    "children",
    "from_dict",
    "iter_nodes",
    "to_dict",
]
