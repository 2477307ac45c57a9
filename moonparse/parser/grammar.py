"""Lua grammar rules built from the combinators in `moonparse.parser.combinators`."""

from functools import partial
from typing import Final

from moonparse.ast import (
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
    IdAllocator,
    IfStatement,
    Index,
    Label,
    LocalAssignment,
    Name,
    NameKey,
    Nil,
    NodeId,
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
from moonparse.diagnostics.codes import (
    PARSER_EXPECTED_EXPRESSION,
    PARSER_INTERNAL_NO_MATCH,
    PARSER_MISPLACED_VARARG,
    PARSER_UNEXPECTED_TOKEN,
)
from moonparse.lexer import Token, TokenKind
from moonparse.parser.combinators import (
    NO_MATCH,
    Match,
    NoMatch,
    ParseError,
    ParseResult,
    Parser,
    delimited_one_or_more,
    delimited_zero_or_more,
    expect,
    first_of,
    identifier,
    keyword,
    map_value,
    nested,
    operator,
    optional,
    satisfy,
    string_literal,
    syntax_error,
    token,
    zero_or_more,
)
from moonparse.parser.cursor import TokenCursor
from moonparse.parser.options import ParserOptions

_BITWISE_BINARY_OPERATORS: Final[frozenset[BinaryOpKind]] = frozenset(
    {
        BinaryOpKind.BITWISE_OR,
        BinaryOpKind.BITWISE_XOR,
        BinaryOpKind.BITWISE_AND,
        BinaryOpKind.SHIFT_LEFT,
        BinaryOpKind.SHIFT_RIGHT,
    }
)
_LOCAL_ATTRIBUTES: Final[frozenset[str]] = frozenset({"const", "close"})
_OPERATOR_TOKEN_KINDS: Final[frozenset[TokenKind]] = frozenset({TokenKind.OPERATOR, TokenKind.KEYWORD})


class LuaGrammar:
    """One parser per production.

    Every public production takes a `TokenCursor` and returns a
    `ParseResult`. Productions commit (raise `ParseError`) once they have
    consumed the token that identifies them.
    """

    def __init__(self, ids: IdAllocator, options: ParserOptions) -> None:
        self._ids = ids
        self._options = options
        max_depth = options.max_depth

        self._identifier = map_value(identifier, lambda t: t.text)
        self._comma = operator(",")
        self._name_list = delimited_one_or_more(self._identifier, self._comma, expected="name")
        self._expression_list = delimited_one_or_more(self.expression, self._comma, expected="expression")
        self._local_names = delimited_one_or_more(self._attributed_name, self._comma, expected="name")
        self._local_attribute = map_value(
            satisfy(lambda t: t.kind == TokenKind.IDENTIFIER and t.text in _LOCAL_ATTRIBUTES),
            lambda t: t.text,
        )
        self._binary_operators = _binary_operators_for(options)
        self._unary_operators = _unary_operators_for(options)

        # Order matters: earlier alternatives win when two could match the same prefix.
        self._statement = nested(
            first_of(
                self.local_assignment,
                self.function_call_statement,
                self.assignment,
                self.numeric_for,
                self.generic_for,
                self.if_statement,
                self.while_loop,
                self.repeat_loop,
                self.function_declaration,
                self.do_block,
                self.break_statement,
                self.goto_statement,
                self.label,
            ),
            max_depth=max_depth,
        )
        self._block_items = zero_or_more(first_of(map_value(operator(";"), lambda _: None), self._statement))
        self._else_if_branches = zero_or_more(self._else_if_branch)

        self._operand = nested(self._unary_or_primary, max_depth=max_depth)
        self._primary = first_of(self._literal, self.table_literal, self.function_expression, self.prefix_expression)

        self._table_fields = delimited_zero_or_more(
            self.table_field,
            first_of(operator(","), operator(";")),
            allow_trailing=True,
            expected="table field",
        )
        self._parameters = delimited_zero_or_more(
            first_of(identifier, operator("...")),
            self._comma,
            expected="parameter name",
        )

    @property
    def options(self) -> ParserOptions:
        return self._options

    def parse(self, tokens: tuple[Token, ...]) -> Chunk:
        """Parse a whole token stream; anything left over is an error."""
        start = TokenCursor(tokens)
        result = self.chunk(start)
        if isinstance(result, NoMatch):
            raise ParseError(PARSER_INTERNAL_NO_MATCH.at(start.current_range))
        if not result.cursor.at_end:
            raise syntax_error(
                result.cursor,
                f"unexpected {result.cursor.describe_current()}, expected a statement",
                PARSER_UNEXPECTED_TOKEN,
            )
        return result.value

    def _id(self) -> NodeId:
        return self._ids.allocate()

    # -------------------------
    # Blocks
    # -------------------------

    # chunk ::= {stat [';']} [retstat]
    def chunk(self, cursor: TokenCursor) -> Match[Chunk]:
        items = self._block_items(cursor)
        statements: list[Statement] = [item for item in items.value if item is not None]
        cursor = items.cursor

        returned = self.return_statement(cursor)
        if isinstance(returned, Match):
            statements.append(returned.value)
            cursor = returned.cursor

        return Match(cursor, Chunk(tuple(statements)))

    def _block(self, cursor: TokenCursor, closer: str, context: str) -> Match[Chunk]:
        """Parse a chunk that must be closed by keyword `closer`."""
        body = self.chunk(cursor)
        closed = expect(keyword(closer), body.cursor, f"'{closer}'", context=context)
        return Match(closed.cursor, body.value)

    # -------------------------
    # Statements
    # -------------------------

    def statement(self, cursor: TokenCursor) -> ParseResult[Statement]:
        return self._statement(cursor)

    # local attnamelist ['=' explist]
    def local_assignment(self, cursor: TokenCursor) -> ParseResult[LocalAssignment]:
        local = keyword("local")(cursor)
        if isinstance(local, NoMatch):
            return NO_MATCH
        following = local.cursor.peek()
        if following is not None and following.is_keyword("function"):
            # `local function` belongs to function_declaration.
            return NO_MATCH

        names = expect(self._local_names, local.cursor, "name", context="after 'local'")
        cursor = names.cursor
        values: tuple[Expression, ...] = ()
        equals = operator("=")(cursor)
        if isinstance(equals, Match):
            parsed = expect(self._expression_list, equals.cursor, "expression", context="after '=' in local assignment")
            values, cursor = parsed.value, parsed.cursor

        return Match(
            cursor,
            LocalAssignment(
                self._id(),
                tuple(name for name, _ in names.value),
                values,
                tuple(attribute for _, attribute in names.value),
            ),
        )

    # Name ['<' Name '>']
    def _attributed_name(self, cursor: TokenCursor) -> ParseResult[tuple[str, str | None]]:
        name = self._identifier(cursor)
        if isinstance(name, NoMatch):
            return NO_MATCH
        opened = operator("<")(name.cursor)
        if not self._options.allow_local_attributes or isinstance(opened, NoMatch):
            return Match(name.cursor, (name.value, None))
        attribute = expect(
            self._local_attribute,
            opened.cursor,
            "'const' or 'close'",
            context=f"as attribute of '{name.value}'",
        )
        closed = expect(operator(">"), attribute.cursor, "'>'", context=f"to close attribute of '{name.value}'")
        return Match(closed.cursor, (name.value, attribute.value))

    def function_call_statement(self, cursor: TokenCursor) -> ParseResult[FunctionCall]:
        result = self.prefix_expression(cursor)
        if isinstance(result, Match) and isinstance(result.value, FunctionCall):
            return Match(result.cursor, result.value)
        return NO_MATCH

    # namelist '=' explist
    def assignment(self, cursor: TokenCursor) -> ParseResult[Assignment]:
        names = self._name_list(cursor)
        if isinstance(names, NoMatch):
            return NO_MATCH
        equals = operator("=")(names.cursor)
        if isinstance(equals, NoMatch):
            return NO_MATCH
        values = expect(self._expression_list, equals.cursor, "expression", context="after '=' in assignment")
        return Match(values.cursor, Assignment(self._id(), names.value, values.value))

    # for Name '=' exp ',' exp [',' exp] do block end
    def numeric_for(self, cursor: TokenCursor) -> ParseResult[NumericFor]:
        for_ = keyword("for")(cursor)
        if isinstance(for_, NoMatch):
            return NO_MATCH
        var = self._identifier(for_.cursor)
        if isinstance(var, NoMatch):
            return NO_MATCH
        equals = operator("=")(var.cursor)
        if isinstance(equals, NoMatch):
            # Not `for i =`, so leave it to generic_for.
            return NO_MATCH

        start = self._expect_expression(equals.cursor, "as numeric-for start")
        comma = expect(self._comma, start.cursor, "','", context="after numeric-for start")
        end = self._expect_expression(comma.cursor, "as numeric-for limit")

        cursor = end.cursor
        step: Expression | None = None
        following = cursor.peek()
        if following is not None and following.is_operator(","):
            parsed_step = self._expect_expression(cursor.advance(), "as numeric-for step")
            step, cursor = parsed_step.value, parsed_step.cursor

        do = expect(keyword("do"), cursor, "'do'", context="after numeric-for bounds")
        body = self._block(do.cursor, "end", context="to close numeric-for loop")
        return Match(body.cursor, NumericFor(self._id(), var.value, start.value, end.value, step, body.value))

    # for namelist in explist do block end
    def generic_for(self, cursor: TokenCursor) -> ParseResult[GenericFor]:
        for_ = keyword("for")(cursor)
        if isinstance(for_, NoMatch):
            return NO_MATCH
        names = expect(self._name_list, for_.cursor, "name", context="after 'for'")
        in_ = expect(keyword("in"), names.cursor, "'=' or 'in'", context="after 'for' names")
        sources = expect(self._expression_list, in_.cursor, "expression", context="after 'in'")
        do = expect(keyword("do"), sources.cursor, "'do'", context="after generic-for iterator")
        body = self._block(do.cursor, "end", context="to close generic-for loop")
        return Match(body.cursor, GenericFor(self._id(), names.value, sources.value, body.value))

    # if exp then block {elseif exp then block} [else block] end
    def if_statement(self, cursor: TokenCursor) -> ParseResult[IfStatement]:
        if_ = keyword("if")(cursor)
        if isinstance(if_, NoMatch):
            return NO_MATCH
        condition = self._expect_expression(if_.cursor, "after 'if'")
        then = expect(keyword("then"), condition.cursor, "'then'", context="after 'if' condition")
        body = self.chunk(then.cursor)
        branches = self._else_if_branches(body.cursor)
        cursor = branches.cursor

        else_branch: Chunk | None = None
        else_ = keyword("else")(cursor)
        if isinstance(else_, Match):
            parsed_else = self.chunk(else_.cursor)
            else_branch, cursor = parsed_else.value, parsed_else.cursor

        end = expect(keyword("end"), cursor, "'end'", context="to close 'if' statement")
        return Match(
            end.cursor,
            IfStatement(self._id(), condition.value, body.value, branches.value, else_branch),
        )

    def _else_if_branch(self, cursor: TokenCursor) -> ParseResult[ElseIf]:
        elseif = keyword("elseif")(cursor)
        if isinstance(elseif, NoMatch):
            return NO_MATCH
        condition = self._expect_expression(elseif.cursor, "after 'elseif'")
        then = expect(keyword("then"), condition.cursor, "'then'", context="after 'elseif' condition")
        body = self.chunk(then.cursor)
        return Match(body.cursor, ElseIf(condition.value, body.value))

    # while exp do block end
    def while_loop(self, cursor: TokenCursor) -> ParseResult[WhileLoop]:
        while_ = keyword("while")(cursor)
        if isinstance(while_, NoMatch):
            return NO_MATCH
        condition = self._expect_expression(while_.cursor, "after 'while'")
        do = expect(keyword("do"), condition.cursor, "'do'", context="after 'while' condition")
        body = self._block(do.cursor, "end", context="to close 'while' loop")
        return Match(body.cursor, WhileLoop(self._id(), condition.value, body.value))

    # repeat block until exp
    def repeat_loop(self, cursor: TokenCursor) -> ParseResult[RepeatLoop]:
        repeat = keyword("repeat")(cursor)
        if isinstance(repeat, NoMatch):
            return NO_MATCH
        body = self._block(repeat.cursor, "until", context="to close 'repeat' loop")
        condition = self._expect_expression(body.cursor, "after 'until'")
        return Match(condition.cursor, RepeatLoop(self._id(), body.value, condition.value))

    # [local] function Name funcbody
    def function_declaration(self, cursor: TokenCursor) -> ParseResult[FunctionDeclaration]:
        is_local = False
        local = keyword("local")(cursor)
        if isinstance(local, Match):
            is_local = True
            cursor = local.cursor
        function = keyword("function")(cursor)
        if isinstance(function, NoMatch):
            return NO_MATCH

        name = expect(self._identifier, function.cursor, "function name", context="after 'function'")
        parameters, variadic, body = self._function_body(name.cursor, f"function '{name.value}'")
        return Match(
            body.cursor,
            FunctionDeclaration(self._id(), name.value, parameters, body.value, is_local, variadic),
        )

    # do block end
    def do_block(self, cursor: TokenCursor) -> ParseResult[DoBlock]:
        do = keyword("do")(cursor)
        if isinstance(do, NoMatch):
            return NO_MATCH
        body = self._block(do.cursor, "end", context="to close 'do' block")
        return Match(body.cursor, DoBlock(self._id(), body.value))

    def break_statement(self, cursor: TokenCursor) -> ParseResult[Break]:
        break_ = keyword("break")(cursor)
        if isinstance(break_, NoMatch):
            return NO_MATCH
        return Match(break_.cursor, Break(self._id()))

    # goto Name
    def goto_statement(self, cursor: TokenCursor) -> ParseResult[Goto]:
        if not self._options.allow_goto:
            return NO_MATCH
        goto = keyword("goto")(cursor)
        if isinstance(goto, NoMatch):
            return NO_MATCH
        label = expect(self._identifier, goto.cursor, "label name", context="after 'goto'")
        return Match(label.cursor, Goto(self._id(), label.value))

    # '::' Name '::'
    def label(self, cursor: TokenCursor) -> ParseResult[Label]:
        if not self._options.allow_goto:
            return NO_MATCH
        opener = operator("::")(cursor)
        if isinstance(opener, NoMatch):
            return NO_MATCH
        name = expect(self._identifier, opener.cursor, "label name", context="after '::'")
        closer = expect(operator("::"), name.cursor, "'::'", context=f"to close label '{name.value}'")
        return Match(closer.cursor, Label(self._id(), name.value))

    # return [explist] [';']
    def return_statement(self, cursor: TokenCursor) -> ParseResult[Return]:
        return_ = keyword("return")(cursor)
        if isinstance(return_, NoMatch):
            return NO_MATCH
        values = optional(self._expression_list)(return_.cursor)
        cursor = values.cursor
        semicolon = operator(";")(cursor)
        if isinstance(semicolon, Match):
            cursor = semicolon.cursor
        return Match(cursor, Return(self._id(), values.value or ()))

    def _function_body(self, cursor: TokenCursor, what: str) -> tuple[tuple[str, ...], bool, Match[Chunk]]:
        """`'(' [parlist] ')' block end`, shared by declarations and function expressions."""
        opened = expect(token(TokenKind.LPAREN), cursor, "'('", context=f"to open {what} parameters")
        parameters = self._parameters(opened.cursor)

        tokens = parameters.value
        for position, param in enumerate(tokens):
            if param.is_operator("...") and position != len(tokens) - 1:
                raise ParseError(PARSER_MISPLACED_VARARG.at(param.range))
        variadic = bool(tokens) and tokens[-1].is_operator("...")
        names = tuple(param.text for param in tokens if param.kind == TokenKind.IDENTIFIER)

        closed = expect(token(TokenKind.RPAREN), parameters.cursor, "')'", context=f"to close {what} parameters")
        body = self._block(closed.cursor, "end", context=f"to close {what}")
        return names, variadic, body

    # -------------------------
    # Expressions
    # -------------------------

    def expression(self, cursor: TokenCursor) -> ParseResult[Expression]:
        return self._binary_expression(cursor, 0)

    def _expect_expression(self, cursor: TokenCursor, context: str) -> Match[Expression]:
        return self._expect_with(self.expression, cursor, context)

    def _binary_expression(self, cursor: TokenCursor, min_precedence: int) -> ParseResult[Expression]:
        """Precedence climbing: fold operators binding at least as tightly as `min_precedence`."""
        operand = self._operand(cursor)
        if isinstance(operand, NoMatch):
            return NO_MATCH
        cursor, left = operand.cursor, operand.value

        while True:
            kind = _lookup_operator(self._binary_operators, cursor.peek())
            if kind is None or kind.precedence < min_precedence:
                break
            next_min = kind.precedence if kind.is_right_associative else kind.precedence + 1
            right_operand = nested(partial(self._binary_expression, min_precedence=next_min), max_depth=self._options.max_depth)
            right = self._expect_with(right_operand, cursor.advance(), f"after '{kind.value}'")
            left = BinaryOp(self._id(), kind, left, right.value)
            cursor = right.cursor

        return Match(cursor, left)

    def _unary_or_primary(self, cursor: TokenCursor) -> ParseResult[Expression]:
        kind = _lookup_operator(self._unary_operators, cursor.peek())
        if kind is None:
            return self._primary(cursor)
        argument = self._expect_with(
            partial(self._binary_expression, min_precedence=UNARY_PRECEDENCE),
            cursor.advance(),
            f"after unary '{kind.value}'",
        )
        return Match(argument.cursor, UnaryOp(self._id(), kind, argument.value))

    def _expect_with(self, parser: Parser[Expression], cursor: TokenCursor, context: str) -> Match[Expression]:
        result = parser(cursor)
        if isinstance(result, NoMatch):
            raise syntax_error(
                cursor,
                f"expected expression {context}, found {cursor.describe_current()}",
                PARSER_EXPECTED_EXPRESSION,
            )
        return result

    def _literal(self, cursor: TokenCursor) -> ParseResult[Expression]:
        current = cursor.peek()
        if current is None:
            return NO_MATCH
        node: Expression
        match current.kind:
            case TokenKind.NUMBER:
                node = Number(self._id(), current.text)
            case TokenKind.STRING if current.string is not None:
                node = String(self._id(), current.string)
            case TokenKind.KEYWORD if current.text == "nil":
                node = Nil(self._id())
            case TokenKind.KEYWORD if current.text in ("true", "false"):
                node = Bool(self._id(), current.text == "true")
            case TokenKind.OPERATOR if current.text == "...":
                node = VarArg(self._id())
            case _:
                return NO_MATCH
        return Match(cursor.advance(), node)

    # function funcbody
    def function_expression(self, cursor: TokenCursor) -> ParseResult[FunctionExpression]:
        function = keyword("function")(cursor)
        if isinstance(function, NoMatch):
            return NO_MATCH
        parameters, variadic, body = self._function_body(function.cursor, "anonymous function")
        return Match(body.cursor, FunctionExpression(self._id(), parameters, body.value, variadic))

    # prefixexp ::= (Name | '(' exp ')') { '.' Name | '[' exp ']' | [':' Name] args }
    def prefix_expression(self, cursor: TokenCursor) -> ParseResult[Expression]:
        current = cursor.peek()
        expression: Expression
        if current is None:
            return NO_MATCH
        if current.kind == TokenKind.IDENTIFIER:
            expression = Name(self._id(), current.text)
            cursor = cursor.advance()
        elif current.kind == TokenKind.LPAREN:
            inner = self._expect_expression(cursor.advance(), "after '('")
            closed = expect(token(TokenKind.RPAREN), inner.cursor, "')'", context="to close parenthesised expression")
            expression = ParenExpression(self._id(), inner.value)
            cursor = closed.cursor
        else:
            return NO_MATCH

        while True:
            current = cursor.peek()
            if current is None:
                break
            if current.is_operator("."):
                name = expect(self._identifier, cursor.advance(), "field name", context="after '.'")
                expression = Field(self._id(), expression, name.value)
                cursor = name.cursor
            elif current.kind == TokenKind.LBRACKET:
                key = self._expect_expression(cursor.advance(), "after '['")
                closed = expect(token(TokenKind.RBRACKET), key.cursor, "']'", context="to close index expression")
                expression = Index(self._id(), expression, key.value)
                cursor = closed.cursor
            elif current.is_operator(":"):
                method = expect(self._identifier, cursor.advance(), "method name", context="after ':'")
                arguments = expect(
                    self._call_arguments,
                    method.cursor,
                    "call arguments",
                    context=f"after method name '{method.value}'",
                )
                expression = FunctionCall(self._id(), expression, arguments.value, method.value)
                cursor = arguments.cursor
            else:
                arguments = self._call_arguments(cursor)
                if isinstance(arguments, NoMatch):
                    break
                expression = FunctionCall(self._id(), expression, arguments.value)
                cursor = arguments.cursor

        return Match(cursor, expression)

    # args ::= '(' [explist] ')' | tableconstructor | LiteralString
    def _call_arguments(self, cursor: TokenCursor) -> ParseResult[tuple[Expression, ...]]:
        current = cursor.peek()
        if current is None:
            return NO_MATCH
        match current.kind:
            case TokenKind.LPAREN:
                arguments = optional(self._expression_list)(cursor.advance())
                closed = expect(token(TokenKind.RPAREN), arguments.cursor, "')'", context="to close argument list")
                return Match(closed.cursor, arguments.value or ())
            case TokenKind.LBRACE:
                table = self.table_literal(cursor)
                if isinstance(table, NoMatch):
                    return NO_MATCH
                return Match(table.cursor, (table.value,))
            case TokenKind.STRING:
                literal = string_literal(cursor)
                if isinstance(literal, NoMatch) or literal.value.string is None:
                    return NO_MATCH
                return Match(literal.cursor, (String(self._id(), literal.value.string),))
            case _:
                return NO_MATCH

    # -------------------------
    # Table constructor
    # -------------------------

    # tableconstructor ::= '{' [field {fieldsep field} [fieldsep]] '}'
    def table_literal(self, cursor: TokenCursor) -> ParseResult[TableLiteral]:
        opened = token(TokenKind.LBRACE)(cursor)
        if isinstance(opened, NoMatch):
            return NO_MATCH
        fields = self._table_fields(opened.cursor)
        closed = expect(token(TokenKind.RBRACE), fields.cursor, "'}'", context="to close table constructor")
        return Match(closed.cursor, TableLiteral(self._id(), fields.value))

    # field ::= [tablekey] exp
    def table_field(self, cursor: TokenCursor) -> ParseResult[TableField]:
        key = self._table_key(cursor)
        if isinstance(key, Match):
            value = self._expect_expression(key.cursor, "as table field value")
            return Match(value.cursor, TableField(key.value, value.value))
        value = self.expression(cursor)
        if isinstance(value, NoMatch):
            return NO_MATCH
        return Match(value.cursor, TableField(None, value.value))

    # tablekey ::= Name '=' | '[' exp ']' '='
    def _table_key(self, cursor: TokenCursor) -> ParseResult[TableKey]:
        name = self._identifier(cursor)
        if isinstance(name, Match):
            equals = operator("=")(name.cursor)
            if isinstance(equals, Match):
                return Match(equals.cursor, NameKey(name.value))
            # A bare name is a positional value, not a key.
            return NO_MATCH

        opened = token(TokenKind.LBRACKET)(cursor)
        if isinstance(opened, NoMatch):
            return NO_MATCH
        key = self._expect_expression(opened.cursor, "as table key")
        closed = expect(token(TokenKind.RBRACKET), key.cursor, "']'", context="to close table key")
        equals = expect(operator("="), closed.cursor, "'='", context="after table key")
        return Match(equals.cursor, ExpressionKey(key.value))


def _binary_operators_for(options: ParserOptions) -> dict[str, BinaryOpKind]:
    operators = {kind.value: kind for kind in BinaryOpKind}
    if not options.allow_floor_division:
        del operators[BinaryOpKind.FLOOR_DIVIDE.value]
    if not options.allow_bitwise_operators:
        for kind in _BITWISE_BINARY_OPERATORS:
            del operators[kind.value]
    return operators


def _unary_operators_for(options: ParserOptions) -> dict[str, UnaryOpKind]:
    operators = {kind.value: kind for kind in UnaryOpKind}
    if not options.allow_bitwise_operators:
        del operators[UnaryOpKind.BITWISE_NOT.value]
    return operators


def _lookup_operator[K](operators: dict[str, K], current: Token | None) -> K | None:
    if current is None or current.kind not in _OPERATOR_TOKEN_KINDS:
        return None
    return operators.get(current.text)
