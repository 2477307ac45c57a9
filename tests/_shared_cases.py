"""Centralized Lua source cases used across lexer/parser/ast tests."""

from __future__ import annotations

import textwrap
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class LuaCase:
    name: str
    source: str
    should_parse: bool = True
    error_code: str | None = None


def _dedent(text: str) -> str:
    return textwrap.dedent(text).lstrip()


VALID_CASES: tuple[LuaCase, ...] = (
    LuaCase(name="empty_source", source=""),
    LuaCase(name="comment_only", source="-- nothing here\n--[[ or\nhere ]]\n"),
    LuaCase(name="single_call", source='print("hi")\n'),
    LuaCase(name="local_without_values", source="local a, b\n"),
    LuaCase(name="multiple_assignment", source="a, b = 1, 2\n"),
    LuaCase(
        name="numeric_for_with_step",
        source=_dedent(
            """
            for i = 10, 1, -1 do
                print(i)
            end
            """
        ),
    ),
    LuaCase(
        name="generic_for_pairs",
        source=_dedent(
            """
            for k, v in pairs(t) do
                print(k, v)
            end
            """
        ),
    ),
    LuaCase(
        name="if_elseif_else",
        source=_dedent(
            """
            if a then
                x = 1
            elseif b then
                x = 2
            elseif c then
                x = 3
            else
                x = 4
            end
            """
        ),
    ),
    LuaCase(
        name="while_and_repeat",
        source=_dedent(
            """
            while n > 0 do
                n = n - 1
            end
            repeat
                local done = check()
            until done
            """
        ),
    ),
    LuaCase(
        name="recursive_function",
        source=_dedent(
            """
            local function fact(n)
                if n <= 1 then
                    return 1
                end
                return n * fact(n - 1)
            end
            """
        ),
    ),
    LuaCase(
        name="table_constructor_mixed_fields",
        source=_dedent(
            """
            local t = {
                1, 2;
                name = "lua",
                ["key" .. 1] = true,
                nested = { x = 1, y = 2, },
            }
            """
        ),
    ),
    LuaCase(
        name="method_calls_and_indexing",
        source=_dedent(
            """
            obj:method(1, 2)
            a.b.c:d "str"
            f{ 1, 2 }
            t[1][2] ()
            """
        ),
    ),
    LuaCase(
        name="closures_and_varargs",
        source=_dedent(
            """
            local apply = function(f, ...)
                return f(...)
            end
            """
        ),
    ),
    LuaCase(
        name="do_block_goto_and_labels",
        source=_dedent(
            """
            do
                goto skip
                print("skipped")
                ::skip::
            end
            while true do break end
            """
        ),
    ),
    LuaCase(
        name="long_strings_and_escapes",
        source=_dedent(
            """
            local a = [[
            line one
            line two]]
            local b = "tab\\tnewline\\n\\65\\x41\\u{48}"
            local c = [==[ contains ]] inside ]==]
            """
        ),
    ),
    LuaCase(
        name="numbers",
        source="local n = { 3, 3.0, 3.1416, 314.16e-2, 0.31416E1, 0xff, 0x0.1E, 0xA23p-4, .5 }\n",
    ),
    LuaCase(name="semicolons_are_separators", source="a = 1; b = 2;; ;\n"),
    LuaCase(name="operator_soup", source="x = not a == b or #t > 2 and -y ^ 2 .. 'z' // 3 % 4 ~= 5\n"),
    LuaCase(name="bitwise_and_attributes", source="local mask <const>, f <close> = ~x & 0xff | y << 2 ~ z >> 1, io\n"),
)

INVALID_CASES: tuple[LuaCase, ...] = (
    LuaCase(
        name="numeric_for_missing_do",
        source="for i = 1, 10 { }\n",
        should_parse=False,
        error_code="PARSER_EXPECTED_TOKEN",
    ),
    LuaCase(
        name="stray_closing_paren",
        source="print(1))\n",
        should_parse=False,
        error_code="PARSER_UNEXPECTED_TOKEN",
    ),
    LuaCase(
        name="missing_end",
        source="while true do\n  x = 1\n",
        should_parse=False,
        error_code="PARSER_EXPECTED_TOKEN",
    ),
    LuaCase(
        name="assignment_without_value",
        source="x =\n",
        should_parse=False,
        error_code="PARSER_EXPECTED_TOKEN",
    ),
    LuaCase(
        name="dangling_binary_operator",
        source="x = 1 +\n",
        should_parse=False,
        error_code="PARSER_EXPECTED_EXPRESSION",
    ),
    LuaCase(
        name="statement_after_return",
        source="return 1\nx = 2\n",
        should_parse=False,
        error_code="PARSER_UNEXPECTED_TOKEN",
    ),
    LuaCase(
        name="vararg_not_last",
        source="function f(..., a) end\n",
        should_parse=False,
        error_code="PARSER_MISPLACED_VARARG",
    ),
    LuaCase(
        name="unclosed_table",
        source="t = { 1, 2\n",
        should_parse=False,
        error_code="PARSER_EXPECTED_TOKEN",
    ),
)

ALL_LUA_CASES: tuple[LuaCase, ...] = VALID_CASES + INVALID_CASES

CASE_BY_NAME: dict[str, LuaCase] = {case.name: case for case in ALL_LUA_CASES}


def case_source(name: str) -> str:
    return CASE_BY_NAME[name].source


def case_id(case: LuaCase) -> str:
    return case.name
