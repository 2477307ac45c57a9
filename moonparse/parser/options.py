"""Parser language versions and configuration options."""

from dataclasses import dataclass
from enum import StrEnum


class LuaVersion(StrEnum):
    """Language version whose surface syntax the parser accepts."""

    LUA_51 = "5.1"
    LUA_52 = "5.2"
    LUA_53 = "5.3"
    LUA_54 = "5.4"


@dataclass(frozen=True, slots=True)
class ParserOptions:
    """Feature flags and limits controlling the grammar."""

    version: LuaVersion = LuaVersion.LUA_54
    max_depth: int = 100
    allow_goto: bool = True
    allow_floor_division: bool = True
    allow_bitwise_operators: bool = True
    allow_local_attributes: bool = True

    def __post_init__(self):
        if self.max_depth < 1:
            raise ValueError("max_depth must be at least 1")

    @staticmethod
    def for_version(version: LuaVersion) -> "ParserOptions":
        since_53 = version in (LuaVersion.LUA_53, LuaVersion.LUA_54)
        return ParserOptions(
            version=version,
            # goto and ::labels:: arrived in 5.2
            allow_goto=version != LuaVersion.LUA_51,
            allow_floor_division=since_53,
            allow_bitwise_operators=since_53,
            # <const> and <close>
            allow_local_attributes=version == LuaVersion.LUA_54,
        )
