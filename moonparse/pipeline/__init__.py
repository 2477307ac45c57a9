"""Shared parse carriers."""

from moonparse.pipeline.result import LuaParseResult

__all__ = ["LuaParseResult"]
