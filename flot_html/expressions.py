"""Caller-supplied JavaScript expressions.

These are opaque: they are never parsed or validated, only wrapped in a
function literal when the caller passes a bare expression.
"""

from __future__ import annotations

from dataclasses import dataclass
import json
import re
from typing import Sequence

from flot_html.config_tree import PathKey


_FUNCTION_PREFIX = re.compile(r"^\s*function\b")


@dataclass(frozen=True)
class ScriptAssignment:
    path: tuple[PathKey, ...]
    source: str

    def render(self, variable: str) -> str:
        return f"{js_accessor(variable, self.path)} = {self.source};"


def wrap_function(expr: str, params: Sequence[str]) -> str:
    if _FUNCTION_PREFIX.match(expr):
        return expr.strip()
    return f"function ({', '.join(params)}) {{ return {expr.strip()}; }}"


def tick_suffix_formatter(suffix: str) -> str:
    return f"v.toFixed(axis.tickDecimals) + {json.dumps(suffix, ensure_ascii=False)}"


def tick_prefix_formatter(prefix: str) -> str:
    return f"{json.dumps(prefix, ensure_ascii=False)} + v.toFixed(axis.tickDecimals)"


def js_accessor(variable: str, path: Sequence[PathKey]) -> str:
    parts = [variable]
    for key in path:
        if isinstance(key, int):
            parts.append(f"[{key}]")
        elif re.fullmatch(r"[A-Za-z_$][A-Za-z0-9_$]*", key):
            parts.append(f".{key}")
        else:
            parts.append(f"[{json.dumps(key)}]")
    return "".join(parts)
