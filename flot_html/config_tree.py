from __future__ import annotations

import copy
import json
import math
from collections.abc import Mapping
from typing import Any, Union

import numpy as np

from flot_html.errors import ConfigPathError


PathKey = Union[str, int]
Node = Any

_MISSING = object()


class ConfigTree:
    """Mutable JSON-like document addressed by explicit paths.

    Path elements are `str` (object key) or `int` (array index). Reads of a
    missing path return None; writes create missing objects/arrays on the way.
    """

    def __init__(self, root: Mapping[str, Any] | None = None) -> None:
        self._root: dict[str, Any] = {} if root is None else coerce_node(dict(root))

    def get(self, *path: PathKey) -> Node:
        node: Any = self._root
        for key in path:
            node = _child(node, key)
            if node is _MISSING:
                return None
        return node

    def contains(self, *path: PathKey) -> bool:
        node: Any = self._root
        for key in path:
            node = _child(node, key)
            if node is _MISSING:
                return False
        return True

    def set(self, *path: PathKey, value: Any) -> Node:
        if not path:
            raise ConfigPathError("cannot replace the tree root")
        parent = self._vivify(path[:-1], next_key=path[-1])
        node = coerce_node(value)
        _assign(parent, path[-1], node, path)
        return node

    def ensure(self, *path: PathKey, default: Any) -> Node:
        existing = self.get(*path)
        if existing is not None:
            return existing
        return self.set(*path, value=default)

    def update(self, *path: PathKey, values: Mapping[str, Any]) -> dict[str, Any]:
        target = self.ensure(*path, default={}) if path else self._root
        if not isinstance(target, dict):
            raise ConfigPathError(f"{_fmt(path)} is not an object")
        for key, value in values.items():
            target[str(key)] = coerce_node(value)
        return target

    def append(self, *path: PathKey, value: Any) -> int:
        target = self.ensure(*path, default=[])
        if not isinstance(target, list):
            raise ConfigPathError(f"{_fmt(path)} is not an array")
        target.append(coerce_node(value))
        return len(target) - 1

    def last(self, *path: PathKey) -> Node:
        target = self.get(*path)
        if not isinstance(target, list):
            raise ConfigPathError(f"{_fmt(path)} is not an array")
        if not target:
            raise ConfigPathError(f"{_fmt(path)} is empty")
        return target[-1]

    def remove(self, *path: PathKey) -> Node:
        """Drop the node at `path`, returning it (None when absent)."""

        if not path:
            raise ConfigPathError("cannot remove the tree root")
        parent = self.get(*path[:-1]) if len(path) > 1 else self._root
        key = path[-1]
        if isinstance(parent, dict) and isinstance(key, str):
            return parent.pop(key, None)
        if isinstance(parent, list) and isinstance(key, int) and 0 <= key < len(parent):
            return parent.pop(key)
        return None

    def ensure_slot(self, *path: PathKey, index: int) -> dict[str, Any]:
        """Pad the array at `path` with empty objects so `index` exists."""

        if index < 0:
            raise ValueError("slot index must be >= 0")
        arr = self.ensure(*path, default=[])
        if not isinstance(arr, list):
            raise ConfigPathError(f"{_fmt(path)} is not an array")
        while len(arr) <= index:
            arr.append({})
        return arr[index]

    def snapshot(self, *path: PathKey) -> Node:
        """Detached copy of the node at `path`; edits to it never reach the tree."""

        return copy.deepcopy(self.get(*path))

    def to_dict(self) -> dict[str, Any]:
        return copy.deepcopy(self._root)

    def to_json(self) -> str:
        return to_json(self._root)

    def _vivify(self, path: tuple[PathKey, ...], *, next_key: PathKey) -> Any:
        node: Any = self._root
        keys = list(path) + [next_key]
        for i, key in enumerate(path):
            child = _child(node, key)
            if child is _MISSING or child is None:
                child = [] if isinstance(keys[i + 1], int) else {}
                _assign(node, key, child, path[: i + 1])
            elif not isinstance(child, (dict, list)):
                raise ConfigPathError(f"cannot write through scalar at {_fmt(path[: i + 1])}")
            node = child
        return node

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ConfigTree):
            return self._root == other._root
        return NotImplemented

    def __repr__(self) -> str:
        return f"ConfigTree({self.to_json()})"


def coerce_node(value: Any) -> Node:
    if isinstance(value, ConfigTree):
        return value.to_dict()
    if value is None or isinstance(value, (str, bool, int, float)):
        return value
    if isinstance(value, np.generic):
        return value.item()
    if isinstance(value, Mapping):
        return {str(k): coerce_node(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [coerce_node(v) for v in value]
    if isinstance(value, np.ndarray):
        return coerce_node(value.tolist())
    raise TypeError(f"unsupported configuration value: {type(value)!r}")


def to_json(node: Node) -> str:
    text = json.dumps(_compact_numbers(node), separators=(",", ":"), ensure_ascii=False, allow_nan=True)
    # Inlined into <script> blocks; "<\/" is the same string to JSON and JS.
    return text.replace("</", "<\\/")


def _compact_numbers(node: Node) -> Node:
    if isinstance(node, bool) or node is None or isinstance(node, str):
        return node
    if isinstance(node, float):
        if math.isfinite(node) and node.is_integer() and abs(node) < 1e16:
            return int(node)
        return node
    if isinstance(node, dict):
        return {k: _compact_numbers(v) for k, v in node.items()}
    if isinstance(node, list):
        return [_compact_numbers(v) for v in node]
    return node


def _child(node: Any, key: PathKey) -> Any:
    if isinstance(key, bool):
        return _MISSING
    if isinstance(node, dict) and isinstance(key, str):
        return node.get(key, _MISSING)
    if isinstance(node, list) and isinstance(key, int):
        if 0 <= key < len(node):
            return node[key]
    return _MISSING


def _assign(parent: Any, key: PathKey, value: Node, path: tuple[PathKey, ...]) -> None:
    if isinstance(parent, dict) and isinstance(key, str):
        parent[key] = value
        return
    if isinstance(parent, list) and isinstance(key, int) and not isinstance(key, bool):
        if key < 0:
            raise ConfigPathError(f"negative array index at {_fmt(path)}")
        while len(parent) <= key:
            parent.append({})
        parent[key] = value
        return
    raise ConfigPathError(f"path element {key!r} does not match container at {_fmt(path)}")


def _fmt(path: tuple[PathKey, ...]) -> str:
    if not path:
        return "<root>"
    return "".join(f"[{k}]" if isinstance(k, int) else f".{k}" for k in path).lstrip(".")
