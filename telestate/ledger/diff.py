"""Recursive structural diff producing FieldDelta mappings.

Only mappings are traversed. Sequences and scalars are atomic: a change
anywhere inside a list yields a single entry for the whole list field.
Paths are dot-joined keys with ``.`` and ``\\`` inside a key escaped by a
backslash, so ``{"a.b": 1}`` maps to ``a\\.b`` and never collides with
``{"a": {"b": 1}}``. A difference between two non-mapping roots is reported
under the empty path ``""``.
"""

from __future__ import annotations

import copy
from collections.abc import Mapping
from typing import Any

from telestate.errors import CyclicStructureError, InvalidArgumentError
from telestate.models.transition import FieldDelta
from telestate.models.values import ABSENT, ValueKind, classify

ROOT_PATH = ""


def escape_key(key: object) -> str:
    return str(key).replace("\\", "\\\\").replace(".", "\\.")


def join_path(prefix: str, key: object) -> str:
    """Append *key* to the field path *prefix*."""
    segment = escape_key(key)
    return f"{prefix}.{segment}" if prefix else segment


def split_path(path: str) -> list[str]:
    """Split a field path back into its unescaped keys."""
    keys: list[str] = []
    current: list[str] = []
    chars = iter(path)
    for ch in chars:
        if ch == "\\":
            current.append(next(chars, "\\"))
        elif ch == ".":
            keys.append("".join(current))
            current = []
        else:
            current.append(ch)
    keys.append("".join(current))
    return keys


def _differs(old: Any, new: Any) -> bool:
    # identity first: a NaN is unequal to itself
    return old is not new and old != new


def _sorted_keys(keys: set[Any]) -> list[Any]:
    return sorted(keys, key=str)


def _record(out: dict[str, FieldDelta], path: str, change: FieldDelta) -> None:
    if path in out:
        # only reachable when distinct keys share a string form, e.g. 1 and "1"
        raise InvalidArgumentError("before/after", f"two keys map to the same field path {path!r}")
    out[path] = change


def _walk(
    before: Mapping[Any, Any],
    after: Mapping[Any, Any],
    prefix: str,
    out: dict[str, FieldDelta],
    active: set[tuple[int, int]],
) -> None:
    marker = (id(before), id(after))
    if marker in active:
        raise CyclicStructureError(prefix)
    active.add(marker)

    for key in _sorted_keys(set(before) | set(after)):
        path = join_path(prefix, key)
        if key not in before:
            _record(out, path, FieldDelta(old=ABSENT, new=after[key]))
            continue
        if key not in after:
            _record(out, path, FieldDelta(old=before[key], new=ABSENT))
            continue

        old, new = before[key], after[key]
        if classify(old) is ValueKind.MAPPING and classify(new) is ValueKind.MAPPING:
            _walk(old, new, path, out, active)
        elif _differs(old, new):
            _record(out, path, FieldDelta(old=old, new=new))

    active.discard(marker)


def diff(before: Any, after: Any) -> dict[str, FieldDelta]:
    """Compute the structural difference between *before* and *after*.

    Returns a mapping of field path to FieldDelta covering every field that
    was added, removed or changed. ``diff(x, x)`` is always empty.

    Raises:
        CyclicStructureError: if both inputs share a reference cycle along
            the traversed path.
        InvalidArgumentError: if two distinct keys at one level have the
            same string form.
    """
    out: dict[str, FieldDelta] = {}
    if classify(before) is ValueKind.MAPPING and classify(after) is ValueKind.MAPPING:
        _walk(before, after, ROOT_PATH, out, set())
    elif _differs(before, after):
        out[ROOT_PATH] = FieldDelta(old=before, new=after)
    return out


def invert(delta: Mapping[str, FieldDelta]) -> dict[str, FieldDelta]:
    """Return *delta* with every entry's old and new values swapped."""
    return {path: change.inverted() for path, change in delta.items()}


def _set_path(target: dict[str, Any], keys: list[str], value: Any) -> None:
    cur = target
    for k in keys[:-1]:
        nxt = cur.get(k)
        if not isinstance(nxt, dict):
            nxt = {}
            cur[k] = nxt
        cur = nxt
    cur[keys[-1]] = value


def _del_path(target: dict[str, Any], keys: list[str]) -> None:
    cur: Any = target
    for k in keys[:-1]:
        if not isinstance(cur, dict):
            return
        cur = cur.get(k)
    if isinstance(cur, dict):
        cur.pop(keys[-1], None)


def apply_delta(base: Mapping[str, Any] | None, delta: Mapping[str, FieldDelta]) -> Any:
    """Apply *delta* to a deep copy of *base* and return the result.

    ``apply_delta(a, diff(a, b)) == b`` holds for mappings with string keys.
    *base* is never mutated.
    """
    if ROOT_PATH in delta:
        root = delta[ROOT_PATH].new
        return {} if root is ABSENT else copy.deepcopy(root)

    if base is not None and classify(base) is not ValueKind.MAPPING:
        raise InvalidArgumentError("base", f"expected a mapping, got {type(base).__name__}")

    out: dict[str, Any] = copy.deepcopy(dict(base or {}))
    removals: list[list[str]] = []
    for path, change in delta.items():
        keys = split_path(path)
        if change.new is ABSENT:
            removals.append(keys)
        else:
            _set_path(out, keys, copy.deepcopy(change.new))
    for keys in removals:
        _del_path(out, keys)
    return out
