# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""PropertyStore - path-addressable property bag for component nodes.

Properties are stored as plain nested dicts so that ``get_all()`` can be used
verbatim as the base of the wire representation.

Path Syntax:
    - Plain key: 'data'
    - Dotted path: 'style.fontSize' (intermediate dicts created on demand)

Write policy:
    - ``None`` and ``''`` are never stored; such writes are silently skipped
      and leave any existing value untouched. Use ``unset()`` to remove.
    - Writing a dict over an existing dict at a plain key merges the two
      (shallow, new keys win).

Example:
    >>> store = PropertyStore()
    >>> store.set('style.fontSize', 14)
    >>> store.get('style')
    {'fontSize': 14}
    >>> store.set('style', {'color': '#fff'})
    >>> store.get('style')
    {'fontSize': 14, 'color': '#fff'}
"""

from __future__ import annotations

from typing import Any, Iterator, Mapping

_MISSING = object()


def is_empty_value(value: Any) -> bool:
    """True for the values a write skips (``None`` and the empty string)."""
    return value is None or (isinstance(value, str) and value == '')


def _own(value: Any) -> Any:
    """Copy dict and list containers so stored values never alias the caller's."""
    if isinstance(value, Mapping):
        return {k: _own(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_own(v) for v in value]
    return value


class PropertyStore:
    """A dict-backed key/value bag with dotted-path access.

    Example:
        >>> store = PropertyStore({'data': 'Hello'})
        >>> store.set('a.b.c', 5)
        >>> store.get('a')
        {'b': {'c': 5}}
        >>> store.get('a.x', 'missing')
        'missing'
    """

    __slots__ = ('_data',)

    def __init__(self, source: Mapping[str, Any] | None = None) -> None:
        """Initialize a PropertyStore.

        Args:
            source: Optional initial properties, applied with ``set_all``.
        """
        self._data: dict[str, Any] = {}
        if source:
            self.set_all(source)

    # ==================== Special Methods ====================

    def __repr__(self) -> str:
        return f"PropertyStore({self._data!r})"

    def __len__(self) -> int:
        """Return the number of top-level keys."""
        return len(self._data)

    def __iter__(self) -> Iterator[str]:
        """Iterate over top-level keys in insertion order."""
        return iter(self._data)

    def __contains__(self, key: str) -> bool:
        """Check if a key or dotted path holds a value."""
        return self.get(key, _MISSING) is not _MISSING

    def __eq__(self, other: object) -> bool:
        if isinstance(other, PropertyStore):
            return self._data == other._data
        return NotImplemented

    # ==================== Path Utilities ====================

    def _htraverse(self, key: str, autocreate: bool = False) -> tuple[dict | None, str]:
        """Walk the dotted key down to the dict holding its last segment.

        Args:
            key: Dotted path string.
            autocreate: If True, create missing intermediate dicts and replace
                non-dict intermediates with empty dicts.

        Returns:
            Tuple of (container, final_segment). Container is None when a
            segment is missing and autocreate is False.
        """
        parts = key.split('.')
        current = self._data

        for part in parts[:-1]:
            nested = current.get(part, _MISSING)
            if not isinstance(nested, dict):
                if not autocreate:
                    return None, parts[-1]
                nested = {}
                current[part] = nested
            current = nested

        return current, parts[-1]

    # ==================== Core API ====================

    def set(self, key: str, value: Any) -> PropertyStore:
        """Set a property, creating intermediate dicts for dotted keys.

        Args:
            key: Property key, optionally dotted ('style.fontSize').
            value: The value. ``None`` and ``''`` are skipped.

        Returns:
            This store, for chaining.
        """
        if is_empty_value(value):
            return self

        if '.' in key:
            container, label = self._htraverse(key, autocreate=True)
            container[label] = _own(value)
            return self

        existing = self._data.get(key)
        if isinstance(existing, dict) and isinstance(value, Mapping):
            self._data[key] = {**existing, **_own(value)}
        else:
            self._data[key] = _own(value)
        return self

    def get(self, key: str, default: Any = None) -> Any:
        """Get a property by key or dotted path.

        Args:
            key: Property key, optionally dotted.
            default: Returned when any segment is absent.
        """
        if '.' not in key:
            return self._data.get(key, default)

        container, label = self._htraverse(key)
        if container is None:
            return default
        return container.get(label, default)

    def get_all(self) -> dict[str, Any]:
        """Return the backing dict (not a copy)."""
        return self._data

    def set_all(self, properties: Mapping[str, Any]) -> PropertyStore:
        """Apply ``set`` for every key, in iteration order."""
        for key, value in properties.items():
            self.set(key, value)
        return self

    def unset(self, key: str) -> Any:
        """Remove and return the value at a key or dotted path.

        Missing keys are ignored and return None.
        """
        if '.' not in key:
            return self._data.pop(key, None)

        container, label = self._htraverse(key)
        if container is None:
            return None
        return container.pop(label, None)

    def clear(self) -> None:
        """Remove all properties."""
        self._data.clear()

    def copy(self) -> PropertyStore:
        """Return a deep value copy sharing no dicts or lists with this store."""
        from .cloning import copy_value

        clone = PropertyStore()
        clone._data = copy_value(self._data)
        return clone
