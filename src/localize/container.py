"""
LocalizeMap: the named root that gets rendered into a script block.

A LocalizeMap owns:
    - var_name: the global variable the block assigns into (always a
      validated identifier)
    - data: a plain dict of entries, mutated through add()/delete()

Rendering takes a snapshot of data at call time. Do not mutate the map
from another thread while js() is running.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from localize.errors import EmptyKeyError, NilValueError, UnsupportedValueError
from localize.identifier import validate_identifier
from localize.serializer import render_target
from localize.values import Mapping, to_reference, to_value


log = logging.getLogger(__name__)

DEFAULT_VAR_NAME = "_globalVars"


def _check_entry(key: str, value: Any) -> None:
    if not isinstance(key, str):
        raise UnsupportedValueError(f"Entry keys must be str, got {type(key).__name__}")
    if not key:
        raise EmptyKeyError("Cannot add value to an empty key")
    if value is None:
        raise NilValueError(f"Cannot add entry {key!r} with a None value")
    # Fail now rather than at render time
    to_value(value)


class LocalizeMap:
    """
    Localized data under a destination variable name.

    Example:
        >>> m = LocalizeMap("_localData", {"motd": "Hello"})
        >>> print(m.js())
        _localData = {
        "motd": [
        "Hello",
        ],
        <BLANKLINE>
        };
    """

    def __init__(self, name: str = DEFAULT_VAR_NAME, data: Optional[Dict[str, Any]] = None):
        """
        Raises:
            InvalidIdentifierError, ReservedKeywordError: If name is rejected
            EmptyKeyError, NilValueError, UnsupportedValueError: If an
                initial entry would be rejected by add()
        """
        validate_identifier(name)
        if data is None:
            data = {}
        for key, value in data.items():
            _check_entry(key, value)
        self._var_name = name
        self._data: Dict[str, Any] = data

    def __repr__(self) -> str:
        return f"LocalizeMap({self._var_name!r}, {len(self._data)} entries)"

    @property
    def var_name(self) -> str:
        return self._var_name

    @property
    def data(self) -> Dict[str, Any]:
        """The live entry dict (not a copy)."""
        return self._data

    def set_var_name(self, name: str) -> "LocalizeMap":
        """
        Replace the destination variable name.

        The current name is kept if validation fails.

        Returns:
            self, for chaining

        Raises:
            InvalidIdentifierError, ReservedKeywordError
        """
        validate_identifier(name)
        self._var_name = name
        return self

    def add(self, key: str, value: Any) -> None:
        """
        Add or replace an entry.

        Raises:
            EmptyKeyError: If key is empty
            NilValueError: If value is None
            UnsupportedValueError: If value cannot be rendered
        """
        _check_entry(key, value)
        self._data[key] = value
        log.debug("%s: added %r", self._var_name, key)

    def delete(self, key: str) -> None:
        """
        Remove an entry. Removing a key that is not present is a no-op.

        Raises:
            EmptyKeyError: If key is empty
        """
        if not key:
            raise EmptyKeyError("Cannot delete entry with an empty key")
        self._data.pop(key, None)
        log.debug("%s: deleted %r", self._var_name, key)

    def root(self) -> Mapping:
        """Snapshot of the data as a Mapping of References."""
        return Mapping({key: to_reference(value) for key, value in self._data.items()})

    def js(self) -> str:
        """Render the full ``<var_name> = {...};`` block."""
        return render_target(self)


__all__ = ["DEFAULT_VAR_NAME", "LocalizeMap"]
