from __future__ import annotations

import functools
from typing import Any, Callable, Generic, TypeVar, cast

_T = TypeVar("_T")


class lazyproperty(Generic[_T]):
    """Decorator like @property, but evaluated only on first access.

    The decorated method is only evaluated on first access; the resulting value is cached in the
    instance `__dict__` under the method name and that same value is returned on later access
    without re-evaluation. Used for collaborators like the parsed chapter tree or the loaded page
    text, so the "real work" stays out of the constructor but still happens only once.

    A lazyproperty is read-only. Attempting to assign to it raises AttributeError
    unconditionally.
    """

    def __init__(self, fget: Callable[..., _T]) -> None:
        self._fget = fget
        self._name = fget.__name__
        functools.update_wrapper(self, fget)  # pyright: ignore

    def __get__(self, obj: Any, type: Any = None) -> _T:
        # --- when accessed on class, e.g. Obj.fget, just return this descriptor
        if obj is None:
            return self  # type: ignore

        value = obj.__dict__.get(self._name)
        if value is None:
            value = self._fget(obj)
            obj.__dict__[self._name] = value
        return cast(_T, value)

    def __set__(self, obj: Any, value: Any) -> None:
        raise AttributeError("can't set attribute")
