"""Read-only containers for schema documents held by endpoint records.

``freeze`` turns nested dicts and lists into ``FrozenDict`` / ``FrozenList``.
They still compare equal to plain dicts and lists, but reject mutation
and are hashable. ``thaw`` makes a plain, mutable deep copy.
"""

from typing import Annotated, Any

from pydantic import AfterValidator, PlainSerializer


def _read_only(self, *args, **kwargs):
    raise TypeError(f"{type(self).__name__} is read-only")


class FrozenDict(dict):
    __setitem__ = __delitem__ = __ior__ = _read_only
    clear = pop = popitem = setdefault = update = _read_only

    def __hash__(self):
        return hash(frozenset(self.items()))

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def __reduce__(self):
        return (FrozenDict, (dict(self),))


class FrozenList(list):
    __setitem__ = __delitem__ = __iadd__ = __imul__ = _read_only
    append = extend = insert = pop = remove = clear = sort = reverse = _read_only

    def __hash__(self):
        return hash(tuple(self))

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def __reduce__(self):
        return (FrozenList, (list(self),))


def freeze(value: Any) -> Any:
    if isinstance(value, FrozenDict | FrozenList):
        return value
    if isinstance(value, dict):
        return FrozenDict({key: freeze(item) for key, item in value.items()})
    if isinstance(value, list | tuple):
        return FrozenList(freeze(item) for item in value)
    return value


def thaw(value: Any) -> Any:
    if isinstance(value, dict):
        return {key: thaw(item) for key, item in value.items()}
    if isinstance(value, list | tuple):
        return [thaw(item) for item in value]
    return value


# A JSON-shaped mapping stored frozen and serialized back as plain dicts.
FrozenMapping = Annotated[dict, AfterValidator(freeze), PlainSerializer(thaw)]

# Security requirements: scheme name -> scopes.
FrozenScopes = Annotated[dict[str, list[str]], AfterValidator(freeze), PlainSerializer(thaw)]
