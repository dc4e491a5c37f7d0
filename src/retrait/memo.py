"""Per-instance storage for built capability objects."""

import logging
import weakref
from typing import Any, Generic, TypeVar

logger = logging.getLogger(__name__)

CapabilityType = TypeVar("CapabilityType")

# Attribute under which a target with a writable __dict__ keeps its memo holder.
# Storing the holder on the target ties the entries' lifetime to the target even
# when a capability holds a strong reference back to it.
MEMO_ATTRIBUTE = "_retrait_memo"

MISSING: Any = object()


class _MemoHolder:
    """
    Memo tables stored on one target, keyed by the owning `InstanceMemo`.

    The holder remembers the identity of the object it was created for and is
    ignored when found on any other object. Copies, deep copies and pickles of
    the target receive an empty holder, and holders compare equal to each other
    so they do not disturb ``vars()``-based equality of their targets.
    """

    __slots__ = ("owner_id", "tables")

    def __init__(self, owner_id: int | None = None) -> None:
        self.owner_id = owner_id
        self.tables: weakref.WeakKeyDictionary[InstanceMemo[Any], Any] = weakref.WeakKeyDictionary()

    def __copy__(self) -> "_MemoHolder":
        return _MemoHolder()

    def __deepcopy__(self, memo: dict[int, Any]) -> "_MemoHolder":
        return _MemoHolder()

    def __reduce__(self) -> tuple[type["_MemoHolder"], tuple[()]]:
        return (_MemoHolder, ())

    def __eq__(self, other: object) -> bool:
        if isinstance(other, _MemoHolder):
            return True
        return NotImplemented

    def __hash__(self) -> int:
        return hash(_MemoHolder)

    def __repr__(self) -> str:
        return "<retrait memo>"


def _instance_dict(target: Any) -> dict[str, Any] | None:
    instance_dict = getattr(target, "__dict__", None)
    # Classes expose a read-only mappingproxy here.
    return instance_dict if isinstance(instance_dict, dict) else None


def _holder_for(instance_dict: dict[str, Any], target: Any) -> _MemoHolder | None:
    holder = instance_dict.get(MEMO_ATTRIBUTE)
    if isinstance(holder, _MemoHolder) and holder.owner_id == id(target):
        return holder
    return None


class InstanceMemo(Generic[CapabilityType]):
    """
    Memoizes one capability object per target instance for a single trait.

    Entries are keyed by object identity, never by equality. Targets with a
    writable ``__dict__`` carry their entries in a private holder, so the
    entries live exactly as long as the target. Other targets that support weak
    references (``__slots__`` classes listing ``__weakref__``, classes
    themselves) are kept in a table keyed by ``id()`` whose entries are dropped
    when the target is finalized; a capability holding a strong reference to
    such a target keeps it alive.

    Targets that support neither (most builtins, ``None``) cannot be memoized
    without owning them; `set` reports False for those and callers rebuild on
    every access.
    """

    def __init__(self) -> None:
        self._by_id: dict[int, CapabilityType] = {}

    def get(self, target: Any, default: Any = None) -> CapabilityType | Any:
        """Return the capability memoized for `target`, or `default`."""
        instance_dict = _instance_dict(target)
        if instance_dict is None:
            return self._by_id.get(id(target), default)
        holder = _holder_for(instance_dict, target)
        if holder is None:
            return default
        return holder.tables.get(self, default)

    def set(self, target: Any, capability: CapabilityType) -> bool:
        """Memoize `capability` for `target`. Return False if the target cannot hold it."""
        instance_dict = _instance_dict(target)
        if instance_dict is None:
            return self._set_by_id(target, capability)
        holder = _holder_for(instance_dict, target)
        if holder is None:
            # Replaces a holder copied over from another object.
            holder = _MemoHolder(id(target))
            instance_dict[MEMO_ATTRIBUTE] = holder
        holder.tables[self] = capability
        return True

    def _set_by_id(self, target: Any, capability: CapabilityType) -> bool:
        key = id(target)
        if key not in self._by_id:
            try:
                finalizer = weakref.finalize(target, self._by_id.pop, key, None)
            except TypeError:
                logger.debug("Cannot memoize capability for %s instance.", type(target).__qualname__)
                return False
            finalizer.atexit = False
        self._by_id[key] = capability
        return True

    def __contains__(self, target: Any) -> bool:
        """Return True if a capability is memoized for `target`."""
        return self.get(target, MISSING) is not MISSING
