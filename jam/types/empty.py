from __future__ import annotations


class EmptyType:
    __slots__ = ()

    def __repr__(self): return "()"
    def __bool__(self): return False

    # Empty is equal only to Empty
    def __eq__(self, other):
        return isinstance(other, EmptyType)

    def __hash__(self):
        return 0

    def __iter__(self):
        return iter(())


Empty = EmptyType()
