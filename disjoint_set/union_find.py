from __future__ import annotations
from typing import Dict, Generic, Hashable, Iterable, List, Optional, TypeVar
from typing_extensions import Self


T = TypeVar('T', bound=Hashable)


class UnionFind(Generic[T]):
    """
    Disjoint sets over hashable values, with path compression and union by size.

    Every registered value owns a slot: an index into `parent` and `size`.
    A slot is a root when it is its own parent. Unknown values never raise:
    `find` returns None, `union` does nothing and
    `are_in_the_same_component` returns False.
    """

    def __init__(self, values: Iterable[T] = ()) -> None:
        self.index: Dict[T, int] = {}
        self.parent: List[int] = []
        self.size: List[int] = []
        for value in values:
            self.add(value)

    def __deepcopy__(self, _) -> Self:
        new_object = UnionFind()
        new_object.index = dict(self.index)
        new_object.parent = list(self.parent)
        new_object.size = list(self.size)
        return new_object

    def add(self, value: T) -> None:
        # Re-adding a known value keeps its slot and component
        if value in self.index:
            return
        slot = len(self.parent)
        self.index[value] = slot
        self.parent.append(slot)
        self.size.append(1)

    def find(self, value: T) -> Optional[int]:
        slot = self.index.get(value)
        if slot is None:
            return None
        return self._find_root(slot)

    def _find_root(self, slot: int) -> int:
        root = slot
        while self.parent[root] != root:
            root = self.parent[root]
        while self.parent[slot] != root:
            self.parent[slot], slot = root, self.parent[slot]
        return root

    def union(self, value1: T, value2: T) -> None:
        root1 = self.find(value1)
        root2 = self.find(value2)
        if root1 is None or root2 is None or root1 == root2:
            return
        if self.size[root1] < self.size[root2]:
            root1, root2 = root2, root1

        self.parent[root2] = root1
        self.size[root1] += self.size[root2]

    def are_in_the_same_component(self, value1: T, value2: T) -> bool:
        root1 = self.find(value1)
        return root1 is not None and root1 == self.find(value2)
