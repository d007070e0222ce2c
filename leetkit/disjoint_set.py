"""A disjoint-set (union-find) structure with union by height."""

from __future__ import annotations


class SetNotExistsError(LookupError):
    """Raised when an index belongs to no set."""

    def __init__(self, index: int) -> None:
        super().__init__(f"set not exists: {index}")
        self.index = index


class AlreadyInOneSetError(ValueError):
    """Raised when a union is asked for two indices already in one set."""

    def __init__(self, set_id: int) -> None:
        super().__init__("already in one set")
        self.set_id = set_id


class DisjointSet:
    """Disjoint sets of integer indices, tracking each set's members."""

    def __init__(self) -> None:
        self._parents: dict[int, int] = {}
        self._height: dict[int, int] = {}
        self._sets: dict[int, list[int]] = {}

    def find_set(self, index: int) -> int:
        """Return the id (root) of the set holding index."""
        if index not in self._parents:
            raise SetNotExistsError(index)
        while self._parents[index] != index:
            index = self._parents[index]
        return index

    def join_set(self, index: int, related_index: int) -> int:
        """Put index into the set of related_index, creating sets as needed.

        Returns the id of the resulting set.
        """
        try:
            related_set = self.find_set(related_index)
        except SetNotExistsError:
            self._parents[related_index] = related_index
            self._height[related_index] = 1
            self._sets[related_index] = [related_index]
            related_set = related_index

        if index in self._parents:
            try:
                return self.union(index, related_index)
            except AlreadyInOneSetError as exc:
                return exc.set_id

        self._parents[index] = related_set
        self._sets[related_set].append(index)
        if self._height[related_set] == 1:
            self._height[related_set] += 1
        return related_set

    def union(self, index: int, other_index: int) -> int:
        """Merge the sets of two indices and return the surviving set id."""
        root1 = self.find_set(index)
        root2 = self.find_set(other_index)
        if root1 == root2:
            raise AlreadyInOneSetError(root2)

        if self._height.get(root1, 0) > self._height.get(root2, 0):
            root1, root2 = root2, root1

        self._parents[root1] = root2
        if self._height.get(root1, 0) == self._height.get(root2, 0):
            self._height[root2] = self._height.get(root2, 0) + 1
        self._height.pop(root1, None)

        self._sets.setdefault(root2, []).extend(self._sets.pop(root1, []))
        return root2

    def set_ids(self) -> list[int]:
        """Return the ids of all sets."""
        return list(self._sets)

    def members(self, set_id: int) -> list[int]:
        """Return the members of a set, or an empty list if there is no such set."""
        return list(self._sets.get(set_id, ()))

    def sets(self) -> dict[int, list[int]]:
        """Return a mapping of set id to members."""
        return {set_id: list(members) for set_id, members in self._sets.items()}