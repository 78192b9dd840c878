# -----------------------------------------------------------------------------
# Union-Find (disjoint set union)
# Purpose: Cycle detection for Kruskal. Elements are dense indices 0..n-1;
# callers map node ids to indices once up front.
# -----------------------------------------------------------------------------

from __future__ import annotations
from typing import Dict, List


class UnionFind:
    def __init__(self, n: int) -> None:
        self.parent = list(range(n))
        self.rank = [0] * n

    def find(self, x: int) -> int:
        # Path compression: point every visited element straight at the root
        if self.parent[x] != x:
            self.parent[x] = self.find(self.parent[x])
        return self.parent[x]

    def union(self, x: int, y: int) -> bool:
        """Merge by rank; on equal rank x's root wins. False if already joined."""
        rx, ry = self.find(x), self.find(y)
        if rx == ry:
            return False
        if self.rank[rx] < self.rank[ry]:
            self.parent[rx] = ry
        elif self.rank[rx] > self.rank[ry]:
            self.parent[ry] = rx
        else:
            self.parent[ry] = rx
            self.rank[rx] += 1
        return True

    def connected(self, x: int, y: int) -> bool:
        return self.find(x) == self.find(y)

    def groups(self) -> Dict[int, List[int]]:
        # root -> members, roots ascending, members ascending
        out: Dict[int, List[int]] = {}
        for i in range(len(self.parent)):
            out.setdefault(self.find(i), []).append(i)
        return dict(sorted(out.items()))
