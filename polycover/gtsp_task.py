"""A generalized travelling salesman problem instance."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Task:
    """A GTSP task: a cost matrix ``m`` and clusters of node indices."""

    m: list[list[int]] = field(default_factory=list)
    clusters: list[list[int]] = field(default_factory=list)

    def is_square(self) -> bool:
        """Return whether every row has as many entries as there are rows."""
        return all(len(row) == len(self.m) for row in self.m)

    def is_symmetric(self) -> bool:
        """Return whether the matrix is square and equal to its transpose."""
        if not self.is_square():
            return False
        return all(
            value == self.m[j][i]
            for i, row in enumerate(self.m)
            for j, value in enumerate(row)
        )