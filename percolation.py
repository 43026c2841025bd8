import numbers

import numpy as np

from union_find import WeightedQuickUnionUF


class Percolation:
    """
    An n-by-n grid of sites, all blocked at first, opened one at a time.

    Two union-find structures are kept in step. The fullness structure
    only knows the virtual top node and answers isFull(); the percolation
    structure also has a virtual bottom node and answers percolates().
    Keeping the bottom node out of the fullness structure means a region
    that only touches the bottom row never looks full once the grid
    percolates elsewhere.
    """

    def __init__(self, n: int):
        if not isinstance(n, numbers.Integral) or n <= 0:
            raise ValueError(f"n must be a positive integer, got {n!r}")

        self.gridSize = int(n)
        self.gridSquare = self.gridSize * self.gridSize
        self.openSites = np.zeros((self.gridSize, self.gridSize), dtype=bool)
        self.openSite = 0

        self.virtualTop = self.gridSquare
        self.virtualBottom = self.gridSquare + 1

        self.wqfFull = WeightedQuickUnionUF(self.gridSquare + 1)
        self.wqfPercolation = WeightedQuickUnionUF(self.gridSquare + 2)

        # pre-wire the boundary rows to the virtual nodes
        for col in range(1, self.gridSize + 1):
            top = self.flattenGrid(1, col)
            bottom = self.flattenGrid(self.gridSize, col)
            self.wqfFull.union(self.virtualTop, top)
            self.wqfPercolation.union(self.virtualTop, top)
            self.wqfPercolation.union(self.virtualBottom, bottom)

    # open the site (row, col) if it's not open yet
    def open(self, row: int, col: int):
        self.validState(row, col)

        if self.openSites[row - 1, col - 1]:
            return

        self.openSites[row - 1, col - 1] = True
        self.openSite += 1

        flatIndex = self.flattenGrid(row, col)

        # up, right, down, left
        for nRow, nCol in ((row - 1, col), (row, col + 1), (row + 1, col), (row, col - 1)):
            if self.isOnGrid(nRow, nCol) and self.openSites[nRow - 1, nCol - 1]:
                neighbour = self.flattenGrid(nRow, nCol)
                self.wqfFull.union(flatIndex, neighbour)
                self.wqfPercolation.union(flatIndex, neighbour)

    def isOpen(self, row: int, col: int) -> bool:
        self.validState(row, col)
        return bool(self.openSites[row - 1, col - 1])

    def isFull(self, row: int, col: int) -> bool:
        """
        A site is full when it is open and joined to the top row through
        open sites.
        """
        if not self.isOpen(row, col):
            return False
        return self.wqfFull.connected(self.flattenGrid(row, col), self.virtualTop)

    def percolates(self) -> bool:
        # a lone cell is pre-wired to both virtual nodes even while blocked
        if self.gridSize == 1:
            return self.isOpen(1, 1)
        return self.wqfPercolation.connected(self.virtualTop, self.virtualBottom)

    def numberOfOpenSites(self) -> int:
        return self.openSite

    def validState(self, row: int, col: int):
        if not self.isOnGrid(row, col):
            raise ValueError(
                f"site ({row}, {col}) is outside the {self.gridSize}x{self.gridSize} grid"
            )

    def flattenGrid(self, row: int, col: int) -> int:
        return self.gridSize * (row - 1) + (col - 1)

    def isOnGrid(self, row: int, col: int) -> bool:
        return 1 <= row <= self.gridSize and 1 <= col <= self.gridSize
