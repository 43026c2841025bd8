class WeightedQuickUnionUF:
    """
    Weighted quick-union (union-by-size) with full path compression
    over the integer sites 0 through n-1.
    """

    def __init__(self, n):
        """
        Creates n singleton components.

        :param n: The number of sites, must be positive.
        """
        if n <= 0:
            raise ValueError(f"number of sites must be > 0, got {n}")

        # parent[i] == i marks a root
        self.parent = list(range(n))

        # only meaningful at roots
        self.size = [1] * n

        self.count = n

    def __len__(self):
        return len(self.parent)

    def get_count(self):
        """
        Returns the number of disjoint components.
        """
        return self.count

    def _validate(self, p):
        n = len(self.parent)
        if p < 0 or p >= n:
            raise IndexError(f"index {p} is not between 0 and {n-1}")

    def find(self, p):
        """
        Returns the root of the component containing site 'p', pointing
        every site visited on the way directly at that root.
        """
        self._validate(p)

        root = p
        while root != self.parent[root]:
            root = self.parent[root]

        while p != root:
            next_p = self.parent[p]
            self.parent[p] = root
            p = next_p

        return root

    def connected(self, p, q):
        return self.find(p) == self.find(q)

    def union(self, p, q):
        """
        Merges the components of 'p' and 'q'. The smaller tree goes under
        the larger one; on equal sizes the root of 'q' goes under the root of 'p'.
        """
        self._validate(p)
        self._validate(q)

        rootP = self.find(p)
        rootQ = self.find(q)

        if rootP == rootQ:
            return

        if self.size[rootP] < self.size[rootQ]:
            rootP, rootQ = rootQ, rootP

        self.parent[rootQ] = rootP
        self.size[rootP] += self.size[rootQ]
        self.count -= 1
