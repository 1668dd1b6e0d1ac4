class BoardLayout:
    """
    Maps board cells to BDD variables.

    Cell (r, c) has row-major index i = r*D + c; its pre-state variable has
    id 2*i and its post-state variable id 2*i + 1. Variables are created in
    id order, so current/next variables of the same cell sit next to each
    other in the variable order (interleaved, like x_i / y_i for places).
    """

    def __init__(self, engine, dimension):
        self.engine = engine
        self.dimension = dimension
        self._pre = []
        self._post = []

        for i in range(dimension * dimension):
            self._pre.append(engine.var(2 * i))
            self._post.append(engine.var(2 * i + 1))

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.release()
        return False

    @property
    def cell_count(self):
        return self.dimension * self.dimension

    def cells(self):
        for r in range(self.dimension):
            for c in range(self.dimension):
                yield r, c

    def index(self, r, c):
        return r * self.dimension + c

    def pre_id(self, r, c):
        return 2 * self.index(r, c)

    def post_id(self, r, c):
        return 2 * self.index(r, c) + 1

    def pre(self, r, c):
        """Pre-state variable of (r, c). Borrowed: copy() it before consuming."""
        return self._pre[self.index(r, c)]

    def post(self, r, c):
        """Post-state variable of (r, c). Borrowed: copy() it before consuming."""
        return self._post[self.index(r, c)]

    def cell_of(self, var_id):
        """Return (row, col, is_post) for a variable id."""
        index, is_post = divmod(var_id, 2)
        r, c = divmod(index, self.dimension)
        return r, c, bool(is_post)

    def renaming(self):
        """Post-state id -> pre-state id, for every cell."""
        return {self.post_id(r, c): self.pre_id(r, c) for r, c in self.cells()}

    def pre_state_cube(self):
        """Conjunction of all pre-state variables (the set X to quantify)."""
        res = self.engine.true()
        for var in self._pre:
            res.and_with(var.copy())
        return res

    def configuration(self, live_cells):
        """Singleton state over pre variables: exactly `live_cells` are alive."""
        live_cells = set(live_cells)
        res = self.engine.true()
        for r, c in self.cells():
            if (r, c) in live_cells:
                res.and_with(self.pre(r, c).copy())
            else:
                res.and_with(self.pre(r, c).not_())
        return res

    def release(self):
        for var in self._pre + self._post:
            var.release()
        self._pre = []
        self._post = []
