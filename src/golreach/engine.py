import logging
import threading

from dd.bdd import BDD

from golreach.errors import FormulaReleasedError

log = logging.getLogger(__name__)


class Engine:
    """
    One dd.bdd.BDD manager for the whole run.

    'dd.bdd' hands out plain integers as nodes, so Python operators (&, |, ~)
    would corrupt them. Every combinator goes through bdd.apply(), and every
    node given to the caller is wrapped in a Formula that holds exactly one
    reference (incref) until Formula.release() drops it (decref).

    The manager is not thread safe, so all access is serialized on one
    re-entrant lock. Use the engine as a context manager so it is torn down
    when the run ends.
    """

    def __init__(self):
        self.bdd = BDD()
        self._lock = threading.RLock()
        self._live = 0

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.done()
        return False

    @staticmethod
    def var_name(var_id):
        return f"v{var_id}"

    # --- constructors ---

    def var(self, var_id):
        """Return a formula for variable `var_id`, declaring it on first use."""
        name = self.var_name(var_id)
        with self._lock:
            if name not in self.bdd.vars:
                self.bdd.add_var(name)
            return self._wrap(self.bdd.var(name))

    def true(self):
        with self._lock:
            return self._wrap(self.bdd.true)

    def false(self):
        with self._lock:
            return self._wrap(self.bdd.false)

    # --- bookkeeping ---

    def _wrap(self, node):
        with self._lock:
            self.bdd.incref(node)
            self._live += 1
        return Formula(self, node)

    def _drop(self, node):
        with self._lock:
            self.bdd.decref(node)
            self._live -= 1

    def _apply(self, op, u, v=None):
        with self._lock:
            return self.bdd.apply(op, u, v)

    @property
    def live_handles(self):
        return self._live

    def node_count(self):
        with self._lock:
            return len(self.bdd)

    def done(self):
        """Tear down: drop unreferenced nodes and report leaked handles."""
        with self._lock:
            if self._live:
                log.warning("engine closed with %d unreleased formula handle(s)", self._live)
            self.bdd.collect_garbage()
            log.debug("engine done, %d nodes left", len(self.bdd))


class Assignment:
    """One satisfying assignment, as returned by Formula.any_sat()."""

    def __init__(self, values):
        self._values = values

    def holds(self, var_id):
        # variables outside the support are don't-cares; False is a valid pick
        return bool(self._values.get(Engine.var_name(var_id), False))

    def __repr__(self):
        return f"Assignment({self._values!r})"


class Formula:
    """
    Owning handle to one BDD node.

    Non-mutating combinators (and_, or_, not_, biimp) return a new handle.
    Mutating ones (and_with, or_with) fold the result into this handle and
    consume (release) their argument. A handle must be released exactly once;
    the `with` statement does it on every exit path.
    """

    __slots__ = ("engine", "_node")

    def __init__(self, engine, node):
        self.engine = engine
        self._node = node

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.release()
        return False

    def __repr__(self):
        state = "released" if self._node is None else f"node={self._node}"
        return f"<Formula {state}>"

    @property
    def node(self):
        if self._node is None:
            raise FormulaReleasedError("formula handle used after release")
        return self._node

    @property
    def released(self):
        return self._node is None

    def release(self):
        node = self.node
        self._node = None
        self.engine._drop(node)

    def copy(self):
        """Return an additional owning handle to the same function."""
        return self.engine._wrap(self.node)

    def _same_engine(self, other):
        if other.engine is not self.engine:
            raise ValueError("formulas belong to different engines")
        return other.node

    # --- non-mutating ---

    def and_(self, other):
        return self.engine._wrap(self.engine._apply('and', self.node, self._same_engine(other)))

    def or_(self, other):
        return self.engine._wrap(self.engine._apply('or', self.node, self._same_engine(other)))

    def biimp(self, other):
        return self.engine._wrap(self.engine._apply('<=>', self.node, self._same_engine(other)))

    def not_(self):
        return self.engine._wrap(self.engine._apply('not', self.node))

    # --- mutating: result replaces self, argument is consumed ---

    def _fold(self, op, other):
        if other is self:
            raise ValueError("cannot fold a formula into itself, pass a copy()")
        engine = self.engine
        with engine._lock:
            result = engine._apply(op, self.node, self._same_engine(other))
            engine.bdd.incref(result)
            engine.bdd.decref(self._node)
            self._node = result
        other.release()
        return self

    def and_with(self, other):
        return self._fold('and', other)

    def or_with(self, other):
        return self._fold('or', other)

    # --- quantification / renaming ---

    def exist(self, cube):
        """Existentially quantify the variables of `cube` (a conjunction of variables)."""
        engine = self.engine
        with engine._lock:
            qvars = engine.bdd.support(self._same_engine(cube))
            return engine._wrap(engine.bdd.exist(qvars, self.node))

    def replace(self, renaming):
        """Rename variables given an explicit {var_id: var_id} mapping."""
        engine = self.engine
        names = {engine.var_name(src): engine.var_name(dst) for src, dst in renaming.items()}
        with engine._lock:
            return engine._wrap(engine.bdd.let(names, self.node))

    def restrict(self, values):
        """Cofactor by a partial {var_id: bool} assignment."""
        engine = self.engine
        names = {engine.var_name(var_id): bool(value) for var_id, value in values.items()}
        with engine._lock:
            return engine._wrap(engine.bdd.let(names, self.node))

    # --- queries ---

    def is_equivalent_to(self, other):
        # nodes are canonical inside one manager
        return self.node == self._same_engine(other)

    def is_true(self):
        return self.node == self.engine.bdd.true

    def is_false(self):
        return self.node == self.engine.bdd.false

    def implies(self, other):
        """True when every model of self is a model of other."""
        engine = self.engine
        with engine._lock:
            diff = engine.bdd.apply('diff', self.node, self._same_engine(other))
            return diff == engine.bdd.false

    def any_sat(self):
        with self.engine._lock:
            values = self.engine.bdd.pick(self.node)
        if values is None:
            raise ValueError("formula is unsatisfiable")
        return Assignment(values)

    def sat_count(self, nvars):
        """
        Number of satisfying assignments, regarding the formula as a function
        of `nvars` free variables (at least its support).
        """
        engine = self.engine
        with engine._lock:
            return engine.bdd.count(self.node, nvars=nvars)
