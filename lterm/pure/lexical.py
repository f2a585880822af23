"""Pure lambda calculus term model and capture-aware substitution.

The `pure` directory contains the untyped lambda calculus data model- nothing here knows about the demonstration
session or the command line. Formally, the terms built here are

```
<λ-term> ::= <variable>                 ; "variable"
                                        ; - free variables are plain names: x
                                        ; - bound variables carry the marker: *x
           | "λ" <variable> "." <λ-term>  ; "abstraction"
                                        ; - abstract always binds a marked parameter
           | <λ-term> "(" <λ-term> ")"  ; "application"
                                        ; - associating by left: a(b)(c) = ((a b) c)
```

Boundness is encoded by naming alone (*): a Variable is bound if and only if its name starts with `BOUND_MARKER` at
the moment it is inspected. There is no scope table, so two distant occurrences of `*x` are indistinguishable from
each other.

Terms are immutable. Every operation returns a new term, and subtrees that are not rewritten are shared between the
old and the new term.

------------------------------------------------------------------------------------------------------------------------

(*) The marker is part of the name and is rendered literally: `abstract("x", f(x))` renders as `λ*x.f(*x)`, never as
`λx.f(x)`.
"""

from abc import abstractmethod, ABC

from lterm.lang.error import SubstitutionError, TermException

BOUND_MARKER = "*"


def variable(name, free=True):
    """Returns canonical Variable for name: any marker on name is stripped, then a single marker is re-applied if
    free is False. Total on any string.
    """
    if isinstance(name, Variable):
        name = name.name
    if not isinstance(name, str):
        raise TermException("'{}' is not a variable name", repr(name))
    name = name.lstrip(BOUND_MARKER)
    return Variable(name if free else BOUND_MARKER + name)


def is_bound_variable(term):
    """Whether or not term is a Variable (or raw name) carrying the bound marker."""
    if isinstance(term, str):
        return term.startswith(BOUND_MARKER)
    return isinstance(term, Variable) and term.is_bound


def substitution(expr, replace, substitute):
    """Rewrites every occurrence of replace in expr to substitute. replace and substitute may be raw names."""
    replace = LambdaTerm.coerce(replace)
    if not isinstance(replace, Variable):
        raise TermException("can only substitute for a variable, got '{}'", replace.expr)
    return LambdaTerm.coerce(expr).sub(replace, LambdaTerm.coerce(substitute))


class LambdaTerm(ABC):
    """Represents a λ-term: variable, abstraction, or application. Holds its children in self.nodes, which is always
    a tuple (empty for Variables, two nodes otherwise: lambda calculus ASTs are binary).
    """
    kind = None

    def __init__(self, *nodes):
        object.__setattr__(self, "nodes", tuple(nodes))
        object.__setattr__(self, "_cls", type(self).__name__)

    def __setattr__(self, name, value):
        raise AttributeError(f"{self._cls} is immutable, cannot set '{name}'")

    def __delattr__(self, name):
        raise AttributeError(f"{self._cls} is immutable, cannot delete '{name}'")

    @staticmethod
    def coerce(term):
        """Returns term as a LambdaTerm: raw names become Variables (marker kept as-is), LambdaTerms pass through."""
        if isinstance(term, LambdaTerm):
            return term
        if isinstance(term, str):
            return Variable(term)
        raise TermException("'{}' is not a λ-term", repr(term))

    @abstractmethod
    def sub(self, replace, substitute):
        """Given Variable replace and LambdaTerm substitute, this method should return self with all occurrences of
        replace rewritten to substitute, stopping at any binder whose parameter is replace. Must not modify self:
        nodes on the rewritten path are rebuilt, and self is returned as-is if nothing changed.
        """

    @abstractmethod
    def to_string(self):
        """Canonical rendering of this term."""

    @property
    def expr(self):
        return self.to_string()

    def get(self, idxs):
        """Gets node at positions specified by idxs. idxs=[] will return self."""
        if not idxs:
            return self

        this, *others = idxs
        if not others:
            return self.nodes[this]
        return self.nodes[this].get(others)

    def display(self, indents=0):
        """Recursively displays LambdaTerm tree with readable format.

        Format:
        <LambdaTerm>(expr='<expr>', nodes=[
            <LambdaTerm>(expr='<expr>', nodes=[
                ...
                <LambdaTerm>(expr='<expr>')  # <-- if nodes is empty
            ])
        ])
        """
        result = f"{'    ' * indents}{self._cls}(expr='{self.expr}'"
        if self.nodes:
            result += ", nodes=["
            for node in self.nodes:
                result += "\n" + node.display(indents + 1) + ","
            result = result[:-1] + f"\n{'    ' * indents}]"
        return result + ")"

    def __eq__(self, other):
        if isinstance(other, str):
            other = Variable(other)
        return isinstance(other, type(self)) and self.expr == other.expr

    def __hash__(self):
        return hash((self._cls, self.expr))

    def __repr__(self):
        return f"{self._cls}('{self.expr}')"

    def __str__(self):
        return self.to_string()


class Variable(LambdaTerm):
    """Variable in lambda calculus: a name, bound if it carries BOUND_MARKER."""
    kind = "variable"

    def __init__(self, name):
        if not isinstance(name, str):
            raise TermException("'{}' is not a variable name", repr(name))
        super().__init__()
        object.__setattr__(self, "name", name)

    @property
    def is_bound(self):
        return self.name.startswith(BOUND_MARKER)

    def sub(self, replace, substitute):
        if self.name != replace.name:
            return self

        # free for a different free is a rename, not a binding
        renames_free = not replace.is_bound and isinstance(substitute, Variable) and not substitute.is_bound
        if renames_free and substitute.name != replace.name:
            raise SubstitutionError(replace, substitute)
        return substitute

    def to_string(self):
        return self.name

    def __eq__(self, other):
        if isinstance(other, str):
            return self.name == other
        return isinstance(other, Variable) and self.name == other.name

    def __hash__(self):
        return hash(self.name)


class Abstraction(LambdaTerm):
    """Abstraction: binder introducing parameter (a bound Variable) over body. Use term.abstract to build one from a
    free name; this constructor stores its arguments as given, but rejects an unmarked parameter.
    """
    kind = "abstraction"

    def __init__(self, parameter, body):
        super().__init__(LambdaTerm.coerce(parameter), LambdaTerm.coerce(body))
        if not isinstance(self.parameter, Variable):
            raise TermException("abstraction parameter '{}' is not a variable", self.parameter.expr)
        if not self.parameter.is_bound:
            raise TermException("abstraction parameter '{}' is not a bound variable", self.parameter.expr)

    @property
    def parameter(self):
        return self.nodes[0]

    @property
    def body(self):
        return self.nodes[1]

    def sub(self, replace, substitute):
        if self.parameter == replace:
            return self  # shadowed

        body = self.body.sub(replace, substitute)
        if body is self.body:
            return self
        return Abstraction(self.parameter, body)

    def to_string(self):
        return f"λ{self.parameter.to_string()}.{self.body.to_string()}"


class Application(LambdaTerm):
    """Application of function to argument."""
    kind = "application"

    def __init__(self, function, argument):
        super().__init__(LambdaTerm.coerce(function), LambdaTerm.coerce(argument))

    @property
    def function(self):
        return self.nodes[0]

    @property
    def argument(self):
        return self.nodes[1]

    def sub(self, replace, substitute):
        function, argument = (node.sub(replace, substitute) for node in self.nodes)
        if function is self.function and argument is self.argument:
            return self
        return Application(function, argument)

    def to_string(self):
        return f"{self.function.to_string()}({self.argument.to_string()})"
