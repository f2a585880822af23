"""Public construction surface of the term engine: apply, abstract, and to_string. Terms may be given as LambdaTerms
or as raw variable names, which are treated uniformly as Variables.
"""

from functools import reduce

from lterm.lang.error import ArityError
from lterm.pure.lexical import Abstraction, Application, LambdaTerm, substitution, variable


def apply(*terms):
    """Returns left-associated Application of terms: apply(a, b, c) is (a b) c, rendered a(b)(c)."""
    if len(terms) < 2:
        raise ArityError(terms)
    return reduce(Application, (LambdaTerm.coerce(term) for term in terms))


def abstract(name, body):
    """Binds free variable name in body. Every occurrence of name in body is rewritten to its bound form, except
    under a binder for the same name. If name does not occur, the binder is vacuous.
    """
    free = variable(name)
    parameter = variable(name, free=False)
    return Abstraction(parameter, substitution(body, free, parameter))


def to_string(term):
    """Canonical rendering of term (a raw name renders as itself)."""
    return LambdaTerm.coerce(term).to_string()
