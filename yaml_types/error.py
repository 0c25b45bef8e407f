"""Error classes for the extended YAML value kinds.

Every construction error is a PyYAML ``ConstructorError`` (and therefore a
``MarkedYAMLError``), so callers that already catch ``yaml.YAMLError`` see
these too. Codecs raise them with a problem description only; the loader
fills in the context and the position of the offending node.
"""

from yaml.constructor import ConstructorError
from yaml.representer import RepresenterError


class ConstructionError(ConstructorError):
    """Base class for errors raised while constructing an extension value.

    Attributes:
        context: Description of the construction context
        context_mark: Mark of the node being constructed
        problem: Description of the problem
        problem_mark: Mark pointing to the problem
    """

    def __init__(self, problem, problem_mark=None, context=None,
                 context_mark=None):
        super().__init__(context, context_mark, problem, problem_mark)

    def attach(self, context, mark):
        """Record where the error happened, unless already known."""
        if self.context is None:
            self.context = context
        if self.context_mark is None:
            self.context_mark = mark
        if self.problem_mark is None:
            self.problem_mark = mark
        return self


class TagNotApplicable(ConstructionError):
    """An extension tag was put on a node it cannot describe."""


class UnterminatedPattern(ConstructionError):
    """A regexp scalar has no unescaped closing ``/``."""


class InvalidFlag(ConstructionError):
    """A regexp scalar carries an unknown, repeated or incompatible flag."""


class InvalidPattern(ConstructionError):
    """A regexp body was rejected by the ``re`` compiler."""


class EmptyCallableBody(ConstructionError):
    """A function tag was given no source text."""


class MalformedCallableSource(ConstructionError):
    """Function source text is not a single plain ``def`` or ``lambda``."""


__all__ = [
    'ConstructionError',
    'TagNotApplicable',
    'UnterminatedPattern',
    'InvalidFlag',
    'InvalidPattern',
    'EmptyCallableBody',
    'MalformedCallableSource',
    'RepresenterError',
]
