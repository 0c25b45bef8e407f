"""Function values (``!!python/function``).

The scalar text is the source of a single ``def`` statement or a single
``lambda`` expression::

    - !!python/function 'lambda a, b: a + b'
    - !!python/function |
      def greet(name):
          return 'hello ' + name

Loading never runs the text. The source is parsed and compiled, the code
object of the function is taken out of the compiled module, and a function
object is assembled around it. The module itself is never executed, so
neither the body nor anything else in the text runs until the caller
invokes the result.
"""

import ast
import builtins
import inspect
import textwrap
import types

from yaml_types.error import (
    ConstructionError,
    EmptyCallableBody,
    MalformedCallableSource,
    RepresenterError,
)
from yaml_types.nodes import TaggedScalar

TAG = 'tag:yaml.org,2002:python/function'
ALIAS = '!function'

SOURCE_ATTR = '_yaml_source'
FILENAME = '<yaml function>'
LAMBDA_NAME = '<lambda>'


def _literal(node):
    try:
        return ast.literal_eval(node)
    except (ValueError, TypeError, SyntaxError, MemoryError,
            RecursionError) as exc:
        raise MalformedCallableSource(
            "default value on line %d is not a literal" % node.lineno) from exc


def parse(source):
    """Check *source* and return ``(module, function_node)``.

    Only the syntax tree is inspected. The source must consist of exactly
    one undecorated ``def`` statement or one ``lambda`` expression, and
    default values must be literals.

    Raises:
        EmptyCallableBody: source is empty
        MalformedCallableSource: anything else is wrong with the source
    """
    if source is None or not source.strip():
        raise EmptyCallableBody(
            "expected function source, but found an empty scalar")
    try:
        module = ast.parse(textwrap.dedent(source), filename=FILENAME)
    except (SyntaxError, ValueError, MemoryError, RecursionError) as exc:
        raise MalformedCallableSource(
            "cannot parse function source: %s" % exc) from exc

    if len(module.body) != 1:
        raise MalformedCallableSource(
            "expected a single def or lambda, but found %d statements"
            % len(module.body))
    statement = module.body[0]
    if isinstance(statement, ast.FunctionDef):
        node = statement
        if node.decorator_list:
            raise MalformedCallableSource(
                "decorators are not allowed on function %r" % node.name)
        if getattr(node, 'type_params', None):
            raise MalformedCallableSource(
                "type parameters are not allowed on function %r" % node.name)
    elif isinstance(statement, ast.Expr) \
            and isinstance(statement.value, ast.Lambda):
        node = statement.value
    else:
        found = statement.value if isinstance(statement, ast.Expr) \
            else statement
        raise MalformedCallableSource(
            "expected a def or lambda, but found %s" % type(found).__name__)

    for default in node.args.defaults:
        _literal(default)
    for default in node.args.kw_defaults:
        if default is not None:
            _literal(default)
    return module, node


def _function_code(module, name):
    try:
        code = compile(module, FILENAME, 'exec', dont_inherit=True)
    except (SyntaxError, ValueError, MemoryError, RecursionError) as exc:
        raise MalformedCallableSource(
            "cannot compile function source: %s" % exc) from exc
    for const in code.co_consts:
        if isinstance(const, types.CodeType) and const.co_name == name:
            return const
    raise MalformedCallableSource("no code found for function %r" % name)


def resolve(data):
    return True


def construct(data):
    """Build a function object from its source without running it.

    The function gets a globals namespace of its own holding the builtins
    and, for a ``def``, its own name so that it can call itself.
    """
    module, node = parse(data)
    name = node.name if isinstance(node, ast.FunctionDef) else LAMBDA_NAME
    code = _function_code(module, name)

    args = node.args
    defaults = tuple(_literal(default) for default in args.defaults)
    kwdefaults = {
        arg.arg: _literal(default)
        for arg, default in zip(args.kwonlyargs, args.kw_defaults)
        if default is not None
    }

    namespace = {'__builtins__': builtins, '__name__': FILENAME}
    function = types.FunctionType(code, namespace, None, defaults or None)
    if kwdefaults:
        function.__kwdefaults__ = kwdefaults
    if name != LAMBDA_NAME:
        namespace[name] = function
    setattr(function, SOURCE_ATTR, data)
    return function


def _isolate(function, lines, first_line):
    """Cut the function's own ``def`` or ``lambda`` out of its source lines."""
    text = textwrap.dedent(''.join(lines))
    try:
        module = ast.parse(text)
    except SyntaxError as exc:
        raise RepresenterError(
            "cannot isolate the source of %r" % function) from exc

    code = function.__code__
    line = code.co_firstlineno - first_line + 1
    candidates = []
    for node in ast.walk(module):
        if code.co_name == LAMBDA_NAME:
            if isinstance(node, ast.Lambda) and node.lineno == line:
                candidates.append(node)
        elif isinstance(node, ast.FunctionDef) and node.name == code.co_name:
            start = node.decorator_list[0].lineno if node.decorator_list \
                else node.lineno
            if start == line:
                candidates.append(node)
    if len(candidates) != 1:
        raise RepresenterError(
            "cannot isolate the source of %r" % function)
    return ast.get_source_segment(text, candidates[0])


def source_of(function):
    """Return the source text a function is dumped with.

    Functions loaded from YAML keep the exact text they were loaded from.
    Other functions are looked up with ``inspect``.

    Raises:
        RepresenterError: the source cannot be found or cannot be loaded back
    """
    source = getattr(function, SOURCE_ATTR, None)
    if source is None:
        if function.__closure__:
            raise RepresenterError(
                "cannot represent closure %r" % function)
        try:
            lines, first_line = inspect.getsourcelines(function)
        except (OSError, TypeError) as exc:
            raise RepresenterError(
                "cannot find the source of %r" % function) from exc
        source = _isolate(function, lines, first_line)
    try:
        parse(source)
    except ConstructionError as exc:
        raise RepresenterError(
            "function %r cannot be loaded back: %s"
            % (function, exc.problem)) from exc
    return source


def represent(data, width=80):
    """Represent a function by its source text.

    Args:
        data: Plain Python function
        width: Line width past which the folded style is used

    Returns:
        TaggedScalar for the function
    """
    source = source_of(data)
    style = None
    if '\n' in source or len(source) > width:
        style = '>'
    return TaggedScalar(TAG, source, style=style)
