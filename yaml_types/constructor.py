"""Constructor side of the extension kinds.

Provides ``construct_extension``, the PyYAML constructor installed for every
extension tag, and a ``SafeConstructor`` whose mappings store their keys
through the structural key adapter.
"""

import logging

import yaml.constructor
from yaml.constructor import ConstructorError
from yaml.nodes import MappingNode, ScalarNode

from yaml_types.error import ConstructionError, TagNotApplicable
from yaml_types.keys import materialize

logger = logging.getLogger(__name__)


def construct_extension(loader, typedef, node):
    """Construct the value of a node tagged with one of the extension tags.

    Errors raised by the codec get the node's position attached before they
    propagate, aborting the load.
    """
    context = "while constructing a %s value" % typedef.kind
    if not isinstance(node, ScalarNode):
        raise TagNotApplicable(
            "expected a scalar node, but found %s" % node.id,
            node.start_mark, context, node.start_mark)
    data = loader.construct_scalar(node)
    try:
        value = typedef.construct(data)
    except ConstructionError as exc:
        exc.attach(context, node.start_mark)
        raise
    if node.start_mark is not None:
        logger.debug("constructed %s at line %d", typedef.kind,
                     node.start_mark.line + 1)
    return value


class SafeConstructor(yaml.constructor.SafeConstructor):
    """PyYAML safe constructor with structural mapping keys.

    Keys are constructed completely (nested sequences included) and then
    stored under the value returned by ``yaml_types.keys.materialize``, so
    collections can be keys and no key behaviour is ever invoked.
    """

    yaml_constructors = yaml.constructor.SafeConstructor.yaml_constructors.copy()
    yaml_multi_constructors = \
        yaml.constructor.SafeConstructor.yaml_multi_constructors.copy()

    def construct_mapping(self, node, deep=False):
        """Construct a mapping from a node."""
        if not isinstance(node, MappingNode):
            raise ConstructorError(
                None, None,
                "expected a mapping node, but found %s" % node.id,
                node.start_mark,
            )
        self.flatten_mapping(node)
        mapping = {}
        for key_node, value_node in node.value:
            key = materialize(self.construct_object(key_node, deep=True))
            value = self.construct_object(value_node, deep=deep)
            mapping[key] = value
        return mapping
