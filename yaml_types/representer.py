"""Representer side of the extension kinds."""

import yaml.representer

from yaml_types.absent import Absent


def represent_extension(dumper, typedef, data):
    """Represent a live value as its tagged scalar node.

    The dumper's line width (``best_width``) is passed to the codec so that
    it can pick the folded style for long text.
    """
    width = getattr(dumper, 'best_width', 80)
    return typedef.represent(data, width=width).to_node(dumper)


class SafeRepresenter(yaml.representer.SafeRepresenter):
    """PyYAML safe representer that never anchors ``Absent``."""

    yaml_representers = yaml.representer.SafeRepresenter.yaml_representers.copy()
    yaml_multi_representers = \
        yaml.representer.SafeRepresenter.yaml_multi_representers.copy()

    def ignore_aliases(self, data):
        if data is Absent:
            return True
        return super().ignore_aliases(data)
