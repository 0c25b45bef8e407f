"""Scalar triple exchanged between the codecs and PyYAML."""


class TaggedScalar:
    """Wrapper for scalar text carrying an extension tag.

    Attributes:
        tag: Full tag URI (e.g. ``tag:yaml.org,2002:python/regexp``)
        value: Scalar text
        style: PyYAML scalar style (None, '', "'", '"', '|' or '>')
    """

    __slots__ = ('tag', 'value', 'style')

    def __init__(self, tag, value, style=None):
        self.tag = tag
        self.value = value
        self.style = style

    def to_node(self, dumper):
        """Turn this scalar into a node through the dumper."""
        return dumper.represent_scalar(self.tag, self.value, style=self.style)

    def __eq__(self, other):
        if not isinstance(other, TaggedScalar):
            return NotImplemented
        return (self.tag, self.value, self.style) == \
            (other.tag, other.value, other.style)

    def __repr__(self):
        return f"TaggedScalar({self.tag!r}, {self.value!r}, style={self.style!r})"


__all__ = ['TaggedScalar']
