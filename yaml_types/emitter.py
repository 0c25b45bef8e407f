"""Emitter with a lossless folded style.

PyYAML's folded writer may wrap any line at a single space once the line
is past the best width. In a folded block scalar a line break is only
folded back into a space between two lines that do not start with a space;
a wrapped more-indented line therefore comes back with a newline where the
space was. This emitter never wraps more-indented lines, so folded text
always loads back byte for byte.

It also lets an empty scalar with an explicit tag be written as the bare
tag (``- !!python/absent``) when the plain style is requested in block
context. Inside flow collections it is written as an empty quoted scalar.
"""

import yaml.emitter

LINE_BREAKS = '\n\x85\u2028\u2029'


class Emitter(yaml.emitter.Emitter):

    def choose_scalar_style(self):
        if self.event.style == '' and not self.event.value \
                and not self.event.implicit[0] and not self.canonical \
                and not self.flow_level:
            if self.analysis is None:
                self.analysis = self.analyze_scalar(self.event.value)
            return ''
        return super().choose_scalar_style()

    def write_folded(self, text):
        hints = self.determine_block_hints(text)
        self.write_indicator('>' + hints, True)
        if hints[-1:] == '+':
            self.open_ended = True
        self.write_line_break()
        leading_space = True
        spaces = False
        breaks = True
        start = end = 0
        while end <= len(text):
            ch = None
            if end < len(text):
                ch = text[end]
            if breaks:
                if ch is None or ch not in LINE_BREAKS:
                    if not leading_space and ch is not None and ch != ' ' \
                            and text[start] == '\n':
                        self.write_line_break()
                    leading_space = (ch == ' ')
                    for br in text[start:end]:
                        if br == '\n':
                            self.write_line_break()
                        else:
                            self.write_line_break(br)
                    if ch is not None:
                        self.write_indent()
                    start = end
            elif spaces:
                if ch != ' ':
                    # more-indented lines keep their spaces
                    if start + 1 == end and self.column > self.best_width \
                            and not leading_space:
                        self.write_indent()
                    else:
                        self._write_data(text[start:end])
                    start = end
            else:
                if ch is None or ch in ' ' + LINE_BREAKS:
                    self._write_data(text[start:end])
                    if ch is None:
                        self.write_line_break()
                    start = end
            if ch is not None:
                breaks = (ch in LINE_BREAKS)
                spaces = (ch == ' ')
            end += 1

    def _write_data(self, data):
        self.column += len(data)
        if self.encoding:
            data = data.encode(self.encoding)
        self.stream.write(data)
