"""Scanner that ends tags at flow indicators.

PyYAML's scanner reads ``,[]{}`` as part of a tag, so ``[!!python/absent]``
scans as the tag ``python/absent]`` and the sequence is never closed. In
YAML 1.2 a tag inside a flow collection ends at a flow indicator; this
scanner follows that rule. Verbatim tags (``!<...>``) are read as before.
"""

import yaml.scanner
from yaml.scanner import ScannerError
from yaml.tokens import TagToken

BLANKS = '\0 \r\n\x85\u2028\u2029'
FLOW_INDICATORS = ',[]{}'


class Scanner(yaml.scanner.Scanner):

    def _tag_end(self):
        if self.flow_level:
            return BLANKS + FLOW_INDICATORS
        return BLANKS

    def scan_tag(self):
        start_mark = self.get_mark()
        ch = self.peek(1)
        end = self._tag_end()
        if ch == '<':
            handle = None
            self.forward(2)
            suffix = self.scan_tag_uri('tag', start_mark, verbatim=True)
            if self.peek() != '>':
                raise ScannerError("while parsing a tag", start_mark,
                                   "expected '>', but found %r" % self.peek(),
                                   self.get_mark())
            self.forward()
        elif ch == '\t' or ch in end:
            handle = None
            suffix = '!'
            self.forward()
        else:
            length = 1
            use_handle = False
            while ch not in end:
                if ch == '!':
                    use_handle = True
                    break
                length += 1
                ch = self.peek(length)
            if use_handle:
                handle = self.scan_tag_handle('tag', start_mark)
            else:
                handle = '!'
                self.forward()
            suffix = self.scan_tag_uri('tag', start_mark)
        ch = self.peek()
        if ch not in end:
            raise ScannerError("while scanning a tag", start_mark,
                               "expected ' ', but found %r" % ch,
                               self.get_mark())
        return TagToken((handle, suffix), start_mark, self.get_mark())

    def scan_tag_uri(self, name, start_mark, verbatim=False):
        if verbatim or not self.flow_level:
            return super().scan_tag_uri(name, start_mark)
        chunks = []
        length = 0
        ch = self.peek(length)
        while '0' <= ch <= '9' or 'A' <= ch <= 'Z' or 'a' <= ch <= 'z' \
                or ch in '-;/?:@&=+$_.!~*\'()%':
            if ch == '%':
                chunks.append(self.prefix(length))
                self.forward(length)
                length = 0
                chunks.append(self.scan_uri_escapes(name, start_mark))
            else:
                length += 1
            ch = self.peek(length)
        if length:
            chunks.append(self.prefix(length))
            self.forward(length)
        if not chunks:
            raise ScannerError("while parsing a %s" % name, start_mark,
                               "expected URI, but found %r" % ch,
                               self.get_mark())
        return ''.join(chunks)
