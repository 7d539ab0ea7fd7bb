__all__ = ('URIParserError',
           'URIParserInvalidSchemeError',
           'URIParserInvalidHostError',
           'URIParserInvalidPortError',
           'URIParserInvalidFragmentError',
           'URIParserTrailingDataError')


class URIParserError(Exception):
    """Raised when a URI cannot be parsed.

    Attributes:

      - component: name of the stage that failed ('scheme', 'host', ...)
      - position: offset into ``input`` where the failure was detected
      - expected: what the parser was looking for at ``position``
      - input: the text being parsed
    """

    def __init__(self, component, position, expected, input=None):
        self.component = component
        self.position = position
        self.expected = expected
        self.input = input
        super().__init__(self._format())

    def _format(self):
        msg = 'invalid {} at position {}: expected {}'.format(
            self.component, self.position, self.expected)
        if self.input is not None:
            found = self.input[self.position:self.position + 1]
            if found:
                msg += ', found {!r}'.format(found)
            else:
                msg += ', found end of input'
        return msg


class URIParserInvalidSchemeError(URIParserError):
    pass


class URIParserInvalidHostError(URIParserError):
    pass


class URIParserInvalidPortError(URIParserError):
    pass


class URIParserInvalidFragmentError(URIParserError):
    pass


class URIParserTrailingDataError(URIParserError):
    pass
