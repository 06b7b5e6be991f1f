#! /usr/bin/env python
"""Basic parsing support for iCalendar value strings"""


class ParserError(ValueError):

    """Exception raised by :class:`BasicParser`

    production
        The name of the production being parsed

    parser
        The :class:`BasicParser` instance raising the error (optional)

    ParserError is a subclass of ValueError."""

    def __init__(self, production, parser=None):
        self.production = production
        if parser:
            #: the position of the parser when the error was raised
            self.pos = parser.pos
            #: up to 40 characters to the left of pos
            self.left = parser.src[max(0, self.pos - 40):self.pos]
            #: up to 40 characters to the right of pos
            self.right = parser.src[self.pos:self.pos + 40]
            if production:
                msg = "ParserError: expected %s at [%i]" % (production,
                                                            self.pos)
            else:
                msg = "ParserError: at [%i]" % self.pos
        else:
            self.pos = None
            self.left = None
            self.right = None
            if production:
                msg = "ParserError: expected %s" % production
            else:
                msg = "ParserError"
        ValueError.__init__(self, msg)


class ParserMixin(object):

    """A mix-in class for parsing

    Provides a conversion between look-ahead and non-look ahead style
    parsing methods.

    Derived classes must define parser_error, match_end, pos and
    setpos."""

    def require_production(self, result, production=None):
        """Returns *result* if not None or raises ParserError."""
        if result is None:
            self.parser_error(production)
        else:
            return result

    def parse_production(self, require_method, *args, **kwargs):
        """Executes the bound method *require_method*.

        If successful the result of the method is returned.  If any
        ValueError (including :class:`ParserError`) is raised, the
        exception is caught, the parser rewound and None is returned."""
        savepos = self.pos
        try:
            return require_method(*args, **kwargs)
        except ValueError:
            self.setpos(savepos)
            return None

    def require_end(self, production='end'):
        """Tests that the parser has consumed all the source"""
        if not self.match_end():
            self.parser_error(production)


class BasicParser(ParserMixin):

    """A base class for parsing character strings

    source
        A character string

    Methods are named according to the type of operation they perform.

        match\\_*
            Returns True or False depending on whether or not a syntax
            production is matched at the current location. The state
            of the parser is unchanged.

        parse\\_*
            Attempts to parse a syntax element returning an appropriate
            object as the result or None if the production is not
            present. The position of the parser is only changed if the
            element was parsed successfully.

        require\\_*
            Parses a syntax production, returning an appropriate object
            as the result.  If the production is not matched a
            :class:`ParserError` is raised."""

    digits = "0123456789"

    def __init__(self, source):
        self.src = source       #: the string being parsed
        self.pos = -1           #: the position of the current character
        self.the_char = None
        """The current character or None if the parser is positioned
        outside the src string."""
        self.last_error = None
        self.next_char()

    def setpos(self, new_pos):
        """Sets the position of the parser to *new_pos*"""
        self.pos = new_pos - 1
        self.next_char()

    def next_char(self):
        """Points the parser at the next character."""
        self.pos += 1
        if self.pos >= 0 and self.pos < len(self.src):
            self.the_char = self.src[self.pos]
        else:
            self.the_char = None

    def parser_error(self, production=None):
        """Raises an error encountered by the parser

        If production is None then the previous error is re-raised. If
        multiple errors have been raised previously the one with the
        most advanced parser position is used.

        The position of the parser is always set to the position of the
        error raised."""
        if production:
            e = ParserError(production, self)
        elif self.last_error is not None and self.pos <= self.last_error.pos:
            e = self.last_error
        else:
            e = ParserError('', self)
        if self.last_error is None or e.pos > self.last_error.pos:
            self.last_error = e
        if e.pos != self.pos:
            self.setpos(e.pos)
        raise e

    def match_end(self):
        """True if all of :attr:`src` has been parsed"""
        return self.the_char is None

    def match(self, match_string):
        """Returns true if *match_string* is at the current position"""
        if self.the_char is None:
            return False
        else:
            return self.src[self.pos:self.pos +
                            len(match_string)] == match_string

    def parse(self, match_string):
        """Parses *match_string*

        Returns *match_string* or None if it cannot be parsed."""
        if self.match(match_string):
            self.setpos(self.pos + len(match_string))
            return match_string
        else:
            return None

    def require(self, match_string, production=None):
        """Parses and requires *match_string*"""
        if not self.parse(match_string):
            if production is None:
                production = match_string
            self.parser_error(production)
        else:
            return match_string

    def match_one(self, match_chars):
        """Returns true if one of *match_chars* is at the current
        position."""
        if self.the_char is None:
            return False
        else:
            return self.the_char in match_chars

    def parse_one(self, match_chars):
        """Parses one of *match_chars*.

        Returns the character or None if no match is found."""
        if self.match_one(match_chars):
            result = self.the_char
            self.next_char()
            return result
        else:
            return None

    def match_digit(self):
        """Returns true if the current character is an ASCII digit"""
        return self.match_one(self.digits)

    def parse_digit(self):
        """Parses a digit character, returning None if there isn't
        one."""
        return self.parse_one(self.digits)

    def parse_digits(self, min, max=None):
        """Parses a string of digits

        min
            The minimum number of digits to parse.  If min=0 an empty
            string may be returned.

        max (default None)
            The maximum number of digits to parse, or None there is no
            maximum.

        Returns the string of digits or None if no digits can be
        parsed."""
        if min < 0 or (max is not None and min > max):
            raise ValueError("min must be > 0")
        savepos = self.pos
        result = []
        while max is None or len(result) < max:
            d = self.parse_digit()
            if d is None:
                break
            else:
                result.append(d)
        if len(result) < min:
            self.setpos(savepos)
            return None
        return ''.join(result)

    def parse_integer(self, min=None, max=None, max_digits=None):
        """Parses an integer

        min (optional, defaults to None)
            A lower bound on the acceptable integer value

        max (optional, defaults to None)
            An upper bound on the acceptable integer value

        max_digits (optional, defaults to None)
            The limit on the number of digits, i.e., the field width.

        If a suitable integer can't be parsed then None is returned."""
        if min is None:
            min = 0
        if min < 0 or (max is not None and max < min):
            raise ValueError("0 <= min <= max required")
        savepos = self.pos
        d = self.parse_digits(1, max_digits)
        if d is None:
            return None
        else:
            d = int(d)
            if d < min or (max is not None and d > max):
                self.setpos(savepos)
                return None
            return d

    def require_fixed_integer(self, ndigits, min=None, max=None,
                              production="digits"):
        """Parses exactly *ndigits* digits, returning the integer value"""
        savepos = self.pos
        d = self.parse_digits(ndigits, ndigits)
        if d is None:
            self.parser_error(production)
        d = int(d)
        if (min is not None and d < min) or (max is not None and d > max):
            self.setpos(savepos)
            self.parser_error(production)
        return d


def split_list(value, sep=','):
    """Splits a multi-valued property value into its parts

    value
        The (unfolded) value part of a content line.

    Separators escaped with a backslash do not split the value, the
    escaping backslash is removed.  White space around each item is
    discarded.  An empty (or blank) value is an empty list, not a list
    containing a single empty string."""
    if not value or not value.strip():
        return []
    result = []
    item = []
    escape = False
    for c in value:
        if escape:
            if c != sep:
                item.append('\\')
            item.append(c)
            escape = False
        elif c == '\\':
            escape = True
        elif c == sep:
            result.append(''.join(item).strip())
            item = []
        else:
            item.append(c)
    if escape:
        item.append('\\')
    result.append(''.join(item).strip())
    return result


def join_list(values, format, sep=','):
    """Joins a list of values into a multi-valued property value

    values
        An iterable of arbitrary objects

    format
        A callable that takes a single item from values and returns its
        string representation."""
    return sep.join(format(v) for v in values)
