"""
Parsing of the textual forms of ranges, range sets and range maps, using an arpeggio PEG grammar.

>>> print(parse_range("[1,5)", int))
[1,4]
>>> print(parse_range("-5-10"))
[-5,10]
>>> print(parse_range("a<..c"))
(a,c]
"""

#  ++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++  #
#  This file is part of rangekit (interval algebra over ordered domains in Python)               #
#  Copyright © 2020 The rangekit authors.                                                        #
#                                                                                                #
#  This program is free software: you can redistribute it and/or modify it under the terms of    #
#  the GNU General Public License as published by the Free Software Foundation, either version   #
#  3 of the License, or (at your option) any later version.                                      #
#                                                                                                #
#  This program is distributed in the hope that it will be useful, but WITHOUT ANY WARRANTY;     #
#  without even the implied warranty of MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.     #
#  See the GNU General Public License for more details.                                          #
#                                                                                                #
#  You should have received a copy of the GNU General Public License along with this program.    #
#  If not, see <http://www.gnu.org/licenses/>.                                                   #
#  ++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++  #

from arpeggio.cleanpeg import ParserPEG
from arpeggio import visit_parse_tree, PTNodeVisitor, NoMatch
from collections import namedtuple
from .boundaries import BoundKind, kinds_from_mode
from .range import Range
from .settings import formatting_settings


class RangeFormatError(ValueError):
    """Raised when text cannot be parsed as a range, range set or range map."""

    def __init__(self, text, reason=None):
        self.text = text
        message = "Invalid range format: {!r}".format(text)
        super().__init__(message if reason is None else "{} ({})".format(message, reason))


grammar = r"""
number = r'[+-]?(inf|(\d+(\.\d+)?|\.\d+)([eE][+-]?\d+)?)(?![^\s\[\](){}<>=,.+\-*:\'"])'
quoted = r'\'([^\']|\'\')*\'|"([^"]|"")*"'
word = r'[^\s\[\](){}<>=,.+\-*:\'"]+'
value = number / quoted / word

empty = r'\{\s*\}'
universal = r'\*'
left_bracket = r'[\[(]'
right_bracket = r'[\])]'
comparator = r'>=|<=|>|<'
separator = r'<\.\.<|<\.\.|\.\.<|\.\.\.|\.\.|-'
sign = r'[+-]'

bracketed = left_bracket value "," value right_bracket
one_sided = comparator value
separated = value separator value
suffixed = value sign

range_body = empty / universal / bracketed / one_sided / separated / suffixed / value
range = range_body EOF

set_member = universal / bracketed / one_sided / separated / suffixed / value
range_set = "{" (set_member ("," set_member)*)? "}" EOF

map_entry = set_member ":" value
range_map = "{" (map_entry ("," map_entry)*)? "}" EOF
"""

# value tokens keep their kind (number, quoted or word) until a value type is applied to them
_Value = namedtuple("_Value", "kind text")
# any other token that affects the meaning of a range
_Mark = namedtuple("_Mark", "kind text")
# a parsed range, with _Value tokens (or None) in place of its values
_Shape = namedtuple("_Shape", "min max left right")
_Entry = namedtuple("_Entry", "key value")

_separator_kinds = {
    "-": (BoundKind.closed, BoundKind.closed),
    "..": (BoundKind.closed, BoundKind.closed),
    "...": (BoundKind.closed, BoundKind.closed),
    "..<": (BoundKind.closed, BoundKind.open),
    "<..": (BoundKind.open, BoundKind.closed),
    "<..<": (BoundKind.open, BoundKind.open),
}


def _shape_of(item):
    if isinstance(item, _Value):
        return _Shape(item, item, BoundKind.closed, BoundKind.closed)
    return item


class RangeVisitor(PTNodeVisitor):

    def visit_number(self, node, children):
        return _Value("number", str(node))

    def visit_quoted(self, node, children):
        text = str(node)
        # a doubled quote character stands for one
        return _Value("quoted", text[1:-1].replace(text[0] * 2, text[0]))

    def visit_word(self, node, children):
        return _Value("word", str(node))

    def visit_value(self, node, children):
        return children[0]

    def visit_left_bracket(self, node, children):
        return _Mark("left_bracket", str(node))

    def visit_right_bracket(self, node, children):
        return _Mark("right_bracket", str(node))

    def visit_comparator(self, node, children):
        return _Mark("comparator", str(node))

    def visit_separator(self, node, children):
        return _Mark("separator", str(node))

    def visit_sign(self, node, children):
        return _Mark("sign", str(node))

    def visit_empty(self, node, children):
        return _Shape(None, None, BoundKind.empty, BoundKind.empty)

    def visit_universal(self, node, children):
        return _Shape(None, None, BoundKind.unbound, BoundKind.unbound)

    def visit_bracketed(self, node, children):
        left_bracket, min_value, max_value, right_bracket = (c for c in children if isinstance(c, (_Value, _Mark)))
        return _Shape(min_value, max_value,
                      BoundKind.closed if left_bracket.text == "[" else BoundKind.open,
                      BoundKind.closed if right_bracket.text == "]" else BoundKind.open)

    def visit_one_sided(self, node, children):
        comparator, value = (c for c in children if isinstance(c, (_Value, _Mark)))
        return _Shape(value, value, *kinds_from_mode(comparator.text))

    def visit_separated(self, node, children):
        min_value, separator, max_value = (c for c in children if isinstance(c, (_Value, _Mark)))
        return _Shape(min_value, max_value, *_separator_kinds[separator.text])

    def visit_suffixed(self, node, children):
        value, sign = (c for c in children if isinstance(c, (_Value, _Mark)))
        return _Shape(value, value, *kinds_from_mode(">=" if sign.text == "+" else "<="))

    def visit_range_body(self, node, children):
        return _shape_of(children[0])

    def visit_set_member(self, node, children):
        return _shape_of(children[0])

    def visit_range(self, node, children):
        return next(_shape_of(c) for c in children if isinstance(c, (_Shape, _Value)))

    def visit_range_set(self, node, children):
        return [_shape_of(c) for c in children if isinstance(c, (_Shape, _Value))]

    def visit_map_entry(self, node, children):
        key, value = (c for c in children if isinstance(c, (_Shape, _Value)))
        return _Entry(_shape_of(key), value)

    def visit_range_map(self, node, children):
        return [c for c in children if isinstance(c, _Entry)]


_range_parser = ParserPEG(grammar, "range")
_range_set_parser = ParserPEG(grammar, "range_set")
_range_map_parser = ParserPEG(grammar, "range_map")


def _value_converter(value_type):
    if value_type is not None:
        return lambda token: value_type(token.text)

    def convert(token):
        if token.kind != "number":
            return token.text
        if formatting_settings.parse_numbers_as == "auto":
            try:
                return int(token.text)
            except ValueError:
                pass
        return float(token.text)

    return convert


def _build_range(shape: _Shape, convert) -> Range:
    return Range(None if shape.min is None else convert(shape.min),
                 None if shape.max is None else convert(shape.max),
                 shape.left, shape.right)


def _parse(parser, text):
    try:
        return visit_parse_tree(parser.parse(text), RangeVisitor())
    except NoMatch as e:
        raise RangeFormatError(text, str(e)) from None


def parse_range(text: str, value_type=None) -> Range:
    """
    Parses the textual form of a range (see :meth:`~rangekit.range.Range.from_string`).

    :param text: the text to parse
    :param value_type: callable applied to each value token; if None, numbers become floats (or ints, when the
        parse_numbers_as setting is "auto") and everything else a string
    :raises RangeFormatError: if the text is malformed or a value cannot be converted
    """
    if not text.strip():
        return Range()
    shape = _parse(_range_parser, text)
    try:
        return _build_range(shape, _value_converter(value_type))
    except (TypeError, ValueError) as e:
        raise RangeFormatError(text, str(e)) from None


def parse_range_set(text: str, value_type=None) -> list:
    """
    Parses the textual form of a range set, "{r1,r2,...}", into a list of ranges.

    >>> [str(r) for r in parse_range_set("{<1, [2,3), 7}")]
    ['<1', '[2,3)', '7']
    """
    shapes = _parse(_range_set_parser, text)
    convert = _value_converter(value_type)
    try:
        return [_build_range(shape, convert) for shape in shapes]
    except (TypeError, ValueError) as e:
        raise RangeFormatError(text, str(e)) from None


def parse_range_map(text: str, key_type=None, value_type=None) -> list:
    """
    Parses the textual form of a range map, "{k1:v1,k2:v2,...}", into a list of (range, value) pairs.

    >>> [(str(k), v) for k, v in parse_range_map("{[1,3):A,[3,7]:B}")]
    [('[1,3)', 'A'), ('[3,7]', 'B')]
    """
    entries = _parse(_range_map_parser, text)
    convert_key, convert_value = _value_converter(key_type), _value_converter(value_type)
    try:
        return [(_build_range(entry.key, convert_key), convert_value(entry.value)) for entry in entries]
    except (TypeError, ValueError) as e:
        raise RangeFormatError(text, str(e)) from None
