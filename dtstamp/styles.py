'''
The display styles that Discord understands inside a timestamp tag. Each one
is known by a kebab-case name and an alias, which is the same letter as its
code. The default style has no code and no alias, Discord shows it like
short-date-time.
'''
import enum

import prettytable

from dtstamp import exceptions
from dtstamp import formatter

# The --help-style examples are all rendered from this moment.
EXAMPLE_EPOCH = 1543392060

class Style(enum.Enum):
    DEFAULT = ('default', '', (), 'November 28, 2018 9:01 AM', '28 November 2018 09:01')
    SHORT_TIME = ('short-time', 't', ('t',), '9:01 AM', '09:01')
    LONG_TIME = ('long-time', 'T', ('T',), '9:01:00 AM', '09:01:00')
    SHORT_DATE = ('short-date', 'd', ('d',), '11/28/2018', '28/11/2018')
    LONG_DATE = ('long-date', 'D', ('D',), 'November 28, 2018', '28 November 2018')
    SHORT_DATE_TIME = ('short-date-time', 'f', ('f',), 'November 28, 2018 9:01 AM', '28 November 2018 09:01')
    LONG_DATE_TIME = ('long-date-time', 'F', ('F',), 'Wednesday, November 28, 2018 9:01 AM', 'Wednesday, 28 November 2018 09:01')
    RELATIVE_TIME = ('relative-time', 'R', ('R', 'relative'), '3 years ago', '3 years ago')

    def __init__(self, style_name, code, aliases, example_12h, example_24h):
        self.style_name = style_name
        self.code = code
        self.aliases = aliases
        self.example_12h = example_12h
        self.example_24h = example_24h

    def __str__(self):
        return self.style_name

    @property
    def tokens(self):
        return (self.style_name, *self.aliases)

# Aliases are case sensitive because t and T are different styles.
STYLE_TOKENS = {token: style for style in Style for token in style.tokens}

def parse_style(token) -> Style:
    '''
    Return the Style whose name or alias is exactly `token`, or raise
    InvalidStyle.
    '''
    if isinstance(token, Style):
        return token

    try:
        return STYLE_TOKENS[token]
    except (KeyError, TypeError):
        raise exceptions.InvalidStyle(token, choices=list(STYLE_TOKENS)) from None

def style_helptext() -> str:
    '''
    Render the table shown by --help-style.
    '''
    headers = [
        'Style',
        'Alias',
        'Discord Format',
        'Output (12-hour clock)',
        'Output (24-hour clock)',
    ]
    table = prettytable.PrettyTable(headers)
    table.align = 'l'
    # No outer frame, only the column separators and the rule under the headers.
    table.border = False
    table.preserve_internal_border = True
    for style in Style:
        table.add_row([
            style.style_name,
            ', '.join(style.aliases),
            formatter.render_tag(EXAMPLE_EPOCH, style),
            style.example_12h,
            style.example_24h,
        ])
    return table.get_string()
