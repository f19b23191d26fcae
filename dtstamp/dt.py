'''
dt
==

Converts a date/time string in the local timezone into a Discord timestamp
tag like <t:1731001380:R>, which every reader's client shows in their own
timezone and language.

The input is tried as a full datetime first, then as a date (at midnight),
then as a time (today). The three formats can be changed with options or with
the DT_DATETIME_FORMAT, DT_DATE_FORMAT, and DT_TIME_FORMAT environment
variables, and the default style with DT_STYLE.
'''
import argparse
import sys

from dtstamp import __version__
from dtstamp import betterhelp
from dtstamp import clipboard
from dtstamp import config
from dtstamp import exceptions
from dtstamp import formatter
from dtstamp import pipeable
from dtstamp import resolver
from dtstamp import styles
from dtstamp import vlogging

log = vlogging.get_logger(__name__, 'dt')

betterhelp.HELPTEXT_EPILOGUES.add(vlogging.HELPTEXT)

def style_argument(token):
    try:
        return styles.parse_style(token)
    except exceptions.InvalidStyle as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc

@pipeable.ctrlc_return1
def dtstamp_argparse(args):
    if args.help_style:
        pipeable.stdout(styles.style_helptext())
        return 0

    if args.input is None:
        log.error('INPUT is required unless you are using --help-style.')
        return 2

    try:
        text = pipeable.input(args.input, input_prompt='Date/time: ')
        formats = config.parse_formats(args)
        instant = resolver.resolve(text, formats)
    except exceptions.DtStampException as exc:
        log.error(exc)
        return 1

    pipeable.stdout(f'Formatting: {formatter.describe(instant)}')
    tag = formatter.format_tag(instant, args.style)

    if args.copy_to_clipboard:
        try:
            clipboard.copy(tag)
        except exceptions.ClipboardUnavailable as exc:
            log.warning('%s The tag was not copied.', exc)
        else:
            tag = f'{tag} copied to clipboard!'

    pipeable.stdout(tag)
    return 0

@vlogging.main_decorator
def main(argv, environ=None):
    defaults = config.from_environment(environ)

    parser = argparse.ArgumentParser(prog='dt', description=__doc__)
    parser.examples = [
        {'args': ['2024-11-07 12:43:00'], 'comment': 'The default style'},
        {'args': ['2024-11-07 12:43:00', 'R'], 'comment': 'Relative, like "in 3 days"'},
        {'args': ['2024-11-07', 'long-date'], 'comment': 'A date means midnight'},
        {'args': ['12:43:00', 't', '-c'], 'comment': 'A time means today, and copy the tag'},
        {'args': ['11/07/24 12:43', '-f', '%m/%d/%y %H:%M']},
        {'args': ['!c', 'F'], 'comment': 'Read the input from the clipboard'},
    ]

    # --help-style doesn't read INPUT, so giving both is a usage error.
    input_or_help = parser.add_mutually_exclusive_group()
    input_or_help.add_argument(
        'input',
        metavar='INPUT',
        nargs='?',
        default=None,
        help='''
        Date/time string in the local timezone to convert to a discord
        timestamp. Uses pipeable to support !c clipboard, !i stdin.
        ''',
    )
    parser.add_argument(
        'style',
        metavar='STYLE',
        nargs='?',
        type=style_argument,
        default=defaults['style'],
        help='''
        Format style of the output. Use --help-style to see the styles and
        their abbreviations. Can also be set by DT_STYLE.
        ''',
    )
    parser.add_argument(
        '-f',
        '--datetime-format',
        dest='datetime_format',
        metavar='FORMAT',
        default=defaults['datetime_format'],
        help='''
        strftime pattern for a full date and time.
        Can also be set by DT_DATETIME_FORMAT.
        ''',
    )
    parser.add_argument(
        '-d',
        '--date-format',
        dest='date_format',
        metavar='FORMAT',
        default=defaults['date_format'],
        help='''
        strftime pattern for a date without a time, which means midnight.
        Can also be set by DT_DATE_FORMAT.
        ''',
    )
    parser.add_argument(
        '-t',
        '--time-format',
        dest='time_format',
        metavar='FORMAT',
        default=defaults['time_format'],
        help='''
        strftime pattern for a time without a date, which means today.
        Can also be set by DT_TIME_FORMAT.
        ''',
    )
    parser.add_argument(
        '-c',
        '--copy-to-clipboard',
        action='store_true',
        help='''
        Copy the result to the clipboard when complete.
        ''',
    )
    input_or_help.add_argument(
        '--help-style',
        action='store_true',
        help='''
        Show the options (and abbreviations) for the style argument.
        ''',
    )
    parser.add_argument(
        '-V',
        '--version',
        action='version',
        version=f'%(prog)s {__version__}',
    )
    parser.set_defaults(func=dtstamp_argparse)

    return betterhelp.go(parser, argv)

def console():
    raise SystemExit(main(sys.argv[1:]))

if __name__ == '__main__':
    raise SystemExit(main(sys.argv[1:]))
