'''
This module turns the string that the user typed into an absolute moment in
time.

The input is tried against three strftime patterns, in this order:
1. datetime_format, the full date and time.
2. date_format, which implies midnight.
3. time_format, which implies today.

The order matters because a shorter pattern might otherwise match a piece of
a longer input. The first pattern that matches wins, and if none of them match
then all three failures are reported together.

The wall-clock time is placed in the local timezone using the offset that is
in effect on the parsed date, not the offset that is in effect right now, so
a summer date typed in winter still gets its summer offset.

When the clocks fall back, a wall-clock time can happen twice. We pick the
first occurrence and log a warning. When the clocks spring forward, some
wall-clock times never happen at all, and those raise NonexistentLocalTime.
'''
import collections
import datetime
import math

from dtstamp import exceptions
from dtstamp import vlogging

log = vlogging.get_logger(__name__)

DEFAULT_DATETIME_FORMAT = '%Y-%m-%d %H:%M:%S'
DEFAULT_DATE_FORMAT = '%Y-%m-%d'
DEFAULT_TIME_FORMAT = '%H:%M:%S'

_ParseFormats = collections.namedtuple(
    '_ParseFormats',
    ['datetime_format', 'date_format', 'time_format'],
)

class ParseFormats(_ParseFormats):
    '''
    The three strftime patterns used by resolve. The patterns are checked
    when the object is created, so a typo in the configuration is reported
    as FormatStringInvalid instead of looking like bad input.
    '''
    __slots__ = ()

    def __new__(
            cls,
            datetime_format=DEFAULT_DATETIME_FORMAT,
            date_format=DEFAULT_DATE_FORMAT,
            time_format=DEFAULT_TIME_FORMAT,
        ):
        validate_format('datetime', datetime_format)
        validate_format('date', date_format)
        validate_format('time', time_format)
        return super().__new__(cls, datetime_format, date_format, time_format)

def validate_format(which, format):
    '''
    Raise FormatStringInvalid if strptime can't make sense of the pattern
    itself. Parsing the empty string is enough to make strptime compile the
    pattern, and a valid pattern fails with "time data ... does not match".
    '''
    if not isinstance(format, str):
        raise exceptions.FormatStringInvalid(which, format, f'should be {str}, not {type(format)}')

    try:
        datetime.datetime.strptime('', format)
    except ValueError as exc:
        if str(exc).startswith('time data'):
            return
        raise exceptions.FormatStringInvalid(which, format, str(exc)) from exc

class ResolvedInstant:
    '''
    An aware datetime with a fixed UTC offset, and the name of the strategy
    which produced it.
    '''
    def __init__(self, moment, strategy):
        if moment.tzinfo is None:
            raise ValueError('ResolvedInstant needs an aware datetime.')
        self.datetime = moment
        self.strategy = strategy

    def __eq__(self, other):
        if not isinstance(other, ResolvedInstant):
            return NotImplemented
        return (
            self.datetime == other.datetime and
            self.datetime.utcoffset() == other.datetime.utcoffset()
        )

    def __hash__(self):
        return hash((self.datetime, self.datetime.utcoffset()))

    def __repr__(self):
        return f'ResolvedInstant({self.datetime.isoformat()!r}, strategy={self.strategy!r})'

    @property
    def epoch_seconds(self) -> int:
        return math.floor(self.datetime.timestamp())

# LOCALIZATION
################################################################################

def _zone_name(tz):
    if tz is None:
        return 'the local timezone'
    return str(tz)

def _to_utc(naive, fold, tz):
    # A naive datetime's astimezone uses the system's local time rules,
    # including fold.
    if tz is None:
        return naive.replace(fold=fold).astimezone(datetime.timezone.utc)
    return naive.replace(tzinfo=tz, fold=fold).astimezone(datetime.timezone.utc)

def whole_minute_offset(aware):
    '''
    Return the same instant with a fixed offset rounded to the minute, so it
    always prints as +HH:MM. Local mean time offsets like -04:56:02 become
    -04:56, and the wall clock moves by those seconds.
    '''
    minutes = round(aware.utcoffset().total_seconds() / 60)
    fixed = datetime.timezone(datetime.timedelta(minutes=minutes))
    return aware.astimezone(fixed)

def _localize(naive, tz):
    if naive.tzinfo is not None:
        return whole_minute_offset(naive)

    earlier = _to_utc(naive, 0, tz)
    later = _to_utc(naive, 1, tz)
    chosen = min(earlier, later)

    roundtrip = chosen.astimezone(tz).replace(tzinfo=None)
    if roundtrip != naive:
        raise exceptions.NonexistentLocalTime(naive, _zone_name(tz))

    local = chosen.astimezone(tz)
    if earlier != later:
        other = max(earlier, later).astimezone(tz)
        log.warning(
            '%s happens twice in %s, using the first one at %s instead of %s.',
            naive.isoformat(sep=' '),
            _zone_name(tz),
            local.isoformat(),
            other.isoformat(),
        )

    return whole_minute_offset(local)

def localize(naive, tz=None) -> datetime.datetime:
    '''
    Attach the UTC offset that `tz` has at this wall-clock time, and return
    an aware datetime with that fixed offset, rounded to the minute. If tz is
    None, the system's local timezone is used.

    Datetimes that are already aware, because the pattern had a %z, keep the
    offset that the user typed.

    Raises NonexistentLocalTime for times in a DST gap, and InstantOutOfRange
    when the conversion would leave year 1 through 9999.
    '''
    try:
        return _localize(naive, tz)
    # The platform's localtime raises OSError instead of OverflowError for
    # some out of range years.
    except (OverflowError, OSError) as exc:
        raise exceptions.InstantOutOfRange(naive, _zone_name(tz)) from exc

def today_in(tz=None) -> datetime.date:
    if tz is None:
        return datetime.date.today()
    return datetime.datetime.now(tz).date()

# PARSE STRATEGIES
################################################################################

def _parse_datetime(text, format, today):
    return datetime.datetime.strptime(text, format)

def _parse_date(text, format, today):
    parsed = datetime.datetime.strptime(text, format)
    return datetime.datetime.combine(parsed.date(), datetime.time(), tzinfo=parsed.tzinfo)

def _parse_time(text, format, today):
    parsed = datetime.datetime.strptime(text, format)
    return datetime.datetime.combine(today, parsed.timetz())

STRATEGIES = [
    ('datetime', 'datetime_format', _parse_datetime),
    ('date', 'date_format', _parse_date),
    ('time', 'time_format', _parse_time),
]

def resolve(text, formats=None, *, today=None, tz=None) -> ResolvedInstant:
    '''
    Parse the text with the datetime, date, and time formats in that order
    and return a ResolvedInstant for the first one that matches.

    today is the date used for time-only input. It defaults to the current
    date in tz.

    Raises UnparsableInput if none of the formats match,
    NonexistentLocalTime if the wall-clock time falls in a DST gap, or
    InstantOutOfRange at the very edges of the calendar.
    '''
    if formats is None:
        formats = ParseFormats()

    text = text.strip()
    failures = []
    for (strategy, attribute, parser) in STRATEGIES:
        format = getattr(formats, attribute)
        if strategy == 'time' and today is None:
            today = today_in(tz)

        try:
            naive = parser(text, format, today)
        except ValueError as exc:
            log.debug('%r is not a %s: %s', text, strategy, exc)
            failures.append((strategy, format, exc))
            continue

        moment = localize(naive, tz)
        log.debug('Parsed %r as a %s with %r -> %s.', text, strategy, format, moment.isoformat())
        return ResolvedInstant(moment, strategy)

    raise exceptions.UnparsableInput(text, failures)
