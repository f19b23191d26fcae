'''
Turn a resolved instant into the tag that gets pasted into Discord, and into
the human readable line that tells the user what we understood.
'''
from dtstamp import resolver

def render_tag(epoch, style) -> str:
    '''
    <t:1731001380> for the default style, <t:1731001380:R> for the others.
    '''
    if style.code:
        return f'<t:{epoch}:{style.code}>'
    return f'<t:{epoch}>'

def format_tag(instant, style) -> str:
    return render_tag(instant.epoch_seconds, style)

def describe(instant) -> str:
    '''
    Render the instant as YYYY-MM-DDTHH:MM:SS+HH:MM. There is no timezone name
    and no fractional second, so the text is the same on every platform.
    Offsets with a seconds part are rounded to the minute and the wall clock
    is shifted to match, so the text still names the same second.
    '''
    moment = resolver.whole_minute_offset(instant.datetime).replace(microsecond=0)
    return moment.isoformat(timespec='seconds')
