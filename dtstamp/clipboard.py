'''
A thin layer over pyperclip which turns its failures into
ClipboardUnavailable, so callers only need to know about dtstamp exceptions.
'''
# import pyperclip moved to stay lazy.
from dtstamp import exceptions
from dtstamp import vlogging

log = vlogging.get_logger(__name__)

def copy(text) -> None:
    import pyperclip
    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException as exc:
        raise exceptions.ClipboardUnavailable(str(exc)) from exc
    log.debug('Copied %r to the clipboard.', text)

def paste() -> str:
    import pyperclip
    try:
        return pyperclip.paste()
    except pyperclip.PyperclipException as exc:
        raise exceptions.ClipboardUnavailable(str(exc)) from exc
