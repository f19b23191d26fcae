'''
This module provides functions for making dt easy to pipe to and from via
the command line.

The INPUT argument may be one of the !c strings to read the clipboard, or one
of the !i strings to read stdin. Anything else is taken literally. This way
`date | dt !i` and copying a date before running `dt !c` both work without
needing extra options.
'''
import sys

from dtstamp import clipboard

CLIPBOARD_STRINGS = ['!c', '!clip', '!clipboard']
INPUT_STRINGS = ['!i', '!in', '!input', '!stdin']
EOF = '\x1a'

def ctrlc_return1(function):
    '''
    Apply this decorator to your argparse gateways or main function, and if the
    user presses ctrl+c then the gateway will return 1 as its status code
    without the stacktrace appearing.
    '''
    def wrapped(*args, **kwargs):
        try:
            return function(*args, **kwargs)
        except KeyboardInterrupt:
            return 1
    return wrapped

def _read_stdin(prompt=None):
    if prompt is not None and not stdin_pipe():
        stderr(prompt, end='')

    if sys.stdin is None:
        return ''

    lines = []
    for line in sys.stdin:
        (line, *eof) = line.split(EOF)
        lines.append(line)
        if eof:
            break
    return ''.join(lines)

def input(arg, *, input_prompt=None, strip=True) -> str:
    '''
    Resolve a command line argument into the text it stands for.

    If the arg is in CLIPBOARD_STRINGS, the contents of the clipboard are taken.
    If the arg is in INPUT_STRINGS, stdin is read until EOF. The prompt is only
    shown when stdin is a keyboard and not a pipe.
    Otherwise the argument string is taken literally.

    Resolution is not recursive: if the clipboard contains !i, it is not read
    again.
    '''
    if not isinstance(arg, str):
        raise TypeError(f'arg should be {str}, not {type(arg)}.')

    arg_lower = arg.lower()

    if arg_lower in INPUT_STRINGS:
        text = _read_stdin(prompt=input_prompt)
    elif arg_lower in CLIPBOARD_STRINGS:
        text = clipboard.paste()
    else:
        text = arg

    if strip:
        text = text.strip()
    return text

def output(stream, line, *, end):
    line = str(line)
    stream.write(line)
    if not line.endswith(end):
        stream.write(end)
    if stream.isatty():
        stream.flush()

def stdout(line='', end='\n'):
    # In pythonw, stdout is None.
    if sys.stdout is not None:
        output(sys.stdout, line, end=end)

def stderr(line='', end='\n'):
    # In pythonw, stderr is None.
    if sys.stderr is not None:
        output(sys.stderr, line, end=end)

def stdin_pipe():
    if sys.stdin is not None and not sys.stdin.isatty():
        return sys.stdin
