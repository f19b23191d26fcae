'''
vlogging
========

This module forwards everything from logging, with the addition of levels LOUD
and SILENT, and all loggers from get_logger are given the `loud` method.

The dt command uses main_decorator so that --loud, --debug, --warning, --quiet
and --silent work without the argparser knowing about them.
'''
from logging import *

_getLogger = getLogger

# The root logger gets no level of its own so that each handler can decide
# what it wants to receive.
root = getLogger()
root.setLevel(NOTSET)

LOUD = 1
SILENT = 99999999999

LEVEL_FLAGS = {
    '--loud': LOUD,
    '--debug': DEBUG,
    '--warning': WARNING,
    '--quiet': ERROR,
    '--silent': SILENT,
}

def add_loud(log):
    '''
    Add the `loud` method to the given logger.
    '''
    def loud(self, message, *args, **kwargs):
        if self.isEnabledFor(LOUD):
            self._log(LOUD, message, args, **kwargs)

    addLevelName(LOUD, 'LOUD')
    log.loud = loud.__get__(log, log.__class__)

def basic_config(level):
    '''
    Put a stderr handler with the given level on the root logger, unless it
    already has handlers.
    '''
    if root.handlers:
        return

    handler = StreamHandler()
    handler.setFormatter(Formatter('{levelname}:{name}:{message}', style='{'))
    handler.setLevel(level)
    root.addHandler(handler)

def get_level_by_argv(argv):
    '''
    Return the log level chosen by the first LEVEL_FLAGS string found in argv,
    or INFO if there are none, along with a copy of argv that has every level
    flag removed. Your argparser should not have options with these names.
    '''
    level = INFO
    for (flag, flag_level) in LEVEL_FLAGS.items():
        if flag in argv:
            level = flag_level
            break

    argv = [arg for arg in argv if arg not in LEVEL_FLAGS]
    return (level, argv)

def get_logger(name=None, main_fallback=None):
    '''
    When a module is run directly its __name__ is "__main__", which is ugly in
    the output, so main_fallback is used as the name in that case.
    '''
    if name == '__main__' and main_fallback is not None:
        name = main_fallback
    log = _getLogger(name)
    add_loud(log)
    return log

def main_level_by_argv(argv):
    '''
    Put a handler on the root logger with a level set by the flags in argv,
    then return the rest of argv for your argparser.
    '''
    (level, argv) = get_level_by_argv(argv)
    basic_config(level)
    return argv

def main_decorator(main):
    '''
    Add this decorator to your application's main function to set the log
    handler level from argv before the argparser sees it.
    '''
    def wrapped(argv, *args, **kwargs):
        argv = main_level_by_argv(argv)
        return main(argv, *args, **kwargs)
    return wrapped

HELPTEXT = '''
All of the following flags can be added anywhere in the command to choose how
much logging appears on stderr:

--loud
--debug
--warning
--quiet
--silent
'''
