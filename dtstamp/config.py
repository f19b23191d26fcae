'''
The dt settings come in layers. The defaults are at the bottom, then the
DT_* environment variables, then the command line options on top. This module
takes care of the first two layers, and the result becomes the argparse
defaults so that the command line can overwrite them.
'''
import copy
import os

from dtstamp import resolver
from dtstamp import vlogging

log = vlogging.get_logger(__name__)

DEFAULTS = {
    'style': 'default',
    'datetime_format': resolver.DEFAULT_DATETIME_FORMAT,
    'date_format': resolver.DEFAULT_DATE_FORMAT,
    'time_format': resolver.DEFAULT_TIME_FORMAT,
}

ENVIRONMENT_VARIABLES = {
    'style': 'DT_STYLE',
    'datetime_format': 'DT_DATETIME_FORMAT',
    'date_format': 'DT_DATE_FORMAT',
    'time_format': 'DT_TIME_FORMAT',
}

def layer(target, supply):
    '''
    Overwrite the keys of target with the values from supply, skipping the
    values which are None or emptystring, so that `DT_STYLE= dt ...` behaves
    the same as not setting DT_STYLE at all. target is modified in place and
    also returned.
    '''
    for (key, value) in supply.items():
        if value is None or value == '':
            continue
        target[key] = value
    return target

def from_environment(environ=None):
    '''
    Return a copy of DEFAULTS with the DT_* environment variables laid on top.
    '''
    if environ is None:
        environ = os.environ

    supply = {}
    for (key, variable) in ENVIRONMENT_VARIABLES.items():
        value = environ.get(variable)
        if value:
            log.debug('Using %s=%r from the environment.', variable, value)
        supply[key] = value

    return layer(copy.deepcopy(DEFAULTS), supply)

def parse_formats(config) -> resolver.ParseFormats:
    '''
    Build the ParseFormats from any mapping or namespace which has the three
    format keys, such as the dict from from_environment or the argparse args.
    '''
    if not isinstance(config, dict):
        config = vars(config)

    return resolver.ParseFormats(
        datetime_format=config['datetime_format'],
        date_format=config['date_format'],
        time_format=config['time_format'],
    )
