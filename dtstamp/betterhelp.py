'''
betterhelp
==========

Replaces argparse's own -h output with a helptext built from the parser's
description, the help of each argument, and a list of example invocations
which the program can attach as `parser.examples`.

The helptext goes to stderr and the program returns 1, so that asking for help
in a pipeline doesn't look like a successful run.
'''
import argparse
import shlex
import textwrap

from dtstamp import niceprints
from dtstamp import pipeable
from dtstamp import vlogging

log = vlogging.get_logger(__name__)

# The presence of any of these strings in argv will trigger the helptext.
HELP_ARGS = {'-h', '--help'}

# Modules can add additional helptexts to this set, and they will appear after
# the program's own helptext. This is for arguments which are consumed before
# argparse ever sees them, such as the vlogging level flags.
HELPTEXT_EPILOGUES = set()

FLAG_TYPES = (argparse._StoreTrueAction, argparse._VersionAction)

# INTERNALS
################################################################################

def is_required(action):
    if action.option_strings != []:
        return action.required
    # A ? positional without a default is only optional so that some flag can
    # stand in for it, so a bare run still needs it.
    if action.nargs == '?':
        return action.default is None
    return action.required

def can_use_bare(parser) -> bool:
    '''
    Return true if the given parser has no required arguments, ie can run bare.
    This is used to decide whether running `> myprogram` should show the
    helptext or just run normally.
    '''
    has_func = bool(parser.get_default('func'))
    has_required_args = any(is_required(action) for action in parser._actions)
    return has_func and not has_required_args

def render_nargs(argname, nargs):
    if nargs == '?':
        return f'[{argname}]'
    return argname

def make_helptext(parser, program_name=None, do_headline=True):
    if program_name is None:
        program_name = parser.prog

    positional_actions = []
    named_actions = []
    flag_actions = []

    for action in parser._actions:
        if type(action) is argparse._HelpAction:
            continue
        if type(action) is argparse._StoreAction:
            if action.option_strings == []:
                positional_actions.append(action)
            else:
                named_actions.append(action)
        elif isinstance(action, FLAG_TYPES):
            flag_actions.append(action)
        else:
            raise TypeError(f'betterhelp doesn\'t know what to do with {action}.')

    main_invocation = [program_name]
    action_invocations = {}

    for action in positional_actions:
        argname = action.metavar or action.dest
        inv = render_nargs(argname, action.nargs)
        action_invocations[action] = [inv]
        main_invocation.append(inv)

    for action in named_actions:
        argname = action.metavar or action.dest
        action_invocations[action] = [
            f'{alias} {render_nargs(argname, action.nargs)}'
            for alias in action.option_strings
        ]
        if action.required:
            main_invocation.append(action_invocations[action][0])

    if any(not action.required for action in named_actions):
        main_invocation.append('[options]')

    for action in flag_actions:
        action_invocations[action] = list(action.option_strings)

    if flag_actions:
        main_invocation.append('[flags]')

    program_description = textwrap.dedent(parser.description or '').strip()

    argument_helps = []
    for action in (positional_actions + named_actions + flag_actions):
        inv = '\n'.join(action_invocations[action])
        arghelp = []
        if action.help is not None:
            arghelp.append(textwrap.dedent(action.help).strip())
        if type(action) is argparse._StoreAction and action.default is not None:
            arghelp.append(f'Default: {action.default!r}')
        arghelp = textwrap.indent('\n'.join(arghelp), '    ')
        argument_helps.append(f'{inv}\n{arghelp}'.strip())

    example_invocations = []
    for example in getattr(parser, 'examples', []):
        args = example
        if isinstance(args, dict):
            args = args['args']
        if isinstance(args, str):
            args = shlex.split(args)
        example_invocation = ' '.join([program_name, *(shlex.quote(arg) for arg in args)])
        example_invocation = f'> {example_invocation}'
        if isinstance(example, dict) and example.get('comment'):
            example_invocation = f'# {example["comment"]}\n{example_invocation}'
        example_invocations.append(example_invocation)

    example_invocations = '\n\n'.join(example_invocations)
    if example_invocations:
        example_invocations = f'Examples:\n{example_invocations}'

    parts = [
        niceprints.equals_header(program_name) if do_headline else None,
        program_description,
        '> ' + ' '.join(main_invocation),
        '\n\n'.join(argument_helps),
        example_invocations,
    ]
    parts = [part.strip() for part in parts if part]
    return '\n\n'.join(part for part in parts if part)

def print_helptext(text) -> None:
    '''
    Print the given text to stderr, along with any epilogues added by
    other modules.
    '''
    fulltext = [text.strip()]
    epilogues = {textwrap.dedent(epi).strip() for epi in HELPTEXT_EPILOGUES}
    fulltext.extend(sorted(epilogues))
    separator = '\n' + ('-' * 80) + '\n'
    # Ensure one blank line above helptext.
    pipeable.stderr()
    pipeable.stderr(separator.join(fulltext))

# MAINS
################################################################################

def go(parser, argv):
    '''
    Show the helptext and return 1 if it was asked for, or if argv is empty
    and the parser has required arguments. Otherwise parse argv and return
    the result of args.func(args).
    '''
    needs_help = (
        any(arg.lower() in HELP_ARGS for arg in argv) or
        len(argv) == 0 and not can_use_bare(parser)
    )
    if needs_help:
        print_helptext(make_helptext(parser))
        return 1

    args = parser.parse_args(argv)
    log.loud('Parsed arguments %s.', args)
    return args.func(args)
