import argparse
import os

from . import log
from .app_version import version
from .constants import portable_profile_number, portable_profile_string
from .framework import NuGetFramework, parse as parse_framework
from .mappings import get_mappings
from .provider import FrameworkNameProvider, default_provider

logger = log.getLogger(__name__)

description = """
Inspect target framework monikers: the folder names (like "net45" or
"portable-net45+win8") that packages use to say which frameworks their files
are built for.
"""

parse_desc = """
Parse each FOLDER as a framework moniker and print its full framework name.
"""

compare_desc = """
Check whether two framework monikers refer to the same framework. Exits with
0 if they do and 1 if they don't.
"""

portable_desc = """
List the frameworks that make up a portable profile, given either as a number
or as "ProfileN".
"""

comparers = {
    'full': NuGetFramework.comparer,
    'name': NuGetFramework.framework_name_comparer,
    'profile': NuGetFramework.framework_profile_comparer,
}

mappings_var = 'NUGET_FRAMEWORK_MAPPINGS'


def provider_from_args(args):
    if args.mappings == 'default':
        return default_provider()
    return FrameworkNameProvider(get_mappings(args.mappings))


def parse(parser, args):
    try:
        provider = provider_from_args(args)
        result = 0
        for name in args.folder:
            fw = parse_framework(name, provider)
            if fw.is_unsupported:
                logger.warning('unsupported framework folder {!r}'
                               .format(name))
                result = 1
            elif args.short:
                print('{}\t{}'.format(fw.get_short_folder_name(provider), fw))
            else:
                print(fw)
        return result
    except Exception as e:
        logger.exception(e)
        return 1


def compare(parser, args):
    try:
        provider = provider_from_args(args)
        lhs = parse_framework(args.lhs, provider)
        rhs = parse_framework(args.rhs, provider)
        for name, fw in ((args.lhs, lhs), (args.rhs, rhs)):
            if fw.is_unsupported:
                logger.warning('unsupported framework folder {!r}'
                               .format(name))

        equal = comparers[args.by].equals(lhs, rhs)
        print('equal' if equal else 'not equal')
        return 0 if equal else 1
    except Exception as e:
        logger.exception(e)
        return 1


def portable(parser, args):
    number = (int(args.profile) if args.profile.isdigit()
              else portable_profile_number(args.profile))
    if number is None:
        parser.error('invalid portable profile {!r}'.format(args.profile))

    try:
        provider = provider_from_args(args)
        frameworks = provider.get_portable_frameworks(
            portable_profile_string(number)
        )
        if frameworks is None:
            logger.error('unknown portable profile {}'.format(number))
            return 1

        for fw in sorted(frameworks, key=lambda i: i.full_framework_name):
            print('{}\t{}'.format(fw.get_short_folder_name(provider), fw))
    except Exception as e:
        logger.exception(e)
        return 1


def add_generic_args(parser):
    parser.add_argument('--version', action='version',
                        version='%(prog)s ' + version)
    parser.add_argument('--debug', action='store_true',
                        help='report extra information for debugging')
    parser.add_argument('--color', metavar='WHEN',
                        choices=['always', 'never', 'auto'], default='auto',
                        help=('show colored output (one of: %(choices)s; ' +
                              'default: %(default)s)'))
    parser.add_argument('-c', action='store_const', const='always',
                        dest='color',
                        help=('show colored output (equivalent to ' +
                              '`--color=always`)'))
    parser.add_argument('--mappings', metavar='NAME',
                        default=os.environ.get(mappings_var, 'default'),
                        help=('name of the registered framework mappings, ' +
                              'or a YAML file defining them (default: ' +
                              '%(default)s)'))


def make_parser():
    parser = argparse.ArgumentParser(prog='nuget-framework',
                                     description=description)
    subparsers = parser.add_subparsers(metavar='COMMAND')
    subparsers.required = True

    add_generic_args(parser)

    parse_p = subparsers.add_parser(
        'parse', description=parse_desc, help='parse framework folder names'
    )
    parse_p.set_defaults(func=parse, parser=parse_p)
    parse_p.add_argument('-s', '--short', action='store_true',
                         help='also show the short folder name')
    parse_p.add_argument('folder', metavar='FOLDER', nargs='+',
                         help='framework folder name')

    compare_p = subparsers.add_parser(
        'compare', description=compare_desc,
        help='compare two framework folder names'
    )
    compare_p.set_defaults(func=compare, parser=compare_p)
    compare_p.add_argument('--by', choices=list(comparers.keys()),
                           default='full',
                           help=('what to compare (one of %(choices)s; ' +
                                 'default: %(default)s)'))
    compare_p.add_argument('lhs', metavar='A', help='framework folder name')
    compare_p.add_argument('rhs', metavar='B', help='framework folder name')

    portable_p = subparsers.add_parser(
        'portable', description=portable_desc,
        help='list the frameworks in a portable profile'
    )
    portable_p.set_defaults(func=portable, parser=portable_p)
    portable_p.add_argument('profile', metavar='PROFILE',
                            help='portable profile')

    return parser


def main(argv=None):
    parser = make_parser()
    args = parser.parse_args(argv)
    log.init(args.color, debug=args.debug)

    return args.func(args.parser, args)
