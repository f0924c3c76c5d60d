"""A commandline tool to replay a governance command script.

Runs the commands against a fresh in-memory ledger and prints the outcome of
each command. Failed operations are reported and the replay continues.
"""

import argparse
import io
import logging
import sys
from typing import Any, List, Tuple

import govlib.script
from govlib.errors import GovernanceError
from govlib.ledger import Governance
from govlib.name import Name
from govlib.script import Command

argparser = argparse.ArgumentParser(
    prog='govlib',
    description=__doc__,
    formatter_class=argparse.ArgumentDefaultsHelpFormatter,
)
argparser.add_argument(
    '-i', '--input-file',
    type=argparse.FileType('r', encoding='utf8'),
    help='file to load commands from',
)
argparser.add_argument(
    '-I', '--use-stdin',
    action='store_true',
    help='load commands from standard input',
)
argparser.add_argument(
    '-e', '--encoding',
    default='utf8',
    help='encoding of election and proposal names',
)
argparser.add_argument(
    '-v', '--verbose',
    action='store_true',
    help='show all ledger log messages',
)
argparser.add_argument(
    '-q', '--quiet',
    action='store_true',
    help='do not show any ledger log messages',
)


def main(input_file: io.TextIOBase,
         use_stdin: bool = False,
         encoding: str = 'utf8',
         verbose: bool = False,
         quiet: bool = False,
         ) -> None:
    logging.basicConfig(
        level=(
            logging.DEBUG if verbose
            else (logging.WARNING if quiet else logging.INFO)
        ),
        format='%(levelname)-10s %(message)s'
    )
    if use_stdin:
        input_file = sys.stdin
    commands = govlib.script.load(input_file)
    ledger = Governance(encoding=encoding)
    for command, outcome in govlib.script.run(commands, ledger):
        for line in format_outcome(command, outcome):
            print(line)
    logging.info('%d elections in ledger', len(ledger.election_names()))


def format_outcome(command: Command, outcome: Any) -> List[str]:
    """Render the outcome of a command as output lines."""
    prefix = f'{command.line_no:>4} {command.verb:<10}'
    if isinstance(outcome, GovernanceError):
        return [f'{prefix}{outcome.code}: {outcome}']
    elif command.verb in ('proposals', 'standings'):
        return [prefix + f'{len(outcome)} proposals'] + [
            ' ' * 15 + line for line in format_tallies(outcome)
        ]
    elif command.verb == 'winner':
        return [f'{prefix}{outcome}']
    else:
        return [f'{prefix}ok']


def format_tallies(proposals: List[Tuple[Name, int]]) -> List[str]:
    if not proposals:
        return []
    names = [str(name) for name, _ in proposals]
    n_just_chars = len(max(names, key=len))
    return [
        name.ljust(n_just_chars) + '  ' + str(count)
        for name, (_, count) in zip(names, proposals)
    ]


if __name__ == '__main__':
    args = argparser.parse_args()
    if not args.input_file and not args.use_stdin:
        argparser.print_usage()
    else:
        main(**vars(args))
