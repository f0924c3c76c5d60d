'''A line-based command script for replaying operations on a ledger.

Each non-empty line that is not a ``#`` comment holds one command::

    add <election> [<proposal> ...]
    vote <election> <proposal> <voter>
    proposals <election>
    standings <election>
    winner <election>

Arguments are split like shell words, so names containing spaces can be
quoted (``add "There is no bread" "Let them eat cake"``).
'''

from __future__ import annotations

import dataclasses
import logging
import shlex
import typing
from typing import (
    Any, Callable, Iterable, Iterator, List, Optional, TextIO, Tuple
)

import govlib.resolve
from govlib.errors import GovernanceError
from govlib.ledger import Governance

logger = logging.getLogger(__name__)


class ScriptParseError(ValueError):
    '''A line of a command script is malformed.

    :param line_no: One-based number of the offending line.
    :param reason: What is wrong with it.
    '''
    def __init__(self, line_no: int, reason: str):
        self.line_no = line_no
        self.reason = reason
        super().__init__(f'line {line_no}: {reason}')


@dataclasses.dataclass
class Command:
    '''A single parsed script command.'''
    verb: str
    election: str
    args: Tuple[str, ...] = ()
    line_no: int = 0


# verb: (minimum, maximum) number of arguments after the election name
ARITIES = {
    'add': (0, None),
    'vote': (2, 2),
    'proposals': (0, 0),
    'standings': (0, 0),
    'winner': (0, 0),
}


def parse_line(line: str, line_no: int = 0) -> Optional[Command]:
    '''Parse one script line; return None for blank and comment lines.'''
    try:
        tokens = shlex.split(line, comments=True)
    except ValueError as e:
        raise ScriptParseError(line_no, str(e)) from e
    if not tokens:
        return None
    verb, *rest = tokens
    if verb not in ARITIES:
        raise ScriptParseError(
            line_no,
            f'unknown command {verb!r}, allowed: ' + ', '.join(ARITIES.keys())
        )
    if not rest:
        raise ScriptParseError(line_no, f'{verb}: missing election name')
    election, *args = rest
    min_args, max_args = ARITIES[verb]
    if len(args) < min_args or (max_args is not None and len(args) > max_args):
        raise ScriptParseError(
            line_no, f'{verb}: invalid number of arguments: {len(args)}'
        )
    return Command(verb, election, tuple(args), line_no)


def load_lines(lines: Iterable[str]) -> List[Command]:
    commands = []
    for line_no, line in enumerate(lines, start=1):
        command = parse_line(line, line_no)
        if command is not None:
            commands.append(command)
    return commands


def loaders(line_loader: Callable[..., List[Command]]
            ) -> Tuple[Callable[..., List[Command]],
                       Callable[..., List[Command]]]:
    '''Create load() and loads() functions from a line parsing function.'''
    return_annot = typing.get_type_hints(line_loader).get('return')
    if return_annot is None:
        return_annot = Any

    def load(file: TextIO, **kwargs) -> return_annot:
        return line_loader(file, **kwargs)

    def loads(text: str, **kwargs) -> return_annot:
        return line_loader(iter(text.split('\n')), **kwargs)

    return load, loads


load, loads = loaders(load_lines)


def execute(command: Command, ledger: Governance) -> Any:
    '''Perform a single command on the ledger and return its result.

    :raises govlib.errors.GovernanceError: If the operation fails.
    '''
    if command.verb == 'add':
        return ledger.add_proposals_to_election(command.election, command.args)
    elif command.verb == 'vote':
        proposal, voter = command.args
        return ledger.vote(command.election, proposal, voter)
    elif command.verb == 'proposals':
        return ledger.get_proposals(command.election)
    elif command.verb == 'standings':
        return govlib.resolve.standings(
            ledger.get_proposals(command.election)
        )
    elif command.verb == 'winner':
        return ledger.winner_name(command.election)
    else:
        raise ValueError(f'invalid command verb: {command.verb!r}')


def run(commands: Iterable[Command],
        ledger: Governance,
        ) -> Iterator[Tuple[Command, Any]]:
    '''Execute commands in order, yielding each with its outcome.

    The outcome is the operation result or, if the operation failed, the
    :class:`govlib.errors.GovernanceError` it raised. A failed command does
    not stop the replay.
    '''
    for command in commands:
        try:
            outcome = execute(command, ledger)
        except GovernanceError as e:
            logger.info('line %d: %s failed: %s',
                        command.line_no, command.verb, e.code)
            outcome = e
        yield command, outcome
