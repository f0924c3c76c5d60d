'''Election records: ordered proposals, their tallies and who has voted.

An :class:`Election` is the unit of consistency of the ledger. All of its
state is read and changed under its own lock, and every change is validated
completely before anything is written, so a failed call leaves the record
exactly as it was.
'''

from __future__ import annotations

import dataclasses
import logging
import threading
from typing import Dict, Hashable, Iterable, List, Set, Tuple

from govlib.errors import (
    AlreadyVotedError, ProposalExistsError, ProposalNotFoundError
)
from govlib.name import Name

logger = logging.getLogger(__name__)


@dataclasses.dataclass
class Proposal:
    '''A named option within an election carrying its vote tally.'''
    name: Name
    vote_count: int = 0

    def as_tuple(self) -> Tuple[Name, int]:
        return (self.name, self.vote_count)


class Election:
    '''A named container of competing proposals and of the voters so far.

    Proposals are kept in insertion order. Nothing is ever removed from an
    election: proposals, tallies and voters only grow.

    :param name: Name of the election.
    '''
    def __init__(self, name: Name):
        self.name = name
        self.lock = threading.Lock()
        self._proposals: List[Proposal] = []
        self._index: Dict[Name, Proposal] = {}
        self._voters: Set[Hashable] = set()

    def __repr__(self) -> str:
        return f'<Election({self.name.text!r},{len(self._proposals)})>'

    @property
    def n_votes(self) -> int:
        '''Total number of accepted votes.'''
        with self.lock:
            return len(self._voters)

    def add_proposals(self, names: Iterable[Name]) -> List[Name]:
        '''Append proposals with zero tallies, all or none.

        :param names: Proposal names in the order to add them.
        :returns: The names added.
        :raises ProposalExistsError: If any name is already in the election
            or is given more than once. No proposal is added in that case.
        '''
        names = list(names)
        with self.lock:
            seen = set()
            for name in names:
                if name in self._index or name in seen:
                    logger.debug('rejecting duplicate proposal %r in %r',
                                 name, self.name)
                    raise ProposalExistsError(self.name, name)
                seen.add(name)
            for name in names:
                proposal = Proposal(name)
                self._proposals.append(proposal)
                self._index[name] = proposal
        if names:
            logger.info('added proposals %s to %r', names, self.name)
        return names

    def get_proposals(self) -> List[Tuple[Name, int]]:
        '''Return a snapshot of ``(name, vote_count)`` in insertion order.'''
        with self.lock:
            return [proposal.as_tuple() for proposal in self._proposals]

    def has_voted(self, voter: Hashable) -> bool:
        with self.lock:
            return voter in self._voters

    def cast(self, proposal_name: Name, voter: Hashable) -> int:
        '''Record a vote for a proposal by a voter who has not voted yet.

        :param proposal_name: Name of the proposal voted for.
        :param voter: Opaque identifier of the voter.
        :returns: The new tally of the proposal.
        :raises ProposalNotFoundError: If there is no such proposal.
        :raises AlreadyVotedError: If the voter has voted in this election
            before, for any proposal.
        '''
        with self.lock:
            proposal = self._index.get(proposal_name)
            if proposal is None:
                logger.debug('no proposal %r in %r', proposal_name, self.name)
                raise ProposalNotFoundError(self.name, proposal_name)
            if voter in self._voters:
                logger.debug('voter %r already voted in %r', voter, self.name)
                raise AlreadyVotedError(self.name, voter)
            self._voters.add(voter)
            proposal.vote_count += 1
            new_count = proposal.vote_count
        logger.info('vote for %r in %r accepted, tally now %d',
                    proposal_name, self.name, new_count)
        return new_count
