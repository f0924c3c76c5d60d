'''The governance ledger: elections, proposals, votes and winners.

:class:`Governance` is the public operation surface. It owns the mapping
from election names to :class:`govlib.election.Election` records; there is
no module-level state, so independent ledgers can coexist.

Each operation is atomic with respect to every other operation touching the
same election. The ledger lock is held only to look up or create an election
record; the operation itself then runs under the election's own lock, so
operations on different elections proceed in parallel.

Names may be passed as :class:`govlib.name.Name`, raw bytes or text; see
:func:`govlib.name.to_name`. Voter identifiers are opaque hashable tokens
supplied by the caller and are only ever compared for equality.
'''

import logging
import threading
from typing import Dict, Hashable, Iterable, List, Optional, Tuple

import govlib.resolve
from govlib.election import Election
from govlib.errors import ProposalNotFoundError
from govlib.name import Name, NameLike, to_name

logger = logging.getLogger(__name__)


class Governance:
    '''An in-memory ledger of named elections.

    :param encoding: Encoding used to turn text names into bytes.
    '''
    def __init__(self, encoding: str = 'utf8'):
        self.encoding = encoding
        self._elections: Dict[Name, Election] = {}
        self._lock = threading.Lock()

    def __contains__(self, election_name: NameLike) -> bool:
        return self._get(election_name) is not None

    def __repr__(self) -> str:
        return f'<Governance({len(self._elections)} elections)>'

    def election_names(self) -> List[Name]:
        '''Return names of all elections, in order of creation.'''
        with self._lock:
            return list(self._elections.keys())

    def add_proposals_to_election(self,
                                  election_name: NameLike,
                                  proposal_names: Iterable[NameLike],
                                  ) -> None:
        '''Add proposals to an election, creating the election if needed.

        Either all the proposals are added, in the given order and with zero
        votes, or none of them is.

        :param election_name: Name of the election.
        :param proposal_names: Names of the proposals to add; may be empty.
        :raises govlib.errors.ProposalExistsError: If a name is already in
            the election or is repeated in the input.
        '''
        names = [self._name(name) for name in proposal_names]
        election = self._get_or_create(self._name(election_name))
        election.add_proposals(names)

    def get_proposals(self,
                      election_name: NameLike,
                      ) -> List[Tuple[Name, int]]:
        '''Return ``(name, vote_count)`` of all proposals in insertion order.

        An unknown election has no proposals; this is not an error.
        '''
        election = self._get(election_name)
        if election is None:
            return []
        return election.get_proposals()

    def vote(self,
             election_name: NameLike,
             proposal_name: NameLike,
             voter: Hashable,
             ) -> None:
        '''Cast the voter's single vote in the election for the proposal.

        :param election_name: Name of the election.
        :param proposal_name: Name of the proposal voted for.
        :param voter: Identifier of the voter, supplied by the calling
            context.
        :raises govlib.errors.ProposalNotFoundError: If the election does
            not exist or does not contain the proposal.
        :raises govlib.errors.AlreadyVotedError: If the voter has already
            voted in the election.
        '''
        proposal_name = self._name(proposal_name)
        election = self._get(election_name)
        if election is None:
            logger.debug('vote in unknown election %r', election_name)
            raise ProposalNotFoundError(self._name(election_name),
                                        proposal_name)
        election.cast(proposal_name, voter)

    def has_voted(self, election_name: NameLike, voter: Hashable) -> bool:
        '''Return True if the voter has cast a vote in the election.'''
        election = self._get(election_name)
        return election is not None and election.has_voted(voter)

    def winner_name(self, election_name: NameLike) -> Name:
        '''Return the name of the proposal that has won the election so far.

        The winner is resolved from the current tallies on every call.

        :raises govlib.errors.NoProposalsFoundError: If the election is
            unknown or has no proposals.
        :raises govlib.errors.NoWinnerError: If no vote has been cast.
        :raises govlib.errors.TieError: If the most votes are shared by more
            than one proposal.
        '''
        name = self._name(election_name)
        winner = govlib.resolve.winner_name(
            self.get_proposals(name), election=name
        )
        logger.info('%r wins %r', winner, name)
        return winner

    # camel-case operation names
    addProposalsToElection = add_proposals_to_election
    getProposals = get_proposals
    winnerName = winner_name

    def _name(self, value: NameLike) -> Name:
        return to_name(value, encoding=self.encoding)

    def _get(self, election_name: NameLike) -> Optional[Election]:
        name = self._name(election_name)
        with self._lock:
            return self._elections.get(name)

    def _get_or_create(self, name: Name) -> Election:
        with self._lock:
            election = self._elections.get(name)
            if election is None:
                election = Election(name)
                self._elections[name] = election
                logger.info('created election %r', name)
            return election
