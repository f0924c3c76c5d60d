'''Failures of governance ledger operations.

Every operation either succeeds completely or raises one of the errors
below without changing the ledger state. The message of each error is
fixed (``str(error)`` always equals the class :attr:`MESSAGE`) so that it
stays compatible with clients matching on it; details are available
as attributes.
'''

import abc
from typing import Any, Dict, List, Optional, Type


class GovernanceError(Exception, metaclass=abc.ABCMeta):
    '''An operation is not permitted in the current ledger state.'''

    code: str = NotImplemented
    MESSAGE: str = NotImplemented

    def __init__(self, election: Any = None):
        self.election = election
        super().__init__(self.MESSAGE)


class ProposalExistsError(GovernanceError):
    '''A proposal name is already present in the election.

    Raised both for names added by an earlier call and for names repeated
    within a single call.

    :param election: Name of the election.
    :param proposal: The duplicate proposal name.
    '''
    code = 'PROPOSAL_EXISTS'
    MESSAGE = 'Proposal name already exists.'

    def __init__(self, election: Any = None, proposal: Any = None):
        self.proposal = proposal
        super().__init__(election)


class ProposalNotFoundError(GovernanceError):
    '''The election does not exist or has no proposal of the given name.'''
    code = 'PROPOSAL_NOT_FOUND'
    MESSAGE = 'Proposal not found.'

    def __init__(self, election: Any = None, proposal: Any = None):
        self.proposal = proposal
        super().__init__(election)


class AlreadyVotedError(GovernanceError):
    '''The voter has already cast a vote in the election.'''
    code = 'ALREADY_VOTED'
    MESSAGE = 'Already voted.'

    def __init__(self, election: Any = None, voter: Any = None):
        self.voter = voter
        super().__init__(election)


class NoProposalsFoundError(GovernanceError):
    '''No winner can be resolved in an election without proposals.'''
    code = 'NO_PROPOSALS_FOUND'
    MESSAGE = 'No proposals found.'


class NoWinnerError(GovernanceError):
    '''No winner can be resolved before any vote is cast.'''
    code = 'NO_WINNER'
    MESSAGE = 'Must have at least one vote.'


class TieError(GovernanceError):
    '''Two or more proposals share the highest tally.

    :param election: Name of the election.
    :param tied: Names of the tied proposals, in insertion order.
    '''
    code = 'TIE'
    MESSAGE = 'Multiple Winners Found.'

    def __init__(self,
                 election: Any = None,
                 tied: Optional[List[Any]] = None,
                 ):
        self.tied = tied if tied is not None else []
        super().__init__(election)


ERRORS: Dict[str, Type[GovernanceError]] = {
    err_cls.code: err_cls for err_cls in [
        ProposalExistsError,
        ProposalNotFoundError,
        AlreadyVotedError,
        NoProposalsFoundError,
        NoWinnerError,
        TieError,
    ]
}
