'''Winner resolution over a snapshot of election proposals.

All functions here are pure: they take an ordered sequence of
``(name, vote_count)`` pairs, as returned by
:meth:`govlib.ledger.Governance.get_proposals`, and never touch the ledger.
'''

import logging
import operator
from typing import Any, List, Sequence, Tuple

from govlib.errors import NoProposalsFoundError, NoWinnerError, TieError
from govlib.name import Name

logger = logging.getLogger(__name__)

ProposalTally = Tuple[Name, int]


def leaders(proposals: Sequence[ProposalTally]) -> List[Name]:
    '''Return the names of all proposals with the highest tally.

    The names are listed in the order of the input. An empty input gives an
    empty list.
    '''
    if not proposals:
        return []
    max_count = max(count for name, count in proposals)
    return [name for name, count in proposals if count == max_count]


def standings(proposals: Sequence[ProposalTally]) -> List[ProposalTally]:
    '''Return proposals sorted by tally, highest first.

    The sort is stable, so proposals with equal tallies keep their
    insertion order. This is a presentation ordering; it never decides
    a winner.
    '''
    return list(sorted(
        proposals,
        key=operator.itemgetter(1),
        reverse=True
    ))


def winner_name(proposals: Sequence[ProposalTally],
                election: Any = None,
                ) -> Name:
    '''Return the name of the single proposal with the most votes.

    :param proposals: Proposal names with their vote counts.
    :param election: Election name, only attached to raised errors.
    :raises NoProposalsFoundError: If there are no proposals.
    :raises NoWinnerError: If no proposal has any vote.
    :raises TieError: If the highest tally is shared by two or more
        proposals. Ties are never broken.
    '''
    if not proposals:
        raise NoProposalsFoundError(election)
    best = leaders(proposals)
    max_count = dict(proposals)[best[0]]
    if max_count == 0:
        raise NoWinnerError(election)
    elif len(best) > 1:
        logger.info('%s are tied with %d votes', best, max_count)
        raise TieError(election, best)
    logger.debug('%s leads with %d votes', best[0], max_count)
    return best[0]
