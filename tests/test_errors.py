import sys
import os

import pytest

sys.path.append(os.path.join(os.path.dirname(__file__), '..'))
import govlib.errors


@pytest.mark.parametrize(('code', 'message'), [
    ('PROPOSAL_EXISTS', 'Proposal name already exists.'),
    ('PROPOSAL_NOT_FOUND', 'Proposal not found.'),
    ('ALREADY_VOTED', 'Already voted.'),
    ('NO_PROPOSALS_FOUND', 'No proposals found.'),
    ('NO_WINNER', 'Must have at least one vote.'),
    ('TIE', 'Multiple Winners Found.'),
])
def test_messages(code, message):
    err_cls = govlib.errors.ERRORS[code]
    err = err_cls('E1')
    assert isinstance(err, govlib.errors.GovernanceError)
    assert err.code == code
    assert str(err) == message
    assert err.election == 'E1'


def test_context_attributes():
    err = govlib.errors.TieError('E1', ['A', 'B'])
    assert err.tied == ['A', 'B']
    assert str(err) == 'Multiple Winners Found.'
    assert govlib.errors.AlreadyVotedError('E1', 'V1').voter == 'V1'
    assert govlib.errors.ProposalExistsError('E1', 'A').proposal == 'A'
    assert govlib.errors.ProposalNotFoundError('E1', 'B').proposal == 'B'
