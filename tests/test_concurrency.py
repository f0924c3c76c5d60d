import sys
import os
import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

sys.path.append(os.path.join(os.path.dirname(__file__), '..'))
import govlib.errors
from govlib.ledger import Governance
from govlib.name import to_name

N_THREADS = 16


def _attempt(func, *args):
    try:
        func(*args)
    except govlib.errors.GovernanceError as e:
        return e
    return None


def test_same_voter_concurrently():
    gov = Governance()
    gov.add_proposals_to_election('E1', ['A', 'B'])
    barrier = threading.Barrier(N_THREADS)

    def vote(i):
        barrier.wait()
        return _attempt(gov.vote, 'E1', 'AB'[i % 2], 'V1')

    with ThreadPoolExecutor(max_workers=N_THREADS) as pool:
        outcomes = list(pool.map(vote, range(N_THREADS)))
    assert outcomes.count(None) == 1
    assert all(
        isinstance(out, govlib.errors.AlreadyVotedError)
        for out in outcomes if out is not None
    )
    assert sum(count for _, count in gov.get_proposals('E1')) == 1


def test_many_voters_concurrently():
    gov = Governance()
    gov.add_proposals_to_election('E1', ['A'])
    n_voters = 400
    with ThreadPoolExecutor(max_workers=N_THREADS) as pool:
        outcomes = list(pool.map(
            lambda i: _attempt(gov.vote, 'E1', 'A', f'V{i}'),
            range(n_voters)
        ))
    assert outcomes == [None] * n_voters
    assert gov.get_proposals('E1') == [(to_name('A'), n_voters)]


def test_same_proposal_batch_concurrently():
    gov = Governance()
    barrier = threading.Barrier(N_THREADS)

    def add(i):
        barrier.wait()
        return _attempt(gov.add_proposals_to_election, 'E1', ['A', f'P{i}'])

    with ThreadPoolExecutor(max_workers=N_THREADS) as pool:
        outcomes = list(pool.map(add, range(N_THREADS)))
    assert outcomes.count(None) == 1
    winner_i = outcomes.index(None)
    assert gov.get_proposals('E1') == [
        (to_name('A'), 0), (to_name(f'P{winner_i}'), 0)
    ]


@pytest.mark.parametrize('n_elections', [2, 8])
def test_elections_independent(n_elections):
    gov = Governance()
    for i in range(n_elections):
        gov.add_proposals_to_election(f'E{i}', ['A'])
    with ThreadPoolExecutor(max_workers=N_THREADS) as pool:
        list(pool.map(
            lambda i: gov.vote(f'E{i % n_elections}', 'A', 'V1'),
            range(n_elections)
        ))
    for i in range(n_elections):
        assert gov.winner_name(f'E{i}') == to_name('A')
