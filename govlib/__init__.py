"""Govlib - an in-memory ledger for governance voting.

Govlib keeps track of named elections, each holding a set of uniquely named
proposals, accepts at most one vote per voter in each election and resolves
a single winner of an election on demand.

-   Names of elections and proposals are fixed-width byte strings; see the
    ``name`` module.
-   The ledger itself, with all operations on elections, is the
    :class:`Governance` object from the ``ledger`` module.
-   Winners are resolved by the pure functions of the ``resolve`` module;
    ties and elections without votes are reported as errors, never decided
    arbitrarily.
-   All failures are subclasses of :class:`GovernanceError` from the
    ``errors`` module and leave the ledger unchanged.
-   The ``script`` module and the commandline tool (``python -m govlib``)
    replay text scripts of operations against a ledger.
"""

from govlib.errors import GovernanceError    # noqa: F401
from govlib.ledger import Governance    # noqa: F401
from govlib.name import Name, to_name    # noqa: F401
