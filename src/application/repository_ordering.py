"""Display ordering: explicit priority first, then most recently pushed."""

from datetime import datetime, timezone
from functools import cmp_to_key
from typing import List, Sequence

from src.domain.name_rules import PriorityOrder
from src.domain.repository import Repository

# Repositories that were never pushed sort after everything else
_NEVER_PUSHED = datetime.min.replace(tzinfo=timezone.utc)


def _pushed_at(repo: Repository) -> datetime:
    return repo.pushed_at or _NEVER_PUSHED


def order_repositories(repositories: Sequence[Repository], priority: PriorityOrder) -> List[Repository]:
    """
    Return repositories in display order.

    Prioritized repositories come first, in the order ``priority`` lists them.
    The rest follow by push time, newest first. The sort is stable, so equal
    push times keep their incoming order.
    """

    def compare(a: Repository, b: Repository) -> int:
        a_index = priority.index_of(a.name)
        b_index = priority.index_of(b.name)

        # Both prioritized: by priority position
        if a_index is not None and b_index is not None:
            return (a_index > b_index) - (a_index < b_index)

        # Only one prioritized: it comes first
        if a_index is not None:
            return -1
        if b_index is not None:
            return 1

        # Neither: newest push first
        a_pushed, b_pushed = _pushed_at(a), _pushed_at(b)
        return (a_pushed < b_pushed) - (a_pushed > b_pushed)

    return sorted(repositories, key=cmp_to_key(compare))
