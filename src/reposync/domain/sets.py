"""Set helpers over plain lists of repo names.

Lists are kept (not converted to ``set``) so that order and duplicates of the
left operand survive, which keeps the planned actions in listing order.
"""

from typing import Iterable, List, Sequence


def contains(items: Iterable[str], element: str) -> bool:
    """Whether ``element`` is in ``items`` (exact string match)."""
    for item in items:
        if item == element:
            return True
    return False


def difference(a: Sequence[str], b: Sequence[str]) -> List[str]:
    """Return ``a - b``, keeping the order and duplicates of ``a``."""
    return [item for item in a if not contains(b, item)]
