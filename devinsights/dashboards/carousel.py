"""
Carousel navigation for metric graph panels

Each panel (a member, a team, the organization, or an AI-usage category of
one of those) pages through its displayable graphs one at a time. Every panel
owns an independent navigator, keyed by a stable entity key.

Usage:
    from devinsights.dashboards.carousel import CarouselState, carousel_key

    state = CarouselState()
    key = carousel_key(EntityKind.TEAM, team.entity_id)
    state.invalidate(key, len(graphs), signature=graph_signature(graphs))
    state.next(key)
    print(state.position(key).label)  # "2 of 5"
"""

import logging
from collections.abc import Hashable, Iterator
from dataclasses import dataclass

from devinsights.domain.metrics import EntityKind

logger = logging.getLogger(__name__)


def carousel_key(kind: EntityKind, entity_id: str, category: str | None = None) -> str:
    """
    Build the stable key a panel's navigator is stored under.

    Examples:
        >>> carousel_key(EntityKind.TEAM, "t-1")
        'team:t-1'
        >>> carousel_key(EntityKind.MEMBER, "m-7", category="ai")
        'member:m-7:ai'
    """
    key = f"{kind.value}:{entity_id}"
    return f"{key}:{category}" if category else key


@dataclass(frozen=True)
class CarouselPosition:
    """Current position for "i of N" display (index is zero-based)."""

    index: int
    total: int

    @property
    def label(self) -> str:
        return f"{self.index + 1} of {self.total}"


class CarouselNavigator:
    """
    Wrap-around index into one panel's list of displayable graphs.

    Invariant: 0 <= index < total whenever total > 0. With total == 0 there is
    no current graph and next/prev do nothing.
    """

    def __init__(self, total: int = 0, signature: Hashable | None = None):
        if total < 0:
            raise ValueError(f"total must be >= 0, got {total}")
        self._index = 0
        self._total = total
        self._signature = signature

    @property
    def total(self) -> int:
        return self._total

    @property
    def index(self) -> int | None:
        """Current index, or None when there is nothing to show."""
        return self._index if self._total > 0 else None

    def current(self) -> int | None:
        return self.index

    def position(self) -> CarouselPosition | None:
        if self._total == 0:
            return None
        return CarouselPosition(index=self._index, total=self._total)

    def next(self) -> int | None:
        """Advance one graph, wrapping from the last to the first."""
        if self._total == 0:
            return None
        self._index = (self._index + 1) % self._total
        return self._index

    def prev(self) -> int | None:
        """Go back one graph, wrapping from the first to the last."""
        if self._total == 0:
            return None
        self._index = (self._index - 1 + self._total) % self._total
        return self._index

    def invalidate(self, new_total: int, signature: Hashable | None = None) -> int | None:
        """
        Re-sync with a recomputed graph list.

        The index resets to 0 when it no longer fits the new list, or when the
        list's contents changed (a different signature). The index is purely
        positional, so a content change invalidates it even at equal length.

        Args:
            new_total: Length of the recomputed graph list
            signature: Identity of the list contents (e.g. tuple of labels); None skips the content check

        Returns:
            The index after invalidation, or None when the list is empty
        """
        if new_total < 0:
            raise ValueError(f"new_total must be >= 0, got {new_total}")

        contents_changed = signature is not None and self._signature is not None and signature != self._signature
        if self._index >= new_total or contents_changed:
            self._index = 0

        self._total = new_total
        if signature is not None:
            self._signature = signature
        return self.index

    def reset(self) -> None:
        self._index = 0


class CarouselState:
    """
    Navigators for every panel of a dashboard view, keyed by entity key.

    Navigators are created on first use and never shared between keys.
    """

    def __init__(self):
        self._navigators: dict[str, CarouselNavigator] = {}

    def __contains__(self, key: str) -> bool:
        return key in self._navigators

    def __iter__(self) -> Iterator[str]:
        return iter(self._navigators)

    def __len__(self) -> int:
        return len(self._navigators)

    def navigator(self, key: str) -> CarouselNavigator:
        """Get (or lazily create) the navigator for a panel."""
        if key not in self._navigators:
            self._navigators[key] = CarouselNavigator()
        return self._navigators[key]

    def next(self, key: str) -> int | None:
        return self.navigator(key).next()

    def prev(self, key: str) -> int | None:
        return self.navigator(key).prev()

    def current(self, key: str) -> int | None:
        return self.navigator(key).current()

    def position(self, key: str) -> CarouselPosition | None:
        return self.navigator(key).position()

    def invalidate(self, key: str, new_total: int, signature: Hashable | None = None) -> int | None:
        return self.navigator(key).invalidate(new_total, signature=signature)

    def reset_all(self) -> None:
        """Send every panel back to its first graph (e.g. after a date range change)."""
        for navigator in self._navigators.values():
            navigator.reset()
        logger.debug(f"Reset {len(self._navigators)} carousels")

    def snapshot(self) -> dict[str, int | None]:
        """Current index per key."""
        return {key: navigator.index for key, navigator in self._navigators.items()}
