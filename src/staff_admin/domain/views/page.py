"""Paged read model."""

from dataclasses import dataclass, field
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass
class PageResult(Generic[T]):
    """One page of a filtered listing.

    `total` counts every row matching the filter, not just this page.
    """

    total: int
    records: list[T] = field(default_factory=list)
