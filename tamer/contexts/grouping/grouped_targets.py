"""
Group data structures for the Grouping context.

Groups and grouping results are immutable: every merge pass and sort step
returns a new GroupedTargets instead of mutating the one it was given.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Sequence, Tuple


@dataclass(frozen=True)
class Group:
    """
    A named cluster of targets.

    Attributes:
        name: Group name (unique within one GroupedTargets)
        targets: Target names in group order
        is_fallback: True for the catch-all group of ungrouped targets
    """

    name: str
    targets: Tuple[str, ...] = ()
    is_fallback: bool = False

    def __len__(self) -> int:
        return len(self.targets)


@dataclass(frozen=True)
class GroupedTargets:
    """
    Ordered sequence of groups produced by the Grouper.

    Invariant: the fallback group, when present, is non-empty, is the only group
    named `fallback_name`, and comes first.
    """

    groups: Tuple[Group, ...] = ()
    fallback_name: str = "default"

    # Lookup table, rebuilt from `groups`
    _index: Dict[str, Group] = field(default=None, init=False, repr=False, compare=False)

    def __post_init__(self):
        index = {}
        for position, group in enumerate(self.groups):
            if group.name in index:
                raise ValueError(f"Duplicate group name '{group.name}'")
            if group.is_fallback and position != 0:
                raise ValueError("Fallback group must come first")
            index[group.name] = group
        object.__setattr__(self, "_index", index)

    @classmethod
    def from_parts(
        cls,
        fallback_name: str,
        fallback_targets: Sequence[str],
        named_groups: Sequence[Group],
    ) -> "GroupedTargets":
        """
        Assemble a result from fallback targets and named groups.

        The fallback group is only included when it has targets.
        """
        groups: List[Group] = []
        if fallback_targets:
            groups.append(Group(fallback_name, tuple(fallback_targets), is_fallback=True))
        groups.extend(named_groups)
        return cls(groups=tuple(groups), fallback_name=fallback_name)

    @property
    def fallback(self) -> Optional[Group]:
        """The fallback group, or None when every target landed in a named group."""
        if self.groups and self.groups[0].is_fallback:
            return self.groups[0]
        return None

    @property
    def fallback_targets(self) -> Tuple[str, ...]:
        fallback = self.fallback
        return fallback.targets if fallback else ()

    @property
    def named_groups(self) -> Tuple[Group, ...]:
        return tuple(group for group in self.groups if not group.is_fallback)

    def names(self) -> List[str]:
        return [group.name for group in self.groups]

    def get(self, name: str) -> Optional[Group]:
        return self._index.get(name)

    def all_targets(self) -> List[str]:
        """Every target across all groups, in group order."""
        return [target for group in self.groups for target in group.targets]

    def __iter__(self) -> Iterator[Group]:
        return iter(self.groups)

    def __len__(self) -> int:
        return len(self.groups)
