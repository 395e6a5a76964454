"""
TAMER - Target Aggregation and Menu Engine for Runners

Turns a flat list of build-tool target names into a navigable menu: targets are
clustered into named groups, every group and target gets a unique shortcut
character, and the result is laid out into a multi-column grid.

Architecture:
- Grouping Context: Group extraction, merge heuristics and ordering
- Shortcuts Context: Unique shortcut character assignment
- Layout Context: Column/row grid layout and plain text rendering
- Menu Context: Pipeline orchestration and configuration
"""

__version__ = "0.1.0"
