"""Change tracking and undo/redo history.

An OperationBuilder collects the cell writes of one gesture, applying
each to the grid as it arrives. When the gesture ends the builder is
finalized into an Operation, which is the unit History moves between its
undo and redo stacks.
"""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field, replace

from termipaint.core.cell import Cell
from termipaint.core.constants import UNDO_LIMIT
from termipaint.core.grid import Grid

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CellChange:
    """Net effect of a gesture at one grid position."""
    x: int
    y: int
    before: Cell
    after: Cell


@dataclass(frozen=True)
class Operation:
    """
    The coalesced, (y, x)-sorted changes of one gesture.

    Replaying `apply_before` restores the grid as it was before the
    gesture; `apply_after` restores it as it was right after.
    """
    changes: tuple[CellChange, ...] = ()

    def is_empty(self) -> bool:
        """Check if this operation changes nothing."""
        return not self.changes

    def __len__(self) -> int:
        return len(self.changes)

    def apply_before(self, grid: Grid) -> None:
        """Write every change's `before` cell into the grid."""
        for change in self.changes:
            grid.set(change.x, change.y, change.before)

    def apply_after(self, grid: Grid) -> None:
        """Write every change's `after` cell into the grid."""
        for change in self.changes:
            grid.set(change.x, change.y, change.after)


class OperationBuilder:
    """
    Accumulates a coalesced diff while a gesture is in progress.

    The first write to a position records what was there (`before`);
    later writes only move `after`. Writes that would not change the
    grid are ignored entirely.

    Example:
        builder = OperationBuilder()
        for p in bresenham_line(start, end):
            builder.apply(grid, p.x, p.y, Cell.of('#', Color.RED))
        history.push(builder.into_operation())
    """

    def __init__(self) -> None:
        self._changes: dict[tuple[int, int], CellChange] = {}

    def __len__(self) -> int:
        return len(self._changes)

    def is_empty(self) -> bool:
        """Check if no position has been recorded yet."""
        return not self._changes

    def apply(self, grid: Grid, x: int, y: int, new_cell: Cell) -> None:
        """Write `new_cell` at (x, y) and record the change.

        Off-grid positions and writes equal to the current cell are no-ops.
        """
        current = grid.get_signed(x, y)
        if current is None or current == new_cell:
            return

        key = (x, y)
        change = self._changes.get(key)
        if change is None:
            self._changes[key] = CellChange(x, y, before=current, after=new_cell)
        else:
            self._changes[key] = replace(change, after=new_cell)

        grid.set(x, y, new_cell)

    def into_operation(self) -> Operation:
        """Finalize the recorded changes into an Operation.

        Positions painted back to their original value during the gesture
        (before == after) are dropped, so an operation never carries
        entries that change nothing.
        """
        changes = sorted(
            (c for c in self._changes.values() if c.before != c.after),
            key=lambda c: (c.y, c.x),
        )
        return Operation(tuple(changes))


@dataclass
class History:
    """
    Bounded linear undo/redo history of Operations.

    Pushing a new operation discards everything on the redo stack. Once
    more than `capacity` operations are stored, the oldest are dropped.
    """
    capacity: int = UNDO_LIMIT
    _undo: deque[Operation] = field(default_factory=deque, repr=False)
    _redo: list[Operation] = field(default_factory=list, repr=False)

    @property
    def undo_depth(self) -> int:
        """Number of operations that can be undone."""
        return len(self._undo)

    @property
    def redo_depth(self) -> int:
        """Number of operations that can be redone."""
        return len(self._redo)

    def can_undo(self) -> bool:
        return bool(self._undo)

    def can_redo(self) -> bool:
        return bool(self._redo)

    def push(self, op: Operation) -> None:
        """Record a finished operation; empty operations are ignored."""
        if op.is_empty():
            return

        self._undo.append(op)
        self._redo.clear()

        while len(self._undo) > self.capacity:
            self._undo.popleft()
            logger.debug("History full (%d), dropped oldest operation", self.capacity)

    def undo(self, grid: Grid) -> bool:
        """Revert the most recent operation.

        Returns:
            False when there is nothing to undo
        """
        if not self._undo:
            return False
        op = self._undo.pop()
        op.apply_before(grid)
        self._redo.append(op)
        logger.debug("Undid operation of %d changes", len(op))
        return True

    def redo(self, grid: Grid) -> bool:
        """Re-apply the most recently undone operation.

        Returns:
            False when there is nothing to redo
        """
        if not self._redo:
            return False
        op = self._redo.pop()
        op.apply_after(grid)
        self._undo.append(op)
        logger.debug("Redid operation of %d changes", len(op))
        return True

    def clear(self) -> None:
        """Forget all undo and redo entries."""
        self._undo.clear()
        self._redo.clear()
