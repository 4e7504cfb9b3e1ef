"""Skyline bottom-left / best-fit rectangle packing for texture atlases."""

from __future__ import annotations

import dataclasses
import enum
from dataclasses import dataclass
from typing import Iterable, NamedTuple

MAX_COORD = 0x7FFFFFFF
"""Largest supported coordinate; also the position given to rectangles that did not fit."""

_INFINITE_Y = 1 << 30


class Heuristic(enum.IntEnum):
    """How the packer chooses among candidate positions."""

    SKYLINE_BL_SORT_HEIGHT = 0
    SKYLINE_BF_SORT_HEIGHT = 1
    SKYLINE_DEFAULT = 0


@dataclass(frozen=True)
class Rect:
    """A rectangle to pack; ``x``, ``y`` and ``was_packed`` describe the result."""

    id: int
    w: int
    h: int
    x: int = 0
    y: int = 0
    was_packed: bool = False


@dataclass(slots=True)
class _Node:
    x: int
    y: int


class _Placement(NamedTuple):
    index: int
    x: int
    y: int


class RectPacker:
    """Packs rectangles into a fixed-size target using a skyline."""

    def __init__(self, width: int, height: int, num_nodes: int) -> None:
        if num_nodes < 1:
            raise ValueError("num_nodes must be at least 1")
        self.width = width
        self.height = height
        self.num_nodes = num_nodes
        self.heuristic = Heuristic.SKYLINE_DEFAULT
        # The last node is a sentinel marking the right edge.
        self._skyline = [_Node(0, 0), _Node(width, _INFINITE_Y)]
        self.align = 1
        self.allow_out_of_mem(False)

    @property
    def free_nodes(self) -> int:
        """Number of skyline nodes still available."""
        return self.num_nodes + 2 - len(self._skyline)

    def set_heuristic(self, heuristic: int) -> None:
        """Select the packing heuristic; raises ValueError for unknown values."""
        self.heuristic = Heuristic(heuristic)

    def allow_out_of_mem(self, allow: bool) -> None:
        """Choose between exact widths (may run out of nodes) and quantised widths."""
        if allow:
            self.align = 1
        else:
            self.align = (self.width + self.num_nodes - 1) // self.num_nodes

    def pack(self, rects: Iterable[Rect]) -> list[Rect]:
        """Pack the rectangles, returning them in input order with their positions."""
        items = list(rects)
        order = sorted(range(len(items)), key=lambda i: (-items[i].h, -items[i].w))
        positions: dict[int, tuple[int, int] | None] = {}
        for i in order:
            rect = items[i]
            if rect.w == 0 or rect.h == 0:
                positions[i] = (0, 0)
            else:
                placement = self._pack_rectangle(rect.w, rect.h)
                positions[i] = None if placement is None else (placement.x, placement.y)

        result = []
        for i, rect in enumerate(items):
            pos = positions[i]
            if pos is None:
                result.append(dataclasses.replace(rect, x=MAX_COORD, y=MAX_COORD, was_packed=False))
            else:
                result.append(dataclasses.replace(rect, x=pos[0], y=pos[1], was_packed=True))
        return result

    def _find_min_y(self, start: int, x0: int, width: int) -> tuple[int, int]:
        x1 = x0 + width
        min_y = 0
        waste = 0
        visited = 0
        skyline = self._skyline
        i = start
        while skyline[i].x < x1:
            node, nxt = skyline[i], skyline[i + 1]
            if node.y > min_y:
                waste += visited * (node.y - min_y)
                min_y = node.y
                if node.x < x0:
                    visited += nxt.x - x0
                else:
                    visited += nxt.x - node.x
            else:
                under = nxt.x - node.x
                if under + visited > width:
                    under = width - visited
                waste += under * (min_y - node.y)
                visited += under
            i += 1
        return min_y, waste

    def _find_best_pos(self, width: int, height: int) -> _Placement | None:
        width = width + self.align - 1
        width -= width % self.align
        if width > self.width or height > self.height:
            return None

        skyline = self._skyline
        best: int | None = None
        best_y = _INFINITE_Y
        best_waste = _INFINITE_Y

        i = 0
        while skyline[i].x + width <= self.width:
            y, waste = self._find_min_y(i, skyline[i].x, width)
            if self.heuristic == Heuristic.SKYLINE_BL_SORT_HEIGHT:
                if y < best_y:
                    best_y = y
                    best = i
            elif y + height <= self.height and (
                y < best_y or (y == best_y and waste < best_waste)
            ):
                best_y = y
                best_waste = waste
                best = i
            i += 1

        best_x = 0 if best is None else skyline[best].x

        if self.heuristic == Heuristic.SKYLINE_BF_SORT_HEIGHT:
            tail = 0
            node = 0
            while skyline[tail].x < width:
                tail += 1
            while tail < len(skyline):
                xpos = skyline[tail].x - width
                while skyline[node + 1].x <= xpos:
                    node += 1
                y, waste = self._find_min_y(node, xpos, width)
                if y + height <= self.height and y <= best_y:
                    if (
                        y < best_y
                        or waste < best_waste
                        or (waste == best_waste and xpos < best_x)
                    ):
                        best_x = xpos
                        best_y = y
                        best_waste = waste
                        best = node
                tail += 1

        if best is None:
            return None
        return _Placement(best, best_x, best_y)

    def _pack_rectangle(self, width: int, height: int) -> _Placement | None:
        res = self._find_best_pos(width, height)
        if res is None or res.y + height > self.height or self.free_nodes <= 0:
            return None

        skyline = self._skyline
        new_node = _Node(res.x, res.y + height)
        start = res.index + 1 if skyline[res.index].x < res.x else res.index

        right = res.x + width
        end = start
        while end + 1 < len(skyline) and skyline[end + 1].x <= right:
            end += 1
        rest = skyline[end]
        if rest.x < right:
            rest.x = right
        self._skyline = skyline[:start] + [new_node] + skyline[end:]
        return res