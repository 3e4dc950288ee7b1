"""
Path engine - shortest routes from our head to a goal cell.

A* over the 4-connected grid with unit edge cost and a Manhattan
heuristic. Every cell is expanded at most once, so a search never touches
more than width * height cells. "No path" is returned as None.
"""

import heapq
import itertools
import logging
from dataclasses import dataclass
from typing import AbstractSet, Dict, List, Optional, Sequence, Tuple

from domain.constants import UP, DOWN, LEFT, RIGHT
from domain.coord import Coord
from domain.game_state import GameState
from domain.grid import Grid, build_obstacles

logger = logging.getLogger(__name__)

FOOD_GOAL = "food"
TAIL_GOAL = "tail"


@dataclass(frozen=True)
class PlannedPath:
    """
    A route chosen by the goal policy.

    Attributes:
        goal: target cell
        path: cells from our head to the goal, both inclusive
        kind: FOOD_GOAL or TAIL_GOAL
    """

    goal: Coord
    path: Tuple[Coord, ...]
    kind: str

    @property
    def steps(self) -> int:
        return len(self.path) - 1

    def directions(self) -> List[str]:
        return path_to_directions(self.path)


def astar(
    grid: Grid,
    start: Coord,
    goal: Coord,
    obstacles: AbstractSet[Coord],
) -> Optional[List[Coord]]:
    """
    Shortest path from start to goal avoiding obstacles.

    Returns:
        The path including both ends, or None if the goal is unreachable.
    """
    if start == goal:
        return [start]
    if not grid.in_bounds(goal) or grid.is_obstacle(goal, obstacles):
        return None

    # Counter keeps equal-priority pops in insertion order
    counter = itertools.count()
    open_heap = [(start.distance(goal), next(counter), start)]
    g_score: Dict[Coord, int] = {start: 0}
    came_from: Dict[Coord, Coord] = {}
    closed = set()

    while open_heap:
        _, _, current = heapq.heappop(open_heap)
        if current == goal:
            return _reconstruct(came_from, current)
        if current in closed:
            continue
        closed.add(current)

        next_g = g_score[current] + 1
        for neighbour in grid.passable_neighbours(current, obstacles):
            if neighbour in closed:
                continue
            if next_g < g_score.get(neighbour, grid.cell_count + 1):
                g_score[neighbour] = next_g
                came_from[neighbour] = current
                heapq.heappush(open_heap, (next_g + neighbour.distance(goal), next(counter), neighbour))

    return None


def _reconstruct(came_from: Dict[Coord, Coord], current: Coord) -> List[Coord]:
    path = [current]
    while current in came_from:
        current = came_from[current]
        path.append(current)
    path.reverse()
    return path


def path_to_directions(path: Sequence[Coord]) -> List[str]:
    """
    Turn a path into moves by comparing consecutive cells: equal x is a
    vertical step, equal y a horizontal one.
    """
    directions = []
    for current, following in zip(path, path[1:]):
        if current.x == following.x and current.y != following.y:
            directions.append(UP if following.y > current.y else DOWN)
        elif current.y == following.y and current.x != following.x:
            directions.append(RIGHT if following.x > current.x else LEFT)
    return directions


def choose_goal_path(
    game_state: GameState,
    obstacles: Optional[AbstractSet[Coord]] = None,
) -> Optional[PlannedPath]:
    """
    Pick the goal for this turn and route to it.

    With no food on the board we chase our own tail. Otherwise every food
    cell is searched and the one with the fewest steps wins; on a tie the
    food listed first wins.
    """
    board = game_state.board
    you = game_state.you
    grid = Grid.for_board(board)
    if obstacles is None:
        obstacles = build_obstacles(board, you)

    if not board.food:
        path = astar(grid, you.head, you.tail, obstacles)
        if path is None:
            logger.debug(f"No route to our tail at {you.tail}")
            return None
        return PlannedPath(goal=you.tail, path=tuple(path), kind=TAIL_GOAL)

    best: Optional[PlannedPath] = None
    for food in board.food:
        # Manhattan distance is a lower bound, so this food cannot beat best
        if best is not None and you.head.distance(food) >= best.steps:
            continue
        path = astar(grid, you.head, food, obstacles)
        if path is None:
            continue
        if best is None or len(path) - 1 < best.steps:
            best = PlannedPath(goal=food, path=tuple(path), kind=FOOD_GOAL)

    if best is None:
        logger.debug(f"No reachable food among {len(board.food)} cells")
    return best
