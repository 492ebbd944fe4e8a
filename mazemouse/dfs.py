"""Depth-first exploration of a 16 x 16 maze towards one of the centre cells.

Cells are (row, column) pairs with row 0 at the top of the maze; the robot
starts in the bottom-left cell (15, 0) facing north.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from .api import SimulatorAPI
from .maze import MAZE_SIZE, Maze
from .robot import LandBasedRobot
from .vehicles import LandBasedTracked

log = logging.getLogger(__name__)

Cell = tuple[int, int]

_LAST = MAZE_SIZE - 1
_HEADINGS = "NESW"
_STEP_HEADINGS = {(-1, 0): "N", (1, 0): "S", (0, -1): "W", (0, 1): "E"}


@dataclass
class Node:
    """Search bookkeeping for one cell: its parent and the children still to try."""

    dist: int = 0
    north: bool = False
    south: bool = False
    east: bool = False
    west: bool = False
    parent: Cell = (0, 0)
    children: list[Cell] = field(default_factory=list)


def _node_grid() -> list[list[Node]]:
    return [[Node() for _ in range(MAZE_SIZE)] for _ in range(MAZE_SIZE)]


def _flag_grid() -> list[list[bool]]:
    return [[False] * MAZE_SIZE for _ in range(MAZE_SIZE)]


def _lookup(grid: list[list[bool]], node: Cell) -> bool:
    row, col = node
    if not (0 <= row < MAZE_SIZE and 0 <= col < MAZE_SIZE):
        raise IndexError(f"cell {node} lies outside the maze")
    return grid[row][col]


class DepthFirstSolver:
    """Explores the maze depth first while driving a robot through it."""

    def __init__(self, api: SimulatorAPI | None = None):
        self.api = api if api is not None else SimulatorAPI()
        self.path_found = False
        self.need_newpath = True
        self.temp_goal = False
        self.path_blocked = True
        self.visited_count = 0
        self.maze = Maze(self.api)
        self.current_direction = "N"
        self.block_direction = ""
        self.current_node: Cell = (0, 0)
        self.parent_node: Cell = (0, 0)
        self.stack: list[Cell] = []
        self.robot: LandBasedRobot | None = None
        self.path_stack: list[Cell] = []
        self.node_info = _node_grid()
        self.node_master = _node_grid()
        self.explored = _flag_grid()
        self.visited = _flag_grid()
        self.goals: tuple[Cell, ...] = ((8, 7), (8, 8), (7, 8), (7, 7))
        self.end_goal: Cell = (0, 0)

    def is_explored(self, node: Cell) -> bool:
        """Whether the cell has been marked explored."""
        return _lookup(self.explored, node)

    def is_visited(self, node: Cell) -> bool:
        """Whether the search has already expanded the cell."""
        return _lookup(self.visited, node)

    def clear_stack(self) -> None:
        self.stack.clear()

    def set_defaults(self) -> None:
        """Reset the display: start cell green, goal cells white."""
        self.temp_goal = False
        self.api.clear_all_color()
        self.api.set_color(0, 0, "g")
        for row, col in self.goals:
            self.api.set_color(col, _LAST - row, "w")

    def _node(self, cell: Cell) -> Node:
        row, col = cell
        return self.node_master[row][col]

    def solve(self, robot: LandBasedRobot) -> None:
        """Drive `robot` depth first until it stands on a goal cell."""
        self.robot = robot
        direction = robot.direction
        current: Cell = (robot.x, robot.y)
        self._node(current).parent = current

        self.set_defaults()
        while True:
            self.maze.read_walls(current, direction)
            self.find_neighbours(current, direction)
            node = self._node(current)
            if node.children:
                next_node = node.children.pop()
                log.info("Child Node: %d, %d", *next_node)
            else:
                next_node = node.parent
                log.info("Next is Parent Node: %d, %d", *next_node)
            self.navigate(current, next_node)

            direction = self.robot.direction
            current = next_node

            if current in self.goals:
                self.set_defaults()
                self.end_goal = current
                self.api.set_color(current[1], _LAST - current[0], "r")
                return

    def navigate(self, current: Cell, next_node: Cell) -> None:
        """Turn the robot towards an adjacent cell and step into it if no wall is in the way."""
        step = (next_node[0] - current[0], next_node[1] - current[1])
        target = _STEP_HEADINGS.get(step)
        heading = self.robot.direction
        if target is None or heading not in _HEADINGS:
            return
        turn = (_HEADINGS.index(target) - _HEADINGS.index(heading)) % 4
        row, col = next_node

        if turn == 2:
            self.robot.turn_left()
            self.robot.turn_left()
            self.robot.move_forward(row, col, target)
            return

        wall = {0: self.api.wall_front, 1: self.api.wall_right, 3: self.api.wall_left}[turn]
        if wall():
            self.path_blocked = True
            return
        if turn == 1:
            self.robot.turn_right()
        elif turn == 3:
            self.robot.turn_left()
        self.robot.move_forward(row, col, target)

    def find_neighbours(self, node: Cell, direction: str) -> None:
        """On the first visit to `node`, queue its open neighbours as children."""
        if self.is_visited(node):
            return
        row, col = node
        self.visited[row][col] = True
        self.visited_count += 1

        maze = self.maze
        candidates = (
            ((row, col + 1), col + 1 <= _LAST, maze.east[row][col], "W"),
            ((row - 1, col), row - 1 >= 0, maze.north[row][col], "S"),
            ((row, col - 1), col - 1 >= 0, maze.west[row][col], "E"),
            ((row + 1, col), row + 1 <= _LAST, maze.south[row][col], "N"),
        )
        master = self._node(node)
        for neighbour, inside, walled, excluded in candidates:
            if self.temp_goal or not inside or walled or direction == excluded:
                continue
            master.children.append(neighbour)
            if not self.is_visited(neighbour):
                self._node(neighbour).parent = node

    def backtrack(self, node: Cell, nodes: list[list[Node]]) -> list[Cell]:
        """Follow parents from `node` back to the start, colouring the path.

        Returns the accumulated path stack; its last element is the start cell.
        """
        parent = nodes[node[0]][node[1]].parent
        self.path_stack.append(node)
        while node != parent:
            self.maze.color_path(node)
            node = parent
            parent = nodes[node[0]][node[1]].parent
            self.path_stack.append(node)
        return list(self.path_stack)


def main(argv=None) -> int:
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    log.info("-----------------------------> Start <------------------------------")
    api = SimulatorAPI()
    robot = LandBasedTracked(name="Husky", api=api)
    solver = DepthFirstSolver(api)
    solver.solve(robot)
    solver.backtrack(solver.end_goal, solver.node_master)
    log.info("Total Nodes Explored: %d", solver.visited_count)
    log.info("----------------------------> The End <-----------------------------")
    return 0