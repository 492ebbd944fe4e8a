import pytest

from mazemouse.dfs import DepthFirstSolver, Node
from mazemouse.vehicles import LandBasedTracked

_STEPS = ((-1, 0), (0, 1), (1, 0), (0, -1))  # N, E, S, W as (row, col)


class FakeSimulator:
    """Simulated maze in (row, col) cells; only listed passages are open."""

    def __init__(self, passages, row=15, col=0, heading=0):
        self.passages = {frozenset(pair) for pair in passages}
        self.row, self.col, self.heading = row, col, heading
        self.commands = []

    def _open(self, heading):
        dr, dc = _STEPS[heading % 4]
        here = (self.row, self.col)
        return frozenset({here, (self.row + dr, self.col + dc)}) in self.passages

    def wall_front(self):
        self.commands.append(("wallFront",))
        return not self._open(self.heading)

    def wall_right(self):
        self.commands.append(("wallRight",))
        return not self._open(self.heading + 1)

    def wall_left(self):
        self.commands.append(("wallLeft",))
        return not self._open(self.heading + 3)

    def turn_left(self):
        self.commands.append(("turnLeft",))
        self.heading = (self.heading + 3) % 4

    def turn_right(self):
        self.commands.append(("turnRight",))
        self.heading = (self.heading + 1) % 4

    def move_forward(self, distance=1):
        self.commands.append(("moveForward",))
        if not self._open(self.heading):
            raise AssertionError("drove into a wall")
        dr, dc = _STEPS[self.heading]
        self.row += dr
        self.col += dc

    def set_wall(self, x, y, direction):
        self.commands.append(("setWall", x, y, direction))

    def set_color(self, x, y, color):
        self.commands.append(("setColor", x, y, color))

    def clear_all_color(self):
        self.commands.append(("clearAllColor",))


def corridor():
    cells = [(row, 0) for row in range(15, 7, -1)] + [(8, col) for col in range(1, 8)]
    return cells, list(zip(cells, cells[1:]))


def make(passages, row=15, col=0, heading=0, direction="N"):
    sim = FakeSimulator(passages, row, col, heading)
    robot = LandBasedTracked(name="Husky", x=row, y=col, direction=direction, api=sim)
    solver = DepthFirstSolver(sim)
    return sim, robot, solver


def test_node_defaults():
    node = Node()
    assert node.parent == (0, 0)
    assert node.children == []
    assert node.dist == 0


def test_solve_corridor_reaches_goal():
    cells, passages = corridor()
    sim, robot, solver = make(passages)
    solver.solve(robot)
    assert solver.end_goal == (8, 7)
    assert (robot.x, robot.y) == (8, 7)
    assert (sim.row, sim.col) == (8, 7)
    assert robot.direction == "E"
    assert sim.commands[-1] == ("setColor", 7, 7, "r")


def test_visited_count_matches_visited_cells():
    cells, passages = corridor()
    sim, robot, solver = make(passages)
    solver.solve(robot)
    marked = {(r, c) for r in range(16) for c in range(16) if solver.visited[r][c]}
    assert solver.visited_count == len(marked)
    assert marked == set(cells[:-1])


def test_backtrack_follows_corridor():
    cells, passages = corridor()
    sim, robot, solver = make(passages)
    solver.solve(robot)
    sim.commands.clear()
    path = solver.backtrack(solver.end_goal, solver.node_master)
    assert path[0] == (8, 7)
    assert path[-1] == (15, 0)
    assert set(path) == set(cells)
    for (r1, c1), (r2, c2) in zip(path, path[1:]):
        assert abs(r1 - r2) + abs(c1 - c2) == 1
    blue = [cmd for cmd in sim.commands if cmd[0] == "setColor" and cmd[3] == "b"]
    assert len(blue) == len(cells) - 1


def test_navigate_turns_around_for_cell_behind():
    sim, robot, solver = make([((10, 5), (11, 5))], row=10, col=5, heading=0)
    robot.x, robot.y = 10, 5
    solver.robot = robot
    sim.commands.clear()
    solver.navigate((10, 5), (11, 5))
    assert sim.commands == [("turnLeft",), ("turnLeft",), ("moveForward",)]
    assert (robot.x, robot.y, robot.direction) == (11, 5, "S")


def test_navigate_right_turn():
    sim, robot, solver = make([((10, 5), (10, 6))], row=10, col=5, heading=0)
    solver.robot = robot
    sim.commands.clear()
    solver.navigate((10, 5), (10, 6))
    assert sim.commands == [("wallRight",), ("turnRight",), ("moveForward",)]
    assert robot.direction == "E"


def test_navigate_blocked_sets_flag_and_stays():
    sim, robot, solver = make([], row=10, col=5, heading=0)
    robot.x, robot.y = 10, 5
    solver.robot = robot
    solver.path_blocked = False
    solver.navigate((10, 5), (9, 5))
    assert solver.path_blocked is True
    assert (robot.x, robot.y, robot.direction) == (10, 5, "N")
    assert ("moveForward",) not in sim.commands


def test_navigate_ignores_non_adjacent_cell():
    sim, robot, solver = make([], row=10, col=5)
    solver.robot = robot
    sim.commands.clear()
    solver.navigate((10, 5), (12, 5))
    assert sim.commands == []


def test_find_neighbours_pushes_open_cells():
    sim, robot, solver = make([])
    solver.find_neighbours((15, 0), "N")
    node = solver.node_master[15][0]
    assert node.children == [(15, 1), (14, 0)]
    assert solver.node_master[15][1].parent == (15, 0)
    assert solver.node_master[14][0].parent == (15, 0)
    assert solver.visited_count == 1
    assert solver.is_visited((15, 0))


def test_find_neighbours_only_expands_once():
    sim, robot, solver = make([])
    solver.find_neighbours((5, 5), "E")
    first = list(solver.node_master[5][5].children)
    solver.find_neighbours((5, 5), "E")
    assert solver.node_master[5][5].children == first
    assert solver.visited_count == 1
    assert (5, 4) not in first


def test_is_visited_out_of_range_raises():
    sim, robot, solver = make([])
    with pytest.raises(IndexError):
        solver.is_visited((-1, 0))
    with pytest.raises(IndexError):
        solver.is_explored((0, 16))


def test_set_defaults_colours():
    sim, robot, solver = make([])
    solver.temp_goal = True
    sim.commands.clear()
    solver.set_defaults()
    assert solver.temp_goal is False
    assert sim.commands[0] == ("clearAllColor",)
    assert sim.commands[1] == ("setColor", 0, 0, "g")
    whites = [cmd for cmd in sim.commands if cmd[0] == "setColor" and cmd[3] == "w"]
    assert len(whites) == len(solver.goals)


def test_clear_stack():
    sim, robot, solver = make([])
    solver.stack.extend([(1, 1), (2, 2)])
    solver.clear_stack()
    assert solver.stack == []