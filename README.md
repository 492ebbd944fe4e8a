# mazemouse

Two micromouse solvers for 16 × 16 mazes. Both drive a maze simulator through
a text protocol on standard input and output. Each command goes out as one line
on standard output. The simulator's replies are read back from standard input
as whitespace-separated words. Progress messages are logged to standard error.

## Installation

```
pip install .
```

## Solvers

### Greedy scoring solver

```
mazemouse-greedy
```

The mouse starts in the lower-left corner, facing north. Every cell starts with
a score that is highest near the centre (`mazemouse.greedy.initial_score`), and
the scores are written into the simulator's cells as text.

At each step the mouse senses the walls around it and reports them to the
simulator. Then it moves:

- In a dead end it turns round, and the cell is marked `X`.
- In a corridor it follows the only opening.
- At a junction it moves to the open neighbour with the highest score.

Scores change as the mouse moves:

- Each move lowers the score of the cell it leaves.
- A cell reached three times at even intervals is taken as a loop and loses more points.
- A junction gains a bonus the first time the mouse reaches it.
- Dead-end cells are never chosen at a junction.

The run stops when the mouse stands on one of the four centre cells.

### Depth-first search solver

```
mazemouse-dfs
```

A tracked robot starts in the bottom-left cell facing north. It explores the
maze depth first and records the walls it senses in a `Maze`. It stops at the
first centre cell it reaches and marks that cell red. It then follows the
recorded parents back to the start, colouring the path blue, and logs how many
cells it expanded.

## Library use

- `mazemouse.api.SimulatorAPI` speaks the simulator protocol. It reads from and
  writes to the text streams it is given, or to stdin and stdout by default.
  - Queries: `maze_width`, `maze_height`, `wall_front`, `wall_right`,
    `wall_left`, `was_reset`.
  - Movement: `move_forward`, `turn_left`, `turn_right`.
  - Display: `set_wall`, `clear_wall`, `set_color`, `clear_color`,
    `clear_all_color`, `set_text`, `clear_text`, `clear_all_text`.
  - Reset: `ack_reset`.
- `mazemouse.api.SimulatorError` is raised in two cases:
  - `move_forward` gets any reply other than `ack`.
  - The input stream ends while a reply is still expected.
- `mazemouse.greedy.GreedySolver(api)` is the scoring solver:
  - `think` senses the walls and makes one move.
  - `move` turns and steps one cell.
  - `run` plays until the mouse reaches the centre.
- `mazemouse.robot.LandBasedRobot` is a robot with a grid cell (`x`, `y`) and a
  heading (`direction`). `move_forward`, `turn_left` and `turn_right` are passed
  on to the simulator.
- `mazemouse.vehicles.LandBasedTracked` and `mazemouse.vehicles.LandBasedWheeled`
  are its tracked and wheeled variants.
- `mazemouse.maze.Maze` holds the known walls as `north`, `south`, `east` and
  `west` grids:
  - The outer boundary is walled from the start.
  - `read_walls` records what the sensors report.
  - `color_path` colours a cell blue.
- `mazemouse.dfs.DepthFirstSolver(api)` is the depth-first solver:
  - `solve(robot)` explores until a goal cell is reached, stored in `end_goal`.
  - `backtrack(node, nodes)` returns the path from that cell back to the start.

## What this package does not do

There is no maze simulator and no maze-file reader here. Both solvers only work
when connected to a simulator that answers the commands above. The grid size is
fixed at 16 × 16.

## Running the tests

```
pip install ".[test]"
pytest
```