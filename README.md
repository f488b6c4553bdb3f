# basketbots

Ten robots move around a court at random. Each one shoots its ball at the
other team's hoop. A shot follows projectile motion under gravity. The
package also has a second, separate program that draws a small grid world
with walls, danger tiles and a goal.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## The basketball simulation

```
basketbots [--seed N]
```

This opens a window and draws the court from above. Red robots aim at the
blue hoop and blue robots aim at the red hoop. A ball that is in the air is
drawn larger the higher it flies. `--seed` fixes the random choices so that
a run can be repeated.

| Key          | Effect                                        |
|--------------|-----------------------------------------------|
| Space        | raise the camera (zooms the view out)         |
| Left Shift   | lower the camera (zooms the view in)          |
| Escape       | quit                                          |

Closing the window also quits.

How the robots behave:

- A robot walks in a straight line for 10 to 200 frames. Its heading is a
  multiple of 15°. Its speed is 1, 2, 4, 5 or 6 m/s. It then picks a new
  heading and a new speed.
- A robot is kept 0.5 m inside the 10 m × 20 m court.
- In each frame a robot that is holding its ball shoots with a chance of
  10 %. It picks a launch speed of 1 to 8 m/s and takes the high-arc angle
  that reaches the hoop. If the hoop is out of range at that speed, no shot
  is taken.
- A ball that leaves the court or drops below the floor goes back to its
  robot.

## The grid-world viewer

```
basketbots-grid
```

This opens a window that shows a fixed 6 × 8 map. The tiles are drawn as
follows:

| Tile   | Drawn as          |
|--------|-------------------|
| State  | light grey        |
| Wall   | black             |
| Danger | red, marked "P"   |
| Goal   | green, marked "M" |

A robot is drawn as a blue circle in the top-left cell. Press Escape or
close the window to quit.

## Using the library

```python
import random

from basketbots.stadium import Stadium

stadium = Stadium(random.Random(1), 1 / 60)
for _ in range(600):
    stadium.update(1 / 60)

for robot in stadium.robots:
    print(robot.team.name, robot.position, robot.ball.is_shooting)
```

The main building blocks:

- `basketbots.geometry.Vec3`: an immutable 3-D vector (y points up), along
  with the court dimensions and the hoop positions.
- `basketbots.ball.Ball`: a ball that a robot holds, or that flies under
  gravity once `launch` is called.
- `basketbots.robot.Robot` and `basketbots.robot.Team`: robot motion and
  shooting.
- `basketbots.robot.shot_elevation(velocity, horizontal_dist, dy)`: the
  high-arc elevation angle that hits a target, or `None` when the target is
  out of range.
- `basketbots.camera.Camera`: the viewer height, changed with `rise()` and
  `lower()`.
- `basketbots.view.draw_stadium` and `basketbots.gridview.draw_map`: draw
  onto any pygame surface.
- `basketbots.gridworld.parse_grid`, `GridMap` and `GridRobot`: the grid
  world. `parse_grid` raises `ValueError` on an unknown tile symbol, and
  `GridMap.tile_at` raises `IndexError` outside the map.

`GridRobot.collect(tile)` adds the reward for a tile and returns the new
total:

- Goal: +10
- Danger: −0.5
- Any other tile: +0.1

## What it does not do

- The court is drawn flat, from above. There is no 3-D view.
- Balls are not scored. Nothing checks whether a shot goes through a hoop,
  and no score is kept.
- In the grid world the robot stays where it starts. Nothing moves it
  between cells, and no policy or value function is computed for the map.
  `Direction` and `GridRobot.collect` are there for code that does this.