# ecsgame

A small entity-component-system (ECS) game framework, with a top-down arcade
shooter built on it. Drawing, windows and input use pygame.

## Installing

```
pip install .
```

To run the tests, install the `test` extra:

```
pip install ".[test]"
pytest
```

## Playing the shooter

```
ecsgame-shooter [--width 1280] [--height 720] [--font PATH]
```

This opens a window, 1280×720 by default. `--font` sets the path of a
TrueType font for the on-screen text. Without it, pygame's default font is
used.

Controls:

- **W / S**: move up and down
- **A / D**: move left and right
- **Left mouse button**: fire a bullet toward the pointer
- **F1**: turn drawing of the game objects on or off
- **F2**: turn user input on or off
- **F3**: turn enemy spawning on or off
- **F4**: turn collisions on or off
- **+ / -**: change how many enemies each wave brings, from 1 to 20

A wave of enemies appears every five seconds. Each enemy has between three
and six sides. A bullet that hits a large enemy scores 100 points per side,
and the enemy splits into small fragments that fade and vanish after a few
seconds. Bullets also vanish after a few seconds. If an enemy touches you,
your score drops to zero and you respawn in the centre.

## Using the framework

Each part can be used on its own:

- `ecsgame.vec2.Vec2`: a 2-D vector with arithmetic operators, `dist`,
  `length`, `normalize` and `copy`.
- `ecsgame.action.Action`: an action name paired with a phase (`START` or
  `END`).
- `ecsgame.animation.Animation`: frame state for a horizontal sprite strip.
- `ecsgame.components`: the component data classes `CTransform`, `CShape`,
  `CBBox`, `CCollision`, `CGravity`, `CInput`, `CLifespan`, `CState` and
  `CAnimation`, and a `Color` type.
- `ecsgame.entity.Entity` and `ecsgame.entity_manager.EntityManager`. You
  create entities with `add_entity(tag)`. They become visible after the next
  `update()`, which also removes destroyed entities. `entities()` lists every
  live entity, and `entities(tag)` lists those with one tag.
- `ecsgame.shooter.ShooterGame`: the shooter's rules with no window attached.
  The clock and the random generator can be injected. `step()` advances the
  game by one frame.
- `ecsgame.shooter_app.ShooterApp`: the pygame front end that the
  `ecsgame-shooter` command runs.
- `ecsgame.assets.Assets`: named textures, animations and fonts. Its
  `load_from_file(path)` reads a whitespace-separated list of entries:
  `Texture <name> <path>`, `Animation <name> <texture> <frames> <speed>` and
  `Font <name> <path>`.
- `ecsgame.scene.Scene`, `ecsgame.scene_menu.SceneMenu`,
  `ecsgame.scene_play.ScenePlay` and `ecsgame.game_engine.GameEngine`: a
  scene-based engine that binds keys to actions. `GameEngine(path)` loads the
  asset list, opens a window and starts on the menu scene. The menu needs a
  font named `roboto`. The play scene needs a font named `Tech` and the
  animations `Brick`, `Block`, `Question` and `WizardStand`.
- `ecsgame.editable`: `EditableCircle` and `EditableRect`, shapes that bounce
  around the screen with a caption at their centre.
- `ecsgame.physics`: `get_overlap` and `get_previous_overlap` for entities
  with bounding boxes.

```python
from ecsgame.entity_manager import EntityManager

manager = EntityManager()
player = manager.add_entity("player")
manager.update()
assert manager.entities("player") == [player]
player.destroy()
manager.update()
assert manager.entities("player") == []
```

## What it does not do

The scene engine is only a framework. It has no command of its own, and no
asset files ship with the package.

- The menu moves its selection, but its `ChangeScene` binding does not start
  a level.
- `ScenePlay` ignores the contents of the level file. It always places the
  player and the same three tiles.
- `ScenePlay` applies gravity and movement but does not resolve collisions
  between the player and the tiles.