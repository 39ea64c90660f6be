# sc2kit

Building blocks for bots that play a real-time strategy game: 2D/3D geometry, distance queries
over collections of positions, records for static game data and map information, and lookup
tables for races, unit aliases, tech requirements and producers.

The package has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `sc2kit.geometry`

- `Point2(x, y)`: immutable 2D point. Supports `+`, `-`, `*`, `/` with another `Point2` or a
  number, unary `-`, and unpacking (`x, y = p`). Methods: `towards`, `towards_angle`, `offset`,
  `circle_intersection` (two points, or `None` when the points are in the same cell or the
  circles do not meet), `len_squared`, `length`, `normalize`, `rotate`, `rotate90`, `dot`,
  `round` (halves away from zero), `floor`, `ceil`, `abs`, `neighbors4`, `neighbors4diagonal`,
  `neighbors8`, `as_tuple`, `to3`, `to_cell`.
  Two `Point2` values are equal, and hash equally, when their coordinates truncated to integers
  match, i.e. when they lie in the same grid cell.
- `Point3(x, y, z)`: immutable 3D point with the same arithmetic, plus `offset`, `round`
  (adds one half to each coordinate and truncates), `as_tuple` and `to2`.
- `Size(x, y)` and `Rect(x0, y0, x1, y1)`: integer sizes and rectangles.
- `cell_center(x, y)`: the centre point of grid cell `(x, y)`.

### `sc2kit.distance`

Positions may be `Point2`, `Point3` (height ignored) or pairs of numbers.

- `distance`, `distance_squared`, `is_closer(a, dist, b)`, `is_further(a, dist, b)`.
- Over collections: `closer` and `further` (generators), `closest` (first of equals),
  `furthest` (last of equals), `closest_distance`, `furthest_distance`,
  `closest_distance_squared`, `furthest_distance_squared` (all `None` for an empty collection),
  `sort_by_distance` (stable, returns a list) and `center` (mean position or `None`).

### `sc2kit.game_data`

- Enums: `Race`, `AbilityTarget`, `Attribute`, `TargetType`.
- Records: `Cost`, `Weapon`, `AbilityData`, `UnitTypeData` (with `cost()`), `UpgradeData`
  (with `cost()`), `BuffData`, `EffectData`, `GameData`.
- `effect_target(name)` and `effect_friendly_fire(name)`: which targets an effect hits and
  whether it harms allies, by effect name.
- `game_data_from_mapping(data)`: builds `GameData` from a decoded data response with the
  lists `abilities`, `units`, `upgrades`, `buffs` and `effects`. Entries without an integer id
  are skipped; unknown enum values raise `ValueError`.

### `sc2kit.game_info`

- `PlayerInfo` and `GameInfo`. `GameInfo.map_center` defaults to the centre of
  `playable_area`, and `map_name_path` to the file name of `local_map_path`.
- `map_center(area)`: centre of a `Rect` in whole grid units.
- `map_name_from_path(path)`: the map file name without its extension; raises `ValueError`
  when the path has no file name.

### `sc2kit.techtree`

Unit types are named by their game identifiers, such as `"CommandCenter"`.

- Constants: `GAME_SPEED`, `FRAMES_PER_SECOND`, `ANTI_ARMOR_BUFF`, `ANTI_ARMOR_TARGET`,
  `INTERFERENCE_MATRIX_BUFF`, `INHIBITOR_IDS`, `NOT_A_UNIT`.
- `RaceValues` and `race_values(race)`: starting townhall, all townhalls, gas buildings, supply
  provider and worker of a race (empty values for races without their own).
- `burrowed_form`, `tech_aliases`, `unit_alias`, `tech_requirement`, `producer`: lookups that
  return `None` (or an empty tuple for `tech_aliases`) for unknown units.

## Example

```python
from sc2kit.geometry import Point2
from sc2kit.distance import closest, sort_by_distance, center
from sc2kit.game_data import Race
from sc2kit.techtree import race_values, producer

base = Point2(10.0, 10.0)
targets = [Point2(30.0, 5.0), Point2(12.0, 14.0), Point2(50.0, 50.0)]

nearest = closest(targets, base)            # Point2(12.0, 14.0)
ordered = sort_by_distance(targets, base)
middle = center(targets)
step = base.towards(nearest, 2.0)

worker = race_values(Race.ZERG).worker      # "Drone"
made_by = producer("Marine")                # "Barracks"
```

## What it does not do

The package holds data and calculations only. It does not connect to or control a game
client, does not record or send debug commands, keeps no per-step observation state, and has
no tables of producer aliases, researchers, damage bonuses, speed modifiers or weapon data.