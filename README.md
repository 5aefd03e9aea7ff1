# dungeonui

The user interface layer of a dungeon role-playing game, drawn with pygame.
It holds the screens and panels a player sees and the state machine that
moves between them. The game itself (hero, monsters, map, combat rules) is
supplied by the caller; the interface reads from and acts on the objects it
is given.

## Components

- `dungeonui.ui_manager.UIManager` – owns every screen and panel, tracks the
  current `UIState` (`MAIN_MENU`, `GAMEPLAY`, `BATTLE`, `LEVEL_UP`,
  `EQUIPMENT_SELECTION`, `LEVEL_TRANSITION`), the current level, and the exit
  `Portal` that opens in a wall next to the hero once a level's monsters or
  bosses are all beaten. Standing next to the portal and pressing space or
  enter starts a two-second transition, loads the next level and opens the
  level-up panel with 30 points.
- `dungeonui.main_menu.MainMenu` – title screen with Start Game, Load Game,
  Options, Credits and Quit Game buttons; the choices are recorded in
  `start_game_selected`, `load_game_selected` and `quit_selected`, and the
  page showing is a `MenuState`.
- `dungeonui.game_hud.GameHUD` – health and experience bars, strength and
  mana, level and monster/treasure counters, and armour, weapon and spell
  slots with tooltips.
- `dungeonui.map_renderer.MapRenderer` – a tile view of the map through a
  `dungeonui.camera.Camera` that eases towards the hero, plus a minimap.
- `dungeonui.battle_panel.BattlePanel` – turn-based combat with Weapon, Spell
  and Flee buttons, alternating player and monster turns and a battle log of
  the last eight lines. Results are `BattleResult` values.
- `dungeonui.equipment_panel.EquipmentPanel` – the equipped item and a newly
  found one side by side; clicking the left keeps the current one, clicking
  the right equips the new one, escape closes. Helpers `bonus_difference`,
  `level_difference`, `difference_color`, `level_difference_color` and
  `wrap_words` are available on their own.
- `dungeonui.level_up_panel.LevelUpPanel` – spends points on each `Stat`
  (strength, mana, health) with +/- buttons or typed digits (at most two per
  field); Confirm is only enabled when exactly 30 points are allocated, and
  calls `hero.level_up(strength, mana, health)`.
- `dungeonui.portal_finder` – `find_nearest_wall_position` and the wall and
  line-of-sight checks behind it.
- `dungeonui.hud_layout` – HUD positions (`hp_bar_bounds`, `xp_bar_bounds`,
  the slot button bounds, `tooltip_rect`) and `wrap_name`, `format_bonus`.
- Widgets `dungeonui.button.Button` and `dungeonui.progress_bar.ProgressBar`,
  and in `dungeonui.core` the `Rect`, `Color`, `Position` and `InputState`
  types and `ease_out_cubic`.

## What the caller provides

Objects are read by attribute:

- the hero: `position` (a `Position`), `inventory` (`armor`, which may be
  `None`, `weapon`, `spell`, and `new_armor`, `new_weapon`, `new_spell`),
  `name`, `level`, `health`, `max_health`, `xp`, `strength`, `mana`,
  `is_defeated()`, `restore_health_after_battle()` and `level_up(...)`;
- items: `name`, `level`, `bonus` and `item_type` (`"ARMOR"`, `"WEAPON"` or
  `"SPELL"`, or an `ItemType`);
- the map: `load_from_file(path, tag)` with tags such as `[LEVEL_1]`,
  `width`, `height`, `cell(position)` returning `'#'` for walls and `'.'`
  for floor, `is_passable(x, y)`, and lists `monsters` and `treasures`
  whose entries have a `position`; monsters also have `name`, `level`,
  `health`, `max_health`, `is_boss` and `is_defeated()`;
- the attack system: `perform_attack(attacker, defender, attack_type)`
  returning the damage and `reward_experience(player, monster)`.

## Installation

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## Usage

Logic and drawing are separate. Each frame, collect the input into an
`InputState` (mouse position, whether the left button was pressed, the names
of keys pressed as `pygame.key.name` gives them, typed characters, frame
time and elapsed time), update, then draw onto a pygame surface.
`UIManager`, `MainMenu`, `GameHUD` and `BattlePanel` take
`update(delta_time, inputs)`; `LevelUpPanel` and `EquipmentPanel` take
`update(inputs)`; `MapRenderer` takes `update(delta_time)`.

```python
import pygame

from dungeonui.core import InputState
from dungeonui.ui_manager import UIManager


def run(hero, game_map, attack_system):
    pygame.init()
    screen = pygame.display.set_mode((1400, 800))
    ui = UIManager(1400, 800, map_file_path="assets/maps/maps.txt")
    ui.hero = hero
    ui.current_map = game_map
    ui.attack_system = attack_system

    clock = pygame.time.Clock()
    elapsed = 0.0
    while not ui.should_quit:
        delta_time = clock.tick(60) / 1000.0
        elapsed += delta_time
        pressed, keys, chars = False, set(), ""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return
            if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                pressed = True
            elif event.type == pygame.KEYDOWN:
                keys.add(pygame.key.name(event.key))
            elif event.type == pygame.TEXTINPUT:
                chars += event.text
        inputs = InputState(
            mouse=pygame.mouse.get_pos(),
            mouse_pressed=pressed,
            keys_pressed=frozenset(keys),
            chars=chars,
            frame_time=delta_time,
            time=elapsed,
        )
        ui.update(delta_time, inputs)
        screen.fill((20, 20, 35))
        ui.draw(screen)
        pygame.display.flip()
```

Battles are started by the caller with `ui.start_battle(hero, monster)`, and
found items offered with `ui.show_equipment_choice(item)`.

## What this package does not do

It has no game rules, no map or save-file format, no hero or monster model
and no command to start a game: those come from the caller. It loads no
images or fonts from disk; `MapRenderer`, `GameHUD` and `MainMenu` accept
optional textures and fonts, and otherwise draw plain coloured shapes and
pygame's default font. "Load Game" starts a new game, and the options page
holds only a Back button.