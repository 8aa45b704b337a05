"""
Interactive play with keyboard controls.

Wires pygame keyboard events to game Actions and settings changes, then
hands each frame's timestamp to the GameLoop. Rendering happens through
the loop so performance mode can throttle it.
"""

from __future__ import annotations

import logging
import random
from typing import Any

try:
    import pygame
except ImportError:
    pygame = None  # type: ignore[assignment]

from neontris.game.tetris import GAME_OVER_DELAY, Action, TetrisGame
from neontris.loop import NORMAL_FPS, GameLoop
from neontris.renderer import TetrisRenderer
from neontris.settings import DROP_INTERVAL_KEY_STEP, Settings, SettingsController

logger = logging.getLogger(__name__)


# ── Keyboard mapping ─────────────────────────────────────────────────────
# Arrow keys move/drop/rotate, Z rotates counter-clockwise, Space hard
# drops, P pauses.
KEY_MAP: dict[int, Action] = {}
if pygame is not None:
    KEY_MAP = {
        pygame.K_LEFT: Action.LEFT,
        pygame.K_RIGHT: Action.RIGHT,
        pygame.K_DOWN: Action.SOFT_DROP,
        pygame.K_UP: Action.ROTATE_CW,
        pygame.K_z: Action.ROTATE_CCW,
        pygame.K_SPACE: Action.HARD_DROP,
        pygame.K_p: Action.TOGGLE_PAUSE,
    }


def handle_settings_key(key: int, controller: SettingsController) -> bool:
    """Apply a settings hotkey.

    Returns:
        True if the key was a settings key.
    """
    if key == pygame.K_F2:
        controller.toggle_performance_mode()
        logger.info("Performance mode %s", "on" if controller.settings.performance_mode else "off")
    elif key == pygame.K_g:
        controller.toggle_neon_glow()
    elif key == pygame.K_MINUS:
        controller.adjust_drop_interval(-DROP_INTERVAL_KEY_STEP)
    elif key == pygame.K_EQUALS:
        controller.adjust_drop_interval(DROP_INTERVAL_KEY_STEP)
    else:
        return False
    return True


def play_manual(config: dict[str, Any], seed: int | None = None) -> None:
    """Run the game in a pygame window until the player quits.

    Controls:
      - Left/Right arrow: move piece
      - Down arrow: soft drop
      - Up arrow: rotate clockwise
      - Z: rotate counter-clockwise
      - Space: hard drop
      - P: pause / resume
      - F2: performance mode, G: neon glow, -/=: drop speed
      - Escape / close window: quit

    Args:
        config: Config dict loaded from settings.yaml.
        seed: Optional seed for the piece sequence.

    Raises:
        ImportError: If pygame is not installed.
    """
    if pygame is None:
        raise ImportError("pygame is required for play mode. Install it: pip install pygame")

    settings = Settings.from_config(config)
    game = TetrisGame(
        board_width=config.get("board_width", 12),
        board_height=config.get("board_height", 20),
        drop_interval=settings.drop_interval,
        rng=random.Random(seed),
        game_over_delay=config.get("game_over_delay", GAME_OVER_DELAY),
    )
    renderer = TetrisRenderer(game, settings, cell_size=config.get("cell_size", 30))
    loop = GameLoop(game, render=renderer.render)
    controller = SettingsController(settings, game, loop)
    # Force renderer init before the event loop (pygame must be initialized for event.get())
    renderer.render()

    clock = pygame.time.Clock()
    fps = config.get("fps", NORMAL_FPS)

    game.reset()
    loop.start(pygame.time.get_ticks())
    logger.info("Game started (seed=%s)", seed)

    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
                break
            if event.type != pygame.KEYDOWN:
                continue
            if event.key == pygame.K_ESCAPE:
                running = False
                break
            if handle_settings_key(event.key, controller):
                continue
            action = KEY_MAP.get(event.key)
            if action is not None:
                game.handle(action)

        if not running:
            break

        loop.tick(pygame.time.get_ticks())
        clock.tick(fps)

    logger.info("Quit with score %d", game.score)
    renderer.close()
