from __future__ import annotations

import argparse
from typing import Dict, Optional

import pygame

from falling_block_rl.game import FallingBlockGame, GameConfig, Intent
from .renderer import Renderer


KEY_TO_INTENT: Dict[int, Intent] = {
    pygame.K_LEFT: Intent.MOVE_LEFT,
    pygame.K_RIGHT: Intent.MOVE_RIGHT,
    pygame.K_UP: Intent.ROTATE_UP,
}

FAST_DROP_KEY = pygame.K_DOWN


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser()
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--cell-size", type=int, default=18)
    p.add_argument("--fps", type=int, default=60)
    p.add_argument("--game-over", action="store_true",
                   help="End the game when a new piece spawns onto occupied cells")
    return p


def run(seed: Optional[int] = None, cell_size: int = 18, fps: int = 60, game_over: bool = False) -> None:
    pygame.init()
    try:
        clock = pygame.time.Clock()
        game = FallingBlockGame(GameConfig(random_seed=seed, detect_game_over=game_over))
        renderer = Renderer(cell_size=cell_size)

        screen = pygame.display.set_mode(renderer.window_size(game.get_state()))
        pygame.display.set_caption("Falling Block - Human Play")
        font = pygame.font.SysFont(None, 24)

        running = True
        while running:
            dt = clock.tick(fps) / 1000.0

            # Input handling: one intent per key press
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key == pygame.K_r:
                        game.reset()
                    else:
                        intent = KEY_TO_INTENT.get(event.key)
                        if intent is not None:
                            game.apply(intent)
            game.set_fast_drop(pygame.key.get_pressed()[FAST_DROP_KEY])

            # Gravity
            game.update(dt)

            # Render
            renderer.draw(screen, game.get_state())
            if game.game_over:
                text = font.render("Game Over - R to restart, ESC to quit", True, (255, 255, 255))
                rect = text.get_rect(center=(screen.get_width() // 2, renderer.margin // 2 + 2))
                screen.blit(text, rect)
            pygame.display.flip()
    finally:
        pygame.quit()


def main() -> None:
    args = build_parser().parse_args()
    run(seed=args.seed, cell_size=args.cell_size, fps=args.fps, game_over=args.game_over)


if __name__ == "__main__":  # pragma: no cover
    main()
