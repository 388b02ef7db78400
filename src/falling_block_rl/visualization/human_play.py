from __future__ import annotations

import argparse
from typing import Callable, Dict, Optional

import pygame

from falling_block_rl.game import FallingBlockGame, GameConfig, GameStatus
from .gravity import GravityTimer
from .renderer import Renderer


def key_bindings(game: FallingBlockGame) -> Dict[int, Callable[[], bool]]:
    return {
        pygame.K_LEFT: game.move_left,
        pygame.K_a: game.move_left,
        pygame.K_RIGHT: game.move_right,
        pygame.K_d: game.move_right,
        pygame.K_DOWN: game.soft_drop,
        pygame.K_s: game.soft_drop,
        pygame.K_UP: game.rotate,
        pygame.K_w: game.rotate,
        pygame.K_SPACE: game.hard_drop,
        pygame.K_p: game.toggle_pause,
        pygame.K_ESCAPE: game.toggle_pause,
        pygame.K_RETURN: game.start,
        pygame.K_r: game.start,
    }


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Play the falling block game with the keyboard")
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--cell-size", type=int, default=28)
    p.add_argument("--fps", type=int, default=60)
    return p


def run(argv: Optional[list[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    pygame.init()
    try:
        clock = pygame.time.Clock()
        game = FallingBlockGame(GameConfig(random_seed=args.seed))
        renderer = Renderer(cell_size=args.cell_size)
        screen = pygame.display.set_mode(renderer.window_size(game.config.width, game.config.height))
        pygame.display.set_caption("Falling Blocks")

        bindings = key_bindings(game)
        gravity = GravityTimer()

        running = True
        while running:
            dt = clock.tick(args.fps)
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_q:
                        running = False
                        continue
                    command = bindings.get(event.key)
                    if command is None:
                        continue
                    status_before = game.status
                    command()
                    if game.status is GameStatus.PLAYING and status_before is not GameStatus.PLAYING:
                        gravity.reset()

            # Gravity only runs while playing
            if game.status is GameStatus.PLAYING:
                for _ in range(gravity.update(dt, game.gravity_interval_ms)):
                    game.tick()
                    if game.status is not GameStatus.PLAYING:
                        break

            renderer.draw(screen, game.snapshot())
    finally:
        pygame.quit()
    if game.status is not GameStatus.IDLE:
        print(f"Score: {game.score}  Level: {game.level}  Lines: {game.lines_cleared_total}")


if __name__ == "__main__":  # pragma: no cover
    run()
