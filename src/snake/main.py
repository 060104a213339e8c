# main.py
import argparse
import pygame # type: ignore

from src.snake.config import Config, FONT_SIZE
from src.snake.controls import handle_input
from src.snake.game import Game
from src.snake.render import Renderer
from src.snake.scheduler import FixedTickScheduler


def parse_args(argv=None) -> Config:
    defaults = Config()
    parser = argparse.ArgumentParser(description="Play snake.")
    parser.add_argument("--width", type=int, default=defaults.board_w, help="board width in cells")
    parser.add_argument("--height", type=int, default=defaults.board_h, help="board height in cells")
    parser.add_argument("--cell-size", type=int, default=defaults.cell_size, help="pixels per cell")
    parser.add_argument("--tick-rate", type=int, default=defaults.tick_rate, help="snake steps per second")
    parser.add_argument("--fps", type=int, default=defaults.render_fps, help="frame cap")
    parser.add_argument("--seed", type=int, default=None, help="seed apple placement")
    parser.add_argument("--debug", action="store_true", help="print phase changes")
    args = parser.parse_args(argv)

    try:
        return Config(
            board_w=args.width,
            board_h=args.height,
            cell_size=args.cell_size,
            tick_rate=args.tick_rate,
            render_fps=args.fps,
            seed=args.seed,
            debug=args.debug,
        )
    except ValueError as e:
        parser.error(str(e))


class PhaseLog:
    """Prints each phase change once, whether input or a tick caused it."""

    def __init__(self, game: Game, enabled: bool):
        self.last = game.phase
        self.enabled = enabled

    def __call__(self, game: Game) -> None:
        if game.phase is self.last:
            return
        if self.enabled:
            print(f"[SNAKE] {self.last.value} -> {game.phase.value}, score={game.score}")
        self.last = game.phase


def step(game: Game, renderer: Renderer) -> None:
    """One scheduler tick: simulate, then draw whatever the phase."""
    game.tick()
    renderer.draw(game.snapshot())


def main(argv=None):
    cfg = parse_args(argv)

    pygame.init()
    font = pygame.font.SysFont(None, FONT_SIZE)
    screen = pygame.display.set_mode(cfg.window_size)
    pygame.display.set_caption("Snake")
    clock = pygame.time.Clock()

    game = Game(cfg)
    renderer = Renderer(screen, cfg, font)
    log_phase = PhaseLog(game, cfg.debug)
    print(f"[SNAKE] {cfg.board_w}x{cfg.board_h} board, {cfg.tick_rate} ticks/s, seed={cfg.seed}")

    def on_tick():
        step(game, renderer)
        log_phase(game)
        pygame.display.flip()

    scheduler = FixedTickScheduler(cfg.tick_rate, on_tick)
    scheduler.start(pygame.time.get_ticks())
    renderer.draw(game.snapshot())
    pygame.display.flip()

    running = True
    while running:
        # 1) input
        running = handle_input(game, on_key=log_phase)
        if not running:
            break

        # 2) update + render, gated on the tick rate
        scheduler.pump(pygame.time.get_ticks())

        clock.tick(cfg.render_fps)

    scheduler.stop()
    print(f"[SNAKE] Bye. Final score: {game.score}")
    pygame.quit()

if __name__ == "__main__":
    main()
