# main.py
import argparse
import logging

import pygame  # type: ignore

from .config import Config, Difficulty, DEFAULT_DIFFICULTY
from .input import InputRouter
from .render import Renderer, window_size
from .session import Session
from .storage import BestScoreStore

logger = logging.getLogger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Grid snake")
    parser.add_argument(
        "--difficulty",
        type=str,
        default=DEFAULT_DIFFICULTY.value,
        help=f"one of {', '.join(d.value for d in Difficulty)}",
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for food placement")
    parser.add_argument(
        "--best-score-file",
        type=str,
        default=None,
        help="where the best score is kept (default: ~/.gridsnake/scores.json)",
    )
    parser.add_argument("--log-level", type=str, default="INFO")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    cfg = Config(seed=args.seed)

    pygame.init()
    font = pygame.font.SysFont(None, 24)
    screen = pygame.display.set_mode(window_size(cfg), pygame.RESIZABLE)
    pygame.display.set_caption("Snake")
    clock = pygame.time.Clock()

    session = Session(BestScoreStore(args.best_score_file), cfg=cfg, difficulty=args.difficulty)
    renderer = Renderer(screen, font, cfg)
    session.add_renderer(renderer)
    router = InputRouter(session, button_at=renderer.hit_test)
    session.render()
    logger.info("Best score so far: %d", session.state.best_score)

    running = True
    while running:
        # frames belong to the run that was active before this batch of events
        ticket = session.ticket

        # 1) input
        for event in pygame.event.get():
            if event.type == pygame.VIDEORESIZE:
                renderer.resize(pygame.display.get_surface())
                continue
            if not router.handle_event(event):
                running = False
                break
        if not running:
            break

        # 2) update + render, gated by the pacer
        now = pygame.time.get_ticks()
        session.frame(now, ticket)
        renderer.refresh(now)

        clock.tick(60)  # high FPS; movement gated by the pacer

    pygame.quit()


if __name__ == "__main__":
    main()
