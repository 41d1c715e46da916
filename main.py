import logging
import sys

import pygame

from tetris_config import CONFIG, load_env
from tetris_game import Game
from tetris_input import ShiftRepeat, REPEATING, intent_for_key
from tetris_layout import compute_dims
from tetris_render import RenderAssets
from tetris_rng import make_randomizer
from tetris_stats import JsonStatsStore

log = logging.getLogger("tetris")


def recreate_window(dims, flags=pygame.DOUBLEBUF):
    try:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags, vsync=1)
    except TypeError:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags)


def main():
    load_env()
    logging.basicConfig(level=CONFIG["LOG_LEVEL"],
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN, pygame.KEYUP])

    dims = compute_dims()
    screen = recreate_window(dims)
    pygame.display.set_caption("Tetris")
    font = pygame.font.SysFont(None, 22)
    big_font = pygame.font.SysFont(None, 42)
    render = RenderAssets(dims, font, big_font)
    clock = pygame.time.Clock()

    rng = make_randomizer(CONFIG["RANDOMIZER"], CONFIG["SEED"])
    game = Game(rng=rng, stats=JsonStatsStore(CONFIG["STATS_PATH"]))
    shift = ShiftRepeat()
    log.info("starting, randomizer=%s seed=%s", CONFIG["RANDOMIZER"], CONFIG["SEED"])

    while True:
        dt = clock.tick(60)

        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                pygame.quit(); sys.exit()
            if e.type == pygame.KEYDOWN and e.key not in REPEATING:
                intent = intent_for_key(e.key)
                if intent is not None:
                    game.dispatch(intent)

        keys = pygame.key.get_pressed()
        intent = shift.intent(dt, keys[pygame.K_LEFT], keys[pygame.K_RIGHT])
        if intent is not None:
            game.dispatch(intent)

        game.tick(dt)

        render.draw(screen, game.snapshot(), game.best)
        pygame.display.flip()


if __name__ == '__main__':
    main()
