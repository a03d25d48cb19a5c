"""Night Watch - build up by day, hold the base by night.

Controls:
  Enter       Confirm / skip to night
  1 / 2 / 3   Attack up / Defense up / Heal base
  R           Undo everything bought today
  Escape      Quit
"""
from __future__ import annotations

import argparse
import sys

import pygame

from night_watch.config import GameConfig
from night_watch.engine import Engine
from night_watch.input import Button
from night_watch.ui.constants import KEY_BINDINGS, LOG_H, TITLE
from night_watch.ui.log_panel import EventLogPanel
from night_watch.ui.screens import draw_session


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Night Watch - day/night base defense")
    p.add_argument("--seed", type=int, default=None, help="Random seed (default: random)")
    p.add_argument("--tps", type=int, default=60, help="Ticks (frames) per second (default: 60)")
    p.add_argument("--day-seconds", type=float, default=10.0,
                   help="Length of the day phase in seconds (default: 10)")
    p.add_argument("--night-seconds", type=float, default=5.0,
                   help="Length of the night phase in seconds (default: 5)")
    p.add_argument("--chronicle", type=str, default=None,
                   metavar="FILE", help="Save JSONL chronicle to FILE on quit")
    return p.parse_args(argv)


def sample_buttons(keys) -> set[Button]:
    """Translate a pygame key-state snapshot into held logical buttons."""
    return {
        button for button, codes in KEY_BINDINGS.items()
        if any(keys[code] for code in codes)
    }


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    config = GameConfig(
        tps=args.tps,
        day_seconds=args.day_seconds,
        night_seconds=args.night_seconds,
    )
    engine = Engine(config, seed=args.seed)

    # JSONL chronicle recorder (opt-in via --chronicle)
    chronicle = None
    if args.chronicle:
        from night_watch.chronicle import ChronicleRecorder
        chronicle = ChronicleRecorder(engine.bus, lambda: engine.clock.tick_number)

    log_panel = EventLogPanel()
    log_panel.attach(engine.bus)

    pygame.init()
    screen = pygame.display.set_mode((config.window_width, config.window_height + LOG_H))
    pygame.display.set_caption(TITLE)
    play_area = screen.subsurface((0, 0, config.window_width, config.window_height))
    log_rect = pygame.Rect(0, config.window_height, config.window_width, LOG_H)
    clock = pygame.time.Clock()
    fonts = {
        "title": pygame.font.SysFont("sans", 48, bold=True),
        "body": pygame.font.SysFont("sans", 16),
        "log": pygame.font.SysFont("monospace", 12),
    }

    running = True
    while running:
        clock.tick(config.tps)

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

        engine.step(sample_buttons(pygame.key.get_pressed()))
        if engine.stop_requested:
            running = False

        view = engine.view()
        draw_session(play_area, fonts, view, config.entity_size)
        log_panel.draw(screen, fonts["log"], log_rect, view)
        pygame.display.flip()

    pygame.quit()

    if chronicle is not None and args.chronicle:
        n = chronicle.write(args.chronicle)
        print(f"Chronicle: {n} events over {len(chronicle.by_day())} days written to {args.chronicle}")

    sys.exit()


if __name__ == "__main__":
    main()
