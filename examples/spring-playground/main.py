"""Spring Playground — damping regimes side by side.

Exercises tick-spring and tick-signal on top of the tick engine.

Three orbs chase the same target with the same frequency: underdamped,
critically damped and overdamped. Each orb flashes when its spring settles.

Controls:
  Click   Move the target to the cursor
  Up/Down Adjust spring frequency
  R       Scatter the target randomly
  Esc     Quit
"""
from __future__ import annotations

import random
import sys

import pygame

from tick import Engine, TickFlavor
from tick_spring import FrameClock, Spring, make_clock_system

# --- Configuration ---
SCREEN_W, SCREEN_H = 900, 600
STATUS_H = 36
FPS = 60
TPS = 60
TITLE = "Spring Playground — tick-spring demo"

ORB_RADIUS = 14
FLASH_FRAMES = 12
MIN_FREQUENCY = 0.25
MAX_FREQUENCY = 4.0

BG_COLOR = (20, 20, 30)
STATUS_BG = (35, 35, 50)
TEXT_COLOR = (200, 200, 210)
TARGET_COLOR = (255, 255, 255)
FLASH_COLOR = (255, 255, 255)

# (label, damping ratio, color)
REGIMES = [
    ("underdamped 0.25", 0.25, (255, 160, 40)),
    ("critical 1.0", 1.0, (60, 220, 80)),
    ("overdamped 2.5", 2.5, (0, 220, 220)),
]


class Orb:
    """One spring-driven orb plus its settle flash counter."""

    def __init__(self, label: str, damping: float, color, clock: FrameClock, start) -> None:
        self.label = label
        self.color = color
        self.flash = 0
        self.settled_count = 0
        self.spring = Spring(start, frequency=1.0, damping=damping, clock=clock)
        self.spring.on_complete.connect(self._on_settled)

    def _on_settled(self) -> None:
        self.flash = FLASH_FRAMES
        self.settled_count += 1


class PlaygroundState:
    """Holds the engine, the frame clock and the orbs."""

    def __init__(self) -> None:
        # presentation-frame ticks, so springs listen on render_stepped
        self.engine = Engine(tps=TPS, flavor=TickFlavor.DRIVING)
        self.clock = FrameClock(TickFlavor.DRIVING)
        self.engine.add_system(make_clock_system(self.clock))

        self.frequency = 1.0
        self.target = (SCREEN_W / 2, (SCREEN_H - STATUS_H) / 2)
        start = (SCREEN_W / 2, 40.0)
        self.orbs = [
            Orb(label, damping, color, self.clock, start)
            for label, damping, color in REGIMES
        ]
        self.retarget(self.target)

    def retarget(self, target) -> None:
        self.target = target
        for orb in self.orbs:
            orb.spring.set_target(target, frequency=self.frequency)

    def scatter(self) -> None:
        x = random.uniform(ORB_RADIUS, SCREEN_W - ORB_RADIUS)
        y = random.uniform(ORB_RADIUS, SCREEN_H - STATUS_H - ORB_RADIUS)
        self.retarget((x, y))

    def adjust_frequency(self, delta: float) -> None:
        self.frequency = max(MIN_FREQUENCY, min(self.frequency + delta, MAX_FREQUENCY))
        self.retarget(self.target)


def draw(screen: pygame.Surface, font: pygame.font.Font, state: PlaygroundState) -> None:
    screen.fill(BG_COLOR)

    tx, ty = state.target
    pygame.draw.circle(screen, TARGET_COLOR, (int(tx), int(ty)), ORB_RADIUS + 6, 1)

    for orb in state.orbs:
        x, y = orb.spring.value
        fill = FLASH_COLOR if orb.flash > 0 else orb.color
        pygame.draw.circle(screen, fill, (int(x), int(y)), ORB_RADIUS)
        if orb.flash > 0:
            orb.flash -= 1

    pygame.draw.rect(screen, STATUS_BG, (0, SCREEN_H - STATUS_H, SCREEN_W, STATUS_H))
    parts = [f"freq {state.frequency:.2f}"]
    for orb in state.orbs:
        mark = "active" if orb.spring.active else "settled"
        parts.append(f"{orb.label}: {mark} x{orb.settled_count}")
    text = font.render("  |  ".join(parts), True, TEXT_COLOR)
    screen.blit(text, (10, SCREEN_H - STATUS_H + 10))


def main() -> None:
    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
    pygame.display.set_caption(TITLE)
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 13)

    state = PlaygroundState()

    tick_interval = 1.0 / TPS
    accumulator = 0.0
    running = True

    while running:
        dt = clock.tick(FPS) / 1000.0
        accumulator += dt

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_r:
                    state.scatter()
                elif event.key == pygame.K_UP:
                    state.adjust_frequency(0.25)
                elif event.key == pygame.K_DOWN:
                    state.adjust_frequency(-0.25)
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                mx, my = event.pos
                if my < SCREEN_H - STATUS_H:
                    state.retarget((float(mx), float(my)))

        # --- Tick ---
        while accumulator >= tick_interval:
            state.engine.step()
            accumulator -= tick_interval

        # --- Render ---
        draw(screen, font, state)
        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
