"""Ascent Viewer -- play the vertical platformer in a pygame window.

Rendering only reads ``Game.snapshot()``; keyboard state is fed through a
``QueuedInput``. Signals drive a short-lived message line in the HUD.

Controls:
  Left/Right or A/D   Steer
  Space               Timing bounce while playing, otherwise start
  Enter               Start (or restart after game over)
  P                   Pause / Resume
  Escape              Quit
"""
from __future__ import annotations

import argparse
import sys

import pygame

from ascent import GameState, PlatformKind
from ascent_game import Command, Game, GameSnapshot, QueuedInput
from ascent_leaderboard import MockLeaderboard
from ascent_signal import Signal

# --- Configuration ---
TITLE = "Ascent"
SCALE = 2
MESSAGE_MS = 1500.0

# Colors
BG_COLOR = (24, 22, 44)
HUD_COLOR = (220, 220, 235)
PLAYER_COLOR = (255, 200, 60)
SHIELD_COLOR = (90, 200, 255)
TACO_COLOR = (240, 170, 40)
PLATFORM_COLORS = {
    PlatformKind.NORMAL: (110, 200, 110),
    PlatformKind.SPRING: (255, 120, 200),
    PlatformKind.SUPERSPRING: (255, 60, 120),
    PlatformKind.MINISPRING: (200, 160, 255),
    PlatformKind.MOVING: (100, 170, 255),
    PlatformKind.BREAKING: (170, 120, 80),
    PlatformKind.CLOUD: (235, 235, 245),
    PlatformKind.EVIL: (220, 40, 40),
}
POWERUP_COLORS = {
    "corn": (250, 230, 90),
    "shield": SHIELD_COLOR,
    "magnet": (230, 90, 90),
}
PARTICLE_COLORS = {
    "danger": (255, 60, 60),
    "victory": (255, 240, 120),
    "spark": (255, 150, 220),
    "boost": (0, 255, 136),
}


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Ascent -- pygame viewer")
    p.add_argument("--seed", type=int, default=None, help="Level seed (default: random)")
    p.add_argument("--scale", type=int, default=SCALE, help="Window scale (default: 2)")
    return p.parse_args()


def _rect(x: float, y: float, w: float, h: float, cam_y: float, scale: int) -> pygame.Rect:
    return pygame.Rect(int(x * scale), int((y - cam_y) * scale), int(w * scale), int(h * scale))


def draw_world(screen: pygame.Surface, snap: GameSnapshot, scale: int) -> None:
    cam_y = snap.camera.y
    for platform in snap.platforms:
        color = PLATFORM_COLORS[platform.kind]
        pygame.draw.rect(screen, color, _rect(platform.x, platform.y, platform.width,
                                              platform.height, cam_y, scale))

    for item in snap.collectibles:
        if item.collected:
            continue
        cx, cy = item.center
        if item.powerup is None:
            color = TACO_COLOR
        else:
            color = POWERUP_COLORS[item.powerup.value]
        pygame.draw.circle(screen, color, (int(cx * scale), int((cy - cam_y) * scale)),
                           int(item.width / 2 * scale))

    for p in snap.particles:
        color = PARTICLE_COLORS.get(p.kind, HUD_COLOR)
        faded = tuple(int(c * p.alpha) for c in color)
        pygame.draw.circle(screen, faded, (int(p.x * scale), int((p.y - cam_y) * scale)),
                           max(1, int(p.size * scale / 2)))

    player = snap.player
    body = _rect(player.x, player.y, player.width, player.height, cam_y, scale)
    pygame.draw.rect(screen, PLAYER_COLOR, body)
    if player.has_shield:
        pygame.draw.ellipse(screen, SHIELD_COLOR, body.inflate(10 * scale, 10 * scale), 2)


def draw_hud(screen: pygame.Surface, font: pygame.font.Font, snap: GameSnapshot,
             message: str) -> None:
    lines = [f"Score: {snap.score}   Best: {snap.best_score}"]
    if snap.combo:
        lines.append(f"Combo x{snap.combo + 1}")
    for active in snap.powerups:
        lines.append(f"{active.kind.value}: {active.time_left_ms / 1000:.1f}s")
    if message:
        lines.append(message)
    for i, line in enumerate(lines):
        surf = font.render(line, True, HUD_COLOR)
        screen.blit(surf, (10, 8 + i * 20))

    overlay = {
        GameState.WAITING: "Press Space to start",
        GameState.PAUSED: "Paused - P to resume",
        GameState.GAME_OVER: f"Game over ({snap.end_reason}) - Space to retry",
    }.get(snap.state)
    if overlay:
        surf = font.render(overlay, True, HUD_COLOR)
        rect = surf.get_rect(center=(screen.get_width() // 2, screen.get_height() // 2))
        screen.blit(surf, rect)


def main() -> None:
    args = parse_args()
    scale = max(1, args.scale)

    source = QueuedInput()
    game = Game(seed=args.seed, leaderboard=MockLeaderboard(latency=0.2),
                input_source=source)
    canvas = game.config.canvas

    pygame.init()
    screen = pygame.display.set_mode((canvas.width * scale, canvas.height * scale))
    pygame.display.set_caption(TITLE)
    pg_clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 14)

    message = [""]
    message_left = [0.0]

    def flash(name: str, data: dict) -> None:
        text = {
            Signal.MILESTONE_CROSSED.value: "Milestone!",
            Signal.NEW_PERSONAL_BEST.value: "New personal best!",
            Signal.HAZARD_DEFEATED.value: f"Hazard defeated +{data.get('bonus')}",
            Signal.PERFECT_BOUNCE.value: f"Perfect bounce +{data.get('bonus')}",
            Signal.POWERUP_ACTIVATED.value: f"{data.get('kind')} activated",
            Signal.SCORE_SUBMITTED.value: "Score submitted",
            Signal.SCORE_SUBMISSION_FAILED.value: "Score not submitted",
        }[name]
        message[0] = text
        message_left[0] = MESSAGE_MS

    for signal in (Signal.MILESTONE_CROSSED, Signal.NEW_PERSONAL_BEST, Signal.HAZARD_DEFEATED,
                   Signal.PERFECT_BOUNCE, Signal.POWERUP_ACTIVATED, Signal.SCORE_SUBMITTED,
                   Signal.SCORE_SUBMISSION_FAILED):
        game.bus.subscribe(signal, flash)

    running = True
    while running:
        delta_ms = float(pg_clock.tick(game.config.loop.target_fps))

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_SPACE and game.state is GameState.PLAYING:
                    source.press(Command.BOOST)
                elif event.key in (pygame.K_SPACE, pygame.K_RETURN):
                    source.press(Command.START)
                elif event.key == pygame.K_p:
                    paused = game.state is GameState.PAUSED
                    source.press(Command.RESUME if paused else Command.PAUSE)

        keys = pygame.key.get_pressed()
        left = keys[pygame.K_LEFT] or keys[pygame.K_a]
        right = keys[pygame.K_RIGHT] or keys[pygame.K_d]
        source.set_direction(int(right) - int(left))

        # --- Update ---
        game.frame(delta_ms)
        message_left[0] = max(0.0, message_left[0] - delta_ms)
        if message_left[0] == 0.0:
            message[0] = ""

        # --- Draw ---
        snap = game.snapshot()
        screen.fill(BG_COLOR)
        draw_world(screen, snap, scale)
        draw_hud(screen, font, snap, message[0])
        pygame.display.flip()

    game.shutdown()
    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
