"""
mascot-physics Sandbox
Interactive pygame demo: drag and fling the mascot, toss it, pet it, tweak gravity.
"""

import argparse
import logging
import math
import sys

import pygame

from mascot_physics import Dimensions, Mascot, MascotConfig, PhysicsEngine

# --- Configuration ---
WIDTH, HEIGHT = 1024, 768
FPS = 60
TITLE = "mascot-physics Sandbox"
MASCOT_SIZE = 96.0
BOUNCE_FLASH_FRAMES = 8

# (label, gravity) presets cycled with G
GRAVITY_PRESETS = [
    ("normal", 0.5),
    ("moon", 0.1),
    ("heavy", 1.2),
    ("off", 0.0),
]

# Colors
BG_COLOR = (26, 26, 46)
GROUND_COLOR = (60, 60, 90)
HUD_COLOR = (200, 200, 220)
FLASH_COLOR = (255, 215, 0)
BODY_COLOR = (150, 150, 170)
OUTLINE_COLOR = (255, 255, 255)
FACE_COLOR = (30, 30, 40)

EXPRESSION_COLORS = {
    "idle": (150, 150, 170),
    "happy": (100, 255, 200),
    "surprised": (255, 160, 0),
    "dizzy": (180, 100, 255),
    "love": (255, 100, 100),
}


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=TITLE)
    parser.add_argument("--seed", type=int, default=None, help="RNG seed for spin")
    parser.add_argument("--ground-level", type=float, default=40.0)
    parser.add_argument("--log-level", default="WARNING")
    return parser.parse_args(argv)


def draw_mascot(screen: pygame.Surface, mascot: Mascot) -> None:
    """Rotated square with a face for the current expression."""
    state = mascot.state
    w, h = mascot.size.width, mascot.size.height
    surf = pygame.Surface((int(w), int(h)), pygame.SRCALPHA)
    color = EXPRESSION_COLORS.get(state.expression, BODY_COLOR)
    pygame.draw.rect(surf, color, surf.get_rect(), border_radius=18)
    pygame.draw.rect(surf, OUTLINE_COLOR, surf.get_rect(), 2, border_radius=18)

    eye_y = int(h * 0.38)
    left_eye = (int(w * 0.32), eye_y)
    right_eye = (int(w * 0.68), eye_y)
    if state.expression == "dizzy":
        for cx, cy in (left_eye, right_eye):
            pygame.draw.line(surf, FACE_COLOR, (cx - 6, cy - 6), (cx + 6, cy + 6), 3)
            pygame.draw.line(surf, FACE_COLOR, (cx - 6, cy + 6), (cx + 6, cy - 6), 3)
    else:
        radius = 9 if state.expression == "surprised" else 6
        pygame.draw.circle(surf, FACE_COLOR, left_eye, radius)
        pygame.draw.circle(surf, FACE_COLOR, right_eye, radius)

    mouth = pygame.Rect(int(w * 0.3), int(h * 0.55), int(w * 0.4), int(h * 0.25))
    if state.expression in ("happy", "love"):
        pygame.draw.arc(surf, FACE_COLOR, mouth, math.pi, 2 * math.pi, 3)
    elif state.expression == "surprised":
        pygame.draw.ellipse(surf, FACE_COLOR, mouth.inflate(-mouth.width // 2, 0), 3)
    else:
        y = mouth.centery
        pygame.draw.line(surf, FACE_COLOR, (mouth.left, y), (mouth.right, y), 3)

    rotated = pygame.transform.rotate(surf, -math.degrees(state.angle))
    center = (state.x + w / 2, state.y + h / 2)
    screen.blit(rotated, rotated.get_rect(center=(int(center[0]), int(center[1]))))


def hit_test(mascot: Mascot, x: float, y: float) -> bool:
    body = mascot.body
    return (
        body.x <= x <= body.x + mascot.size.width
        and body.y <= y <= body.y + mascot.size.height
    )


def main(argv: list[str] | None = None):
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level.upper())

    pygame.init()
    screen = pygame.display.set_mode((WIDTH, HEIGHT), pygame.RESIZABLE)
    pygame.display.set_caption(TITLE)
    pg_clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 14)

    # --- Mascot setup ---
    engine = PhysicsEngine(seed=args.seed, ground_level=args.ground_level)
    config = MascotConfig(
        width=MASCOT_SIZE,
        height=MASCOT_SIZE,
        start_x=WIDTH / 2 - MASCOT_SIZE / 2,
        start_y=120.0,
    )
    flash = [0]
    throws = [0]

    def on_bounce() -> None:
        flash[0] = BOUNCE_FLASH_FRAMES

    def on_throw() -> None:
        throws[0] += 1

    mascot = Mascot(
        Dimensions(WIDTH, HEIGHT),
        config=config,
        engine=engine,
        on_bounce=on_bounce,
        on_throw=on_throw,
    )
    mascot.start()

    # --- State ---
    preset = 0
    paused = False
    running = True

    while running:
        pg_clock.tick(FPS)

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.VIDEORESIZE:
                mascot.resize(float(event.w), float(event.h))
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_SPACE:
                    paused = not paused
                elif event.key == pygame.K_t:
                    mascot.toss()
                elif event.key == pygame.K_p:
                    mascot.pet()
                elif event.key == pygame.K_g:
                    preset = (preset + 1) % len(GRAVITY_PRESETS)
                    engine.update_config(gravity=GRAVITY_PRESETS[preset][1])
                    mascot.start()
                elif event.key == pygame.K_r:
                    engine.apply_drag(mascot.body, config.start_x, config.start_y)
                    mascot.start()
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                mx, my = event.pos
                if hit_test(mascot, mx, my):
                    mascot.drag_start(float(mx), float(my))
            elif event.type == pygame.MOUSEMOTION:
                mx, my = event.pos
                mascot.drag_move(float(mx), float(my))
            elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                mascot.drag_end()

        # --- Update ---
        if not paused:
            mascot.tick()

        # --- Draw ---
        screen.fill(BG_COLOR)
        container = mascot.container
        ground_top = container.height - engine.config.ground_level
        pygame.draw.rect(
            screen,
            GROUND_COLOR,
            pygame.Rect(0, int(ground_top), int(container.width), int(engine.config.ground_level)),
        )
        draw_mascot(screen, mascot)

        # --- HUD ---
        state = mascot.state
        fps_val = pg_clock.get_fps()
        pause_str = "  [PAUSED]" if paused else ""
        motion = "moving" if state.is_animating else "resting"
        hud_lines = [
            f"FPS: {fps_val:.0f}   Gravity: {GRAVITY_PRESETS[preset][0]}   "
            f"{motion} / {state.expression}   Throws: {throws[0]}{pause_str}",
            "Drag=Grab/Fling  T=Toss  P=Pet  G=Gravity  R=Reset  Space=Pause  Esc=Quit",
        ]
        hud_color = FLASH_COLOR if flash[0] > 0 else HUD_COLOR
        for i, line in enumerate(hud_lines):
            surf = font.render(line, True, hud_color)
            screen.blit(surf, (10, 8 + i * 20))
        if flash[0] > 0:
            flash[0] -= 1

        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
