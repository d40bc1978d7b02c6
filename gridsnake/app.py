"""pygame frontend: draws engine snapshots and feeds input back into the engine."""

import logging
import math
from array import array

import pygame

from .board import SNAKE, FOOD, board_rows
from .constants import (
    BG_BOTTOM,
    BG_TOP,
    BODY_COLOR,
    BUTTON_COLOR,
    CELL_SIZE,
    CONTROLS_HEIGHT,
    DOWN,
    FOOD_COLOR,
    FOOD_INNER,
    FPS,
    GRID_LINE,
    GRID_SIZE,
    HEAD_COLOR,
    HUD_HEIGHT,
    LEFT,
    RIGHT,
    SAMPLE_RATE,
    SHADOW,
    UP,
    WHITE,
)
from .engine import GameEngine
from .keys import direction_for_key, direction_to_text
from .scheduler import TickScheduler

logger = logging.getLogger(__name__)


class Layout:
    """Pixel geometry of the window for a given cell size."""

    def __init__(self, cell_size=CELL_SIZE):
        self.cell_size = cell_size
        self.board_size = GRID_SIZE * cell_size
        self.board_top = HUD_HEIGHT
        self.width = self.board_size
        self.height = HUD_HEIGHT + self.board_size + CONTROLS_HEIGHT
        self.buttons = self._button_rects()

    def _button_rects(self):
        size = (CONTROLS_HEIGHT - 18) // 2
        gap = 6
        cx = self.width // 2
        top = self.board_top + self.board_size + 6
        return {
            UP: pygame.Rect(cx - size // 2, top, size, size),
            LEFT: pygame.Rect(cx - size // 2 - gap - size, top + size + gap, size, size),
            DOWN: pygame.Rect(cx - size // 2, top + size + gap, size, size),
            RIGHT: pygame.Rect(cx + size // 2 + gap, top + size + gap, size, size),
        }

    def grid_rect(self, grid_pos, padding=0):
        """Return a pixel rectangle for a grid position."""
        x, y = grid_pos
        return pygame.Rect(
            x * self.cell_size + padding,
            self.board_top + y * self.cell_size + padding,
            self.cell_size - padding * 2,
            self.cell_size - padding * 2,
        )

    def button_at(self, pos):
        """Return the direction of the on-screen button under pos, if any."""
        for direction, rect in self.buttons.items():
            if rect.collidepoint(pos):
                return direction
        return None


def get_ui_font(size):
    """Load a preferred UI font, then fall back safely to pygame default."""
    preferred = ["Bahnschrift", "Segoe UI Black", "Arial Black"]
    for name in preferred:
        path = pygame.font.match_font(name)
        if path:
            return pygame.font.Font(path, size)
    return pygame.font.Font(None, size)


def create_tone(frequency_hz, duration_ms, volume=0.35, end_frequency_hz=None, release_ms=60):
    """Generate a mono PCM chirp with a linear release."""
    sample_count = max(1, int(SAMPLE_RATE * (duration_ms / 1000.0)))
    amplitude = int(32767 * max(0.0, min(volume, 1.0)))
    release_samples = int(SAMPLE_RATE * (release_ms / 1000.0))
    release_start = max(0, sample_count - release_samples)
    end_frequency_hz = frequency_hz if end_frequency_hz is None else end_frequency_hz

    pcm = array("h")
    phase = 0.0
    for i in range(sample_count):
        progress = i / max(1, sample_count - 1)
        current_freq = frequency_hz + (end_frequency_hz - frequency_hz) * progress
        phase += (2.0 * math.pi * current_freq) / SAMPLE_RATE

        env = 1.0
        if release_samples > 0 and i >= release_start:
            env = max(0.0, (sample_count - i) / release_samples)
        pcm.append(int(amplitude * env * math.sin(phase)))

    return pygame.mixer.Sound(buffer=pcm.tobytes())


def init_sounds(enabled=True):
    """Initialize mixer and synth tones; disable gracefully if unavailable."""
    if not enabled:
        return {}

    try:
        if pygame.mixer.get_init() is None:
            pygame.mixer.init(frequency=SAMPLE_RATE, size=-16, channels=1, buffer=512)
        return {
            "eat": create_tone(720, 95, 0.26, end_frequency_hz=520, release_ms=70),
            "game_over": create_tone(420, 420, 0.2, end_frequency_hz=110, release_ms=220),
        }
    except pygame.error as exc:
        logger.warning("Sound disabled: %s", exc)
        return {}


def play_sound(sounds, name):
    if name in sounds:
        sounds[name].play()


def draw_background(surface, layout):
    """Draw a gradient background and subtle grid lines over the board."""
    for y in range(layout.height):
        t = y / layout.height
        color = tuple(int(top + (bottom - top) * t) for top, bottom in zip(BG_TOP, BG_BOTTOM))
        pygame.draw.line(surface, color, (0, y), (layout.width, y))

    top = layout.board_top
    bottom = top + layout.board_size
    for x in range(0, layout.board_size + 1, layout.cell_size):
        pygame.draw.line(surface, GRID_LINE, (x, top), (x, bottom), 1)
    for y in range(top, bottom + 1, layout.cell_size):
        pygame.draw.line(surface, GRID_LINE, (0, y), (layout.board_size, y), 1)


def draw_board(surface, layout, state):
    """Draw food and snake cells as classified by the board module."""
    for y, row in enumerate(board_rows(state)):
        for x, kind in enumerate(row):
            if kind == FOOD:
                rect = layout.grid_rect((x, y), padding=2)
                radius = rect.width // 2
                pygame.draw.circle(surface, FOOD_COLOR, rect.center, radius)
                inner = (rect.centerx - radius // 3, rect.centery - radius // 3)
                pygame.draw.circle(surface, FOOD_INNER, inner, max(2, radius // 3))
            elif kind == SNAKE:
                color = HEAD_COLOR if (x, y) == state.head else BODY_COLOR
                pygame.draw.rect(surface, color, layout.grid_rect((x, y), padding=1), border_radius=5)

    draw_eyes(surface, layout, state.head, state.direction or RIGHT)


def draw_eyes(surface, layout, head, direction):
    """Draw simple eyes so head direction is easy to read."""
    cx, cy = layout.grid_rect(head, padding=1).center
    offset = layout.cell_size // 5
    dx, dy = direction
    if dx:
        eyes = [(cx + dx * offset, cy - 3), (cx + dx * offset, cy + 3)]
    else:
        eyes = [(cx - 3, cy + dy * offset), (cx + 3, cy + dy * offset)]
    for ex, ey in eyes:
        pygame.draw.circle(surface, SHADOW, (ex, ey), 2)


def draw_panel(surface, rect, alpha):
    panel = pygame.Surface((rect.width, rect.height), pygame.SRCALPHA)
    panel.fill((0, 0, 0, alpha))
    surface.blit(panel, rect.topleft)


def draw_hud(surface, layout, font, state, best_score):
    """Draw score, size and best score above the board."""
    bar = pygame.Rect(8, 8, layout.width - 16, HUD_HEIGHT - 16)
    draw_panel(surface, bar, 120)

    left = font.render(f"Score: {state.score}", True, WHITE)
    mid = font.render(f"Size: {state.length}", True, WHITE)
    right = font.render(f"Best: {best_score}", True, WHITE)
    surface.blit(left, left.get_rect(midleft=(bar.left + 12, bar.centery)))
    surface.blit(mid, mid.get_rect(center=bar.center))
    surface.blit(right, right.get_rect(midright=(bar.right - 12, bar.centery)))


def draw_controls(surface, layout, font):
    """Draw the on-screen arrow buttons."""
    labels = {UP: "^", DOWN: "v", LEFT: "<", RIGHT: ">"}
    for direction, rect in layout.buttons.items():
        pygame.draw.rect(surface, BUTTON_COLOR, rect, border_radius=6)
        label = font.render(labels[direction], True, WHITE)
        surface.blit(label, label.get_rect(center=rect.center))


def draw_message(surface, layout, font, lines, alpha=170):
    """Draw a centered multi-line message box over the board."""
    rendered = [font.render(line, True, WHITE) for line in lines]
    width = max(r.get_width() for r in rendered) + 32
    height = sum(r.get_height() + 6 for r in rendered) + 20
    box = pygame.Rect(0, 0, width, height)
    box.center = (layout.width // 2, layout.board_top + layout.board_size // 2)
    draw_panel(surface, box, alpha)

    y = box.top + 10
    for r in rendered:
        surface.blit(r, r.get_rect(centerx=box.centerx, y=y))
        y += r.get_height() + 6


def draw_debug_status(surface, layout, font, state):
    """Draw debug line at the bottom of the board."""
    debug = (
        f"started={str(state.started).lower()}  "
        f"direction={direction_to_text(state.direction)}  "
        f"food={state.food}  "
        f"game_over_reason={state.game_over_reason}"
    )
    text = font.render(debug, True, WHITE)
    rect = pygame.Rect(0, layout.board_top + layout.board_size - text.get_height() - 8,
                       layout.width, text.get_height() + 8)
    draw_panel(surface, rect, 120)
    surface.blit(text, (rect.left + 8, rect.top + 4))


def draw_frame(surface, layout, fonts, state, best_score, show_debug):
    draw_background(surface, layout)
    draw_board(surface, layout, state)
    draw_hud(surface, layout, fonts["hud"], state, best_score)
    draw_controls(surface, layout, fonts["hud"])

    if not state.started:
        draw_message(surface, layout, fonts["small"], ["Press an arrow key to start"], alpha=120)
    elif state.won:
        draw_message(surface, layout, fonts["hud"],
                     ["You filled the board!", f"Score: {state.score}", "R: restart  |  Esc: quit"])
    elif state.game_over:
        draw_message(surface, layout, fonts["hud"],
                     ["Game Over", f"Score: {state.score}", "R: restart  |  Esc: quit"])

    if show_debug:
        draw_debug_status(surface, layout, fonts["small"], state)


def run(seed=None, sound=True, debug=False, cell_size=CELL_SIZE):
    """Open the game window and run until the player quits."""
    pygame.mixer.pre_init(SAMPLE_RATE, -16, 1, 512)
    pygame.init()
    pygame.display.set_caption("Snake Game")
    layout = Layout(cell_size)
    screen = pygame.display.set_mode((layout.width, layout.height))
    clock = pygame.time.Clock()
    fonts = {"hud": get_ui_font(22), "small": get_ui_font(15)}
    sounds = init_sounds(sound)

    engine = GameEngine(seed=seed)
    scheduler = TickScheduler(engine)
    show_debug = debug
    best_score = 0

    running = True
    while running:
        dt_ms = clock.tick(FPS)

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_r:
                    engine.reset()
                elif event.key == pygame.K_F3:
                    show_debug = not show_debug
                else:
                    direction = direction_for_key(event.key)
                    if direction is not None:
                        engine.steer(direction)
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                direction = layout.button_at(event.pos)
                if direction is not None:
                    engine.steer(direction)

        before = engine.get_state()
        scheduler.advance(dt_ms)
        state = engine.get_state()

        if state.length > before.length:
            play_sound(sounds, "eat")
        if state.game_over and not before.game_over:
            play_sound(sounds, "game_over")
        best_score = max(best_score, state.score)

        draw_frame(screen, layout, fonts, state, best_score, show_debug)
        pygame.display.flip()

    pygame.quit()
