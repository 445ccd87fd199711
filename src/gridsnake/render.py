# render.py
"""Pygame drawing of snapshots: board, HUD, overlays and on-screen controls."""
from typing import Dict, Optional, Tuple
import pygame  # type: ignore

from .config import (
    CELL_SIZE, HUD_H, CONTROLS_H, FLASH_MS,
    BG, GRID_LINE, SNAKE, HEAD, FOOD, TEXT, PANEL, PANEL_TXT, BUTTON, FLASH,
    CFG, Config,
)
from .game import Snapshot, Status

OVERLAY_TEXT = {
    Status.READY:  ("Ready", "Press SPACE or click Start"),
    Status.PAUSED: ("Paused", "Press SPACE or click Start to resume"),
    Status.OVER:   ("Game Over", "Click Restart to play again"),
}

BUTTON_LABELS = {
    "start": "Start", "pause": "Pause", "restart": "Restart",
    "up": "^", "down": "v", "left": "<", "right": ">",
}


def window_size(cfg: Config = CFG) -> Tuple[int, int]:
    return cfg.cols * CELL_SIZE, HUD_H + cfg.rows * CELL_SIZE + CONTROLS_H


class Renderer:
    """
    Draws snapshots onto a pygame surface. Never touches the GameState;
    everything it needs arrives in the Snapshot.
    """

    def __init__(self, screen: pygame.Surface, font: pygame.font.Font, cfg: Config = CFG):
        self.screen = screen
        self.font = font
        self.cfg = cfg
        self.cell_size = CELL_SIZE
        self.board = pygame.Rect(0, HUD_H, 0, 0)
        self.buttons: Dict[str, pygame.Rect] = {}
        self.last: Optional[Snapshot] = None
        self.flash_until: Optional[int] = None
        self.layout()

    # ---------- Layout ----------
    def layout(self) -> None:
        width, height = self.screen.get_size()
        avail_h = max(height - HUD_H - CONTROLS_H, 0)
        self.cell_size = max(1, min(width // self.cfg.cols, avail_h // self.cfg.rows))
        bw, bh = self.cell_size * self.cfg.cols, self.cell_size * self.cfg.rows
        self.board = pygame.Rect((width - bw) // 2, HUD_H + (avail_h - bh) // 2, bw, bh)

        bar_y = HUD_H + avail_h
        pad = 6
        bw_btn, bh_btn = 72, (CONTROLS_H - 3 * pad) // 2
        self.buttons = {}
        for i, name in enumerate(("start", "pause", "restart")):
            self.buttons[name] = pygame.Rect(pad + i * (bw_btn + pad), bar_y + pad, bw_btn, bh_btn)
        # d-pad, right-aligned
        sq = bh_btn
        right = width - pad
        self.buttons["up"] = pygame.Rect(right - 2 * sq - pad, bar_y + pad, sq, sq)
        self.buttons["left"] = pygame.Rect(right - 3 * sq - 2 * pad, bar_y + 2 * pad + sq, sq, sq)
        self.buttons["down"] = pygame.Rect(right - 2 * sq - pad, bar_y + 2 * pad + sq, sq, sq)
        self.buttons["right"] = pygame.Rect(right - sq, bar_y + 2 * pad + sq, sq, sq)

    def resize(self, screen: pygame.Surface) -> None:
        self.screen = screen
        self.layout()
        if self.last is not None:
            self.draw(self.last)
            pygame.display.flip()

    def hit_test(self, pos: Tuple[int, int]) -> Optional[str]:
        """Name of the button under `pos`, "board" for the play field, else None."""
        for name, rect in self.buttons.items():
            if rect.collidepoint(pos):
                return name
        if self.board.collidepoint(pos):
            return "board"
        return None

    # ---------- Drawing ----------
    def draw_cell(self, gx: int, gy: int, color: Tuple[int, int, int], inset: int = 0) -> None:
        cs = self.cell_size
        rect = pygame.Rect(self.board.x + gx * cs + inset, self.board.y + gy * cs + inset,
                           cs - 2 * inset, cs - 2 * inset)
        pygame.draw.rect(self.screen, color, rect, border_radius=max(cs // 4, 0))

    def draw_grid(self) -> None:
        cs = self.cell_size
        for x in range(self.cfg.cols + 1):
            px = self.board.x + x * cs
            pygame.draw.line(self.screen, GRID_LINE, (px, self.board.top), (px, self.board.bottom))
        for y in range(self.cfg.rows + 1):
            py = self.board.y + y * cs
            pygame.draw.line(self.screen, GRID_LINE, (self.board.left, py), (self.board.right, py))

    def draw_hud(self, snap: Snapshot) -> None:
        width = self.screen.get_width()
        pygame.draw.rect(self.screen, PANEL, pygame.Rect(0, 0, width, HUD_H))
        parts = (
            f"Score: {snap.score}",
            f"Best: {snap.best_score}",
            snap.speed_label,
        )
        for i, text in enumerate(parts):
            img = self.font.render(text, True, PANEL_TXT)
            self.screen.blit(img, img.get_rect(midleft=(8 + i * width // 3, HUD_H // 2)))

    def draw_controls(self) -> None:
        for name, rect in self.buttons.items():
            pygame.draw.rect(self.screen, BUTTON, rect, border_radius=6)
            img = self.font.render(BUTTON_LABELS[name], True, PANEL_TXT)
            self.screen.blit(img, img.get_rect(center=rect.center))

    def draw_overlay(self, status: Status, score: int) -> None:
        if status not in OVERLAY_TEXT:
            return
        # Dim with translucent overlay
        overlay = pygame.Surface(self.board.size, pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 140))  # RGBA
        self.screen.blit(overlay, self.board.topleft)

        title, sub = OVERLAY_TEXT[status]
        cx, cy = self.board.center
        lines = [(title, -16), (sub, 16)]
        if status is Status.OVER:
            lines.append((f"Score: {score}", 44))
        for text, dy in lines:
            img = self.font.render(text, True, (240, 240, 250))
            self.screen.blit(img, img.get_rect(center=(cx, cy + dy)))

    def draw(self, snap: Snapshot, now: Optional[int] = None) -> None:
        self.screen.fill(BG)
        self.draw_grid()
        if snap.food is not None:
            self.draw_cell(snap.food[0], snap.food[1], FOOD, inset=max(self.cell_size // 6, 1))
        for i, (x, y) in enumerate(snap.snake):
            is_head = i == len(snap.snake) - 1
            self.draw_cell(x, y, HEAD if is_head else SNAKE, inset=1)
        if self.flash_until is not None and (now is None or now < self.flash_until):
            pygame.draw.rect(self.screen, FLASH, self.board.inflate(8, 8), width=4)
        self.draw_hud(snap)
        self.draw_controls()
        self.draw_overlay(snap.status, snap.score)

    # ---------- Callbacks ----------
    def __call__(self, snap: Snapshot) -> None:
        """Render callback for the session."""
        now = pygame.time.get_ticks()
        if snap.leveled_up:
            self.flash_until = now + FLASH_MS
        self.last = snap
        self.draw(snap, now)
        pygame.display.flip()

    def refresh(self, now: int) -> None:
        """Clear an expired level-up flash without waiting for the next tick."""
        if self.flash_until is not None and now >= self.flash_until:
            self.flash_until = None
            if self.last is not None:
                self.draw(self.last, now)
                pygame.display.flip()
