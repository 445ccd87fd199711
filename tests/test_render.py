from dataclasses import replace

import pygame
import pytest

from gridsnake.config import FLASH_MS
from gridsnake.game import Status, snapshot
from gridsnake.render import Renderer, window_size


@pytest.fixture
def renderer(cfg):
    pygame.init()
    screen = pygame.display.set_mode(window_size(cfg))
    yield Renderer(screen, pygame.font.SysFont(None, 24), cfg)
    pygame.quit()


def test_board_fits_window(renderer, cfg):
    assert renderer.board.width == renderer.cell_size * cfg.cols
    assert renderer.board.height == renderer.cell_size * cfg.rows


def test_hit_test(renderer):
    assert renderer.hit_test(renderer.board.center) == "board"
    assert renderer.hit_test(renderer.buttons["restart"].center) == "restart"
    assert renderer.hit_test(renderer.buttons["left"].center) == "left"
    assert renderer.hit_test((1, 1)) is None


def test_render_leaves_state_alone(renderer, state):
    before = (list(state.snake), state.food, state.score, state.status)
    for status in Status:
        state.status = status
        renderer(snapshot(state))
    assert renderer.last.status is Status.OVER
    state.status = before[3]
    assert (list(state.snake), state.food, state.score, state.status) == before


def test_resize_recomputes_cells(renderer, cfg):
    small = pygame.Surface((cfg.cols * 10, 40 + cfg.rows * 10 + 72))
    renderer.resize(small)
    assert renderer.cell_size == 10


def test_flash_expires(renderer, state):
    renderer.flash_until = 100
    renderer.last = snapshot(state)
    renderer.refresh(50)
    assert renderer.flash_until == 100
    renderer.refresh(150)
    assert renderer.flash_until is None


def test_level_up_starts_flash(renderer, state, monkeypatch):
    monkeypatch.setattr(pygame.time, "get_ticks", lambda: 1000)
    renderer(snapshot(state))
    assert renderer.flash_until is None
    renderer(replace(snapshot(state), leveled_up=True))
    assert renderer.flash_until == 1000 + FLASH_MS
    renderer.refresh(1000 + FLASH_MS - 1)
    assert renderer.flash_until is not None
    renderer.refresh(1000 + FLASH_MS)
    assert renderer.flash_until is None
