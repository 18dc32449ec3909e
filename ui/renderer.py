import random

import pygame

import config
from game.board import enumerate_tiles

BOARD_PIXELS = config.BOARD_SIZE * config.TILE_SIZE + (config.BOARD_SIZE + 1) * config.TILE_PADDING


def _pixel_pos(pos):
    """보드 좌표 (r, c)를 픽셀 좌표로 변환"""
    r, c = pos
    x = config.TILE_PADDING + c * (config.TILE_SIZE + config.TILE_PADDING)
    y = config.TILE_PADDING + r * (config.TILE_SIZE + config.TILE_PADDING)
    return [x, y]


class Tile:
    def __init__(self, tile_id, value, pos):
        self.id = tile_id
        self.value = value
        self.pos = pos  # board 위치 (r, c)
        self.pixel_pos = _pixel_pos(pos)
        self.is_new = False
        self.is_merged = False
        self.scale = 1.0
        self._origin = list(self.pixel_pos)
        self._target = list(self.pixel_pos)
        self._elapsed = 0.0
        self._duration = 0.0

    @property
    def is_animating(self):
        return self._elapsed < self._duration

    def start_move(self, origin_pos, target_pos, duration, merged=False):
        """origin_pos가 None이면 새로 생긴 타일로 보고 제자리에서 커지며 나타납니다."""
        self.pos = target_pos
        self._target = _pixel_pos(target_pos)
        self._origin = _pixel_pos(origin_pos) if origin_pos is not None else list(self._target)
        self.pixel_pos = list(self._origin)
        self.is_new = origin_pos is None and not merged
        self.is_merged = merged
        self.scale = 0.1 if (self.is_new or merged) else 1.0
        self._elapsed = 0.0
        self._duration = duration

    def update(self, dt):
        if not self.is_animating:
            return
        self._elapsed = min(self._elapsed + dt, self._duration)
        t = self._elapsed / self._duration
        self.pixel_pos = [o + (g - o) * t for o, g in zip(self._origin, self._target)]
        if self.is_new or self.is_merged:
            self.scale = 0.1 + 0.9 * t

    def draw(self, surface):
        size = config.TILE_SIZE * self.scale
        offset = (config.TILE_SIZE - size) / 2
        x, y = self.pixel_pos
        rect = pygame.Rect(x + offset, y + offset, size, size)
        pygame.draw.rect(surface, config.TILE_COLORS.get(self.value, (60, 58, 50)), rect, border_radius=6)

        text_color = config.TEXT_COLORS.get(self.value, config.LIGHT_TEXT_COLOR)
        text_surface = config.TILE_FONT.render(str(self.value), True, text_color)
        text_rect = text_surface.get_rect(center=rect.center)
        surface.blit(text_surface, text_rect)


class BoardRenderer:
    """타일 id로 이전/다음 보드를 대응시켜 미끄러지는 애니메이션을 그립니다."""
    def __init__(self):
        self.tiles = {}

    @property
    def is_animating(self):
        return any(tile.is_animating for tile in self.tiles.values())

    def set_board(self, board):
        self.tiles = {
            tile.id: Tile(tile.id, tile.value, (r, c))
            for r, c, tile in enumerate_tiles(board) if tile is not None
        }

    def start_animation(self, old_board, new_board, duration=config.ANIMATION_SECONDS):
        old_positions = {tile.id: (r, c) for r, c, tile in enumerate_tiles(old_board) if tile is not None}
        spawned_id = new_board.next_tile_id - 1
        tiles = {}
        for r, c, tile in enumerate_tiles(new_board):
            if tile is None:
                continue
            sprite = Tile(tile.id, tile.value, (r, c))
            origin = old_positions.get(tile.id)
            merged = origin is None and tile.id != spawned_id
            sprite.start_move(origin, (r, c), duration, merged=merged)
            tiles[tile.id] = sprite
        self.tiles = tiles

    def update(self, dt):
        for tile in self.tiles.values():
            tile.update(dt)

    def draw(self, surface, x_offset, y_offset):
        board_surface = pygame.Surface((BOARD_PIXELS, BOARD_PIXELS))
        board_surface.fill(config.GRID_COLOR)

        for r in range(config.BOARD_SIZE):
            for c in range(config.BOARD_SIZE):
                tile_x, tile_y = _pixel_pos((r, c))
                pygame.draw.rect(board_surface, config.TILE_COLORS[0],
                                 (tile_x, tile_y, config.TILE_SIZE, config.TILE_SIZE),
                                 border_radius=6)

        for tile in sorted(self.tiles.values(), key=lambda t: 1 if t.is_merged else 0):
            tile.draw(board_surface)

        surface.blit(board_surface, (x_offset, y_offset))


class Confetti:
    """2048 달성 시 양쪽 아래에서 뿌려지는 종이 조각"""
    GRAVITY = 400.0

    def __init__(self, width, height):
        self.width = width
        self.height = height
        self.particles = []
        self.remaining = 0.0

    @property
    def active(self):
        return self.remaining > 0 or bool(self.particles)

    def start(self, duration=config.CONFETTI_SECONDS):
        self.remaining = duration

    def _emit(self, from_left):
        x = 0 if from_left else self.width
        vx = random.uniform(150, 350) * (1 if from_left else -1)
        vy = -random.uniform(350, 600)
        color = random.choice(config.CONFETTI_COLORS)
        self.particles.append([x, self.height, vx, vy, color])

    def update(self, dt):
        if self.remaining > 0:
            self.remaining -= dt
            for _ in range(3):
                self._emit(True)
                self._emit(False)
        for p in self.particles:
            p[0] += p[2] * dt
            p[1] += p[3] * dt
            p[3] += self.GRAVITY * dt
        self.particles = [p for p in self.particles if p[1] <= self.height + 10]

    def draw(self, surface):
        for x, y, _vx, _vy, color in self.particles:
            pygame.draw.rect(surface, color, (int(x), int(y), 6, 10))


class GameRenderer:
    def __init__(self, screen):
        self.screen = screen

    def draw_main_ui(self, session, board_renderer, confetti=None):
        self.screen.fill(config.BACKGROUND_COLOR)
        x, y = config.BOARD_X_OFFSET, 20

        title = config.SCORE_FONT.render("2048", True, (119, 110, 101))
        self.screen.blit(title, (x, y))

        score_text = config.SCORE_FONT.render(f"Highest: {session.highest_tile()}", True, (0, 0, 0))
        self.screen.blit(score_text, (x, y + 40))
        time_text = config.UI_FONT.render(f"Time: {session.elapsed_seconds()}s", True, (0, 0, 0))
        self.screen.blit(time_text, (x + 250, y + 45))

        best = session.high_score
        best_label = f"Best: {best.highest_tile} ({best.time_in_seconds}s)" if best else "Best: -"
        best_text = config.UI_FONT.render(best_label, True, (80, 80, 80))
        self.screen.blit(best_text, (x, y + 80))

        board_renderer.draw(self.screen, x, config.BOARD_Y_OFFSET)

        if session.over:
            self.draw_game_status_overlay(self.screen, "GAME OVER", x, config.BOARD_Y_OFFSET)
            hint = config.UI_FONT.render("R: restart", True, (119, 110, 101))
            self.screen.blit(hint, (x, config.BOARD_Y_OFFSET + BOARD_PIXELS + 10))
        elif session.won and confetti is not None and confetti.active:
            self.draw_game_status_overlay(self.screen, "VICTORY!", x, config.BOARD_Y_OFFSET)

        if confetti is not None:
            confetti.draw(self.screen)

    def draw_game_status_overlay(self, surface, text, x_offset, y_offset):
        overlay = pygame.Surface((BOARD_PIXELS, BOARD_PIXELS), pygame.SRCALPHA)
        if text == "VICTORY!":
            overlay.fill((237, 194, 46, 128))
            color = (255, 255, 255)
        else:
            overlay.fill((255, 255, 255, 128))
            color = (119, 110, 101)
        text_surface = config.OVERLAY_FONT.render(text, True, color)
        text_rect = text_surface.get_rect(center=(BOARD_PIXELS / 2, BOARD_PIXELS / 2))
        overlay.blit(text_surface, text_rect)
        surface.blit(overlay, (x_offset, y_offset))
