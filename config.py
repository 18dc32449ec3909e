import os

# --- 게임 규칙 설정 ---
BOARD_SIZE = 4
START_POSITION = (1, 1)
START_VALUE = 2
FOUR_THRESHOLD = 0.9 # 두 번째 난수가 이 값 이상이면 4, 아니면 2
WINNING_TILE = 2048

# --- 최고 기록 저장 ---
HIGH_SCORE_KEY = "twenty48_high_score"
HIGH_SCORE_PATH = os.path.join(os.path.expanduser("~"), ".twenty48_high_score.json")

# --- 로깅 설정 ---
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATEFMT = "%H:%M:%S"

# --- 화면 및 UI 설정 ---
SCREEN_WIDTH = 500
SCREEN_HEIGHT = 640
BACKGROUND_COLOR = (250, 248, 239)
GRID_COLOR = (187, 173, 160) # 게임 보드 배경색
FPS = 60
HEADER_HEIGHT = 130

# --- 게임 보드 설정 ---
TILE_SIZE = 100
TILE_PADDING = 12
BOARD_X_OFFSET = 20
BOARD_Y_OFFSET = HEADER_HEIGHT
ANIMATION_SECONDS = 0.1
CONFETTI_SECONDS = 3.0

# --- 폰트 설정 ---
# 폰트 변수들을 선언만 하고, 실제 로딩은 init_fonts() 함수에서 수행합니다.
SCORE_FONT = None
TILE_FONT = None
UI_FONT = None
OVERLAY_FONT = None


def init_fonts():
    """pygame.init() 이후에 호출되어야 합니다."""
    global SCORE_FONT, TILE_FONT, UI_FONT, OVERLAY_FONT
    import pygame

    pygame.font.init()
    SCORE_FONT = pygame.font.Font(None, 34)
    TILE_FONT = pygame.font.Font(None, 52)
    UI_FONT = pygame.font.Font(None, 26)
    OVERLAY_FONT = pygame.font.Font(None, 72)


# --- 타일 색상 ---
TILE_COLORS = {
    0: (205, 193, 180),
    2: (238, 228, 218),
    4: (237, 224, 200),
    8: (242, 177, 121),
    16: (245, 149, 99),
    32: (246, 124, 95),
    64: (246, 94, 59),
    128: (237, 207, 114),
    256: (237, 204, 97),
    512: (237, 200, 80),
    1024: (237, 197, 63),
    2048: (237, 194, 46),
    4096: (60, 58, 50),
    8192: (60, 58, 50),
}

TEXT_COLORS = {
    2: (119, 110, 101),
    4: (119, 110, 101),
}
LIGHT_TEXT_COLOR = (249, 246, 242)

CONFETTI_COLORS = [
    (237, 194, 46),
    (246, 94, 59),
    (119, 110, 101),
    (242, 177, 121),
    (99, 164, 245),
]
