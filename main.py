import argparse
import logging
import sys

import numpy as np
import pygame

import config
from game.engine import Direction, move
from game.high_score import HighScoreStore
from game.session import GameSession, MoveOutcome
from game.spawn import init_board
from ui.renderer import BoardRenderer, Confetti, GameRenderer
from ui.text_renderer import render_text

logger = logging.getLogger("twenty48")

# --- 키 매핑 ---
KEY_TO_DIRECTION = {
    pygame.K_UP: Direction.UP, pygame.K_w: Direction.UP,
    pygame.K_DOWN: Direction.DOWN, pygame.K_s: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT, pygame.K_a: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT, pygame.K_d: Direction.RIGHT,
}

DEMO_MOVES = (Direction.RIGHT, Direction.LEFT, Direction.UP)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="2048")
    parser.add_argument("--text", action="store_true", help="콘솔에서 오른쪽/왼쪽/위 순서로 움직이는 데모 실행")
    parser.add_argument("--seed", type=int, default=None, help="난수 시드")
    parser.add_argument("--high-score-file", default=config.HIGH_SCORE_PATH, help="최고 기록 JSON 파일 경로")
    parser.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser.parse_args(argv)


def run_text_demo(rng, out=sys.stdout):
    """시작 보드를 그리고, 정해진 순서로 움직이며 보드를 출력합니다. 게임이 끝나면 멈춥니다."""
    board = init_board()
    out.write(render_text(board) + "\n")
    for direction in DEMO_MOVES:
        board = move(direction, board, rng)
        if board is None:
            out.write("GAME OVER\n")
            return None
        out.write(render_text(board) + "\n")
    return board


def run_game(session):
    pygame.init()
    config.init_fonts()
    screen = pygame.display.set_mode((config.SCREEN_WIDTH, config.SCREEN_HEIGHT))
    pygame.display.set_caption("2048")
    clock = pygame.time.Clock()

    renderer = GameRenderer(screen)
    board_renderer = BoardRenderer()
    board_renderer.set_board(session.board)
    confetti = Confetti(config.SCREEN_WIDTH, config.SCREEN_HEIGHT)

    logger.info("게임 시작")
    try:
        while True:
            dt = clock.tick(config.FPS) / 1000.0

            for event in pygame.event.get():
                if event.type == pygame.QUIT or (event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE):
                    return
                if event.type != pygame.KEYDOWN:
                    continue
                if event.key == pygame.K_r:
                    session.restart()
                    board_renderer.set_board(session.board)
                    logger.info("재시작")
                    continue
                direction = KEY_TO_DIRECTION.get(event.key)
                if direction is None:
                    continue

                old_board = session.board
                outcome = session.apply(direction)
                if outcome == MoveOutcome.MOVED:
                    board_renderer.start_animation(old_board, session.board)
                    if session.just_won:
                        confetti.start()
                elif outcome == MoveOutcome.BLOCKED:
                    logger.debug("%s 방향으로는 움직일 수 없습니다.", direction.name)

            board_renderer.update(dt)
            confetti.update(dt)
            renderer.draw_main_ui(session, board_renderer, confetti)
            pygame.display.flip()
    except KeyboardInterrupt:
        pass
    except Exception:
        logger.exception("게임 루프에서 예외가 발생했습니다.")
        raise
    finally:
        pygame.quit()


def main(argv=None):
    args = parse_args(argv)

    # --- 로깅 설정 ---
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format=config.LOG_FORMAT,
        datefmt=config.LOG_DATEFMT,
    )

    rng = np.random.default_rng(args.seed)
    if args.text:
        run_text_demo(rng)
        return

    session = GameSession(store=HighScoreStore(path=args.high_score_file), rng=rng)
    run_game(session)


if __name__ == '__main__':
    main()
