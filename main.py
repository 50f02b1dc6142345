import argparse
import functools
import logging
import sys
import threading
import time

from render import animate, display_board, progress, summary
from tour import Heuristic, TourSolver

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Search for a knight's tour by backtracking.")
    parser.add_argument('--size', type=int, default=8, help='board size N')
    parser.add_argument('--x', type=int, default=0, help='start column')
    parser.add_argument('--y', type=int, default=0, help='start row')
    parser.add_argument('--heuristic', default=Heuristic.PREFER_CORNERS.value,
                        choices=[h.value for h in Heuristic])
    parser.add_argument('--visualize', action='store_true', help='redraw the board on every move')
    parser.add_argument('--poll', type=float, default=0.1, help='seconds between progress updates')
    args = parser.parse_args(argv)
    if args.size < 1:
        parser.error('--size must be at least 1')
    if not (0 <= args.x < args.size and 0 <= args.y < args.size):
        parser.error(f'start ({args.x}, {args.y}) is off a {args.size}x{args.size} board')
    return args


def run(args, out=None):
    out = out or sys.stdout
    hook = functools.partial(animate, stream=out) if args.visualize else None
    solver = TourSolver(args.size, (args.x, args.y), args.heuristic, hook)
    result = {}
    done = threading.Event() # 搜索完成信号

    def worker():
        start = time.perf_counter()
        try:
            result['solved'] = solver.solve()
        finally:
            result['elapsed'] = time.perf_counter() - start
            done.set()

    out.write(f'Begin solve for {args.x} {args.y}\n')
    began = time.perf_counter()
    thread = threading.Thread(target=worker, daemon=True)
    thread.start()
    while not done.wait(args.poll):
        if not args.visualize:
            # 只读计数 不碰棋盘
            out.write('\r' + progress(solver.iterations, time.perf_counter() - began))
            out.flush()
    thread.join()
    if not args.visualize:
        out.write('\r')

    if 'solved' not in result:
        logger.error('search worker failed')
        return 1
    board = solver.board
    out.write(summary(result['solved'], result['elapsed'], solver.iterations, board.is_closed_tour()) + '\n')
    out.write(display_board(board) + '\n')
    return 0


def main(argv=None):
    logging.basicConfig(level=logging.INFO)
    return run(parse_args(argv))


if __name__ == '__main__':
    sys.exit(main())
