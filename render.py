import sys
import time

from tour import KNIGHT, UNVISITED

CLEAR_SCREEN = '\033[H\033[2J'


def display_board(board): # 按行输出 y 为行 x 为列
    lines = []
    for y in range(board.n):
        row = []
        for x in range(board.n):
            cell = board.cells[x][y]
            if cell == KNIGHT:
                row.append('  H')
            elif cell == UNVISITED:
                row.append('  .')
            else:
                row.append(f'{cell:>3}')
        lines.append(' '.join(row))
    return '\n'.join(lines)


def animate(board, delay=0.016, stream=None):
    """Observation hook that redraws the board after every placement."""
    stream = stream or sys.stdout
    stream.write(CLEAR_SCREEN)
    stream.write(display_board(board) + '\n')
    stream.flush()
    if delay:
        time.sleep(delay)


def summary(solved, elapsed, iterations, closed):
    status = '[ Solved ]' if solved else '[ Unsolved ]'
    return f'{status} Took: {elapsed:.3f}s Iterations: {iterations} Closed? {closed}'


def progress(iterations, elapsed):
    rate = iterations / elapsed if elapsed > 0 else 0
    return f'Iter: {iterations} Iter/s: {rate:.0f}'
