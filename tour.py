import logging
from enum import Enum

logger = logging.getLogger(__name__)

UNVISITED = 0
KNIGHT = -1 # 马当前所在格

# 马的八种跳法 固定顺序
#  . x . x .
#  x . . . x
#  . . H . .
#  x . . . x
#  . x . x .
KNIGHT_MOVES = [
    (-1, 2), (1, 2), (1, -2), (-1, -2),
    (-2, 1), (2, 1), (2, -1), (-2, -1)
]


class InvalidMoveError(AssertionError):
    """An illegal place/undo was attempted; the caller's move logic is broken."""


class Heuristic(Enum):
    NONE = 'none'
    PREFER_CORNERS = 'prefer-corners'
    PREFER_RUNNING = 'prefer-running'
    WARNSDORFF = 'warnsdorff'


def knight_neighbours(sq, n): # 不考虑是否走过
    x, y = sq
    return [
        (x + dx, y + dy) for dx, dy in KNIGHT_MOVES
        if 0 <= x + dx < n and 0 <= y + dy < n
    ]


def manhattan(a, b):
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def corner_score(sq, n): # 离最近角的距离
    last = n - 1
    return min(manhattan(sq, corner) for corner in ((0, 0), (last, 0), (0, last), (last, last)))


def running_distance(sq, start):
    return manhattan(sq, start)


class Board:
    def __init__(self, n, start):
        self.n = n
        self.start = tuple(start)
        if not self.is_valid_square(self.start):
            raise ValueError(f'start {self.start} is off a {n}x{n} board')
        self.cells = [[UNVISITED] * n for _ in range(n)] # cells[x][y]
        self.current = self.start
        self.total_moves = 0
        self.cells[self.start[0]][self.start[1]] = KNIGHT

    def copy(self):
        board = Board.__new__(Board)
        board.n = self.n
        board.start = self.start
        board.cells = [col.copy() for col in self.cells] # 深拷贝
        board.current = self.current
        board.total_moves = self.total_moves
        return board

    def is_valid_square(self, sq):
        x, y = sq
        return 0 <= x < self.n and 0 <= y < self.n

    def is_visited(self, sq):
        if not self.is_valid_square(sq):
            raise InvalidMoveError(f'square {sq} is off a {self.n}x{self.n} board')
        return self.cells[sq[0]][sq[1]] != UNVISITED

    def possible_moves(self, sq=None):
        x, y = self.current if sq is None else sq
        moves = []
        for dx, dy in KNIGHT_MOVES:
            nxt = (x + dx, y + dy)
            if self.is_valid_square(nxt) and not self.is_visited(nxt):
                moves.append(nxt)
        return moves

    def place(self, sq):
        sq = tuple(sq)
        if not self.is_valid_square(sq) or self.is_visited(sq):
            raise InvalidMoveError(f'invalid knight position {sq}')
        self.total_moves += 1
        self.cells[self.current[0]][self.current[1]] = self.total_moves
        self.current = sq
        self.cells[sq[0]][sq[1]] = KNIGHT

    def undo(self, sq):
        """Step back to ``sq``, the square occupied before the last placement.

        Placements must be undone in exactly the reverse order they were made.
        """
        sq = tuple(sq)
        if self.total_moves == 0 or not self.is_valid_square(sq) \
                or self.cells[sq[0]][sq[1]] != self.total_moves:
            raise InvalidMoveError(f'{sq} is not the previous knight position')
        self.cells[self.current[0]][self.current[1]] = UNVISITED
        self.current = sq
        self.cells[sq[0]][sq[1]] = KNIGHT
        self.total_moves -= 1

    def is_solved(self):
        return self.total_moves == self.n * self.n - 1

    def is_closed_tour(self):
        if not self.is_solved() or self.total_moves == 0:
            return False
        first = last = None
        for x in range(self.n):
            for y in range(self.n):
                if self.cells[x][y] == 1:
                    first = (x, y)
                elif self.cells[x][y] == KNIGHT:
                    last = (x, y)
        return first in knight_neighbours(last, self.n)

    def visit_order(self): # 马所在格换成它的步数
        return [
            [self.total_moves + 1 if cell == KNIGHT else cell for cell in col]
            for col in self.cells
        ]

    def path(self):
        order = self.visit_order()
        visited = [
            (order[x][y], (x, y))
            for x in range(self.n) for y in range(self.n) if order[x][y] != UNVISITED
        ]
        return [sq for _, sq in sorted(visited)]


def warnsdorff_score(sq, board): # 后续可走路线数
    return len(board.possible_moves(sq))


def order_moves(candidates, heuristic, board):
    heuristic = Heuristic(heuristic)
    if heuristic is Heuristic.NONE:
        return list(candidates)
    if heuristic is Heuristic.PREFER_CORNERS:
        key = lambda sq: corner_score(sq, board.n)
    elif heuristic is Heuristic.PREFER_RUNNING:
        key = lambda sq: running_distance(sq, board.start)
    else:
        key = lambda sq: warnsdorff_score(sq, board)
    return sorted(candidates, key=key) # sorted 是稳定排序


def no_op_hook(board):
    """Default observation hook.

    Hooks run synchronously after every placement and receive the live board;
    they must not mutate it.
    """


class TourSolver:
    """Depth-first search for a knight's tour from ``start``.

    ``hook(board)`` is called after each placement with the board being
    searched, not a copy. It must return before the search continues and must
    not change the board.
    """

    def __init__(self, n, start, heuristic=Heuristic.NONE, hook=None):
        if n < 1:
            raise ValueError(f'board size must be positive, got {n}')
        self.board = Board(n, start)
        self.heuristic = Heuristic(heuristic)
        self.hook = hook or no_op_hook
        self.iterations = 0 # 搜索节点计数 只用于统计

    def next_moves(self):
        return iter(order_moves(self.board.possible_moves(), self.heuristic, self.board))

    def solve(self): # 显式栈 DFS 回溯
        board = self.board
        self.iterations = 1
        logger.info('searching %dx%d from %s with %s',
                    board.n, board.n, board.start, self.heuristic.value)
        if board.is_solved():
            return True

        stack = [(board.current, self.next_moves())]
        while stack:
            _, candidates = stack[-1]
            nxt = next(candidates, None)
            if nxt is None:
                stack.pop()
                if stack:
                    board.undo(stack[-1][0])
                continue

            board.place(nxt)
            self.hook(board)
            self.iterations += 1
            if board.is_solved():
                logger.info('tour found after %d iterations', self.iterations)
                return True
            stack.append((nxt, self.next_moves()))

        logger.info('no tour from %s after %d iterations', board.start, self.iterations)
        return False


def solve(start, n, heuristic=Heuristic.NONE, hook=None):
    solver = TourSolver(n, start, heuristic, hook)
    solved = solver.solve()
    return solver.board, solved


def is_closed_tour(board):
    return board.is_closed_tour()


def replay(n, path):
    """Rebuild a board by walking ``path`` from its first square.

    Raises InvalidMoveError on an off-board, repeated or non-knight step.
    """
    if not path:
        raise InvalidMoveError('empty path')
    x, y = path[0]
    if not (0 <= x < n and 0 <= y < n):
        raise InvalidMoveError(f'start {(x, y)} is off a {n}x{n} board')
    board = Board(n, (x, y))
    for sq in path[1:]:
        sq = tuple(sq)
        if sq not in board.possible_moves():
            raise InvalidMoveError(f'{sq} is not a legal move from {board.current}')
        board.place(sq)
    return board
