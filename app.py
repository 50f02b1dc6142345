from flask import Flask, request, jsonify

from tour import Heuristic, InvalidMoveError, TourSolver, order_moves, replay

app = Flask(__name__)
app.config.from_mapping(
    MAX_BOARD_SIZE=8,
    MAX_SEARCH_SIZE=5, # 非 warnsdorff 策略的穷举上限
    DEFAULT_HEURISTIC=Heuristic.WARNSDORFF.value,
)
app.config.from_prefixed_env('KNIGHT') # KNIGHT_MAX_BOARD_SIZE 等环境变量


class InvalidRequest(Exception):
    pass


@app.errorhandler(InvalidRequest)
def bad_request(e):
    return jsonify({'success': False, 'message': str(e)}), 400


def read_json():
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def read_size(data):
    n = data.get('n')
    if not isinstance(n, int) or isinstance(n, bool) or n < 1:
        raise InvalidRequest('棋盘大小必须是正整数')
    if n > app.config['MAX_BOARD_SIZE']:
        raise InvalidRequest(f'棋盘大小不能超过{app.config["MAX_BOARD_SIZE"]}')
    return n


def read_heuristic(data):
    name = data.get('heuristic', app.config['DEFAULT_HEURISTIC'])
    try:
        return Heuristic(name)
    except ValueError:
        raise InvalidRequest(f'未知的启发策略: {name}')


def read_path(data, n):
    path = data.get('path')
    if not isinstance(path, list) or not path:
        raise InvalidRequest('缺少路径数据')
    try:
        return replay(n, [tuple(sq) for sq in path])
    except (InvalidMoveError, TypeError, ValueError) as e: # 用户提交的路径不合法
        raise InvalidRequest(f'路径不合法: {e}')


@app.route('/api/solve', methods=['POST'])
def solve_tour(): # 从起点搜索完整路径
    data = read_json()
    n = read_size(data)
    heuristic = read_heuristic(data)
    start = data.get('start')
    if not isinstance(start, list) or len(start) != 2 \
            or not all(isinstance(v, int) for v in start) \
            or not all(0 <= v < n for v in start):
        raise InvalidRequest('起点不在棋盘内')
    if heuristic is not Heuristic.WARNSDORFF and n > app.config['MAX_SEARCH_SIZE']:
        raise InvalidRequest(f'{heuristic.value}策略的棋盘大小不能超过{app.config["MAX_SEARCH_SIZE"]}')

    solver = TourSolver(n, tuple(start), heuristic)
    solved = solver.solve()
    board = solver.board
    app.logger.info('solve n=%d start=%s heuristic=%s solved=%s iterations=%d',
                    n, start, heuristic.value, solved, solver.iterations)
    return jsonify({
        'success': True,
        'solved': solved,
        'path': [list(sq) for sq in board.path()] if solved else [],
        'board': board.visit_order() if solved else [],
        'closed': board.is_closed_tour(),
        'iterations': solver.iterations,
        'message': f'共搜索{solver.iterations}个节点' if solved else '该起点不存在完整路径'
    })


@app.route('/api/moves', methods=['POST'])
def next_moves(): # 当前位置可走的下一步
    data = read_json()
    n = read_size(data)
    heuristic = read_heuristic(data)
    board = read_path(data, n)
    moves = order_moves(board.possible_moves(), heuristic, board)
    return jsonify({
        'success': True,
        'moves': [list(sq) for sq in moves],
        'message': f'共有{len(moves)}种走法'
    })


@app.route('/api/check', methods=['POST'])
def check_path(): # 检查提交的路径是否完成 是否闭合
    data = read_json()
    n = read_size(data)
    board = read_path(data, n)
    solved = board.is_solved()
    closed = board.is_closed_tour()
    if not solved:
        message = f'还差{n * n - 1 - board.total_moves}步'
    else:
        message = '闭合路径' if closed else '开放路径'
    return jsonify({
        'success': True,
        'solved': solved,
        'closed': closed,
        'message': message
    })


if __name__ == '__main__':
    app.run(debug=True, port=5000)
