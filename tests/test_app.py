import pytest


def test_solve(client):
    resp = client.post('/api/solve', json={'n': 5, 'start': [0, 0]})
    assert resp.status_code == 200
    data = resp.get_json()
    assert data['success'] and data['solved']
    assert len(data['path']) == 25
    assert data['path'][0] == [0, 0]
    assert sorted(cell for col in data['board'] for cell in col) == list(range(1, 26))


def test_solve_without_tour(client):
    data = client.post('/api/solve', json={'n': 4, 'start': [0, 0]}).get_json()
    assert data['success']
    assert not data['solved']
    assert data['path'] == []
    assert not data['closed']


@pytest.mark.parametrize("body", [
    {},
    {'n': 0, 'start': [0, 0]},
    {'n': 9, 'start': [0, 0]},
    {'n': 5, 'start': [5, 0]},
    {'n': 5, 'start': [0]},
    {'n': 5, 'start': [0, 0], 'heuristic': 'random'},
])
def test_solve_rejects_bad_requests(client, body):
    resp = client.post('/api/solve', json=body)
    assert resp.status_code == 400
    assert resp.get_json()['success'] is False


def test_moves_from_corner(client):
    data = client.post('/api/moves', json={'n': 8, 'path': [[0, 0]], 'heuristic': 'none'}).get_json()
    assert data['moves'] == [[1, 2], [2, 1]]


def test_moves_skip_visited(client):
    data = client.post('/api/moves', json={'n': 8, 'path': [[0, 0], [1, 2]], 'heuristic': 'none'}).get_json()
    assert [0, 0] not in data['moves']
    assert len(data['moves']) == 5


def test_check_partial_path(client):
    data = client.post('/api/check', json={'n': 5, 'path': [[0, 0], [1, 2]]}).get_json()
    assert data['success']
    assert not data['solved']
    assert not data['closed']


def test_check_solved_path(client):
    path = client.post('/api/solve', json={'n': 5, 'start': [0, 0]}).get_json()['path']
    data = client.post('/api/check', json={'n': 5, 'path': path}).get_json()
    assert data['solved']


@pytest.mark.parametrize("path", [[[0, 0], [1, 1]], [[0, 0], 'a1'], [[9, 9]], []])
def test_check_rejects_illegal_path(client, path):
    resp = client.post('/api/check', json={'n': 5, 'path': path})
    assert resp.status_code == 400
    assert resp.get_json()['success'] is False


@pytest.mark.parametrize("heuristic", ['none', 'prefer-corners', 'prefer-running'])
def test_solve_bounds_exhaustive_policies(client, heuristic):
    resp = client.post('/api/solve', json={'n': 8, 'start': [0, 0], 'heuristic': heuristic})
    assert resp.status_code == 400
    data = resp.get_json()
    assert data['success'] is False
    assert heuristic in data['message']


def test_solve_search_size_is_configurable(client, monkeypatch):
    from app import app as flask_app
    monkeypatch.setitem(flask_app.config, 'MAX_SEARCH_SIZE', 3)
    resp = client.post('/api/solve', json={'n': 4, 'start': [0, 0], 'heuristic': 'none'})
    assert resp.status_code == 400


def test_solve_warnsdorff_allows_full_board(client):
    data = client.post('/api/solve', json={'n': 8, 'start': [0, 0], 'heuristic': 'warnsdorff'}).get_json()
    assert data['success'] and data['solved']
    assert len(data['path']) == 64
