# app.py
"""
Grid path visualizer backend (Flask).
Endpoints:
  POST /api/generate_maze  -> { rows, cols, wall_probability?, seed? } returns
                             { maze: [[0/1/2/3]], rows, cols, start, finish }
  POST /api/solve_maze     -> { maze: [...], algorithm: 'bfs'|'dfs' } returns
                             { explored: int, path: [[row,col]..], time: ms,
                               visited_steps: [[row,col]..], distance: int|null }
Run locally:
  pip install -e .
  python app.py
"""
import logging

from flask import Flask, request, jsonify
from flask_cors import CORS

import config
from grid import Grid, make_grid
from maze import MazeGenerator
from traversal import Strategy, Traversal

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger("gridpath")

app = Flask(__name__)
CORS(app)


# --- Helpers --- #
def json_payload():
    payload = request.get_json(silent=True)
    return payload if isinstance(payload, dict) else {}


def number_field(payload, key, cast, default=None):
    """Read a numeric field; a present but unusable value is a ValueError."""
    value = payload.get(key)
    if value is None:
        return default
    if isinstance(value, bool):
        raise ValueError(f"{key} must be a number, got {value!r}")
    try:
        return cast(value)
    except (TypeError, ValueError):
        raise ValueError(f"{key} must be a number, got {value!r}") from None


def steps_until(steps, finish):
    """Expansion log up to and including the finish cell."""
    shown = []
    for step in steps:
        shown.append([step[0], step[1]])
        if step == finish:
            break
    return shown


def solve(grid, algorithm):
    search = Traversal(grid, grid.start, Strategy.from_name(algorithm))
    visited_steps = steps_until(search.get_steps(), grid.finish)
    path = search.path_to(*grid.finish) or []
    path.reverse()
    distance = None
    if search.strategy is Strategy.BREADTH_FIRST:
        distance = search.distance_to(*grid.finish)
    return {
        'explored': len(visited_steps),
        'path': [[r, c] for r, c in path],
        'time': int(search.elapsed_ms),
        'visited_steps': visited_steps,
        'distance': distance,
    }


# --- Error handlers --- #
@app.errorhandler(ValueError)
def bad_request(exc):
    logger.warning("rejected request on %s: %s", request.path, exc)
    return jsonify({'error': str(exc)}), 400


# --- Flask API routes --- #
@app.route('/')
def index():
    return jsonify({'name': 'gridpath', 'endpoints': ['/api/generate_maze', '/api/solve_maze']})


@app.route('/health')
def health():
    return jsonify({'status': 'ok'})


@app.route('/api/generate_maze', methods=['POST'])
def api_generate_maze():
    payload = json_payload()
    rows = config.clamp_size(number_field(payload, 'rows', int, config.DEFAULT_ROWS))
    cols = config.clamp_size(number_field(payload, 'cols', int, config.DEFAULT_COLS))
    probability = number_field(payload, 'wall_probability', float)
    seed = number_field(payload, 'seed', int)

    grid = make_grid(rows, cols)
    MazeGenerator(grid, probability, seed).random_maze()
    logger.info("generated %dx%d maze with %d walls", rows, cols, grid.wall_count())
    return jsonify({
        'maze': grid.to_codes(),
        'rows': rows,
        'cols': cols,
        'start': list(grid.start),
        'finish': list(grid.finish),
    })


@app.route('/api/solve_maze', methods=['POST'])
def api_solve_maze():
    payload = json_payload()
    maze = payload.get('maze')
    algorithm = str(payload.get('algorithm') or 'bfs').lower()
    if not maze:
        return jsonify({'error': 'maze data required'}), 400

    grid = Grid.from_codes(maze)
    result = solve(grid, algorithm)
    logger.info(
        "%s on %dx%d: explored %d, path length %d",
        algorithm, grid.rows, grid.cols, result['explored'], len(result['path']),
    )
    return jsonify(result)


if __name__ == '__main__':
    app.run(host='0.0.0.0', port=config.PORT, debug=config.DEBUG)
