#!/usr/bin/env python3
# SPDX-License-Identifier: LicenseRef-CubeAlarm-Custom-Attribution
# Copyright (c) 2025 Paul Shapiro
"""
Cube telemetry server.
Accepts decrypted state frames over REST, keeps the latest cube state and
pushes it to WebSocket clients.
"""

import logging
import threading
from datetime import datetime
from typing import Dict, Optional, Tuple

from flask import Flask, request, jsonify
from flask_cors import CORS
from flask_socketio import SocketIO, emit

from smartcube.config import ServerConfig
from smartcube.cube_model import CubeModel
from smartcube.cube_render import face_letters, format_cube
from smartcube.errors import CubeDataError

logger = logging.getLogger(__name__)


class CubeMonitor:
    """Holds the most recent decoded cube state."""

    def __init__(self):
        self._lock = threading.Lock()
        self.cube: Optional[CubeModel] = None
        self.frames_received = 0
        self.last_frame_at: Optional[str] = None

    def reset(self):
        with self._lock:
            self.cube = None
            self.frames_received = 0
            self.last_frame_at = None

    def update(self, cube: CubeModel) -> Tuple[int, bool]:
        """Store a new state.

        Returns the frame number and whether this frame solved the cube.
        """
        with self._lock:
            was_solved = self.cube is not None and self.cube.is_solved()
            self.cube = cube
            self.frames_received += 1
            self.last_frame_at = datetime.now().isoformat()
            frame_number = self.frames_received
        return frame_number, cube.is_solved() and not was_solved

    def get_status(self) -> Dict:
        with self._lock:
            cube = self.cube
            frames_received = self.frames_received
            last_frame_at = self.last_frame_at
        return {
            'frames_received': frames_received,
            'solved': cube.is_solved() if cube else False,
            'last_frame_at': last_frame_at,
            'timestamp': datetime.now().isoformat(),
        }


def state_document(cube: CubeModel) -> Dict:
    document = cube.to_dict()
    document['faces'] = face_letters(cube)
    return document


def decode_frame(body: Dict) -> CubeModel:
    """Decode a request body holding either 'cube_data' cells or a hex 'payload'."""
    if 'cube_data' in body:
        cells = body['cube_data']
        if not isinstance(cells, list) or not all(isinstance(v, int) for v in cells):
            raise CubeDataError("'cube_data' must be a list of integers")
        return CubeModel.from_cube_data(cells)
    if 'payload' in body:
        try:
            payload = bytes.fromhex(str(body['payload']))
        except ValueError:
            raise CubeDataError("'payload' is not valid hex") from None
        return CubeModel.from_payload(payload)
    raise CubeDataError("Request must contain 'cube_data' or 'payload'")


# Global instances
config = ServerConfig.from_env()
app = Flask(__name__)
CORS(app, origins=config.cors_origins)
socketio = SocketIO(app, cors_allowed_origins=config.cors_origins)
cube_monitor = CubeMonitor()


# REST API Routes
@app.route('/api/cube/frame', methods=['POST'])
def post_frame():
    """Decode a state frame and publish it."""
    body = request.get_json(silent=True)
    if not isinstance(body, dict):
        return jsonify({'error': 'Expected a JSON object'}), 400

    try:
        cube = decode_frame(body)
    except CubeDataError as e:
        logger.warning(f"⚠️ Rejected frame: {e}")
        return jsonify({'error': str(e), 'offset': e.offset}), 400

    frame_number, just_solved = cube_monitor.update(cube)
    document = state_document(cube)
    turn = cube.turn
    logger.info(f"🔄 Frame {frame_number}: {turn.notation if turn else 'no move'}")
    logger.debug("Cube state:\n%s", format_cube(cube))

    socketio.emit('cube_state', document)
    if just_solved:
        logger.info("🎉 Cube solved!")
        socketio.emit('cube_solved', {'timestamp': datetime.now().isoformat()})
    return jsonify(document)


@app.route('/api/cube/state', methods=['GET'])
def get_state():
    """Get the latest decoded cube state."""
    cube = cube_monitor.cube
    if cube is None:
        return jsonify({'error': 'No frame received yet'}), 404
    return jsonify(state_document(cube))


@app.route('/api/cube/faces', methods=['GET'])
def get_faces():
    """Get the color grid of every face of the latest state."""
    cube = cube_monitor.cube
    if cube is None:
        return jsonify({'error': 'No frame received yet'}), 404
    return jsonify(face_letters(cube))


@app.route('/api/status', methods=['GET'])
def get_status():
    """Get service status."""
    return jsonify(cube_monitor.get_status())


# WebSocket Events
@socketio.on('connect')
def handle_connect():
    """Send the current status to a new client."""
    logger.info("Client connected")
    emit('status', cube_monitor.get_status())


@socketio.on('disconnect')
def handle_disconnect(reason=None):
    logger.info("Client disconnected")


def main():
    logging.basicConfig(level=config.log_level)
    logger.info(f"🚀 Starting cube telemetry server on http://{config.host}:{config.port}")
    socketio.run(app, host=config.host, port=config.port, debug=False, allow_unsafe_werkzeug=True)


if __name__ == '__main__':
    main()
