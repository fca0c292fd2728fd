"""
Flask server for the web calculator.

Serves the calculator page and a small JSON API. The page forwards every
button click and recognised key press to the API, which runs it through the
state machine and answers with the text for both displays.
"""

import logging
import threading
from typing import Optional

from flask import Flask, jsonify, render_template, request

from .. import config
from ..adapter import KEY_COMMANDS, command_for_button, command_for_key, render
from ..commands import ClearAll, Command
from ..machine import apply
from ..state import DEFAULT_STATE, CalculatorState

logger = logging.getLogger(__name__)

app = Flask(__name__)

# Process-wide calculator state
_state: CalculatorState = DEFAULT_STATE
_state_lock = threading.Lock()


def current_state() -> CalculatorState:
    with _state_lock:
        return _state


def reset_state() -> None:
    """Reset the process-wide state to its defaults."""
    global _state
    with _state_lock:
        _state = DEFAULT_STATE


def dispatch(command: Optional[Command]):
    """
    Apply a command to the shared state and build the JSON response.

    Args:
        command: Command to apply, or None when the input was not recognised

    Returns:
        Flask JSON response with the rendered view and a ``handled`` flag
    """
    global _state
    with _state_lock:
        if command is not None:
            _state = apply(command, _state)
        view = render(_state)
    payload = view.to_dict()
    payload["handled"] = command is not None
    return jsonify(payload)


def _required_field(name: str):
    data = request.get_json(silent=True)
    if not isinstance(data, dict) or not data:
        return None, (jsonify({"error": "No data provided"}), 400)
    value = data.get(name)
    if not isinstance(value, str):
        return None, (jsonify({"error": f"{name} is required"}), 400)
    return value, None


@app.route("/")
def index():
    """Render the calculator page."""
    return render_template(
        "index.html",
        view=render(current_state()),
        handled_keys=sorted(KEY_COMMANDS),
    )


@app.route("/api/state", methods=["GET"])
def get_state():
    """
    Get the current displays.

    Returns:
        {"previous": "...", "operator": "...", "screen": "...", "handled": false}
    """
    return dispatch(None)


@app.route("/api/click", methods=["POST"])
def click():
    """
    Handle a click on one of the calculator buttons.

    Expected JSON payload:
        {"value": "7" | "dot" | "add" | "sub" | "mul" | "div" | "equals"
                  | "clearElement" | "clear" | "back" | "sign"}

    Returns:
        Rendered view; ``handled`` is false for unknown button values
    """
    value, error = _required_field("value")
    if error:
        return error

    command = command_for_button(value)
    if command is None:
        logger.debug("Ignoring unknown button value %r", value)
    return dispatch(command)


@app.route("/api/key", methods=["POST"])
def key():
    """
    Handle a key press forwarded from the page.

    Expected JSON payload:
        {"key": "<KeyboardEvent.key>"}

    Returns:
        Rendered view; ``handled`` is false when the key is not bound
    """
    value, error = _required_field("key")
    if error:
        return error

    command = command_for_key(value)
    if command is None:
        logger.debug("Ignoring unbound key %r", value)
    return dispatch(command)


@app.route("/api/reset", methods=["POST"])
def reset():
    """Reset calculator to initial state."""
    return dispatch(ClearAll())


def run_server(host: str = config.HOST, port: int = config.PORT, debug: bool = config.DEBUG) -> None:
    """Run the Flask development server."""
    logger.info("Starting web calculator at http://%s:%s", host, port)
    app.run(host=host, port=port, debug=debug)
