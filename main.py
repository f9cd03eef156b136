"""
main.py — Algorithm Tracer Flask App
======================================
Thin JSON adapter over the engine.  It turns user commands into engine
calls and hands back snapshots; it holds no algorithm logic of its own.

Routes:
  GET  /api/algorithms               – algorithm catalogue + structure operations
  POST /api/generate/array           – random array
  POST /api/generate/search          – random array + target
  POST /api/generate/graph           – random graph (replaces the current graph)
  GET  /api/graph                    – the current graph
  POST /api/graph/reset              – back to the sample graph
  POST /api/sort                     – run a sorting tracer
  POST /api/search                   – run a searching tracer
  POST /api/graph                    – run a graph tracer
  GET  /api/data-structure/<name>    – the current BST / heap
  POST /api/data-structure           – run a structure operation (and commit it)
  POST /api/data-structure/reset     – restore a structure's seed
  GET  /api/playback                 – playback status + current snapshot
  POST /api/playback/speed           – set tick interval (ms or preset name)
  POST /api/playback/goto            – jump to a snapshot index
  POST /api/playback/<command>       – play | pause | toggle | step_forward | step_backward | reset

Every run loads its trace into the playback controller and answers with
{"trace": …, "playback": …, "metrics": …}.  Malformed input answers 400
{"error": msg} and changes nothing.

State management:
  Each browser session gets its own TracerSession and PlaybackController.
  They live in a TracerStore (app.extensions["tracer"]) keyed by an id
  kept in the signed Flask session cookie.  Configuration comes from the
  defaults below, FLASK_-prefixed environment variables, then the mapping
  passed to create_app().
"""

import logging
import secrets
import threading
from typing import Any, Callable, Dict, Mapping, Optional

from flask import Blueprint, Flask, current_app, jsonify, request, session

from algorithms import list_algorithms
from engine import DEFAULT_SPEED_MS, SPEED_PRESETS, PlaybackController, TracerSession, ValidationError
from engine.inputs import generate_array, generate_search_input
from engine.validation import normalise_key, parse_index, parse_optional_int, parse_speed
from structures import list_structures


logger = logging.getLogger(__name__)

api = Blueprint("api", __name__, url_prefix="/api")


# ---------------------------------------------------------------------------
# App State Helpers
# ---------------------------------------------------------------------------
class TracerState:
    def __init__(self, session: TracerSession, playback: PlaybackController):
        self.session  = session
        self.playback = playback


class TracerStore:
    """One TracerState per browser session, created on first use."""

    def __init__(self, factory: Callable[[], TracerState]):
        self._factory = factory
        self._states: Dict[str, TracerState] = {}
        self._lock = threading.Lock()

    def get(self, state_id: str) -> TracerState:
        with self._lock:
            state = self._states.get(state_id)
            if state is None:
                state = self._states[state_id] = self._factory()
                logger.info("new tracer state %s (%d active)", state_id, len(self._states))
            return state

    def __len__(self) -> int:
        return len(self._states)


def get_state() -> TracerState:
    """The caller's TracerState, keyed by the id in their session cookie."""
    if "tracer_id" not in session:
        session["tracer_id"] = secrets.token_hex(16)
    return current_app.extensions["tracer"].get(session["tracer_id"])


def _body() -> dict:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def _optional_int(data: dict, key: str) -> Optional[int]:
    return parse_optional_int(data.get(key), key.capitalize())


def _playback_payload() -> dict:
    playback = get_state().playback
    snapshot = playback.current_snapshot()
    return {
        "playback": playback.status().to_dict(),
        "snapshot": snapshot.to_dict() if snapshot is not None else None,
    }


def _load(trace) -> Any:
    """Replace the playback trace and answer with it and the run's metrics."""
    state = get_state()
    state.playback.load(trace)
    metrics = state.session.metrics
    return jsonify({
        "trace":    trace.to_dict(),
        "playback": state.playback.status().to_dict(),
        "metrics":  metrics.to_dict() if metrics is not None else None,
    })


@api.errorhandler(ValidationError)
def handle_validation_error(exc: ValidationError):
    logger.warning("rejected %s %s: %s", request.method, request.path, exc)
    return jsonify({"error": str(exc)}), 400


# ---------------------------------------------------------------------------
# API: Catalogue
# ---------------------------------------------------------------------------
@api.route("/algorithms", methods=["GET"])
def api_algorithms():
    return jsonify({
        "algorithms": [a.to_dict() for a in list_algorithms()],
        "structures": [s.to_dict() for s in list_structures()],
        "speedPresets": dict(SPEED_PRESETS),
    })


# ---------------------------------------------------------------------------
# API: Input Generation
# ---------------------------------------------------------------------------
@api.route("/generate/array", methods=["POST"])
def api_generate_array():
    data = _body()
    return jsonify({"array": generate_array(size=_optional_int(data, "size"), seed=_optional_int(data, "seed"))})


@api.route("/generate/search", methods=["POST"])
def api_generate_search():
    data = _body()
    values, target = generate_search_input(size=_optional_int(data, "size"), seed=_optional_int(data, "seed"))
    return jsonify({"array": values, "target": target})


@api.route("/generate/graph", methods=["POST"])
def api_generate_graph():
    data = _body()
    graph = get_state().session.generate_graph(
        num_nodes=_optional_int(data, "nodes"), seed=_optional_int(data, "seed")
    )
    return jsonify({"graph": graph.to_dict()})


@api.route("/graph", methods=["GET"])
def api_get_graph():
    return jsonify({"graph": get_state().session.graph.to_dict()})


@api.route("/graph/reset", methods=["POST"])
def api_reset_graph():
    return jsonify({"graph": get_state().session.reset_graph().to_dict()})


# ---------------------------------------------------------------------------
# API: Run Tracers
# ---------------------------------------------------------------------------
@api.route("/sort", methods=["POST"])
def api_sort():
    data = _body()
    trace = get_state().session.run("sorting", data.get("algorithm"), data.get("array"))
    return _load(trace)


@api.route("/search", methods=["POST"])
def api_search():
    data = _body()
    trace = get_state().session.run(
        "searching", data.get("algorithm"), data.get("array"), {"target": data.get("target")}
    )
    return _load(trace)


@api.route("/graph", methods=["POST"])
def api_run_graph():
    data = _body()
    tracer = get_state().session
    params = {"start": data.get("startNode")}
    if data.get("graph") is not None:
        trace = tracer.run_graph(data.get("algorithm"), data["graph"], params)
    else:
        trace = tracer.run("graph", data.get("algorithm"), params=params)
    return _load(trace)


@api.route("/data-structure/<structure>", methods=["GET"])
def api_get_structure(structure: str):
    return jsonify({"snapshot": get_state().session.snapshot(structure).to_dict()})


@api.route("/data-structure", methods=["POST"])
def api_data_structure():
    data = _body()
    trace = get_state().session.apply(data.get("structure"), data.get("operation"), data.get("value"))
    return _load(trace)


@api.route("/data-structure/reset", methods=["POST"])
def api_reset_structure():
    trace = get_state().session.reset(_body().get("structure"))
    return _load(trace)


# ---------------------------------------------------------------------------
# API: Playback
# ---------------------------------------------------------------------------
@api.route("/playback", methods=["GET"])
def api_playback():
    return jsonify(_playback_payload())


@api.route("/playback/speed", methods=["POST"])
def api_playback_speed():
    get_state().playback.set_speed(parse_speed(_body().get("speed"), SPEED_PRESETS))
    return jsonify(_playback_payload())


@api.route("/playback/goto", methods=["POST"])
def api_playback_goto():
    get_state().playback.goto(parse_index(_body().get("index")))
    return jsonify(_playback_payload())


@api.route("/playback/<command>", methods=["POST"])
def api_playback_command(command: str):
    playback = get_state().playback
    commands = {
        "play":          playback.play,
        "pause":         playback.pause,
        "toggle":        playback.toggle_play,
        "step_forward":  playback.step_forward,
        "step_backward": playback.step_backward,
        "reset":         playback.reset,
    }
    action = commands.get(normalise_key(command, "Command"))
    if action is None:
        raise ValidationError(f"Unknown playback command: {command!r}")
    action()
    return jsonify(_playback_payload())


# ---------------------------------------------------------------------------
# App Factory
# ---------------------------------------------------------------------------
def create_app(config: Optional[Mapping[str, Any]] = None) -> Flask:
    """
    Recognised config keys:
        PLAYBACK_SPEED_MS   – initial tick interval (clamped to 100..900)
        PLAYBACK_SCHEDULER  – engine.clock.Scheduler for playback ticks
                              (default: real threading timers)
        SECRET_KEY          – signs the session cookie that carries each
                              user's tracer state id
    """
    app = Flask(__name__)
    app.config.from_mapping(
        SECRET_KEY=secrets.token_hex(32),
        PLAYBACK_SPEED_MS=DEFAULT_SPEED_MS,
        PLAYBACK_SCHEDULER=None,
    )
    app.config.from_prefixed_env()
    if config:
        app.config.from_mapping(config)

    def new_state() -> TracerState:
        playback = PlaybackController(
            scheduler=app.config["PLAYBACK_SCHEDULER"],
            speed_ms=int(app.config["PLAYBACK_SPEED_MS"]),
        )
        return TracerState(TracerSession(), playback)

    app.extensions["tracer"] = TracerStore(new_state)
    app.register_blueprint(api)
    return app


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    print("=" * 60)
    print("  Algorithm Tracer")
    print("  Starting Flask server...")
    print("  Open http://localhost:5000/api/algorithms")
    print("=" * 60)
    create_app().run(debug=True, port=5000)
