"""Flask application factory for the graphcore web UI.

``create_app`` builds one graph, one registry and one shell per app,
and serves three JSON endpoints:

- ``POST /api/execute`` — run a command line.  The optional ``input``
  field is the dataset text the command reads (e.g. the arcs for
  ``add-arcs``).
- ``GET /api/commands`` — name, synopsis and return type of every
  command.
- ``GET /api/status`` — graph size and whether the shell has quit.
"""

from __future__ import annotations

import io

from flask import Flask, Response, jsonify, request

from graphcore.builtins import default_registry
from graphcore.graph import Graph
from graphcore.logging import Logger
from graphcore.shell import Shell

_HTTP_BAD_REQUEST = 400


def create_app() -> Flask:
    """Create and configure the Flask application.

    Returns:
        A configured Flask application ready to serve.

    """
    graph = Graph()
    logger = Logger()
    output = io.StringIO()
    registry = default_registry(graph, logger, stdout=output)

    app = Flask(__name__)

    @app.route("/api/execute", methods=["POST"])
    def execute() -> tuple[Response, int] | Response:  # pyright: ignore[reportUnusedFunction]
        """Execute a command line and return JSON output.

        Expects JSON body: ``{"command": "...", "input": "..."}``

        Returns:
            JSON with ``output``, ``status``, ``kind`` and ``quit`` fields.

        """
        data = request.get_json(silent=True)
        if not isinstance(data, dict) or "command" not in data:
            return jsonify({"error": "Missing 'command' field"}), _HTTP_BAD_REQUEST
        if not isinstance(data["command"], str) or not isinstance(data.get("input", ""), str):
            return jsonify({"error": "'command' and 'input' must be strings"}), _HTTP_BAD_REQUEST

        if registry.quitting:
            return jsonify({"output": "", "status": None, "kind": None, "quit": True})

        shell = Shell(registry, stdin=io.StringIO(data.get("input", "")), logger=logger)
        result = shell.execute(data["command"])

        # OTHER commands write to the shared buffer instead of returning text.
        emitted = output.getvalue()
        output.seek(0)
        output.truncate()

        status = shell.last_status
        return jsonify(
            {
                "output": emitted + result,
                "status": str(status) if status is not None else None,
                "kind": status.kind.name if status is not None else None,
                "quit": registry.quitting,
            }
        )

    @app.route("/api/commands")
    def commands() -> Response:  # pyright: ignore[reportUnusedFunction]
        """List every registered command."""
        return jsonify(
            [
                {
                    "name": c.name,
                    "synopsis": c.synopsis,
                    "return_type": c.return_type.value,
                }
                for c in registry.commands
            ]
        )

    @app.route("/api/status")
    def status() -> Response:  # pyright: ignore[reportUnusedFunction]
        """Return graph size and the quit flag."""
        return jsonify(
            {
                "nodes": graph.node_count,
                "arcs": graph.arc_count,
                "quit": registry.quitting,
            }
        )

    return app
