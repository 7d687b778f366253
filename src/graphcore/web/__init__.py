"""Browser-facing JSON API for the graphcore shell.

This package provides a Flask application that exposes the shell over
HTTP.  It is an **optional** extra — install with::

    pip install graphcore[web]

The ``create_app`` factory in ``app.py`` builds a graph and a shell and
serves ``POST /api/execute``, ``GET /api/commands`` and
``GET /api/status``.
"""
