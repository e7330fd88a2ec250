# Copyright 2026 HyperLIR Contributors
# SPDX-License-Identifier: Apache-2.0

"""Dash-based web UI: edit a program, compile it, send states to the service."""

from __future__ import annotations

import dash
from dash import ALL, Input, Output, State, dcc, html

from hyperlir.compiler.build import CompilationResult, CompilerError
from hyperlir.compiler.session import CompilerSession
from hyperlir.transport.client import TransmissionError

# ###############
# Public Interface
# ###############

TITLE = "HyperLIR Editor"


def create_app(session: CompilerSession, source: str = "") -> dash.Dash:
    """Create the editor application bound to *session*.

    *source* is placed in the editor and compiled once so the state list is
    populated on first load.
    """
    app = dash.Dash(__name__, title=TITLE)
    app.layout = _build_layout(session, source)

    @app.callback(
        Output("states-panel", "children"),
        Output("compile-status", "children"),
        Input("run-button", "n_clicks"),
        State("editor", "value"),
        prevent_initial_call=True,
    )
    def _on_run(_n_clicks: int | None, text: str | None) -> tuple[list, str]:
        return compile_and_render(session, text or "")

    @app.callback(
        Output("send-status", "children"),
        Input({"type": "send-state", "index": ALL}, "n_clicks"),
        prevent_initial_call=True,
    )
    def _on_send(_clicks: list[int | None]):
        return handle_send_click(session, dash.ctx.triggered_id, dash.ctx.triggered[0].get("value"))

    return app


def compile_and_render(session: CompilerSession, text: str) -> tuple[list, str]:
    """Compile *text* and return the state list children and a status line."""
    try:
        result = session.run(text)
    except CompilerError as exc:
        return [], f"Error: {exc}"
    status = f"Compiled {len(result.states)} state(s)."
    if result.warnings:
        status += " " + " ".join(f"Warning: {w.message}" for w in result.warnings)
    return render_states(result), status


def render_states(result: CompilationResult) -> list:
    """Render one list entry per compiled state: name, preview and a send button."""
    return [
        html.Li(
            [
                html.Pre(name, className="state-name"),
                html.Pre(preview, className="state-preview"),
                html.Button("▶︎", id={"type": "send-state", "index": name}, n_clicks=0),
            ]
        )
        for name, preview in result.previews
    ]


def handle_send_click(session: CompilerSession, triggered_id: object, clicks: int | None):
    """Send the state whose button was clicked, or return ``dash.no_update``.

    Re-rendering the state list also fires the send callback, without a click.
    """
    if not isinstance(triggered_id, dict) or not clicks:
        return dash.no_update
    return send_state(session, triggered_id["index"])


def send_state(session: CompilerSession, name: str) -> str:
    """Send state *name* and return a status message for display."""
    try:
        response = session.send(name)
    except KeyError:
        return f"No compiled state '{name}'."
    except TransmissionError as exc:
        return f"Failed to send state '{name}': {exc}"
    return f"State '{name}' sent. Server response: {response}"


# ################
# Implementation
# ################


def _build_layout(session: CompilerSession, source: str) -> html.Div:
    """Build the application layout."""
    states: list = []
    status = ""
    if source:
        states, status = compile_and_render(session, source)
    return html.Div(
        [
            html.H1(TITLE),
            html.P(f"Execution service: {session.endpoint}"),
            dcc.Textarea(
                id="editor",
                value=source,
                style={"width": "100%", "height": "40vh", "fontFamily": "monospace"},
            ),
            html.Button("Run", id="run-button", n_clicks=0),
            html.Div(status, id="compile-status"),
            html.Hr(),
            html.Ul(states, id="states-panel"),
            html.Div(id="send-status", style={"color": "#666"}),
        ],
        style={"fontFamily": "sans-serif", "padding": "2rem"},
    )
