# Copyright 2026 HyperLIR Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the editing session."""

import json

import httpx
import pytest

from hyperlir.compiler.build import CompilerError
from hyperlir.compiler.session import CompilerSession
from hyperlir.transport.client import DEFAULT_ENDPOINT, TransmissionError

_GOOD = json.dumps(
    [
        {"type": "array", "name": "foo", "value": [["x", "y"]]},
        {"type": "state", "name": "s", "source": "foo", "rule": {"type": "inline", "value": ["r"]}, "count": 2},
    ]
)
_BAD = json.dumps([{"type": "state", "name": "s", "source": "nowhere", "rule": {"type": "inline", "value": []}}])


def _client(handler) -> httpx.Client:
    return httpx.Client(transport=httpx.MockTransport(handler))


class TestRun:
    def test_defaults(self) -> None:
        session = CompilerSession()
        assert session.endpoint == DEFAULT_ENDPOINT
        assert session.timeout is None
        assert session.result is None

    def test_successful_run_makes_artifacts_available(self) -> None:
        session = CompilerSession()
        result = session.run(_GOOD)
        assert session.result is result
        assert session.artifact("s").steps == 2

    def test_lookup_before_run(self) -> None:
        with pytest.raises(KeyError):
            CompilerSession().artifact("s")

    def test_unknown_state(self) -> None:
        session = CompilerSession()
        session.run(_GOOD)
        with pytest.raises(KeyError):
            session.artifact("other")

    def test_failed_run_clears_lookup(self) -> None:
        session = CompilerSession()
        session.run(_GOOD)
        with pytest.raises(CompilerError):
            session.run(_BAD)
        assert session.result is None
        with pytest.raises(KeyError):
            session.artifact("s")

    def test_new_run_replaces_old_artifacts(self) -> None:
        session = CompilerSession()
        session.run(_GOOD)
        session.run(json.dumps([{"type": "state", "name": "t", "source": [], "rule": []}]))
        with pytest.raises(KeyError):
            session.artifact("s")
        assert session.artifact("t").rule == {"rule": []}

    def test_custom_parser(self) -> None:
        seen: list[str] = []

        def _parser(text: str) -> list:
            seen.append(text)
            return []

        CompilerSession(parser=_parser).run("foo = (x);")
        assert seen == ["foo = (x);"]


class TestSend:
    def test_posts_to_configured_endpoint(self) -> None:
        requests: list[httpx.Request] = []

        def _handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(200, json={"status": "queued"})

        session = CompilerSession(endpoint="http://exec.test/evolve")
        session.run(_GOOD)
        with _client(_handler) as client:
            assert session.send("s", client=client) == {"status": "queued"}
        assert str(requests[0].url) == "http://exec.test/evolve"
        assert json.loads(requests[0].content)["steps"] == 2

    def test_client_timeout_is_kept_without_session_timeout(self) -> None:
        timeouts: list[dict] = []

        def _handler(request: httpx.Request) -> httpx.Response:
            timeouts.append(request.extensions["timeout"])
            return httpx.Response(200, json={})

        session = CompilerSession()
        session.run(_GOOD)
        with httpx.Client(transport=httpx.MockTransport(_handler), timeout=5.0) as client:
            session.send("s", client=client)
        assert timeouts[0]["read"] == 5.0

    def test_session_timeout_is_applied(self) -> None:
        timeouts: list[dict] = []

        def _handler(request: httpx.Request) -> httpx.Response:
            timeouts.append(request.extensions["timeout"])
            return httpx.Response(200, json={})

        session = CompilerSession(timeout=1.5)
        session.run(_GOOD)
        with httpx.Client(transport=httpx.MockTransport(_handler), timeout=5.0) as client:
            session.send("s", client=client)
        assert timeouts[0]["read"] == 1.5

    def test_unknown_state_is_not_sent(self) -> None:
        def _handler(request: httpx.Request) -> httpx.Response:
            raise AssertionError("no request expected")

        session = CompilerSession()
        session.run(_GOOD)
        with _client(_handler) as client, pytest.raises(KeyError):
            session.send("missing", client=client)

    def test_failed_send_keeps_artifacts(self) -> None:
        session = CompilerSession()
        session.run(_GOOD)
        with _client(lambda request: httpx.Response(503, text="busy")) as client:
            with pytest.raises(TransmissionError):
                session.send("s", client=client)
        assert session.artifact("s").steps == 2
