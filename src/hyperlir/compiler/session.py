# Copyright 2026 HyperLIR Contributors
# SPDX-License-Identifier: Apache-2.0

"""An editing session: compile on demand, then send states on selection."""

from __future__ import annotations

from typing import Any

from hyperlir.compiler.build import CompilationResult, compile_source
from hyperlir.compiler.frontend import Parser, parse_declarations
from hyperlir.model.artifact import Artifact
from hyperlir.transport.client import DEFAULT_ENDPOINT, send_artifact

# ###############
# Public Interface
# ###############


class CompilerSession:
    """Holds the artifacts of the latest successful run for later retrieval.

    Each :meth:`run` starts from scratch. A failed run clears the lookup, so
    artifacts of an older program are never sent after the source changed.
    A failed transmission leaves the lookup untouched.
    """

    def __init__(
        self,
        parser: Parser = parse_declarations,
        endpoint: str = DEFAULT_ENDPOINT,
        timeout: float | None = None,
    ) -> None:
        self._parser = parser
        self.endpoint = endpoint
        self.timeout = timeout
        self._result: CompilationResult | None = None

    @property
    def result(self) -> CompilationResult | None:
        """The latest successful compilation, or None."""
        return self._result

    def run(self, source: str) -> CompilationResult:
        """Compile *source* and make its artifacts available by state name.

        Raises:
            CompilerError: If the source fails to parse or compile.
        """
        self._result = None
        self._result = compile_source(source, self._parser)
        return self._result

    def artifact(self, name: str) -> Artifact:
        """Return the artifact of state *name* from the latest run.

        Raises:
            KeyError: If there is no successful run or no such state.
        """
        if self._result is None:
            raise KeyError(name)
        return self._result.artifact(name)

    def send(self, name: str, **kwargs: Any) -> Any:
        """Send the artifact of state *name* to the configured endpoint.

        Extra keyword arguments are passed to
        :func:`~hyperlir.transport.client.send_artifact`.

        Raises:
            KeyError: If the state is unknown.
            TransmissionError: If delivery fails.
        """
        artifact = self.artifact(name)
        kwargs.setdefault("timeout", self.timeout)
        return send_artifact(artifact, self.endpoint, **kwargs)
