# Copyright 2026 HyperLIR Contributors
# SPDX-License-Identifier: Apache-2.0

"""Transmission of compiled artifacts to the execution service."""

from __future__ import annotations

import json
import logging
from typing import Any

import httpx

from hyperlir.compiler.artifact import serialize
from hyperlir.model.artifact import Artifact

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############

DEFAULT_ENDPOINT = "http://127.0.0.1:8001/evolve"


class TransmissionError(Exception):
    """Raised when an artifact could not be delivered to the execution service.

    Attributes:
        status: HTTP status code of the response, or ``None`` when no
            response was received.
        description: Human-readable description of the failure.
    """

    def __init__(self, status: int | None, description: str) -> None:
        prefix = f"HTTP {status}" if status is not None else "Transport error"
        super().__init__(f"{prefix}: {description}")
        self.status = status
        self.description = description


def send_artifact(
    artifact: Artifact,
    endpoint: str = DEFAULT_ENDPOINT,
    *,
    timeout: float | None = None,
    client: httpx.Client | None = None,
) -> Any:
    """POST *artifact* to *endpoint* as JSON and return the decoded response.

    Exactly one request is made; failures are not retried.

    Args:
        artifact: The compiled artifact to send.
        endpoint: URL of the execution service.
        timeout: Request timeout in seconds. ``None`` keeps the timeout of
            *client*, or means no timeout when no client is given.
        client: Optional preconfigured client; one is created (and closed)
            per call when omitted.

    Returns:
        The JSON-decoded response body, or the raw text when the body is not
        JSON.

    Raises:
        TransmissionError: On a non-2xx status or any transport failure.
    """
    payload = serialize(artifact)
    headers = {"Content-Type": "application/json"}

    try:
        if client is not None:
            request_timeout = httpx.USE_CLIENT_DEFAULT if timeout is None else timeout
            response = client.post(endpoint, content=payload, headers=headers, timeout=request_timeout)
        else:
            with httpx.Client(timeout=timeout) as own_client:
                response = own_client.post(endpoint, content=payload, headers=headers)
    except httpx.HTTPError as exc:
        logger.warning("Sending artifact to %s failed: %s", endpoint, exc)
        raise TransmissionError(None, str(exc) or type(exc).__name__) from exc

    if not response.is_success:
        logger.warning("Execution service at %s returned %d", endpoint, response.status_code)
        raise TransmissionError(response.status_code, response.text or response.reason_phrase)

    logger.info("Artifact delivered to %s (%d)", endpoint, response.status_code)
    try:
        return response.json()
    except json.JSONDecodeError:
        return response.text
