# Copyright 2026 HyperLIR Contributors
# SPDX-License-Identifier: Apache-2.0

"""Delivery of compiled artifacts to the execution service."""

from hyperlir.transport.client import DEFAULT_ENDPOINT, TransmissionError, send_artifact

__all__ = [
    "DEFAULT_ENDPOINT",
    "TransmissionError",
    "send_artifact",
]
