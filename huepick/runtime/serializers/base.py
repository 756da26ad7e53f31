# Copyright (c) 2026 Huepick
# SPDX-License-Identifier: MIT

"""Base types for serializers."""

from enum import Enum


class SerializerFormat(Enum):
    """Output format for serializers."""

    JSON = "json"
    JSON_PRETTY = "json_pretty"
    TEXT = "text"
