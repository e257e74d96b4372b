"""Package logger shared by every graphkit module."""

from __future__ import annotations

import logging

logger = logging.getLogger("graphkit")
