from __future__ import annotations

import logging

from starlette.config import Config

config = Config(".env")

LOG_LEVEL = config("LOG_LEVEL", cast=int, default=logging.WARNING)
LOGGING_CONFIG_PATH = config("LOGGING_CONFIG_PATH", default="logging.yaml")

BUFFER_INITIAL_CAPACITY = config("BUFFER_INITIAL_CAPACITY", cast=int, default=8192)

buffer_max_capacity = config("BUFFER_MAX_CAPACITY", default=None)  # optional int
if buffer_max_capacity:
    BUFFER_MAX_CAPACITY: int | None = int(buffer_max_capacity)
else:
    BUFFER_MAX_CAPACITY = None
