import logging
from enum import Enum

from pydantic import BaseModel


class StreamType(str, Enum):
    FAST = "fast"
    SERVER = "server"


class AppContext(BaseModel):
    verbose: int = logging.INFO
