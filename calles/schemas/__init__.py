from .common import ErrorResponse, OkResponse
from .history import HistoricalRecord, PreviousName, WikipediaInfo

__all__ = [
    "ErrorResponse",
    "HistoricalRecord",
    "OkResponse",
    "PreviousName",
    "WikipediaInfo",
]
