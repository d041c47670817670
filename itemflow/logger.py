from logging import INFO, Logger, LogRecord, StreamHandler, getLogger
from typing import Union

from json_log_formatter import JSONFormatter

LoggerLevelT = int
JSONValueT = Union[None, bool, int, str, float]


class PipelineJSONFormatter(JSONFormatter):
    """
    JSON formatter that also records the level and logger name.

    >>> import json
    >>> from logging import LogRecord
    >>> record = LogRecord("itemflow.logger", 20, __file__, 1, "hello", None, None)
    >>> payload = json.loads(PipelineJSONFormatter().format(record))
    >>> payload["message"], payload["level"], payload["logger"]
    ('hello', 'INFO', 'itemflow.logger')
    """

    def json_record(self, message: str, extra: dict[str, JSONValueT], record: LogRecord) -> dict[str, JSONValueT]:
        extra = super().json_record(message, extra, record)
        extra["level"] = record.levelname
        extra["logger"] = record.name
        return extra


def get_logger(level: LoggerLevelT = INFO) -> Logger:
    logger = getLogger(__name__)
    if len(logger.handlers) == 0:
        formatter = PipelineJSONFormatter()
        stream_handler = StreamHandler()
        stream_handler.setLevel(level=level)
        stream_handler.setFormatter(formatter)
        logger.addHandler(stream_handler)
        logger.setLevel(level=level)
    return logger
