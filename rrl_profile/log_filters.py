import logging
import re
from collections.abc import Mapping

# Elevation queries carry long coordinate lists in the query string
_QUERY_RE = re.compile(r"\?(\S+)")


class TruncatingFilter(logging.Filter):
    def __init__(self, name: str = "", max_length: int = 250):
        super().__init__(name)
        self.max_length = max_length

    def _truncate(self, text: str) -> str:
        text = _QUERY_RE.sub(lambda m: "?" + self._cut(m.group(1)), text)
        return self._cut(text)

    def _cut(self, text: str) -> str:
        if len(text) > self.max_length:
            return text[: self.max_length] + "..."
        return text

    def _shorten(self, arg):
        s_arg = str(arg)
        if len(s_arg) > self.max_length:
            return self._truncate(s_arg)
        return arg  # Keep original object

    def filter(self, record: logging.LogRecord) -> bool:
        if isinstance(record.args, Mapping):
            record.args = {k: self._shorten(v) for k, v in record.args.items()}
        elif record.args:
            record.args = tuple(self._shorten(arg) for arg in record.args)
        elif isinstance(record.msg, str) and len(record.msg) > self.max_length:
            # For f-strings or literals
            record.msg = self._truncate(record.msg)
        return True
