import logging

from rrl_profile.log_filters import TruncatingFilter

LONG_URL = "https://api.opentopodata.org/v1/aster30m?locations=" + "|".join(
    f"52.{i:04d},113.{i:04d}" for i in range(100)
)


def _record(msg, args=()):
    return logging.LogRecord("httpx", logging.INFO, __file__, 1, msg, args, None)


def test_short_message_is_untouched():
    record = _record("HTTP Response: 200")

    assert TruncatingFilter(max_length=105).filter(record)
    assert record.getMessage() == "HTTP Response: 200"


def test_long_message_is_truncated():
    record = _record(f"HTTP Request: GET {LONG_URL}")

    TruncatingFilter(max_length=105).filter(record)

    message = record.getMessage()
    assert message.startswith("HTTP Request: GET https://api.opentopodata.org/v1/aster30m?locations=52.0000")
    assert message.endswith("...")
    assert len(message) <= 105 + 3


def test_long_args_are_truncated():
    record = _record('HTTP Request: %s %s "%s"', ("GET", LONG_URL, "HTTP/1.1 200 OK"))

    TruncatingFilter(max_length=105).filter(record)

    method, url, status = record.args
    assert method == "GET"
    assert url.endswith("...")
    assert status == "HTTP/1.1 200 OK"


def test_mapping_args_keep_their_keys():
    record = _record("%(method)s %(url)s", ({"method": "GET", "url": LONG_URL},))

    TruncatingFilter(max_length=105).filter(record)

    assert record.args["method"] == "GET"
    assert record.args["url"].endswith("...")
    assert record.getMessage().startswith("GET https://api.opentopodata.org/v1/aster30m?")
