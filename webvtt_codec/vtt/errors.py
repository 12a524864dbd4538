from __future__ import annotations


class VttParseError(ValueError):
    """
    Base of every parse failure.

    `kind` names the failure, `fragment` is the offending piece of input
    (token, line, timestamp field) when there is one.
    """

    kind = "invalid_format"
    message = "Invalid format"

    def __init__(self, fragment: str | None = None):
        self.fragment = fragment
        if fragment is None:
            super().__init__(self.message)
        else:
            super().__init__(f"{self.message}: {fragment!r}")


class InvalidFormat(VttParseError):
    pass


class InvalidTimestamp(VttParseError):
    kind = "invalid_timestamp"
    message = "Invalid timestamp"


class InvalidHours(InvalidTimestamp):
    kind = "invalid_hours"
    message = "Invalid hours format"


class InvalidMinutes(InvalidTimestamp):
    kind = "invalid_minutes"
    message = "Invalid minutes format"


class InvalidSeconds(InvalidTimestamp):
    kind = "invalid_seconds"
    message = "Invalid seconds format"


class InvalidMilliseconds(InvalidTimestamp):
    kind = "invalid_milliseconds"
    message = "Invalid milliseconds format"


class InvalidSetting(VttParseError):
    kind = "invalid_setting"
    message = "Invalid setting"


class MissingHeader(VttParseError):
    kind = "missing_header"
    message = "Missing WEBVTT header"


class InvalidMetadataLine(VttParseError):
    kind = "invalid_metadata_line"
    message = "Invalid metadata line"
