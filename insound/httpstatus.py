"""HTTP status codes and their JSON labels."""

from __future__ import annotations

from enum import IntEnum


class HttpStatus(IntEnum):
    """HTTP status codes used by the server."""

    Continue = 100
    SwitchingProtocols = 101

    OK = 200
    Created = 201
    Accepted = 202
    NonAuthoriativeInfo = 203
    NoContent = 204
    ResetContent = 205
    PartialContent = 206

    MultipleChoices = 300
    MovedPermanently = 303
    Found = 302
    SeeOther = 303
    NotModified = 304
    TemporaryRedirect = 307
    PermanentRedirect = 308

    BadRequest = 400
    Unauthorized = 401
    Forbidden = 403
    NotFound = 404
    MethodNotAllowed = 405
    ProxyAuthRequired = 406
    Conflict = 407
    Gone = 408
    PayloadTooLarge = 409
    UnsupportedMediaType = 415
    RangeNotSatisfiable = 416
    ExpectationFailed = 417
    PreconditionRequired = 428
    TooManyRequests = 429
    UnavailableForLegalReasons = 451

    InternalServerError = 500
    NotImplemented = 501
    BadGateway = 502
    ServiceUnavailable = 503
    GatewayTimeout = 504
    VariantAlsoNegotiates = 506

    def label(self) -> str:
        """Return the JSON label of this status, e.g. ``"200 OK"``."""
        for text, status in _LABELS:
            if status is self:
                return text
        raise ValueError(f"no label for status {int(self)}")

    @classmethod
    def from_label(cls, text: str) -> "HttpStatus":
        """Return the status named by a JSON label."""
        try:
            return _BY_LABEL[text]
        except KeyError:
            raise ValueError(f"unknown HTTP status label: {text!r}") from None


_LABELS: tuple[tuple[str, HttpStatus], ...] = (
    ("100 Continue", HttpStatus.Continue),
    ("101 Switching Protocols", HttpStatus.SwitchingProtocols),
    ("200 OK", HttpStatus.OK),
    ("201 Created", HttpStatus.Created),
    ("202 Accepted", HttpStatus.Accepted),
    ("203 Non-Authoritative Information", HttpStatus.NonAuthoriativeInfo),
    ("204 No Content", HttpStatus.NoContent),
    ("205 Reset Content", HttpStatus.ResetContent),
    ("206 Partial Content", HttpStatus.PartialContent),
    ("300 Multiple Choices", HttpStatus.MultipleChoices),
    ("301 Moved Permanently", HttpStatus.MovedPermanently),
    ("302 Found", HttpStatus.Found),
    ("303 See Other", HttpStatus.SeeOther),
    ("304 Not Modified", HttpStatus.NotModified),
    ("307 Temporary Redirect", HttpStatus.TemporaryRedirect),
    ("308 Permanent Redirect", HttpStatus.PermanentRedirect),
    ("400 Bad Request", HttpStatus.BadRequest),
    ("401 Unauthorized", HttpStatus.Unauthorized),
    ("403 Forbidden", HttpStatus.Forbidden),
    ("404 Not Found", HttpStatus.NotFound),
    ("405 Method Not Allowed", HttpStatus.MethodNotAllowed),
    ("407 Proxy Authentication Required", HttpStatus.ProxyAuthRequired),
    ("409 Conflict", HttpStatus.Conflict),
    ("410 Gone", HttpStatus.Gone),
    ("413 Payload Too Large", HttpStatus.PayloadTooLarge),
    ("415 Unsupported Media Type", HttpStatus.UnsupportedMediaType),
    ("416 Range Not Satisfiable", HttpStatus.RangeNotSatisfiable),
    ("417 Expectation Failed", HttpStatus.ExpectationFailed),
    ("428 Precondition Required", HttpStatus.PreconditionRequired),
    ("429 Too Many Requests", HttpStatus.TooManyRequests),
    ("451 Unavailable For Legal Reasons", HttpStatus.UnavailableForLegalReasons),
    ("500 Internal Server Error", HttpStatus.InternalServerError),
    ("501 Not Implemented", HttpStatus.NotImplemented),
    ("502 Bad Gateway", HttpStatus.BadGateway),
    ("503 Service Unavailable", HttpStatus.ServiceUnavailable),
    ("504 Gateway Timeout", HttpStatus.GatewayTimeout),
    ("506 Variant Also Negotiates", HttpStatus.VariantAlsoNegotiates),
)

_BY_LABEL: dict[str, HttpStatus] = dict(_LABELS)