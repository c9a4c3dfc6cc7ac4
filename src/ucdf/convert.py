# Copyright 2026 UCDF Contributors
# SPDX-License-Identifier: Apache-2.0

"""Conversions between UCDF documents and JDBC, MongoDB, database and HTTP URLs.

These helpers only use the public document API; no network access happens.
"""

from urllib.parse import parse_qsl, quote, unquote, urlencode, urlsplit

from ucdf.model.document import UCDF
from ucdf.model.types import AccessMode, SourceType

# ###############
# Public Interface
# ###############

JDBC_PREFIX = "jdbc:"

DEFAULT_PORTS: dict[str, str] = {
    "postgresql": "5432",
    "mysql": "3306",
    "mariadb": "3306",
    "mongodb": "27017",
    "sqlserver": "1433",
    "oracle": "1521",
}


class ConversionError(Exception):
    """Raised when a URL or document cannot be converted."""


def from_jdbc_url(url: str) -> UCDF:
    """Convert a JDBC URL into a ``db.<engine>`` document.

    Credentials may come from the userinfo part (``user:pass@host``) or from
    ``user`` and ``password`` query parameters, the latter winning. Any other
    query parameter ``k`` becomes ``c.params.k``. Percent-escapes are decoded.
    The access mode is read-write.

    Example::

        jdbc:postgresql://localhost:5432/mydb?user=postgres&ssl=true
        -> t=db.postgresql;c.host=localhost;c.port=5432;c.db=mydb;c.user=postgres;c.params.ssl=true;a=rw

    Raises:
        ConversionError: If the URL is not of the form ``jdbc:<engine>://host...``.
    """
    if not url.startswith(JDBC_PREFIX):
        raise ConversionError(f"Not a JDBC URL: {url!r}")
    parts = urlsplit(url[len(JDBC_PREFIX) :])
    if not parts.scheme or not parts.hostname:
        raise ConversionError(f"Invalid JDBC URL: {url!r}")
    try:
        port = parts.port
    except ValueError:
        raise ConversionError(f"Invalid port in JDBC URL: {url!r}") from None

    document = UCDF.with_source_type(SourceType(category="db", subtype=parts.scheme))
    document = document.with_connection("host", parts.hostname)
    if port is not None:
        document = document.with_connection("port", str(port))
    database = unquote(parts.path.lstrip("/"))
    if database:
        document = document.with_connection("db", database)
    if parts.username:
        document = document.with_connection("user", unquote(parts.username))
    if parts.password:
        document = document.with_connection("password", unquote(parts.password))

    for key, value in parse_qsl(parts.query, keep_blank_values=True):
        if key in _CREDENTIAL_KEYS:
            document = document.with_connection(key, value)
        else:
            document = document.with_connection(f"{_PARAMS_PREFIX}{key}", value)

    return document.with_access_mode(AccessMode.READ_WRITE)


def to_jdbc_url(document: UCDF) -> str:
    """Render a ``db.*`` document as a JDBC URL.

    Credentials and ``params.*`` keys are emitted as percent-encoded query
    parameters, so :func:`from_jdbc_url` reads them back unchanged.

    Raises:
        ConversionError: If the document is not a database source.
    """
    engine = _require_engine(document, "JDBC URL")
    host = document.get_connection("host", "localhost")
    port = document.get_connection("port")
    database = document.get_connection("db")

    url = f"{JDBC_PREFIX}{engine}://{host}"
    if port:
        url += f":{port}"
    if database:
        url += "/" + quote(database, safe="")

    query: list[tuple[str, str]] = []
    user = document.get_connection("user")
    if user:
        query.append(("user", user))
        password = document.get_connection("password")
        if password:
            query.append(("password", password))
    for key, value in document.connection.items():
        if key.startswith(_PARAMS_PREFIX):
            query.append((key[len(_PARAMS_PREFIX) :], value))
    if query:
        url += "?" + urlencode(query)
    return url


def from_mongodb_uri(uri: str) -> UCDF:
    """Convert a MongoDB connection string into a ``db.mongodb`` document.

    The URI is kept verbatim in ``c.uri`` since it may list several hosts and
    driver options. The database, if the URI names one, is copied to
    ``c.db``. The access mode is read-write and ``m.source`` records the
    origin as ``mongodb_uri``.

    Raises:
        ConversionError: If the URI does not use the ``mongodb`` or
            ``mongodb+srv`` scheme or has no host.
    """
    parts = urlsplit(uri)
    if parts.scheme not in _MONGODB_SCHEMES or not parts.netloc:
        raise ConversionError(f"Invalid MongoDB URI: {uri!r}")

    document = UCDF.with_source_type(SourceType(category="db", subtype="mongodb"))
    document = document.with_connection("uri", uri)
    database = unquote(parts.path.lstrip("/"))
    if database:
        document = document.with_connection("db", database)
    return document.with_access_mode(AccessMode.READ_WRITE).with_metadata("source", "mongodb_uri")


def to_connection_url(document: UCDF) -> str:
    """Render a ``db.*`` document as a driver connection URL.

    A ``uri`` connection key is returned as-is, with ``/db`` appended when
    set and the URI names no database itself. Otherwise the URL is assembled
    from ``user``, ``password``, ``host``, ``port`` (falling back to the
    engine's default port), ``db`` and ``params``.

    Raises:
        ConversionError: If the document is not a database source.
    """
    engine = _require_engine(document, "connection URL")
    database = document.get_connection("db", "")

    uri = document.get_connection("uri")
    if uri:
        if database and urlsplit(uri).path in ("", "/"):
            return f"{uri.rstrip('/')}/{database}"
        return uri

    auth = ""
    user = document.get_connection("user")
    if user:
        auth = quote(user, safe="")
        password = document.get_connection("password")
        if password:
            auth += ":" + quote(password, safe="")
        auth += "@"

    host = document.get_connection("host", "localhost")
    port = document.get_connection("port") or DEFAULT_PORTS.get(engine)
    url = f"{engine}://{auth}{host}"
    if port:
        url += f":{port}"
    url += f"/{database}"

    params = document.get_connection("params")
    if params:
        url += "?" + params.replace(",", "&")
    return url


def from_url(url: str) -> UCDF:
    """Convert an HTTP(S) URL into an ``api.rest`` document with read access.

    Query parameters are kept in ``c.params`` with ``&`` replaced by ``,``.

    Raises:
        ConversionError: If the URL has no scheme or host.
    """
    parts = urlsplit(url)
    if not parts.scheme or not parts.netloc:
        raise ConversionError(f"Invalid URL: {url!r}")

    document = UCDF.with_source_type(SourceType(category="api", subtype="rest"))
    document = document.with_connection("url", f"{parts.scheme}://{parts.netloc}")
    if parts.path and parts.path != "/":
        document = document.with_connection("path", parts.path)
    if parts.query:
        document = document.with_connection("params", parts.query.replace("&", ","))
    return document.with_access_mode(AccessMode.READ)


def to_request_url(document: UCDF) -> str:
    """Render an ``api.*`` document as a request URL (``url`` + ``path`` + ``params``).

    Raises:
        ConversionError: If the document is not an API source or has no ``url``.
    """
    _require_category(document, "api", "request URL")
    base_url = document.get_connection("url")
    if not base_url:
        raise ConversionError("API source has no 'url' connection parameter")

    url = base_url + document.get_connection("path", "")
    params = document.get_connection("params")
    if params:
        url += "?" + params.replace(",", "&")
    return url


# ################
# Implementation
# ################

_CREDENTIAL_KEYS = ("user", "password")

_PARAMS_PREFIX = "params."

_MONGODB_SCHEMES = ("mongodb", "mongodb+srv")


def _require_category(document: UCDF, category: str, target: str) -> str:
    """Check the document's category and return its subtype (possibly empty)."""
    source_type = document.source_type
    if source_type.category != category:
        raise ConversionError(f"Cannot convert a '{source_type}' source to a {target}; expected '{category}.*'")
    return source_type.subtype or ""


def _require_engine(document: UCDF, target: str) -> str:
    engine = _require_category(document, "db", target)
    if not engine:
        raise ConversionError(
            f"Cannot convert a '{document.source_type}' source to a {target} without a database engine subtype"
        )
    return engine
