# Copyright 2026 UCDF Contributors
# SPDX-License-Identifier: Apache-2.0

"""Sample documents for common kinds of data source."""

from ucdf.model.document import UCDF
from ucdf.model.types import AccessMode, Endpoint, Field

# ###############
# Public Interface
# ###############

SAMPLES: dict[str, UCDF] = {
    "csv": UCDF.with_source_type("file.csv")
    .with_connection("path", "/data/users.csv")
    .with_connection("encoding", "utf-8")
    .with_fields(
        [
            Field(name="id", type="int"),
            Field(name="name", type="str"),
            Field(name="email", type="str"),
            Field(name="created_at", type="date"),
        ]
    )
    .with_access_mode(AccessMode.READ)
    .with_metadata("desc", "User data file"),
    "parquet": UCDF.with_source_type("file.parquet")
    .with_connection("path", "s3://warehouse/events/2026/")
    .with_fields(
        [
            Field(name="event_id", type="str"),
            Field(name="ts", type="datetime"),
            Field(name="day", type="date", extra="%Y-%m-%d"),
        ]
    )
    .with_access_mode(AccessMode.READ),
    "postgresql": UCDF.with_source_type("db.postgresql")
    .with_connection("host", "localhost")
    .with_connection("port", "5432")
    .with_connection("db", "myapp")
    .with_connection("user", "postgres")
    .with_connection("password", "secret")
    .with_fields([Field(name="id", type="int"), Field(name="name", type="str"), Field(name="email", type="str")])
    .with_access_mode(AccessMode.READ_WRITE)
    .with_metadata("desc", "PostgreSQL database"),
    "mysql": UCDF.with_source_type("db.mysql")
    .with_connection("host", "db.example.com")
    .with_connection("port", "3306")
    .with_connection("db", "app_data")
    .with_connection("user", "dbuser")
    .with_connection("params", "charset=utf8mb4")
    .with_access_mode(AccessMode.READ),
    "mongodb": UCDF.with_source_type("db.mongodb")
    .with_connection("uri", "mongodb://localhost:27017")
    .with_connection("db", "myapp")
    .with_fields([Field(name="_id", type="str"), Field(name="name", type="str"), Field(name="data", type="json")])
    .with_access_mode(AccessMode.READ_WRITE)
    .with_metadata("desc", "MongoDB database"),
    "kafka": UCDF.with_source_type("stream.kafka")
    .with_connection("brokers", "broker1:9092,broker2:9092")
    .with_connection("topic", "events")
    .with_connection("group_id", "consumer_group_1")
    .with_format("json")
    .with_fields(
        [
            Field(name="event_id", type="str"),
            Field(name="timestamp", type="datetime"),
            Field(name="payload", type="json"),
        ]
    )
    .with_access_mode(AccessMode.READ)
    .with_metadata("desc", "Kafka event stream"),
    "rest": UCDF.with_source_type("api.rest")
    .with_connection("url", "https://api.example.com")
    .with_connection("auth.type", "bearer")
    .with_connection("auth.token", "xyz123")
    .with_endpoints(
        [
            Endpoint(path="/users", method="GET"),
            Endpoint(path="/users", method="POST"),
            Endpoint(path="/users/{id}", method="GET"),
            Endpoint(path="/users/{id}", method="PUT"),
            Endpoint(path="/users/{id}", method="DELETE"),
        ]
    )
    .with_access_mode(AccessMode.READ_WRITE)
    .with_metadata("desc", "REST API for user management"),
    "s3": UCDF.with_source_type("object.s3")
    .with_connection("bucket", "analytics-raw")
    .with_connection("prefix", "logs/")
    .with_connection("region", "eu-central-1")
    .with_format("jsonl")
    .with_access_mode(AccessMode.WRITE),
}

# Alternative names accepted by :func:`sample`.
ALIASES: dict[str, str] = {
    "db": "postgresql",
    "api": "rest",
    "stream": "kafka",
}


def sample(kind: str) -> UCDF:
    """Return the sample document for *kind* (e.g. ``csv`` or ``db``).

    Raises:
        KeyError: If no sample exists for *kind*.
    """
    return SAMPLES[ALIASES.get(kind, kind)]
