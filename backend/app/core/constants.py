"""Shared constants and enums used across the application."""

from enum import StrEnum


class AppEnv(StrEnum):
    """Deployment environments recognised by APP_ENV."""

    DEVELOPMENT = "development"
    TEST = "test"
    PRODUCTION = "production"


class StorageOperation(StrEnum):
    """Repository operations, used to label storage failures in logs."""

    LIST_ALL = "list_all"
    FIND_BY_ID = "find_by_id"
    SAVE = "save"
    DELETE_BY_ID = "delete_by_id"


# Body returned by DELETE /aliens/{id}, whether or not a row existed
DELETE_SUCCESS_MESSAGE = "success"

JSON_MEDIA_TYPE = "application/json"
