from app.configs.settings import (
    BLOG_NOT_FOUND,
    CONFIG_MAP,
    DEFAULT_ERROR_MESSAGE,
    DESCRIPTION_MAX_LENGTH,
    INVALID_CREDENTIALS,
    MAX_TAGS,
    PASSWORD_MIN_LENGTH,
    TAG_MAX_LENGTH,
    TITLE_MAX_LENGTH,
    WORDS_PER_MINUTE,
    HasherConfig,
    LimiterConfig,
    settings,
)

__all__ = [
    "BLOG_NOT_FOUND",
    "CONFIG_MAP",
    "DEFAULT_ERROR_MESSAGE",
    "DESCRIPTION_MAX_LENGTH",
    "INVALID_CREDENTIALS",
    "MAX_TAGS",
    "PASSWORD_MIN_LENGTH",
    "TAG_MAX_LENGTH",
    "TITLE_MAX_LENGTH",
    "WORDS_PER_MINUTE",
    "HasherConfig",
    "LimiterConfig",
    "settings",
]
