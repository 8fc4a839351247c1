import os
from dotenv import load_dotenv

from course_catalog.errors import ConfigError

load_dotenv()


class Settings:
    CATALOG_PATH: str = os.getenv("COURSE_CATALOG_PATH", "data/ABCU_Advising_Program_Input.csv")
    # "0" sizes the table to the validated row count
    TABLE_SIZE: str = os.getenv("COURSE_TABLE_SIZE", "0")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "WARNING").upper()


def parse_table_size(value):
    try:
        size = int(value)
    except (TypeError, ValueError):
        raise ConfigError(f"COURSE_TABLE_SIZE must be an integer, got {value!r}")
    if size < 0:
        raise ConfigError(f"COURSE_TABLE_SIZE must not be negative, got {size}")
    return size


settings = Settings()
