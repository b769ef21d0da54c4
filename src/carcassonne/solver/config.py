"""Tile solver configuration."""

from dotenv import find_dotenv
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Determine the environment file path, or None if not found
ENV_FILE = find_dotenv() or None

MIN_TILE_SIZE = 11


def check_tile_size(tile_size: int) -> int:
    """Validate a rendered tile size: odd and at least `MIN_TILE_SIZE`."""
    if tile_size < MIN_TILE_SIZE or tile_size % 2 == 0:
        raise ValueError(f"Tile size must be an odd number >= {MIN_TILE_SIZE}, got {tile_size}.")
    return tile_size


class SolverConfig(BaseSettings):
    """Configuration settings for the tile solver."""

    tile_size: int = MIN_TILE_SIZE
    """Width and height, in characters, of one rendered tile.  Odd, >= 11.  Default: 11."""

    report_interval: int = 100_000
    """Interval (in candidate placements) at which to log progress. Default: 100000."""

    log_dir: str = "logs"
    """Directory for per-run log files. Default: "logs"."""

    write_log: bool = True
    """Whether to write a per-run log file. Default: True."""

    print_boards: bool = True
    """Whether to print the rendered board after each solution. Default: True."""

    random_seed: int | None = None
    """Seed for the random placement demo. If None (default), seeds from the OS."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        extra="forbid",
    )

    @field_validator("tile_size")
    @classmethod
    def _check_tile_size(cls, value: int) -> int:
        return check_tile_size(value)


config = SolverConfig()
