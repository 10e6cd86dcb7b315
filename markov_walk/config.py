from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Settings:
    # Relative to the working directory the entry point runs from
    output_dir: Path = Path("outputs")

    # Validation
    row_sum_tolerance: float = 1e-4

    # Entry point defaults
    default_seed: int = 10_000
    log_level: str = "INFO"

settings = Settings()
