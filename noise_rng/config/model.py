from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class RngConfig:
    seed: int
    start_position: int
    count: int
    workers: int
    block_size: int
    log_level: str = "INFO"
    log_file: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "seed": self.seed,
            "start_position": self.start_position,
            "count": self.count,
            "workers": self.workers,
            "block_size": self.block_size,
            "logging": {
                "level": self.log_level,
                "file": self.log_file,
            },
        }
