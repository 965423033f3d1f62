"""Configurazioni globali del sistema."""

from dataclasses import dataclass, field
from pathlib import Path

import yaml


@dataclass
class FilesConfig:
    """Percorsi dei feed e del report."""

    player_data: Path = field(default_factory=lambda: Path("player_data.txt"))
    match_data: Path = field(default_factory=lambda: Path("match_data.txt"))
    results: Path = field(default_factory=lambda: Path("results.txt"))


@dataclass
class LoggingConfig:
    """Configurazione logging."""

    level: str = "INFO"


@dataclass
class Config:
    """Configurazione principale."""

    files: FilesConfig = field(default_factory=FilesConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def load(cls, path: str = "config/config.yaml") -> "Config":
        """Carica configurazione da file YAML."""
        config_path = Path(path)

        if config_path.exists():
            with open(config_path) as f:
                data = yaml.safe_load(f) or {}

            return cls(
                files=FilesConfig(
                    **{k: Path(v) for k, v in data.get("files", {}).items()}
                ),
                logging=LoggingConfig(**data.get("logging", {})),
            )

        return cls()

    def to_dict(self) -> dict:
        return {
            "files": {
                "player_data": str(self.files.player_data),
                "match_data": str(self.files.match_data),
                "results": str(self.files.results),
            },
            "logging": {
                "level": self.logging.level,
            },
        }

    def save(self, path: str = "config/config.yaml"):
        """Salva configurazione su file YAML."""
        config_path = Path(path)
        config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(config_path, "w") as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)
