from dataclasses import dataclass

from .schema import setting


@dataclass
class LoggingSettings:
    log_level: str = setting("INFO", initial="")
    log_format: str = setting("plain", initial="")
    log_utc: str = setting("true", initial="")

    @property
    def utc(self) -> bool:
        return self.log_utc.strip().lower() in {"1", "true", "t", "yes", "y", "on"}


@dataclass
class ServiceSettings:
    service_name: str = setting("envbind", initial="")
    environment: str = setting("development", initial="")
    host: str = setting("localhost", initial="")
    port: int = setting("8080", initial=0)
    workers: int = setting("1", initial=0)
