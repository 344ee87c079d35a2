import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class ErrorConstant:
    code: int
    message: str


@dataclass(frozen=True)
class ErrorConstants:
    connection: ErrorConstant = ErrorConstant(889, "Connection Error Occurred.")
    unexpected: ErrorConstant = ErrorConstant(888, "Unexpected Error Occurred.")


ERRORS = ErrorConstants()


@dataclass(frozen=True)
class Settings:
    timeout_s: float = float(os.getenv("POD_REQUEST_TIMEOUT_S", "30.0"))
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_json: bool = os.getenv("LOG_JSON", "true").lower() == "true"


settings = Settings()
