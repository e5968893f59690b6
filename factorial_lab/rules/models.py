import logging
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from factorial_lab.components.entry import DEFAULT_ARGUMENT
from factorial_lab.components.factorial import MAX_RECURSIVE_ARGUMENT

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LoggingRules(BaseModel):
    level: LogLevel = "WARNING"
    color: bool = True
    format: str = "%(levelname)s %(name)s: %(message)s"

    @field_validator("format")
    @classmethod
    def check_format(cls, v: str) -> str:
        try:
            logging.Formatter(v, validate=True)
        except ValueError as e:
            raise ValueError(f"invalid log format: {e}") from e
        return v


class FactorialRules(BaseModel):
    # Lower bound: the entry argument must stay computable.
    # Upper bound: the recursion guard cannot be switched off.
    max_argument: int = Field(
        default=MAX_RECURSIVE_ARGUMENT,
        ge=DEFAULT_ARGUMENT,
        le=MAX_RECURSIVE_ARGUMENT,
    )


class Rules(BaseModel):
    logging: LoggingRules = Field(default_factory=LoggingRules)
    factorial: FactorialRules = Field(default_factory=FactorialRules)

    model_config = ConfigDict(extra="forbid")
