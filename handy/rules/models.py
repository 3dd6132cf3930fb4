from typing import Literal

from pydantic import BaseModel, Field


class ProjectRules(BaseModel):
    slug: str = "handy"
    rules_version: str = "1"


class MatchRules(BaseModel):
    default_key: str = Field(default="default", min_length=1)


class ClassNameRules(BaseModel):
    separator: str = " "


class RandomRules(BaseModel):
    seed: int | None = None


class LoggingRules(BaseModel):
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class Rules(BaseModel):
    project: ProjectRules = Field(default_factory=ProjectRules)
    match: MatchRules = Field(default_factory=MatchRules)
    class_names: ClassNameRules = Field(default_factory=ClassNameRules)
    random: RandomRules = Field(default_factory=RandomRules)
    logging: LoggingRules = Field(default_factory=LoggingRules)
