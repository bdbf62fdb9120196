from __future__ import annotations

from pathlib import Path
from typing import Any, List, Mapping, Optional

from pydantic import BaseModel, Field, field_validator

from dedupiter.utils.load import load_yaml


class StepConfig(BaseModel):
    """One pipeline step: a one-key mapping ``{transform_name: params}``."""

    transform: Mapping[str, Any]

    @field_validator("transform")
    @classmethod
    def _one_key(cls, value: Mapping[str, Any]) -> Mapping[str, Any]:
        if len(value) != 1:
            raise ValueError(
                f"step must be a one-key mapping (e.g. {{dedupe_by_key: {{field: id}}}}), got {dict(value)!r}"
            )
        name = next(iter(value.keys()))
        if not isinstance(name, str) or not name.strip():
            raise ValueError(f"step name must be a non-empty string, got {name!r}")
        return value

    @property
    def name(self) -> str:
        return next(iter(self.transform.keys()))

    @property
    def params(self) -> Any:
        return next(iter(self.transform.values()))

    def as_clause(self) -> dict[str, Any]:
        return {self.name: self.params}


class StreamPipelineConfig(BaseModel):
    log_level: Optional[str] = Field(default=None, description="DEFAULT LOG LEVEL")
    steps: List[StepConfig] = Field(default_factory=list)

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_level(cls, value: object):
        if value is None:
            return None
        text = str(value).strip()
        return text.upper() if text else None

    @field_validator("steps", mode="before")
    @classmethod
    def _wrap_steps(cls, value: object):
        if value is None:
            return []
        if not isinstance(value, list):
            raise ValueError(f"steps must be a list, got {type(value).__name__}")
        wrapped = []
        for item in value:
            if isinstance(item, StepConfig):
                wrapped.append(item)
            elif isinstance(item, Mapping):
                wrapped.append({"transform": dict(item)})
            else:
                raise ValueError(f"Step must be one-key mapping, got: {item!r}")
        return wrapped

    def clauses(self) -> list[dict[str, Any]]:
        return [step.as_clause() for step in self.steps]


def load_pipeline_config(path: Path) -> StreamPipelineConfig:
    data = load_yaml(Path(path))
    return StreamPipelineConfig.model_validate(data)
