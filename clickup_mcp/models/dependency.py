"""Dependency direction between two tasks."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class WaitingOn(BaseModel):
    """The task cannot proceed until ``task_id`` is done."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["waiting_on"] = "waiting_on"
    task_id: str = Field(..., min_length=1)

    def to_request_fields(self) -> dict[str, str]:
        return {"depends_on": self.task_id}


class Blocking(BaseModel):
    """The task prevents ``task_id`` from proceeding."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["blocking"] = "blocking"
    task_id: str = Field(..., min_length=1)

    def to_request_fields(self) -> dict[str, str]:
        return {"dependency_of": self.task_id}


Dependency = WaitingOn | Blocking
