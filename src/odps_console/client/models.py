"""Result records returned by the service."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class TablePage(BaseModel):
    """One page of a table listing."""

    model_config = ConfigDict(extra="ignore")

    tables: list[str] = Field(default_factory=list)
    marker: str | None = None


class OnlineModel(BaseModel):
    """Online model metadata."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    project: str
    name: str
    version: str | None = None
    owner: str | None = None
    created_time: datetime | None = Field(default=None, alias="createdTime")
    last_modified_time: datetime | None = Field(default=None, alias="lastModifiedTime")
    offline_model_project: str | None = Field(default=None, alias="offlineModelProject")
    offline_model_name: str | None = Field(default=None, alias="offlineModelName")
    offline_model_id: str | None = Field(default=None, alias="offlineModelId")
    apply_resource: dict[str, Any] | None = Field(default=None, alias="applyResource")
    used_resource: dict[str, Any] | None = Field(default=None, alias="usedResource")
    apply_qos: Any = Field(default=None, alias="qos")
    instance_num: int | None = Field(default=None, alias="instanceNum")
    status: str | None = None
    service_tag: str | None = Field(default=None, alias="serviceTag")
    service_name: str | None = Field(default=None, alias="serviceName")
    failed_msg: str | None = Field(default=None, alias="lastFailMsg")
    ab_test: Any = Field(default=None, alias="abTest")
    predict_desc: Any = Field(default=None, alias="predictDesc")
    runtime: Any = None
