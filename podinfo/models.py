from __future__ import annotations

from typing import Dict

from pydantic import BaseModel, Field

from .utils import HeaderValue


# === API Schemas ===


class PodInfo(BaseModel):
    """Pod identity plus the headers of the request that asked for it."""

    MY_NODE_NAME: str = ""
    MY_POD_NAME: str = ""
    MY_POD_NAMESPACE: str = ""
    MY_POD_IP: str = ""
    MY_POD_SERVICE_ACCOUNT: str = ""
    HEADERS: Dict[str, HeaderValue] = Field(default_factory=dict)
