from __future__ import annotations

from pydantic import BaseModel


class UiStateOut(BaseModel):
    is_mobile_nav_open: bool
