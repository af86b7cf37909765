from typing import Literal

from pydantic import BaseModel


class TapTarget(BaseModel):
    """Clickable URL region of a native-flow message, one per `cta_url` button"""
    canonical_url: str
    url_type: Literal["STATIC"] = "STATIC"
    button_index: int
    tap_target_format: Literal[1] = 1
