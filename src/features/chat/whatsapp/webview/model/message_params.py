from typing import Any

from pydantic import BaseModel, Field

from features.chat.whatsapp.webview.model.tap_target import TapTarget

IN_THREAD_BUTTONS_LIMIT = 3


class BottomSheet(BaseModel):
    in_thread_buttons_limit: int = IN_THREAD_BUTTONS_LIMIT
    divider_indices: list[int] = Field(default_factory = list)


class MessageParams(BaseModel):
    """Encoded into `nativeFlowMessage.messageParamsJson`"""
    bottom_sheet: BottomSheet = Field(default_factory = BottomSheet)
    tap_target_configuration: TapTarget | dict[str, Any] = Field(default_factory = dict)
    tap_target_list: list[TapTarget] = Field(default_factory = list)

    @classmethod
    def for_tap_targets(cls, tap_targets: list[TapTarget]) -> "MessageParams":
        return cls(
            tap_target_configuration = tap_targets[0] if tap_targets else {},
            tap_target_list = tap_targets,
        )
