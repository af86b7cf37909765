import os
from typing import Callable

from util.singleton import Singleton


class Config(metaclass = Singleton):

    log_level: str
    log_webview_message: bool

    def __init__(
        self,
        def_log_level: str = "INFO",
        def_log_webview_message: bool = False,
    ):
        # @formatter:off
        self.log_level = self.__env("LOG_LEVEL", lambda: def_log_level).lower()
        self.log_webview_message = self.__env("LOG_WEBVIEW_MESSAGE", lambda: str(def_log_webview_message)).lower() == "true"
        # @formatter:on

    @staticmethod
    def __env(name: str, default: Callable[[], str]) -> str:
        env_value = os.environ.get(name, "").strip()
        return env_value if env_value else default()


config = Config()
