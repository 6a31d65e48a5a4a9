"""
狀態模組 - 翻譯開關的快取狀態
"""


class TranslationState:
    """目前翻譯是否啟用；遠端設定才是真正的來源，這裡只是快取"""

    __slots__ = ("enabled",)

    def __init__(self, enabled: bool = True):
        self.enabled = enabled

    def __repr__(self) -> str:
        return f"TranslationState(enabled={self.enabled})"
