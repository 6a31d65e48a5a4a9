"""
文字處理模組 - 中文偵測、翻譯狀態判斷
🚀 預編譯正則，模組載入時只編譯一次
"""
import re
from typing import Optional

# ============================================================
# 🚀 預編譯正則表達式
# ============================================================

# CJK 統一表意文字 + 相容表意文字 + CJK 標點符號
RE_CHINESE_CHARS = re.compile(r'[\u4e00-\u9fff\uf900-\ufaff\u3000-\u303f]')

# 已有原生中文翻譯的設定項，不需要額外處理（供外部標籤翻譯流程使用）
NATIVE_TRANSLATED_SETTINGS = (
    "Comfy", "画面", "外观", "3D", "遮罩编辑器",
)


def contains_chinese_characters(text: Optional[str]) -> bool:
    """檢查文字是否包含中文字符（空字串或 None 回傳 False）"""
    if not text:
        return False
    return RE_CHINESE_CHARS.search(text) is not None


def is_already_translated(original_name: Optional[str], current_label: Optional[str]) -> bool:
    """
    比較原始名稱與目前標籤，判斷標籤是否已被翻譯。

    只是啟發式判斷：標籤與原名不同且含中文，或不同且不只是大小寫差異，
    都視為已翻譯。
    """
    if not original_name or not current_label:
        return False

    if current_label == original_name:
        return False

    if contains_chinese_characters(current_label):
        return True

    return (
        current_label != original_name.lower()
        and current_label != original_name.upper()
    )
