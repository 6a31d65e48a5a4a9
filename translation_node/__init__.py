"""
Translation Node - 翻譯開關客戶端模組
偵測中文字符、判斷標籤是否已翻譯、讀寫伺服器上的翻譯開關

模組結構：
- config.py        : 配置參數
- text_utils.py    : 文字處理（中文偵測、翻譯狀態判斷）
- state.py         : 翻譯開關的快取狀態
- config_client.py : 讀取 / 保存伺服器配置
- toggle.py        : 狀態查詢、初始化與切換
- main.py          : 命令列入口
"""
from translation_node.config_client import error, load_config, save_config
from translation_node.state import TranslationState
from translation_node.text_utils import (
    NATIVE_TRANSLATED_SETTINGS,
    contains_chinese_characters,
    is_already_translated,
)
from translation_node.toggle import init_config, is_translation_enabled, toggle_translation

__all__ = [
    "NATIVE_TRANSLATED_SETTINGS",
    "TranslationState",
    "contains_chinese_characters",
    "error",
    "init_config",
    "is_already_translated",
    "is_translation_enabled",
    "load_config",
    "save_config",
    "toggle_translation",
]
