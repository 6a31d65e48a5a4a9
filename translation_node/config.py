"""
配置模組 - 所有設定參數
🎯 環境變數只在模組載入時讀取一次，預先組好端點路徑
"""
import os
import sys

# === 伺服器設定 ===
# 相對端點路徑會以此 URL 為基底解析
SERVER_URL: str = os.getenv('TRANSLATION_NODE_SERVER_URL', 'http://127.0.0.1:8188')

# 0 = 不額外設定逾時，交給 aiohttp 預設值
REQUEST_TIMEOUT_S: float = float(os.getenv('TRANSLATION_NODE_REQUEST_TIMEOUT', 0))

# === 端點路徑 ===
GET_CONFIG_PATH: str = "translation_node/get_config"
SET_CONFIG_PATH: str = "translation_node/set_config"

# === 表單 / 回應欄位 ===
ENABLED_FIELD: str = "translation_enabled"
SUCCESS_FIELD: str = "success"

# === 切換後重新載入頁面的延遲 (100 ms) ===
RELOAD_DELAY_S: float = 0.1

# === 日誌前綴 ===
LOG_TAG: str = "[Translation-node]"

# 🎯 預先建立的配置字串 (用於 print_config)
_CONFIG_SEPARATOR: str = "=" * 50

_CONFIG_LINES: tuple = (
    f"🎯 讀取端點: {GET_CONFIG_PATH}",
    f"🎯 寫入端點: {SET_CONFIG_PATH}",
    f"🎯 請求逾時: {REQUEST_TIMEOUT_S or '未設定'}",
    f"🎯 重新載入延遲: {RELOAD_DELAY_S}s",
)


def build_url(base_url: str, path: str) -> str:
    """將相對端點路徑接到基底 URL 之後"""
    return f"{base_url.rstrip('/')}/{path.lstrip('./')}"


def print_config(server_url: str = SERVER_URL) -> None:
    """印出當前配置；伺服器以實際連線的 URL 為準"""
    print(_CONFIG_SEPARATOR, file=sys.stderr, flush=True)
    print(f"🎯 伺服器: {server_url}", file=sys.stderr, flush=True)
    for line in _CONFIG_LINES:
        print(line, file=sys.stderr, flush=True)
    print(_CONFIG_SEPARATOR, file=sys.stderr, flush=True)
