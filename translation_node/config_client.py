"""
設定客戶端模組 - 從伺服器讀取 / 寫入翻譯開關
🚀 共用呼叫端傳入的 aiohttp session，失敗時一律回傳安全預設值
"""
import sys
import asyncio
import aiohttp

from translation_node.config import (
    SERVER_URL,
    REQUEST_TIMEOUT_S,
    GET_CONFIG_PATH,
    SET_CONFIG_PATH,
    ENABLED_FIELD,
    SUCCESS_FIELD,
    LOG_TAG,
    build_url,
)
from translation_node.state import TranslationState


def error(*args) -> None:
    """在 stderr 輸出帶前綴的錯誤訊息"""
    print(LOG_TAG, *args, file=sys.stderr, flush=True)


def _request_kwargs() -> dict:
    if REQUEST_TIMEOUT_S > 0:
        return {"timeout": aiohttp.ClientTimeout(total=REQUEST_TIMEOUT_S)}
    return {}


async def load_config(
    session: aiohttp.ClientSession,
    state: TranslationState,
    base_url: str = SERVER_URL,
) -> bool:
    """
    從伺服器讀取翻譯狀態並更新快取。

    任何失敗（連線錯誤、非 2xx、回應格式錯誤）都不動快取，
    回傳 True：讀不到設定時視為翻譯啟用。
    """
    url = build_url(base_url, GET_CONFIG_PATH)
    try:
        async with session.get(url, **_request_kwargs()) as response:
            if not 200 <= response.status < 300:
                error(f"獲取配置失敗: HTTP {response.status}")
                return True
            config = await response.json(content_type=None)
    except asyncio.TimeoutError:
        error("獲取配置失敗: 請求逾時")
        return True
    except aiohttp.ClientError as e:
        error("獲取配置失敗:", e)
        return True
    except ValueError as e:
        error("獲取配置失敗: 回應不是有效的 JSON", e)
        return True

    enabled = config.get(ENABLED_FIELD) if isinstance(config, dict) else None
    if not isinstance(enabled, bool):
        error(f"獲取配置失敗: 回應缺少布林欄位 {ENABLED_FIELD}")
        return True

    state.enabled = enabled
    print(f"✅ 翻譯狀態: {'啟用' if enabled else '停用'}", file=sys.stderr, flush=True)
    return enabled


async def save_config(
    session: aiohttp.ClientSession,
    state: TranslationState,
    enabled: bool,
    base_url: str = SERVER_URL,
) -> bool:
    """
    以表單送出翻譯狀態，伺服器回報成功才更新快取。

    回傳是否儲存成功；失敗時快取維持原值。
    """
    url = build_url(base_url, SET_CONFIG_PATH)
    form = aiohttp.FormData()
    form.add_field(ENABLED_FIELD, "true" if enabled else "false")

    try:
        async with session.post(url, data=form, **_request_kwargs()) as response:
            if not 200 <= response.status < 300:
                error(f"保存配置失敗: HTTP {response.status}")
                return False
            result = await response.json(content_type=None)
    except asyncio.TimeoutError:
        error("保存配置失敗: 請求逾時")
        return False
    except aiohttp.ClientError as e:
        error("保存配置失敗:", e)
        return False
    except ValueError as e:
        error("保存配置失敗: 回應不是有效的 JSON", e)
        return False

    if not isinstance(result, dict) or not result.get(SUCCESS_FIELD):
        return False

    state.enabled = enabled
    print(f"✅ 已保存翻譯狀態: {'啟用' if enabled else '停用'}", file=sys.stderr, flush=True)
    return True
