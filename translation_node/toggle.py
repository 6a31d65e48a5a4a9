"""
翻譯開關模組 - 對外的狀態查詢、初始化與切換
"""
import asyncio
from typing import Callable, Optional

import aiohttp

from translation_node.config import SERVER_URL, RELOAD_DELAY_S
from translation_node.config_client import error, load_config, save_config
from translation_node.state import TranslationState


def is_translation_enabled(state: TranslationState) -> bool:
    """回傳快取的翻譯狀態（不發出請求）"""
    return state.enabled


async def init_config(
    session: aiohttp.ClientSession,
    state: TranslationState,
    base_url: str = SERVER_URL,
) -> None:
    """啟動時載入一次配置，結果只反映在 state 上"""
    await load_config(session, state, base_url)


async def toggle_translation(
    session: aiohttp.ClientSession,
    state: TranslationState,
    reload: Callable[[], None],
    base_url: str = SERVER_URL,
    delay: float = RELOAD_DELAY_S,
) -> Optional[asyncio.TimerHandle]:
    """
    切換翻譯啟用狀態並安排重新載入頁面。

    保存成功時回傳可取消的 TimerHandle，`delay` 秒後呼叫 `reload`；
    失敗時不動狀態、不安排重新載入，回傳 None。
    """
    new_enabled = not state.enabled
    success = await save_config(session, state, new_enabled, base_url)
    if not success:
        error("切換翻譯狀態失敗")
        return None

    loop = asyncio.get_running_loop()
    return loop.call_later(delay, reload)
