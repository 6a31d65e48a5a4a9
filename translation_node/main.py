"""
Translation Node - 翻譯開關命令列工具
主程式入口
"""
import sys
import asyncio
import argparse

import aiohttp

from translation_node.config import SERVER_URL, print_config
from translation_node.config_client import save_config
from translation_node.state import TranslationState
from translation_node.toggle import init_config, is_translation_enabled, toggle_translation


def _print_status(state: TranslationState) -> None:
    status = "啟用" if is_translation_enabled(state) else "停用"
    print(f"翻譯狀態: {status}", flush=True)


def _announce_reload() -> None:
    print("🔄 翻譯狀態已切換，請重新載入頁面", file=sys.stderr, flush=True)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="translation-node",
        description="查詢或切換伺服器上的翻譯開關",
    )
    parser.add_argument(
        "command",
        nargs="?",
        default="status",
        choices=("status", "toggle", "enable", "disable"),
    )
    parser.add_argument("--server", default=SERVER_URL, help="伺服器 URL")
    return parser


async def main(argv=None) -> int:
    """執行指令，回傳 exit code"""
    args = build_parser().parse_args(argv)
    print_config(args.server)

    state = TranslationState()
    async with aiohttp.ClientSession() as session:
        if args.command == "status":
            await init_config(session, state, args.server)
            _print_status(state)
            return 0

        if args.command == "toggle":
            await init_config(session, state, args.server)
            reloaded = asyncio.Event()

            def _reload() -> None:
                _announce_reload()
                reloaded.set()

            handle = await toggle_translation(session, state, _reload, args.server)
            if handle is None:
                return 1
            await reloaded.wait()
            _print_status(state)
            return 0

        ok = await save_config(session, state, args.command == "enable", args.server)
        if not ok:
            return 1
        _print_status(state)
        return 0


def run():
    """程式入口點"""
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    run()
