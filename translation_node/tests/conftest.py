"""Shared fixtures: an in-process fake of the settings endpoints."""
import aiohttp
import pytest_asyncio
from aiohttp import web
from aiohttp.test_utils import TestServer


class FakeSettingsServer:
    """Serves get_config / set_config the way the node's backend does."""

    def __init__(self):
        self.translation_enabled = True
        self.get_status = 200
        self.set_status = 200
        self.set_success = True
        self.raw_get_body = None
        self.raw_set_body = None
        self.posted = []
        self.url = None

    def make_app(self) -> web.Application:
        app = web.Application()
        app.router.add_get("/translation_node/get_config", self.get_config)
        app.router.add_post("/translation_node/set_config", self.set_config)
        return app

    async def get_config(self, request):
        # Non-2xx replies still carry a valid body; only the status may decide.
        payload = {"translation_enabled": self.translation_enabled, "version": "1.0"}
        if self.get_status != 200:
            return web.json_response(payload, status=self.get_status)
        if self.raw_get_body is not None:
            return web.Response(text=self.raw_get_body)
        return web.json_response(payload)

    async def set_config(self, request):
        data = await request.post()
        value = data.get("translation_enabled")
        self.posted.append(value)
        if self.set_status != 200:
            return web.json_response({"success": True}, status=self.set_status)
        if self.raw_set_body is not None:
            return web.Response(text=self.raw_set_body)
        if self.set_success:
            self.translation_enabled = value == "true"
        return web.json_response({"success": self.set_success})


@pytest_asyncio.fixture
async def settings_server():
    fake = FakeSettingsServer()
    server = TestServer(fake.make_app())
    await server.start_server()
    fake.url = str(server.make_url("/"))
    yield fake
    await server.close()


@pytest_asyncio.fixture
async def session():
    async with aiohttp.ClientSession() as client_session:
        yield client_session
