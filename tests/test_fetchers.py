import pytest
from aiohttp import web
from aiohttp import test_utils

from flashdeck.errors import TransportError
from flashdeck.fetchers import (
    FetcherRegistry,
    HttpDatasetFetcher,
    LocalDatasetFetcher,
    locator_scheme,
    resolve_locator,
)


@pytest.fixture
def requests_seen():
    return []


@pytest.fixture
def app(requests_seen):
    async def unit1(request):
        requests_seen.append(request)
        return web.json_response([{"slovenian": "hiša", "english": "house"}])

    async def broken(request):
        return web.Response(status=500, text="boom")

    async def not_a_list(request):
        return web.json_response({"cards": []})

    async def garbage(request):
        return web.Response(text="<html>", content_type="text/html")

    application = web.Application()
    application.router.add_get("/unit1.json", unit1)
    application.router.add_get("/broken.json", broken)
    application.router.add_get("/object.json", not_a_list)
    application.router.add_get("/garbage.json", garbage)
    return application


async def test_http_fetch_returns_records_and_defeats_caches(app, requests_seen):
    async with test_utils.TestServer(app) as server:
        async with HttpDatasetFetcher() as fetcher:
            records = await fetcher.fetch(str(server.make_url("/unit1.json")))

    assert records == [{"slovenian": "hiša", "english": "house"}]
    headers = requests_seen[0].headers
    assert "no-store" in headers["Cache-Control"]
    assert headers["Pragma"] == "no-cache"


@pytest.mark.parametrize("path,status", [
    ("/broken.json", 500),
    ("/missing.json", 404),
])
async def test_http_error_status(app, path, status):
    async with test_utils.TestServer(app) as server:
        url = str(server.make_url(path))
        async with HttpDatasetFetcher() as fetcher:
            with pytest.raises(TransportError) as excinfo:
                await fetcher.fetch(url)

    assert excinfo.value.status == status
    assert excinfo.value.locator == url


@pytest.mark.parametrize("path", ["/object.json", "/garbage.json"])
async def test_http_body_must_be_a_json_array(app, path):
    async with test_utils.TestServer(app) as server:
        async with HttpDatasetFetcher() as fetcher:
            with pytest.raises(TransportError):
                await fetcher.fetch(str(server.make_url(path)))


async def test_http_connection_refused():
    async with test_utils.TestServer(web.Application()) as server:
        url = str(server.make_url("/unit1.json"))
    # server is closed now
    async with HttpDatasetFetcher() as fetcher:
        with pytest.raises(TransportError) as excinfo:
            await fetcher.fetch(url)
    assert excinfo.value.status is None


async def test_local_fetch_rereads_the_file(tmp_path):
    path = tmp_path / "unit1.json"
    fetcher = LocalDatasetFetcher()

    path.write_text('[{"slovenian": "pes", "english": "dog"}]', encoding="utf-8")
    assert await fetcher.fetch(str(path)) == [{"slovenian": "pes", "english": "dog"}]

    path.write_text("[]", encoding="utf-8")
    assert await fetcher.fetch(path.as_uri()) == []


async def test_local_missing_file(tmp_path):
    with pytest.raises(TransportError) as excinfo:
        await LocalDatasetFetcher().fetch(str(tmp_path / "nope.json"))
    assert excinfo.value.status == 404


def test_registry_maps_schemes():
    assert isinstance(FetcherRegistry.get_fetcher("https"), HttpDatasetFetcher)
    assert isinstance(FetcherRegistry.get_fetcher("file"), LocalDatasetFetcher)
    with pytest.raises(KeyError):
        FetcherRegistry.get_fetcher("ftp")


@pytest.mark.parametrize("locator,scheme", [
    ("https://x/unit1.json", "https"),
    ("file:///tmp/unit1.json", "file"),
    ("/tmp/unit1.json", "file"),
    ("unit1.json", "file"),
])
def test_locator_scheme(locator, scheme):
    assert locator_scheme(locator) == scheme


def test_resolve_locator():
    assert resolve_locator("unit1.json", base_url="https://x/sets") == "https://x/sets/unit1.json"
    assert resolve_locator("unit1.json", base_url="https://x/sets/") == "https://x/sets/unit1.json"
    assert resolve_locator("/abs/unit1.json", base_url="https://x/") == "/abs/unit1.json"
    assert resolve_locator("unit1.json", data_dir="/data") == "/data/unit1.json"
