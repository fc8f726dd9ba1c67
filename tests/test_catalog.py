import asyncio

import pytest

from clixmcp.errors import ApiError
from clixmcp.search.catalog import CatalogResolver, find_sub_indices, parse_index
from clixmcp.tools.search_sdk import platform_from_url

MAPPING_URL = "https://raw.githubusercontent.com/clix-so/clix-mcp-server/refs/heads/main/llms.txt"
IOS_INDEX = "https://raw.githubusercontent.com/clix-so/clix-ios-sdk/refs/heads/main/llms.txt"
ANDROID_INDEX = "https://raw.githubusercontent.com/clix-so/clix-android-sdk/refs/heads/main/llms.txt"

MAPPING_TEXT = f"""# Clix SDK indices

- [iOS SDK]({IOS_INDEX}): Swift sources
- [Android SDK]({ANDROID_INDEX}): Kotlin sources
- [iOS SDK again]({IOS_INDEX}): duplicate link
"""

IOS_TEXT = """# Platform: iOS
- [Clix](https://raw.githubusercontent.com/clix-so/clix-ios-sdk/main/Sources/Core/Clix.swift): SDK entry point
- [Notification Service](https://raw.githubusercontent.com/clix-so/clix-ios-sdk/main/Sources/Services/NotificationService.swift): Handles push notifications
"""

ANDROID_TEXT = """# Platform: android
- [Clix](https://raw.githubusercontent.com/clix-so/clix-android-sdk/main/clix/src/main/kotlin/so/clix/Clix.kt): SDK entry point
- [Clix iOS copy](https://raw.githubusercontent.com/clix-so/clix-ios-sdk/main/Sources/Core/Clix.swift): duplicate url
"""


class FakeFetcher:
    def __init__(self, pages: dict[str, str], errors: dict[str, Exception] | None = None):
        self.pages = pages
        self.errors = errors or {}
        self.calls: list[str] = []

    async def fetch_text(self, url: str, *, timeout: float) -> str:
        self.calls.append(url)
        if url in self.errors:
            raise self.errors[url]
        if url in self.pages:
            return self.pages[url]
        raise ApiError(f"Failed to fetch {url}: 404 Not Found", status_code=404)


def test_parse_index_tags_entries_with_platform_heading() -> None:
    entries = parse_index(IOS_TEXT)

    assert [e.title for e in entries] == ["Clix", "Notification Service"]
    assert all(e.category == "ios" for e in entries)
    assert entries[1].description == "Handles push notifications"
    assert entries[1].url.endswith("NotificationService.swift")


def test_parse_index_uses_section_headings_and_skips_prose() -> None:
    text = """# Clix Documentation

> Clix is a mobile engagement platform.

## Getting Started
- [Quickstart](https://docs.clix.so/quickstart.md): Install the SDK
Some paragraph that mentions [a link](https://docs.clix.so/other.md).

## React Native
- [Setup](https://docs.clix.so/rn/setup.md)
"""
    entries = parse_index(text)

    assert [(e.title, e.category) for e in entries] == [
        ("Quickstart", "getting-started"),
        ("Setup", "react-native"),
    ]
    assert entries[1].description == ""


def test_parse_index_falls_back_to_url_category_before_any_heading() -> None:
    text = "- [Clix](https://raw.githubusercontent.com/clix-so/clix-flutter-sdk/main/lib/clix.dart): Entry\n"

    entries = parse_index(text, category_from_url=platform_from_url)

    assert entries[0].category == "flutter"


def test_find_sub_indices_dedupes_in_order() -> None:
    assert find_sub_indices(MAPPING_TEXT, "llms.txt") == [IOS_INDEX, ANDROID_INDEX]


@pytest.mark.asyncio
async def test_resolve_two_level_mapping_merges_and_dedupes() -> None:
    fetcher = FakeFetcher({MAPPING_URL: MAPPING_TEXT, IOS_INDEX: IOS_TEXT, ANDROID_INDEX: ANDROID_TEXT})

    catalog = await CatalogResolver(fetcher).resolve(MAPPING_URL)

    urls = [e.url for e in catalog.entries]
    assert len(urls) == len(set(urls)) == 3
    assert [e.category for e in catalog.entries] == ["ios", "ios", "android"]
    assert catalog.failed_sources == []
    assert sorted(fetcher.calls) == sorted([MAPPING_URL, IOS_INDEX, ANDROID_INDEX])


@pytest.mark.asyncio
async def test_resolve_single_level_index() -> None:
    fetcher = FakeFetcher({"https://docs.example/llms.txt": IOS_TEXT})

    catalog = await CatalogResolver(fetcher).resolve("https://docs.example/llms.txt")

    assert len(catalog) == 2


@pytest.mark.asyncio
async def test_resolve_filters_by_category() -> None:
    fetcher = FakeFetcher({MAPPING_URL: MAPPING_TEXT, IOS_INDEX: IOS_TEXT, ANDROID_INDEX: ANDROID_TEXT})
    resolver = CatalogResolver(fetcher)

    android = await resolver.resolve(MAPPING_URL, category="android")
    everything = await resolver.resolve(MAPPING_URL, category="all")

    assert [e.category for e in android.entries] == ["android"]
    assert len(everything) == 3


@pytest.mark.asyncio
async def test_sub_index_failure_is_recorded_not_raised() -> None:
    fetcher = FakeFetcher(
        {MAPPING_URL: MAPPING_TEXT, IOS_INDEX: IOS_TEXT},
        errors={ANDROID_INDEX: ApiError("boom", status_code=500)},
    )

    catalog = await CatalogResolver(fetcher).resolve(MAPPING_URL)

    assert catalog.failed_sources == [ANDROID_INDEX]
    assert {e.category for e in catalog.entries} == {"ios"}


@pytest.mark.asyncio
async def test_root_failure_raises_api_error() -> None:
    fetcher = FakeFetcher({}, errors={MAPPING_URL: ApiError("Failed", status_code=503)})

    with pytest.raises(ApiError) as exc_info:
        await CatalogResolver(fetcher).resolve(MAPPING_URL)

    assert exc_info.value.status_code == 503


@pytest.mark.asyncio
async def test_root_timeout_raises_api_error() -> None:
    class SlowFetcher:
        async def fetch_text(self, url: str, *, timeout: float) -> str:
            await asyncio.sleep(1)
            return ""

    resolver = CatalogResolver(SlowFetcher(), request_timeout=0.01)

    with pytest.raises(ApiError, match="Request timeout"):
        await resolver.resolve(MAPPING_URL)


@pytest.mark.asyncio
async def test_unexpected_sub_index_error_is_recorded_not_raised() -> None:
    fetcher = FakeFetcher(
        {MAPPING_URL: MAPPING_TEXT, IOS_INDEX: IOS_TEXT},
        errors={ANDROID_INDEX: RuntimeError("connection reset")},
    )

    catalog = await CatalogResolver(fetcher).resolve(MAPPING_URL)

    assert catalog.failed_sources == [ANDROID_INDEX]
    assert {e.category for e in catalog.entries} == {"ios"}


@pytest.mark.asyncio
async def test_unexpected_root_error_becomes_api_error() -> None:
    fetcher = FakeFetcher({}, errors={MAPPING_URL: RuntimeError("connection reset")})

    with pytest.raises(ApiError, match="connection reset"):
        await CatalogResolver(fetcher).resolve(MAPPING_URL)
