import pytest

from rics_store.errors import DataUnavailableError
from rics_store.page import StorePage
from rics_store.render import EMPTY_PLACEHOLDER, BufferTarget


class UnavailableLoader:
    async def load(self):
        raise DataUnavailableError("no sources")


class MappingLoader:
    def __init__(self, payload):
        self.payload = payload

    async def load(self):
        return self.payload


@pytest.mark.asyncio
async def test_start_renders_sample_when_data_unavailable():
    target = BufferTarget()
    page = StorePage(UnavailableLoader(), target)
    await page.start()

    assert target.renders == 1
    assert "Herbal Medicine" in target.markup
    assert len(page.catalog) == 3


@pytest.mark.asyncio
async def test_search_renders_placeholder_when_nothing_matches():
    target = BufferTarget()
    page = StorePage(UnavailableLoader(), target)
    await page.start()

    page.on_search_input("zzz")
    assert target.markup == EMPTY_PLACEHOLDER

    page.on_search_input("med")
    assert "Herbal Medicine" in target.markup
    assert "Pemmican" not in target.markup


@pytest.mark.asyncio
async def test_header_click_sorts_and_sets_indicator():
    target = BufferTarget()
    page = StorePage(
        MappingLoader({"A": {"BasePrice": 30}, "B": {"BasePrice": 10}}), target
    )
    await page.start()

    page.on_header_click("price")
    assert target.markup.index("<td>10</td>") < target.markup.index("<td>30</td>")
    assert page.sort_indicators() == {"price": "sort-asc"}

    page.on_header_click("price")
    assert target.markup.index("<td>30</td>") < target.markup.index("<td>10</td>")
    assert page.sort_indicators() == {"price": "sort-desc"}


@pytest.mark.asyncio
async def test_unknown_header_is_ignored():
    target = BufferTarget()
    page = StorePage(UnavailableLoader(), target)
    await page.start()

    page.on_header_click("colour")
    assert target.renders == 1
    assert page.sort_indicators() == {"name": "sort-asc"}


@pytest.mark.asyncio
async def test_missing_target_aborts_render_only():
    page = StorePage(UnavailableLoader(), None)
    await page.start()

    assert page.refresh() is False
    page.on_search_input("food")
    assert [item.id for item in page.catalog.current_view()] == ["Pemmican"]
