"""Tests for the collection session lifecycle."""

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio

from brickfolio.catalog.sorting import SortOption
from brickfolio.domain.exceptions import CollectionLoadError, InvalidStateTransitionError
from brickfolio.domain.state_machines import LoadStatus
from brickfolio.infrastructure.loader import CollectionLoader
from brickfolio.session import LOAD_FAILED_MESSAGE, CollectionSession


@pytest.fixture
def ok_loader(space_and_castle) -> MagicMock:
    """Loader that returns the Space/Castle sets."""
    loader = MagicMock(spec=CollectionLoader)
    loader.load = AsyncMock(return_value=space_and_castle)
    return loader


@pytest.fixture
def failing_loader() -> MagicMock:
    """Loader that always fails."""
    loader = MagicMock(spec=CollectionLoader)
    loader.load = AsyncMock(side_effect=CollectionLoadError("sets.json", "unexpected status 500"))
    return loader


class TestBeforeLoad:
    """Tests for a session that has not loaded yet."""

    def test_starts_loading(self, ok_loader) -> None:
        """New sessions are loading."""
        session = CollectionSession(ok_loader)
        assert session.status == LoadStatus.LOADING
        assert not session.is_ready
        assert session.sets is None

    def test_queries_are_rejected(self, ok_loader, space_and_castle) -> None:
        """Queries return None and state changes are ignored."""
        session = CollectionSession(ok_loader)
        assert session.view() is None
        session.set_theme("Space")
        session.set_search("moon")
        session.set_sort(SortOption.NAME)
        session.select_set(space_and_castle[0])
        session.select_suggestion(space_and_castle[0])
        assert session.state.theme is None
        assert session.state.search == ""
        assert session.state.sort_by == SortOption.RETAIL
        assert session.state.selected is None


class TestLoad:
    """Tests for CollectionSession.load."""

    @pytest.mark.asyncio
    async def test_successful_load(self, ok_loader) -> None:
        """A successful load makes the session ready."""
        session = CollectionSession(ok_loader)
        assert await session.load() == LoadStatus.READY
        assert session.is_ready
        assert session.error is None
        assert len(session.sets) == 3
        ok_loader.load.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_failed_load_is_terminal(self, failing_loader) -> None:
        """A failed load shows a message and cannot be retried."""
        session = CollectionSession(failing_loader)
        assert await session.load() == LoadStatus.FAILED
        assert session.error == LOAD_FAILED_MESSAGE
        assert session.view() is None

        with pytest.raises(InvalidStateTransitionError):
            await session.load()
        failing_loader.load.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_invalid_url_fails_the_session(self) -> None:
        """A URL httpx cannot parse ends in FAILED with the user message."""
        session = CollectionSession(CollectionLoader("http://exa mple.com:notaport/sets.json"))
        assert await session.load() == LoadStatus.FAILED
        assert session.error == LOAD_FAILED_MESSAGE
        assert session.view() is None

    @pytest.mark.asyncio
    async def test_concurrent_loads_share_one_fetch(self, space_and_castle) -> None:
        """Overlapping load calls wait for a single loader run."""
        release = asyncio.Event()

        async def slow_load():
            await release.wait()
            return space_and_castle

        loader = MagicMock(spec=CollectionLoader)
        loader.load = AsyncMock(side_effect=slow_load)
        session = CollectionSession(loader)

        first = asyncio.ensure_future(session.load())
        second = asyncio.ensure_future(session.load())
        await asyncio.sleep(0)
        release.set()

        assert await asyncio.gather(first, second) == [LoadStatus.READY, LoadStatus.READY]
        loader.load.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_cannot_load_twice(self, ok_loader) -> None:
        """A loaded session does not reload."""
        session = CollectionSession(ok_loader)
        await session.load()
        with pytest.raises(InvalidStateTransitionError):
            await session.load()


@pytest_asyncio.fixture
async def session(ok_loader) -> CollectionSession:
    """Create a loaded session."""
    session = CollectionSession(ok_loader, suggestion_limit=6, spotlight_limit=15)
    await session.load()
    return session


class TestReadySession:
    """Tests for a loaded session."""

    @pytest.mark.asyncio
    async def test_view_follows_state(self, session: CollectionSession) -> None:
        """Each state change is reflected in the next view."""
        session.set_theme("Space")
        session.set_sort(SortOption.YEAR)
        view = session.view()
        assert [s.id for s in view.sets] == ["a", "b"]
        assert view.active_theme.sets == 2

    @pytest.mark.asyncio
    async def test_theme_round_trip(self, session: CollectionSession) -> None:
        """Clearing the theme restores the unfiltered list."""
        before = session.view().sets
        session.set_theme("Castle")
        session.clear_theme()
        assert session.view().sets == before

    @pytest.mark.asyncio
    async def test_select_suggestion(self, session: CollectionSession) -> None:
        """Selecting a suggestion updates all three fields together."""
        state = session.set_search("cas")
        castle = state.suggestions[0]
        state = session.select_suggestion(castle)
        assert state.selected == castle
        assert state.suggestions == ()
        assert state.search == castle.name
