"""Interactive collection session.

Owns the single load of the collection document and the current query
state. Until the load has succeeded every query returns None and every
state change is ignored. A failed load is terminal; start a new
session to retry.
"""

import asyncio

import structlog

from brickfolio.catalog.models import LegoSet
from brickfolio.catalog.service import CollectionService, CollectionView, QueryState
from brickfolio.catalog.sorting import SortOption
from brickfolio.domain.exceptions import CollectionLoadError
from brickfolio.domain.state_machines import LoadStatus, validate_load_transition
from brickfolio.infrastructure.config import settings
from brickfolio.infrastructure.loader import CollectionLoader

logger = structlog.get_logger()

LOAD_FAILED_MESSAGE = "Failed to load collection data. Refresh to try again."


class CollectionSession:
    """A browsing session over one loaded collection.

    Example usage:
        session = CollectionSession(CollectionLoader("public/sets.json"))
        await session.load()
        session.set_theme("Star Wars")
        view = session.view()
    """

    def __init__(
        self,
        loader: CollectionLoader | None = None,
        suggestion_limit: int | None = None,
        spotlight_limit: int | None = None,
    ) -> None:
        """Initialize a session in the loading state.

        Args:
            loader: Collection loader, defaults to one built from settings.
            suggestion_limit: Maximum suggestions, defaults to settings.
            spotlight_limit: Maximum spotlight cards, defaults to settings.
        """
        self.loader = loader or CollectionLoader()
        self.suggestion_limit = (
            suggestion_limit if suggestion_limit is not None else settings.suggestion_limit
        )
        self.spotlight_limit = (
            spotlight_limit if spotlight_limit is not None else settings.spotlight_limit
        )
        self.status = LoadStatus.LOADING
        self.error: str | None = None
        self.state = QueryState()
        self._service: CollectionService | None = None
        self._pending: asyncio.Task[LoadStatus] | None = None

    async def load(self) -> LoadStatus:
        """Load the collection and move to READY or FAILED.

        Calls made while a load is in flight wait for that same load;
        the loader runs once per session.

        Returns:
            The resulting status.

        Raises:
            InvalidStateTransitionError: If the session already finished loading.
        """
        # Only a LOADING session may load; both outcomes are terminal
        validate_load_transition(self.status, LoadStatus.READY)
        if self._pending is None:
            self._pending = asyncio.create_task(self._load())
        return await self._pending

    async def _load(self) -> LoadStatus:
        """Run the loader and record the outcome."""
        try:
            sets = await self.loader.load()
        except CollectionLoadError as e:
            logger.error(
                "Collection load failed",
                source=e.source,
                reason=e.reason,
            )
            self.status = LoadStatus.FAILED
            self.error = LOAD_FAILED_MESSAGE
            return self.status

        self._service = CollectionService(
            sets,
            suggestion_limit=self.suggestion_limit,
            spotlight_limit=self.spotlight_limit,
        )
        self.status = LoadStatus.READY
        return self.status

    @property
    def is_ready(self) -> bool:
        """Check if queries are being served."""
        return self.status.accepts_queries()

    @property
    def sets(self) -> tuple[LegoSet, ...] | None:
        """All loaded sets, None until ready."""
        return self._service.sets if self._service else None

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def view(self) -> CollectionView | None:
        """Compute the view for the current query state, None until ready."""
        if self._service is None:
            return None
        return self._service.compose_view(self.state)

    # ------------------------------------------------------------------
    # Query state changes (ignored until ready)
    # ------------------------------------------------------------------

    def set_theme(self, theme: str | None) -> QueryState:
        """Filter by a theme, or None for all themes."""
        if self._service is not None:
            self.state = self._service.with_theme(self.state, theme)
        return self.state

    def clear_theme(self) -> QueryState:
        """Remove the theme filter."""
        if self._service is not None:
            self.state = self._service.clear_theme(self.state)
        return self.state

    def set_search(self, search: str) -> QueryState:
        """Update the search text and its suggestions."""
        if self._service is not None:
            self.state = self._service.with_search(self.state, search)
        return self.state

    def set_sort(self, sort_by: SortOption) -> QueryState:
        """Change the gallery order."""
        if self._service is not None:
            self.state = self._service.with_sort(self.state, sort_by)
        return self.state

    def select_set(self, lego_set: LegoSet | None) -> QueryState:
        """Open a set in the detail panel, or close it with None."""
        if self._service is not None:
            self.state = self._service.with_selected(self.state, lego_set)
        return self.state

    def select_suggestion(self, lego_set: LegoSet) -> QueryState:
        """Accept a search suggestion."""
        if self._service is not None:
            self.state = self._service.select_suggestion(self.state, lego_set)
        return self.state
