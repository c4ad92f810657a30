from __future__ import annotations

import pytest

from iCatalog.core.catalog import CatalogStatus
from iCatalog.core.events import (
    AssetLoadFailed,
    BackRequested,
    CatalogLoaded,
    CatalogLoadFailed,
    ItemActivated,
    OverlayDismissed,
    QueryTextChanged,
    RangeSubmitted,
    ViewportNearEnd,
)
from iCatalog.core.filters import RangeQuery, TextQuery
from iCatalog.core.session import RangeActive, SearchActive, Session, SessionPhase, Welcome
from iCatalog.models.item import Item


def _ids(items):
    return [item.id for item in items]


@pytest.fixture
def session(sequential_catalog) -> Session:
    session = Session(batch_size=40, asset_base="https://cdn.test/")
    session.on_catalog_loaded(sequential_catalog)
    return session


def test_initial_state() -> None:
    session = Session()
    view = session.render()
    assert isinstance(session.state, Welcome)
    assert view.status is CatalogStatus.LOADING
    assert view.items == ()
    assert view.overlay is None
    assert view.range_enabled is False
    assert view.gallery_visible is False


def test_range_submit_ignored_until_catalog_ready(sequential_catalog) -> None:
    session = Session()
    assert session.on_range_submit(1, 10) is False
    assert session.phase is SessionPhase.WELCOME

    session.on_catalog_loaded(sequential_catalog)
    assert session.on_range_submit(1, 10) is True
    assert isinstance(session.state, RangeActive)
    assert session.state.query == RangeQuery(1, 10)


def test_range_submit_blocked_after_load_failure() -> None:
    session = Session()
    session.on_catalog_failed("boom")
    assert session.status is CatalogStatus.ERROR
    assert session.on_range_submit(1, 10) is False
    assert session.render().range_enabled is False


def test_text_search_works_against_failed_catalog() -> None:
    session = Session()
    session.on_catalog_failed("offline")
    assert session.on_query_text_changed("alpha") is True
    assert session.phase is SessionPhase.SEARCH_ACTIVE
    assert session.rendered_items() == []


def test_late_catalog_result_does_not_resurrect_failed_load(sequential_catalog) -> None:
    session = Session()
    session.on_catalog_failed("timeout")
    assert session.on_catalog_loaded(sequential_catalog) is False
    assert session.status is CatalogStatus.ERROR
    assert len(session.catalog) == 0


def test_second_catalog_result_is_ignored(sample_catalog, sequential_catalog) -> None:
    session = Session()
    session.on_catalog_loaded(sample_catalog)
    assert session.on_catalog_loaded(sequential_catalog) is False
    assert session.on_catalog_failed("late") is False
    assert session.status is CatalogStatus.READY
    assert len(session.catalog) == 3


def test_search_then_clear_returns_to_welcome(session: Session) -> None:
    assert session.on_query_text_changed("1") is True
    assert isinstance(session.state, SearchActive)
    assert session.state.query == TextQuery("1")
    view = session.render()
    assert view.welcome_compact and view.welcome_visible and view.gallery_visible

    assert session.on_query_text_changed("  ") is True
    assert isinstance(session.state, Welcome)
    assert session.rendered_items() == []
    assert session.on_query_text_changed("") is False


def test_search_text_ignored_while_range_active(session: Session) -> None:
    session.on_range_submit(1, 5)
    assert session.on_query_text_changed("alpha") is False
    assert isinstance(session.state, RangeActive)


def test_range_submit_ignored_during_search(session: Session) -> None:
    session.on_query_text_changed("item")
    assert session.on_range_submit(1, 5) is False
    assert isinstance(session.state, SearchActive)


def test_range_pagination_scenario(session: Session) -> None:
    session.on_range_submit(1, 100)
    assert len(session.rendered_items()) == 40
    assert len(session.on_viewport_near_end()) == 40
    assert len(session.rendered_items()) == 80
    assert len(session.on_viewport_near_end()) == 20
    assert len(session.rendered_items()) == 100
    assert session.on_viewport_near_end() == []
    assert len(session.rendered_items()) == 100


def test_range_coerces_text_bounds(session: Session) -> None:
    assert session.on_range_submit("", "3") is True
    assert _ids(session.rendered_items()) == [1, 2, 3]


def test_inverted_range_renders_empty_grid(session: Session) -> None:
    session.on_range_submit(90, 10)
    view = session.render()
    assert view.phase is SessionPhase.RANGE_ACTIVE
    assert view.items == ()
    assert view.result_count == 0


def test_new_query_resets_cursor(session: Session) -> None:
    session.on_query_text_changed("item")
    session.on_viewport_near_end()
    assert session.pagination.cursor == 80
    session.on_query_text_changed("item 1")
    assert session.pagination.cursor == min(40, session.pagination.total)


def test_viewport_signal_in_welcome_is_noop(session: Session) -> None:
    assert session.on_viewport_near_end() == []
    assert session.can_extend() is False


def test_rendered_items_carry_asset_refs(session: Session) -> None:
    session.on_range_submit(7, 7)
    [item] = session.rendered_items()
    assert item.id == 7
    assert item.name == "Item 7"
    assert item.asset_ref == "https://cdn.test/7.webp"


def test_unnamed_item_renders_placeholder() -> None:
    session = Session()
    session.on_catalog_loaded([Item(3)])
    session.on_range_submit(1, 5)
    assert session.rendered_items()[0].name == "—"


def test_masking_visible_item_hides_it_without_moving_cursor(session: Session) -> None:
    session.on_range_submit(1, 100)
    assert session.on_asset_load_error(5) is True
    rendered = _ids(session.rendered_items())
    assert 5 not in rendered
    assert len(rendered) == 39
    assert session.pagination.cursor == 40
    assert session.pagination.total == 100


def test_masking_item_outside_window_has_no_visible_effect(session: Session) -> None:
    session.on_range_submit(1, 100)
    before = session.rendered_items()
    assert session.on_asset_load_error(90) is False
    assert session.rendered_items() == before
    session.on_viewport_near_end()
    session.on_viewport_near_end()
    assert 90 not in _ids(session.rendered_items())
    assert len(session.rendered_items()) == 99


def test_repeated_failure_signal_is_idempotent(session: Session) -> None:
    session.on_range_submit(1, 10)
    assert session.on_asset_load_error(2) is True
    assert session.on_asset_load_error(2) is False
    assert len(session.failure_mask) == 1


def test_mask_survives_query_changes(session: Session) -> None:
    session.on_query_text_changed("item 1")
    session.on_asset_load_error(1)
    session.on_query_text_changed("item")
    assert 1 not in _ids(session.rendered_items())


def test_back_clears_mask_and_query(session: Session) -> None:
    session.on_query_text_changed("item 1")
    assert 1 in _ids(session.rendered_items())
    session.on_asset_load_error(1)
    assert 1 not in _ids(session.rendered_items())

    assert session.on_back_requested() is True
    assert isinstance(session.state, Welcome)
    assert len(session.failure_mask) == 0
    assert session.pagination.total == 0

    session.on_query_text_changed("item 1")
    assert 1 in _ids(session.rendered_items())


def test_back_from_welcome_is_noop(session: Session) -> None:
    assert session.on_back_requested() is False


def test_overlay_open_replace_close(session: Session) -> None:
    session.on_range_submit(1, 10)
    assert session.on_item_activated(3) is True
    assert session.overlay.content.id == 3
    assert session.overlay.content.asset_ref == "https://cdn.test/3.webp"

    assert session.on_item_activated(4) is True
    assert session.render().overlay.id == 4

    assert session.on_overlay_dismissed() is True
    assert session.render().overlay is None
    assert session.on_overlay_dismissed() is False


def test_activating_unrendered_item_is_ignored(session: Session) -> None:
    session.on_range_submit(1, 10)
    assert session.on_item_activated(50) is False
    assert session.overlay.content is None


def test_spurious_viewport_signal_under_overlay_is_safe(session: Session) -> None:
    session.on_range_submit(1, 50)
    session.on_item_activated(1)
    session.on_viewport_near_end()
    session.on_viewport_near_end()
    session.on_viewport_near_end()
    assert len(session.rendered_items()) == 50


def test_back_closes_overlay(session: Session) -> None:
    session.on_range_submit(1, 10)
    session.on_item_activated(1)
    session.on_back_requested()
    assert session.overlay.content is None


def test_search_typed_while_loading_is_applied_on_ready(sequential_catalog) -> None:
    session = Session()
    session.on_query_text_changed("item 5")
    assert session.rendered_items() == []
    session.on_catalog_loaded(sequential_catalog)
    assert _ids(session.rendered_items()) == [5, 50, 51, 52, 53, 54, 55, 56, 57, 58, 59]


def test_dispatch_routes_events(sequential_catalog) -> None:
    session = Session(batch_size=10)
    session.dispatch(CatalogLoaded(sequential_catalog))
    assert session.dispatch(RangeSubmitted(1, 30)) is True
    assert len(session.dispatch(ViewportNearEnd())) == 10
    assert session.dispatch(AssetLoadFailed(2)) is True
    assert session.dispatch(ItemActivated(3)) is True
    assert session.dispatch(OverlayDismissed()) is True
    assert session.dispatch(BackRequested()) is True
    assert session.dispatch(QueryTextChanged("item 3")) is True
    assert session.dispatch(CatalogLoadFailed("late")) is False


def test_dispatch_rejects_unknown_events(session: Session) -> None:
    with pytest.raises(TypeError):
        session.dispatch(object())
