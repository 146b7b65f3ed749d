"""Unit tests for the Page aggregate.

Tests cover:
- create(): validation, defaults, PageCreated event
- Attribute updates (name, path, title, layout) and their events
- Component management (add with position, update, remove, reorder)
- Publication rules (at least one component)
- Render data and persistence round trip
"""

from typing import cast
from uuid import UUID

import pytest
from uuid_extensions import uuid7

from sitecraft.core.enums import ErrorCode
from sitecraft.core.errors import NotFoundError
from sitecraft.core.result import Failure, Success
from sitecraft.domain.entities.page import Page
from sitecraft.domain.enums import ComponentType
from sitecraft.domain.errors import PageError
from sitecraft.domain.events import (
    ComponentAdded,
    ComponentRemoved,
    ComponentsReordered,
    ComponentUpdated,
    PageCreated,
    PageLayoutUpdated,
    PageNameChanged,
    PagePathChanged,
    PagePublished,
    PageTitleChanged,
    PageUnpublished,
)
from sitecraft.domain.value_objects import PageLayout


@pytest.fixture
def project_id() -> UUID:
    return cast(UUID, uuid7())


@pytest.fixture
def page(project_id) -> Page:
    """Fresh page with its creation event already drained."""
    page = Page.create(project_id=project_id, name="Home", path="/").value
    page.clear_domain_events()
    return page


def _add_texts(page: Page, *contents: str) -> list[UUID]:
    ids = [page.add_component("Text", {"content": c}).value.id for c in contents]
    page.clear_domain_events()
    return ids


@pytest.mark.unit
class TestPageCreate:
    def test_create_success(self, project_id):
        result = Page.create(project_id=project_id, name="About", path="/about", title="About us")

        assert isinstance(result, Success)
        page = result.value
        assert page.project_id == project_id
        assert page.is_published is False
        assert page.components == []
        assert page.layout == PageLayout()
        assert page.title == "About us"

    def test_create_records_page_created(self, project_id):
        page = Page.create(project_id=project_id, name="About", path="/about").value

        assert len(page.domain_events) == 1
        event = page.domain_events[0]
        assert isinstance(event, PageCreated)
        assert event.aggregate_id == page.id
        assert event.page_path == "/about"

    def test_create_with_layout(self, project_id):
        layout = PageLayout(max_width="full")

        page = Page.create(project_id=project_id, name="Wide", path="/wide", layout=layout).value

        assert page.layout.get_max_width_value() == "100%"

    @pytest.mark.parametrize(
        ("name", "path", "code", "message"),
        [
            ("", "/x", ErrorCode.INVALID_PAGE_NAME, PageError.NAME_REQUIRED),
            ("   ", "/x", ErrorCode.INVALID_PAGE_NAME, PageError.NAME_REQUIRED),
            ("x" * 101, "/x", ErrorCode.INVALID_PAGE_NAME, PageError.NAME_TOO_LONG),
            ("Ok", "", ErrorCode.INVALID_PAGE_PATH, PageError.PATH_REQUIRED),
            ("Ok", "about", ErrorCode.INVALID_PAGE_PATH, PageError.PATH_MUST_START_WITH_SLASH),
            ("Ok", "/" + "x" * 200, ErrorCode.INVALID_PAGE_PATH, PageError.PATH_TOO_LONG),
        ],
    )
    def test_create_validation(self, project_id, name, path, code, message):
        result = Page.create(project_id=project_id, name=name, path=path)

        assert isinstance(result, Failure)
        assert result.error.code == code
        assert result.error.message == message


@pytest.mark.unit
class TestPageAttributes:
    def test_update_name(self, page):
        result = page.update_name("Start")

        assert isinstance(result, Success)
        assert page.name == "Start"
        event = page.domain_events[-1]
        assert isinstance(event, PageNameChanged)
        assert (event.old_name, event.new_name) == ("Home", "Start")

    def test_update_name_invalid_keeps_state(self, page):
        result = page.update_name("")

        assert isinstance(result, Failure)
        assert page.name == "Home"
        assert page.domain_events == ()

    def test_update_path(self, page):
        page.update_path("/home")

        assert page.path == "/home"
        assert isinstance(page.domain_events[-1], PagePathChanged)

    def test_update_path_invalid(self, page):
        assert isinstance(page.update_path("home"), Failure)
        assert page.path == "/"

    def test_update_title_and_clear(self, page):
        page.update_title("Welcome")
        page.update_title("")

        assert page.title is None
        events = page.domain_events
        assert all(isinstance(e, PageTitleChanged) for e in events)
        assert events[1].old_title == "Welcome"
        assert events[1].new_title is None

    def test_update_layout(self, page):
        page.update_layout(PageLayout(padding="none"))

        assert page.layout.padding == "none"
        event = page.domain_events[-1]
        assert isinstance(event, PageLayoutUpdated)
        assert event.layout["padding"] == "none"


@pytest.mark.unit
class TestPageComponents:
    def test_add_component_appends(self, page):
        first_id, second_id = _add_texts(page, "one", "two")

        result = page.add_component(ComponentType.BUTTON, {"text": "Go"})

        assert isinstance(result, Success)
        assert [c.id for c in page.components] == [first_id, second_id, result.value.id]
        event = page.domain_events[-1]
        assert isinstance(event, ComponentAdded)
        assert event.position == 2
        assert event.component_type is ComponentType.BUTTON

    def test_add_component_at_position(self, page):
        first_id, second_id = _add_texts(page, "one", "two")

        inserted = page.add_component("Divider", position=1).value

        assert [c.id for c in page.components] == [first_id, inserted.id, second_id]
        assert page.domain_events[-1].position == 1

    @pytest.mark.parametrize("position", [-1, 99, None])
    def test_out_of_range_position_appends(self, page, position):
        _add_texts(page, "one")

        added = page.add_component("Divider", position=position).value

        assert page.components[-1] is added

    @pytest.mark.parametrize("position", [True, False, "1", 1.0])
    def test_non_integer_position_appends(self, page, position):
        _add_texts(page, "one", "two")

        added = page.add_component("Divider", position=position).value

        assert page.components[-1] is added
        assert page.domain_events[-1].position == 2

    def test_add_invalid_component_leaves_page_unchanged(self, page):
        before = page.updated_at

        result = page.add_component("Text", {"unknown": True})

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_PROPERTY_NAME
        assert page.components == []
        assert page.updated_at == before
        assert page.domain_events == ()

    def test_update_component(self, page):
        (component_id,) = _add_texts(page, "one")

        result = page.update_component(component_id, {"content": "uno", "size": "large"})

        assert isinstance(result, Success)
        assert page.get_component(component_id).props.get("content") == "uno"
        event = page.domain_events[-1]
        assert isinstance(event, ComponentUpdated)
        assert event.updated_properties == ("content", "size")

    def test_update_component_invalid_is_atomic(self, page):
        (component_id,) = _add_texts(page, "one")

        result = page.update_component(component_id, {"content": "uno", "align": "middle"})

        assert isinstance(result, Failure)
        assert page.get_component(component_id).props.get("content") == "one"
        assert page.domain_events == ()

    def test_update_missing_component(self, page):
        missing = cast(UUID, uuid7())

        result = page.update_component(missing, {"content": "x"})

        assert isinstance(result, Failure)
        assert isinstance(result.error, NotFoundError)
        assert result.error.code == ErrorCode.COMPONENT_NOT_FOUND
        assert result.error.message == f"{PageError.COMPONENT_NOT_FOUND}: {missing}"

    def test_remove_component(self, page):
        first_id, second_id = _add_texts(page, "one", "two")

        result = page.remove_component(first_id)

        assert isinstance(result, Success)
        assert [c.id for c in page.components] == [second_id]
        event = page.domain_events[-1]
        assert isinstance(event, ComponentRemoved)
        assert event.component_type is ComponentType.TEXT

    def test_remove_missing_component(self, page):
        result = page.remove_component(cast(UUID, uuid7()))

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.COMPONENT_NOT_FOUND

    def test_component_count(self, page):
        _add_texts(page, "a", "b", "c")

        assert page.component_count == 3


@pytest.mark.unit
class TestPageReorder:
    def test_reorder_success(self, page):
        a, b, c = _add_texts(page, "a", "b", "c")

        result = page.reorder_components([c, a, b])

        assert isinstance(result, Success)
        assert [comp.id for comp in page.components] == [c, a, b]
        event = page.domain_events[-1]
        assert isinstance(event, ComponentsReordered)
        assert event.new_order == (c, a, b)

    def test_reorder_wrong_count(self, page):
        a, b = _add_texts(page, "a", "b")

        result = page.reorder_components([a])

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.COMPONENT_ORDER_MISMATCH
        assert result.error.message == PageError.REORDER_COUNT_MISMATCH
        assert [comp.id for comp in page.components] == [a, b]

    def test_reorder_duplicates(self, page):
        a, b = _add_texts(page, "a", "b")

        result = page.reorder_components([a, a])

        assert isinstance(result, Failure)
        assert result.error.message == PageError.REORDER_DUPLICATE_IDS

    def test_reorder_foreign_id_lists_missing(self, page):
        a, b = _add_texts(page, "a", "b")
        foreign = cast(UUID, uuid7())

        result = page.reorder_components([a, foreign])

        assert isinstance(result, Failure)
        assert result.error.message == f"{PageError.REORDER_MISSING_IDS}: {b}"
        assert [comp.id for comp in page.components] == [a, b]
        assert page.domain_events == ()

    def test_reorder_empty_page_with_empty_list(self, page):
        assert isinstance(page.reorder_components([]), Success)


@pytest.mark.unit
class TestPagePublication:
    def test_publish_without_components_fails(self, page):
        result = page.publish()

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.PAGE_HAS_NO_COMPONENTS
        assert result.error.message == PageError.NO_COMPONENTS_TO_PUBLISH
        assert page.is_published is False

    def test_publish_after_adding_component(self, page):
        _add_texts(page, "hello")

        result = page.publish()

        assert isinstance(result, Success)
        assert page.is_published is True
        assert isinstance(page.domain_events[-1], PagePublished)

    def test_unpublish_reverts(self, page):
        _add_texts(page, "hello")
        page.publish()

        page.unpublish()

        assert page.is_published is False
        assert isinstance(page.domain_events[-1], PageUnpublished)

    def test_removing_last_component_does_not_unpublish(self, page):
        (component_id,) = _add_texts(page, "hello")
        page.publish()

        page.remove_component(component_id)

        assert page.is_published is True


@pytest.mark.unit
class TestPageProjections:
    def test_render_data(self, page):
        page.update_title("Welcome")
        (component_id,) = _add_texts(page, "hello")

        data = page.to_render_data()

        assert data["meta"] == {"title": "Welcome", "path": "/"}
        assert data["styles"] == {"maxWidth": "1200px", "padding": "16px", "gap": "16px"}
        assert data["components"] == [
            {
                "id": str(component_id),
                "type": "Text",
                "props": {"content": "hello", "size": "medium", "color": "default", "align": "left"},
            }
        ]

    def test_render_title_falls_back_to_name(self, page):
        assert page.to_render_data()["meta"]["title"] == "Home"

    def test_public_info(self, page):
        _add_texts(page, "a", "b")

        info = page.to_public_info()

        assert info["componentCount"] == 2
        assert info["isPublished"] is False
        assert "components" not in info

    def test_persistence_round_trip(self, page):
        ids = _add_texts(page, "a", "b")
        page.publish()

        restored = Page.from_persistence(page.to_persistence())

        assert restored == page
        assert [c.id for c in restored.components] == ids
        assert restored.is_published is True
        assert restored.domain_events == ()
