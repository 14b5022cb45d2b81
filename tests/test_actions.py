"""Tests for delete / mark-cooked / shopping list actions on calendar cells."""

from datetime import date

import pytest

from app.exceptions import NetworkError, ServerError
from domain.enums import MealType
from planner.actions import DELETE_PROMPT, MutationActions, shopping_list_message

from test_fixtures import FakeGateway, Prompter, make_entry

WEEK = date(2024, 6, 3)


class Refresher:
    def __init__(self):
        self.count = 0

    async def __call__(self):
        self.count += 1


@pytest.fixture
def entry():
    return make_entry(date(2024, 6, 5), MealType.DINNER, title="Spaghetti Bolognese")


@pytest.fixture
def gateway(entry):
    return FakeGateway(entries=[entry])


@pytest.fixture
def refresh():
    return Refresher()


@pytest.fixture
def prompter():
    return Prompter(answer=True)


@pytest.fixture
def actions(gateway, refresh, prompter):
    return MutationActions(gateway, refresh=refresh, confirm=prompter.confirm, notify=prompter.notify)


def test_shopping_list_message():
    assert shopping_list_message(7) == "Added 7 items to your shopping list!"
    assert shopping_list_message(0) == "Added 0 items to your shopping list!"


class TestDelete:
    @pytest.mark.anyio
    async def test_confirmed_delete(self, actions, gateway, refresh, prompter, entry):
        assert await actions.delete(entry) is True

        assert prompter.confirmations == [DELETE_PROMPT]
        assert gateway.called("delete") == [("delete", entry.id)]
        assert gateway.entries == []
        assert refresh.count == 1
        assert not actions.deleting

    @pytest.mark.anyio
    async def test_declined_delete_does_nothing(self, actions, gateway, refresh, prompter, entry):
        prompter.answer = False

        assert await actions.delete(entry) is False
        assert gateway.called("delete") == []
        assert refresh.count == 0

    @pytest.mark.anyio
    async def test_async_confirm_is_awaited(self, gateway, refresh, entry):
        async def confirm(message):
            return True

        actions = MutationActions(gateway, refresh=refresh, confirm=confirm, notify=lambda m: None)
        assert await actions.delete(entry) is True
        assert gateway.called("delete")

    @pytest.mark.anyio
    async def test_failed_delete_still_refreshes(self, actions, gateway, refresh, entry):
        gateway.fail["delete"] = ServerError("Meal plan not found", 404)

        assert await actions.delete(entry) is True
        assert actions.error == "Could not remove meal: Meal plan not found (HTTP 404)"
        assert refresh.count == 1
        assert not actions.deleting

    @pytest.mark.anyio
    async def test_delete_in_flight_is_ignored(self, actions, gateway, prompter, entry):
        actions.deleting = True

        assert await actions.delete(entry) is False
        assert prompter.confirmations == []
        assert gateway.called("delete") == []


class TestMarkCooked:
    @pytest.mark.anyio
    async def test_mark_cooked(self, actions, gateway, refresh, entry):
        assert actions.can_mark_cooked(entry)

        assert await actions.mark_cooked(entry) is True
        assert gateway.called("mark_cooked") == [("mark_cooked", entry.id)]
        assert gateway.entries[0].is_cooked
        assert refresh.count == 1

    @pytest.mark.anyio
    async def test_already_cooked_is_a_no_op(self, actions, gateway, refresh):
        cooked = make_entry(date(2024, 6, 4), MealType.LUNCH, custom_meal="Soup", is_cooked=True)

        assert not actions.can_mark_cooked(cooked)
        assert await actions.mark_cooked(cooked) is False
        assert gateway.called("mark_cooked") == []
        assert refresh.count == 0

    @pytest.mark.anyio
    async def test_failure_sets_error_and_refreshes(self, actions, gateway, refresh, entry):
        gateway.fail["mark_cooked"] = NetworkError("timed out")

        assert await actions.mark_cooked(entry) is True
        assert actions.error == "Could not mark meal as cooked: timed out"
        assert refresh.count == 1
        assert not actions.marking


class TestGenerateShoppingList:
    @pytest.mark.anyio
    async def test_notifies_with_item_count(self, actions, gateway, prompter, refresh):
        gateway.items_added = 7

        assert await actions.generate_shopping_list(WEEK) == 7
        assert gateway.called("generate_shopping_list") == [
            ("generate_shopping_list", date(2024, 6, 3), date(2024, 6, 9))
        ]
        assert prompter.notifications == ["Added 7 items to your shopping list!"]
        assert refresh.count == 0

    @pytest.mark.anyio
    async def test_failure_does_not_notify(self, actions, gateway, prompter):
        gateway.fail["generate_shopping_list"] = ServerError("boom", 500)

        assert await actions.generate_shopping_list(WEEK) is None
        assert prompter.notifications == []
        assert actions.error == "Could not generate shopping list: boom (HTTP 500)"
        assert not actions.generating
