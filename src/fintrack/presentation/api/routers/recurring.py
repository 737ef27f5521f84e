"""Recurring transactions router."""

import logging
from uuid import UUID

from fastapi import APIRouter, status

from fintrack.application.commands.recurring import (
    CreateRecurringRuleCommand,
    DeleteRecurringRuleCommand,
    ProcessDueRecurringRulesCommand,
    UpdateRecurringRuleCommand,
)
from fintrack.application.queries.recurring import ListRecurringRulesQuery
from fintrack.domain.recurring import RecurringRule
from fintrack.presentation.api.dependencies import RepoFactory
from fintrack.presentation.api.routers.transactions import transaction_to_response
from fintrack.presentation.api.schemas.recurring import (
    ProcessRecurringResponse,
    RecurringRuleCreateRequest,
    RecurringRuleResponse,
    RecurringRuleUpdateRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _rule_to_response(rule: RecurringRule) -> RecurringRuleResponse:
    return RecurringRuleResponse(
        id=rule.id,
        amount=rule.amount,
        type=rule.transaction_type,
        category=rule.category,
        description=rule.description,
        frequency=rule.frequency,
        interval=rule.interval,
        start_date=rule.start_date,
        end_date=rule.end_date,
        next_run=rule.next_run,
        is_active=rule.is_active,
        created_at=rule.created_at,
        updated_at=rule.updated_at,
    )


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Create a recurring transaction",
    responses={
        201: {"description": "Rule created"},
        400: {"description": "End date not after start date"},
    },
)
async def create_recurring_rule(
    request: RecurringRuleCreateRequest,
    factory: RepoFactory,
) -> RecurringRuleResponse:
    """Create a rule. The first occurrence is one period after ``start_date``."""
    command = CreateRecurringRuleCommand.from_factory(factory)

    try:
        rule = await command.execute(
            amount=request.amount,
            transaction_type=request.type,
            category=request.category,
            description=request.description,
            frequency=request.frequency,
            interval=request.interval,
            start_date=request.start_date,
            end_date=request.end_date,
        )
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return _rule_to_response(rule)


@router.get("", summary="List recurring transactions")
async def list_recurring_rules(factory: RepoFactory) -> list[RecurringRuleResponse]:
    rules = await ListRecurringRulesQuery.from_factory(factory).execute()
    return [_rule_to_response(rule) for rule in rules]


@router.post(
    "/process",
    summary="Materialize due recurring transactions",
)
async def process_recurring_rules(factory: RepoFactory) -> ProcessRecurringResponse:
    """Create one transaction for each due rule and advance its schedule.

    Rules that are several periods behind advance one step per call.
    """
    command = ProcessDueRecurringRulesCommand.from_factory(factory)

    try:
        result = await command.execute()
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return ProcessRecurringResponse(
        processed=result.processed,
        transactions=[transaction_to_response(t) for t in result.transactions],
    )


@router.patch(
    "/{rule_id}",
    summary="Update a recurring transaction",
    responses={
        403: {"description": "Rule belongs to another user"},
        404: {"description": "Rule not found"},
    },
)
async def update_recurring_rule(
    rule_id: UUID,
    request: RecurringRuleUpdateRequest,
    factory: RepoFactory,
) -> RecurringRuleResponse:
    command = UpdateRecurringRuleCommand.from_factory(factory)
    clear_end_date = "end_date" in request.model_fields_set and request.end_date is None

    try:
        rule = await command.execute(
            rule_id=rule_id,
            amount=request.amount,
            category=request.category,
            description=request.description,
            frequency=request.frequency,
            interval=request.interval,
            end_date=request.end_date,
            clear_end_date=clear_end_date,
            is_active=request.is_active,
        )
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return _rule_to_response(rule)


@router.delete(
    "/{rule_id}",
    summary="Delete a recurring transaction",
    responses={
        403: {"description": "Rule belongs to another user"},
        404: {"description": "Rule not found"},
    },
)
async def delete_recurring_rule(rule_id: UUID, factory: RepoFactory) -> dict:
    command = DeleteRecurringRuleCommand.from_factory(factory)

    try:
        await command.execute(rule_id=rule_id)
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return {"message": "Recurring transaction deleted"}
