"""Transactions router for ledger endpoints."""

import logging
from datetime import datetime
from typing import Annotated, Optional
from uuid import UUID

from fastapi import APIRouter, Query, status

from fintrack.application.commands.ledger import (
    CreateTransactionCommand,
    DeleteTransactionCommand,
    UpdateTransactionCommand,
)
from fintrack.application.queries.ledger import (
    CategorySuggestionsQuery,
    GetTransactionQuery,
    ListTransactionsQuery,
)
from fintrack.domain.ledger import Transaction, TransactionType
from fintrack.presentation.api.dependencies import RepoFactory
from fintrack.presentation.api.schemas.transactions import (
    CategorySuggestion,
    CategorySuggestionsResponse,
    QuickTransactionRequest,
    TransactionCreateRequest,
    TransactionListResponse,
    TransactionResponse,
    TransactionUpdateRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter()

# Note: Don't set default in Query() when using Annotated - set it with = instead
LimitFilter = Annotated[int, Query(ge=1, le=500, description="Max transactions")]
DateFilter = Annotated[
    Optional[datetime],
    Query(description="Applied only when both start_date and end_date are set"),
]


def transaction_to_response(txn: Transaction) -> TransactionResponse:
    return TransactionResponse(
        id=txn.id,
        amount=txn.amount,
        type=txn.transaction_type,
        category=txn.category,
        description=txn.description,
        date=txn.date,
        source=txn.source,
        recurring_rule_id=txn.recurring_rule_id,
        created_at=txn.created_at,
        updated_at=txn.updated_at,
    )


@router.post(
    "/quick",
    status_code=status.HTTP_201_CREATED,
    summary="Quick entry",
    responses={201: {"description": "Transaction created"}},
)
async def create_quick_transaction(
    request: QuickTransactionRequest,
    factory: RepoFactory,
) -> TransactionResponse:
    """Record a transaction dated now; the type defaults to EXPENSE."""
    command = CreateTransactionCommand.from_factory(factory)

    try:
        txn = await command.execute(
            amount=request.amount,
            category=request.category,
            transaction_type=request.type,
            description=request.description,
        )
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return transaction_to_response(txn)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Create a transaction",
    responses={
        201: {"description": "Transaction created"},
        400: {"description": "Invalid amount or category"},
    },
)
async def create_transaction(
    request: TransactionCreateRequest,
    factory: RepoFactory,
) -> TransactionResponse:
    command = CreateTransactionCommand.from_factory(factory)

    try:
        txn = await command.execute(
            amount=request.amount,
            category=request.category,
            transaction_type=request.type,
            description=request.description,
            date=request.date,
        )
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return transaction_to_response(txn)


@router.get("", summary="List transactions")
async def list_transactions(  # NOQA: PLR0913
    factory: RepoFactory,
    start_date: DateFilter = None,
    end_date: DateFilter = None,
    category: Optional[str] = None,
    type: Optional[TransactionType] = None,  # NOQA: A002
    limit: LimitFilter = 50,
) -> TransactionListResponse:
    """List transactions, newest first."""
    query = ListTransactionsQuery.from_factory(factory)
    transactions = await query.execute(
        start_date=start_date,
        end_date=end_date,
        category=category,
        transaction_type=type,
        limit=limit,
    )
    return TransactionListResponse(
        transactions=[transaction_to_response(t) for t in transactions],
        count=len(transactions),
    )


@router.get(
    "/categories/suggestions",
    summary="Most used expense categories",
)
async def category_suggestions(factory: RepoFactory) -> CategorySuggestionsResponse:
    """Top six expense categories for the quick entry screen."""
    usage = await CategorySuggestionsQuery.from_factory(factory).execute()
    return CategorySuggestionsResponse(
        suggestions=[
            CategorySuggestion(category=item.category, count=item.count)
            for item in usage
        ],
    )


@router.get(
    "/{transaction_id}",
    summary="Get a transaction",
    responses={404: {"description": "Transaction not found"}},
)
async def get_transaction(
    transaction_id: UUID,
    factory: RepoFactory,
) -> TransactionResponse:
    txn = await GetTransactionQuery.from_factory(factory).execute(transaction_id)
    return transaction_to_response(txn)


@router.patch(
    "/{transaction_id}",
    summary="Update a transaction",
    responses={404: {"description": "Transaction not found"}},
)
async def update_transaction(
    transaction_id: UUID,
    request: TransactionUpdateRequest,
    factory: RepoFactory,
) -> TransactionResponse:
    command = UpdateTransactionCommand.from_factory(factory)

    try:
        txn = await command.execute(
            transaction_id=transaction_id,
            amount=request.amount,
            transaction_type=request.type,
            category=request.category,
            description=request.description,
            date=request.date,
        )
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return transaction_to_response(txn)


@router.delete(
    "/{transaction_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a transaction",
    responses={
        204: {"description": "Transaction deleted"},
        404: {"description": "Transaction not found"},
    },
)
async def delete_transaction(
    transaction_id: UUID,
    factory: RepoFactory,
) -> None:
    command = DeleteTransactionCommand.from_factory(factory)

    try:
        await command.execute(transaction_id=transaction_id)
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise
