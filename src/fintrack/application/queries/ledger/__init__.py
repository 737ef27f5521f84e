from fintrack.application.queries.ledger.category_suggestions_query import (
    CategorySuggestionsQuery,
)
from fintrack.application.queries.ledger.list_transactions_query import (
    GetTransactionQuery,
    ListTransactionsQuery,
)

__all__ = [
    "CategorySuggestionsQuery",
    "GetTransactionQuery",
    "ListTransactionsQuery",
]
