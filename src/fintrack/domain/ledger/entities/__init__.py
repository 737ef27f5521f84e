from fintrack.domain.ledger.entities.transaction import Transaction

__all__ = ["Transaction"]
