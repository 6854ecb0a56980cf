from .dynamodb import (
    GSI1,
    DynamoDBRepository,
    all_of,
    from_iso,
    is_conditional_check_failed,
    is_transaction_condition_failed,
    ordering_key,
    to_iso,
)

__all__ = [
    "GSI1",
    "DynamoDBRepository",
    "all_of",
    "from_iso",
    "is_conditional_check_failed",
    "is_transaction_condition_failed",
    "ordering_key",
    "to_iso",
]
