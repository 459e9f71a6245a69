"""Domain layer - value objects, load state machine, domain exceptions.

- **Value Objects**: Immutable objects compared by value (Money, Currency)
- **State Machines**: Collection load lifecycle (LoadStatus)
- **Exceptions**: Load and lifecycle errors
"""

from brickfolio.domain.exceptions import (
    CollectionImportError,
    CollectionLoadError,
    DomainError,
    InvalidStateTransitionError,
)
from brickfolio.domain.state_machines import LoadStatus, validate_load_transition
from brickfolio.domain.value_objects import Currency, Money

__all__ = [
    # Value objects
    "Currency",
    "Money",
    # State machines
    "LoadStatus",
    "validate_load_transition",
    # Exceptions
    "CollectionImportError",
    "CollectionLoadError",
    "DomainError",
    "InvalidStateTransitionError",
]
