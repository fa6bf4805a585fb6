"""
Error types for the career simulator.
Validation errors are ValueError subclasses so callers that already catch
ValueError (DTO validation, form parsing) keep working.
"""


class CareerError(Exception):
    """Base class for career simulator errors."""


class ValidationError(CareerError, ValueError):
    """Rejected request; nothing was mutated."""


class TrainingError(ValidationError):
    pass


class InsufficientFundsError(TrainingError):
    def __init__(self, cost: int, balance: int) -> None:
        super().__init__(f"training costs {cost} but bank balance is {balance}")
        self.cost = cost
        self.balance = balance


class SlotLimitError(TrainingError):
    def __init__(self, selected: int, max_slots: int) -> None:
        super().__init__(f"{selected} trainings selected but only {max_slots} slots available")
        self.selected = selected
        self.max_slots = max_slots


class IneligibleTrainingError(TrainingError):
    def __init__(self, focus: str, position: str) -> None:
        super().__init__(f"training {focus!r} is not available for position {position}")
        self.focus = focus
        self.position = position


class NegotiationRequired(ValidationError):
    """Staying with one year or less left needs a negotiated wage and length."""


class RetiredPlayerError(CareerError):
    pass


class SimulationError(CareerError):
    """A season cycle failed; the save was left untouched."""


class PersistenceError(CareerError):
    pass
