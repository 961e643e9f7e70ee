"""State machine behind the liquidación form."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

from ..trigger.models import SubmissionResult

MONTH_NAMES = (
    "Enero",
    "Febrero",
    "Marzo",
    "Abril",
    "Mayo",
    "Junio",
    "Julio",
    "Agosto",
    "Septiembre",
    "Octubre",
    "Noviembre",
    "Diciembre",
)


class FormStatus(str, Enum):
    IDLE = "idle"
    CONFIRM = "confirm"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


class InvalidTransition(ValueError):
    """Raised when an action is not allowed in the current form status."""


_TRANSITIONS: dict[FormStatus, set[FormStatus]] = {
    FormStatus.IDLE: {FormStatus.CONFIRM},
    FormStatus.CONFIRM: {FormStatus.IDLE, FormStatus.LOADING},
    FormStatus.LOADING: {FormStatus.SUCCESS, FormStatus.ERROR},
    FormStatus.SUCCESS: {FormStatus.IDLE},
    FormStatus.ERROR: {FormStatus.IDLE},
}


def month_label(month: int) -> str:
    """Return the Spanish month name, or the number when out of range."""

    if 1 <= month <= 12:
        return MONTH_NAMES[month - 1]
    return str(month)


@dataclass(frozen=True)
class FormState:
    """Immutable snapshot of the form; each action returns a new snapshot."""

    month: int
    year: int
    status: FormStatus = FormStatus.IDLE
    message: str = ""

    @property
    def label(self) -> str:
        return month_label(self.month)

    @property
    def busy(self) -> bool:
        return self.status is FormStatus.LOADING

    @property
    def finished(self) -> bool:
        return self.status in {FormStatus.SUCCESS, FormStatus.ERROR}

    def _move(self, target: FormStatus, **changes: object) -> FormState:
        if target not in _TRANSITIONS[self.status]:
            raise InvalidTransition(f"cannot go from {self.status.value} to {target.value}")
        return replace(self, status=target, **changes)

    def request_confirmation(self) -> FormState:
        return self._move(FormStatus.CONFIRM)

    def cancel(self) -> FormState:
        return self._move(FormStatus.IDLE)

    def start_submission(self) -> FormState:
        return self._move(FormStatus.LOADING, message="")

    def complete(self, result: SubmissionResult) -> FormState:
        """Finish a submission with the endpoint's result."""

        if result.ok:
            timestamp = (result.timestamp or "")[:19]
            message = (
                f"Liquidación de {self.label} {self.year} enviada. Timestamp: {timestamp}Z"
            )
            return self._move(FormStatus.SUCCESS, message=message)
        return self._move(
            FormStatus.ERROR, message=result.error or "No se pudo enviar el webhook"
        )

    def reset(self) -> FormState:
        return self._move(FormStatus.IDLE, message="")
