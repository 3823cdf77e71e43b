# bodas/web/frontend/hooks/mutation_runner.py
"""
Ciclo de vida de una operación de escritura y su feedback al usuario.

Por defecto los envíos pueden solaparse: `loading` es True mientras quede alguno
pendiente. Con `exclusive=True` un segundo envío mientras hay uno en curso se
rechaza con `MutationInProgressException`.
"""

import asyncio
import logging
from dataclasses import dataclass, replace
from typing import Any, Awaitable, Callable, Optional, TypeVar

from ..utils.exceptions import DEFAULT_ERROR_MESSAGE, MutationInProgressException, error_message
from .query_runner import Notifier

logger = logging.getLogger(__name__)

P = TypeVar("P")
R = TypeVar("R")

DEFAULT_SUCCESS_MESSAGE = "Operación realizada con éxito"


@dataclass(frozen=True)
class MutationState:
    loading: bool = False
    error: Optional[str] = None


@dataclass(frozen=True)
class SubmitOptions:
    success_message: Optional[str] = None
    error_message: Optional[str] = None
    show_success_toast: bool = True
    show_error_toast: bool = True


class MutationRunner:
    def __init__(
        self,
        notify: Optional[Notifier] = None,
        on_change: Optional[Callable[[MutationState], Any]] = None,
        exclusive: bool = False,
    ):
        self.notify = notify
        self.on_change = on_change
        self.exclusive = exclusive
        self._state = MutationState()
        self._pending = 0
        self._alive = True

    @property
    def state(self) -> MutationState:
        return self._state

    @property
    def loading(self) -> bool:
        return self._state.loading

    @property
    def error(self) -> Optional[str]:
        return self._state.error

    @property
    def pending(self) -> int:
        return self._pending

    def _set_state(self, **changes) -> None:
        if not self._alive:
            return
        self._state = replace(self._state, **changes)
        if self.on_change is not None:
            self.on_change(self._state)

    def _notify(self, message: str, style: str) -> None:
        if self.notify is not None and self._alive:
            self.notify(message, style)

    async def submit(
        self,
        action: Callable[[P], Awaitable[R]],
        payload: P,
        options: Optional[SubmitOptions] = None,
    ) -> R:
        """
        Ejecuta `action(payload)`.

        En éxito emite un toast (salvo `show_success_toast=False`) y retorna el
        resultado para que quien llama pueda encadenar un refresco. En fallo guarda
        el mensaje, emite un toast de error (salvo `show_error_toast=False`) y relanza.
        """
        options = options or SubmitOptions()
        if self.exclusive and self._pending:
            raise MutationInProgressException()

        self._pending += 1
        self._set_state(loading=True, error=None)
        try:
            result = await action(payload)
        except asyncio.CancelledError:
            raise
        except Exception as e:
            message = error_message(e, options.error_message or DEFAULT_ERROR_MESSAGE)
            logger.info(f"Envío fallido: {e}")
            self._set_state(error=message)
            if options.show_error_toast:
                self._notify(message, "error")
            raise
        else:
            if options.show_success_toast:
                self._notify(options.success_message or DEFAULT_SUCCESS_MESSAGE, "success")
            return result
        finally:
            self._pending -= 1
            self._set_state(loading=self._pending > 0)

    def close(self) -> None:
        self._alive = False
