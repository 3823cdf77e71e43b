# bodas/web/frontend/hooks/query_runner.py
"""
Ciclo de vida de una lectura repetible, independiente de la UI.

`QueryRunner` mantiene {data, loading, error} para un productor asíncrono sin
argumentos. Los hooks de ReactPy lo envuelven (ver use_api_call_hook.py), pero
también se puede usar tal cual desde un servicio o un script.

Garantías:
    - Sólo la última llamada emitida escribe el estado: cada `execute()` toma una
      generación nueva y los resultados de generaciones anteriores se descartan.
    - Tras `close()` no se actualiza el estado ni se notifica nada. Las llamadas
      en vuelo no se abortan; su resultado simplemente se ignora.
    - `schedule()` aplica debounce: un cambio nuevo dentro de la ventana cancela el
      temporizador pendiente (no la llamada de red ya iniciada) y reprograma.
"""

import asyncio
import logging
from dataclasses import dataclass, replace
from typing import Any, Awaitable, Callable, Generic, Optional, Set, TypeVar

from ..utils.exceptions import error_message

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_DEBOUNCE_MS = 300

Notifier = Callable[[str, str], Any]

_UNSET = object()


@dataclass(frozen=True)
class FetchState(Generic[T]):
    data: Optional[T] = None
    loading: bool = False
    error: Optional[str] = None


class QueryRunner(Generic[T]):
    def __init__(
        self,
        producer: Callable[[], Awaitable[T]],
        notify: Optional[Notifier] = None,
        debounce_ms: int = DEFAULT_DEBOUNCE_MS,
        auto_execute: bool = True,
        on_change: Optional[Callable[[FetchState], Any]] = None,
    ):
        # `producer` y `notify` se pueden reasignar en cada render; la ejecución
        # programada usa siempre los valores vigentes al dispararse.
        self.producer = producer
        self.notify = notify
        self.debounce_ms = debounce_ms
        self.auto_execute = auto_execute
        self.on_change = on_change

        self._state: FetchState = FetchState()
        self._generation = 0
        self._alive = True
        self._timer: Optional[asyncio.Task] = None
        self._tasks: Set[asyncio.Task] = set()
        self._last_dependencies: Any = _UNSET

    # --- Estado ---
    @property
    def state(self) -> FetchState:
        return self._state

    @property
    def data(self) -> Optional[T]:
        return self._state.data

    @property
    def loading(self) -> bool:
        return self._state.loading

    @property
    def error(self) -> Optional[str]:
        return self._state.error

    @property
    def alive(self) -> bool:
        return self._alive

    @property
    def has_pending_schedule(self) -> bool:
        return self._timer is not None

    def _set_state(self, **changes) -> None:
        if not self._alive:
            return
        self._state = replace(self._state, **changes)
        if self.on_change is not None:
            self.on_change(self._state)

    def _is_current(self, generation: int) -> bool:
        return self._alive and generation == self._generation

    # --- Ejecución ---
    async def execute(self) -> Optional[T]:
        """
        Ejecuta el productor y actualiza el estado.

        En caso de fallo conserva `data`, guarda el mensaje en `error`, emite un
        toast de error y relanza la excepción. Si mientras tanto se emitió otra
        llamada, el resultado de ésta se descarta sin tocar el estado y un error
        obsoleto no se propaga (retorna None).
        """
        if not self._alive:
            return None

        self._generation += 1
        generation = self._generation
        self._set_state(loading=True, error=None)

        try:
            result = await self.producer()
        except asyncio.CancelledError:
            if self._is_current(generation):
                self._set_state(loading=False)
            raise
        except Exception as e:
            if not self._is_current(generation):
                logger.debug(f"Error de una consulta obsoleta descartado (generación {generation}): {e}")
                return None
            message = error_message(e)
            self._set_state(loading=False, error=message)
            self._notify(message, "error")
            raise

        if self._is_current(generation):
            self._set_state(data=result, loading=False)
        else:
            logger.debug(f"Resultado de una consulta obsoleta descartado (generación {generation})")
        return result

    refetch = execute

    def _notify(self, message: str, style: str) -> None:
        if self.notify is not None and self._alive:
            self.notify(message, style)

    # --- Debounce ---
    def schedule(self) -> asyncio.Task:
        """Programa `execute()` tras el debounce, cancelando cualquier programación pendiente."""
        self.cancel_scheduled()
        task = asyncio.create_task(self._run_after_delay())
        self._timer = task
        self._track(task)
        return task

    def cancel_scheduled(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def watch(self, dependencies: Any) -> bool:
        """
        Registra el valor actual de las dependencias. Si cambió (por valor) y la
        ejecución automática está activa, programa una ejecución. Retorna si se programó.
        """
        if self._last_dependencies is not _UNSET and self._last_dependencies == dependencies:
            return False
        self._last_dependencies = dependencies
        if not self.auto_execute or not self._alive:
            return False
        self.schedule()
        return True

    async def _run_after_delay(self) -> None:
        await asyncio.sleep(self.debounce_ms / 1000)
        # A partir de aquí la llamada ya no es cancelable por el debounce
        self._timer = None
        try:
            await self.execute()
        except asyncio.CancelledError:
            raise
        except Exception as e:
            # El error ya quedó en el estado y se notificó
            logger.debug(f"Ejecución programada fallida: {e}")

    def _track(self, task: asyncio.Task) -> None:
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    def close(self) -> None:
        """El dueño desaparece: se cancela la programación pendiente y se ignora todo lo que llegue después."""
        self.cancel_scheduled()
        self._alive = False
