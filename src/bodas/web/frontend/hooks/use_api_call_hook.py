# bodas/web/frontend/hooks/use_api_call_hook.py
"""
Bindings de ReactPy para los runners de consulta y de envío.

Cada hook guarda su runner en un `use_ref` (una instancia por componente), lo
conecta al estado de ReactPy para re-renderizar en cada cambio y lo cierra al
desmontar, de modo que ningún resultado tardío toque un componente que ya no existe.
"""

import asyncio
import logging
from typing import Any, Awaitable, Callable, Dict, List, Optional

from reactpy import use_effect, use_ref, use_state

from ..shared.notifications import use_notifier
from ..state.app_context import use_frontend_config
from .mutation_runner import MutationRunner, MutationState
from .query_runner import DEFAULT_DEBOUNCE_MS, FetchState, QueryRunner

logger = logging.getLogger(__name__)


def use_api_call(
    producer: Callable[[], Awaitable[Any]],
    dependencies: Optional[List[Any]] = None,
    auto_execute: bool = True,
    debounce_ms: Optional[int] = None,
) -> Dict[str, Any]:
    """
    Hook genérico para una lectura repetible.

    Args:
        producer: Función async sin argumentos que obtiene los datos.
        dependencies: Valores primitivos; cuando cambian se re-ejecuta (con debounce).
        auto_execute: Si False sólo se ejecuta llamando a `execute`.
        debounce_ms: Ventana de debounce; por defecto la configurada en la App (300 ms).

    Returns:
        Dict con data, loading, error, execute y refetch (alias de execute).
    """
    frontend_config = use_frontend_config()
    show_notification = use_notifier()
    state, set_state = use_state(FetchState())
    runner_ref = use_ref(None)

    if debounce_ms is None:
        debounce_ms = frontend_config.get("debounce_ms", DEFAULT_DEBOUNCE_MS)

    if runner_ref.current is None:
        runner_ref.current = QueryRunner(producer, notify=show_notification, on_change=set_state)
    runner: QueryRunner = runner_ref.current
    # El productor del último render es el que verá la ejecución programada
    runner.producer = producer
    runner.notify = show_notification
    runner.debounce_ms = debounce_ms
    runner.auto_execute = auto_execute

    @use_effect(dependencies=[])
    def lifecycle():
        return runner.close

    @use_effect(dependencies=[auto_execute, debounce_ms, *(dependencies or [])])
    def auto_run():
        if not auto_execute:
            return None
        runner.schedule()
        return runner.cancel_scheduled

    return {
        "data": state.data,
        "loading": state.loading,
        "error": state.error,
        "execute": runner.execute,
        "refetch": runner.refetch,
    }


def use_submit(exclusive: bool = False) -> Dict[str, Any]:
    """
    Hook genérico para operaciones de escritura.

    Returns:
        Dict con submit(action, payload, options), loading y error.
    """
    show_notification = use_notifier()
    state, set_state = use_state(MutationState())
    runner_ref = use_ref(None)

    if runner_ref.current is None:
        runner_ref.current = MutationRunner(notify=show_notification, on_change=set_state, exclusive=exclusive)
    runner: MutationRunner = runner_ref.current
    runner.notify = show_notification

    @use_effect(dependencies=[])
    def lifecycle():
        return runner.close

    return {"submit": runner.submit, "loading": state.loading, "error": state.error}


def use_real_time_data(
    fetcher: Callable[[], Awaitable[Any]],
    interval_seconds: Optional[float] = 30,
    dependencies: Optional[List[Any]] = None,
) -> Dict[str, Any]:
    """Como `use_api_call`, pero además re-ejecuta cada `interval_seconds` mientras el componente siga montado."""
    query = use_api_call(fetcher, dependencies)
    execute = query["execute"]

    @use_effect(dependencies=[interval_seconds])
    def polling():
        if not interval_seconds:
            return None

        async def poll():
            while True:
                await asyncio.sleep(interval_seconds)
                try:
                    await execute()
                except asyncio.CancelledError:
                    raise
                except Exception as e:
                    # El runner ya guardó el error y lo notificó
                    logger.debug(f"Refresco periódico fallido: {e}")

        task = asyncio.create_task(poll())
        return lambda: task.cancel()

    return {"data": query["data"], "loading": query["loading"], "error": query["error"], "refetch": execute}
