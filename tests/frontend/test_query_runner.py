# tests/frontend/test_query_runner.py
"""
Tests del ciclo de vida de las consultas (QueryRunner), sin ReactPy.

Los tiempos de debounce se reducen a unos milisegundos para que la suite sea rápida.
"""

import asyncio

import pytest

from bodas.web.frontend.hooks.query_runner import FetchState, QueryRunner
from bodas.web.frontend.utils.exceptions import APIException


class TestExecute:
    @pytest.mark.asyncio
    async def test_success_sets_data_and_clears_loading(self, notifier):
        states = []

        async def producer():
            return [1, 2, 3]

        runner = QueryRunner(producer, notify=notifier, on_change=states.append)
        result = await runner.execute()

        assert result == [1, 2, 3]
        assert runner.state == FetchState(data=[1, 2, 3], loading=False, error=None)
        assert states[0].loading is True
        assert notifier.calls == []

    @pytest.mark.asyncio
    async def test_failure_keeps_previous_data_and_notifies(self, notifier):
        responses = [["ok"], APIException("Servidor no disponible", 503)]

        async def producer():
            value = responses.pop(0)
            if isinstance(value, Exception):
                raise value
            return value

        runner = QueryRunner(producer, notify=notifier)
        await runner.execute()

        with pytest.raises(APIException):
            await runner.execute()

        assert runner.data == ["ok"]
        assert runner.error == "Servidor no disponible"
        assert runner.loading is False
        assert notifier.calls == [("Servidor no disponible", "error")]

    @pytest.mark.asyncio
    async def test_untyped_error_uses_generic_message(self, notifier):
        async def producer():
            raise RuntimeError("boom")

        runner = QueryRunner(producer, notify=notifier)
        with pytest.raises(RuntimeError):
            await runner.execute()

        assert runner.error == "Ocurrió un error inesperado"
        assert notifier.styles == ["error"]

    @pytest.mark.asyncio
    async def test_new_execute_clears_previous_error(self):
        calls = {"n": 0}

        async def producer():
            calls["n"] += 1
            if calls["n"] == 1:
                raise APIException("Fallo temporal")
            return {"ok": True}

        runner = QueryRunner(producer)
        with pytest.raises(APIException):
            await runner.execute()
        await runner.refetch()

        assert runner.error is None
        assert runner.data == {"ok": True}


class TestStaleResults:
    @pytest.mark.asyncio
    async def test_only_latest_call_writes_state(self):
        first_gate = asyncio.Event()
        calls = []

        async def producer():
            call_number = len(calls) + 1
            calls.append(call_number)
            if call_number == 1:
                await first_gate.wait()
                return "viejo"
            return "nuevo"

        runner = QueryRunner(producer)
        slow = asyncio.create_task(runner.execute())
        await asyncio.sleep(0)

        await runner.execute()
        first_gate.set()
        assert await slow == "viejo"

        assert runner.data == "nuevo"
        assert runner.loading is False

    @pytest.mark.asyncio
    async def test_stale_failure_is_not_notified(self, notifier):
        first_gate = asyncio.Event()
        calls = []

        async def producer():
            calls.append(1)
            if len(calls) == 1:
                await first_gate.wait()
                raise APIException("Respuesta tardía")
            return "ok"

        runner = QueryRunner(producer, notify=notifier)
        slow = asyncio.create_task(runner.execute())
        await asyncio.sleep(0)
        await runner.execute()

        first_gate.set()
        assert await slow is None

        assert runner.error is None
        assert runner.data == "ok"
        assert notifier.calls == []


class TestDebounce:
    @pytest.mark.asyncio
    async def test_burst_of_changes_produces_single_call(self):
        calls = []

        async def producer():
            calls.append(1)
            return len(calls)

        runner = QueryRunner(producer, debounce_ms=30)
        for term in ["N", "Ng", "Ngu", "Nguy", "Nguyen"]:
            runner.watch(("pending", term))
            await asyncio.sleep(0.005)

        await asyncio.sleep(0.1)

        assert len(calls) == 1
        assert runner.data == 1
        assert runner.has_pending_schedule is False

    @pytest.mark.asyncio
    async def test_watch_ignores_equal_dependencies(self):
        async def producer():
            return None

        runner = QueryRunner(producer, debounce_ms=10)
        assert runner.watch(["pending", None, 1]) is True
        runner.cancel_scheduled()
        assert runner.watch(["pending", None, 1]) is False
        assert runner.watch(["confirmed", None, 1]) is True
        runner.close()
        await asyncio.sleep(0)

    @pytest.mark.asyncio
    async def test_auto_execute_disabled_records_but_does_not_schedule(self):
        async def producer():
            return None

        runner = QueryRunner(producer, auto_execute=False)
        assert runner.watch([1]) is False
        assert runner.has_pending_schedule is False

    @pytest.mark.asyncio
    async def test_scheduled_run_uses_current_producer(self):
        async def old_producer():
            return "viejo"

        async def new_producer():
            return "nuevo"

        runner = QueryRunner(old_producer, debounce_ms=10)
        runner.schedule()
        runner.producer = new_producer
        await asyncio.sleep(0.05)

        assert runner.data == "nuevo"

    @pytest.mark.asyncio
    async def test_scheduled_failure_is_stored_not_raised(self, notifier):
        async def producer():
            raise APIException("Sin conexión")

        runner = QueryRunner(producer, notify=notifier, debounce_ms=5)
        task = runner.schedule()
        await task

        assert runner.error == "Sin conexión"
        assert notifier.calls == [("Sin conexión", "error")]


class TestClose:
    @pytest.mark.asyncio
    async def test_close_cancels_pending_schedule(self):
        calls = []

        async def producer():
            calls.append(1)

        runner = QueryRunner(producer, debounce_ms=20)
        runner.schedule()
        runner.close()
        await asyncio.sleep(0.05)

        assert calls == []
        assert runner.alive is False

    @pytest.mark.asyncio
    async def test_in_flight_result_after_close_is_ignored(self, notifier):
        gate = asyncio.Event()
        changes = []

        async def producer():
            await gate.wait()
            raise APIException("Demasiado tarde")

        runner = QueryRunner(producer, notify=notifier, on_change=changes.append)
        task = asyncio.create_task(runner.execute())
        await asyncio.sleep(0)
        runner.close()
        changes.clear()

        gate.set()
        assert await task is None

        assert changes == []
        assert notifier.calls == []
        assert runner.loading is True

    @pytest.mark.asyncio
    async def test_execute_after_close_is_a_noop(self):
        calls = []

        async def producer():
            calls.append(1)

        runner = QueryRunner(producer)
        runner.close()

        assert await runner.execute() is None
        assert calls == []
