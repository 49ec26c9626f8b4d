import asyncio

from .errors import GenerationCancelled


class CancellationToken:
    """Cooperative cancellation signal for a single ``generate`` call.

    The orchestrator checks the token before each provider call and races
    it against the call in flight.
    """

    def __init__(self):
        self._event = asyncio.Event()

    def cancel(self) -> None:
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    async def wait(self) -> None:
        await self._event.wait()

    def raise_if_cancelled(self) -> None:
        if self._event.is_set():
            raise GenerationCancelled("Generation cancelled")
