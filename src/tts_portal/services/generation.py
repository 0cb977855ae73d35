"""Generation workflow: submit a job, then poll it to a terminal state."""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field

from tts_portal.adapters.tts_api_client import ApiClientError, TtsApiClient
from tts_portal.domain.errors import GenerationInProgressError, NotAuthenticatedError
from tts_portal.domain.generation import (
    COMPLETED_JOB_STATUS,
    FAILED_JOB_STATUS,
    GenerationOutcome,
    GenerationRequest,
    GenerationState,
    Job,
)
from tts_portal.services.sessions import SessionStore

DEFAULT_POLL_INTERVAL_SECONDS = 2.0
DEFAULT_MAX_POLL_ATTEMPTS = 30

_ACTIVE_STATES = frozenset({GenerationState.SUBMITTING, GenerationState.POLLING})

_logger = logging.getLogger(__name__)


class CancellationToken:
    """Cooperative cancellation flag shared by a handle and its run."""

    def __init__(self) -> None:
        self._event = asyncio.Event()

    def cancel(self) -> None:
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    async def wait(self) -> None:
        await self._event.wait()


@dataclass
class GenerationHandle:
    """Handle to a running generation task."""

    task: "asyncio.Task[GenerationOutcome]"
    cancel_token: CancellationToken
    workflow: "GenerationWorkflow"

    def cancel(self) -> None:
        """Ask the run to stop; it ends in the cancelled state."""
        self.cancel_token.cancel()

    @property
    def done(self) -> bool:
        return self.task.done()

    @property
    def state(self) -> GenerationState:
        return self.workflow.state

    async def wait(self) -> GenerationOutcome:
        return await self.task


@dataclass
class GenerationWorkflow:
    """State machine for one voice generation at a time.

    A run moves idle -> submitting -> polling and ends in exactly one of
    completed, failed, timed_out or cancelled. Polls are strictly sequential
    and separated by ``poll_interval_seconds``; at most
    ``max_poll_attempts`` polls are issued before the run times out.
    """

    api_client: TtsApiClient
    session_store: SessionStore
    poll_interval_seconds: float = DEFAULT_POLL_INTERVAL_SECONDS
    max_poll_attempts: int = DEFAULT_MAX_POLL_ATTEMPTS
    sleep: Callable[[float], Awaitable[None]] = asyncio.sleep
    on_state_change: Callable[[GenerationState], None] | None = None
    state: GenerationState = field(default=GenerationState.IDLE, init=False)
    outcome: GenerationOutcome | None = field(default=None, init=False)
    handle: GenerationHandle | None = field(default=None, init=False, repr=False)

    @property
    def busy(self) -> bool:
        return self.state in _ACTIVE_STATES

    def start(self, request: GenerationRequest) -> GenerationHandle:
        """Start a run as a background task and return its handle.

        Must be called from a running event loop. Raises
        ``NotAuthenticatedError`` without contacting the API when no token is
        stored.
        """
        loop = asyncio.get_running_loop()
        token = self._begin()
        cancel_token = CancellationToken()
        task = loop.create_task(self._execute(request, token, cancel_token))
        self.handle = GenerationHandle(
            task=task, cancel_token=cancel_token, workflow=self
        )
        return self.handle

    async def run(
        self,
        request: GenerationRequest,
        cancel_token: CancellationToken | None = None,
    ) -> GenerationOutcome:
        """Run to a terminal outcome in the current task."""
        token = self._begin()
        return await self._execute(request, token, cancel_token or CancellationToken())

    def cancel(self) -> bool:
        """Cancel the active background run, if any."""
        if self.handle is None or self.handle.done:
            return False
        self.handle.cancel()
        return True

    async def aclose(self) -> None:
        """Cancel and await any background run."""
        handle = self.handle
        if handle is not None and self.cancel():
            await handle.wait()

    def _begin(self) -> str:
        if self.busy:
            raise GenerationInProgressError("A generation is already running.")
        token = self.session_store.get_token()
        if token is None:
            raise NotAuthenticatedError("Please login to generate voice.")
        if self.state is not GenerationState.IDLE:
            self._transition(GenerationState.IDLE)
        self.outcome = None
        self._transition(GenerationState.SUBMITTING)
        return token

    async def _execute(
        self,
        request: GenerationRequest,
        token: str,
        cancel_token: CancellationToken,
    ) -> GenerationOutcome:
        job_id: str | None = None
        try:
            if cancel_token.cancelled:
                return self._finish(GenerationOutcome(GenerationState.CANCELLED))
            try:
                payload = await self.api_client.submit_generation(
                    request.text,
                    request.voice_id,
                    request.language,
                    token,
                    exaggeration=request.exaggeration,
                    cfg_weight=request.cfg_weight,
                )
            except ApiClientError as exc:
                return self._finish(
                    GenerationOutcome(GenerationState.FAILED, error=str(exc))
                )
            raw_job_id = payload.get("job_id")
            job_id = str(raw_job_id) if raw_job_id else None
            if cancel_token.cancelled:
                return self._finish(
                    GenerationOutcome(GenerationState.CANCELLED, job_id=job_id)
                )
            if not payload.get("success") or job_id is None:
                error = payload.get("error")
                return self._finish(
                    GenerationOutcome(
                        GenerationState.FAILED,
                        error=str(error) if error else "Failed to start generation",
                    )
                )
            self._transition(GenerationState.POLLING)
            return await self._poll(job_id, cancel_token)
        except asyncio.CancelledError:
            self._finish(GenerationOutcome(GenerationState.CANCELLED, job_id=job_id))
            raise
        except Exception:
            _logger.exception("Generation run crashed: job_id=%s", job_id)
            return self._finish(
                GenerationOutcome(
                    GenerationState.FAILED, job_id=job_id, error="Request failed"
                )
            )

    async def _poll(
        self, job_id: str, cancel_token: CancellationToken
    ) -> GenerationOutcome:
        for attempt in range(1, self.max_poll_attempts + 1):
            if attempt > 1:
                await self._pause(cancel_token)
            if cancel_token.cancelled:
                return self._finish(
                    GenerationOutcome(
                        GenerationState.CANCELLED, job_id=job_id, polls=attempt - 1
                    )
                )
            try:
                payload = await self.api_client.get_job(job_id)
            except ApiClientError as exc:
                return self._finish(
                    GenerationOutcome(
                        GenerationState.FAILED,
                        job_id=job_id,
                        error=str(exc),
                        polls=attempt,
                    )
                )
            if cancel_token.cancelled:
                return self._finish(
                    GenerationOutcome(
                        GenerationState.CANCELLED, job_id=job_id, polls=attempt
                    )
                )
            raw_job = payload.get("job")
            if not isinstance(raw_job, dict):
                _logger.debug("Job %s not reported yet (poll %s)", job_id, attempt)
                continue
            job = Job.from_payload(raw_job, job_id)
            if job.status == COMPLETED_JOB_STATUS:
                return self._finish(
                    GenerationOutcome(
                        GenerationState.COMPLETED,
                        job_id=job_id,
                        result_url=job.result_url,
                        polls=attempt,
                    )
                )
            if job.status == FAILED_JOB_STATUS:
                return self._finish(
                    GenerationOutcome(
                        GenerationState.FAILED,
                        job_id=job_id,
                        error=job.error or "Unknown error",
                        polls=attempt,
                    )
                )
            if job.status and not job.in_progress:
                return self._finish(
                    GenerationOutcome(
                        GenerationState.FAILED,
                        job_id=job_id,
                        error=f"Unexpected job status: {job.status}",
                        polls=attempt,
                    )
                )
        return self._finish(
            GenerationOutcome(
                GenerationState.TIMED_OUT,
                job_id=job_id,
                polls=self.max_poll_attempts,
            )
        )

    async def _pause(self, cancel_token: CancellationToken) -> None:
        """Wait one poll interval, returning early on cancellation."""
        sleeper = asyncio.ensure_future(self.sleep(self.poll_interval_seconds))
        canceller = asyncio.ensure_future(cancel_token.wait())
        try:
            await asyncio.wait(
                {sleeper, canceller}, return_when=asyncio.FIRST_COMPLETED
            )
        finally:
            sleeper.cancel()
            canceller.cancel()

    def _finish(self, outcome: GenerationOutcome) -> GenerationOutcome:
        self.outcome = outcome
        self._transition(outcome.state)
        if outcome.state is GenerationState.COMPLETED:
            _logger.info(
                "Generation completed: job_id=%s polls=%s", outcome.job_id, outcome.polls
            )
        else:
            _logger.warning(
                "Generation ended %s: job_id=%s polls=%s error=%s",
                outcome.state,
                outcome.job_id,
                outcome.polls,
                outcome.error,
            )
        return outcome

    def _transition(self, state: GenerationState) -> None:
        self.state = state
        _logger.info("Generation state -> %s", state)
        if self.on_state_change is not None:
            self.on_state_change(state)
