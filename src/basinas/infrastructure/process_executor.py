"""External process execution with retry/backoff (subprocess + tenacity).

Every external tool invocation of the scaffolder goes through
``ProcessRetryExecutor`` so that retry timing and error propagation stay
uniform across the framework scaffolder, the component installer and npm.
"""

from __future__ import annotations

import logging
import os
import subprocess
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from tenacity import (
    RetryCallState,
    Retrying,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

from basinas.domain.config.retry import RetryConfig
from basinas.domain.models.command import CommandInvocation, CommandOutcome

logger = logging.getLogger(__name__)

Runner = Callable[..., Any]


@dataclass(frozen=True)
class RetryPolicy:
    max_attempts: int = 3
    initial_delay: float = 2.0
    backoff_multiplier: float = 2.0
    max_delay: Optional[float] = None  # no cap by default

    def __post_init__(self):
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        if self.initial_delay < 0:
            raise ValueError("initial_delay must be non-negative")


def retry_policy_from_config(config: RetryConfig) -> RetryPolicy:
    """Build an immutable policy from the validated retry configuration."""
    return RetryPolicy(
        max_attempts=config.max_attempts,
        initial_delay=config.initial_delay,
        backoff_multiplier=config.backoff_multiplier,
        max_delay=config.max_delay,
    )


def _is_transient(exception: BaseException) -> bool:
    """Check if a process failure should be retried."""
    # Spawn failures for a missing or non-executable program repeat deterministically
    if isinstance(exception, (FileNotFoundError, PermissionError)):
        return False
    return isinstance(exception, (subprocess.CalledProcessError, OSError))


class ProcessRetryExecutor:
    """Runs external commands with bounded exponential backoff.

    A non-zero exit status and a failure to spawn the process are both treated
    as failures. Only the error of the final attempt is surfaced; intermediate
    errors are logged and discarded.
    """

    def __init__(
        self,
        policy: Optional[RetryPolicy] = None,
        runner: Optional[Runner] = None,
        sleep: Optional[Callable[[float], None]] = None,
    ):
        """Initialize executor

        Args:
            policy: Default retry policy (3 attempts, 2s initial delay, doubling)
            runner: Callable with the ``subprocess.run`` signature
            sleep: Callable used to wait between attempts
        """
        self.policy = policy or RetryPolicy()
        self._runner = runner or subprocess.run
        self._sleep = sleep or time.sleep

    def execute(
        self, invocation: CommandInvocation, policy: Optional[RetryPolicy] = None
    ) -> CommandOutcome:
        """Run the invocation, retrying transient failures.

        Args:
            invocation: Command to run
            policy: Overrides the executor's default policy for this call

        Returns:
            CommandOutcome; ``last_error`` is set if every attempt failed
        """
        policy = policy or self.policy
        outcome = CommandOutcome(invocation=invocation)

        def _attempt() -> None:
            outcome.attempts += 1
            logger.debug(
                f"Running '{invocation.display()}' (attempt {outcome.attempts}/{policy.max_attempts})"
            )
            self._run_once(invocation)

        try:
            self._retrying(invocation, policy)(_attempt)
        except (subprocess.CalledProcessError, OSError) as e:
            outcome.last_error = e
            logger.error(
                f"'{invocation.display()}' failed after {outcome.attempts} attempt(s): {e}"
            )
        return outcome

    def run(
        self, invocation: CommandInvocation, policy: Optional[RetryPolicy] = None
    ) -> CommandOutcome:
        """Run the invocation and raise the final error if every attempt failed."""
        outcome = self.execute(invocation, policy)
        outcome.raise_for_failure()
        return outcome

    def _run_once(self, invocation: CommandInvocation) -> None:
        env: Optional[Dict[str, str]] = None
        if invocation.env:
            env = {**os.environ, **invocation.env}
        self._runner(
            invocation.argv,
            cwd=str(invocation.cwd) if invocation.cwd else None,
            env=env,
            check=True,
        )

    def _retrying(self, invocation: CommandInvocation, policy: RetryPolicy) -> Retrying:
        # wait = initial_delay * (backoff_multiplier ^ (attempt_number - 1))
        wait_kwargs: Dict[str, float] = {
            "multiplier": policy.initial_delay,
            "exp_base": policy.backoff_multiplier,
        }
        if policy.max_delay is not None:
            wait_kwargs["max"] = policy.max_delay

        def _before_sleep(retry_state: RetryCallState) -> None:
            if retry_state.outcome is None or retry_state.next_action is None:
                return
            attempt = retry_state.attempt_number
            logger.warning(
                f"'{invocation.display()}' failed: {str(retry_state.outcome.exception()).rstrip('.')}. "
                f"Retrying in {retry_state.next_action.sleep:g}s... "
                f"(attempt {attempt + 1}/{policy.max_attempts})"
            )

        return Retrying(
            stop=stop_after_attempt(policy.max_attempts),
            wait=wait_exponential(**wait_kwargs),
            retry=retry_if_exception(_is_transient),
            reraise=True,
            before_sleep=_before_sleep,
            sleep=self._sleep,
        )
