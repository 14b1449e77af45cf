"""Command execution result."""

from dataclasses import dataclass

NO_EXIT_STATUS = -1


@dataclass(frozen=True)
class ExecutionResult:
    """Outcome of one remote command invocation.

    ``success`` reflects whether the session ran to completion, not the
    remote exit code.
    """

    result_code: int
    success: bool
    message: str | None = None
    provider: str = "sshnode"

    def __str__(self) -> str:
        status = "success" if self.success else "failure"
        text = f"[{self.provider}] result was {status}, resultcode: {self.result_code}"
        if self.message is not None:
            text += f": {self.message}"
        return text
