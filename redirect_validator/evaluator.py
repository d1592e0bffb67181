"""
Compare the resolved URL with the expected destination
"""
from dataclasses import dataclass
from typing import List, Optional

from redirect_validator.domain import extract_domain

SUCCESS = "Success"
FAILURE = "Failure"


@dataclass(frozen=True)
class ValidationTask:
    """One line of the URL list"""
    redirection_url: str
    destination_url: str


@dataclass(frozen=True)
class Verdict:
    request_id: str
    redirection_url: str
    destination_url: str
    final_destination_url: str
    final_status: str

    @property
    def succeeded(self) -> bool:
        return self.final_status == SUCCESS

    def as_row(self) -> List[str]:
        """Values in result file column order"""
        return [
            self.request_id,
            self.redirection_url,
            self.destination_url,
            self.final_destination_url,
            self.final_status,
        ]


def evaluate(task: ValidationTask, final_url: str, request_id: Optional[str] = "") -> Verdict:
    """
    Build the verdict for a task

    Success only when both domains are exactly equal and the final domain is
    not empty. The comparison is case sensitive, so "Example.com" and
    "example.com" do not match.

    Args:
        task: The task that was navigated
        final_url: Output of resolve_final
        request_id: Primary request id of the navigation, if any

    Returns:
        Verdict for the result file
    """
    final_domain = extract_domain(final_url)
    destination_domain = extract_domain(task.destination_url)

    # An unresolved final URL never matches, even an expected URL without a domain
    final_status = SUCCESS if final_domain and final_domain == destination_domain else FAILURE

    return Verdict(
        request_id=request_id or "",
        redirection_url=task.redirection_url,
        destination_url=task.destination_url,
        final_destination_url=final_url or "",
        final_status=final_status,
    )
