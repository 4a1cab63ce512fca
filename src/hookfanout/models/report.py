"""
Module: report.py
Description: Delivery outcome and trigger report models.

Outcomes are produced once per attempt and never mutated. A RoundResult
partitions the outcomes of one batch or round; the TriggerReport places
every hook of a trigger in exactly one bucket.

Dependencies: pydantic, typing
"""

from typing import Dict, List, Optional, Set

from pydantic import BaseModel, ConfigDict, Field

from hookfanout.models.endpoint import Endpoint


class DeliveryOutcome(BaseModel):
    """
    Classification of one delivery attempt to one hook.

    Attributes:
        endpoint_id: Identifier of the hook that was attempted
        name: Hook display name
        url: Hook target URL
        succeeded: True only when the hook answered 200
        status_code: HTTP status received, if any response arrived
        error: Short failure reason (timeout, network error, ...)
    """

    model_config = ConfigDict(frozen=True)

    endpoint_id: str
    name: str
    url: str
    succeeded: bool
    status_code: Optional[int] = None
    error: Optional[str] = None

    @classmethod
    def for_endpoint(
        cls,
        endpoint: Endpoint,
        succeeded: bool,
        status_code: Optional[int] = None,
        error: Optional[str] = None
    ) -> "DeliveryOutcome":
        """Build an outcome carrying the endpoint's identity."""
        return cls(
            endpoint_id=endpoint.endpoint_id,
            name=endpoint.name,
            url=endpoint.url,
            succeeded=succeeded,
            status_code=status_code,
            error=error,
        )

    def endpoint(self) -> Endpoint:
        """Rebuild the endpoint so a failed outcome can be re-dispatched."""
        return Endpoint(endpoint_id=self.endpoint_id, name=self.name, url=self.url)


class RoundResult(BaseModel):
    """
    Stable partition of the outcomes of one batch or round.

    Attributes:
        succeeded: Outcomes with succeeded=True, in input order
        failed: Outcomes with succeeded=False, in input order
    """

    model_config = ConfigDict(frozen=True)

    succeeded: List[DeliveryOutcome] = Field(default_factory=list)
    failed: List[DeliveryOutcome] = Field(default_factory=list)

    @property
    def attempted(self) -> int:
        return len(self.succeeded) + len(self.failed)

    def merge(self, other: "RoundResult") -> "RoundResult":
        """Concatenate two results, keeping the order of each bucket."""
        return RoundResult(
            succeeded=[*self.succeeded, *other.succeeded],
            failed=[*self.failed, *other.failed],
        )


class TriggerReport(BaseModel):
    """
    Final report returned to the trigger caller.

    Every hook of the dispatch set is in exactly one bucket: the initial
    successes, the successes recovered at some retry round, or
    final_failed.

    Attributes:
        initial: Successes from round 0
        retry_rounds: Successes recovered at round k, keyed 1..N-1
        final_failed: Hooks that failed every round
    """

    model_config = ConfigDict(frozen=True)

    initial: List[DeliveryOutcome] = Field(default_factory=list)
    retry_rounds: Dict[int, List[DeliveryOutcome]] = Field(default_factory=dict)
    final_failed: List[DeliveryOutcome] = Field(default_factory=list)

    def retry_success(self, round_number: int) -> List[DeliveryOutcome]:
        """Successes recovered at the given retry round."""
        return self.retry_rounds.get(round_number, [])

    def succeeded_ids(self) -> Set[str]:
        """Identifiers of every hook that eventually succeeded."""
        ids = {outcome.endpoint_id for outcome in self.initial}
        for outcomes in self.retry_rounds.values():
            ids.update(outcome.endpoint_id for outcome in outcomes)
        return ids

    def failed_ids(self) -> Set[str]:
        return {outcome.endpoint_id for outcome in self.final_failed}
