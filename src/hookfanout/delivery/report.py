"""
Module: report.py
Description: Assembly of the per-round buckets into a TriggerReport.
"""

from typing import Dict, List, Sequence

from hookfanout.models.report import DeliveryOutcome, TriggerReport


class ReportAggregator:
    """
    Collects round buckets for a single trigger.

    Buckets are stored as given; the aggregator neither filters nor
    summarizes.
    """

    def __init__(self, retry_count: int):
        """
        Args:
            retry_count: Total passes; retry buckets 1..retry_count-1 always exist
        """
        self._initial: List[DeliveryOutcome] = []
        self._retry_rounds: Dict[int, List[DeliveryOutcome]] = {
            round_number: [] for round_number in range(1, retry_count)
        }

    def record_initial(self, succeeded: Sequence[DeliveryOutcome]) -> None:
        self._initial = list(succeeded)

    def record_retry(self, round_number: int, succeeded: Sequence[DeliveryOutcome]) -> None:
        """Store the successes recovered at retry round ``round_number``."""
        if round_number not in self._retry_rounds:
            raise ValueError(f"round {round_number} is not a retry round of this trigger")
        self._retry_rounds[round_number] = list(succeeded)

    def build(self, final_failed: Sequence[DeliveryOutcome]) -> TriggerReport:
        return TriggerReport(
            initial=self._initial,
            retry_rounds=self._retry_rounds,
            final_failed=list(final_failed),
        )
