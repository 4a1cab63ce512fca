"""
Module: test_report.py
Description: Unit tests for trigger report assembly.
"""

import pytest

from hookfanout.delivery.report import ReportAggregator
from hookfanout.models.report import DeliveryOutcome


class TestReportAggregator:
    """Test cases for ReportAggregator."""

    def test_retry_buckets_exist_even_when_empty(self):
        report = ReportAggregator(retry_count=4).build([])

        assert report.retry_rounds == {1: [], 2: [], 3: []}
        assert report.initial == []
        assert report.final_failed == []

    def test_buckets_stored_as_given(self, endpoints):
        ok = [DeliveryOutcome.for_endpoint(e, succeeded=True) for e in endpoints[:2]]
        recovered = [DeliveryOutcome.for_endpoint(endpoints[2], succeeded=True)]
        failed = [DeliveryOutcome.for_endpoint(e, succeeded=False) for e in endpoints[3:]]

        aggregator = ReportAggregator(retry_count=3)
        aggregator.record_initial(ok)
        aggregator.record_retry(2, recovered)
        report = aggregator.build(failed)

        assert report.initial == ok
        assert report.retry_success(1) == []
        assert report.retry_success(2) == recovered
        assert report.final_failed == failed

    @pytest.mark.parametrize("round_number", [0, 3, -1])
    def test_unknown_round_rejected(self, round_number):
        aggregator = ReportAggregator(retry_count=3)
        with pytest.raises(ValueError):
            aggregator.record_retry(round_number, [])
