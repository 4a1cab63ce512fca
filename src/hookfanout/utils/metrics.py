"""
Module: metrics.py
Description: CloudWatch custom metrics publishing.

Publishes per-trigger delivery counts to CloudWatch so hook failure
rates can be monitored and alarmed on.

Key Components:
- MetricsClient: CloudWatch metrics client
- put_metric(): Publish individual metrics
- publish_report(): Publish the bucket counts of a TriggerReport
- Graceful error handling for metrics failures

Dependencies: boto3, typing, logger
Author: Hook Fanout Team
"""

from typing import Optional

import boto3

from hookfanout.models.report import TriggerReport
from hookfanout.utils.logger import get_logger

logger = get_logger(__name__)


class MetricsClient:
    """CloudWatch metrics client."""

    def __init__(self, namespace: str = "HookFanout", region_name: Optional[str] = None):
        """
        Initialize metrics client.

        Args:
            namespace: CloudWatch metrics namespace
            region_name: AWS region for the CloudWatch client
        """
        self.namespace = namespace
        self.cloudwatch = boto3.client('cloudwatch', region_name=region_name)

        logger.info(
            "Metrics client initialized",
            namespace=namespace
        )

    def put_metric(
        self,
        metric_name: str,
        value: float,
        unit: str = 'Count',
        dimensions: Optional[dict] = None
    ) -> None:
        """
        Publish a metric to CloudWatch.

        Args:
            metric_name: Name of the metric
            value: Metric value
            unit: Metric unit (Count, Seconds, etc.)
            dimensions: Optional metric dimensions
        """
        try:
            metric_data = {
                'MetricName': metric_name,
                'Value': value,
                'Unit': unit
            }

            if dimensions:
                metric_data['Dimensions'] = [
                    {'Name': k, 'Value': v}
                    for k, v in dimensions.items()
                ]

            self.cloudwatch.put_metric_data(
                Namespace=self.namespace,
                MetricData=[metric_data]
            )

            logger.debug(
                "Metric published to CloudWatch",
                metric_name=metric_name,
                value=value,
                unit=unit,
                dimensions=dimensions,
                namespace=self.namespace
            )

        except Exception as e:
            # Metrics never affect the trigger result
            logger.warning(
                "Failed to publish metric",
                metric_name=metric_name,
                value=value,
                error=str(e),
                namespace=self.namespace
            )

    def publish_report(self, report: TriggerReport) -> None:
        """
        Publish the bucket sizes of a trigger report.

        Args:
            report: Completed trigger report
        """
        recovered = sum(len(outcomes) for outcomes in report.retry_rounds.values())
        initial = len(report.initial)
        failed = len(report.final_failed)

        self.put_metric("HooksTriggered", float(initial + recovered + failed))
        self.put_metric("HooksDeliveredInitially", float(initial))
        self.put_metric("HooksRecovered", float(recovered))
        self.put_metric("HooksFailed", float(failed))
