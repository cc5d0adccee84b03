"""Performance profiler for mapping runs."""

import time
import psutil
import logging
from typing import Dict, Any, Optional, List
from dataclasses import dataclass
from contextlib import contextmanager

_BYTES_PER_MB = 1024 * 1024


@dataclass
class PerformanceMetrics:
    """Timing, memory and throughput of one mapping run."""
    operation_name: str
    start_time: float
    end_time: float
    duration: float
    input_size: int
    output_size: int
    memory_peak_mb: float
    memory_start_mb: float
    memory_end_mb: float
    cpu_percent: float
    records_processed: int
    records_per_second: float


def _rss_mb() -> float:
    return psutil.Process().memory_info().rss / _BYTES_PER_MB


class PerformanceProfiler:
    """
    Records wall time, process memory (via psutil), CPU usage and record
    throughput for mapping runs.

    One session is open at a time. ``RecordMapper.run`` opens it with
    ``profile_operation`` and closes it with ``stop_profiling`` once the
    output size is known; the context manager closes a session that a
    failing run left open.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the performance profiler.

        Args:
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)
        self.metrics_history: List[PerformanceMetrics] = []
        self.current_operation: Optional[str] = None
        self.start_time: Optional[float] = None
        self.start_memory: Optional[float] = None
        self.input_size: int = 0
        self.peak_memory: float = 0
        self.cpu_samples: List[float] = []

    @contextmanager
    def profile_operation(self, operation_name: str, input_size: int = 0):
        """
        Profile the enclosed block as one session.

        Args:
            operation_name: Name recorded in the metrics
            input_size: Serialized input size in bytes
        """
        self.start_profiling(operation_name, input_size)
        try:
            yield self
        finally:
            if self.current_operation:
                self.stop_profiling()

    def start_profiling(self, operation_name: str, input_size: int = 0):
        """Open a profiling session."""
        self.current_operation = operation_name
        self.start_time = time.time()
        self.input_size = input_size
        self.start_memory = _rss_mb()
        self.peak_memory = self.start_memory
        self.cpu_samples = []

        self.logger.debug(f"Started profiling: {operation_name}")

    def sample_performance(self):
        """Record current memory and CPU usage of the open session."""
        if not self.current_operation:
            return

        try:
            self.peak_memory = max(self.peak_memory, _rss_mb())
            self.cpu_samples.append(psutil.Process().cpu_percent())
        except psutil.Error as e:
            self.logger.warning(f"Performance sampling failed: {e}")

    def stop_profiling(self, output_size: int = 0, records_processed: int = 0) -> PerformanceMetrics:
        """
        Close the open session.

        Args:
            output_size: Serialized output size in bytes
            records_processed: Number of input records mapped

        Returns:
            PerformanceMetrics for the session

        Raises:
            ValueError: If no session is open
        """
        if not self.current_operation or not self.start_time:
            raise ValueError("No active profiling session")

        end_time = time.time()
        duration = end_time - self.start_time

        try:
            end_memory = _rss_mb()
        except psutil.Error:
            end_memory = self.start_memory
        self.peak_memory = max(self.peak_memory, end_memory)

        metrics = PerformanceMetrics(
            operation_name=self.current_operation,
            start_time=self.start_time,
            end_time=end_time,
            duration=duration,
            input_size=self.input_size,
            output_size=output_size,
            memory_peak_mb=self.peak_memory,
            memory_start_mb=self.start_memory,
            memory_end_mb=end_memory,
            cpu_percent=sum(self.cpu_samples) / len(self.cpu_samples) if self.cpu_samples else 0,
            records_processed=records_processed,
            records_per_second=records_processed / duration if duration > 0 else 0
        )
        self.metrics_history.append(metrics)

        self.logger.info(
            f"{metrics.operation_name}: {records_processed} records in {duration:.3f}s "
            f"({metrics.records_per_second:.1f}/s), peak {metrics.memory_peak_mb:.1f} MB, "
            f"CPU {metrics.cpu_percent:.1f}%"
        )

        self.current_operation = None
        self.start_time = None
        self.start_memory = None

        return metrics

    def get_performance_summary(self) -> Dict[str, Any]:
        """
        Aggregate every closed session.

        Returns:
            Dictionary with totals and one entry per session
        """
        if not self.metrics_history:
            return {"total_operations": 0}

        total_duration = sum(m.duration for m in self.metrics_history)
        total_records = sum(m.records_processed for m in self.metrics_history)

        return {
            "total_operations": len(self.metrics_history),
            "total_duration": total_duration,
            "total_records": total_records,
            "records_per_second": total_records / total_duration if total_duration > 0 else 0,
            "total_input_bytes": sum(m.input_size for m in self.metrics_history),
            "total_output_bytes": sum(m.output_size for m in self.metrics_history),
            "peak_memory_mb": max(m.memory_peak_mb for m in self.metrics_history),
            "operations": [
                {
                    "name": m.operation_name,
                    "duration": m.duration,
                    "records": m.records_processed,
                    "memory_peak": m.memory_peak_mb
                }
                for m in self.metrics_history
            ]
        }
