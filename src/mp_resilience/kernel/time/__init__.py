"""Kernel time – Clock port + implementations."""
from mp_resilience.kernel.time.clock import Clock, ManualClock, SystemClock

__all__ = ["Clock", "ManualClock", "SystemClock"]
