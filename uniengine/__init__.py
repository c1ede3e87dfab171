"""Entity-component-system core with sparse sets, chunk pools, frame timing and a demo world."""

__version__ = "0.1.0"
__all__ = ["sparse_set", "memory_pool", "delta_time", "ecs", "demo"]