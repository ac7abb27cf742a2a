"""Simulations of classic operating-system algorithms: scheduling, paging,
memory and file allocation, deadlock avoidance and synchronization."""

__version__ = "1.0.0"