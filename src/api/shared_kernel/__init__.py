"""Shared Kernel module.

Components every bounded context that consumes the billing outbox agrees
to depend on: outbox event value objects, consumer ports and probes.
"""
