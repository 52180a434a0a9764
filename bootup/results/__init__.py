"""Result containers for the boot-up time audit."""

from bootup.results.audit import AuditResult

__all__ = ["AuditResult"]
