"""
Monitoring package: Prometheus metrics and health checks.
"""
