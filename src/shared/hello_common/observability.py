"""
Centralized observability utilities for the hello world function.

Configured AWS Lambda Powertools instances shared by every function attached to the layer.
"""

from aws_lambda_powertools.logging import Logger
from aws_lambda_powertools.metrics import Metrics
from aws_lambda_powertools.tracing import Tracer

METRICS_NAMESPACE = 'SamHelloWorld'

# JSON output format, service name can be set by environment variable "POWERTOOLS_SERVICE_NAME"
logger: Logger = Logger()

# Disabled by setting POWERTOOLS_TRACE_DISABLED to "true"
tracer: Tracer = Tracer()

# POWERTOOLS_METRICS_NAMESPACE overrides the namespace
metrics = Metrics(namespace=METRICS_NAMESPACE)
