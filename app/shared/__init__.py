"""
Shared module package.

Contains cross-cutting concerns used across the application:
- Error classification and error responses
- Request interception and the telemetry sink port
- Logging configuration
"""
