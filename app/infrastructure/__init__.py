"""
Infrastructure layer package.

Contains concrete implementations (adapters) of the ports defined
elsewhere in the application: here, the telemetry sinks.
"""
