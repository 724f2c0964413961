"""Services for the core app.

Service modules are imported directly (``core.services.notification_service``)
so that importing this package does not build the module-level service
instances before Django apps are ready.
"""
