"""
Service layer for AWS API calls.

This package wraps the signed AWS JSON API transport and the ECS actions
built on top of it, keeping request plumbing out of the handlers.
"""
