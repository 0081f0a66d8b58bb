"""
Identity bounded context - Application layer.

This service stores no users. It only turns a bearer token issued by the
external identity provider into an OwnerId.
"""
