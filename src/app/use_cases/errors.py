"""
Use case error codes

Codes shared by the use cases and mapped to HTTP statuses by the
routes. Collaborator codes (WRONG_CREDENTIAL, VERIFIER_UNAVAILABLE,
INVITATION_ERROR, PROVISIONING_ERROR) live next to their ports.
"""

VALIDATION_ERROR = "VALIDATION_ERROR"
PERSISTENCE_ERROR = "PERSISTENCE_ERROR"
LINKING_ERROR = "LINKING_ERROR"
CLIENT_NOT_FOUND = "CLIENT_NOT_FOUND"
CONTACT_NOT_FOUND = "CONTACT_NOT_FOUND"
EMAIL_MISMATCH = "EMAIL_MISMATCH"
