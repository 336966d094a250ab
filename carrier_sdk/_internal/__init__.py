"""Internal modules for Carrier SDK.

These modules back CarrierClient and are not a stable API; import public
models from carrier_sdk.models instead.

Modules:
    auth - Auth strategy models and application
    credentials - Token storage
    envelope - Request options and response envelope
    environment - Hostname -> environment detection
    hooks - Lifecycle hook registry
    http - Per-call async HTTP client factory
    profiles - Environment -> base URL resolution
    redaction - Credential redaction for debug output
"""
