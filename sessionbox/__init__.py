"""
sessionbox - Storage-independent sessions

Keeps application code independent of how sessions are stored.

Architecture:
- Each module is self-contained with clear interfaces
- Modules are completely replaceable
- No module knows the internals of another
- All communication through defined interfaces

Modules:
- session: Session lifecycle, variables and error kinds
- backend: Pluggable session backends (native, stub) and cookie transports
- storage: Server-side session stores (memory, Redis)
- config: Environment-based configuration
"""

__version__ = "1.0.0"
