"""macOS workstation setup (Python-first, step-driven).

Core design goals:
- Idempotent steps: check first, install only what is missing
- Fail fast on the first broken step
- Profile edits guarded by marker comments, never duplicated
- External tools (brew, git, code, asdf) behind an injectable system interface
- Centralized logging
"""

__all__ = []
