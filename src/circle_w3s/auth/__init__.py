"""Credential handling for circle_w3s.

- :class:`Credential` -- the primary API key, sent as ``Authorization: Bearer``.
- :class:`UserToken` -- a session token for user-scoped calls, sent as
  ``X-User-Token``.
"""

from circle_w3s.auth.credential import Credential, UserToken

__all__ = ["Credential", "UserToken"]
