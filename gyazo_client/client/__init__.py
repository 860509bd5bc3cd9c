"""HTTP access to the Gyazo API.

Security notes:
- Avoid printing or logging raw image bytes or the access token.
- Treat all server responses as untrusted input; they are validated into
  typed records before reaching the caller.
"""

from .gyazo import GyazoClient  # noqa: F401
from .http import HttpResponse  # noqa: F401
