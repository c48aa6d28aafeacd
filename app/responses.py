"""Response classes shared by the routers."""

import json
from typing import Any

from fastapi.responses import JSONResponse


class EscapedJSONResponse(JSONResponse):
    """JSON response with every non-ASCII character escaped.

    Keeps names holding lone surrogates serializable, since those cannot be
    encoded as UTF-8.
    """

    def render(self, content: Any) -> bytes:
        return json.dumps(
            content,
            ensure_ascii=True,
            allow_nan=False,
            indent=None,
            separators=(",", ":"),
        ).encode("ascii")
