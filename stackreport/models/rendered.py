"""Comment body rendered from a command report."""

from pydantic import BaseModel


class RenderedComment(BaseModel):
    """Comment body plus the identity prefix it starts with."""

    identity_prefix: str
    body: str
    truncated: bool = False
