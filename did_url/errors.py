"""Error types."""

from typing import Optional


class MalformedDIDURLError(ValueError):
    """A DID URL could not be parsed."""

    url: str
    component: Optional[str] = None
    message: Optional[str] = None

    def __init__(
        self,
        url: str,
        component: str = None,
        message: str = None,
    ):
        super().__init__(url, component, message)
        self.url = url
        self.component = component
        self.message = message

    def __str__(self) -> str:
        desc = f"Malformed DID URL: {self.url!r}"
        if self.component:
            desc += f" (in {self.component})"
        if self.message:
            desc += f": {self.message}"
        return desc

    def serialize(self) -> dict:
        return {
            "error": "invalidDidUrl",
            "errorMessage": str(self),
        }
