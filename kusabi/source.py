from dataclasses import dataclass
import sys
from typing import Literal


Scheme = Literal["file", "data", "stdin"]


@dataclass
class DocumentSource:
    scheme: Scheme
    path: str = ""

    content: str | None = None

    @classmethod
    def parse(cls, location: str) -> "DocumentSource":
        if location == "-":
            return cls(scheme="stdin")

        if location.startswith("data:"):
            if "," not in location:
                raise ValueError("Invalid data URL: {}".format(location))
            content = location.split(",", 1)[1]
            return cls(scheme="data", content=content)

        tokens = location.split("://", 1)
        if len(tokens) == 1:
            # no scheme, treat as a filesystem path
            if not location:
                raise ValueError("Empty document location")
            return cls(scheme="file", path=location)

        scheme, path = tokens
        if scheme != "file":
            raise ValueError("Unsupported scheme: {}".format(scheme))

        # file://localhost/path and file:///path both name /path
        if path.startswith("localhost/"):
            path = path[len("localhost"):]
        if not path.startswith("/"):
            path = "/" + path
        return cls(scheme="file", path=path)

    def read(self) -> str:
        if self.scheme == "data":
            return self.content or ""
        elif self.scheme == "stdin":
            return sys.stdin.read()
        with open(self.path, "r", encoding="utf-8") as f:
            return f.read()
